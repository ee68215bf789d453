"""Storefront state - site config, quantities and upload preview."""

import logging

import solara

from mesbah_storefront.core.quantity import decrement, increment
from mesbah_storefront.core.upload import (
    ImagePreview,
    InvalidImageError,
    validate_image,
)
from mesbah_storefront.schemas import SiteConfig
from mesbah_storefront.services.config_manager import get_site_config
from mesbah_storefront.vis.state.budget import BudgetFilter

logger = logging.getLogger(__name__)


class StorefrontState:
    """Reactive state shared by the storefront pages.

    Holds the budget filter, the per-product quantity inputs and the
    current image upload preview.
    """

    def __init__(self, config: SiteConfig | None = None):
        self.config = config or get_site_config()
        self.budget = BudgetFilter(self.config.budget)

        # --- Quantity Steppers (product name -> input text) ---
        self.quantities: solara.Reactive[dict[str, str]] = solara.reactive({})

        # --- Image Upload ---
        self.upload_preview: solara.Reactive[ImagePreview | None] = solara.reactive(
            None
        )
        self.upload_error: solara.Reactive[str | None] = solara.reactive(None)

    def quantity_text(self, product_name: str) -> str:
        default = str(self.config.quantity_minimum)
        return self.quantities.value.get(product_name, default)

    def set_quantity_text(self, product_name: str, text: str) -> None:
        self.quantities.value = {**self.quantities.value, product_name: text}

    def increment_quantity(self, product_name: str) -> int:
        """Apply a "+" click and return the new quantity."""
        quantity = increment(
            self.quantity_text(product_name), self.config.quantity_minimum
        )
        self.set_quantity_text(product_name, str(quantity))
        return quantity

    def decrement_quantity(self, product_name: str) -> int:
        """Apply a "-" click; never goes below the configured minimum."""
        quantity = decrement(
            self.quantity_text(product_name), self.config.quantity_minimum
        )
        self.set_quantity_text(product_name, str(quantity))
        return quantity

    def select_file(
        self, name: str, size: int, content_type: str | None = None
    ) -> ImagePreview | None:
        """Validate a picked or dropped file and update the preview.

        A rejected file leaves the previous preview in place.
        """
        try:
            preview = validate_image(name, size, self.config.upload, content_type)
        except InvalidImageError as e:
            logger.info(f"Rejected upload {name!r}: {e}")
            self.upload_error.value = str(e)
            return None

        self.upload_error.value = None
        self.upload_preview.value = preview
        return preview


# Singleton instance
storefront = StorefrontState()
