"""Test data factories for generating valid schema objects."""

from typing import Any

from mesbah_storefront.core.range_sync import RangeSyncController, TrackBounds
from mesbah_storefront.schemas import Product, SiteConfig, SliderConfig


class Box:
    """Minimal stand-in for a UI control: a settable ``value``."""

    def __init__(self, value: Any = None) -> None:
        self.value = value

    def __repr__(self) -> str:
        return f"Box({self.value!r})"


def create_product(
    name: str = "Test Lamp", price: int = 500, **kwargs: Any
) -> Product:
    """Create a valid Product."""
    defaults = {"images": ["a.jpg", "b.jpg"]}
    data = {**defaults, **kwargs}
    return Product(name=name, price=price, **data)


def create_site_config(**kwargs: Any) -> SiteConfig:
    """Create a valid SiteConfig with a small catalogue."""
    defaults = {
        "budget": SliderConfig(),
        "products": [
            create_product("Cheap", 100),
            create_product("Mid", 500),
            create_product("Dear", 900),
        ],
    }
    data = {**defaults, **kwargs}
    return SiteConfig(**data)


def create_controller(
    low: int = 200,
    high: int = 800,
    minimum: int = 0,
    maximum: int = 1000,
    gap: int = 100,
) -> RangeSyncController:
    """Create an attached controller over plain boxes."""
    controller = RangeSyncController(
        TrackBounds(minimum=minimum, maximum=maximum),
        low_slider=Box(low),
        high_slider=Box(high),
        low_input=Box(str(low)),
        high_input=Box(str(high)),
        fill=Box(),
        gap=gap,
    )
    controller.attach()
    return controller
