"""Budget filter state - the range slider's reactive surfaces.

The four controls and the fill bar are Solara reactives handed to a
RangeSyncController, which is the only thing that writes to them after
construction.
"""

import solara

from mesbah_storefront.core.catalog import filter_by_budget
from mesbah_storefront.core.range_sync import (
    FillBar,
    RangeSyncController,
    SelectedRange,
    TrackBounds,
)
from mesbah_storefront.schemas import Product, SliderConfig


class BudgetFilter:
    """Reactive state for one budget range slider."""

    def __init__(self, config: SliderConfig | None = None):
        config = config or SliderConfig()
        self.bounds = TrackBounds(minimum=config.minimum, maximum=config.maximum)

        # --- Controls ---
        self.low_slider = solara.reactive(config.initial_low)
        self.high_slider = solara.reactive(config.initial_high)
        self.low_input = solara.reactive(str(config.initial_low))
        self.high_input = solara.reactive(str(config.initial_high))

        # --- Derived ---
        self.fill: solara.Reactive[FillBar | None] = solara.reactive(None)

        self.controller = RangeSyncController(
            self.bounds,
            low_slider=self.low_slider,
            high_slider=self.high_slider,
            low_input=self.low_input,
            high_input=self.high_input,
            fill=self.fill,
            gap=config.gap,
        )
        self.controller.attach()
        self.selected: solara.Reactive[SelectedRange] = solara.reactive(
            self.controller.selected
        )

    def _sync(self) -> None:
        self.selected.value = self.controller.selected

    def on_low_slider(self, value) -> None:
        self.controller.on_low_slider(value)
        self._sync()

    def on_high_slider(self, value) -> None:
        self.controller.on_high_slider(value)
        self._sync()

    def on_low_input(self, text) -> None:
        # The field shows what was typed; the controller may overwrite it.
        self.low_input.value = text
        self.controller.on_low_input(text)
        self._sync()

    def on_high_input(self, text) -> None:
        self.high_input.value = text
        self.controller.on_high_input(text)
        self._sync()

    def matching(self, products: list[Product]) -> list[Product]:
        """Products priced inside the current range."""
        return filter_by_budget(products, self.selected.value)
