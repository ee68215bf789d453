"""Dual-handle range slider synchronization.

Two sliders, two free-text inputs and one fill bar are five views of the
same pair of numbers ``(low, high)`` on a fixed track ``[minimum, maximum]``.
The controller owns that pair and re-renders every view from it after each
user event.

Two correction policies converge on the stored pair:

    DRAG_POLICY  (slider events):  keeps ``high - low >= gap``
        low  := min(v, high - gap)
        high := max(v, low + gap)

    ENTRY_POLICY (text events):    keeps ``low <= high`` only
        low  := high  if v > high
        high := low   if v < low

Free text may therefore produce a zero-width range; dragging never does.

The fill bar is a pure projection of the stored pair:

    left  = (low - minimum) / (maximum - minimum) * 100
    width = (high - low)    / (maximum - minimum) * 100
"""

import logging
from typing import Any, Protocol

from pydantic import BaseModel, ConfigDict, Field, model_validator

from mesbah_storefront.schemas.defaults import DEFAULT_RANGE_GAP

logger = logging.getLogger(__name__)


class ValueHandle(Protocol):
    """Anything with a settable ``value``, e.g. ``solara.Reactive``."""

    value: Any


class TrackBounds(BaseModel):
    """Fixed numeric domain both handles move over."""

    minimum: int
    maximum: int

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _check_order(self) -> "TrackBounds":
        if self.minimum >= self.maximum:
            raise ValueError(
                f"Track minimum ({self.minimum}) must be below maximum ({self.maximum})"
            )
        return self

    @property
    def span(self) -> int:
        return self.maximum - self.minimum

    def clamp(self, value: int) -> int:
        """Pin a value onto the track, as a native range control does."""
        return max(self.minimum, min(value, self.maximum))


class SelectedRange(BaseModel):
    """The authoritative ``(low, high)`` pair."""

    low: int
    high: int

    model_config = ConfigDict(frozen=True)


class FillBar(BaseModel):
    """Position and width of the fill element, in percent of the track."""

    left_percent: float = Field(..., description="Offset from the track start")
    width_percent: float = Field(..., description="Width of the selected span")

    model_config = ConfigDict(frozen=True)

    @property
    def css(self) -> str:
        return f"left: {self.left_percent}%; width: {self.width_percent}%;"


def fill_bar(bounds: TrackBounds, selected: SelectedRange) -> FillBar:
    """Project a selected range onto the track as percentages."""
    span = bounds.span
    return FillBar(
        left_percent=(selected.low - bounds.minimum) / span * 100,
        width_percent=(selected.high - selected.low) / span * 100,
    )


def parse_int(raw: Any) -> int | None:
    """Parse a control value as a base-10 integer.

    Returns:
        The integer, or None when the text is blank or not numeric.
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if raw.is_integer() else None
    try:
        return int(str(raw).strip(), 10)
    except ValueError:
        return None


class RangePolicy(Protocol):
    """Protocol for correcting one end of the range against the other."""

    def apply_low(self, selected: SelectedRange, value: int) -> SelectedRange:
        """Return the range with ``low`` moved to (a corrected) ``value``."""
        ...

    def apply_high(self, selected: SelectedRange, value: int) -> SelectedRange:
        """Return the range with ``high`` moved to (a corrected) ``value``."""
        ...


class GapPolicy:
    """Slider policy: the handles never come closer than ``gap``."""

    def __init__(self, gap: int = DEFAULT_RANGE_GAP) -> None:
        self.gap = gap

    def apply_low(self, selected: SelectedRange, value: int) -> SelectedRange:
        low = min(value, selected.high - self.gap)
        return selected.model_copy(update={"low": low})

    def apply_high(self, selected: SelectedRange, value: int) -> SelectedRange:
        high = max(value, selected.low + self.gap)
        return selected.model_copy(update={"high": high})


class OrderPolicy:
    """Text-entry policy: only ``low <= high`` is kept, zero width allowed."""

    def apply_low(self, selected: SelectedRange, value: int) -> SelectedRange:
        return selected.model_copy(update={"low": min(value, selected.high)})

    def apply_high(self, selected: SelectedRange, value: int) -> SelectedRange:
        return selected.model_copy(update={"high": max(value, selected.low)})


DRAG_POLICY = GapPolicy()
ENTRY_POLICY = OrderPolicy()


class RangeSyncController:
    """Keeps two sliders, two inputs and a fill bar showing one range.

    Slider handles receive ints, input handles receive strings and the
    fill handle receives a ``FillBar``.

    Attributes:
        bounds: The fixed track.
        selected: The current, already corrected range.
    """

    def __init__(
        self,
        bounds: TrackBounds,
        low_slider: ValueHandle,
        high_slider: ValueHandle,
        low_input: ValueHandle,
        high_input: ValueHandle,
        fill: ValueHandle,
        gap: int = DEFAULT_RANGE_GAP,
    ) -> None:
        """Initialize from the values the two sliders currently hold.

        Args:
            bounds: Track bounds shared by both sliders.
            low_slider: Handle of the low slider.
            high_slider: Handle of the high slider.
            low_input: Handle of the low text input.
            high_input: Handle of the high text input.
            fill: Handle receiving the projected ``FillBar``.
            gap: Minimum separation enforced on drag.
        """
        self.bounds = bounds
        self.low_slider = low_slider
        self.high_slider = high_slider
        self.low_input = low_input
        self.high_input = high_input
        self.fill = fill
        self.gap = gap
        self.drag_policy: RangePolicy = (
            DRAG_POLICY if gap == DEFAULT_RANGE_GAP else GapPolicy(gap)
        )
        self.entry_policy: RangePolicy = ENTRY_POLICY

        low = parse_int(low_slider.value)
        high = parse_int(high_slider.value)
        self.selected = SelectedRange(
            low=bounds.minimum if low is None else low,
            high=bounds.maximum if high is None else high,
        )

    def attach(self) -> FillBar:
        """Establish the visual baseline from the two text inputs.

        Unparseable inputs fall back to the slider-derived value. The result
        is clamped to the track and ordered the way text entry is.
        """
        low = parse_int(self.low_input.value)
        high = parse_int(self.high_input.value)
        low = self.bounds.clamp(self.selected.low if low is None else low)
        high = self.bounds.clamp(self.selected.high if high is None else high)
        self.selected = self.entry_policy.apply_low(
            SelectedRange(low=low, high=high), low
        )
        self.low_slider.value = self.selected.low
        self.high_slider.value = self.selected.high
        self.low_input.value = str(self.selected.low)
        self.high_input.value = str(self.selected.high)
        return self._render_fill()

    # --- Slider events (gap enforced) ---

    def on_low_slider(self, raw: Any) -> SelectedRange:
        value = parse_int(raw)
        if value is None:
            logger.debug(f"Ignoring non-numeric low slider value {raw!r}")
            self.low_slider.value = self.selected.low
            return self.selected

        self.selected = self.drag_policy.apply_low(self.selected, value)
        self.low_slider.value = self.selected.low
        self.low_input.value = str(self.selected.low)
        self._render_fill()
        return self.selected

    def on_high_slider(self, raw: Any) -> SelectedRange:
        value = parse_int(raw)
        if value is None:
            logger.debug(f"Ignoring non-numeric high slider value {raw!r}")
            self.high_slider.value = self.selected.high
            return self.selected

        self.selected = self.drag_policy.apply_high(self.selected, value)
        self.high_slider.value = self.selected.high
        self.high_input.value = str(self.selected.high)
        self._render_fill()
        return self.selected

    # --- Text events (ordering only) ---

    def on_low_input(self, raw: Any) -> SelectedRange:
        value = parse_int(raw)
        if value is None:
            # Keep the raw text so the user can finish typing; the range stays put.
            logger.debug(f"Rejected low input {raw!r}, keeping {self.selected.low}")
            self._render_fill()
            return self.selected

        entered = self.bounds.clamp(value)
        self.selected = self.entry_policy.apply_low(self.selected, entered)
        self._render_fill()
        self.low_slider.value = self.selected.low
        if self.selected.low != value:
            self.low_input.value = str(self.selected.low)
        return self.selected

    def on_high_input(self, raw: Any) -> SelectedRange:
        value = parse_int(raw)
        if value is None:
            logger.debug(f"Rejected high input {raw!r}, keeping {self.selected.high}")
            self._render_fill()
            return self.selected

        entered = self.bounds.clamp(value)
        self.selected = self.entry_policy.apply_high(self.selected, entered)
        self._render_fill()
        self.high_slider.value = self.selected.high
        if self.selected.high != value:
            self.high_input.value = str(self.selected.high)
        return self.selected

    def _render_fill(self) -> FillBar:
        bar = fill_bar(self.bounds, self.selected)
        self.fill.value = bar
        return bar
