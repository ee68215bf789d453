"""Quantity stepper arithmetic for product pages."""

from mesbah_storefront.schemas.defaults import DEFAULT_QUANTITY_MIN


def step_quantity(
    raw: str | None, delta: int, minimum: int = DEFAULT_QUANTITY_MIN
) -> int:
    """Apply a +/- click to the quantity shown in a stepper input.

    Args:
        raw: Text currently in the quantity input. Blank counts as "1".
        delta: Step to apply (usually +1 or -1).
        minimum: Lowest quantity allowed.

    Returns:
        The new quantity, never below ``minimum``.
    """
    text = (raw or "").strip() or "1"
    try:
        current = int(text, 10)
    except ValueError:
        current = minimum
    return max(minimum, current + delta)


def increment(raw: str | None, minimum: int = DEFAULT_QUANTITY_MIN) -> int:
    return step_quantity(raw, 1, minimum)


def decrement(raw: str | None, minimum: int = DEFAULT_QUANTITY_MIN) -> int:
    return step_quantity(raw, -1, minimum)
