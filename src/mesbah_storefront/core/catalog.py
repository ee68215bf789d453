"""Budget filtering of the product catalogue."""

from mesbah_storefront.core.range_sync import SelectedRange
from mesbah_storefront.schemas import Product


def within_budget(product: Product, selected: SelectedRange) -> bool:
    return selected.low <= product.price <= selected.high


def filter_by_budget(
    products: list[Product], selected: SelectedRange
) -> list[Product]:
    """Keep the products priced inside the selected range, bounds included."""
    return [p for p in products if within_budget(p, selected)]
