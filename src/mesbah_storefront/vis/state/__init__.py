"""State management package for the storefront UI.

This package provides modular state management split by concern:
- budget: the range slider's reactive surfaces and its controller
- storefront: site config, quantity steppers and upload preview
"""

from mesbah_storefront.vis.state.budget import BudgetFilter
from mesbah_storefront.vis.state.storefront import StorefrontState, storefront

__all__ = [
    "BudgetFilter",
    "StorefrontState",
    "storefront",
]
