"""Expose all components from submodules for cleaner importing."""

from .budget_slider import BudgetSlider, FillTrack
from .chrome import Breadcrumbs, Footer
from .product import Gallery, ProductCard, ProductGrid, QuantityStepper
from .upload import ImageUpload

__all__ = [
    "BudgetSlider",
    "FillTrack",
    "Breadcrumbs",
    "Footer",
    "Gallery",
    "ProductCard",
    "ProductGrid",
    "QuantityStepper",
    "ImageUpload",
]
