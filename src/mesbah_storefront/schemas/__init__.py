from .config import (
    FooterLink,
    Product,
    SiteConfig,
    SliderConfig,
    UploadPolicy,
)

__all__ = [
    "FooterLink",
    "Product",
    "SiteConfig",
    "SliderConfig",
    "UploadPolicy",
]
