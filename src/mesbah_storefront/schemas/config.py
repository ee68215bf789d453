"""Configuration schemas for the storefront."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from mesbah_storefront.schemas.defaults import (
    DEFAULT_FOOTER_FRAGMENT,
    DEFAULT_QUANTITY_MIN,
    DEFAULT_RANGE_GAP,
    DEFAULT_RANGE_HIGH,
    DEFAULT_RANGE_LOW,
    DEFAULT_SITE_NAME,
    DEFAULT_TRACK_MAX,
    DEFAULT_TRACK_MIN,
    DEFAULT_UPLOAD_MAX_BYTES,
    DEFAULT_UPLOAD_TYPE_PATTERN,
)


class SliderConfig(BaseModel):
    """Configuration for the budget range slider.

    The track bounds and the gap are fixed for the lifetime of the control.
    The initial values are what the two handles show on page load.
    """

    minimum: int = Field(DEFAULT_TRACK_MIN, description="Track start")
    maximum: int = Field(DEFAULT_TRACK_MAX, description="Track end")
    initial_low: int = Field(DEFAULT_RANGE_LOW, description="Low handle on load")
    initial_high: int = Field(DEFAULT_RANGE_HIGH, description="High handle on load")
    gap: int = Field(
        DEFAULT_RANGE_GAP,
        ge=0,
        description="Minimum distance between handles while dragging",
    )

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _check_track(self) -> "SliderConfig":
        if self.minimum >= self.maximum:
            raise ValueError("Slider minimum must be below maximum")
        if not self.minimum <= self.initial_low <= self.initial_high <= self.maximum:
            raise ValueError("Initial handles must be ordered and on the track")
        return self


class UploadPolicy(BaseModel):
    """Client-side limits for the image upload preview."""

    allowed_types: str = Field(
        DEFAULT_UPLOAD_TYPE_PATTERN,
        description="Regex matched against the file's MIME type",
    )
    max_bytes: int = Field(
        DEFAULT_UPLOAD_MAX_BYTES, gt=0, description="Largest accepted file size"
    )

    model_config = ConfigDict(frozen=True)


class Product(BaseModel):
    """A catalogue entry shown on the storefront."""

    name: str
    price: int = Field(..., ge=0, description="Price in whole currency units")
    images: list[str] = Field(default_factory=list)
    description: str = ""

    model_config = ConfigDict(frozen=True)


class FooterLink(BaseModel):
    """A call-to-action rendered under the footer fragment."""

    label: str
    href: str | None = Field(None, description="Target page; order page if empty")

    model_config = ConfigDict(frozen=True)


def _default_products() -> list[Product]:
    return [
        Product(
            name="Brass Pendant Lamp",
            price=180,
            images=["/static/img/pendant-1.jpg", "/static/img/pendant-2.jpg"],
        ),
        Product(
            name="Moroccan Table Lantern",
            price=420,
            images=["/static/img/lantern-1.jpg", "/static/img/lantern-2.jpg"],
        ),
        Product(
            name="Crystal Chandelier",
            price=950,
            images=["/static/img/chandelier-1.jpg"],
        ),
    ]


class SiteConfig(BaseModel):
    """Top-level site configuration."""

    site_name: str = DEFAULT_SITE_NAME
    budget: SliderConfig = Field(default_factory=SliderConfig)
    upload: UploadPolicy = Field(default_factory=UploadPolicy)
    products: list[Product] = Field(default_factory=_default_products)
    footer_fragment: str | None = Field(
        DEFAULT_FOOTER_FRAGMENT, description="Fragment injected into the footer"
    )
    footer_links: list[FooterLink] = Field(
        default_factory=lambda: [FooterLink(label="Order Now")]
    )
    quantity_minimum: int = Field(DEFAULT_QUANTITY_MIN, ge=0)

    model_config = ConfigDict(frozen=True)
