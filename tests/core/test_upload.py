"""Tests for image upload validation."""

import pytest

from mesbah_storefront.core.upload import (
    ImagePreview,
    InvalidImageError,
    validate_image,
)
from mesbah_storefront.schemas import UploadPolicy

MB = 1024 * 1024


@pytest.mark.parametrize("name", ["photo.png", "photo.jpg", "photo.jpeg", "PHOTO.PNG"])
def test_accepts_png_and_jpeg(name, upload_policy):
    preview = validate_image(name, 1024, upload_policy)
    assert isinstance(preview, ImagePreview)
    assert preview.status_text == f"Selected: {name}"


def test_rejects_other_types(upload_policy):
    with pytest.raises(InvalidImageError, match="PNG or JPEG"):
        validate_image("anim.gif", 1024, upload_policy)
    with pytest.raises(InvalidImageError, match="PNG or JPEG"):
        validate_image("notes.txt", 10, upload_policy)
    with pytest.raises(InvalidImageError, match="PNG or JPEG"):
        validate_image("no_extension", 10, upload_policy)


def test_explicit_content_type_wins(upload_policy):
    preview = validate_image("upload.bin", 10, upload_policy, content_type="image/png")
    assert preview.content_type == "image/png"

    with pytest.raises(InvalidImageError):
        validate_image("fake.png", 10, upload_policy, content_type="image/webp")


def test_size_limit_is_inclusive(upload_policy):
    assert validate_image("big.png", 5 * MB, upload_policy).size == 5 * MB
    with pytest.raises(InvalidImageError, match="less than 5MB"):
        validate_image("huge.png", 5 * MB + 1, upload_policy)


def test_type_checked_before_size(upload_policy):
    with pytest.raises(InvalidImageError, match="PNG or JPEG"):
        validate_image("huge.gif", 50 * MB, upload_policy)


def test_invalid_image_error_is_value_error():
    assert issubclass(InvalidImageError, ValueError)


def test_custom_policy():
    policy = UploadPolicy(allowed_types=r"^image/png$", max_bytes=100)
    assert validate_image("a.png", 100, policy).name == "a.png"
    with pytest.raises(InvalidImageError):
        validate_image("a.jpg", 10, policy)
