"""Client-side validation for the image upload preview.

Nothing is sent anywhere: a file either passes the type/size checks and
becomes an ``ImagePreview``, or it is rejected with a user-facing message.
"""

import mimetypes
import re

from pydantic import BaseModel, ConfigDict

from mesbah_storefront.core.constants import UPLOAD_SIZE_ERROR, UPLOAD_TYPE_ERROR
from mesbah_storefront.schemas import UploadPolicy


class InvalidImageError(ValueError):
    """Raised when a selected file cannot be previewed."""


class ImagePreview(BaseModel):
    """A file that passed validation and is ready for upload."""

    name: str
    size: int
    content_type: str

    model_config = ConfigDict(frozen=True)

    @property
    def status_text(self) -> str:
        return f"Selected: {self.name}"


def guess_content_type(name: str) -> str:
    content_type, _ = mimetypes.guess_type(name)
    return content_type or ""


def validate_image(
    name: str,
    size: int,
    policy: UploadPolicy,
    content_type: str | None = None,
) -> ImagePreview:
    """Check a selected file against the upload policy.

    Args:
        name: File name as reported by the browser.
        size: File size in bytes.
        policy: Allowed types and size limit.
        content_type: MIME type if known; guessed from ``name`` otherwise.

    Returns:
        The preview for an accepted file.

    Raises:
        InvalidImageError: If the type is not allowed or the file is too big.
    """
    content_type = content_type or guess_content_type(name)
    if not re.match(policy.allowed_types, content_type):
        raise InvalidImageError(UPLOAD_TYPE_ERROR)
    if size > policy.max_bytes:
        raise InvalidImageError(UPLOAD_SIZE_ERROR)
    return ImagePreview(name=name, size=size, content_type=content_type)
