"""Centralized constants for the Mesbah storefront.

This file contains:
- User-facing upload messages
- Page names used for redirects and breadcrumbs
"""

from mesbah_storefront.schemas.defaults import DEFAULT_SITE_NAME

# --- Image Upload ---
UPLOAD_TYPE_ERROR = "Please select a PNG or JPEG image file."
UPLOAD_SIZE_ERROR = "File size must be less than 5MB."


# --- Pages ---
class Pages:
    """Strongly typed page names shared by redirects and breadcrumbs."""

    HOME = "index.html"
    ORDER = "order.html"
    ORDER_SUCCESS = "order-success.html"
    REQUEST_SUCCESS = "request-success.html"


TITLE_SUFFIX = f" - {DEFAULT_SITE_NAME}"
DEFAULT_PAGE_TITLE = "Page"
