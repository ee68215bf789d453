"""Default parameter values for the Mesbah storefront.

These constants are used as `Field(default=...)` values in the Pydantic
config schemas.  They live here (in the schemas layer) rather than in
`core/constants.py` so that `schemas` does not depend on `core`.
"""

# =============================================================================
# BUDGET RANGE SLIDER
# =============================================================================
# Prices are whole currency units.  The gap is only enforced while dragging;
# typing into the inputs may produce a zero-width range.
DEFAULT_TRACK_MIN = 0
DEFAULT_TRACK_MAX = 1000
DEFAULT_RANGE_LOW = 200
DEFAULT_RANGE_HIGH = 800
DEFAULT_RANGE_GAP = 100

# =============================================================================
# IMAGE UPLOAD
# =============================================================================
DEFAULT_UPLOAD_TYPE_PATTERN = r"^image/(png|jpeg|jpg)$"
DEFAULT_UPLOAD_MAX_BYTES = 5 * 1024 * 1024  # 5MB

# =============================================================================
# SITE
# =============================================================================
DEFAULT_SITE_NAME = "Mesbah"
DEFAULT_FOOTER_FRAGMENT = "footer.html"
DEFAULT_QUANTITY_MIN = 1
