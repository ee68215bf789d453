"""Root entry point for the Solara application.

Run with:
    uv run solara run app.py
"""

import sys
from pathlib import Path

# Add src to path to ensure imports work if run directly
src_path = Path(__file__).parent / "src"
if str(src_path) not in sys.path:
    sys.path.append(str(src_path))

from mesbah_storefront.vis.page import Layout, routes  # noqa: E402

# Expose Layout and routes for Solara
__all__ = ["Layout", "routes"]
