"""Services package for site resources.

This package contains:
- config_manager.py: Site configuration loading/saving
- fragments.py: Shared HTML fragment loading
"""

from mesbah_storefront.services.config_manager import get_site_config
from mesbah_storefront.services.fragments import load_fragment

__all__ = ["get_site_config", "load_fragment"]
