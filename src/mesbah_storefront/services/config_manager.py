"""Site Configuration Module.

Handles loading and saving of the site configuration.
Enforces the strictly typed SiteConfig schema.
"""

import json
import logging
from pathlib import Path

from ..schemas import SiteConfig

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.cwd() / "config"
SITE_CONFIG_FILE = "site.json"


def load_site_config(filename: str = SITE_CONFIG_FILE) -> SiteConfig:
    """Load and validate the site configuration from a JSON file.

    Args:
        filename: Name of the file (e.g. 'site.json').

    Returns:
        Validated SiteConfig object.

    Raises:
        FileNotFoundError: If file doesn't exist.
        ValidationError: If JSON doesn't match schema.
    """
    file_path = CONFIG_DIR / filename
    if not file_path.exists():
        raise FileNotFoundError(f"Site config not found: {file_path}")

    with open(file_path, "r", encoding="utf-8") as f:
        data = json.load(f)

    logger.info(f"Loaded site config from {file_path}")
    return SiteConfig(**data)


def get_site_config(filename: str = SITE_CONFIG_FILE) -> SiteConfig:
    """Return the configured site, or the defaults when no file is present."""
    try:
        return load_site_config(filename)
    except FileNotFoundError:
        logger.info("No site config found, using defaults")
        return SiteConfig()


def save_site_config(config: SiteConfig, filename: str = SITE_CONFIG_FILE) -> None:
    """Save a site configuration to a JSON file.

    Args:
        config: The SiteConfig object to save.
        filename: Target filename.
    """
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    file_path = CONFIG_DIR / filename

    with open(file_path, "w", encoding="utf-8") as f:
        f.write(config.model_dump_json(indent=2))
    logger.info(f"Saved site config to {file_path}")
