"""Shared HTML fragments (footer, etc.) injected into every page."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

FRAGMENT_DIR = Path(__file__).parent.parent / "fragments"


def load_fragment(name: str) -> str | None:
    """Read a fragment's HTML.

    A missing or unreadable fragment is logged and yields None so the page
    renders without it.
    """
    path = FRAGMENT_DIR / name
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        logger.error(f"Error loading fragment {path}: {e}")
        return None
