"""Shared test fixtures."""

from typing import Callable

import pytest

from mesbah_storefront.core.range_sync import RangeSyncController
from mesbah_storefront.schemas import SiteConfig, UploadPolicy

from .factories import create_controller, create_product, create_site_config


@pytest.fixture
def product_factory():
    """Fixture that returns the product factory function."""
    return create_product


@pytest.fixture
def controller_factory() -> Callable[..., RangeSyncController]:
    """Fixture that returns the controller factory function."""
    return create_controller


@pytest.fixture
def controller() -> RangeSyncController:
    """Return a controller on [0, 1000] holding (200, 800) with a gap of 100."""
    return create_controller()


@pytest.fixture
def site_config() -> SiteConfig:
    """Return a site configuration with a three-product catalogue."""
    return create_site_config()


@pytest.fixture
def upload_policy() -> UploadPolicy:
    return UploadPolicy()
