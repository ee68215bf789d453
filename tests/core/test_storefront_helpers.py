"""Tests for the small storefront helpers: quantity, gallery, navigation, catalog."""

import pytest

from mesbah_storefront.core.catalog import filter_by_budget
from mesbah_storefront.core.gallery import ThumbnailGallery
from mesbah_storefront.core.navigation import (
    GO_HOME_TARGET,
    ORDER_BUTTON_TARGET,
    ORDER_FORM_TARGET,
    breadcrumb_title,
    breadcrumbs,
    cta_target,
    is_internal_link,
    rewrite_internal_links,
    route_for,
)
from mesbah_storefront.core.quantity import decrement, increment, step_quantity
from mesbah_storefront.core.range_sync import SelectedRange

# ── Quantity stepper ─────────────────────────────────────────────────────────


def test_quantity_steps_up_and_down():
    assert increment("3") == 4
    assert decrement("3") == 2


def test_quantity_never_below_one():
    assert decrement("1") == 1
    assert decrement("0") == 1
    assert step_quantity("-7", 1) == 1


def test_quantity_blank_counts_as_one():
    assert increment("") == 2
    assert increment(None) == 2
    assert decrement("") == 1


def test_quantity_garbage_resets_to_minimum():
    """Non-numeric text restarts from the minimum instead of showing NaN."""
    assert increment("abc") == 2
    assert decrement("abc") == 1


def test_quantity_custom_minimum():
    assert decrement("3", minimum=3) == 3
    assert step_quantity("", -1, minimum=0) == 0


# ── Thumbnail gallery ────────────────────────────────────────────────────────


def test_gallery_starts_on_first_image():
    gallery = ThumbnailGallery(["a.jpg", "b.jpg", "c.jpg"])
    assert gallery.main_image == "a.jpg"
    assert gallery.is_active(0)


def test_gallery_select_swaps_main_image():
    gallery = ThumbnailGallery(["a.jpg", "b.jpg", "c.jpg"])
    assert gallery.select(2) == "c.jpg"
    assert gallery.main_image == "c.jpg"
    assert [gallery.is_active(i) for i in range(3)] == [False, False, True]


def test_gallery_rejects_bad_index():
    gallery = ThumbnailGallery(["a.jpg"])
    with pytest.raises(IndexError):
        gallery.select(1)
    assert gallery.main_image == "a.jpg"


def test_gallery_needs_images():
    with pytest.raises(ValueError):
        ThumbnailGallery([])


# ── Navigation ───────────────────────────────────────────────────────────────


def test_breadcrumb_title_strips_site_suffix():
    assert breadcrumb_title("Custom Order - Mesbah") == "Custom Order"


def test_breadcrumb_title_defaults_to_page():
    assert breadcrumb_title("") == "Page"
    assert breadcrumb_title(None) == "Page"
    assert breadcrumb_title(" - Mesbah") == "Page"


def test_breadcrumb_trail():
    assert breadcrumbs("Lamps") == [("Home", "index.html"), ("Lamps", None)]


@pytest.mark.parametrize(
    "href, expected",
    [
        ("order.html", True),
        ("products/lamps.html", True),
        ("#top", False),
        ("http://example.com/a.html", False),
        ("https://example.com/a.html", False),
        ("", False),
        (None, False),
        ("contact.php", False),
    ],
)
def test_is_internal_link(href, expected):
    assert is_internal_link(href) is expected


def test_cta_target_defaults_to_order_page():
    assert cta_target(None) == "order.html"
    assert cta_target("") == "order.html"
    assert cta_target("contact.html") == "contact.html"


@pytest.mark.parametrize(
    "href, route",
    [
        ("index.html", "/"),
        ("/index.html", "/"),
        ("order.html", "/order"),
        ("order-success.html", "/order-success"),
        ("request-success", "/request-success"),
    ],
)
def test_route_for(href, route):
    assert route_for(href) == route


def test_rewrite_internal_links_maps_pages_to_routes():
    html = (
        '<a href="index.html">Home</a> '
        "<a href='order.html'>Order</a> "
        '<a href="#top">Top</a> '
        '<a href="https://example.com/a.html">Out</a> '
        '<a href="mailto:hi@example.com">Mail</a>'
    )
    assert rewrite_internal_links(html) == (
        '<a href="/">Home</a> '
        "<a href='/order'>Order</a> "
        '<a href="#top">Top</a> '
        '<a href="https://example.com/a.html">Out</a> '
        '<a href="mailto:hi@example.com">Mail</a>'
    )


def test_redirect_targets():
    assert ORDER_BUTTON_TARGET == "order-success.html"
    assert ORDER_FORM_TARGET == "request-success.html"
    assert GO_HOME_TARGET == "index.html"


# ── Catalog ──────────────────────────────────────────────────────────────────


def test_filter_by_budget_includes_bounds(product_factory):
    products = [
        product_factory("Under", 199),
        product_factory("Low", 200),
        product_factory("Mid", 500),
        product_factory("High", 800),
        product_factory("Over", 801),
    ]
    kept = filter_by_budget(products, SelectedRange(low=200, high=800))
    assert [p.name for p in kept] == ["Low", "Mid", "High"]


def test_filter_by_budget_zero_width(product_factory):
    products = [product_factory("A", 400), product_factory("B", 401)]
    kept = filter_by_budget(products, SelectedRange(low=400, high=400))
    assert [p.name for p in kept] == ["A"]
