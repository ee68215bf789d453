"""Navigation helpers: breadcrumbs, link handling and redirect targets.

Pages are addressed by their static ``*.html`` names (``order-success.html``)
and mapped onto app routes (``/order-success``) at the edge.
"""

import re

from mesbah_storefront.core.constants import (
    DEFAULT_PAGE_TITLE,
    TITLE_SUFFIX,
    Pages,
)


def breadcrumb_title(page_title: str | None, suffix: str = TITLE_SUFFIX) -> str:
    """Derive the current-page crumb from a document title."""
    title = (page_title or "").replace(suffix, "")
    return title or DEFAULT_PAGE_TITLE


def breadcrumbs(title: str) -> list[tuple[str, str | None]]:
    """Build the trail ``Home > <title>``; the current page has no href."""
    return [("Home", Pages.HOME), (title, None)]


def is_internal_link(href: str | None) -> bool:
    """True for links to other pages of this site.

    Hashes and absolute http(s) URLs keep their default behaviour.
    """
    if not href or href.startswith("#") or href.startswith("http"):
        return False
    return href.endswith(".html")


def cta_target(data_href: str | None) -> str:
    """Where a footer call-to-action goes when it doesn't declare a target."""
    return data_href or Pages.ORDER


def route_for(href: str) -> str:
    """Map a static page name onto an app route.

    >>> route_for("order-success.html")
    '/order-success'
    >>> route_for("index.html")
    '/'
    """
    name = href.lstrip("/")
    if name.endswith(".html"):
        name = name[: -len(".html")]
    if name in ("", "index"):
        return "/"
    return f"/{name}"


_HREF = re.compile(r"""href=(["'])(.*?)\1""")


def rewrite_internal_links(html: str) -> str:
    """Point a fragment's internal ``*.html`` links at their app routes.

    Hashes and external URLs are left untouched.
    """

    def replace(match: re.Match) -> str:
        quote, href = match.group(1), match.group(2)
        if not is_internal_link(href):
            return match.group(0)
        return f"href={quote}{route_for(href)}{quote}"

    return _HREF.sub(replace, html)


# Redirect targets for the site's one-shot actions
ORDER_BUTTON_TARGET = Pages.ORDER_SUCCESS
ORDER_FORM_TARGET = Pages.REQUEST_SUCCESS
GO_HOME_TARGET = Pages.HOME
