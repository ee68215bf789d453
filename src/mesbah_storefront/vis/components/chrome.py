"""Page chrome shared by every route: breadcrumbs and the footer."""

import solara

from mesbah_storefront.core.navigation import (
    breadcrumb_title,
    breadcrumbs,
    cta_target,
    rewrite_internal_links,
    route_for,
)
from mesbah_storefront.schemas import FooterLink
from mesbah_storefront.services.fragments import load_fragment


@solara.component
def Breadcrumbs(page_title: str):
    title = breadcrumb_title(page_title)
    with solara.Row(classes=["breadcrumbs"], gap="4px"):
        for index, (label, href) in enumerate(breadcrumbs(title)):
            if index:
                solara.Text(">")
            if href is None:
                solara.Text(label, classes=["current"])
            else:
                with solara.Link(route_for(href)):
                    solara.Text(label)


def footer_html(fragment: str | None) -> str | None:
    """Load a footer fragment with its page links pointed at app routes."""
    html = load_fragment(fragment) if fragment else None
    return rewrite_internal_links(html) if html else None


@solara.component
def Footer(fragment: str | None, links: list[FooterLink]):
    """Injected footer fragment followed by its call-to-action buttons."""
    router = solara.use_router()
    html = solara.use_memo(lambda: footer_html(fragment), [fragment])

    with solara.Column(classes=["footer"]):
        if html:
            solara.HTML(tag="footer", unsafe_innerHTML=html)
        with solara.Row():
            for link in links:
                target = route_for(cta_target(link.href))
                solara.Button(
                    link.label,
                    on_click=lambda target=target: router.push(target),
                    classes=["footer-cta"],
                    color="primary",
                )
