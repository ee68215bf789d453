import logging
from pathlib import Path

import solara

from mesbah_storefront.core.navigation import (
    GO_HOME_TARGET,
    ORDER_FORM_TARGET,
    route_for,
)
from mesbah_storefront.vis.components import (
    Breadcrumbs,
    BudgetSlider,
    Footer,
    ImageUpload,
    ProductGrid,
)
from mesbah_storefront.vis.state.storefront import storefront

# --- Logging Configuration ---
# Force configuration of the library logger to ensure we capture output
logger = logging.getLogger("mesbah_storefront")
logger.setLevel(logging.INFO)
# Clear existing handlers to avoid duplicates
if logger.handlers:
    logger.handlers.clear()

Path("outputs").mkdir(exist_ok=True)
file_handler = logging.FileHandler("outputs/storefront.log")
file_handler.setFormatter(
    logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
)
stream_handler = logging.StreamHandler()
stream_handler.setFormatter(
    logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
)

logger.addHandler(file_handler)
logger.addHandler(stream_handler)


def page_title(name: str) -> str:
    return f"{name} - {storefront.config.site_name}"


# --- Pages ---


@solara.component
def Home():
    solara.Title(storefront.config.site_name)

    with solara.Sidebar():
        with solara.Card("Filter", style="margin-bottom: 6px;"):
            BudgetSlider(storefront.budget)

    ProductGrid(storefront)


@solara.component
def Order():
    title = page_title("Custom Order")
    solara.Title(title)
    Breadcrumbs(title)

    router = solara.use_router()
    name, set_name = solara.use_state("")
    details, set_details = solara.use_state("")

    def submit():
        logger.info(f"Order request submitted by {name or 'anonymous'}")
        router.push(route_for(ORDER_FORM_TARGET))

    with solara.Card("Request a Custom Piece", classes=["order-form"]):
        solara.InputText(label="Your Name", value=name, on_value=set_name)
        solara.InputTextArea(label="Details", value=details, on_value=set_details)
        ImageUpload(storefront)
        solara.Button("Send Request", on_click=submit, color="primary")


@solara.component
def SuccessMessage(heading: str, message: str):
    title = page_title(heading)
    solara.Title(title)
    Breadcrumbs(title)

    router = solara.use_router()
    with solara.Column(
        style="height: 40vh; justify-content: center; align-items: center;"
    ):
        solara.Markdown(f"## {heading}")
        solara.Markdown(message)
        solara.Button(
            "Go Home",
            on_click=lambda: router.push(route_for(GO_HOME_TARGET)),
            classes=["go-home"],
        )


@solara.component
def OrderSuccess():
    SuccessMessage("Order Placed", "Thank you! We will contact you shortly.")


@solara.component
def RequestSuccess():
    SuccessMessage("Request Received", "We will review your request and reply soon.")


@solara.component
def Layout(children=[]):
    # Inject CSS
    solara.Style(Path(__file__).parent.parent / "assets" / "style.css")

    with solara.AppLayout(title=storefront.config.site_name, navigation=False):
        with solara.Column(style="min-height: 80vh;"):
            solara.Column(children=children)
        Footer(storefront.config.footer_fragment, storefront.config.footer_links)


routes = [
    solara.Route(path="/", component=Home, label="Home"),
    solara.Route(path="order", component=Order, label="Order"),
    solara.Route(path="order-success", component=OrderSuccess, label="Ordered"),
    solara.Route(path="request-success", component=RequestSuccess, label="Sent"),
]
