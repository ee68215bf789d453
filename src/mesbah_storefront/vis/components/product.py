"""Product card components: thumbnail gallery, quantity stepper, order button."""

import solara

from mesbah_storefront.core.gallery import ThumbnailGallery
from mesbah_storefront.core.navigation import ORDER_BUTTON_TARGET, route_for
from mesbah_storefront.schemas import Product
from mesbah_storefront.vis.state.storefront import StorefrontState


@solara.component
def Gallery(images: list[str]):
    """Main image plus clickable thumbnails; one thumbnail is active."""
    active, set_active = solara.use_state(0)
    if not images:
        return solara.Div(classes=["gallery-empty"])
    # Clamp an index left over from a gallery with more images
    gallery = ThumbnailGallery(images, active_index=min(active, len(images) - 1))

    def select(index: int):
        def on_click():
            gallery.select(index)
            set_active(gallery.active_index)

        return on_click

    with solara.Column(classes=["gallery"]):
        solara.Image(gallery.main_image, width="100%")
        with solara.Row(classes=["thumbnails"]):
            for index, src in enumerate(gallery.images):
                classes = ["thumbnail"]
                if gallery.is_active(index):
                    classes.append("active")
                solara.Button(
                    children=[solara.Image(src, width="48px")],
                    on_click=select(index),
                    classes=classes,
                    text=True,
                )


@solara.component
def QuantityStepper(state: StorefrontState, product: Product):
    """Minus / input / plus, never below the configured minimum."""
    with solara.Row(classes=["qty-controls"], style="align-items: center;"):
        solara.Button(
            icon_name="mdi-minus",
            on_click=lambda: state.decrement_quantity(product.name),
            icon=True,
            small=True,
            classes=["qty-btn", "minus"],
        )
        solara.InputText(
            label="Qty",
            value=state.quantity_text(product.name),
            on_value=lambda text: state.set_quantity_text(product.name, text),
            classes=["qty-input"],
        )
        solara.Button(
            icon_name="mdi-plus",
            on_click=lambda: state.increment_quantity(product.name),
            icon=True,
            small=True,
            classes=["qty-btn", "plus"],
        )


@solara.component
def ProductCard(state: StorefrontState, product: Product):
    router = solara.use_router()

    with solara.Card(product.name, classes=["product-card"]):
        Gallery(product.images)
        solara.Markdown(f"**{product.price}**")
        if product.description:
            solara.Text(product.description)
        QuantityStepper(state, product)
        with solara.Row(classes=["product-actions"]):
            solara.Button(
                "Order",
                on_click=lambda: router.push(route_for(ORDER_BUTTON_TARGET)),
                color="primary",
                classes=["action-btn", "primary"],
            )


@solara.component
def ProductGrid(state: StorefrontState):
    """Products that fall inside the selected budget."""
    products = state.budget.matching(state.config.products)
    if not products:
        solara.Info("No products in this budget range.")
        return
    with solara.ColumnsResponsive(default=12, small=6, large=4):
        for product in products:
            ProductCard(state, product).key(product.name)
