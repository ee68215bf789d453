"""Dual-handle budget slider with matching text inputs."""

import solara

from mesbah_storefront.vis.state.budget import BudgetFilter


@solara.component
def FillTrack(budget: BudgetFilter):
    """The track with its fill bar positioned by the current FillBar."""
    bar = budget.fill.value
    with solara.Div(classes=["slider-track"]):
        solara.HTML(
            tag="div",
            classes=["slider-range"],
            style=bar.css if bar is not None else "",
        )


@solara.component
def BudgetSlider(budget: BudgetFilter, label: str = "Budget"):
    """Two sliders and two inputs kept in sync by the budget controller."""
    bounds = budget.bounds
    with solara.Column(classes=["budget-slider"]):
        solara.Text(label, style="font-size: 0.85rem; font-weight: 500; color: #666;")
        FillTrack(budget)
        solara.SliderInt(
            label="From",
            value=budget.low_slider.value,
            min=bounds.minimum,
            max=bounds.maximum,
            on_value=budget.on_low_slider,
            thumb_label=False,
        )
        solara.SliderInt(
            label="To",
            value=budget.high_slider.value,
            min=bounds.minimum,
            max=bounds.maximum,
            on_value=budget.on_high_slider,
            thumb_label=False,
        )
        with solara.Row(style="align-items: center; margin-top: -4px;"):
            solara.InputText(
                label="Min",
                value=budget.low_input.value,
                on_value=budget.on_low_input,
                continuous_update=True,
            )
            solara.Text("-", style="margin: 0 4px;")
            solara.InputText(
                label="Max",
                value=budget.high_input.value,
                on_value=budget.on_high_input,
                continuous_update=True,
            )
