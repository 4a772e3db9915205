"""Cloud cost page."""

from __future__ import annotations

import streamlit as st

from devops_console.app import register_page
from devops_console.core.config import BUDGET_ALERT_LEVEL
from devops_console.core.tabs import DashboardTab
from devops_console.features.cost.context import build_cost_context
from devops_console.pages._loading import refresh_button, section_data
from devops_console.visual.cards import MetricCard, fmt_currency, fmt_signed_percent, render_cards
from devops_console.visual.charts import category_pie, cost_trend_chart
from devops_console.visual.tables import render_table

SECTION = DashboardTab.COST.value


@register_page(SECTION)
def cost_page():
    st.title("Cloud Cost")
    st.caption("Monthly spend by component and month-over-month change.")
    data = section_data(SECTION, refresh=refresh_button(SECTION))
    if data is None:
        return
    ctx = build_cost_context(data.frame("cloud_costs"))

    render_cards(
        [
            MetricCard(
                "Current Month",
                fmt_currency(ctx.delta.latest),
                delta=fmt_signed_percent(ctx.delta.percent),
                delta_color="inverse",
                caption="Spend up on last month" if ctx.delta.increased else "Spend flat or down on last month",
                help="Change versus the previous month.",
            ),
            MetricCard("Previous Month", fmt_currency(ctx.delta.previous)),
            MetricCard("Annual Run Rate", fmt_currency(ctx.annual_run_rate, 0), caption="Current month x 12"),
            MetricCard("Budget Alert", BUDGET_ALERT_LEVEL, caption="Threshold of monthly budget"),
        ]
    )

    left, right = st.columns([2, 1])
    with left:
        st.subheader("Spend Trend")
        months = ctx.costs["month"].tolist() if not ctx.costs.empty else []
        chart = cost_trend_chart(ctx.trend, months)
        if chart is None:
            st.info("No cost data available.")
        else:
            st.altair_chart(chart, width="stretch")
    with right:
        st.subheader("Current Month Breakdown")
        chart = category_pie(ctx.breakdown, "cost_component")
        if chart is None:
            st.info("No cost data available.")
        else:
            st.altair_chart(chart, width="stretch")

    st.subheader("Monthly Costs")
    render_table(ctx.costs.iloc[::-1], "cloud_costs", empty_message="No cost data available.")
