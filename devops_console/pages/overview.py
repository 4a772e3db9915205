"""Delivery overview page: DORA-style summary, build health and recent deployments."""

from __future__ import annotations

import streamlit as st

from devops_console.app import register_page
from devops_console.core.config import (
    BUILD_DURATION_WARN_MINUTES,
    CHANGE_FAILURE_WARN_PERCENT,
    RESTORE_WARN_HOURS,
)
from devops_console.core.tabs import DashboardTab
from devops_console.features.overview.context import build_overview_context
from devops_console.pages._loading import refresh_button, section_data
from devops_console.visual.cards import MetricCard, fmt_number, fmt_percent, render_cards
from devops_console.visual.charts import build_duration_chart, deployment_frequency_chart
from devops_console.visual.tables import render_table

SECTION = DashboardTab.OVERVIEW.value


def _above(value, threshold: float) -> bool:
    return isinstance(value, (int, float)) and value > threshold


@register_page(SECTION)
def overview_page():
    st.title("Delivery Overview")
    st.caption("Deployment throughput, build health and recovery time across services.")
    data = section_data(SECTION, refresh=refresh_button(SECTION))
    if data is None:
        return
    ctx = build_overview_context(
        data.frame("builds"),
        data.frame("deployment_frequency"),
        data.frame("deployments"),
        data.frame("incidents"),
    )

    render_cards(
        [
            MetricCard("Deployments", f"{ctx.total_deployments:,}", caption="Last 12 months"),
            MetricCard(
                "Change Failure Rate",
                fmt_percent(ctx.change_failure_rate),
                caption=f"Target below {CHANGE_FAILURE_WARN_PERCENT:g}%",
                delta="Above target" if ctx.change_failure_rate > CHANGE_FAILURE_WARN_PERCENT else None,
                delta_color="inverse",
            ),
            MetricCard(
                "Avg Build Duration",
                fmt_number(ctx.avg_build_duration, 1, " min"),
                caption=f"Target below {BUILD_DURATION_WARN_MINUTES:g} min",
                delta="Slow" if _above(ctx.avg_build_duration, BUILD_DURATION_WARN_MINUTES) else None,
                delta_color="inverse",
            ),
            MetricCard(
                "Mean Time to Restore",
                fmt_number(ctx.mean_time_to_restore, 2, " h"),
                caption="Resolved and closed incidents",
                delta="Slow" if _above(ctx.mean_time_to_restore, RESTORE_WARN_HOURS) else None,
                delta_color="inverse",
            ),
        ]
    )

    left, right = st.columns(2)
    with left:
        st.subheader("Build Duration")
        chart = build_duration_chart(ctx.builds)
        if chart is None:
            st.info("No builds recorded.")
        else:
            st.altair_chart(chart, width="stretch")
            st.caption("Red markers are failed builds.")
    with right:
        st.subheader("Deployment Frequency")
        chart = deployment_frequency_chart(ctx.frequency)
        if chart is None:
            st.info("No deployments recorded.")
        else:
            st.altair_chart(chart, width="stretch")

    st.subheader("Recent Deployments")
    render_table(ctx.recent, "deployments", empty_message="No recent deployments.")
