"""Developer productivity page: pull request flow and code quality."""

from __future__ import annotations

import streamlit as st

from devops_console.app import register_page
from devops_console.core.config import PR_WINDOW_DAYS
from devops_console.core.tabs import DashboardTab
from devops_console.features.productivity.context import build_productivity_context
from devops_console.pages._loading import refresh_button, section_data
from devops_console.visual.cards import MetricCard, fmt_number, fmt_percent, render_cards
from devops_console.visual.charts import code_quality_chart, pr_activity_chart
from devops_console.visual.tables import render_table

SECTION = DashboardTab.PRODUCTIVITY.value


@register_page(SECTION)
def productivity_page():
    st.title("Developer Productivity")
    st.caption(f"Pull request activity over the last {PR_WINDOW_DAYS} days and code quality per service.")
    data = section_data(SECTION, refresh=refresh_button(SECTION))
    if data is None:
        return
    ctx = build_productivity_context(data.frame("pull_requests"), data.frame("code_quality"))

    render_cards(
        [
            MetricCard("Merged PRs", f"{ctx.merged_recent:,}", caption=f"Last {PR_WINDOW_DAYS} days"),
            MetricCard("Avg Cycle Time", fmt_number(ctx.avg_cycle_time, 1, " h"), caption="Days with merges"),
            MetricCard("Avg Coverage", fmt_percent(ctx.avg_coverage)),
            MetricCard("Technical Debt", fmt_number(ctx.technical_debt_hours, 0, " h")),
        ]
    )

    st.subheader("Pull Request Activity")
    chart = pr_activity_chart(ctx.pr_activity)
    if chart is None:
        st.info("No pull request activity recorded.")
    else:
        st.altair_chart(chart, width="stretch")

    left, right = st.columns([1, 1])
    with left:
        st.subheader("Coverage by Service")
        chart = code_quality_chart(ctx.code_quality)
        if chart is None:
            st.info("No code quality data available.")
        else:
            st.altair_chart(chart, width="stretch")
    with right:
        st.subheader("Code Quality")
        render_table(ctx.code_quality, "code_quality", empty_message="No code quality data available.")
