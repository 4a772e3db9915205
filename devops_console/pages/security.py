"""Security & compliance page: vulnerability posture and findings table."""

from __future__ import annotations

import streamlit as st

from devops_console.app import register_page
from devops_console.core.tabs import DashboardTab
from devops_console.features.security.context import build_security_context
from devops_console.pages._loading import refresh_button, section_data
from devops_console.visual.cards import MetricCard, fmt_number, render_cards
from devops_console.visual.charts import category_bar, category_pie
from devops_console.visual.controls import get_table_state, render_pager, render_query_controls
from devops_console.visual.tables import download_csv, render_table

SECTION = DashboardTab.SECURITY.value
TABLE = "vulnerabilities"


@register_page(SECTION)
def security_page():
    st.title("Security & Compliance")
    st.caption("Open findings across services, by severity and category.")
    data = section_data(SECTION, refresh=refresh_button(SECTION))
    if data is None:
        return
    df = data.frame("vulnerabilities")
    state = get_table_state(TABLE)
    ctx = build_security_context(df, state)

    render_cards(
        [
            MetricCard("Total Findings", f"{ctx.total:,}"),
            MetricCard("Open", f"{ctx.open_count:,}"),
            MetricCard("Critical Open", f"{ctx.critical_open:,}"),
            MetricCard("Avg Time to Fix", fmt_number(ctx.avg_time_to_fix, 1, " days"), caption="Fixed findings"),
        ]
    )

    # Controls sit above the charts: the breakdowns follow the filtered view
    updated = render_query_controls(TABLE, ctx.options, search_placeholder="Search description, type or ID")
    if updated is not state:
        ctx = build_security_context(df, updated)

    left, right = st.columns(2)
    with left:
        st.subheader("By Severity")
        chart = category_pie(ctx.by_severity, "severity")
        if chart is None:
            st.info("No findings match the current filters.")
        else:
            st.altair_chart(chart, width="stretch")
    with right:
        st.subheader("By Type")
        chart = category_bar(ctx.by_type)
        if chart is None:
            st.info("No findings match the current filters.")
        else:
            st.altair_chart(chart, width="stretch")

    st.subheader("Vulnerabilities")
    render_table(ctx.page.rows, TABLE)
    render_pager(TABLE, ctx.page)
    download_csv(ctx.view, TABLE, label="Download filtered findings")
