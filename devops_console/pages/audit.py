"""Audit log page."""

from __future__ import annotations

import streamlit as st

from devops_console.app import register_page
from devops_console.core.tabs import DashboardTab
from devops_console.features.audit.context import build_audit_context
from devops_console.pages._loading import refresh_button, section_data
from devops_console.visual.charts import category_bar
from devops_console.visual.controls import get_table_state, render_pager, render_query_controls
from devops_console.visual.tables import download_csv, render_table

SECTION = DashboardTab.AUDIT.value
TABLE = "audit_logs"


@register_page(SECTION)
def audit_page():
    st.title("Audit Logs")
    st.caption("Who changed what, and when. Newest entries first.")
    data = section_data(SECTION, refresh=refresh_button(SECTION))
    if data is None:
        return
    df = data.frame("audit_logs")
    state = get_table_state(TABLE)
    ctx = build_audit_context(df, state)

    updated = render_query_controls(TABLE, ctx.options, search_placeholder="Search details, resource ID or IP")
    if updated is not state:
        ctx = build_audit_context(df, updated)

    with st.expander("Actions in view", expanded=False):
        chart = category_bar(ctx.action_counts, color="#8884d8")
        if chart is None:
            st.info("No audit entries match the current filters.")
        else:
            st.altair_chart(chart, width="stretch")

    render_table(ctx.page.rows, TABLE)
    render_pager(TABLE, ctx.page)
    download_csv(ctx.view, TABLE, label="Download filtered audit log")
