"""Incident management page."""

from __future__ import annotations

import streamlit as st

from devops_console.app import register_page
from devops_console.core.tabs import DashboardTab
from devops_console.features.incidents.context import build_incidents_context
from devops_console.pages._loading import refresh_button, section_data
from devops_console.visual.cards import MetricCard, fmt_number, render_cards
from devops_console.visual.charts import category_pie, incident_trend_chart
from devops_console.visual.controls import get_table_state, render_pager, render_query_controls
from devops_console.visual.palette import badge
from devops_console.visual.tables import DISPLAY_TIME_FORMAT, download_csv, render_table

SECTION = DashboardTab.INCIDENTS.value
TABLE = "incidents"
DETAIL_KEY = "incidents_detail_id"


def _when(value) -> str:
    return value.strftime(DISPLAY_TIME_FORMAT) if hasattr(value, "strftime") else str(value)


def _render_detail(detail: dict) -> None:
    with st.expander(f"Incident Details: {detail['id']}", expanded=True):
        left, right = st.columns(2)
        left.markdown(f"**Title**  \n{detail['title']}")
        right.markdown(f"**Service**  \n{detail['service']}")
        left.markdown(f"**Severity**  \n{badge('severity', detail['severity'])}")
        right.markdown(f"**Status**  \n{badge('incident_status', detail['status'])}")
        left.markdown(f"**Reported**  \n{_when(detail['reported_at'])}")
        right.markdown(f"**Resolved**  \n{_when(detail['resolved_at'])}")
        st.markdown("**Description**")
        st.info(detail["description"])
        left, right = st.columns(2)
        left.markdown(f"**Assigned To**  \n{detail['assigned_to']}")
        right.markdown(f"**Affected Users**  \n{int(detail['affected_users']):,}")
        if "mttr" in detail:
            left.markdown(f"**MTTR**  \n{detail['mttr']} minutes")


@register_page(SECTION)
def incidents_page():
    st.title("Incident Management")
    st.caption("Track, triage and resolve production incidents.")
    data = section_data(SECTION, refresh=refresh_button(SECTION))
    if data is None:
        return
    df = data.frame("incidents")
    state = get_table_state(TABLE)
    ctx = build_incidents_context(df, state, st.session_state.get(DETAIL_KEY))

    render_cards(
        [
            MetricCard("Total Incidents", f"{ctx.total:,}"),
            MetricCard("Open Incidents", f"{ctx.open_count:,}", caption="Open or investigating"),
            MetricCard("Critical Open", f"{ctx.critical_open:,}"),
            MetricCard("Avg MTTR", fmt_number(ctx.avg_mttr, 1, " min"), caption="Resolved and closed"),
        ]
    )

    left, right = st.columns([1, 2])
    with left:
        st.subheader("By Severity")
        chart = category_pie(ctx.severity_counts, "severity")
        if chart is None:
            st.info("No incidents recorded.")
        else:
            st.altair_chart(chart, width="stretch")
    with right:
        st.subheader("Incident Trend")
        chart = incident_trend_chart(ctx.trend)
        if chart is None:
            st.info("No incidents recorded.")
        else:
            st.altair_chart(chart, width="stretch")

    st.subheader("Incidents")
    updated = render_query_controls(TABLE, ctx.options, search_placeholder="Search title, description or ID")
    if updated is not state:
        ctx = build_incidents_context(df, updated, st.session_state.get(DETAIL_KEY))
    render_table(ctx.page.rows, TABLE)
    render_pager(TABLE, ctx.page)
    if not ctx.page.is_empty:
        st.selectbox(
            "Incident details",
            ctx.page.rows["id"].tolist(),
            index=None,
            placeholder="Select an incident on this page",
            key=DETAIL_KEY,
        )
    if ctx.selected is not None:
        _render_detail(ctx.selected)
    download_csv(ctx.view, TABLE, label="Download filtered incidents")
