"""Monitoring & observability page: service health and golden-signal series."""

from __future__ import annotations

import streamlit as st

from devops_console.app import register_page
from devops_console.core.config import MONITORED_SERIES
from devops_console.core.tabs import DashboardTab
from devops_console.features.monitoring.context import build_monitoring_context
from devops_console.pages._loading import refresh_button, section_data
from devops_console.visual.cards import MetricCard, render_cards
from devops_console.visual.charts import metric_series_chart
from devops_console.visual.tables import render_table

SECTION = DashboardTab.MONITORING.value

# series entity -> (title, y axis, color, area)
SERIES_CHARTS: dict[str, tuple[str, str, str, bool]] = {
    "latency_series": ("Latency", "Latency (ms)", "#8884d8", False),
    "error_rate_series": ("Error Rate", "Error Rate (%)", "#ef4444", True),
    "throughput_series": ("Throughput", "Requests / s", "#82ca9d", True),
}


@register_page(SECTION)
def monitoring_page():
    st.title("Monitoring & Observability")
    st.caption("Current service health and the last 24 hours of key signals.")
    data = section_data(SECTION, refresh=refresh_button(SECTION))
    if data is None:
        return
    series = {name: data.frame(name) for name in MONITORED_SERIES}
    ctx = build_monitoring_context(data.frame("service_health"), series)

    render_cards(
        [
            MetricCard("Services", f"{ctx.total_services:,}"),
            MetricCard("Operational", f"{ctx.operational:,}"),
            MetricCard("Degraded", f"{ctx.degraded:,}"),
            MetricCard("Outage", f"{ctx.outage:,}"),
        ]
    )

    for name, service in MONITORED_SERIES.items():
        title, y_title, color, area = SERIES_CHARTS[name]
        st.subheader(f"{title} ({service})")
        chart = metric_series_chart(ctx.series[name], y_title, color=color, area=area)
        if chart is None:
            st.info(f"No {title.lower()} samples recorded.")
        else:
            st.altair_chart(chart, width="stretch")

    st.subheader("Service Health")
    render_table(ctx.health, "service_health", empty_message="No services reporting.")
