"""Shared section loading for pages: one snapshot set per section, last write wins."""

from __future__ import annotations

import logging

import streamlit as st

from devops_console.core.service import DashboardService, SectionData
from devops_console.visual.progress import ProgressReporter

logger = logging.getLogger(__name__)


def get_service() -> DashboardService | None:
    return st.session_state.get("dashboard_service")


def _cache_key(section: str) -> str:
    return f"section_data_{section}"


def section_data(section: str, *, refresh: bool = False) -> SectionData | None:
    """Return the section's snapshots, loading them (with a progress banner) when needed.

    Each load replaces the stored snapshots wholesale; a page never sees half
    of an old load mixed with half of a new one.
    """
    service = get_service()
    if service is None:
        st.warning("The data source is not initialized. Launch the console via run_dashboard.py.")
        return None
    key = _cache_key(section)
    cached: SectionData | None = st.session_state.get(key)
    if cached is not None and not refresh:
        return cached

    reporter = ProgressReporter(f"Loading {section.lower()} data")
    try:
        data = service.load_section(section, progress=reporter.callback)
    except Exception as exc:
        logger.exception("Failed loading section %s", section)
        reporter.error(f"Failed to load {section.lower()} data: {exc}")
        raise
    st.session_state[key] = data
    reporter.complete()
    return data


def refresh_button(section: str) -> bool:
    return st.button("Refresh", key=f"{section}_refresh", help="Reload this section from the data source.")
