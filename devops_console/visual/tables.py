"""Reusable table helpers for Streamlit rendering."""

from __future__ import annotations

import pandas as pd
import streamlit as st

from devops_console.core.column_config import get_columns
from devops_console.core.config import SETTINGS
from devops_console.core.mappers import DATETIME_COLUMNS
from devops_console.visual.column_metadata import apply_column_metadata
from devops_console.visual.palette import badge

DISPLAY_TIME_FORMAT = "%Y-%m-%d %H:%M"

# Column -> palette kind used to decorate status-like values, per table
BADGE_COLUMNS: dict[str, dict[str, str]] = {
    "incidents": {"status": "incident_status", "severity": "severity"},
    "vulnerabilities": {"status": "vulnerability_status", "severity": "severity"},
    "service_health": {"status": "service_status"},
    "environments": {"status": "environment_status"},
    "deployments": {"status": "deployment_status"},
}


def format_timestamps(df: pd.DataFrame, fmt: str = DISPLAY_TIME_FORMAT) -> pd.DataFrame:
    """Render datetime columns as display strings (presentation boundary only)."""
    if df.empty:
        return df
    out = df.copy()
    for col in DATETIME_COLUMNS.intersection(out.columns):
        values = pd.to_datetime(out[col], errors="coerce")
        out[col] = values.dt.strftime(fmt).fillna("")
    return out


def prepare_table(
    df: pd.DataFrame,
    table: str,
    *,
    extra_columns: list[str] | None = None,
) -> tuple[pd.DataFrame, list[str]]:
    if df.empty:
        return df, []
    out = format_timestamps(df)
    for col, kind in BADGE_COLUMNS.get(table, {}).items():
        if col in out.columns:
            out[col] = out[col].map(lambda v, k=kind: badge(k, v))
    canonical = get_columns(table) or []
    display_cols = [col for col in canonical if col in out.columns]
    for col in extra_columns or []:
        if col in out.columns and col not in display_cols:
            display_cols.append(col)
    if not display_cols:
        display_cols = list(out.columns)
    return out, display_cols


def render_table(df: pd.DataFrame, table: str, *, empty_message: str = "No records found matching criteria."):
    if df.empty:
        st.info(empty_message)
        return
    prepared, display_cols = prepare_table(df, table)
    st.dataframe(
        prepared[display_cols].head(SETTINGS.max_table_rows),
        hide_index=True,
        column_config=apply_column_metadata(display_cols),
        width="stretch",
    )


def download_csv(df: pd.DataFrame, table: str, *, label: str = "Download CSV"):
    if df.empty:
        return
    _, display_cols = prepare_table(df, table)
    csv = format_timestamps(df)[display_cols].to_csv(index=False).encode(SETTINGS.download_encoding)
    st.download_button(label, data=csv, file_name=f"{table}.csv", mime="text/csv", key=f"{table}_csv")
