"""Pure helpers to build the incidents section context (no Streamlit)."""

from __future__ import annotations

from dataclasses import dataclass

import pandas as pd

from devops_console.analytics.aggregations.categories import category_counts
from devops_console.analytics.metrics.incidents import (
    average_mttr,
    critical_open_count,
    incident_trend,
    open_incident_count,
)
from devops_console.core.config import NOT_AVAILABLE, QUERY_SPECS, SEVERITY_ORDER
from devops_console.core.query import Page, TableState, apply_spec, filter_options, paginate

SPEC = QUERY_SPECS["incidents"]


@dataclass(slots=True)
class IncidentsContext:
    view: pd.DataFrame
    page: Page
    options: dict[str, list[str]]
    total: int
    open_count: int
    critical_open: int
    avg_mttr: float | str
    severity_counts: pd.DataFrame
    trend: pd.DataFrame
    selected: dict[str, object] | None = None


def incident_detail(df: pd.DataFrame, incident_id: str | None) -> dict[str, object] | None:
    """Detail fields for one incident, or ``None`` when ``incident_id`` is not in ``df``.

    ``resolved_at`` is ``NOT_AVAILABLE`` for unresolved incidents; ``mttr`` is
    only included when recorded.
    """
    if incident_id is None or df.empty or "id" not in df.columns:
        return None
    match = df[df["id"] == incident_id]
    if match.empty:
        return None
    row = match.iloc[0]
    detail: dict[str, object] = {
        name: row.get(name)
        for name in (
            "id",
            "title",
            "service",
            "severity",
            "status",
            "reported_at",
            "description",
            "assigned_to",
            "affected_users",
        )
    }
    resolved = row.get("resolved_at")
    detail["resolved_at"] = NOT_AVAILABLE if pd.isna(resolved) else resolved
    mttr = row.get("mttr")
    if not pd.isna(mttr):
        detail["mttr"] = int(mttr)
    return detail


def build_incidents_context(
    df: pd.DataFrame,
    state: TableState,
    selected_id: str | None = None,
) -> IncidentsContext:
    # Summary cards and charts describe the whole snapshot; only the table follows the filters
    view = apply_spec(df, SPEC, state)
    return IncidentsContext(
        view=view,
        page=paginate(view, SPEC.page_size, state.page),
        options={name: filter_options(df, name) for name in SPEC.filter_fields},
        total=len(df),
        open_count=open_incident_count(df),
        critical_open=critical_open_count(df),
        avg_mttr=average_mttr(df),
        severity_counts=category_counts(df, "severity", order=SEVERITY_ORDER),
        trend=incident_trend(df),
        selected=incident_detail(df, selected_id),
    )
