"""Incident metrics: resolution times and daily trend buckets (pure functions)."""

from __future__ import annotations

import pandas as pd

from devops_console.core.config import INCIDENT_RESOLVED_STATUSES, NOT_AVAILABLE, SEVERITY_ORDER
from devops_console.core.mappers import normalize_datetime_column
from devops_console.core.status import active_incidents, resolved_incidents

TREND_COLUMNS = ["date", "open", "resolved"]


def _resolved_mttr_minutes(df: pd.DataFrame) -> pd.Series | None:
    resolved = resolved_incidents(df)
    if resolved.empty:
        return None
    if "mttr" not in resolved.columns:
        return pd.Series(0.0, index=resolved.index)
    # A resolved incident without a recorded mttr contributes zero minutes
    return pd.to_numeric(resolved["mttr"], errors="coerce").fillna(0.0)


def average_mttr(df: pd.DataFrame) -> float | str:
    """Mean ``mttr`` (minutes) over Resolved/Closed incidents, or ``NOT_AVAILABLE``."""
    minutes = _resolved_mttr_minutes(df)
    if minutes is None:
        return NOT_AVAILABLE
    return float(minutes.mean())


def mean_time_to_restore(df: pd.DataFrame) -> float | str:
    """Platform mean time to restore in hours, or ``NOT_AVAILABLE``."""
    minutes = _resolved_mttr_minutes(df)
    if minutes is None:
        return NOT_AVAILABLE
    return float(minutes.mean()) / 60.0


def open_incident_count(df: pd.DataFrame) -> int:
    return len(active_incidents(df))


def critical_open_count(df: pd.DataFrame) -> int:
    active = active_incidents(df)
    if active.empty:
        return 0
    return int((active["severity"] == SEVERITY_ORDER[0]).sum())


def incident_trend(df: pd.DataFrame) -> pd.DataFrame:
    """Bucket incidents by calendar day reported.

    Returns
    -------
    pd.DataFrame
        Columns ``date`` (datetime.date), ``open`` (incidents reported that day)
        and ``resolved`` (those among them now Resolved/Closed), ascending by date.
    """
    if df.empty or "reported_at" not in df.columns:
        return pd.DataFrame(columns=TREND_COLUMNS)
    tmp = pd.DataFrame(
        {
            "date": normalize_datetime_column(df["reported_at"]).dt.date,
            "resolved": df["status"].isin(INCIDENT_RESOLVED_STATUSES).astype(int),
        }
    )
    tmp = tmp.dropna(subset=["date"])
    if tmp.empty:
        return pd.DataFrame(columns=TREND_COLUMNS)
    agg = (
        tmp.groupby("date", sort=True)
        .agg(open=("resolved", "size"), resolved=("resolved", "sum"))
        .reset_index()
        .sort_values("date")
    )
    agg["open"] = agg["open"].astype(int)
    agg["resolved"] = agg["resolved"].astype(int)
    return agg[TREND_COLUMNS].reset_index(drop=True)
