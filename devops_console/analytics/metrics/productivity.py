"""Developer productivity metrics over pull request and code quality records."""

from __future__ import annotations

import pandas as pd

from devops_console.core.config import NOT_AVAILABLE, PR_WINDOW_DAYS


def _window(prs: pd.DataFrame, days: int) -> pd.DataFrame:
    if prs.empty:
        return prs
    if "date" in prs.columns:
        prs = prs.sort_values("date", kind="stable")
    return prs.tail(days)


def merged_prs(prs: pd.DataFrame, days: int = PR_WINDOW_DAYS) -> int:
    window = _window(prs, days)
    if window.empty:
        return 0
    return int(pd.to_numeric(window["merged"], errors="coerce").fillna(0).sum())


def average_cycle_time(prs: pd.DataFrame, days: int = PR_WINDOW_DAYS) -> float | str:
    """Mean daily cycle time (hours) over window days that merged at least one PR."""
    window = _window(prs, days)
    if window.empty:
        return NOT_AVAILABLE
    merged_days = window[pd.to_numeric(window["merged"], errors="coerce").fillna(0) > 0]
    if merged_days.empty:
        return NOT_AVAILABLE
    return float(pd.to_numeric(merged_days["cycle_time"], errors="coerce").fillna(0).mean())


def average_coverage(quality: pd.DataFrame) -> float | str:
    if quality.empty or "coverage" not in quality.columns:
        return NOT_AVAILABLE
    return float(pd.to_numeric(quality["coverage"], errors="coerce").fillna(0).mean())


def total_technical_debt(quality: pd.DataFrame) -> float:
    if quality.empty or "technical_debt_hours" not in quality.columns:
        return 0.0
    return float(pd.to_numeric(quality["technical_debt_hours"], errors="coerce").fillna(0).sum())
