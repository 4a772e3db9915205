"""Vulnerability metrics."""

from __future__ import annotations

import pandas as pd

from devops_console.core.config import NOT_AVAILABLE, SEVERITY_ORDER


def open_vulnerability_count(vulns: pd.DataFrame) -> int:
    if vulns.empty:
        return 0
    return int((vulns["status"] == "Open").sum())


def critical_open_vulnerability_count(vulns: pd.DataFrame) -> int:
    if vulns.empty:
        return 0
    mask = (vulns["status"] == "Open") & (vulns["severity"] == SEVERITY_ORDER[0])
    return int(mask.sum())


def average_time_to_fix(vulns: pd.DataFrame) -> float | str:
    """Mean days from report to fix over Fixed vulnerabilities, or ``NOT_AVAILABLE``."""
    if vulns.empty or "fixed_at" not in vulns.columns:
        return NOT_AVAILABLE
    fixed = vulns[vulns["status"] == "Fixed"]
    if fixed.empty:
        return NOT_AVAILABLE
    reported = pd.to_datetime(fixed["reported_at"], utc=True, errors="coerce")
    fixed_at = pd.to_datetime(fixed["fixed_at"], utc=True, errors="coerce")
    days = ((fixed_at - reported).dt.total_seconds() / 86400.0).dropna()
    if days.empty:
        return NOT_AVAILABLE
    return float(days.mean())
