"""Delivery metrics: builds, deployments and change failure rate."""

from __future__ import annotations

import pandas as pd

from devops_console.core.config import NOT_AVAILABLE, RECENT_DEPLOYMENTS_LIMIT


def change_failure_rate(builds: pd.DataFrame) -> float:
    """Failed builds as a percentage of all builds in the window (0.0 when empty)."""
    if builds.empty or "success" not in builds.columns:
        return 0.0
    failed = int((~builds["success"].astype(bool)).sum())
    return failed / len(builds) * 100.0


def average_build_duration(builds: pd.DataFrame) -> float | str:
    if builds.empty or "duration" not in builds.columns:
        return NOT_AVAILABLE
    return float(pd.to_numeric(builds["duration"], errors="coerce").fillna(0).mean())


def total_deployments(frequency: pd.DataFrame) -> int:
    if frequency.empty or "deployments" not in frequency.columns:
        return 0
    return int(pd.to_numeric(frequency["deployments"], errors="coerce").fillna(0).sum())


def recent_deployments(deployments: pd.DataFrame, limit: int = RECENT_DEPLOYMENTS_LIMIT) -> pd.DataFrame:
    """Most recent deployments first."""
    if deployments.empty:
        return deployments.copy()
    out = deployments.copy()
    if "deployed_at" in out.columns:
        out = out.sort_values("deployed_at", ascending=False, na_position="last")
    return out.head(limit).reset_index(drop=True)
