"""Pure helpers to build the developer productivity section context."""

from __future__ import annotations

from dataclasses import dataclass

import pandas as pd

from devops_console.analytics.metrics.productivity import (
    average_coverage,
    average_cycle_time,
    merged_prs,
    total_technical_debt,
)
from devops_console.core.config import PR_WINDOW_DAYS


@dataclass(slots=True)
class ProductivityContext:
    merged_recent: int
    avg_cycle_time: float | str
    avg_coverage: float | str
    technical_debt_hours: float
    pr_activity: pd.DataFrame
    code_quality: pd.DataFrame


def build_productivity_context(
    prs: pd.DataFrame,
    quality: pd.DataFrame,
    window_days: int = PR_WINDOW_DAYS,
) -> ProductivityContext:
    activity = pd.DataFrame(columns=["date", "series", "value"])
    if not prs.empty:
        activity = prs[["date", "open", "merged"]].melt(id_vars="date", var_name="series", value_name="value")
    return ProductivityContext(
        merged_recent=merged_prs(prs, window_days),
        avg_cycle_time=average_cycle_time(prs, window_days),
        avg_coverage=average_coverage(quality),
        technical_debt_hours=total_technical_debt(quality),
        pr_activity=activity,
        code_quality=quality,
    )
