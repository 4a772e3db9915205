"""Pure helpers to build the delivery overview context."""

from __future__ import annotations

from dataclasses import dataclass

import pandas as pd

from devops_console.analytics.metrics.delivery import (
    average_build_duration,
    change_failure_rate,
    recent_deployments,
    total_deployments,
)
from devops_console.analytics.metrics.incidents import mean_time_to_restore


@dataclass(slots=True)
class OverviewContext:
    total_deployments: int
    change_failure_rate: float
    avg_build_duration: float | str
    mean_time_to_restore: float | str
    builds: pd.DataFrame
    frequency: pd.DataFrame
    recent: pd.DataFrame


def build_overview_context(
    builds: pd.DataFrame,
    frequency: pd.DataFrame,
    deployments: pd.DataFrame,
    incidents: pd.DataFrame,
) -> OverviewContext:
    return OverviewContext(
        total_deployments=total_deployments(frequency),
        change_failure_rate=change_failure_rate(builds),
        avg_build_duration=average_build_duration(builds),
        mean_time_to_restore=mean_time_to_restore(incidents),
        builds=builds,
        frequency=frequency,
        recent=recent_deployments(deployments),
    )
