"""Pure helpers to build the monitoring & observability section context."""

from __future__ import annotations

from dataclasses import dataclass, field

import pandas as pd

from devops_console.analytics.aggregations.categories import count_where
from devops_console.core.config import MONITORED_SERIES


@dataclass(slots=True)
class MonitoringContext:
    health: pd.DataFrame
    operational: int
    degraded: int
    outage: int
    total_services: int
    series: dict[str, pd.DataFrame] = field(default_factory=dict)


def build_monitoring_context(health: pd.DataFrame, series: dict[str, pd.DataFrame]) -> MonitoringContext:
    return MonitoringContext(
        health=health,
        operational=count_where(health, "status", ["Operational"]),
        degraded=count_where(health, "status", ["Degraded"]),
        outage=count_where(health, "status", ["Outage"]),
        total_services=len(health),
        series={name: series.get(name, pd.DataFrame(columns=["time", "value"])) for name in MONITORED_SERIES},
    )
