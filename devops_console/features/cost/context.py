"""Pure helpers to build the cloud cost section context."""

from __future__ import annotations

from dataclasses import dataclass

import pandas as pd

from devops_console.analytics.metrics.cost import (
    CostDelta,
    annual_run_rate,
    cost_breakdown,
    cost_delta,
    cost_trend,
)


@dataclass(slots=True)
class CostContext:
    costs: pd.DataFrame
    delta: CostDelta
    annual_run_rate: float
    breakdown: pd.DataFrame
    trend: pd.DataFrame


def build_cost_context(costs: pd.DataFrame) -> CostContext:
    delta = cost_delta(costs)
    return CostContext(
        costs=costs,
        delta=delta,
        annual_run_rate=annual_run_rate(costs),
        breakdown=cost_breakdown(costs),
        trend=cost_trend(costs),
    )
