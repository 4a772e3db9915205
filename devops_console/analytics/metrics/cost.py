"""Cloud cost metrics: month-over-month delta, breakdown and run rate."""

from __future__ import annotations

from dataclasses import dataclass

import pandas as pd

from devops_console.core.config import COST_COMPONENTS


@dataclass(frozen=True, slots=True)
class CostDelta:
    latest: float
    previous: float
    delta: float
    percent: str  # two decimals, "0.00" when there is no previous spend

    @property
    def increased(self) -> bool:
        return self.delta > 0


def _totals(costs: pd.DataFrame) -> pd.Series:
    if costs.empty or "total_cost" not in costs.columns:
        return pd.Series(dtype=float)
    return pd.to_numeric(costs["total_cost"], errors="coerce").fillna(0.0)


def latest_cost(costs: pd.DataFrame) -> float:
    totals = _totals(costs)
    return float(totals.iloc[-1]) if len(totals) else 0.0


def cost_delta(costs: pd.DataFrame) -> CostDelta:
    """Compare the last two months of ``costs`` (chronological order)."""
    totals = _totals(costs)
    latest = float(totals.iloc[-1]) if len(totals) >= 1 else 0.0
    previous = float(totals.iloc[-2]) if len(totals) >= 2 else 0.0
    delta = latest - previous
    percent = f"{delta / previous * 100:.2f}" if previous > 0 else "0.00"
    return CostDelta(latest=latest, previous=previous, delta=delta, percent=percent)


def annual_run_rate(costs: pd.DataFrame) -> float:
    return latest_cost(costs) * 12


def cost_breakdown(costs: pd.DataFrame) -> pd.DataFrame:
    """Latest month's spend per component as ``name, value`` pairs."""
    if costs.empty:
        return pd.DataFrame(columns=["name", "value"])
    last = costs.iloc[-1]
    rows = [{"name": label, "value": float(last.get(col, 0.0) or 0.0)} for label, col in COST_COMPONENTS]
    return pd.DataFrame(rows, columns=["name", "value"])


def cost_trend(costs: pd.DataFrame) -> pd.DataFrame:
    """Monthly totals in long form (``month, component, value``) for stacked charts."""
    if costs.empty:
        return pd.DataFrame(columns=["month", "component", "value"])
    value_cols = [col for _, col in COST_COMPONENTS if col in costs.columns]
    labels = {col: label for label, col in COST_COMPONENTS}
    long = costs[["month", *value_cols]].melt(id_vars="month", var_name="component", value_name="value")
    long["component"] = long["component"].map(labels)
    return long
