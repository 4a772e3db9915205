import pandas as pd
import pytest

from devops_console.analytics.metrics.cost import (
    annual_run_rate,
    cost_breakdown,
    cost_delta,
    cost_trend,
    latest_cost,
)


def _costs(totals):
    rows = []
    for i, total in enumerate(totals):
        rows.append(
            {
                "month": f"M{i + 1}",
                "total_cost": total,
                "compute": total * 0.5,
                "storage": total * 0.2,
                "network": total * 0.1,
                "database": total * 0.15,
                "other": total * 0.05,
            }
        )
    return pd.DataFrame(rows)


def test_delta_against_previous_month():
    delta = cost_delta(_costs([100.0, 150.0]))
    assert delta.latest == 150.0
    assert delta.previous == 100.0
    assert delta.delta == 50.0
    assert delta.percent == "50.00"
    assert delta.increased


def test_delta_decrease_has_negative_percent():
    delta = cost_delta(_costs([200.0, 150.0]))
    assert delta.percent == "-25.00"
    assert not delta.increased


def test_delta_with_zero_previous():
    delta = cost_delta(_costs([0.0, 150.0]))
    assert delta.percent == "0.00"
    assert delta.delta == 150.0


def test_single_month_and_empty():
    single = cost_delta(_costs([120.0]))
    assert single.previous == 0.0
    assert single.percent == "0.00"
    empty = cost_delta(pd.DataFrame())
    assert empty.latest == 0.0
    assert empty.delta == 0.0


def test_run_rate_and_latest():
    costs = _costs([100.0, 150.0])
    assert latest_cost(costs) == 150.0
    assert annual_run_rate(costs) == 1800.0


def test_breakdown_uses_latest_month():
    breakdown = cost_breakdown(_costs([100.0, 200.0]))
    assert breakdown["name"].tolist() == ["Compute", "Storage", "Network", "Database", "Other"]
    assert breakdown["value"].sum() == pytest.approx(200.0)


def test_trend_is_long_form():
    trend = cost_trend(_costs([100.0, 200.0, 300.0]))
    assert list(trend.columns) == ["month", "component", "value"]
    assert len(trend) == 15
    assert set(trend["component"]) == {"Compute", "Storage", "Network", "Database", "Other"}
