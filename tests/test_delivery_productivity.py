from datetime import date, timedelta

import pandas as pd
import pytest

from devops_console.analytics.metrics.delivery import (
    average_build_duration,
    change_failure_rate,
    recent_deployments,
    total_deployments,
)
from devops_console.analytics.metrics.productivity import (
    average_coverage,
    average_cycle_time,
    merged_prs,
    total_technical_debt,
)
from devops_console.analytics.metrics.security import (
    average_time_to_fix,
    critical_open_vulnerability_count,
    open_vulnerability_count,
)
from devops_console.core.config import NOT_AVAILABLE


def test_change_failure_rate():
    builds = pd.DataFrame({"name": ["a", "b", "c", "d"], "duration": [5, 6, 5, 4], "success": [True, False, True, True]})
    assert change_failure_rate(builds) == 25.0
    assert average_build_duration(builds) == 5.0


def test_change_failure_rate_without_builds_is_zero():
    empty = pd.DataFrame(columns=["name", "duration", "success"])
    assert change_failure_rate(empty) == 0.0
    assert average_build_duration(empty) == NOT_AVAILABLE


def test_deployment_totals_and_recent_order():
    freq = pd.DataFrame({"month": ["Jan", "Feb"], "deployments": [22, 25]})
    assert total_deployments(freq) == 47
    deployments = pd.DataFrame(
        {
            "id": [1, 2, 3],
            "deployed_at": pd.to_datetime(["2024-01-01", "2024-01-03", "2024-01-02"], utc=True),
        }
    )
    recent = recent_deployments(deployments, limit=2)
    assert recent["id"].tolist() == [2, 3]


def _prs(days=40):
    start = date(2024, 1, 1)
    return pd.DataFrame(
        {
            "date": [start + timedelta(days=i) for i in range(days)],
            "open": [5] * days,
            "merged": [0 if i % 2 else 10 for i in range(days)],
            "cycle_time": [float(i) for i in range(days)],
        }
    )


def test_merged_prs_over_most_recent_window():
    prs = _prs(40)
    # last 30 days: indices 10..39, even indices merge 10 each
    assert merged_prs(prs, 30) == 150


def test_cycle_time_only_over_days_with_merges():
    prs = _prs(40)
    expected = sum(range(10, 40, 2)) / 15
    assert average_cycle_time(prs, 30) == pytest.approx(expected)


def test_cycle_time_without_merges_is_not_available():
    prs = _prs(4)
    prs["merged"] = 0
    assert average_cycle_time(prs) == NOT_AVAILABLE
    assert average_cycle_time(prs.iloc[0:0]) == NOT_AVAILABLE


def test_coverage_and_technical_debt():
    quality = pd.DataFrame({"service": ["a", "b"], "coverage": [80.0, 90.0], "technical_debt_hours": [10, 25]})
    assert average_coverage(quality) == 85.0
    assert total_technical_debt(quality) == 35.0
    assert average_coverage(quality.iloc[0:0]) == NOT_AVAILABLE
    assert total_technical_debt(quality.iloc[0:0]) == 0.0


def test_vulnerability_metrics():
    vulns = pd.DataFrame(
        {
            "status": ["Open", "Open", "Fixed", "Ignored"],
            "severity": ["Critical", "Low", "Critical", "Critical"],
            "reported_at": pd.to_datetime(["2024-01-01", "2024-01-01", "2024-01-01", "2024-01-01"], utc=True),
            "fixed_at": pd.to_datetime([None, None, "2024-01-03", None], utc=True),
        }
    )
    assert open_vulnerability_count(vulns) == 2
    assert critical_open_vulnerability_count(vulns) == 1
    assert average_time_to_fix(vulns) == pytest.approx(2.0)
    assert average_time_to_fix(vulns[vulns["status"] != "Fixed"]) == NOT_AVAILABLE
