from datetime import datetime

import pandas as pd
import pytz

from devops_console.analytics.metrics.incidents import (
    average_mttr,
    critical_open_count,
    incident_trend,
    mean_time_to_restore,
    open_incident_count,
)
from devops_console.core.config import NOT_AVAILABLE
from devops_console.core.status import is_active_incident, is_resolved_incident

UTC = pytz.timezone("UTC")


def _ts(day, hour=10):
    return UTC.localize(datetime(2024, 1, day, hour, 0, 0))


def _incidents():
    return pd.DataFrame(
        [
            {"id": "INC-1", "status": "Resolved", "severity": "High", "mttr": 10, "reported_at": _ts(2)},
            {"id": "INC-2", "status": "Closed", "severity": "Low", "mttr": 30, "reported_at": _ts(1)},
            {"id": "INC-3", "status": "Open", "severity": "Critical", "mttr": None, "reported_at": _ts(1, 18)},
            {"id": "INC-4", "status": "Investigating", "severity": "Critical", "mttr": None, "reported_at": _ts(2)},
            {"id": "INC-5", "status": "Closed", "severity": "Critical", "mttr": 20, "reported_at": _ts(3)},
        ]
    )


def test_average_mttr_over_resolved_and_closed():
    assert average_mttr(_incidents()) == 20.0


def test_average_mttr_without_resolved_incidents_is_not_available():
    df = _incidents()
    assert average_mttr(df[df["status"].isin(["Open", "Investigating"])]) == NOT_AVAILABLE
    assert average_mttr(pd.DataFrame()) == NOT_AVAILABLE


def test_missing_mttr_on_resolved_incident_counts_as_zero():
    df = pd.DataFrame([{"status": "Resolved", "mttr": 40}, {"status": "Closed", "mttr": None}])
    assert average_mttr(df) == 20.0


def test_mean_time_to_restore_in_hours():
    df = pd.DataFrame([{"status": "Resolved", "mttr": 90}, {"status": "Closed", "mttr": 30}])
    assert mean_time_to_restore(df) == 1.0
    assert mean_time_to_restore(df.iloc[0:0]) == NOT_AVAILABLE


def test_open_and_critical_counts():
    df = _incidents()
    assert open_incident_count(df) == 2
    assert critical_open_count(df) == 2


def test_trend_is_sorted_by_day():
    trend = incident_trend(_incidents())
    assert [d.isoformat() for d in trend["date"]] == ["2024-01-01", "2024-01-02", "2024-01-03"]
    assert trend["open"].tolist() == [2, 2, 1]
    assert trend["resolved"].tolist() == [1, 1, 1]
    assert trend["open"].sum() == len(_incidents())


def test_trend_empty():
    trend = incident_trend(pd.DataFrame())
    assert trend.empty
    assert list(trend.columns) == ["date", "open", "resolved"]


def test_status_predicates():
    assert is_resolved_incident("Resolved")
    assert not is_resolved_incident("Open")
    assert is_active_incident("Investigating")
    assert not is_active_incident(None)
