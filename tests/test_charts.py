from datetime import date, datetime, timedelta

import pandas as pd
import pytz

from devops_console.visual.charts import (
    build_duration_chart,
    category_bar,
    category_pie,
    code_quality_chart,
    cost_trend_chart,
    deployment_frequency_chart,
    incident_trend_chart,
    metric_series_chart,
    pr_activity_chart,
)
from devops_console.visual.palette import badge, color_scale


def _counts():
    return pd.DataFrame({"name": ["Critical", "High"], "value": [3, 5]})


def test_builders_return_none_for_empty_data():
    empty = pd.DataFrame()
    assert category_pie(empty, "severity") is None
    assert category_bar(empty) is None
    assert incident_trend_chart(empty) is None
    assert metric_series_chart(empty, "Latency (ms)") is None
    assert build_duration_chart(empty) is None
    assert deployment_frequency_chart(empty) is None
    assert cost_trend_chart(empty, []) is None
    assert pr_activity_chart(empty) is None
    assert code_quality_chart(empty) is None


def test_category_charts():
    assert category_pie(_counts(), "severity", title="By Severity") is not None
    assert category_pie(_counts()) is not None
    assert category_bar(_counts(), title="By Type") is not None


def test_time_series_charts():
    now = pytz.timezone("UTC").localize(datetime(2024, 6, 15, 12, 0))
    series = pd.DataFrame({"time": [now - timedelta(minutes=5 * i) for i in range(5)], "value": range(5)})
    assert metric_series_chart(series, "Latency (ms)") is not None
    assert metric_series_chart(series, "Error Rate (%)", area=True) is not None
    trend = pd.DataFrame({"date": [date(2024, 1, 1), date(2024, 1, 2)], "open": [2, 1], "resolved": [1, 0]})
    assert incident_trend_chart(trend) is not None


def test_delivery_charts():
    builds = pd.DataFrame({"name": ["Build #1", "Build #2"], "duration": [5.2, 6.1], "success": [True, False]})
    assert build_duration_chart(builds) is not None
    freq = pd.DataFrame({"month": ["Jan", "Feb"], "deployments": [22, 25]})
    assert deployment_frequency_chart(freq) is not None


def test_cost_and_productivity_charts():
    trend = pd.DataFrame({"month": ["Jan 2024", "Jan 2024"], "component": ["Compute", "Other"], "value": [10.0, 2.0]})
    assert cost_trend_chart(trend, ["Jan 2024"]) is not None
    activity = pd.DataFrame({"date": [date(2024, 1, 1)] * 2, "series": ["open", "merged"], "value": [5, 10]})
    assert pr_activity_chart(activity) is not None
    quality = pd.DataFrame(
        {"service": ["a", "b"], "coverage": [80.0, 70.0], "bugs_found": [1, 2], "technical_debt_hours": [10, 20]}
    )
    assert code_quality_chart(quality) is not None


def test_palettes_are_per_entity():
    # "Open" means different things for incidents and vulnerabilities
    assert badge("incident_status", "Open") != badge("vulnerability_status", "Open")
    assert badge("unknown", "Open") == "Open"
    assert color_scale("severity") is not None
