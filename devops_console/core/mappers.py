"""Mapping console records (dataclass models) into pandas DataFrames."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import asdict, fields
from typing import Any

import pandas as pd
import pytz

from .config import TIMEZONE
from .models import (
    AuditLogEntry,
    BuildRecord,
    CloudCost,
    CodeQualityMetric,
    Deployment,
    DeploymentFrequency,
    EnvironmentStatus,
    FeatureFlag,
    Incident,
    MetricDataPoint,
    PullRequestMetric,
    ServiceHealth,
    Vulnerability,
)

ENTITY_MODELS: dict[str, type] = {
    "incidents": Incident,
    "service_health": ServiceHealth,
    "latency_series": MetricDataPoint,
    "error_rate_series": MetricDataPoint,
    "throughput_series": MetricDataPoint,
    "vulnerabilities": Vulnerability,
    "cloud_costs": CloudCost,
    "environments": EnvironmentStatus,
    "feature_flags": FeatureFlag,
    "audit_logs": AuditLogEntry,
    "pull_requests": PullRequestMetric,
    "code_quality": CodeQualityMetric,
    "builds": BuildRecord,
    "deployment_frequency": DeploymentFrequency,
    "deployments": Deployment,
}

# Columns holding timestamps, normalized to tz-aware values in TIMEZONE
DATETIME_COLUMNS: frozenset[str] = frozenset(
    {
        "reported_at",
        "resolved_at",
        "fixed_at",
        "last_updated",
        "last_sync",
        "timestamp",
        "time",
        "deployed_at",
    }
)


def entity_columns(entity: str) -> list[str]:
    """Return the DataFrame columns produced for ``entity``."""
    try:
        model = ENTITY_MODELS[entity]
    except KeyError:
        raise ValueError(f"Unknown entity {entity!r}") from None
    columns = [f.name for f in fields(model)]
    if model is EnvironmentStatus:
        columns.append("service_count")
    return columns


def normalize_datetime_column(values: pd.Series, tz=None) -> pd.Series:
    """Coerce a column to tz-aware timestamps in ``tz`` (naive values are localized)."""
    target = tz or pytz.timezone(TIMEZONE)
    ts = pd.to_datetime(values, errors="coerce")
    if getattr(ts.dt, "tz", None) is None:
        return ts.dt.tz_localize(target)
    return ts.dt.tz_convert(target)


def _record_to_row(record: Any) -> dict[str, Any]:
    row = asdict(record)
    if isinstance(record, EnvironmentStatus):
        row["service_count"] = len(record.deployed_services)
    return row


def records_to_dataframe(entity: str, records: Iterable[Any]) -> pd.DataFrame:
    """Build the snapshot DataFrame for ``entity`` from model instances.

    Empty inputs still produce the full column set so downstream filters and
    aggregations can reference fields without guarding for missing columns.
    """
    columns = entity_columns(entity)
    rows = [_record_to_row(r) for r in records]
    df = pd.DataFrame(rows, columns=columns)
    for col in DATETIME_COLUMNS.intersection(df.columns):
        df[col] = normalize_datetime_column(df[col])
    if entity == "pull_requests" and not df.empty:
        df["date"] = pd.to_datetime(df["date"]).dt.date
    return df
