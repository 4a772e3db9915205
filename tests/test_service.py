from datetime import datetime

import pandas as pd
import pytest
import pytz

from devops_console.core.mappers import entity_columns, normalize_datetime_column, records_to_dataframe
from devops_console.core.models import BuildRecord, DeployedService, EnvironmentStatus, Incident
from devops_console.core.service import DashboardService
from devops_console.core.source import StaticEntitySource, load_entity

NOW = pytz.timezone("UTC").localize(datetime(2024, 6, 15, 12, 0, 0))


def _incident(i, status="Open"):
    resolved = status in ("Resolved", "Closed")
    return Incident(
        id=f"INC-{i}",
        title=f"Incident {i}",
        service="API Gateway",
        status=status,
        severity="High",
        reported_at=NOW,
        description="d",
        assigned_to="alice.d",
        affected_users=10,
        resolved_at=NOW if resolved else None,
        mttr=0 if resolved else None,
    )


def test_static_source_returns_fresh_lists():
    source = StaticEntitySource(incidents=[_incident(1)])
    first = load_entity(source, "incidents")
    first.clear()
    assert len(load_entity(source, "incidents")) == 1
    assert load_entity(source, "vulnerabilities") == []


def test_static_source_rejects_unknown_entities():
    with pytest.raises(ValueError):
        StaticEntitySource(tickets=[])


def test_load_maps_records_to_frame_without_delay():
    source = StaticEntitySource(incidents=[_incident(1), _incident(2, "Closed")])
    service = DashboardService(source, latency_scale=0)
    messages = []
    snap = service.load("incidents", progress=lambda msg, cur, tot: messages.append(msg))
    assert snap.entity == "incidents"
    assert snap.data["id"].tolist() == ["INC-1", "INC-2"]
    assert str(snap.data["reported_at"].dt.tz) == "UTC"
    assert messages == ["Requesting incidents"]


def test_unknown_entity_and_section_rejected():
    service = DashboardService(StaticEntitySource(), latency_scale=0)
    with pytest.raises(ValueError):
        service.load("tickets")
    with pytest.raises(ValueError):
        service.load_section("Billing")


def test_load_section_reports_progress_per_entity():
    builds = [BuildRecord("Build #1", 5.0, True)]
    service = DashboardService(StaticEntitySource(builds=builds), latency_scale=0)
    events = []
    data = service.load_section("Overview", progress=lambda msg, cur, tot: events.append((cur, tot)))
    assert set(data.snapshots) == {"builds", "deployment_frequency", "deployments", "incidents"}
    assert events == [(1, 4), (2, 4), (3, 4), (4, 4)]
    assert len(data.frame("builds")) == 1
    assert data.frame("deployments").empty
    assert data.frame("not_loaded").empty


def test_empty_collections_keep_full_column_set():
    df = records_to_dataframe("incidents", [])
    assert df.empty
    assert list(df.columns) == entity_columns("incidents")


def test_environment_rows_carry_service_count():
    env = EnvironmentStatus(
        "ENV-300",
        "Production",
        "Healthy",
        NOW,
        [DeployedService("API Gateway", "v1.2.3"), DeployedService("User Service", "v2.0.0")],
    )
    df = records_to_dataframe("environments", [env])
    assert df.loc[0, "service_count"] == 2
    assert df.loc[0, "deployed_services"][0] == {"name": "API Gateway", "version": "v1.2.3"}


def test_naive_timestamps_are_localized():
    values = normalize_datetime_column(pd.Series([datetime(2024, 1, 1, 8, 30)]))
    assert str(values.dt.tz) == "UTC"
    assert values.iloc[0].hour == 8


def test_unknown_entity_has_no_columns():
    with pytest.raises(ValueError):
        entity_columns("tickets")
