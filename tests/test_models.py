from datetime import datetime, timedelta

import pytest
import pytz

from devops_console.core.models import (
    CloudCost,
    CodeQualityMetric,
    DeployedService,
    Deployment,
    EnvironmentStatus,
    FeatureFlag,
    Incident,
    ServiceHealth,
    Vulnerability,
)

NOW = pytz.timezone("UTC").localize(datetime(2024, 6, 15, 12, 0, 0))


def _incident(**overrides):
    fields = dict(
        id="INC-1",
        title="Service API Gateway experiencing High Latency",
        service="API Gateway",
        status="Open",
        severity="High",
        reported_at=NOW,
        description="Root cause analysis initiated.",
        assigned_to="alice.d",
        affected_users=100,
    )
    fields.update(overrides)
    return Incident(**fields)


def test_open_incident_without_resolution_is_valid():
    assert _incident().resolved_at is None


def test_resolved_incident_requires_resolution_fields():
    with pytest.raises(ValueError):
        _incident(status="Resolved")
    with pytest.raises(ValueError):
        _incident(status="Closed", resolved_at=NOW + timedelta(minutes=5))
    ok = _incident(status="Closed", resolved_at=NOW + timedelta(minutes=5), mttr=5)
    assert ok.mttr == 5


def test_open_incident_rejects_resolution_fields():
    with pytest.raises(ValueError):
        _incident(resolved_at=NOW, mttr=0)


def test_resolution_cannot_precede_report():
    with pytest.raises(ValueError):
        _incident(status="Resolved", resolved_at=NOW - timedelta(hours=1), mttr=60)


def test_unknown_enum_values_rejected():
    with pytest.raises(ValueError):
        _incident(severity="Urgent")
    with pytest.raises(ValueError):
        ServiceHealth("API Gateway", "Down", 10.0, 1.0, 100, NOW)
    with pytest.raises(ValueError):
        Deployment(1, "API Gateway", "v1", "Rolled Back", NOW, "Production", "bob.s")


def test_fixed_at_only_for_fixed_vulnerabilities():
    base = dict(id="VULN-1", service="User Service", severity="Low", type="XSS", description="d", reported_at=NOW)
    with pytest.raises(ValueError):
        Vulnerability(status="Fixed", **base)
    with pytest.raises(ValueError):
        Vulnerability(status="Open", fixed_at=NOW, **base)
    assert Vulnerability(status="Fixed", fixed_at=NOW + timedelta(days=1), **base).fixed_at is not None


def test_cost_components_must_add_up():
    CloudCost("Jan 2024", 100.0, 50.0, 20.0, 10.0, 15.0, 5.02)
    with pytest.raises(ValueError):
        CloudCost("Jan 2024", 100.0, 50.0, 20.0, 10.0, 15.0, 10.0)


def test_environment_services_unique_by_name():
    svc = DeployedService("API Gateway", "v1.0.0")
    with pytest.raises(ValueError):
        EnvironmentStatus("ENV-1", "Production", "Healthy", NOW, [svc, DeployedService("API Gateway", "v2.0.0")])
    assert EnvironmentStatus("ENV-1", "Production", "Healthy", NOW, [svc]).deployed_services == [svc]


def test_percentage_ranges():
    with pytest.raises(ValueError):
        FeatureFlag("FF-1", "f", "s", "Production", True, 101, "d", NOW, "bob.s")
    with pytest.raises(ValueError):
        CodeQualityMetric("s", 100, 0, 0, -1.0, 5)
    with pytest.raises(ValueError):
        ServiceHealth("API Gateway", "Operational", 10.0, 120.0, 100, NOW)
