from dataclasses import asdict

from devops_console.core.config import (
    INCIDENT_RESOLVED_STATUSES,
    MOCK_SERVICES,
    SEVERITY_ORDER,
)
from devops_console.core.mock_source import MockEntitySource


def test_same_seed_and_clock_reproduce_collections(fixed_now):
    a = MockEntitySource(seed=7, now=fixed_now)
    b = MockEntitySource(seed=7, now=fixed_now)
    assert [asdict(i) for i in a.load_incidents()] == [asdict(i) for i in b.load_incidents()]
    assert [asdict(v) for v in a.load_vulnerabilities()] == [asdict(v) for v in b.load_vulnerabilities()]


def test_incident_collection_shape(fixed_now):
    incidents = MockEntitySource(seed=1, now=fixed_now).load_incidents()
    assert len(incidents) == 50
    assert incidents[0].id == "INC-1000"
    assert len({i.id for i in incidents}) == 50
    for inc in incidents:
        assert inc.severity in SEVERITY_ORDER
        assert inc.reported_at <= fixed_now
        if inc.status in INCIDENT_RESOLVED_STATUSES:
            assert inc.reported_at <= inc.resolved_at <= fixed_now
            assert inc.mttr >= 0


def test_series_cover_last_day_every_five_minutes(fixed_now):
    source = MockEntitySource(seed=2, now=fixed_now)
    latency = source.load_latency_series()
    assert len(latency) == 24 * 12 + 1
    assert latency[-1].time == fixed_now
    assert all(20 <= p.value <= 200 for p in latency)
    throughput = source.load_throughput_series()
    assert all(float(p.value).is_integer() for p in throughput)


def test_cost_months_end_at_current_month(fixed_now):
    costs = MockEntitySource(seed=3, now=fixed_now).load_cloud_costs()
    assert len(costs) == 12
    assert costs[-1].month == "Jun 2024"
    assert costs[0].month == "Jul 2023"
    assert all(c.other >= 0 for c in costs)


def test_per_service_collections(fixed_now):
    source = MockEntitySource(seed=4, now=fixed_now)
    assert [h.service for h in source.load_service_health()] == list(MOCK_SERVICES)
    assert [q.service for q in source.load_code_quality()] == list(MOCK_SERVICES)


def test_builds_and_deployments_are_fixed(fixed_now):
    source = MockEntitySource(seed=5, now=fixed_now)
    builds = source.load_builds()
    assert len(builds) == 50
    assert builds[0].name == "Build #501"
    assert sum(not b.success for b in builds) == 10
    deployments = source.load_deployments()
    assert len(deployments) == 10
    assert deployments[0].deployed_at < fixed_now
    assert sum(f.deployments for f in source.load_deployment_frequency()) == 458


def test_remaining_collection_sizes(fixed_now):
    source = MockEntitySource(seed=6, now=fixed_now)
    assert len(source.load_environments()) == 6
    assert len(source.load_feature_flags()) == 20
    assert len(source.load_audit_logs()) == 500
    assert len(source.load_pull_requests()) == 60
