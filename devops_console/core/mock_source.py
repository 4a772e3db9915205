"""Randomized Entity Source producing demo-bank console data.

Every ``load_*`` call draws a fresh collection from the source's random
generator; two sources built with the same ``seed`` and ``now`` produce the
same sequence of collections.
"""

from __future__ import annotations

from datetime import datetime, timedelta

import numpy as np
import pytz

from .config import (
    AUDIT_ACTIONS,
    AUDIT_RESOURCE_TYPES,
    INCIDENT_RESOLVED_STATUSES,
    INCIDENT_STATUSES,
    INCIDENT_SYMPTOMS,
    MOCK_ENVIRONMENTS,
    MOCK_SERVICES,
    MOCK_USERS,
    ROLLOUT_STEPS,
    SEVERITY_ORDER,
    TIMEZONE,
    VULNERABILITY_STATUSES,
    VULNERABILITY_TYPES,
)
from .models import (
    AuditLogEntry,
    BuildRecord,
    CloudCost,
    CodeQualityMetric,
    DeployedService,
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

INCIDENT_COUNT = 50
VULNERABILITY_COUNT = 100
COST_MONTHS = 12
FEATURE_FLAG_COUNT = 20
AUDIT_LOG_COUNT = 500
PR_DAYS = 60
SERIES_STEP_MINUTES = 5
BASE_MONTHLY_COST = 10000

# Build pipeline history: 20-build duration cycle, failures at fixed offsets
BUILD_DURATION_CYCLE = (
    5.2, 5.5, 4.8, 6.1, 5.4, 5.8, 5.1, 6.3, 5.0, 5.7,
    4.9, 6.0, 5.6, 6.5, 5.3, 5.9, 4.7, 6.2, 5.0, 5.5,
)  # fmt: skip
BUILD_FAILURE_OFFSETS = frozenset({3, 7, 13, 17})
FIRST_BUILD_NUMBER = 501
BUILD_COUNT = 50

MONTHLY_DEPLOYMENTS = (
    ("Jan", 22),
    ("Feb", 25),
    ("Mar", 30),
    ("Apr", 28),
    ("May", 35),
    ("Jun", 42),
    ("Jul", 38),
    ("Aug", 45),
    ("Sep", 40),
    ("Oct", 50),
    ("Nov", 48),
    ("Dec", 55),
)

# (service, version, status, hours ago, environment, author)
RECENT_DEPLOYMENTS = (
    ("API Gateway", "v1.25.3", "Success", 2, "Production", "alice.d"),
    ("Frontend App", "v2.10.1", "Success", 8, "Production", "bob.s"),
    ("Transactions API", "v1.15.0", "Failed", 24, "Production", "charlie.m"),
    ("AI Advisor API", "v1.8.2", "Success", 48, "Production", "diana.p"),
    ("User Service", "v3.0.5", "Success", 72, "Production", "eve.w"),
    ("Reporting Service", "v0.9.1", "Pending", 96, "Staging", "frank.z"),
    ("Fraud Detection", "v1.1.2", "Success", 120, "Production", "grace.l"),
    ("Notifications", "v1.0.0", "Failed", 144, "Staging", "harry.k"),
    ("Auth Service", "v1.5.0", "Success", 168, "Production", "isabel.t"),
    ("Payment Gateway", "v2.2.0", "Success", 192, "Production", "john.j"),
)


class MockEntitySource:
    def __init__(self, seed: int | None = None, now: datetime | None = None):
        self._rng = np.random.default_rng(seed)
        tz = pytz.timezone(TIMEZONE)
        self._now = now if now is not None else datetime.now(tz)

    # ------------------ Random helpers ------------------
    def _choice(self, options):
        return options[int(self._rng.integers(len(options)))]

    def _int(self, low: int, high: int) -> int:
        """Uniform integer in the inclusive range [low, high]."""
        return int(self._rng.integers(low, high + 1))

    def _float(self, low: float, high: float, decimals: int) -> float:
        return round(float(self._rng.uniform(low, high)), decimals)

    def _between(self, start: datetime, end: datetime) -> datetime:
        return start + (end - start) * float(self._rng.random())

    def _since(self, **delta) -> datetime:
        return self._between(self._now - timedelta(**delta), self._now)

    # ------------------ Loaders ------------------
    def load_incidents(self) -> list[Incident]:
        incidents: list[Incident] = []
        for i in range(INCIDENT_COUNT):
            reported = self._since(days=30)
            status = self._choice(INCIDENT_STATUSES)
            resolved = None
            mttr = None
            if status in INCIDENT_RESOLVED_STATUSES:
                resolved = self._between(reported, self._now)
                mttr = round((resolved - reported).total_seconds() / 60)
            key = f"INC-{1000 + i}"
            incidents.append(
                Incident(
                    id=key,
                    title=f"Service {self._choice(MOCK_SERVICES)} experiencing {self._choice(INCIDENT_SYMPTOMS)}",
                    service=self._choice(MOCK_SERVICES),
                    status=status,
                    severity=self._choice(SEVERITY_ORDER),
                    reported_at=reported,
                    resolved_at=resolved,
                    mttr=mttr,
                    description=f"Detailed investigation for incident {key}. Root cause analysis initiated.",
                    assigned_to=self._choice(MOCK_USERS),
                    affected_users=self._int(100, 50000),
                )
            )
        return incidents

    def _series(self, low: float, high: float, decimals: int | None) -> list[MetricDataPoint]:
        points: list[MetricDataPoint] = []
        current = self._now - timedelta(hours=24)
        while current <= self._now:
            if decimals is None:
                value = float(self._int(int(low), int(high)))
            else:
                value = self._float(low, high, decimals)
            points.append(MetricDataPoint(time=current, value=value))
            current += timedelta(minutes=SERIES_STEP_MINUTES)
        return points

    def load_latency_series(self) -> list[MetricDataPoint]:
        return self._series(20, 200, 2)

    def load_error_rate_series(self) -> list[MetricDataPoint]:
        return self._series(0.1, 5, 2)

    def load_throughput_series(self) -> list[MetricDataPoint]:
        return self._series(1000, 10000, None)

    def load_service_health(self) -> list[ServiceHealth]:
        return [
            ServiceHealth(
                service=service,
                status=self._choice(("Operational", "Degraded", "Outage")),
                latency=self._float(50, 500, 2),
                error_rate=self._float(0.01, 10, 2),
                throughput=self._int(500, 15000),
                last_updated=self._since(hours=1),
            )
            for service in MOCK_SERVICES
        ]

    def load_vulnerabilities(self) -> list[Vulnerability]:
        vulns: list[Vulnerability] = []
        for i in range(VULNERABILITY_COUNT):
            reported = self._since(days=90)
            status = self._choice(VULNERABILITY_STATUSES)
            fixed = self._between(reported, self._now) if status == "Fixed" else None
            vulns.append(
                Vulnerability(
                    id=f"VULN-{2000 + i}",
                    service=self._choice(MOCK_SERVICES),
                    severity=self._choice(SEVERITY_ORDER),
                    type=self._choice(VULNERABILITY_TYPES),
                    description=(
                        f"Found a {self._choice(VULNERABILITY_TYPES)} vulnerability "
                        f"in {self._choice(MOCK_SERVICES)}."
                    ),
                    status=status,
                    reported_at=reported,
                    fixed_at=fixed,
                )
            )
        return vulns

    def _month_labels(self, count: int) -> list[str]:
        labels: list[str] = []
        year, month = self._now.year, self._now.month
        for _ in range(count):
            labels.append(datetime(year, month, 1).strftime("%b %Y"))
            month -= 1
            if month == 0:
                year, month = year - 1, 12
        return list(reversed(labels))

    def load_cloud_costs(self) -> list[CloudCost]:
        costs: list[CloudCost] = []
        for month in self._month_labels(COST_MONTHS):
            total = float(BASE_MONTHLY_COST + self._int(-1000, 5000))
            parts = [
                self._float(0.40 * total, 0.60 * total, 2),
                self._float(0.10 * total, 0.20 * total, 2),
                self._float(0.05 * total, 0.15 * total, 2),
                self._float(0.10 * total, 0.25 * total, 2),
            ]
            # Keep the remainder non-negative so the components still add up
            if sum(parts) > total:
                scale = 0.95 * total / sum(parts)
                parts = [round(p * scale, 2) for p in parts]
            other = round(total - sum(parts), 2)
            compute, storage, network, database = parts
            costs.append(
                CloudCost(
                    month=month,
                    total_cost=total,
                    compute=compute,
                    storage=storage,
                    network=network,
                    database=database,
                    other=other,
                )
            )
        return costs

    def load_environments(self) -> list[EnvironmentStatus]:
        envs: list[EnvironmentStatus] = []
        base = len(MOCK_ENVIRONMENTS)
        for i in range(base + 2):
            name = MOCK_ENVIRONMENTS[i % base]
            if i >= base:
                name = f"{name}-{i // base + 1}"
            deployed: dict[str, DeployedService] = {}
            for _ in range(self._int(3, 10)):
                svc = self._choice(MOCK_SERVICES)
                version = f"v{self._int(1, 5)}.{self._int(0, 10)}.{self._int(0, 50)}"
                deployed.setdefault(svc, DeployedService(name=svc, version=version))
            envs.append(
                EnvironmentStatus(
                    id=f"ENV-{300 + i}",
                    name=name,
                    status=self._choice(("Healthy", "Degraded", "Offline")),
                    deployed_services=list(deployed.values()),
                    last_sync=self._since(hours=12),
                )
            )
        return envs

    def load_feature_flags(self) -> list[FeatureFlag]:
        return [
            FeatureFlag(
                id=f"FF-{400 + i}",
                name=f"feature-x-{i}",
                service=self._choice(MOCK_SERVICES),
                environment=self._choice(MOCK_ENVIRONMENTS),
                enabled=bool(self._rng.random() > 0.3),
                rollout_percentage=int(self._choice(ROLLOUT_STEPS)),
                description="Enables or disables feature X for testing.",
                last_updated=self._since(days=7),
                updated_by=self._choice(MOCK_USERS),
            )
            for i in range(FEATURE_FLAG_COUNT)
        ]

    def load_audit_logs(self) -> list[AuditLogEntry]:
        logs: list[AuditLogEntry] = []
        for i in range(AUDIT_LOG_COUNT):
            action = self._choice(AUDIT_ACTIONS)
            resource_type = self._choice(AUDIT_RESOURCE_TYPES)
            resource_id = f"{resource_type[:3].upper()}-{self._int(100, 999)}"
            logs.append(
                AuditLogEntry(
                    id=f"AUDIT-{5000 + i}",
                    timestamp=self._since(days=30),
                    user=self._choice(MOCK_USERS),
                    action=action,
                    resource_type=resource_type,
                    resource_id=resource_id,
                    details=f"{action} action performed on {resource_type} {resource_id}.",
                    ip_address=f"192.168.{self._int(1, 255)}.{self._int(1, 255)}",
                )
            )
        return logs

    def load_pull_requests(self) -> list[PullRequestMetric]:
        start = self._now.date() - timedelta(days=PR_DAYS)
        return [
            PullRequestMetric(
                date=start + timedelta(days=i),
                open=self._int(5, 20),
                merged=self._int(10, 30),
                cycle_time=self._float(1.5, 24, 2),
            )
            for i in range(PR_DAYS)
        ]

    def load_code_quality(self) -> list[CodeQualityMetric]:
        return [
            CodeQualityMetric(
                service=service,
                lines_of_code=self._int(5000, 100000),
                bugs_found=self._int(0, 20),
                vulnerabilities_found=self._int(0, 10),
                coverage=self._float(60, 95, 2),
                technical_debt_hours=self._int(10, 200),
            )
            for service in MOCK_SERVICES
        ]

    def load_builds(self) -> list[BuildRecord]:
        cycle = len(BUILD_DURATION_CYCLE)
        return [
            BuildRecord(
                name=f"Build #{FIRST_BUILD_NUMBER + i}",
                duration=BUILD_DURATION_CYCLE[i % cycle],
                success=(i % cycle) not in BUILD_FAILURE_OFFSETS,
            )
            for i in range(BUILD_COUNT)
        ]

    def load_deployment_frequency(self) -> list[DeploymentFrequency]:
        return [DeploymentFrequency(month=m, deployments=n) for m, n in MONTHLY_DEPLOYMENTS]

    def load_deployments(self) -> list[Deployment]:
        return [
            Deployment(
                id=idx,
                service=service,
                version=version,
                status=status,
                deployed_at=self._now - timedelta(hours=hours),
                environment=environment,
                author=author,
            )
            for idx, (service, version, status, hours, environment, author) in enumerate(
                RECENT_DEPLOYMENTS, start=1
            )
        ]
