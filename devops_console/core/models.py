"""Domain data models for console entities (incidents, health, security, cost, delivery)."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime

from .config import (
    COST_ROUNDING_TOLERANCE,
    DEPLOYMENT_STATUSES,
    ENVIRONMENT_STATUSES,
    INCIDENT_RESOLVED_STATUSES,
    INCIDENT_STATUSES,
    SERVICE_HEALTH_STATUSES,
    SEVERITY_ORDER,
    VULNERABILITY_STATUSES,
)


def _require_member(value: str, allowed, label: str) -> None:
    if value not in allowed:
        raise ValueError(f"{label} must be one of {tuple(allowed)!r}, got {value!r}")


def _require_range(value: float, low: float, high: float | None, label: str) -> None:
    if value < low or (high is not None and value > high):
        bound = f"[{low}, {high}]" if high is not None else f">= {low}"
        raise ValueError(f"{label} must be {bound}, got {value!r}")


@dataclass(slots=True)
class Incident:
    id: str
    title: str
    service: str
    status: str
    severity: str
    reported_at: datetime
    description: str
    assigned_to: str
    affected_users: int
    resolved_at: datetime | None = None
    mttr: int | None = None  # minutes

    def __post_init__(self) -> None:
        _require_member(self.status, INCIDENT_STATUSES, "Incident status")
        _require_member(self.severity, SEVERITY_ORDER, "Incident severity")
        _require_range(self.affected_users, 0, None, "affected_users")
        resolved = self.status in INCIDENT_RESOLVED_STATUSES
        if resolved != (self.resolved_at is not None):
            raise ValueError(f"{self.id}: resolved_at must be set iff status is Resolved/Closed")
        if resolved != (self.mttr is not None):
            raise ValueError(f"{self.id}: mttr must be set iff status is Resolved/Closed")
        if self.resolved_at is not None and self.resolved_at < self.reported_at:
            raise ValueError(f"{self.id}: resolved_at precedes reported_at")


@dataclass(slots=True)
class MetricDataPoint:
    time: datetime
    value: float


@dataclass(slots=True)
class ServiceHealth:
    service: str
    status: str
    latency: float  # ms
    error_rate: float  # %
    throughput: int  # requests/sec
    last_updated: datetime

    def __post_init__(self) -> None:
        _require_member(self.status, SERVICE_HEALTH_STATUSES, "Service status")
        _require_range(self.latency, 0, None, "latency")
        _require_range(self.error_rate, 0, 100, "error_rate")
        _require_range(self.throughput, 0, None, "throughput")


@dataclass(slots=True)
class Vulnerability:
    id: str
    service: str
    severity: str
    type: str
    description: str
    status: str
    reported_at: datetime
    fixed_at: datetime | None = None

    def __post_init__(self) -> None:
        _require_member(self.status, VULNERABILITY_STATUSES, "Vulnerability status")
        _require_member(self.severity, SEVERITY_ORDER, "Vulnerability severity")
        if (self.status == "Fixed") != (self.fixed_at is not None):
            raise ValueError(f"{self.id}: fixed_at must be set iff status is Fixed")
        if self.fixed_at is not None and self.fixed_at < self.reported_at:
            raise ValueError(f"{self.id}: fixed_at precedes reported_at")


@dataclass(slots=True)
class CloudCost:
    month: str
    total_cost: float
    compute: float
    storage: float
    network: float
    database: float
    other: float

    def __post_init__(self) -> None:
        components = self.compute + self.storage + self.network + self.database + self.other
        if abs(components - self.total_cost) > COST_ROUNDING_TOLERANCE:
            raise ValueError(
                f"{self.month}: components sum to {components:.2f}, expected {self.total_cost:.2f}"
            )


@dataclass(slots=True)
class DeployedService:
    name: str
    version: str


@dataclass(slots=True)
class EnvironmentStatus:
    id: str
    name: str
    status: str
    last_sync: datetime
    deployed_services: list[DeployedService] = field(default_factory=list)

    def __post_init__(self) -> None:
        _require_member(self.status, ENVIRONMENT_STATUSES, "Environment status")
        names = [svc.name for svc in self.deployed_services]
        if len(names) != len(set(names)):
            raise ValueError(f"{self.id}: deployed services must be unique by name")


@dataclass(slots=True)
class FeatureFlag:
    id: str
    name: str
    service: str
    environment: str
    enabled: bool
    rollout_percentage: int
    description: str
    last_updated: datetime
    updated_by: str

    def __post_init__(self) -> None:
        _require_range(self.rollout_percentage, 0, 100, "rollout_percentage")


@dataclass(slots=True)
class AuditLogEntry:
    id: str
    timestamp: datetime
    user: str
    action: str
    resource_type: str
    resource_id: str
    details: str
    ip_address: str


@dataclass(slots=True)
class PullRequestMetric:
    date: date
    open: int
    merged: int
    cycle_time: float  # hours, mean for the day


@dataclass(slots=True)
class CodeQualityMetric:
    service: str
    lines_of_code: int
    bugs_found: int
    vulnerabilities_found: int
    coverage: float  # percentage
    technical_debt_hours: int

    def __post_init__(self) -> None:
        _require_range(self.coverage, 0, 100, "coverage")


@dataclass(slots=True)
class BuildRecord:
    name: str
    duration: float  # minutes
    success: bool


@dataclass(slots=True)
class DeploymentFrequency:
    month: str
    deployments: int


@dataclass(slots=True)
class Deployment:
    id: int
    service: str
    version: str
    status: str
    deployed_at: datetime
    environment: str
    author: str

    def __post_init__(self) -> None:
        _require_member(self.status, DEPLOYMENT_STATUSES, "Deployment status")
