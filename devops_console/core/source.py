"""Entity Source interface: supplies full, immutable record collections per entity type."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, Protocol

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

# Entity name -> EntitySource method returning that collection
ENTITY_LOADERS: dict[str, str] = {
    "incidents": "load_incidents",
    "service_health": "load_service_health",
    "latency_series": "load_latency_series",
    "error_rate_series": "load_error_rate_series",
    "throughput_series": "load_throughput_series",
    "vulnerabilities": "load_vulnerabilities",
    "cloud_costs": "load_cloud_costs",
    "environments": "load_environments",
    "feature_flags": "load_feature_flags",
    "audit_logs": "load_audit_logs",
    "pull_requests": "load_pull_requests",
    "code_quality": "load_code_quality",
    "builds": "load_builds",
    "deployment_frequency": "load_deployment_frequency",
    "deployments": "load_deployments",
}


class EntitySource(Protocol):
    def load_incidents(self) -> Sequence[Incident]: ...

    def load_service_health(self) -> Sequence[ServiceHealth]: ...

    def load_latency_series(self) -> Sequence[MetricDataPoint]: ...

    def load_error_rate_series(self) -> Sequence[MetricDataPoint]: ...

    def load_throughput_series(self) -> Sequence[MetricDataPoint]: ...

    def load_vulnerabilities(self) -> Sequence[Vulnerability]: ...

    def load_cloud_costs(self) -> Sequence[CloudCost]: ...

    def load_environments(self) -> Sequence[EnvironmentStatus]: ...

    def load_feature_flags(self) -> Sequence[FeatureFlag]: ...

    def load_audit_logs(self) -> Sequence[AuditLogEntry]: ...

    def load_pull_requests(self) -> Sequence[PullRequestMetric]: ...

    def load_code_quality(self) -> Sequence[CodeQualityMetric]: ...

    def load_builds(self) -> Sequence[BuildRecord]: ...

    def load_deployment_frequency(self) -> Sequence[DeploymentFrequency]: ...

    def load_deployments(self) -> Sequence[Deployment]: ...


def load_entity(source: EntitySource, entity: str) -> list[Any]:
    """Call the loader for ``entity`` on ``source`` and return a fresh list."""
    try:
        method = ENTITY_LOADERS[entity]
    except KeyError:
        raise ValueError(f"Unknown entity {entity!r}") from None
    return list(getattr(source, method)())


class StaticEntitySource:
    """Entity Source backed by literal collections (fixtures, tests, replays).

    Entities not supplied load as empty collections.
    """

    def __init__(self, **collections: Iterable[Any]):
        unknown = set(collections) - set(ENTITY_LOADERS)
        if unknown:
            raise ValueError(f"Unknown entities: {', '.join(sorted(unknown))}")
        self._collections = {name: tuple(items) for name, items in collections.items()}

    def _get(self, entity: str) -> list[Any]:
        return list(self._collections.get(entity, ()))

    def load_incidents(self):
        return self._get("incidents")

    def load_service_health(self):
        return self._get("service_health")

    def load_latency_series(self):
        return self._get("latency_series")

    def load_error_rate_series(self):
        return self._get("error_rate_series")

    def load_throughput_series(self):
        return self._get("throughput_series")

    def load_vulnerabilities(self):
        return self._get("vulnerabilities")

    def load_cloud_costs(self):
        return self._get("cloud_costs")

    def load_environments(self):
        return self._get("environments")

    def load_feature_flags(self):
        return self._get("feature_flags")

    def load_audit_logs(self):
        return self._get("audit_logs")

    def load_pull_requests(self):
        return self._get("pull_requests")

    def load_code_quality(self):
        return self._get("code_quality")

    def load_builds(self):
        return self._get("builds")

    def load_deployment_frequency(self):
        return self._get("deployment_frequency")

    def load_deployments(self):
        return self._get("deployments")
