"""Central configuration, constants, query declarations, and shared column definitions."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

# =============================================================================
# General Settings
# =============================================================================
TIMEZONE = "UTC"
CONSOLE_TITLE = "Demo Bank DevOps Platform"
CONSOLE_SUBTITLE = "Centralized observability and management console"

# Sentinel used by filters meaning "no constraint on this field"
ALL_OPTION = "All"
# Sentinel returned by averages and rates computed over an empty population
NOT_AVAILABLE = "N/A"

# =============================================================================
# Enumerations
# Each entity keeps its own status/severity vocabulary; values that look alike
# (e.g. incident "Open" vs vulnerability "Open") are unrelated.
# =============================================================================
SEVERITY_ORDER: Sequence[str] = ("Critical", "High", "Medium", "Low")

INCIDENT_STATUSES: Sequence[str] = ("Open", "Resolved", "Investigating", "Closed")
INCIDENT_RESOLVED_STATUSES: frozenset[str] = frozenset({"Resolved", "Closed"})
INCIDENT_ACTIVE_STATUSES: frozenset[str] = frozenset({"Open", "Investigating"})

SERVICE_HEALTH_STATUSES: Sequence[str] = ("Operational", "Degraded", "Outage", "Maintenance")

VULNERABILITY_STATUSES: Sequence[str] = ("Open", "Fixed", "False Positive", "Ignored")

ENVIRONMENT_STATUSES: Sequence[str] = ("Healthy", "Degraded", "Offline")

DEPLOYMENT_STATUSES: Sequence[str] = ("Success", "Failed", "Pending")

ROLLOUT_STEPS: Sequence[int] = (0, 10, 25, 50, 75, 100)

# Tolerance when checking that cost components add up to the monthly total
COST_ROUNDING_TOLERANCE: float = 0.05

COST_COMPONENTS: Sequence[tuple[str, str]] = (
    ("Compute", "compute"),
    ("Storage", "storage"),
    ("Network", "network"),
    ("Database", "database"),
    ("Other", "other"),
)

# =============================================================================
# Query Engine declarations
# =============================================================================


@dataclass(frozen=True, slots=True)
class QuerySpec:
    """Filterable/searchable fields and page size for one entity type."""

    filter_fields: tuple[str, ...] = ()
    search_fields: tuple[str, ...] = ()
    page_size: int = 10


QUERY_SPECS: Mapping[str, QuerySpec] = {
    "incidents": QuerySpec(
        filter_fields=("status", "service", "severity"),
        search_fields=("title", "description", "id"),
        page_size=10,
    ),
    "vulnerabilities": QuerySpec(
        filter_fields=("status", "service", "severity"),
        search_fields=("description", "type", "id"),
        page_size=10,
    ),
    "audit_logs": QuerySpec(
        filter_fields=("user", "action", "resource_type"),
        search_fields=("details", "resource_id", "ip_address"),
        page_size=15,
    ),
    "environments": QuerySpec(
        filter_fields=("name", "status"),
        page_size=10,
    ),
    "feature_flags": QuerySpec(
        filter_fields=("environment", "service"),
        search_fields=("name", "description"),
        page_size=10,
    ),
}

# =============================================================================
# Loading
# Simulated latency (seconds) between request and data available, per entity.
# =============================================================================
ENTITY_LOAD_DELAYS: Mapping[str, float] = {
    "incidents": 0.5,
    "service_health": 0.6,
    "latency_series": 0.0,
    "error_rate_series": 0.0,
    "throughput_series": 0.0,
    "vulnerabilities": 0.7,
    "cloud_costs": 0.8,
    "environments": 0.9,
    "feature_flags": 1.0,
    "pull_requests": 1.1,
    "code_quality": 1.2,
    "audit_logs": 1.3,
    "builds": 0.0,
    "deployment_frequency": 0.0,
    "deployments": 0.0,
}

# Entities each console section needs loaded before it can render
SECTION_ENTITIES: Mapping[str, Sequence[str]] = {
    "Overview": ("builds", "deployment_frequency", "deployments", "incidents"),
    "Incidents": ("incidents",),
    "Monitoring": ("service_health", "latency_series", "error_rate_series", "throughput_series"),
    "Security": ("vulnerabilities",),
    "Cost": ("cloud_costs",),
    "Environments": ("environments", "feature_flags"),
    "Productivity": ("pull_requests", "code_quality"),
    "Audit": ("audit_logs",),
}

# =============================================================================
# Derived metric windows
# =============================================================================
PR_WINDOW_DAYS: int = 30
RECENT_DEPLOYMENTS_LIMIT: int = 10
CHANGE_FAILURE_WARN_PERCENT: float = 5.0
BUILD_DURATION_WARN_MINUTES: float = 6.0
RESTORE_WARN_HOURS: float = 0.5
BUDGET_ALERT_LEVEL: str = "85%"

# =============================================================================
# Mock data vocabularies
# =============================================================================
MOCK_SERVICES: Sequence[str] = (
    "API Gateway",
    "Frontend App",
    "Transactions API",
    "AI Advisor API",
    "User Service",
    "Payment Gateway",
    "Reporting Service",
    "Auth Service",
    "Fraud Detection",
    "Notifications",
    "Investment API",
    "Loan Service",
    "Card Service",
    "ATM API",
    "Merchant API",
    "Compliance API",
    "Onboarding Service",
    "Risk Engine",
    "FX Service",
    "Settlement Service",
)

MOCK_USERS: Sequence[str] = (
    "alice.d",
    "bob.s",
    "charlie.m",
    "diana.p",
    "eve.w",
    "frank.z",
    "grace.l",
    "harry.k",
    "isabel.t",
    "john.j",
    "karen.b",
    "liam.g",
    "mia.r",
    "noah.s",
    "olivia.m",
    "peter.w",
    "quinn.a",
)

MOCK_ENVIRONMENTS: Sequence[str] = ("Development", "Staging", "Production", "UAT")

INCIDENT_SYMPTOMS: Sequence[str] = (
    "latency spikes",
    "error rate increase",
    "connection issues",
    "data inconsistency",
)

VULNERABILITY_TYPES: Sequence[str] = (
    "SQL Injection",
    "XSS",
    "Broken Authentication",
    "Insecure Deserialization",
    "Missing Security Headers",
    "Sensitive Data Exposure",
)

AUDIT_ACTIONS: Sequence[str] = (
    "DEPLOY",
    "UPDATE_CONFIG",
    "CREATE_RESOURCE",
    "DELETE_RESOURCE",
    "ACCESS_DATA",
    "MODIFY_DATA",
    "LOGIN",
    "LOGOUT",
    "FEATURE_TOGGLE",
)

AUDIT_RESOURCE_TYPES: Sequence[str] = (
    "Service",
    "Environment",
    "Database",
    "User",
    "Feature Flag",
    "Incident",
)

MONITORED_SERIES: Mapping[str, str] = {
    "latency_series": "API Gateway",
    "error_rate_series": "Transactions API",
    "throughput_series": "Frontend App",
}

# =============================================================================
# Table column sets (fallbacks when columns.yaml is absent)
# =============================================================================
COLUMN_SETS: Mapping[str, Sequence[str]] = {
    "incidents": (
        "id",
        "title",
        "service",
        "severity",
        "status",
        "reported_at",
        "assigned_to",
    ),
    "vulnerabilities": (
        "id",
        "service",
        "severity",
        "type",
        "status",
        "description",
        "reported_at",
    ),
    "audit_logs": (
        "timestamp",
        "user",
        "action",
        "resource_type",
        "resource_id",
        "details",
        "ip_address",
    ),
    "environments": ("id", "name", "status", "service_count", "last_sync"),
    "feature_flags": (
        "name",
        "service",
        "environment",
        "enabled",
        "rollout_percentage",
        "updated_by",
        "last_updated",
    ),
    "service_health": (
        "service",
        "status",
        "latency",
        "error_rate",
        "throughput",
        "last_updated",
    ),
    "cloud_costs": ("month", "total_cost", "compute", "storage", "network", "database", "other"),
    "code_quality": (
        "service",
        "lines_of_code",
        "bugs_found",
        "vulnerabilities_found",
        "coverage",
        "technical_debt_hours",
    ),
    "deployments": ("status", "service", "version", "environment", "deployed_at", "author"),
}


@dataclass(slots=True)
class AppSettings:
    seed: int | None = None
    latency_scale: float = 1.0
    log_level: str = "INFO"
    max_table_rows: int = 1000
    download_encoding: str = "utf-8"


SETTINGS = AppSettings()
