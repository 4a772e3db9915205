"""Central column metadata and helpers for table rendering."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import streamlit as st

# Mapping of raw column keys to (label, help text, format key)
# format key: "int" -> integer, "float1"/"float2" -> decimals, "percent" -> 0-100 value,
# "currency" -> dollars, "progress" -> 0-100 progress bar, "bool" -> checkbox,
# None -> default text column
COLUMN_METADATA: dict[str, tuple[str, str, str | None]] = {
    # Shared
    "id": ("ID", "Record identifier.", None),
    "service": ("Service", "Owning application service.", None),
    "status": ("Status", "Current status for this record type.", None),
    "severity": ("Severity", "Critical > High > Medium > Low.", None),
    "description": ("Description", "Free-text details.", None),
    # Incidents
    "title": ("Title", "Incident headline.", None),
    "reported_at": ("Reported At", "When the record was reported.", None),
    "resolved_at": ("Resolved At", "When the incident was resolved or closed.", None),
    "mttr": ("MTTR (min)", "Minutes from report to resolution.", "int"),
    "assigned_to": ("Assigned To", "Responder owning the incident.", None),
    "affected_users": ("Affected Users", "Users impacted by the incident.", "int"),
    # Vulnerabilities
    "type": ("Type", "Vulnerability category.", None),
    "fixed_at": ("Fixed At", "When the vulnerability was fixed.", None),
    # Service health
    "latency": ("Latency (ms)", "Current p50 latency.", "float2"),
    "error_rate": ("Error Rate (%)", "Share of failed requests.", "float2"),
    "throughput": ("Throughput (req/s)", "Requests served per second.", "int"),
    "last_updated": ("Last Updated", "Time of the latest check or change.", None),
    # Cost
    "month": ("Month", "Billing period.", None),
    "total_cost": ("Total", "Total monthly spend.", "currency"),
    "compute": ("Compute", "Compute spend.", "currency"),
    "storage": ("Storage", "Storage spend.", "currency"),
    "network": ("Network", "Network spend.", "currency"),
    "database": ("Database", "Database spend.", "currency"),
    "other": ("Other", "Remaining spend.", "currency"),
    # Environments & flags
    "name": ("Name", "Environment or flag name.", None),
    "service_count": ("Services", "Number of services deployed.", "int"),
    "last_sync": ("Last Sync", "Last successful synchronization.", None),
    "environment": ("Environment", "Target environment.", None),
    "enabled": ("Enabled", "Whether the flag is switched on.", "bool"),
    "rollout_percentage": ("Rollout", "Share of traffic receiving the feature.", "progress"),
    "updated_by": ("Updated By", "Last user to change the flag.", None),
    # Audit
    "timestamp": ("Timestamp", "When the action happened.", None),
    "user": ("User", "Actor performing the action.", None),
    "action": ("Action", "Audited operation.", None),
    "resource_type": ("Resource Type", "Kind of resource affected.", None),
    "resource_id": ("Resource ID", "Identifier of the affected resource.", None),
    "details": ("Details", "Audit message.", None),
    "ip_address": ("IP Address", "Source address of the request.", None),
    # Code quality
    "lines_of_code": ("Lines of Code", "Size of the service codebase.", "int"),
    "bugs_found": ("Bugs", "Open bugs reported by static analysis.", "int"),
    "vulnerabilities_found": ("Vulnerabilities", "Security findings.", "int"),
    "coverage": ("Coverage", "Test coverage percentage.", "progress"),
    "technical_debt_hours": ("Tech Debt (h)", "Estimated remediation effort.", "int"),
    # Deployments
    "version": ("Version", "Released version.", None),
    "deployed_at": ("Deployed At", "Deployment time.", None),
    "author": ("Author", "Engineer who shipped the release.", None),
}


def apply_column_metadata(
    columns: Iterable[str],
    existing: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Return a column_config dictionary with human labels and hover help."""

    config: dict[str, Any] = dict(existing or {})
    for col in columns:
        if col in config:
            continue
        meta = COLUMN_METADATA.get(col)
        if not meta:
            continue
        label, help_text, fmt = meta
        if fmt == "int":
            config[col] = st.column_config.NumberColumn(label, help=help_text, format="%d")
        elif fmt == "float2":
            config[col] = st.column_config.NumberColumn(label, help=help_text, format="%.2f")
        elif fmt == "currency":
            config[col] = st.column_config.NumberColumn(label, help=help_text, format="$%.2f")
        elif fmt == "progress":
            config[col] = st.column_config.ProgressColumn(
                label, help=help_text, format="%.0f%%", min_value=0, max_value=100
            )
        elif fmt == "bool":
            config[col] = st.column_config.CheckboxColumn(label, help=help_text)
        else:
            config[col] = st.column_config.Column(label, help=help_text)
    return config
