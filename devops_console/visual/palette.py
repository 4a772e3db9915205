"""Presentation colors, one palette per enumeration.

Statuses of different entities share some labels ("Open", "Degraded") but not
meaning, so each palette is looked up by entity kind, never by label alone.
"""

from __future__ import annotations

import altair as alt

DEFAULT_COLOR = "#4472C4"

GREEN = "#22c55e"
RED = "#ef4444"
AMBER = "#f59e0b"
YELLOW = "#fcd34d"
BLUE = "#60a5fa"
GREY = "#9ca3af"

CATEGORY_PALETTES: dict[str, dict[str, str]] = {
    "severity": {"Critical": RED, "High": AMBER, "Medium": YELLOW, "Low": BLUE},
    "incident_status": {"Open": RED, "Investigating": AMBER, "Resolved": GREEN, "Closed": BLUE},
    "vulnerability_status": {"Open": AMBER, "Fixed": GREEN, "False Positive": GREY, "Ignored": BLUE},
    "service_status": {"Operational": GREEN, "Degraded": AMBER, "Outage": RED, "Maintenance": BLUE},
    "environment_status": {"Healthy": GREEN, "Degraded": AMBER, "Offline": RED},
    "deployment_status": {"Success": GREEN, "Failed": RED, "Pending": AMBER},
    "cost_component": {
        "Compute": "#8884d8",
        "Storage": "#82ca9d",
        "Network": "#ffc658",
        "Database": "#ff7300",
        "Other": "#a4de6c",
    },
}

STATUS_BADGES: dict[str, dict[str, str]] = {
    "incident_status": {"Open": "🔴", "Investigating": "🟡", "Resolved": "🟢", "Closed": "🔵"},
    "severity": {"Critical": "🔴", "High": "🟠", "Medium": "🟡", "Low": "🔵"},
    "vulnerability_status": {"Open": "🟡", "Fixed": "🟢", "False Positive": "⚪", "Ignored": "🔵"},
    "service_status": {"Operational": "🟢", "Degraded": "🟡", "Outage": "🔴", "Maintenance": "🔵"},
    "environment_status": {"Healthy": "🟢", "Degraded": "🟡", "Offline": "🔴"},
    "deployment_status": {"Success": "✅", "Failed": "❌", "Pending": "⏳"},
}


def color_scale(kind: str) -> alt.Scale:
    palette = CATEGORY_PALETTES[kind]
    return alt.Scale(domain=list(palette), range=list(palette.values()))


def badge(kind: str, value) -> str:
    """Prefix ``value`` with the marker for its entity kind (unknown values pass through)."""
    marker = STATUS_BADGES.get(kind, {}).get(value)
    return f"{marker} {value}" if marker else str(value)
