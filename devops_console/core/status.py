"""Status predicates shared by analytics and section contexts.

Every entity owns its own status vocabulary (see ``config``); the helpers here
answer questions about one entity at a time and never compare across them.
"""

from __future__ import annotations

import pandas as pd

from .config import INCIDENT_ACTIVE_STATUSES, INCIDENT_RESOLVED_STATUSES


def is_resolved_incident(status: str | None) -> bool:
    """Return True when an incident status is Resolved or Closed.

    Examples
    --------
    >>> is_resolved_incident("Closed")
    True
    >>> is_resolved_incident("Investigating")
    False
    """
    return status in INCIDENT_RESOLVED_STATUSES


def is_active_incident(status: str | None) -> bool:
    return status in INCIDENT_ACTIVE_STATUSES


def resolved_incidents(df: pd.DataFrame) -> pd.DataFrame:
    if df.empty or "status" not in df.columns:
        return df.iloc[0:0]
    return df[df["status"].isin(INCIDENT_RESOLVED_STATUSES)]


def active_incidents(df: pd.DataFrame) -> pd.DataFrame:
    if df.empty or "status" not in df.columns:
        return df.iloc[0:0]
    return df[df["status"].isin(INCIDENT_ACTIVE_STATUSES)]
