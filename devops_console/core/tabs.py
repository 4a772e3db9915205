"""Console section selector: a single active-tab state machine."""

from __future__ import annotations

import logging
from enum import Enum


class DashboardTab(str, Enum):
    OVERVIEW = "Overview"
    INCIDENTS = "Incidents"
    MONITORING = "Monitoring"
    SECURITY = "Security"
    COST = "Cost"
    ENVIRONMENTS = "Environments"
    PRODUCTIVITY = "Productivity"
    AUDIT = "Audit"

    @classmethod
    def labels(cls) -> list[str]:
        return [tab.value for tab in cls]


class TabSelector:
    """Holds the active section; starts on Overview and jumps directly on select."""

    def __init__(self, initial: DashboardTab = DashboardTab.OVERVIEW):
        self._active = DashboardTab(initial)

    @property
    def active(self) -> DashboardTab:
        return self._active

    def select(self, name: str | DashboardTab) -> bool:
        """Activate ``name``; returns False when it was already active."""
        try:
            tab = DashboardTab(name)
        except ValueError:
            raise ValueError(f"Unknown console section {name!r}") from None
        if tab is self._active:
            return False
        logging.getLogger(__name__).debug("Switching section %s -> %s", self._active.value, tab.value)
        self._active = tab
        return True
