"""Progress banner shown while a console section loads."""

from __future__ import annotations

import streamlit as st


class ProgressReporter:
    """Renders a banner + progress bar; ``callback`` plugs into DashboardService."""

    def __init__(self, title: str):
        self._placeholder = st.empty()
        self._container = self._placeholder.container()
        self._container.info(title)
        self._message_placeholder = self._container.empty()
        self._progress_placeholder = self._container.progress(0.0)
        self._total: int | None = None
        self._current: int = 0
        self._finalized: bool = False

    def callback(self, message: str, current: int | None = None, total: int | None = None) -> None:
        self.update(message, current=current, total=total)

    def update(self, message: str, *, current: int | None = None, total: int | None = None) -> None:
        if self._finalized:
            return
        if total is not None and total > 0:
            self._total = total
        if current is not None:
            self._current = max(0, current)
        self._message_placeholder.write(message)
        self._refresh_progress()

    def complete(self) -> None:
        """Remove the banner once the section's snapshots are in place."""
        if self._finalized:
            return
        self._placeholder.empty()
        self._finalized = True

    def error(self, message: str) -> None:
        if self._finalized:
            return
        self._container.error(message)
        self._finalized = True

    def _refresh_progress(self) -> None:
        if self._total:
            ratio = min(max(self._current / self._total, 0.0), 1.0)
            self._progress_placeholder.progress(ratio)
        else:
            self._progress_placeholder.progress(0.0)
