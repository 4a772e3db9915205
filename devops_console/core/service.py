"""DashboardService: loads entity snapshots from an Entity Source into DataFrames."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime

import pandas as pd
import pytz

from .config import ENTITY_LOAD_DELAYS, SECTION_ENTITIES, TIMEZONE
from .mappers import records_to_dataframe
from .source import ENTITY_LOADERS, EntitySource, load_entity

ProgressCallback = Callable[[str, int | None, int | None], None]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Snapshot:
    """Immutable-by-convention view of one entity as of one load."""

    entity: str
    data: pd.DataFrame
    loaded_at: datetime


@dataclass(slots=True)
class SectionData:
    section: str
    snapshots: dict[str, Snapshot] = field(default_factory=dict)

    def frame(self, entity: str) -> pd.DataFrame:
        snap = self.snapshots.get(entity)
        return snap.data if snap is not None else pd.DataFrame()


class DashboardService:
    def __init__(self, source: EntitySource, latency_scale: float = 1.0):
        self.source = source
        self.latency_scale = max(0.0, float(latency_scale))
        self._tz = pytz.timezone(TIMEZONE)

    def _simulate_latency(self, entity: str) -> None:
        delay = ENTITY_LOAD_DELAYS.get(entity, 0.0) * self.latency_scale
        if delay > 0:
            time.sleep(delay)

    # ------------------ Loading ------------------
    def load(self, entity: str, *, progress: ProgressCallback | None = None) -> Snapshot:
        """Load the full collection for ``entity`` and map it to a DataFrame.

        The simulated request delay runs before the source is called; each call
        returns a new snapshot, and the caller keeps whichever arrives last.
        """
        if entity not in ENTITY_LOADERS:
            raise ValueError(f"Unknown entity {entity!r}")
        if progress:
            progress(f"Requesting {entity.replace('_', ' ')}", None, None)
        started = time.perf_counter()
        self._simulate_latency(entity)
        records = load_entity(self.source, entity)
        df = records_to_dataframe(entity, records)
        logger.info(
            "Loaded %s: %d row(s) in %.2fs",
            entity,
            len(df),
            time.perf_counter() - started,
        )
        return Snapshot(entity=entity, data=df, loaded_at=datetime.now(self._tz))

    def load_section(self, section: str, *, progress: ProgressCallback | None = None) -> SectionData:
        try:
            entities = SECTION_ENTITIES[section]
        except KeyError:
            raise ValueError(f"Unknown console section {section!r}") from None
        out = SectionData(section=section)
        total = len(entities)
        for idx, entity in enumerate(entities, start=1):
            out.snapshots[entity] = self.load(entity)
            if progress:
                progress(f"Loaded {entity.replace('_', ' ')}", idx, total)
        return out
