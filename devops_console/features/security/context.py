"""Pure helpers to build the security & compliance section context."""

from __future__ import annotations

from dataclasses import dataclass

import pandas as pd

from devops_console.analytics.aggregations.categories import category_counts
from devops_console.analytics.metrics.security import (
    average_time_to_fix,
    critical_open_vulnerability_count,
    open_vulnerability_count,
)
from devops_console.core.config import QUERY_SPECS
from devops_console.core.query import Page, TableState, apply_spec, filter_options, paginate

SPEC = QUERY_SPECS["vulnerabilities"]


@dataclass(slots=True)
class SecurityContext:
    view: pd.DataFrame
    page: Page
    options: dict[str, list[str]]
    total: int
    open_count: int
    critical_open: int
    avg_time_to_fix: float | str
    by_severity: pd.DataFrame
    by_type: pd.DataFrame


def build_security_context(df: pd.DataFrame, state: TableState) -> SecurityContext:
    view = apply_spec(df, SPEC, state)
    return SecurityContext(
        view=view,
        page=paginate(view, SPEC.page_size, state.page),
        options={name: filter_options(df, name) for name in SPEC.filter_fields},
        total=len(df),
        open_count=open_vulnerability_count(df),
        critical_open=critical_open_vulnerability_count(df),
        avg_time_to_fix=average_time_to_fix(df),
        # Breakdown charts follow the filtered view
        by_severity=category_counts(view, "severity"),
        by_type=category_counts(view, "type"),
    )
