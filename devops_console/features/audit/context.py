"""Pure helpers to build the audit log section context."""

from __future__ import annotations

from dataclasses import dataclass

import pandas as pd

from devops_console.analytics.aggregations.categories import category_counts
from devops_console.core.config import QUERY_SPECS
from devops_console.core.query import Page, TableState, apply_spec, filter_options, paginate

SPEC = QUERY_SPECS["audit_logs"]


@dataclass(slots=True)
class AuditContext:
    view: pd.DataFrame
    page: Page
    options: dict[str, list[str]]
    action_counts: pd.DataFrame


def build_audit_context(df: pd.DataFrame, state: TableState) -> AuditContext:
    view = apply_spec(df, SPEC, state)
    if not view.empty and "timestamp" in view.columns:
        view = view.sort_values("timestamp", ascending=False, kind="stable")
    return AuditContext(
        view=view,
        page=paginate(view, SPEC.page_size, state.page),
        options={name: filter_options(df, name) for name in SPEC.filter_fields},
        action_counts=category_counts(view, "action"),
    )
