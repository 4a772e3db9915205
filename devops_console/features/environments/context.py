"""Pure helpers to build the environments & feature flags section context."""

from __future__ import annotations

from dataclasses import dataclass

import pandas as pd

from devops_console.analytics.aggregations.categories import count_where
from devops_console.core.config import QUERY_SPECS
from devops_console.core.query import TableState, apply_spec, filter_options

ENV_SPEC = QUERY_SPECS["environments"]
FLAG_SPEC = QUERY_SPECS["feature_flags"]


@dataclass(slots=True)
class EnvironmentsContext:
    environments: pd.DataFrame
    flags: pd.DataFrame
    env_options: dict[str, list[str]]
    flag_options: dict[str, list[str]]
    total_environments: int
    healthy: int
    degraded_or_offline: int
    active_flags: int


def build_environments_context(
    envs: pd.DataFrame,
    flags: pd.DataFrame,
    env_state: TableState,
    flag_state: TableState,
) -> EnvironmentsContext:
    return EnvironmentsContext(
        environments=apply_spec(envs, ENV_SPEC, env_state),
        flags=apply_spec(flags, FLAG_SPEC, flag_state),
        env_options={name: filter_options(envs, name) for name in ENV_SPEC.filter_fields},
        flag_options={name: filter_options(flags, name) for name in FLAG_SPEC.filter_fields},
        total_environments=len(envs),
        healthy=count_where(envs, "status", ["Healthy"]),
        degraded_or_offline=count_where(envs, "status", ["Degraded", "Offline"]),
        active_flags=count_where(flags, "enabled", [True]),
    )
