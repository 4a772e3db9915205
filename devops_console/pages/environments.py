"""Environments & feature flags page."""

from __future__ import annotations

import streamlit as st

from devops_console.app import register_page
from devops_console.core.tabs import DashboardTab
from devops_console.features.environments.context import build_environments_context
from devops_console.pages._loading import refresh_button, section_data
from devops_console.visual.cards import MetricCard, render_cards
from devops_console.visual.controls import get_table_state, render_query_controls
from devops_console.visual.tables import render_table

SECTION = DashboardTab.ENVIRONMENTS.value
ENV_TABLE = "environments"
FLAG_TABLE = "feature_flags"


def _render_deployed_services(envs) -> None:
    if envs.empty or "deployed_services" not in envs.columns:
        return
    for _, env in envs.iterrows():
        services = env["deployed_services"] or []
        with st.expander(f"{env['name']} ({len(services)} services)"):
            if not services:
                st.caption("No services deployed.")
                continue
            st.markdown("\n".join(f"- **{svc['name']}** `{svc['version']}`" for svc in services))


@register_page(SECTION)
def environments_page():
    st.title("Environments & Feature Flags")
    st.caption("Environment health, deployed versions and progressive rollouts.")
    data = section_data(SECTION, refresh=refresh_button(SECTION))
    if data is None:
        return
    envs = data.frame("environments")
    flags = data.frame("feature_flags")
    env_state = get_table_state(ENV_TABLE)
    flag_state = get_table_state(FLAG_TABLE)
    ctx = build_environments_context(envs, flags, env_state, flag_state)

    render_cards(
        [
            MetricCard("Environments", f"{ctx.total_environments:,}"),
            MetricCard("Healthy", f"{ctx.healthy:,}"),
            MetricCard("Degraded / Offline", f"{ctx.degraded_or_offline:,}"),
            MetricCard("Active Flags", f"{ctx.active_flags:,}"),
        ]
    )

    env_tab, flag_tab = st.tabs(["Environments", "Feature Flags"])
    with env_tab:
        new_env = render_query_controls(ENV_TABLE, ctx.env_options, searchable=False)
        if new_env is not env_state:
            ctx = build_environments_context(envs, flags, new_env, flag_state)
            env_state = new_env
        render_table(ctx.environments, ENV_TABLE)
        _render_deployed_services(ctx.environments)
    with flag_tab:
        new_flags = render_query_controls(FLAG_TABLE, ctx.flag_options, search_placeholder="Search flags")
        if new_flags is not flag_state:
            ctx = build_environments_context(envs, flags, env_state, new_flags)
        render_table(ctx.flags, FLAG_TABLE)
