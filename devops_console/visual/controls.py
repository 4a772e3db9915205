"""Table controls bound to a TableState kept in ``st.session_state``."""

from __future__ import annotations

import streamlit as st

from devops_console.core.query import Page, TableState


def _state_key(table: str) -> str:
    return f"{table}_table_state"


def get_table_state(table: str) -> TableState:
    return st.session_state.get(_state_key(table), TableState())


def set_table_state(table: str, state: TableState) -> None:
    st.session_state[_state_key(table)] = state


def render_query_controls(
    table: str,
    options: dict[str, list[str]],
    *,
    search_placeholder: str = "Search...",
    searchable: bool = True,
) -> TableState:
    """Search box plus one select per filter field; returns the updated state.

    Changing a filter or the search term goes through ``TableState`` so the
    page resets to 1 before the table renders.
    """
    state = get_table_state(table)
    columns = st.columns(([2] if searchable else []) + [1] * len(options))
    if searchable:
        with columns[0]:
            term = st.text_input(
                "Search",
                value=state.search_term,
                placeholder=search_placeholder,
                key=f"{table}_search",
            )
        state = state.with_search(term)
        columns = columns[1:]
    for col, (name, choices) in zip(columns, options.items(), strict=False):
        current = state.filter_value(name)
        index = choices.index(current) if current in choices else 0
        with col:
            value = st.selectbox(
                name.replace("_", " ").title(),
                choices,
                index=index,
                key=f"{table}_filter_{name}",
            )
        state = state.with_filter(name, value)
    set_table_state(table, state)
    return state


def render_pager(table: str, page: Page) -> None:
    """Previous / Next buttons with a "Page X of Y" caption."""
    if page.total_pages <= 1:
        return
    state = get_table_state(table)
    prev_col, info_col, next_col = st.columns([1, 3, 1])
    with prev_col:
        if st.button("Previous", key=f"{table}_prev", disabled=page.current_page <= 1):
            set_table_state(table, state.with_page(page.current_page - 1))
            st.rerun()
    with info_col:
        st.caption(f"Page {page.current_page} of {page.total_pages} ({page.total_rows} records)")
    with next_col:
        if st.button("Next", key=f"{table}_next", disabled=page.current_page >= page.total_pages):
            set_table_state(table, state.with_page(page.current_page + 1))
            st.rerun()
