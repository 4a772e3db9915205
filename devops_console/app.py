"""Application entry point: section registry and router."""

from __future__ import annotations

import streamlit as st

from devops_console.core.config import CONSOLE_SUBTITLE, CONSOLE_TITLE
from devops_console.core.tabs import DashboardTab, TabSelector

PAGES = {}


def register_page(label):
    def decorator(func):
        PAGES[label] = func
        return func

    return decorator


def get_tab_selector() -> TabSelector:
    selector = st.session_state.get("tab_selector")
    if selector is None:
        selector = TabSelector()
        st.session_state["tab_selector"] = selector
    return selector


def main():
    st.sidebar.title(CONSOLE_TITLE)
    st.sidebar.caption(CONSOLE_SUBTITLE)
    if not PAGES:
        st.write("No pages registered yet.")
        return
    # Sections render in the fixed console order; anything else trails alphabetically
    ordered = [label for label in DashboardTab.labels() if label in PAGES]
    trailing = sorted(label for label in PAGES if label not in ordered)
    pages = ordered + trailing

    missing = [label for label in DashboardTab.labels() if label not in PAGES]
    if missing:
        st.sidebar.caption(f"(Info) Missing expected sections not yet registered: {', '.join(missing)}")

    selector = get_tab_selector()
    active = selector.active.value
    choice = st.sidebar.radio(
        "Section",
        pages,
        index=pages.index(active) if active in pages else 0,
        key="console_section",
    )
    if choice in DashboardTab.labels():
        selector.select(choice)
    PAGES[choice]()


if __name__ == "__main__":
    main()
