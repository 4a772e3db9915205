"""Convenience launcher for the Streamlit console.

Usage:
  streamlit run run_dashboard.py

Automatically imports every module in ``devops_console/pages`` so each page
decorated with ``@register_page`` registers itself without manual edits here.

Optional ``.streamlit/secrets.toml`` overrides::

  [console]
  seed = 42             # reproducible mock data
  latency_scale = 0.0   # skip simulated request delays
  log_level = "DEBUG"
"""

import logging
import os
from importlib import import_module
from pathlib import Path

import streamlit as st

from devops_console.app import main
from devops_console.core.config import CONSOLE_TITLE, SETTINGS

st.set_page_config(page_title=CONSOLE_TITLE, layout="wide")


def _apply_secrets():
    """Copy ``[console]`` secrets onto SETTINGS; absent secrets keep the defaults."""
    try:
        console = dict(st.secrets.get("console", {}))
    except FileNotFoundError:
        console = {}
    if "seed" in console:
        SETTINGS.seed = int(console["seed"])
    if "latency_scale" in console:
        SETTINGS.latency_scale = float(console["latency_scale"])
    SETTINGS.log_level = str(console.get("log_level") or os.environ.get("LOG_LEVEL") or SETTINGS.log_level)


def _configure_logging():
    logging.basicConfig(
        level=getattr(logging, SETTINGS.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _auto_init_dashboard_service():
    """Create the mock-backed DashboardService once per browser session."""
    if "dashboard_service" in st.session_state:
        return
    from devops_console.core.mock_source import MockEntitySource
    from devops_console.core.service import DashboardService

    source = MockEntitySource(seed=SETTINGS.seed)
    st.session_state["dashboard_service"] = DashboardService(source, latency_scale=SETTINGS.latency_scale)
    logging.getLogger(__name__).info(
        "Dashboard service ready (seed=%s, latency_scale=%s)", SETTINGS.seed, SETTINGS.latency_scale
    )


_apply_secrets()
_configure_logging()
_auto_init_dashboard_service()

PAGES_DIR = Path(__file__).parent / "devops_console" / "pages"
for py in sorted(PAGES_DIR.glob("[!_]*.py")):
    mod_name = f"devops_console.pages.{py.stem}"
    try:
        import_module(mod_name)
    except Exception:  # pragma: no cover
        logging.getLogger(__name__).exception("Failed importing page %s", mod_name)

if __name__ == "__main__":
    main()
