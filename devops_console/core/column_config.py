"""Load and expose per-entity table column sets from YAML (with fallbacks)."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from .config import COLUMN_SETS

_CACHE: dict[str, list[str]] | None = None


def _fallback() -> dict[str, list[str]]:
    return {name: list(cols) for name, cols in COLUMN_SETS.items()}


def load_column_sets(base_path: str | Path | None = None, *, refresh: bool = False):
    global _CACHE
    if _CACHE is not None and not refresh:
        return _CACHE
    base = Path(base_path or Path(__file__).resolve().parent.parent)
    yaml_path = base / "columns.yaml"
    sets = _fallback()
    if not yaml_path.exists():
        _CACHE = sets
        return _CACHE
    try:
        data = yaml.safe_load(yaml_path.read_text()) or {}
    except yaml.YAMLError as exc:
        logging.getLogger(__name__).warning("Ignoring malformed %s: %s", yaml_path, exc)
        _CACHE = sets
        return _CACHE
    for name, cols in (data.get("sets") or {}).items():
        if isinstance(cols, list) and cols:
            sets[name] = [str(c) for c in cols]
    _CACHE = sets
    return _CACHE


def get_columns(set_name: str) -> list[str]:
    sets = load_column_sets()
    return sets.get(set_name, [])
