"""Summary metric cards and their value formatting."""

from __future__ import annotations

from dataclasses import dataclass

import streamlit as st

from devops_console.core.config import NOT_AVAILABLE


def _available(value) -> bool:
    return value is not None and value != NOT_AVAILABLE


def fmt_number(value, decimals: int = 0, suffix: str = "") -> str:
    """Format a metric value; the "N/A" sentinel passes through unchanged.

    >>> fmt_number(12.345, 1, " min")
    '12.3 min'
    >>> fmt_number("N/A", 1, " min")
    'N/A'
    """
    if not _available(value):
        return NOT_AVAILABLE
    return f"{float(value):,.{decimals}f}{suffix}"


def fmt_percent(value, decimals: int = 1) -> str:
    return fmt_number(value, decimals, "%")


def fmt_currency(value, decimals: int = 2) -> str:
    if not _available(value):
        return NOT_AVAILABLE
    return f"${float(value):,.{decimals}f}"


def fmt_signed_percent(percent: str) -> str:
    """Delta label for a percent string ("12.50" -> "+12.50%")."""
    sign = "" if percent.startswith("-") else "+"
    return f"{sign}{percent}%"


@dataclass(slots=True)
class MetricCard:
    label: str
    value: str
    caption: str | None = None
    delta: str | None = None
    delta_color: str = "normal"
    help: str | None = None


def render_cards(cards: list[MetricCard]) -> None:
    if not cards:
        return
    columns = st.columns(len(cards))
    for col, card in zip(columns, cards, strict=False):
        with col:
            st.metric(
                card.label,
                card.value,
                delta=card.delta,
                delta_color=card.delta_color,
                help=card.help,
                border=True,
            )
            if card.caption:
                st.caption(card.caption)
