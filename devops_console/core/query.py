"""Generic filter/search/pagination over entity snapshots (pure functions)."""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace

import pandas as pd

from .config import ALL_OPTION, SEVERITY_ORDER, QuerySpec

# Fields whose filter options follow a fixed importance order instead of first-seen order
ORDERED_OPTION_FIELDS: dict[str, tuple[str, ...]] = {
    "severity": tuple(SEVERITY_ORDER),
}


@dataclass(frozen=True, slots=True, eq=False)
class Page:
    rows: pd.DataFrame
    current_page: int
    total_pages: int
    total_rows: int

    @property
    def is_empty(self) -> bool:
        return self.rows.empty


@dataclass(frozen=True, slots=True)
class TableState:
    """Caller-owned view state for one table.

    Any change to a filter or to the search term resets the page to 1; the page
    number is only meaningful for the predicates it was chosen under.
    """

    filters: Mapping[str, object] = field(default_factory=dict)
    search_term: str = ""
    page: int = 1

    def filter_value(self, name: str) -> object:
        return self.filters.get(name, ALL_OPTION)

    def with_filter(self, name: str, value: object) -> TableState:
        if self.filter_value(name) == value:
            return self
        filters = dict(self.filters)
        filters[name] = value
        return replace(self, filters=filters, page=1)

    def with_search(self, term: str | None) -> TableState:
        term = term or ""
        if term == self.search_term:
            return self
        return replace(self, search_term=term, page=1)

    def with_page(self, page: int) -> TableState:
        return replace(self, page=int(page))


def _matches_filters(df: pd.DataFrame, filters: Mapping[str, object]) -> pd.Series:
    mask = pd.Series(True, index=df.index)
    for name, value in filters.items():
        if value == ALL_OPTION:
            continue
        mask &= df[name] == value
    return mask


def _matches_search(df: pd.DataFrame, term: str, search_fields: Iterable[str]) -> pd.Series:
    needle = term.lower()
    mask = pd.Series(False, index=df.index)
    for name in search_fields:
        haystack = df[name].fillna("").astype(str).str.lower()
        mask |= haystack.str.contains(needle, regex=False)
    return mask


def filter_and_search(
    df: pd.DataFrame,
    filters: Mapping[str, object] | None = None,
    search_term: str | None = "",
    search_fields: Iterable[str] = (),
) -> pd.DataFrame:
    """Return the rows matching every non-"All" filter and the search term.

    Parameters
    ----------
    df : pd.DataFrame
        Full (unfiltered) entity snapshot.
    filters : mapping, optional
        Field name to exact-match value, or ``ALL_OPTION`` for no constraint.
    search_term : str, optional
        Case-insensitive literal substring; empty matches everything.
    search_fields : iterable of str
        Text fields the search term is matched against.

    Returns
    -------
    pd.DataFrame
        Matching rows in their original order (a copy; ``df`` is untouched).
    """
    if df.empty:
        return df.copy()
    mask = _matches_filters(df, filters or {})
    if search_term:
        mask &= _matches_search(df, search_term, search_fields)
    return df[mask].copy()


def total_pages(row_count: int, page_size: int) -> int:
    if page_size <= 0:
        raise ValueError(f"page_size must be positive, got {page_size}")
    if row_count <= 0:
        return 0
    return math.ceil(row_count / page_size)


def paginate(view: pd.DataFrame, page_size: int, page_number: int) -> Page:
    """Slice a 1-indexed page out of ``view``; out-of-range pages are empty."""
    pages = total_pages(len(view), page_size)
    if page_number < 1 or page_number > pages:
        rows = view.iloc[0:0]
    else:
        start = (page_number - 1) * page_size
        rows = view.iloc[start : start + page_size]
    return Page(rows=rows.copy(), current_page=page_number, total_pages=pages, total_rows=len(view))


def filter_options(df: pd.DataFrame, name: str) -> list[str]:
    """Options for a filter select: "All" then the distinct values of the full collection."""
    if df.empty or name not in df.columns:
        return [ALL_OPTION]
    observed = df[name].dropna().unique().tolist()
    order = ORDERED_OPTION_FIELDS.get(name)
    if order is not None:
        rank = {value: idx for idx, value in enumerate(order)}
        observed.sort(key=lambda v: rank.get(v, len(rank)))
    return [ALL_OPTION, *observed]


def apply_spec(df: pd.DataFrame, spec: QuerySpec, state: TableState) -> pd.DataFrame:
    """Filtered view of ``df`` for the filters and search term held in ``state``."""
    filters = {name: state.filter_value(name) for name in spec.filter_fields}
    return filter_and_search(df, filters, state.search_term, spec.search_fields)


def run_query(df: pd.DataFrame, spec: QuerySpec, state: TableState) -> Page:
    """Filter, search and paginate ``df`` according to ``spec`` and ``state``."""
    return paginate(apply_spec(df, spec, state), spec.page_size, state.page)
