"""Category aggregations: counts of records per categorical value."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

import pandas as pd

CATEGORY_COLUMNS = ["name", "value"]


def category_counts(df: pd.DataFrame, field: str, order: Sequence[str] | None = None) -> pd.DataFrame:
    """Count records per value of ``field`` as ordered ``name, value`` pairs.

    Only categories present in ``df`` appear (no zero rows). Rows follow the
    first-seen order of the input unless ``order`` is given, in which case
    listed categories come first in that order and any others keep first-seen
    order after them. The ``value`` column always sums to ``len(df)``.
    """
    if df.empty or field not in df.columns:
        return pd.DataFrame(columns=CATEGORY_COLUMNS)
    counts = (
        df.groupby(field, sort=False, dropna=False)
        .size()
        .reset_index(name="value")
        .rename(columns={field: "name"})
    )
    counts["value"] = counts["value"].astype(int)
    if order:
        rank = {name: idx for idx, name in enumerate(order)}
        counts["_rank"] = counts["name"].map(lambda n: rank.get(n, len(rank)))
        counts = counts.sort_values("_rank", kind="stable").drop(columns="_rank")
    return counts[CATEGORY_COLUMNS].reset_index(drop=True)


def count_where(df: pd.DataFrame, field: str, values: Iterable[object]) -> int:
    """Number of rows whose ``field`` is one of ``values``."""
    if df.empty or field not in df.columns:
        return 0
    return int(df[field].isin(list(values)).sum())

