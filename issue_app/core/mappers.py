"""Mapping raw issue records (any header spelling) into a canonical DataFrame."""

from __future__ import annotations

from collections.abc import Iterable

import pandas as pd

from issue_app.analytics.metrics.resolution import add_resolution_metrics

from .columns import normalize_record
from .models import CanonicalField, Record

CANONICAL_COLUMNS: list[str] = [f.value for f in CanonicalField]


def records_to_dataframe(records: Iterable[Record]) -> pd.DataFrame:
    """Resolve every canonical field per record and derive resolution days.

    Every cell of the result is a string; unresolved fields hold ``"Unknown"``
    (dimensions) or ``"-"`` (everything else). Row order follows input order.
    """
    rows = [normalize_record(r) for r in records]
    df = pd.DataFrame(rows, columns=CANONICAL_COLUMNS, dtype=object)
    return add_resolution_metrics(df).reset_index(drop=True)


def dataframe_to_records(df: pd.DataFrame) -> list[dict[str, object]]:
    """Raw rows from a decoded upload; NaN cells become empty strings."""
    if df.empty:
        return []
    return df.fillna("").to_dict(orient="records")
