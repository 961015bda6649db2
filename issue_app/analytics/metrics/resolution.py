"""Resolution-time metrics (pure functions)."""

from __future__ import annotations

from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal

import pandas as pd

from issue_app.core.config import (
    MS_PER_DAY,
    PLACEHOLDER,
    RESOLUTION_BAND_OVERFLOW,
    RESOLUTION_BANDS,
    SENTINEL_VALUES,
)
from issue_app.core.dates import parse_date

ONE_MS = pd.Timedelta(milliseconds=1)


def resolution_days(created: str | None, closed: str | None) -> str:
    """Whole days between creation and closure, or ``"-"``.

    The absolute difference is rounded up, so a closure recorded before its
    creation still yields a positive count. Missing or unparseable endpoints
    give ``"-"``.
    """
    if closed is None or str(closed).strip() in SENTINEL_VALUES:
        return PLACEHOLDER
    created_ts = parse_date(created)
    closed_ts = parse_date(closed)
    if created_ts is None or closed_ts is None:
        return PLACEHOLDER
    elapsed_ms = abs(closed_ts - created_ts) // ONE_MS
    days = -(-elapsed_ms // MS_PER_DAY)
    return str(days)


def add_resolution_metrics(df: pd.DataFrame) -> pd.DataFrame:
    if df.empty:
        out = df.copy()
        out["resolution_days"] = pd.Series(dtype=str)
        return out
    out = df.copy()
    created = out["createdOn"] if "createdOn" in out.columns else pd.Series(PLACEHOLDER, index=out.index)
    closed = out["closedOn"] if "closedOn" in out.columns else pd.Series(PLACEHOLDER, index=out.index)
    out["resolution_days"] = [resolution_days(c, d) for c, d in zip(created, closed)]
    return out


def average_resolution(values: Iterable[str]) -> str:
    """Mean of the resolvable durations to one decimal, ``"0"`` when none.

    Rounding is exact-decimal half-up, so a mean of 0.15 gives ``"0.2"``.
    Binary float formatting would round the same tie down to ``"0.1"``.
    """
    durations = [int(v) for v in values if v != PLACEHOLDER]
    if not durations:
        return "0"
    mean = Decimal(sum(durations)) / Decimal(len(durations))
    return str(mean.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def resolution_band(
    days: str,
    bands=RESOLUTION_BANDS,
    overflow: str = RESOLUTION_BAND_OVERFLOW,
) -> str | None:
    """Badge band for a duration string; None for ``"-"``."""
    if days == PLACEHOLDER:
        return None
    value = int(days)
    for upper, name in bands:
        if value <= upper:
            return name
    return overflow
