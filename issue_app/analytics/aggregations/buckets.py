"""Dimension aggregations: (name, count) buckets and KPI lookups."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

import pandas as pd

from issue_app.analytics.metrics.resolution import average_resolution
from issue_app.core.config import (
    CLOSED_STATUS,
    OPEN_STATUS,
    STATE_TOP_N,
    UNKNOWN,
    URGENT_PRIORITY_NAMES,
)
from issue_app.core.models import Bucket, FilterKind, IssueStats, KpiSummary


def count_buckets(df: pd.DataFrame, column: str) -> list[Bucket]:
    """Count rows per value of ``column``, in order of first appearance."""
    if df.empty:
        return []
    if column not in df.columns:
        return [Bucket(UNKNOWN, len(df))]
    sizes = df.groupby(column, sort=False, dropna=False).size()
    return [Bucket(str(name), int(count)) for name, count in sizes.items()]


def top_buckets(buckets: Sequence[Bucket], limit: int = STATE_TOP_N) -> list[Bucket]:
    """Largest buckets first; ties keep their original order."""
    ordered = sorted(buckets, key=lambda b: b.value, reverse=True)
    return ordered[:limit]


def counts_by_name(buckets: Iterable[Bucket]) -> dict[str, int]:
    return {b.name: b.value for b in buckets}


def summarize(df: pd.DataFrame) -> IssueStats:
    """Full statistics for a canonical issue frame (see ``records_to_dataframe``)."""
    if df.empty:
        return IssueStats()
    by_kind = {kind: count_buckets(df, kind.field.value) for kind in FilterKind}
    durations = df["resolution_days"] if "resolution_days" in df.columns else []
    return IssueStats(
        total=len(df),
        by_status=by_kind[FilterKind.STATUS],
        by_priority=by_kind[FilterKind.PRIORITY],
        by_type=by_kind[FilterKind.TYPE],
        by_state=top_buckets(by_kind[FilterKind.STATE]),
        avg_resolution_days=average_resolution(durations),
    )


def kpi_summary(stats: IssueStats) -> KpiSummary:
    status_counts = counts_by_name(stats.by_status)
    priority_counts = counts_by_name(stats.by_priority)
    urgent = next((priority_counts[n] for n in URGENT_PRIORITY_NAMES if priority_counts.get(n)), 0)
    return KpiSummary(
        total=stats.total,
        open=status_counts.get(OPEN_STATUS, 0),
        closed=status_counts.get(CLOSED_STATUS, 0),
        urgent=urgent,
        avg_resolution_days=stats.avg_resolution_days,
    )
