"""Pure helpers to build the overview page context (no Streamlit)."""

from __future__ import annotations

from dataclasses import dataclass

import pandas as pd

from issue_app.analytics.aggregations.buckets import kpi_summary
from issue_app.core.config import SETTINGS
from issue_app.core.models import IssueStats, KpiSummary, SelectedFilter
from issue_app.core.service import IssueDataSource


@dataclass(slots=True)
class OverviewContext:
    stats: IssueStats
    kpis: KpiSummary
    table_rows: pd.DataFrame
    selected: SelectedFilter | None
    filtered_rows: pd.DataFrame


def build_context(
    source: IssueDataSource,
    selected: SelectedFilter | None = None,
    filtered: pd.DataFrame | None = None,
    max_rows: int | None = None,
) -> OverviewContext:
    """Assemble the page context; ``filtered`` skips the source query when given."""
    stats = source.stats()
    limit = SETTINGS.max_table_rows if max_rows is None else max_rows
    if filtered is None:
        filtered = source.filter(selected) if selected is not None else pd.DataFrame()
    return OverviewContext(
        stats=stats,
        kpis=kpi_summary(stats),
        table_rows=source.issues().head(limit),
        selected=selected,
        filtered_rows=filtered,
    )
