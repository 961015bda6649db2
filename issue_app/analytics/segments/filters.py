"""DataFrame filters backing chart-click selections and id search."""

from __future__ import annotations

import pandas as pd

from issue_app.core.models import CanonicalField, SelectedFilter


def filter_issues(df: pd.DataFrame, selected: SelectedFilter) -> pd.DataFrame:
    """Rows whose resolved value for the selected dimension equals the value exactly."""
    column = selected.kind.field.value
    if df.empty or column not in df.columns:
        return df.iloc[0:0].copy()
    mask = df[column].astype(str) == selected.value
    return df[mask].copy()


def find_issue(df: pd.DataFrame, issue_id: str) -> dict[str, str] | None:
    """First row whose resolved id equals the trimmed query, as a dict."""
    query = str(issue_id).strip()
    column = CanonicalField.ID.value
    if not query or df.empty or column not in df.columns:
        return None
    matches = df[df[column].astype(str) == query]
    if matches.empty:
        return None
    return matches.iloc[0].to_dict()
