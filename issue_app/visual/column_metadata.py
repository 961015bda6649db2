"""Central column metadata and helpers for table rendering."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import streamlit as st

# Canonical column -> (label, help text)
COLUMN_METADATA: dict[str, tuple[str, str]] = {
    "id": ("ID", "Issue identifier from the source dataset."),
    "issueTrackerType": ("Type", "Issue tracker category (bug, feature, support...)."),
    "subject": ("Subject", "Short issue title."),
    "description": ("Description", "Full issue description."),
    "state": ("State", "Location or state reported on the issue."),
    "status": ("Status", "Current workflow status."),
    "priority": ("Priority", "Priority label assigned to the issue."),
    "assignedToId": ("Assigned To", "Identifier of the current assignee."),
    "email": ("Email", "Assignee email address."),
    "dueDate": ("Due Date", "Due date as written in the source."),
    "createdOn": ("Created", "Creation date as written in the source."),
    "closedOn": ("Closed", "Closure date as written in the source."),
    "resolution_days": ("Resolution", "Whole days between creation and closure."),
}


def column_label(col: str) -> str:
    meta = COLUMN_METADATA.get(col)
    return meta[0] if meta else col


def apply_column_metadata(
    columns: Iterable[str],
    existing: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Return a column_config dictionary with human labels and hover help."""

    config: dict[str, Any] = dict(existing or {})
    for col in columns:
        if col in config:
            continue
        meta = COLUMN_METADATA.get(col)
        if not meta:
            continue
        label, help_text = meta
        config[col] = st.column_config.TextColumn(label, help=help_text)
    return config
