"""Reusable table helpers for Streamlit rendering."""

from __future__ import annotations

import pandas as pd
import streamlit as st

from issue_app.analytics.metrics.resolution import resolution_band
from issue_app.core.column_config import get_columns
from issue_app.core.config import PLACEHOLDER, RESOLUTION_BAND_COLORS

from .column_metadata import apply_column_metadata, column_label


def format_resolution(days: str) -> str:
    return PLACEHOLDER if days == PLACEHOLDER else f"{days} days"


def prepare_issue_table(
    df: pd.DataFrame,
    set_name: str = "ticket_list",
) -> tuple[pd.DataFrame, list[str]]:
    if df.empty:
        return df, []
    canonical = get_columns(set_name) or []
    display_cols = [col for col in canonical if col in df.columns]
    if not display_cols:
        display_cols = list(df.columns)
    table = df[display_cols].copy()
    if "resolution_days" in table.columns:
        table["resolution_days"] = table["resolution_days"].astype(str).apply(format_resolution)
    return table, display_cols


def _band_style(value: str) -> str:
    days = value.split(" ", 1)[0]
    band = resolution_band(days) if days.isdigit() else None
    if band is None:
        return ""
    return f"background-color: {RESOLUTION_BAND_COLORS[band]}"


def render_issue_table(df: pd.DataFrame, set_name: str = "ticket_list", *, key: str | None = None):
    table, display_cols = prepare_issue_table(df, set_name)
    if table.empty:
        st.info("No issues to display.")
        return
    styled = table.style
    if "resolution_days" in display_cols:
        styled = styled.map(_band_style, subset=["resolution_days"])
    st.dataframe(
        styled,
        hide_index=True,
        column_config=apply_column_metadata(display_cols),
        key=key,
    )


def render_issue_detail(record: dict[str, str]):
    for col in get_columns("detail"):
        if col not in record:
            continue
        value = record[col]
        if col == "resolution_days":
            value = format_resolution(str(value))
        st.markdown(f"**{column_label(col)}:** {value}")
