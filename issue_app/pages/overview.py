"""Issue overview page: KPI cards, clickable charts, search, and issue table."""

from __future__ import annotations

import streamlit as st

from issue_app.analytics.aggregations.buckets import kpi_summary
from issue_app.app import get_dashboard_state, register_page
from issue_app.core.errors import TransportError
from issue_app.core.models import FilterKind
from issue_app.core.state import DashboardState, LoadPhase
from issue_app.features.overview.context import build_context
from issue_app.visual.charts import KIND_TITLES, bucket_chart, selected_name
from issue_app.visual.column_metadata import column_label
from issue_app.visual.tables import render_issue_detail, render_issue_table


def _render_kpis(kpis):
    cols = st.columns(5)
    cols[0].metric("Total Issues", kpis.total)
    cols[1].metric("Open", kpis.open)
    cols[2].metric("Closed", kpis.closed)
    cols[3].metric("Urgent", kpis.urgent)
    cols[4].metric("Avg Resolution", f"{kpis.avg_resolution_days} days")


def _dismiss_filter():
    get_dashboard_state().filter.dismiss()


def _dismiss_search():
    get_dashboard_state().search.dismiss()


@st.dialog("Filtered Issues", width="large", on_dismiss=_dismiss_filter)
def _filter_dialog(state: DashboardState, rows):
    selected = state.filter.current
    st.subheader(f"{column_label(selected.kind.field.value)}: {selected.value}")
    st.caption(f"{len(rows)} issues found")
    render_issue_table(rows, "filtered", key="filtered_table")
    if st.button("Close", key="close_filter"):
        state.filter.dismiss()
        st.rerun()


@st.dialog("Issue Details", width="large", on_dismiss=_dismiss_search)
def _search_dialog(state: DashboardState):
    render_issue_detail(state.search.current)
    if st.button("Close", key="close_search"):
        state.search.dismiss()
        st.rerun()


def _render_search(state: DashboardState):
    with st.form("issue_search", clear_on_submit=False):
        query = st.text_input("Search by ID", placeholder="Enter issue ID")
        submitted = st.form_submit_button("Search")
    if submitted:
        state.search_issue(query)


def _render_charts(state: DashboardState, stats):
    kinds = list(FilterKind)
    for row_start in range(0, len(kinds), 2):
        cols = st.columns(2)
        for col, kind in zip(cols, kinds[row_start : row_start + 2]):
            chart = bucket_chart(stats.buckets_for(kind), kind)
            if chart is None:
                col.caption(f"{KIND_TITLES[kind]}: no data")
                continue
            event = col.altair_chart(
                chart,
                use_container_width=True,
                on_select="rerun",
                key=f"chart_{kind.value}",
            )
            # Chart selections persist across reruns; only a changed pick opens a new filter
            name = selected_name(event)
            seen_key = f"picked_{kind.value}"
            if name is not None and name != st.session_state.get(seen_key):
                state.select_bucket(kind, name)
            st.session_state[seen_key] = name


@register_page("Issue Overview")
def overview_page():
    st.title("Issue Tracker Dashboard")
    st.caption("Click on charts to see details.")
    state = get_dashboard_state()

    if state.load.phase is LoadPhase.FAILED and isinstance(state.load.error, TransportError):
        st.error(f"Unable to load issues: {state.load.error}")
        if st.button("Retry", type="primary"):
            with st.spinner("Reloading..."):
                state.retry()
            st.rerun()
        return
    if state.source is None:
        st.info("Load a dataset on the Data Source page first.")
        return

    _render_search(state)
    stats = state.source.stats()
    _render_kpis(kpi_summary(stats))
    _render_charts(state, stats)

    alert = state.pop_alert()
    if alert:
        st.warning(alert)

    ctx = build_context(state.source, state.filter.current, state.filter.detail)

    st.markdown(f"**All Issues ({ctx.kpis.total})**")
    render_issue_table(ctx.table_rows, key="all_issues")

    if state.filter.active and state.filter.show():
        _filter_dialog(state, ctx.filtered_rows)
    elif state.search.active and state.search.show():
        _search_dialog(state)
