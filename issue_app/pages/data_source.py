"""Data source page: upload a CSV/Excel file or connect to the issue service."""

from __future__ import annotations

import logging
import os

import streamlit as st

from issue_app.app import get_dashboard_state, register_page
from issue_app.core.api_client import IssueAPI
from issue_app.core.config import API_BASE_ENV_VAR, DEFAULT_API_BASE, SETTINGS
from issue_app.core.service import LocalIssueSource, RemoteIssueSource

logger = logging.getLogger(__name__)


def configured_api_base() -> str:
    """API base from secrets (``[issues] API_BASE`` or top level), then env."""
    try:
        issue_secrets = st.secrets.get("issues", {})
        secret_base = issue_secrets.get("API_BASE") or st.secrets.get(API_BASE_ENV_VAR)
    except FileNotFoundError:
        secret_base = None
    return secret_base or os.environ.get(API_BASE_ENV_VAR) or DEFAULT_API_BASE


@register_page("Data Source")
def data_source_page():
    st.title("Data Source")
    st.caption("Upload an issue export or connect to the issue service.")
    state = get_dashboard_state()

    upload_tab, remote_tab = st.tabs(["Upload File", "Remote Service"])

    with upload_tab:
        # Extension checks happen in the loader so unsupported files get a clear message
        uploaded = st.file_uploader("Issue export (.csv, .xlsx, .xls)", key="issue_upload")
        if st.button("Load File", type="primary", disabled=uploaded is None):
            name, data = uploaded.name, uploaded.getvalue()
            with st.spinner(f"Parsing {name}..."):
                loaded = state.run_load(lambda: LocalIssueSource.from_upload(name, data))
            if loaded:
                st.success(f"Loaded {len(state.source.issues())} issue(s) from {name}.")

    with remote_tab:
        base = st.text_input(
            "API base URL",
            value=st.session_state.get("api_base") or configured_api_base(),
        )
        if st.button("Connect", type="primary"):
            if not base.strip():
                st.error("API base URL required.")
                return
            st.session_state["api_base"] = base.strip()
            api = IssueAPI(base.strip(), timeout=SETTINGS.request_timeout)
            with st.spinner("Fetching issues..."):
                loaded = state.run_load(lambda: RemoteIssueSource(api).refresh())
            if loaded:
                st.success(f"Fetched {len(state.source.issues())} issue(s).")

    if state.load.error is not None:
        logger.error("Remote load failed: %s", state.load.error)
        st.error(f"Failed to load issues: {state.load.error}")
    alert = state.pop_alert()
    if alert:
        st.warning(alert)
    if state.source is not None:
        st.info(f"Active dataset: {state.source.label or 'uploaded records'}")
