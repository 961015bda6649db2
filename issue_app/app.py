"""Application entry point: page registry, router, and session state."""

from __future__ import annotations

import streamlit as st

from issue_app.core.state import DashboardState

PAGES = {}
STATE_KEY = "dashboard_state"


def register_page(label):
    def decorator(func):
        PAGES[label] = func
        return func

    return decorator


def get_dashboard_state() -> DashboardState:
    if STATE_KEY not in st.session_state:
        st.session_state[STATE_KEY] = DashboardState()
    return st.session_state[STATE_KEY]


def main():
    st.sidebar.title("Issue Tracker Dashboard")
    pages = list(PAGES.keys())
    if not pages:
        st.write("No pages registered yet.")
        return
    preferred_order = [
        "Issue Overview",  # charts, table, search
        "Data Source",  # upload or remote connection
    ]
    ordered = [name for name in preferred_order if name in pages]
    trailing = sorted(name for name in pages if name not in preferred_order)
    pages = ordered + trailing

    # Nothing loaded yet: start on the data source page
    if "Data Source" in pages and get_dashboard_state().source is None:
        default = pages.index("Data Source")
    else:
        default = 0
    page = st.sidebar.selectbox("Page", pages, index=default)
    PAGES[page]()


if __name__ == "__main__":
    main()
