"""Convenience launcher for the Streamlit app.

Usage:
  streamlit run run_dashboard.py

Automatically imports every module in ``issue_app/pages`` so each page
decorated with ``@register_page`` registers itself without manual edits here.
"""

import logging
from importlib import import_module
from pathlib import Path

import streamlit as st

from issue_app.app import main

st.set_page_config(page_title="Issue Tracker Dashboard", layout="wide")
logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

PAGES_DIR = Path(__file__).parent / "issue_app" / "pages"
for py in sorted(PAGES_DIR.glob("[!_]*.py")):
    mod_name = f"issue_app.pages.{py.stem}"
    try:
        import_module(mod_name)
    except ImportError as e:
        logger.error("Failed importing page %s: %s", mod_name, e)

main()
