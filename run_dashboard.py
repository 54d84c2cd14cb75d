"""Convenience launcher for the Streamlit app.

Usage:
  streamlit run run_dashboard.py

Automatically imports every module in ``complaint_app/pages`` so each page
decorated with ``@register_page`` registers itself without manual edits here.
"""

import logging
from importlib import import_module
from pathlib import Path

import streamlit as st

from complaint_app.app import main

st.set_page_config(layout="wide")
logger = logging.getLogger(__name__)


def _auto_init_complaint_service():
    """Load complaints from the path in Streamlit secrets if available."""
    if "complaint_service" in st.session_state:
        return

    secrets = st.secrets.get("complaints", {})
    path = secrets.get("COMPLAINTS_JSON") or st.secrets.get("COMPLAINTS_JSON")
    if not path:
        st.sidebar.warning("No complaints source configured. Please use the Data Source page.")
        return

    from complaint_app.core.complaint_client import JsonFileSource
    from complaint_app.core.service import ComplaintFetchError, ComplaintService

    service = ComplaintService(JsonFileSource(path), tz=secrets.get("TIMEZONE"))
    try:
        service.refresh()
    except ComplaintFetchError as exc:
        st.sidebar.error(f"Unable to load analytics right now: {exc}")
        return
    st.session_state["complaints_path"] = path
    st.session_state["complaint_service"] = service


_auto_init_complaint_service()

PAGES_DIR = Path(__file__).parent / "complaint_app" / "pages"
for py in sorted(PAGES_DIR.glob("[!_]*.py")):
    mod_name = f"complaint_app.pages.{py.stem}"
    try:
        import_module(mod_name)
    except Exception as e:  # pragma: no cover
        logger.error("Failed importing page %s: %s", mod_name, e)

if __name__ == "__main__":
    main()
