"""Data source page: point the dashboard at a complaints export and load it."""

from __future__ import annotations

import pytz
import streamlit as st

from complaint_app.app import register_page
from complaint_app.core.complaint_client import JsonFileSource
from complaint_app.core.config import SETTINGS, TIMEZONE
from complaint_app.core.mappers import records_to_dataframe, resolve_timezone
from complaint_app.core.service import ComplaintFetchError, ComplaintService
from complaint_app.visual.progress import ProgressReporter


@register_page("Data Source")
def data_source_page():
    st.title("Complaint Data Source")
    st.caption("Load a JSON export of the complaints collection.")

    secrets = st.secrets.get("complaints", {})
    path = st.text_input(
        "Complaints JSON path",
        value=st.session_state.get("complaints_path") or secrets.get("COMPLAINTS_JSON") or "",
    )
    tz_name = st.text_input(
        "Timezone (blank = host local time)",
        value=st.session_state.get("complaints_tz") or secrets.get("TIMEZONE") or TIMEZONE or "",
    )
    load_btn = st.button("Load Complaints", type="primary")

    if load_btn:
        if not path:
            st.error("A file path is required.")
            return
        try:
            resolve_timezone(tz_name.strip() or None)
        except pytz.UnknownTimeZoneError:
            st.error(f"Unknown timezone: {tz_name}")
            return
        service = ComplaintService(JsonFileSource(path), tz=tz_name.strip() or None)
        reporter = ProgressReporter(f"Loading complaints from {path}")
        try:
            records = service.refresh(progress=reporter.callback)
        except ComplaintFetchError as exc:
            reporter.error(str(exc))
            return
        st.session_state["complaints_path"] = path
        st.session_state["complaints_tz"] = tz_name
        st.session_state["complaint_service"] = service
        reporter.complete(f"Loaded {len(records)} complaint(s).")

    service = st.session_state.get("complaint_service")
    if service is not None:
        st.info("ComplaintService ready.")
        df = records_to_dataframe(service.snapshot, tz=service.tz)
        st.subheader("Normalized Records")
        if len(df) > SETTINGS.max_table_rows:
            st.caption(f"Showing the first {SETTINGS.max_table_rows} of {len(df)} records.")
        st.dataframe(df.head(SETTINGS.max_table_rows), use_container_width=True, hide_index=True)
