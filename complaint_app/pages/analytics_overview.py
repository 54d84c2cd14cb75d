"""Analytics overview page.

Renders summary cards, status/category/urgency distributions and the
week/month/year trend with a focusable period, from the loaded snapshot.
"""

from __future__ import annotations

import streamlit as st

from complaint_app.analytics.aggregations.ranking import percent_of_total, top_periods
from complaint_app.analytics.metrics.timeseries import series_to_frame
from complaint_app.app import register_page
from complaint_app.core.config import RESOLUTION_ORDER, SETTINGS
from complaint_app.core.mappers import records_to_dataframe
from complaint_app.core.service import ComplaintService
from complaint_app.core.view_config import get_view
from complaint_app.features.analytics_overview.selection import DashboardSelection
from complaint_app.visual.charts import category_chart, status_chart, trend_chart, urgency_chart


def _selection() -> DashboardSelection:
    selection = st.session_state.get("dashboard_selection")
    if selection is None:
        selection = DashboardSelection()
        st.session_state["dashboard_selection"] = selection
    return selection


@register_page("Analytics Overview")
def analytics_overview_page():
    st.title("Analytics Overview")
    st.caption("Breakdown of complaint activity across the platform.")
    service: ComplaintService | None = st.session_state.get("complaint_service")
    if service is None:
        st.warning("Load complaints on the Data Source page first.")
        return

    selection = _selection()
    labels = {res: get_view(res)["label"] for res in RESOLUTION_ORDER}
    chosen = st.radio(
        "Trend range",
        RESOLUTION_ORDER,
        index=RESOLUTION_ORDER.index(selection.resolution),
        format_func=lambda res: labels[res],
        horizontal=True,
    )
    if chosen != selection.resolution:
        selection.select_resolution(chosen)

    ctx = service.build_context(selection)
    if service.loaded_at is not None:
        st.caption(f"Updated {service.loaded_at:%b %d, %Y %H:%M}")

    cols = st.columns(4)
    cols[0].metric("Total Complaints", ctx.cards.total_complaints, help="All time")
    cols[1].metric("Active Queue", ctx.cards.active_queue, help="Pending + In Progress")
    cols[2].metric("Weekly Volume", ctx.cards.weekly_volume, help="Submissions (last 7 days)")
    cols[3].metric("Avg. per Day", ctx.cards.avg_per_day, help="Based on the last 7 days")

    st.subheader("Status Distribution")
    st.altair_chart(status_chart(ctx.status_counts), use_container_width=True)

    left, right = st.columns(2)
    with left:
        st.subheader("Top Categories")
        chart = category_chart(ctx.top_categories)
        if chart is None:
            st.info("No complaints yet.")
        else:
            st.altair_chart(chart, use_container_width=True)
    with right:
        st.subheader("Urgency Levels")
        st.altair_chart(urgency_chart(ctx.urgency_counts), use_container_width=True)

    view = get_view(ctx.active_resolution)
    st.subheader(f"Complaint Trends ({view['description']})")
    series = ctx.active_series
    keys = [b.key for b in series]
    focus_labels = {b.key: b.label for b in series}
    current = ctx.focused_period.key if ctx.focused_period is not None else keys[-1]
    picked = st.selectbox(
        "Focused period",
        keys,
        index=keys.index(current),
        format_func=lambda key: focus_labels[key],
    )
    if picked != current and selection.focus_period(picked, series):
        ctx = service.build_context(selection, ctx.reference_now)

    focused = ctx.focused_period
    chart, _ = trend_chart(ctx.active_series, focused.key if focused is not None else None)
    st.altair_chart(chart, use_container_width=True)

    if focused is not None:
        f_cols = st.columns(3)
        f_cols[0].metric("Period", focused.label)
        f_cols[1].metric("Complaints", focused.count)
        f_cols[2].metric(
            "Share of Range",
            f"{ctx.focused_percent}%",
            help=f"{focused.count} of {ctx.active_total} complaint(s) in {view['description'].lower()}",
        )

    st.markdown(f"**{view['label']} Summary**")
    for rank, bucket in enumerate(top_periods(ctx.active_summary), start=1):
        share = percent_of_total(bucket, ctx.active_series)
        st.write(f"{rank}. {bucket.label}: {bucket.count} complaint(s) ({share}%)")

    csv = series_to_frame(ctx.active_series).to_csv(index=False).encode(SETTINGS.download_encoding)
    st.download_button(
        "Download Trend CSV",
        data=csv,
        file_name=f"complaint_trend_{ctx.active_resolution.value}.csv",
        mime="text/csv",
    )

    records_csv = records_to_dataframe(service.snapshot, tz=service.tz).to_csv(index=False)
    st.download_button(
        "Download Normalized Complaints CSV",
        data=records_csv.encode(SETTINGS.download_encoding),
        file_name="complaints_normalized.csv",
        mime="text/csv",
    )
