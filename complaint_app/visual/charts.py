"""Chart builders (Altair) for distributions and trends."""

from __future__ import annotations

import altair as alt
import pandas as pd

from complaint_app.analytics.metrics.timeseries import series_to_frame
from complaint_app.core.config import STATUS_DISPLAY, URGENCY_DISPLAY
from complaint_app.core.models import CategoryEntry, ComplaintStatus, Series, Urgency

HIGHLIGHT_COLOR = "#b91c1c"
BASE_COLOR = "#ea580c"


def _display_frame(counts: dict, display: dict) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {"label": display[key]["label"], "color": display[key]["color"], "count": int(counts.get(key, 0))}
            for key in display
        ],
        columns=["label", "color", "count"],
    )


def _bar_chart(df: pd.DataFrame, title: str, height: int = 240) -> alt.Chart:
    order = list(df["label"])
    return (
        alt.Chart(df)
        .mark_bar()
        .encode(
            x=alt.X("label:N", sort=order, title=None),
            y=alt.Y("count:Q", title="Complaints"),
            color=alt.Color("color:N", scale=None, legend=None),
            tooltip=[alt.Tooltip("label:N", title=title), alt.Tooltip("count:Q", title="Count")],
        )
        .properties(height=height)
    )


def status_chart(counts: dict[ComplaintStatus, int]) -> alt.Chart:
    return _bar_chart(_display_frame(counts, STATUS_DISPLAY), "Status")


def urgency_chart(counts: dict[Urgency, int]) -> alt.Chart:
    return _bar_chart(_display_frame(counts, URGENCY_DISPLAY), "Urgency")


def category_chart(entries: list[CategoryEntry]) -> alt.Chart | None:
    if not entries:
        return None
    df = pd.DataFrame([{"label": e.label, "count": e.count} for e in entries], columns=["label", "count"])
    return (
        alt.Chart(df)
        .mark_bar(color=BASE_COLOR)
        .encode(
            y=alt.Y("label:N", sort=list(df["label"]), title=None),
            x=alt.X("count:Q", title="Complaints"),
            tooltip=[alt.Tooltip("label:N", title="Category"), alt.Tooltip("count:Q", title="Count")],
        )
        .properties(height=max(len(df) * 36, 120))
    )


def trend_chart(series: Series, focused_key: str | None = None) -> tuple[alt.Chart, pd.DataFrame]:
    """Bar chart of a period series with the focused bucket highlighted."""
    chart_df = series_to_frame(series)
    chart_df["focused"] = chart_df["key"] == focused_key
    chart = (
        alt.Chart(chart_df)
        .mark_bar()
        .encode(
            x=alt.X("label:N", sort=list(chart_df["label"]), title=None),
            y=alt.Y("count:Q", title="Complaints"),
            color=alt.condition(
                alt.datum.focused,
                alt.value(HIGHLIGHT_COLOR),
                alt.value(BASE_COLOR),
            ),
            tooltip=[
                alt.Tooltip("label:N", title="Period"),
                alt.Tooltip("count:Q", title="Complaints"),
            ],
        )
        .properties(height=300)
    )
    return chart, chart_df
