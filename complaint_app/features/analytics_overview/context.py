"""Pure helpers to build the analytics overview context (no Streamlit)."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime, tzinfo

from complaint_app.analytics.aggregations.distribution import status_counts, top_categories, urgency_counts
from complaint_app.analytics.aggregations.ranking import percent_of_total, rank_descending, total_of
from complaint_app.analytics.metrics.timeseries import build_daily_volume, build_series
from complaint_app.core.config import DEFAULT_TOP_CATEGORIES, OPEN_STATUSES, RESOLUTION_ORDER
from complaint_app.core.mappers import local_now, to_local_datetime
from complaint_app.core.models import (
    Bucket,
    CategoryEntry,
    ComplaintRecord,
    ComplaintStatus,
    Resolution,
    Series,
    Urgency,
)
from complaint_app.features.analytics_overview.selection import DashboardSelection


@dataclass(slots=True)
class SummaryCards:
    total_complaints: int = 0
    active_queue: int = 0
    weekly_volume: int = 0
    avg_per_day: int = 0


@dataclass(slots=True)
class AnalyticsContext:
    """Every aggregate the overview page renders, computed in one pass."""

    reference_now: datetime
    status_counts: dict[ComplaintStatus, int]
    urgency_counts: dict[Urgency, int]
    top_categories: list[CategoryEntry]
    series: dict[Resolution, Series]
    summaries: dict[Resolution, Series]
    active_resolution: Resolution
    focused_period: Bucket | None = None
    focused_percent: int = 0
    daily_volume: Series = field(default_factory=list)
    cards: SummaryCards = field(default_factory=SummaryCards)

    @property
    def active_series(self) -> Series:
        return self.series[self.active_resolution]

    @property
    def active_summary(self) -> Series:
        return self.summaries[self.active_resolution]

    @property
    def active_total(self) -> int:
        return total_of(self.active_series)


def _summary_cards(
    record_count: int,
    statuses: dict[ComplaintStatus, int],
    daily_volume: Series,
) -> SummaryCards:
    weekly = total_of(daily_volume)
    # Half-up rounding, matching percent_of_total
    avg = int(weekly / len(daily_volume) + 0.5) if daily_volume else 0
    return SummaryCards(
        total_complaints=record_count,
        active_queue=sum(statuses[s] for s in OPEN_STATUSES),
        weekly_volume=weekly,
        avg_per_day=avg,
    )


def build_context(
    records: Iterable[ComplaintRecord],
    selection: DashboardSelection | None = None,
    reference_now: datetime | None = None,
    *,
    tz: tzinfo | str | None = None,
    top_categories_limit: int = DEFAULT_TOP_CATEGORIES,
) -> AnalyticsContext:
    """Run the full aggregation pass over one snapshot.

    Parameters
    ----------
    records : iterable of ComplaintRecord
        Complete snapshot; consumed once.
    selection : DashboardSelection, optional
        Active resolution and focus. A default (weekly, unfocused) selection
        is used when omitted.
    reference_now : datetime, optional
        Captured once here and shared by every series so all windows end
        at the same instant.
    tz : tzinfo or str, optional
        Timezone for local calendar arithmetic.
    top_categories_limit : int
        Maximum number of category entries.

    Returns
    -------
    AnalyticsContext
    """
    snapshot = list(records)
    selection = selection or DashboardSelection()
    now = local_now(tz) if reference_now is None else to_local_datetime(reference_now, tz)

    series = {res: build_series(snapshot, res, now, tz=tz) for res in RESOLUTION_ORDER}
    summaries = {res: rank_descending(s) for res, s in series.items()}
    statuses = status_counts(snapshot)
    daily = build_daily_volume(snapshot, now, tz=tz)

    active = series[selection.resolution]
    focused = selection.current_focused_period(active)
    return AnalyticsContext(
        reference_now=now,
        status_counts=statuses,
        urgency_counts=urgency_counts(snapshot),
        top_categories=top_categories(snapshot, limit=top_categories_limit),
        series=series,
        summaries=summaries,
        active_resolution=selection.resolution,
        focused_period=focused,
        focused_percent=percent_of_total(focused, active) if focused is not None else 0,
        daily_volume=daily,
        cards=_summary_cards(len(snapshot), statuses, daily),
    )
