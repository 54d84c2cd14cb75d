"""Trailing time-series construction (pure functions)."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timedelta, tzinfo

import pandas as pd

from complaint_app.analytics.metrics.periods import (
    WEEKDAY_ABBR,
    period_key,
    period_label,
    period_start,
    shift_periods,
)
from complaint_app.core.config import DAILY_VOLUME_DAYS, WINDOW_LENGTHS
from complaint_app.core.mappers import local_now, to_local_datetime
from complaint_app.core.models import Bucket, ComplaintRecord, Resolution, Series


def window_length(resolution: Resolution | str) -> int:
    return WINDOW_LENGTHS[Resolution.parse(resolution)]


def build_series(
    records: Iterable[ComplaintRecord],
    resolution: Resolution | str,
    reference_now: datetime | None = None,
    *,
    tz: tzinfo | str | None = None,
) -> Series:
    """Tally records into the trailing window of periods ending at now.

    Parameters
    ----------
    records : iterable of ComplaintRecord
        Complaint snapshot.
    resolution : Resolution or str
        Week, month or year.
    reference_now : datetime, optional
        The instant the window ends at. Sampled once from the clock when
        omitted; never re-sampled during construction. Aware values are
        converted to local time.
    tz : tzinfo or str, optional
        Timezone for local calendar arithmetic (defaults to config/host).

    Returns
    -------
    list[Bucket]
        Exactly ``window_length(resolution)`` buckets, oldest first.
        Records without a parseable date, or dated outside the window, are
        skipped.
    """
    resolution = Resolution.parse(resolution)
    now = local_now(tz) if reference_now is None else to_local_datetime(reference_now, tz)

    series: Series = []
    lookup: dict[str, Bucket] = {}
    for offset in range(window_length(resolution) - 1, -1, -1):
        start = period_start(shift_periods(now, resolution, offset), resolution)
        key = period_key(start, resolution)
        bucket = Bucket(key=key, label=period_label(start, resolution), count=0, start=start)
        series.append(bucket)
        lookup[key] = bucket

    for record in records:
        submitted = to_local_datetime(record.submission_date, tz)
        if submitted is None:
            continue
        bucket = lookup.get(period_key(period_start(submitted, resolution), resolution))
        if bucket is not None:
            bucket.count += 1
    return series


def build_daily_volume(
    records: Iterable[ComplaintRecord],
    reference_now: datetime | None = None,
    *,
    days: int = DAILY_VOLUME_DAYS,
    tz: tzinfo | str | None = None,
) -> Series:
    """One bucket per local calendar day for the last ``days`` days, today last."""
    now = local_now(tz) if reference_now is None else to_local_datetime(reference_now, tz)
    today = now.replace(hour=0, minute=0, second=0, microsecond=0)

    series: Series = []
    lookup: dict[str, Bucket] = {}
    for offset in range(days - 1, -1, -1):
        day = today - timedelta(days=offset)
        key = day.date().isoformat()
        bucket = Bucket(key=key, label=WEEKDAY_ABBR[day.weekday()], count=0, start=day)
        series.append(bucket)
        lookup[key] = bucket

    for record in records:
        submitted = to_local_datetime(record.submission_date, tz)
        if submitted is None:
            continue
        bucket = lookup.get(submitted.date().isoformat())
        if bucket is not None:
            bucket.count += 1
    return series


def series_to_frame(series: Series) -> pd.DataFrame:
    """Tabular view of a series for charts and CSV export."""
    df = pd.DataFrame(
        [{"key": b.key, "label": b.label, "start": b.start, "count": b.count} for b in series],
        columns=["key", "label", "start", "count"],
    )
    df["start"] = pd.to_datetime(df["start"], errors="coerce")
    df["count"] = df["count"].astype(int)
    return df
