from datetime import datetime, timedelta

import pandas as pd
import pytz

from complaint_app.analytics.metrics.timeseries import (
    build_daily_volume,
    build_series,
    series_to_frame,
    window_length,
)
from complaint_app.core.models import ComplaintRecord, Resolution

NOW = datetime(2026, 10, 14, 15, 30)  # Wednesday


def _records(*dates):
    return [ComplaintRecord(id=f"C-{i}", status="pending", submission_date=d) for i, d in enumerate(dates)]


def test_series_lengths_keys_and_order():
    for resolution, expected in ((Resolution.WEEK, 6), (Resolution.MONTH, 6), (Resolution.YEAR, 5)):
        series = build_series([], resolution, NOW)
        assert len(series) == expected == window_length(resolution)
        keys = [b.key for b in series]
        assert len(set(keys)) == len(keys)
        starts = [b.start for b in series]
        assert starts == sorted(starts)
        assert all(b.count == 0 for b in series)


def test_week_series_labels_end_at_current_week():
    series = build_series([], Resolution.WEEK, NOW)
    assert [b.label for b in series] == [
        "Week of Sep 6",
        "Week of Sep 13",
        "Week of Sep 20",
        "Week of Sep 27",
        "Week of Oct 4",
        "Week of Oct 11",
    ]


def test_month_and_year_labels():
    months = build_series([], "month", NOW)
    assert [b.label for b in months] == ["May 2026", "Jun 2026", "Jul 2026", "Aug 2026", "Sep 2026", "Oct 2026"]
    years = build_series([], "year", NOW)
    assert [b.label for b in years] == ["2022", "2023", "2024", "2025", "2026"]


def test_records_tallied_into_matching_buckets():
    records = _records(
        datetime(2026, 10, 11, 0, 0),  # current week, Sunday midnight
        datetime(2026, 10, 14, 9, 0),  # current week
        datetime(2026, 10, 10, 23, 59),  # previous week
        datetime(2026, 9, 6, 12, 0),  # oldest week in window
        datetime(2026, 9, 5, 12, 0),  # just before the window
    )
    series = build_series(records, Resolution.WEEK, NOW)
    assert [b.count for b in series] == [1, 0, 0, 0, 1, 2]


def test_out_of_window_and_undated_records_skipped():
    records = _records(
        datetime(2019, 6, 1),
        None,
        "not a date",
        "",
        datetime(2026, 1, 15),
    )
    years = build_series(records, Resolution.YEAR, NOW)
    assert sum(b.count for b in years) == 1
    assert years[-1].count == 1
    months = build_series(records, Resolution.MONTH, NOW)
    assert sum(b.count for b in months) == 0


def test_mixed_datelike_inputs():
    records = _records(
        "2026-10-12T08:00:00",
        datetime(2026, 10, 13, tzinfo=pytz.UTC) + timedelta(hours=12),
        int(datetime(2026, 10, 13, 12, tzinfo=pytz.UTC).timestamp() * 1000),
    )
    series = build_series(records, Resolution.WEEK, NOW, tz="UTC")
    assert series[-1].count == 3


def test_build_series_is_idempotent():
    records = _records(datetime(2026, 10, 1), datetime(2026, 8, 20), datetime(2025, 12, 31))
    for resolution in Resolution:
        first = build_series(records, resolution, NOW)
        second = build_series(records, resolution, NOW)
        assert first == second


def test_series_does_not_mutate_records():
    records = _records("2026-10-12")
    build_series(records, Resolution.WEEK, NOW)
    assert records[0].submission_date == "2026-10-12"


def test_daily_volume():
    records = _records(
        datetime(2026, 10, 14, 1, 0),
        datetime(2026, 10, 14, 23, 0),
        datetime(2026, 10, 8, 0, 0),
        datetime(2026, 10, 7, 23, 59),
    )
    daily = build_daily_volume(records, NOW)
    assert len(daily) == 7
    assert daily[0].key == "2026-10-08"
    assert daily[-1].key == "2026-10-14"
    assert daily[-1].label == "Wed"
    assert [b.count for b in daily] == [1, 0, 0, 0, 0, 0, 2]


def test_series_to_frame():
    series = build_series(_records(datetime(2026, 10, 2)), Resolution.MONTH, NOW)
    df = series_to_frame(series)
    assert list(df.columns) == ["key", "label", "start", "count"]
    assert len(df) == 6
    assert int(df["count"].sum()) == 1
    assert df.loc[5, "label"] == "Oct 2026"


def test_daily_volume_labels_cover_every_weekday():
    daily = build_daily_volume([], NOW)
    assert [b.label for b in daily] == ["Thu", "Fri", "Sat", "Sun", "Mon", "Tue", "Wed"]


def test_container_and_numpy_submission_dates():
    millis = int(datetime(2026, 10, 13, 12, tzinfo=pytz.UTC).timestamp() * 1000)
    records = _records(
        [],
        ["2026-10-12"],
        ["2026-10-12", "2026-10-13"],
        ("2026-10-12",),
        {"seconds": 0},
        pd.Series([millis], dtype="int64").iloc[0],
        "2026-10-12",
    )
    series = build_series(records, Resolution.WEEK, NOW, tz="UTC")
    assert len(series) == 6
    # only the numpy epoch millis and the plain string are counted
    assert series[-1].count == 2
