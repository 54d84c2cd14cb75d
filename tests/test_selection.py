from datetime import datetime

import pytest

from complaint_app.analytics.metrics.timeseries import build_series
from complaint_app.core.models import Resolution
from complaint_app.features.analytics_overview.selection import DashboardSelection

NOW = datetime(2026, 10, 14, 15, 30)


def test_defaults_focus_most_recent_period():
    selection = DashboardSelection()
    series = build_series([], selection.resolution, NOW)
    assert selection.resolution is Resolution.WEEK
    assert selection.focused_key is None
    assert selection.current_focused_period(series) is series[-1]


def test_focus_period_known_key():
    selection = DashboardSelection()
    series = build_series([], Resolution.WEEK, NOW)
    assert selection.focus_period(series[1].key, series) is True
    assert selection.current_focused_period(series) is series[1]


def test_focus_period_unknown_key_is_noop():
    selection = DashboardSelection()
    series = build_series([], Resolution.WEEK, NOW)
    selection.focus_period(series[2].key, series)
    months = build_series([], Resolution.MONTH, NOW)
    assert selection.focus_period(months[0].key, series) is False
    assert selection.focused_key == series[2].key


def test_select_resolution_clears_focus():
    selection = DashboardSelection()
    weeks = build_series([], Resolution.WEEK, NOW)
    selection.focus_period(weeks[0].key, weeks)
    selection.select_resolution("month")
    assert selection.resolution is Resolution.MONTH
    assert selection.focused_key is None
    months = build_series([], Resolution.MONTH, NOW)
    assert selection.current_focused_period(months) is months[-1]

    # re-selecting the same resolution also clears
    selection.focus_period(months[3].key, months)
    selection.select_resolution(Resolution.MONTH)
    assert selection.focused_key is None


def test_stale_focus_falls_back_to_last():
    selection = DashboardSelection(resolution="year", focused_key="year:1999-01-01T00:00:00")
    years = build_series([], Resolution.YEAR, NOW)
    assert selection.resolution is Resolution.YEAR
    assert selection.current_focused_period(years) is years[-1]


def test_empty_series_has_no_focus():
    assert DashboardSelection().current_focused_period([]) is None


def test_unknown_resolution():
    with pytest.raises(ValueError):
        DashboardSelection().select_resolution("decade")
