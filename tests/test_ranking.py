from complaint_app.analytics.aggregations.ranking import (
    percent_of_total,
    rank_descending,
    top_periods,
    total_of,
)
from complaint_app.core.models import Bucket


def _series(*counts):
    return [Bucket(key=f"week:{i}", label=f"P{i}", count=c) for i, c in enumerate(counts)]


def test_rank_descending_is_stable():
    series = _series(2, 5, 2, 0, 5)
    ranked = rank_descending(series)
    assert [b.key for b in ranked] == ["week:1", "week:4", "week:0", "week:2", "week:3"]
    # input untouched
    assert [b.count for b in series] == [2, 5, 2, 0, 5]


def test_top_periods():
    series = _series(1, 3, 2, 3)
    assert [b.key for b in top_periods(series)] == ["week:1", "week:3", "week:2"]
    assert top_periods(series, n=0) == []


def test_percent_of_total_rounds_half_up():
    series = _series(1, 1, 1, 5)
    assert total_of(series) == 8
    assert percent_of_total(series[0], series) == 13
    assert percent_of_total(series[3], series) == 63


def test_percent_of_total_all_zero():
    series = _series(0, 0, 0)
    assert all(percent_of_total(b, series) == 0 for b in series)
    assert percent_of_total(Bucket(key="x", label="x"), []) == 0

