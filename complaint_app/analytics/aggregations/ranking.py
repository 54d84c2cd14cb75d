"""Ranking and share-of-total helpers for period series."""

from __future__ import annotations

import math

from complaint_app.core.config import DEFAULT_TOP_PERIODS
from complaint_app.core.models import Bucket, Series


def total_of(series: Series) -> int:
    return sum(b.count for b in series)


def rank_descending(series: Series) -> Series:
    """Return a new list ordered by count, highest first.

    The sort is stable, so equal counts keep their input order (older
    periods first for a chronological series).
    """
    return sorted(series, key=lambda b: b.count, reverse=True)


def top_periods(series: Series, n: int = DEFAULT_TOP_PERIODS) -> Series:
    return rank_descending(series)[: max(n, 0)]


def percent_of_total(bucket: Bucket, series: Series) -> int:
    """Share of ``bucket`` in the series total as a whole percentage.

    Rounds half up (12.5 -> 13). Returns 0 for an all-zero series.
    """
    total = total_of(series)
    if total == 0:
        return 0
    return int(math.floor(bucket.count / total * 100 + 0.5))
