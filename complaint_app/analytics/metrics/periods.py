"""Calendar period arithmetic for week/month/year trend buckets.

All functions operate on naive local wall-clock datetimes (see
``core.mappers.to_local_datetime``), so a period always starts at local
midnight and never shifts with the host's UTC offset.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from complaint_app.core.models import Resolution

# Labels are always English; strftime("%b") and strftime("%a") follow the process locale
MONTH_ABBR: tuple[str, ...] = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
WEEKDAY_ABBR: tuple[str, ...] = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def _midnight(instant: datetime) -> datetime:
    return instant.replace(hour=0, minute=0, second=0, microsecond=0)


def period_start(instant: datetime, resolution: Resolution | str) -> datetime:
    """Return the canonical start of the period containing ``instant``.

    Parameters
    ----------
    instant : datetime
        Local wall-clock instant.
    resolution : Resolution or str
        Period granularity.

    Returns
    -------
    datetime
        Local midnight of the containing period's first day: the same or
        preceding Sunday for weeks, day 1 for months, January 1 for years.
    """
    resolution = Resolution.parse(resolution)
    start = _midnight(instant)
    if resolution is Resolution.WEEK:
        # datetime.weekday() has Monday = 0; weeks here start on Sunday
        days_since_sunday = (start.weekday() + 1) % 7
        return start - timedelta(days=days_since_sunday)
    if resolution is Resolution.MONTH:
        return start.replace(day=1)
    return start.replace(month=1, day=1)


def period_label(start: datetime, resolution: Resolution | str) -> str:
    """Human label for a period start, e.g. "Week of Oct 5", "Oct 2026", "2026"."""
    resolution = Resolution.parse(resolution)
    if resolution is Resolution.WEEK:
        return f"Week of {MONTH_ABBR[start.month - 1]} {start.day}"
    if resolution is Resolution.MONTH:
        return f"{MONTH_ABBR[start.month - 1]} {start.year:04d}"
    return f"{start.year:04d}"


def period_key(start: datetime, resolution: Resolution | str) -> str:
    resolution = Resolution.parse(resolution)
    return f"{resolution.value}:{start.isoformat()}"


def shift_periods(reference: datetime, resolution: Resolution | str, periods: int) -> datetime:
    """Move ``reference`` back by whole periods.

    Weeks step back ``7 * periods`` days from local midnight; months and
    years are pinned to the first day of the target month/year so that
    short months never roll over.
    """
    resolution = Resolution.parse(resolution)
    base = _midnight(reference)
    if resolution is Resolution.WEEK:
        return base - timedelta(days=7 * periods)
    if resolution is Resolution.MONTH:
        year, month_index = divmod(base.year * 12 + (base.month - 1) - periods, 12)
        return base.replace(year=year, month=month_index + 1, day=1)
    return base.replace(year=base.year - periods, month=1, day=1)
