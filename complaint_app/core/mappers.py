"""Mapping raw complaint documents and DateLike values into domain types."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from datetime import date, datetime, tzinfo
from typing import Any

import pandas as pd
import pytz

from .config import SUBMISSION_DATE_FIELDS, TIMEZONE
from .models import ComplaintRecord
from .status import is_open_status, normalize_category, normalize_status, normalize_urgency, status_label

logger = logging.getLogger(__name__)

# Conversion hooks exposed by wrapped timestamp types (Firestore, protobuf, ...)
_WRAPPED_CONVERTERS: tuple[str, ...] = ("to_datetime", "ToDatetime", "toDate")

RECORD_COLUMNS: tuple[str, ...] = (
    "id",
    "status",
    "status_label",
    "status_raw",
    "open",
    "urgency",
    "category",
    "submitted",
)


def resolve_timezone(tz: tzinfo | str | None = None) -> tzinfo | None:
    """Return the tzinfo used for local calendar arithmetic.

    An explicit ``tz`` wins, then ``config.TIMEZONE``. None means the host's
    local timezone.
    """
    if tz is None:
        tz = TIMEZONE
    if tz is None:
        return None
    if isinstance(tz, str):
        return pytz.timezone(tz)
    return tz


def _to_local(dt: datetime, tz: tzinfo | str | None) -> datetime:
    if dt.tzinfo is None:
        # Naive values are already local wall-clock time
        return dt
    zone = resolve_timezone(tz)
    local = dt.astimezone(zone) if zone is not None else dt.astimezone()
    return local.replace(tzinfo=None)


def local_now(tz: tzinfo | str | None = None) -> datetime:
    """Current local wall-clock instant as a naive datetime."""
    zone = resolve_timezone(tz)
    if zone is None:
        return datetime.now()
    return datetime.now(zone).replace(tzinfo=None)


def _unwrap(value: Any) -> Any:
    for attr in _WRAPPED_CONVERTERS:
        converter = getattr(value, attr, None)
        if callable(converter):
            try:
                return converter()
            except Exception as exc:
                logger.debug("Timestamp conversion via %s failed: %s", attr, exc)
                return None
    return value


def _parse_timestamp(value: Any) -> pd.Timestamp | None:
    try:
        if pd.api.types.is_number(value):
            # Numeric DateLike values (numpy scalars included) are epoch milliseconds (UTC)
            ts = pd.to_datetime(float(value), unit="ms", utc=True, errors="coerce")
        else:
            ts = pd.to_datetime(value, errors="coerce")
    except (TypeError, ValueError, OverflowError, pd.errors.OutOfBoundsDatetime):
        return None
    # NaT and array results (list-like input) are not timestamps
    if not isinstance(ts, pd.Timestamp):
        return None
    return ts


def to_local_datetime(value: Any, tz: tzinfo | str | None = None) -> datetime | None:
    """Convert a DateLike value into a naive local datetime.

    Accepts wrapped timestamps exposing ``to_datetime()``/``ToDatetime()``/
    ``toDate()``, ``datetime``/``date`` objects, epoch milliseconds, and
    strings parseable by pandas. Aware values are converted into ``tz`` (or
    the configured/host timezone) before the tzinfo is dropped.

    Returns None when the value is missing or cannot be converted; callers
    treat that as "no date" rather than an error.
    """
    if value is None or value is pd.NaT or pd.api.types.is_bool(value):
        return None
    if isinstance(value, str) and not value.strip():
        return None
    if not isinstance(value, (datetime, date, str)) and not pd.api.types.is_number(value):
        value = _unwrap(value)
        # Containers (lists, tuples, dicts) are never a single date
        if value is None or pd.api.types.is_bool(value) or not pd.api.types.is_scalar(value):
            return None
    if isinstance(value, pd.Timestamp):
        return _to_local(value.to_pydatetime(), tz)
    if isinstance(value, datetime):
        return _to_local(value, tz)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    ts = _parse_timestamp(value)
    if ts is None:
        logger.debug("Unparseable submission date: %r", value)
        return None
    return _to_local(ts.to_pydatetime(), tz)


def _submission_value(raw: Mapping[str, Any]) -> Any:
    for field_name in SUBMISSION_DATE_FIELDS:
        if raw.get(field_name) is not None:
            return raw[field_name]
    return None


def _optional_text(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)


def map_complaint(raw: Mapping[str, Any], doc_id: str | None = None) -> ComplaintRecord:
    """Map a raw complaint document into a ComplaintRecord.

    Field values are kept raw; normalization happens at aggregation time.
    """
    record_id = doc_id if doc_id is not None else raw.get("id")
    return ComplaintRecord(
        id=str(record_id) if record_id is not None else "",
        status=_optional_text(raw.get("status")),
        urgency=_optional_text(raw.get("urgency")),
        category=_optional_text(raw.get("category")),
        submission_date=_submission_value(raw),
    )


def records_to_dataframe(
    records: Iterable[ComplaintRecord],
    tz: tzinfo | str | None = None,
) -> pd.DataFrame:
    rows = []
    for r in records:
        status = normalize_status(r.status)
        urgency = normalize_urgency(r.urgency)
        rows.append(
            {
                "id": r.id,
                "status": status.value,
                "status_label": status_label(status),
                "status_raw": r.status,
                "open": is_open_status(status),
                "urgency": urgency.value if urgency is not None else None,
                "category": normalize_category(r.category),
                "submitted": to_local_datetime(r.submission_date, tz),
            }
        )
    df = pd.DataFrame(rows, columns=list(RECORD_COLUMNS))
    df["submitted"] = pd.to_datetime(df["submitted"], errors="coerce")
    return df
