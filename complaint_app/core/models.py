"""Domain data models for complaint records and derived aggregates."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any


class ComplaintStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    RESOLVED = "resolved"
    CLOSED = "closed"


class Urgency(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Resolution(str, Enum):
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"

    @classmethod
    def parse(cls, value: Resolution | str) -> Resolution:
        """Accept a member or its string value; raise ValueError otherwise."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown resolution: {value!r}") from None


@dataclass(slots=True)
class ComplaintRecord:
    id: str
    status: str | None = None
    urgency: str | None = None
    category: str | None = None
    # Any DateLike: wrapped timestamp, datetime, ISO string, epoch millis
    submission_date: Any = None


@dataclass(slots=True)
class Bucket:
    key: str
    label: str
    count: int = 0
    start: datetime | None = None


@dataclass(slots=True)
class CategoryEntry:
    label: str
    count: int


Series = list[Bucket]
