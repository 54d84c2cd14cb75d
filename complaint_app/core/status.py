"""Status, urgency, and category normalization utilities.

This module provides the canonicalization rules shared by every aggregation:
free-text status, urgency, and category fields are mapped into closed
categories with explicit fallbacks. Display metadata comes from config.py
(STATUS_DISPLAY, OPEN_STATUSES).
"""

from __future__ import annotations

import re
from typing import Any

from .config import OPEN_STATUSES, STATUS_DISPLAY, UNCATEGORIZED_LABEL
from .models import ComplaintStatus, Urgency

# Substring rules, checked in priority order; first match wins
STATUS_RULES: tuple[tuple[str, ComplaintStatus], ...] = (
    ("progress", ComplaintStatus.IN_PROGRESS),
    ("pending", ComplaintStatus.PENDING),
    ("resolve", ComplaintStatus.RESOLVED),
    ("close", ComplaintStatus.CLOSED),
)

URGENCY_RULES: tuple[tuple[str, Urgency], ...] = (
    ("high", Urgency.HIGH),
    ("medium", Urgency.MEDIUM),
    ("low", Urgency.LOW),
)

_SEPARATORS = re.compile(r"[-_]")
_WHITESPACE = re.compile(r"\s+")


def _lower_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).lower()


def normalize_status(value: Any) -> ComplaintStatus:
    """Map a raw status string to one of the four canonical statuses.

    Anything unrecognized (including empty or missing values) falls into
    ``PENDING``, so the result is indistinguishable from an explicit
    "pending" status.

    Parameters
    ----------
    value : str | None
        Raw status text from the complaint document.

    Returns
    -------
    ComplaintStatus
        Canonical status.

    Examples
    --------
    >>> normalize_status("IN_PROGRESS")
    <ComplaintStatus.IN_PROGRESS: 'in_progress'>
    >>> normalize_status("resolved-case")
    <ComplaintStatus.RESOLVED: 'resolved'>
    >>> normalize_status(None)
    <ComplaintStatus.PENDING: 'pending'>
    """
    text = _lower_text(value)
    for needle, status in STATUS_RULES:
        if needle in text:
            return status
    return ComplaintStatus.PENDING


def normalize_urgency(value: Any) -> Urgency | None:
    """Map a raw urgency string to high/medium/low, or None when unrecognized.

    There is no default bucket: a None result means the record is left out
    of the urgency distribution.
    """
    text = _lower_text(value)
    for needle, urgency in URGENCY_RULES:
        if needle in text:
            return urgency
    return None


def normalize_category(value: Any) -> str:
    """Clean a category label for grouping.

    Hyphens and underscores become spaces, whitespace runs collapse to a
    single space and the ends are trimmed. Empty or missing input yields
    ``"Uncategorized"``. Case is preserved.

    Examples
    --------
    >>> normalize_category(" Foo_Bar ")
    'Foo Bar'
    >>> normalize_category(None)
    'Uncategorized'
    """
    if value is None:
        return UNCATEGORIZED_LABEL
    text = _SEPARATORS.sub(" ", str(value))
    text = _WHITESPACE.sub(" ", text).strip()
    return text or UNCATEGORIZED_LABEL


def status_label(status: ComplaintStatus) -> str:
    return STATUS_DISPLAY[status]["label"]


def is_open_status(value: Any) -> bool:
    """Check if a raw or canonical status belongs to the active queue.

    Parameters
    ----------
    value : str | ComplaintStatus | None
        Raw status text or an already normalized status.

    Returns
    -------
    bool
        True for pending and in-progress complaints.
    """
    status = value if isinstance(value, ComplaintStatus) else normalize_status(value)
    return status in OPEN_STATUSES
