"""Unwindowed status, urgency, and category distributions."""

from __future__ import annotations

from collections.abc import Iterable

import pandas as pd

from complaint_app.core.config import DEFAULT_TOP_CATEGORIES
from complaint_app.core.models import CategoryEntry, ComplaintRecord, ComplaintStatus, Urgency
from complaint_app.core.status import normalize_category, normalize_status, normalize_urgency


def _tally(values: list, order: Iterable) -> dict:
    counts = pd.Series([v.value for v in values], dtype=object).value_counts()
    return {key: int(counts.get(key.value, 0)) for key in order}


def status_counts(records: Iterable[ComplaintRecord]) -> dict[ComplaintStatus, int]:
    """Count records per canonical status; the counts sum to the record count."""
    return _tally([normalize_status(r.status) for r in records], ComplaintStatus)


def urgency_counts(records: Iterable[ComplaintRecord]) -> dict[Urgency, int]:
    """Count records per urgency, ignoring records with no recognized urgency."""
    values = [normalize_urgency(r.urgency) for r in records]
    return _tally([v for v in values if v is not None], Urgency)


def top_categories(
    records: Iterable[ComplaintRecord],
    limit: int = DEFAULT_TOP_CATEGORIES,
) -> list[CategoryEntry]:
    """Rank normalized categories by frequency.

    Categories are grouped case-insensitively after normalization and each
    group is labelled with its most recently seen spelling. Groups keep
    first-seen order, and a stable descending sort breaks count ties by that
    order. At most ``limit`` entries are returned.
    """
    labels = [normalize_category(r.category) for r in records]
    if not labels or limit <= 0:
        return []
    df = pd.DataFrame({"label": labels})
    df["group"] = df["label"].str.casefold()
    agg = (
        df.groupby("group", sort=False)
        .agg(label=("label", "last"), count=("label", "count"))
        .sort_values(by="count", ascending=False, kind="stable")
        .head(limit)
    )
    return [CategoryEntry(label=str(label), count=int(count)) for label, count in zip(agg["label"], agg["count"])]
