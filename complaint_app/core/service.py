"""ComplaintService: orchestrates snapshot retrieval, mapping, and aggregation."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, tzinfo

from complaint_app.features.analytics_overview.context import AnalyticsContext, build_context
from complaint_app.features.analytics_overview.selection import DashboardSelection

from .complaint_client import ComplaintSource
from .mappers import map_complaint
from .models import ComplaintRecord

ProgressCallback = Callable[[str, int | None, int | None], None]

logger = logging.getLogger(__name__)


class ComplaintFetchError(RuntimeError):
    """Raised when the complaint snapshot cannot be retrieved."""


class ComplaintService:
    def __init__(self, source: ComplaintSource, tz: tzinfo | str | None = None):
        self.source = source
        self.tz = tz
        self._snapshot: tuple[ComplaintRecord, ...] = ()
        self._loaded_at: datetime | None = None

    @property
    def snapshot(self) -> tuple[ComplaintRecord, ...]:
        return self._snapshot

    @property
    def loaded_at(self) -> datetime | None:
        return self._loaded_at

    def refresh(self, *, progress: ProgressCallback | None = None) -> tuple[ComplaintRecord, ...]:
        """Fetch the full collection and swap it in as the current snapshot.

        The previous snapshot stays in place when retrieval fails.
        """
        if progress:
            progress("Loading complaints", None, None)
        try:
            documents = self.source.fetch_documents()
        except Exception as exc:
            logger.warning("Complaint retrieval failed: %s", exc)
            raise ComplaintFetchError(f"Unable to load complaints: {exc}") from exc

        records = []
        total = len(documents)
        for idx, doc in enumerate(documents, start=1):
            records.append(map_complaint(doc))
            if progress and (idx == total or idx % 500 == 0):
                progress("Mapping complaints", idx, total)

        self._snapshot = tuple(records)
        self._loaded_at = datetime.now()
        logger.info("Loaded %d complaint(s)", len(self._snapshot))
        return self._snapshot

    def build_context(
        self,
        selection: DashboardSelection | None = None,
        reference_now: datetime | None = None,
    ) -> AnalyticsContext:
        return build_context(self._snapshot, selection, reference_now, tz=self.tz)
