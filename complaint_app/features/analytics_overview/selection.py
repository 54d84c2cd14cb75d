"""Active resolution and focused-period selection for the analytics overview."""

from __future__ import annotations

from dataclasses import dataclass

from complaint_app.core.config import SETTINGS
from complaint_app.core.models import Bucket, Resolution, Series


@dataclass(slots=True)
class DashboardSelection:
    """Holds the active resolution and an optional explicitly focused period.

    Changing the resolution always drops the explicit focus; without one,
    the most recent bucket of the active series is the focused period.
    """

    resolution: Resolution = SETTINGS.default_resolution
    focused_key: str | None = None

    def __post_init__(self):
        self.resolution = Resolution.parse(self.resolution)

    def select_resolution(self, resolution: Resolution | str) -> None:
        self.resolution = Resolution.parse(resolution)
        self.focused_key = None

    def focus_period(self, key: str, series: Series) -> bool:
        """Focus ``key`` if it belongs to the active series; return whether it did."""
        if not any(b.key == key for b in series):
            return False
        self.focused_key = key
        return True

    def current_focused_period(self, series: Series) -> Bucket | None:
        if not series:
            return None
        if self.focused_key is not None:
            for bucket in series:
                if bucket.key == self.focused_key:
                    return bucket
        return series[-1]
