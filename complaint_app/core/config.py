"""Central configuration, constants, and display metadata for complaint analytics."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from .models import ComplaintStatus, Resolution, Urgency

# =============================================================================
# Calendar Settings
# =============================================================================
# Period boundaries are computed on local wall-clock time. None means the
# host's local timezone; set an IANA name (e.g. "America/Santiago") to pin it.
TIMEZONE: str | None = None

# =============================================================================
# Trend Window Configuration
# =============================================================================
# Number of trailing periods in each series, ending at the period containing now
WINDOW_LENGTHS: Mapping[Resolution, int] = {
    Resolution.WEEK: 6,
    Resolution.MONTH: 6,
    Resolution.YEAR: 5,
}

# Display order for resolution toggles
RESOLUTION_ORDER: tuple[Resolution, ...] = (Resolution.WEEK, Resolution.MONTH, Resolution.YEAR)

TREND_VIEWS: Mapping[Resolution, dict[str, str]] = {
    Resolution.WEEK: {"label": "Weekly", "description": "Last 6 weeks"},
    Resolution.MONTH: {"label": "Monthly", "description": "Last 6 months"},
    Resolution.YEAR: {"label": "Yearly", "description": "Last 5 years"},
}

# =============================================================================
# Status / Urgency Display
# =============================================================================
STATUS_DISPLAY: Mapping[ComplaintStatus, dict[str, str]] = {
    ComplaintStatus.PENDING: {"label": "Pending", "color": "#f97316"},
    ComplaintStatus.IN_PROGRESS: {"label": "In Progress", "color": "#3b82f6"},
    ComplaintStatus.RESOLVED: {"label": "Resolved", "color": "#16a34a"},
    ComplaintStatus.CLOSED: {"label": "Closed", "color": "#6b7280"},
}

URGENCY_DISPLAY: Mapping[Urgency, dict[str, str]] = {
    Urgency.HIGH: {"label": "High", "color": "#dc2626"},
    Urgency.MEDIUM: {"label": "Medium", "color": "#facc15"},
    Urgency.LOW: {"label": "Low", "color": "#22c55e"},
}

# Statuses counted in the "active queue" card
OPEN_STATUSES: frozenset[ComplaintStatus] = frozenset(
    {
        ComplaintStatus.PENDING,
        ComplaintStatus.IN_PROGRESS,
    }
)

UNCATEGORIZED_LABEL = "Uncategorized"

# =============================================================================
# UI Default Values
# =============================================================================
DEFAULT_TOP_CATEGORIES: int = 5  # Categories shown in the distribution panel
DEFAULT_TOP_PERIODS: int = 3  # Podium size in the trend summary
DAILY_VOLUME_DAYS: int = 7  # Days covered by the weekly volume card

# Accepted keys for the submission date in raw documents, in lookup order
SUBMISSION_DATE_FIELDS: tuple[str, ...] = ("submissionDate", "submission_date", "submitted_at")


@dataclass(slots=True)
class AppSettings:
    default_resolution: Resolution = Resolution.WEEK
    download_encoding: str = "utf-8"
    max_table_rows: int = 1000


SETTINGS = AppSettings()
