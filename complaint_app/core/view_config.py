"""Load and expose trend view labels from YAML (with fallbacks)."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from .config import TREND_VIEWS, WINDOW_LENGTHS
from .models import Resolution

logger = logging.getLogger(__name__)

_CACHE: dict[Resolution, dict[str, str | int]] | None = None


def _defaults() -> dict[Resolution, dict[str, str | int]]:
    return {
        res: {"key": res.value, **view, "window": WINDOW_LENGTHS[res]}
        for res, view in TREND_VIEWS.items()
    }


def load_trend_views(base_path: str | Path | None = None, *, reload: bool = False):
    """Return label/description/window per resolution.

    ``views.yaml`` (next to the package) may override ``label`` and
    ``description`` under a top-level ``views`` mapping keyed by resolution.
    Window lengths always come from config.
    """
    global _CACHE
    if _CACHE is not None and not reload:
        return _CACHE
    base = Path(base_path or Path(__file__).resolve().parent.parent)
    yaml_path = base / "views.yaml"
    views = _defaults()
    if not yaml_path.exists():
        _CACHE = views
        return _CACHE
    try:
        data = yaml.safe_load(yaml_path.read_text()) or {}
        overrides = data.get("views", {}) or {}
        for name, override in overrides.items():
            res = Resolution.parse(name)
            for field_name in ("label", "description"):
                if override.get(field_name):
                    views[res][field_name] = str(override[field_name])
    except (yaml.YAMLError, ValueError, AttributeError, OSError) as exc:
        logger.warning("Ignoring malformed %s: %s", yaml_path, exc)
        views = _defaults()
    _CACHE = views
    return _CACHE


def get_view(resolution: Resolution | str) -> dict[str, str | int]:
    return load_trend_views()[Resolution.parse(resolution)]
