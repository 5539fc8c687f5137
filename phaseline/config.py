# phaseline/config.py
from __future__ import annotations

import datetime as dt
import json
import os
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Optional

from .util.timeparse import parse_iso_date
from .util.tz import normalize_tz_name, resolve_tz, today_date

DEFAULT_TIMELINE_START = dt.date(2026, 1, 1)
DEFAULT_WEEK_WIDTH = 120.0


class ConfigError(ValueError):
    """Raised when a timeline configuration is unusable."""


@dataclass(frozen=True)
class TimelineConfig:
    """Engine configuration: pixel axis anchor/scale plus layout constants.

    Passed explicitly to every layout entry point; nothing here is global.
    `pixels_per_day=None` means "week_width / 7".
    `today=None` means "the clock's date in `tz`" (resolved by `resolve_today`).
    """

    timeline_start: dt.date = DEFAULT_TIMELINE_START
    pixels_per_day: Optional[float] = None
    week_width: float = DEFAULT_WEEK_WIDTH
    bar_height: int = 36
    row_gap: int = 12
    base_top_offset: int = 10
    min_bar_width: float = 10.0

    header_months: int = 6
    header_weeks: int = 26
    share_row_on_touch: bool = False
    connector_curve: float = 20.0
    settle_delay_ms: int = 100

    today: Optional[dt.date] = None
    tz: str = "local"

    def __post_init__(self) -> None:
        if not isinstance(self.timeline_start, dt.date):
            raise ConfigError(f"timeline_start must be a date; got {self.timeline_start!r}")
        if self.pixels_per_day is not None and not self.pixels_per_day > 0:
            raise ConfigError(f"pixels_per_day must be > 0; got {self.pixels_per_day!r}")
        if not self.week_width > 0:
            raise ConfigError(f"week_width must be > 0; got {self.week_width!r}")
        if self.bar_height <= 0:
            raise ConfigError(f"bar_height must be > 0; got {self.bar_height!r}")
        if self.row_gap < 0 or self.base_top_offset < 0:
            raise ConfigError("row_gap and base_top_offset must be >= 0")
        if self.min_bar_width < 0:
            raise ConfigError(f"min_bar_width must be >= 0; got {self.min_bar_width!r}")
        if self.header_months < 1 or self.header_weeks < 1:
            raise ConfigError("header_months and header_weeks must be >= 1")
        if self.settle_delay_ms < 0:
            raise ConfigError(f"settle_delay_ms must be >= 0; got {self.settle_delay_ms!r}")

    @property
    def day_width(self) -> float:
        if self.pixels_per_day is not None:
            return float(self.pixels_per_day)
        return float(self.week_width) / 7.0

    def resolve_today(self) -> dt.date:
        if self.today is not None:
            return self.today
        try:
            return today_date(resolve_tz(self.tz))
        except ValueError as e:
            raise ConfigError(str(e)) from e

    def with_overrides(self, **changes: Any) -> "TimelineConfig":
        return replace(self, **{k: v for k, v in changes.items() if v is not None})

    # --- cfg dict round-trip ------------------------------------------------

    @classmethod
    def from_mapping(cls, cfg: Optional[Dict[str, Any]]) -> "TimelineConfig":
        """Build a config from a JSON-like dict. Unknown keys are ignored."""
        if cfg is None:
            return cls()
        if not isinstance(cfg, dict):
            raise ConfigError(f"config must be a dict/object; got {type(cfg).__name__}")

        known = {f.name for f in fields(cls)}
        kw: Dict[str, Any] = {}
        for k, v in cfg.items():
            if k not in known or v is None:
                continue
            kw[k] = v

        for k in ("timeline_start", "today"):
            if k in kw:
                d = parse_iso_date(kw[k])
                if d is None:
                    raise ConfigError(f"{k} must be an ISO date (YYYY-MM-DD); got {kw[k]!r}")
                kw[k] = d

        try:
            for k in ("pixels_per_day", "week_width", "min_bar_width", "connector_curve"):
                if k in kw:
                    kw[k] = float(kw[k])
            for k in ("bar_height", "row_gap", "base_top_offset", "header_months", "header_weeks", "settle_delay_ms"):
                if k in kw:
                    kw[k] = int(kw[k])
        except (TypeError, ValueError) as e:
            raise ConfigError(f"invalid numeric config value: {e}") from e

        if "share_row_on_touch" in kw:
            kw["share_row_on_touch"] = bool(kw["share_row_on_touch"])
        if "tz" in kw:
            kw["tz"] = normalize_tz_name(kw["tz"])

        return cls(**kw)

    def to_cfg(self) -> Dict[str, Any]:
        return {
            "timeline_start": self.timeline_start.isoformat(),
            "pixels_per_day": self.day_width,
            "week_width": float(self.week_width),
            "bar_height": int(self.bar_height),
            "row_gap": int(self.row_gap),
            "base_top_offset": int(self.base_top_offset),
            "min_bar_width": float(self.min_bar_width),
            "header_months": int(self.header_months),
            "header_weeks": int(self.header_weeks),
            "share_row_on_touch": bool(self.share_row_on_touch),
            "connector_curve": float(self.connector_curve),
            "settle_delay_ms": int(self.settle_delay_ms),
            "today": self.today.isoformat() if self.today else None,
            "tz": self.tz,
        }


def load_config_file(path: Optional[str]) -> Optional[Dict[str, Any]]:
    """Load a JSON config object.

    Accepted formats:
      - { "timeline": { ... } }
      - { ... }  (keys as in TimelineConfig)

    Returns None when `path` is empty or the file does not exist.
    Raises ConfigError when the file exists but is not a JSON object.
    """
    if not path:
        return None
    if not os.path.exists(path):
        return None
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"failed to read config {path}: {e}") from e

    if isinstance(raw, dict) and isinstance(raw.get("timeline"), dict):
        return dict(raw["timeline"])
    if isinstance(raw, dict):
        return raw
    raise ConfigError(f"config {path} must be a JSON object; got {type(raw).__name__}")


__all__ = [
    "ConfigError",
    "TimelineConfig",
    "load_config_file",
]
