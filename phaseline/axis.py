# phaseline/axis.py
from __future__ import annotations

import calendar
import datetime as dt
import math
from typing import List

from .config import TimelineConfig
from .model import HeaderBands, MonthBand, WeekMarker

_DAY_S = 86400.0


def _days_between(anchor: dt.date, d: dt.date) -> float:
    if isinstance(d, dt.datetime):
        base = dt.datetime(anchor.year, anchor.month, anchor.day, tzinfo=d.tzinfo)
        return (d - base).total_seconds() / _DAY_S
    return float((d - anchor).days)


def _add_months(d: dt.date, n: int) -> dt.date:
    idx = d.year * 12 + (d.month - 1) + n
    return dt.date(idx // 12, idx % 12 + 1, 1)


class PixelAxis:
    """Linear mapping between calendar dates and horizontal pixels.

    x = (date - timeline_start).days * pixels_per_day

    Dates before the anchor map to negative x. The axis holds no state
    besides its anchor and scale, so equal configs give equal outputs.
    """

    def __init__(self, config: TimelineConfig) -> None:
        self.config = config
        self.anchor = config.timeline_start
        self.pixels_per_day = config.day_width

    def date_to_x(self, d: dt.date) -> float:
        return _days_between(self.anchor, d) * self.pixels_per_day

    def x_to_date(self, x: float) -> dt.date:
        # Round off float noise so a whole day maps back to itself.
        days = math.floor(round(x / self.pixels_per_day, 9))
        return self.anchor + dt.timedelta(days=days)

    def first_monday(self) -> dt.date:
        # date.weekday(): Monday == 0
        return self.anchor + dt.timedelta(days=(7 - self.anchor.weekday()) % 7)

    def build_header(self) -> HeaderBands:
        """Month bands and week markers for the canvas header.

        Months start at the anchor's month (even when the anchor is mid-month)
        and are day-accurate. Week markers start at the first Monday on/after
        the anchor and advance by the fixed `week_width`, which is a display
        constant independent of `pixels_per_day`.
        """
        cfg = self.config
        months: List[MonthBand] = []
        x = 0.0
        first = dt.date(self.anchor.year, self.anchor.month, 1)
        for i in range(int(cfg.header_months)):
            m = _add_months(first, i)
            days = calendar.monthrange(m.year, m.month)[1]
            width = days * self.pixels_per_day
            months.append(
                MonthBand(
                    label=f"{calendar.month_name[m.month]} / {m.year}",
                    start=m,
                    x=x,
                    width=width,
                )
            )
            x += width

        weeks: List[WeekMarker] = []
        monday = self.first_monday()
        x0 = self.date_to_x(monday)
        week_width = float(cfg.week_width)
        for i in range(int(cfg.header_weeks)):
            d = monday + dt.timedelta(days=7 * i)
            weeks.append(WeekMarker(label=str(d.day), date=d, x=x0 + i * week_width, width=week_width))

        return HeaderBands(months=tuple(months), weeks=tuple(weeks), width=x)


__all__ = ["PixelAxis"]
