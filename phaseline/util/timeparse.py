# phaseline/util/timeparse.py
from __future__ import annotations

import datetime as dt
import re
from typing import Any, Optional

_YMD_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})")


def parse_date_yyyy_mm_dd(s: str) -> dt.date:
    return dt.datetime.strptime(s, "%Y-%m-%d").date()


def parse_iso_date(value: Any) -> Optional[dt.date]:
    """Lenient ISO-8601 date parsing for upstream records.

    Accepts:
      - date / datetime objects (datetimes are truncated to their date)
      - "YYYY-MM-DD"
      - full timestamps ("2026-01-05T00:00:00Z", "2026-01-05 08:30"): the
        calendar date part is kept, the time of day is dropped

    Returns None for anything else (missing, empty, malformed, impossible dates).
    """
    if value is None:
        return None
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    if not isinstance(value, str):
        return None

    s = value.strip()
    if not s:
        return None

    m = _YMD_RE.match(s)
    if not m:
        return None
    rest = s[m.end():]
    if rest and rest[0] not in "T t":
        return None
    try:
        return dt.date(int(m.group(1)), int(m.group(2)), int(m.group(3)))
    except ValueError:
        return None
