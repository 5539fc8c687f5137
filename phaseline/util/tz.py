# phaseline/util/tz.py
from __future__ import annotations

import datetime as dt
import re
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

_ALIASES = {
    "": "local",
    "local": "local",
    "system": "local",
    "native": "local",
    "utc": "UTC",
    "z": "UTC",
    "gmt": "UTC",
    "utc0": "UTC",
    "utc+0": "UTC",
}

_OFFSET_RE = re.compile(r"^(?P<sign>[+-])(?P<hh>\d{2}):?(?P<mm>\d{2})$")


def normalize_tz_name(name: Optional[str]) -> str:
    """Canonical name stored in the payload cfg.

    "local"/"system" and empty values become "local", "UTC"/"Z"/"GMT" become
    "UTC"; IANA names ("Asia/Jakarta") and fixed offsets ("+07:00", "-0500")
    are kept as given.
    """
    s = "" if name is None else str(name).strip()
    return _ALIASES.get(s.lower(), s)


def _fixed_offset(name: str) -> Optional[dt.tzinfo]:
    m = _OFFSET_RE.match(name)
    if m is None:
        return None
    hh, mm = int(m.group("hh")), int(m.group("mm"))
    if hh > 23 or mm > 59:
        raise ValueError(f"Invalid timezone offset: {name!r}")
    minutes = hh * 60 + mm
    if m.group("sign") == "-":
        minutes = -minutes
    return dt.timezone(dt.timedelta(minutes=minutes))


def resolve_tz(name: Optional[str]) -> dt.tzinfo:
    """Timezone name -> tzinfo. Raises ValueError when the name is unknown."""
    tz_name = normalize_tz_name(name)
    if tz_name == "UTC":
        return dt.timezone.utc
    if tz_name == "local":
        return dt.datetime.now().astimezone().tzinfo or dt.timezone.utc

    fixed = _fixed_offset(tz_name)
    if fixed is not None:
        return fixed
    try:
        return ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError) as ex:
        raise ValueError(f"Invalid timezone identifier: {tz_name!r}") from ex


def today_date(tz: dt.tzinfo) -> dt.date:
    """Calendar date of "now" as seen in `tz` (what the today marker shows)."""
    return dt.datetime.now(tz=tz).date()
