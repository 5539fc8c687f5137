# phaseline/model.py
from __future__ import annotations

import bisect
import datetime as dt
from dataclasses import dataclass
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class Phase:
    id: str
    name: str
    start: Optional[dt.date]   # None when missing/unparsable upstream
    end: Optional[dt.date]
    progress: int = 0          # 0..100

    @property
    def is_placeable(self) -> bool:
        return self.start is not None and self.end is not None

    @property
    def effective_end(self) -> Optional[dt.date]:
        # Inverted ranges collapse to a zero-width interval at start.
        if self.start is None or self.end is None:
            return None
        return self.end if self.end >= self.start else self.start

    @property
    def is_inverted(self) -> bool:
        return self.is_placeable and self.end < self.start  # type: ignore[operator]


@dataclass(frozen=True)
class Project:
    id: str
    phases: Tuple[Phase, ...] = ()

    # Portfolio metadata carried through from upstream (list pane only).
    name: str = ""
    code: str = ""
    priority: str = ""
    status: str = ""
    streams: Tuple[str, ...] = ()
    archived: bool = False


@dataclass(frozen=True)
class RowAssignment:
    rows: Dict[str, int]
    total_rows: int
    skipped: Tuple[str, ...] = ()

    def row_of(self, phase_id: str) -> Optional[int]:
        return self.rows.get(phase_id)


@dataclass(frozen=True)
class ScrollSyncState:
    left_offset: float = 0.0
    right_offset: float = 0.0
    is_syncing: bool = False


# --- Geometry -------------------------------------------------------------


@dataclass(frozen=True)
class MonthBand:
    label: str       # "January / 2026"
    start: dt.date   # first day of the month
    x: float
    width: float


@dataclass(frozen=True)
class WeekMarker:
    label: str       # day of month, e.g. "5"
    date: dt.date
    x: float
    width: float


@dataclass(frozen=True)
class HeaderBands:
    months: Tuple[MonthBand, ...]
    weeks: Tuple[WeekMarker, ...]
    width: float     # total canvas width (sum of month widths)


@dataclass(frozen=True)
class PhaseRect:
    phase_id: str
    row: int
    left: float
    width: float
    top: int
    height: int
    progress_width: float
    kind: str = "default"       # phase style id
    label_level: str = "full"   # "icon" | "label" | "full"


@dataclass(frozen=True)
class Connector:
    from_id: str
    to_id: str
    row: int
    x1: float
    x2: float
    y: float
    path: str


@dataclass(frozen=True)
class ProjectLayout:
    project_id: str
    assignment: RowAssignment
    row_height: int
    top: int = 0                           # cumulative y of this project's row
    rects: Tuple[PhaseRect, ...] = ()
    connectors: Tuple[Connector, ...] = ()

    @property
    def total_rows(self) -> int:
        return self.assignment.total_rows


@dataclass(frozen=True)
class TimelineLayout:
    projects: Tuple[ProjectLayout, ...]
    header: HeaderBands
    today_x: float
    total_height: int

    @property
    def width(self) -> float:
        return self.header.width

    def project_top(self, project_id: str) -> Optional[int]:
        for pl in self.projects:
            if pl.project_id == project_id:
                return pl.top
        return None

    def project_index_at(self, y: float) -> Optional[int]:
        """Index of the project row covering vertical offset `y` (both panes share it)."""
        if not self.projects or y < 0 or y >= self.total_height:
            return None
        tops = [pl.top for pl in self.projects]
        return bisect.bisect_right(tops, y) - 1


__all__ = [
    "Phase",
    "Project",
    "RowAssignment",
    "ScrollSyncState",
    "MonthBand",
    "WeekMarker",
    "HeaderBands",
    "PhaseRect",
    "Connector",
    "ProjectLayout",
    "TimelineLayout",
]
