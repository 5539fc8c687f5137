# phaseline/rows.py
from __future__ import annotations

import datetime as dt
from typing import Dict, Iterable, List, Sequence, Tuple

from .model import Phase, RowAssignment
from .util.console import obs_warn


def assign_rows(phases: Iterable[Phase], *, share_row_on_touch: bool = False) -> RowAssignment:
    """Greedy interval partitioning of a project's phases into display rows.

    - Phases without both dates are skipped (reported in `skipped`), never
      parked on row 0.
    - Stable sort by start date: equal starts keep their input order.
    - Each phase takes the lowest row whose last end date is strictly before
      its start (or on/before it with share_row_on_touch=True); otherwise a
      new row is opened.
    - Inverted ranges (end < start) occupy a zero-width slot at start.

    total_rows is at least 1 so an empty project still reserves a row.
    Both the canvas and the list pane call this on the same phases, which is
    what keeps their row heights equal.
    """
    placeable: List[Phase] = []
    skipped: List[str] = []
    for p in phases:
        if p.is_placeable:
            placeable.append(p)
        else:
            skipped.append(p.id)

    if skipped:
        obs_warn("rows", f"skipped {len(skipped)} phase(s) with missing/invalid dates: {skipped!r}")

    ordered = sorted(placeable, key=lambda p: p.start)  # type: ignore[arg-type,return-value]

    rows: Dict[str, int] = {}
    row_ends: List[dt.date] = []
    for p in ordered:
        start = p.start
        end = p.effective_end
        assigned = -1
        for i, row_end in enumerate(row_ends):
            free = row_end <= start if share_row_on_touch else row_end < start  # type: ignore[operator]
            if free:
                assigned = i
                row_ends[i] = end  # type: ignore[assignment]
                break
        if assigned < 0:
            assigned = len(row_ends)
            row_ends.append(end)  # type: ignore[arg-type]
        rows[p.id] = assigned

    return RowAssignment(rows=rows, total_rows=max(len(row_ends), 1), skipped=tuple(skipped))


def max_overlap(phases: Sequence[Phase]) -> int:
    """Largest number of placeable phases active on a single day.

    Days are inclusive: a phase ending on D and one starting on D overlap,
    so starts are processed before ends on the same day. This is the row
    count assign_rows reaches with the default (strict) boundary rule.
    """
    pts: List[Tuple[dt.date, int]] = []
    for p in phases:
        if not p.is_placeable:
            continue
        pts.append((p.start, +1))  # type: ignore[arg-type]
        pts.append((p.effective_end, -1))  # type: ignore[arg-type]

    pts.sort(key=lambda x: (x[0], -x[1]))

    active = 0
    best = 0
    for _d, kind in pts:
        active += kind
        if active > best:
            best = active
    return best


__all__ = ["assign_rows", "max_overlap"]
