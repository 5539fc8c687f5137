# phaseline/portfolio.py
from __future__ import annotations

import datetime as dt
from typing import Iterable, List, Optional, Sequence, Tuple

from .model import Phase, Project

_PRIORITY_ORDER = {"high": 1, "medium": 2, "low": 3}

SORT_KEYS = ("code_asc", "code_desc", "priority_high", "priority_low", "status", "stream")


def _priority_rank(p: Project) -> int:
    return _PRIORITY_ORDER.get((p.priority or "").strip().lower(), 2)


def split_archived(projects: Iterable[Project]) -> Tuple[List[Project], List[Project]]:
    active: List[Project] = []
    archived: List[Project] = []
    for p in projects:
        (archived if p.archived else active).append(p)
    return active, archived


def filter_projects(
    projects: Iterable[Project],
    *,
    priorities: Sequence[str] = (),
    statuses: Sequence[str] = (),
    streams: Sequence[str] = (),
) -> List[Project]:
    """Keep projects passing every active filter (empty filter = inactive).

    A project without a priority is treated as "Medium"; the stream filter
    matches when any of the project's streams is selected.
    """
    out: List[Project] = []
    for p in projects:
        if priorities and (p.priority or "Medium") not in priorities:
            continue
        if statuses and p.status not in statuses:
            continue
        if streams and not any(s in streams for s in p.streams):
            continue
        out.append(p)
    return out


def sort_projects(projects: Iterable[Project], sort_by: str = "code_asc") -> List[Project]:
    """Order the list pane. Unknown keys keep the input order."""
    items = list(projects)
    if sort_by == "code_asc":
        return sorted(items, key=lambda p: p.code.casefold())
    if sort_by == "code_desc":
        return sorted(items, key=lambda p: p.code.casefold(), reverse=True)
    if sort_by == "priority_high":
        return sorted(items, key=_priority_rank)
    if sort_by == "priority_low":
        return sorted(items, key=_priority_rank, reverse=True)
    if sort_by == "status":
        return sorted(items, key=lambda p: (p.status or "").casefold())
    if sort_by == "stream":
        # Projects without a stream go last.
        return sorted(items, key=lambda p: (not p.streams, ", ".join(p.streams).casefold()))
    return items


def active_phase_on(project: Project, day: dt.date) -> Optional[Phase]:
    for ph in project.phases:
        if not ph.is_placeable:
            continue
        if ph.start <= day <= ph.end:  # type: ignore[operator]
            return ph
    return None


def daily_overview(projects: Iterable[Project], day: dt.date) -> List[Tuple[Project, Phase]]:
    """Projects with a phase running on `day`, paired with that phase."""
    out: List[Tuple[Project, Phase]] = []
    for p in projects:
        ph = active_phase_on(p, day)
        if ph is not None:
            out.append((p, ph))
    return out


__all__ = [
    "SORT_KEYS",
    "split_archived",
    "filter_projects",
    "sort_projects",
    "active_phase_on",
    "daily_overview",
]
