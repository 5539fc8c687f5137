# phaseline/payload.py
from __future__ import annotations

import datetime as dt
from typing import Any, Dict, Iterable, List, Optional

from .config import TimelineConfig
from .geometry import build_timeline_layout
from .model import HeaderBands, Project, ProjectLayout
from .palette import PHASE_STYLES, DEFAULT_COLOR

SCHEMA_NAME = "phaseline.layout"
SCHEMA_VERSION = 1


def _header_out(h: HeaderBands) -> Dict[str, Any]:
    return {
        "months": [
            {"label": m.label, "start": m.start.isoformat(), "x": m.x, "width": m.width}
            for m in h.months
        ],
        "weeks": [
            {"label": w.label, "date": w.date.isoformat(), "x": w.x, "width": w.width}
            for w in h.weeks
        ],
        "width": h.width,
    }


def _project_out(project: Project, pl: ProjectLayout) -> Dict[str, Any]:
    names = {ph.id: ph for ph in project.phases}
    phases: List[Dict[str, Any]] = []
    for r in pl.rects:
        ph = names.get(r.phase_id)
        phases.append(
            {
                "id": r.phase_id,
                "name": ph.name if ph else "",
                "start": ph.start.isoformat() if ph and ph.start else None,
                "end": ph.end.isoformat() if ph and ph.end else None,
                "progress": ph.progress if ph else 0,
                "row": r.row,
                "left": r.left,
                "width": r.width,
                "top": r.top,
                "height": r.height,
                "progress_width": r.progress_width,
                "kind": r.kind,
                "label_level": r.label_level,
            }
        )

    return {
        "id": project.id,
        "name": project.name,
        "code": project.code,
        "priority": project.priority,
        "status": project.status,
        "streams": list(project.streams),
        "row_assignment": dict(pl.assignment.rows),
        "total_rows": pl.assignment.total_rows,
        "row_height": pl.row_height,
        "top": pl.top,
        "phases": phases,
        "connectors": [
            {"from": c.from_id, "to": c.to_id, "row": c.row, "x1": c.x1, "x2": c.x2, "y": c.y, "path": c.path}
            for c in pl.connectors
        ],
        "skipped": list(pl.assignment.skipped),
    }


def build_layout_payload(
    projects: Iterable[Project],
    config: Optional[TimelineConfig] = None,
    *,
    generated_at: Optional[str] = None,
) -> Dict[str, Any]:
    """Lay out `projects` and return a JSON-ready payload for the rendering surface.

    Projects are emitted in the given order (callers sort/filter first, see
    phaseline.portfolio). `cfg.today` is pinned to the date actually used so a
    payload replays identically later.
    """
    cfg = config or TimelineConfig()
    today = cfg.resolve_today()
    cfg = cfg.with_overrides(today=today)

    items = list(projects)
    layout = build_timeline_layout(items, cfg)

    if generated_at is None:
        generated_at = dt.datetime.now(dt.timezone.utc).replace(microsecond=0).isoformat().replace("+00:00", "Z")

    return {
        "schema_version": SCHEMA_VERSION,
        "meta": {
            "generated_at": generated_at,
            "schema": {"name": SCHEMA_NAME, "version": SCHEMA_VERSION},
        },
        "cfg": cfg.to_cfg(),
        "header": _header_out(layout.header),
        "today": today.isoformat(),
        "today_x": layout.today_x,
        "width": layout.width,
        "total_height": layout.total_height,
        "styles": {s.id: {"label": s.label, "color": s.color} for s in PHASE_STYLES},
        "default_color": DEFAULT_COLOR,
        "projects": [_project_out(p, pl) for p, pl in zip(items, layout.projects)],
    }


__all__ = ["SCHEMA_NAME", "SCHEMA_VERSION", "build_layout_payload"]
