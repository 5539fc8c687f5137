# phaseline/geometry.py
from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence

from .axis import PixelAxis
from .config import TimelineConfig
from .model import (
    Connector,
    Phase,
    PhaseRect,
    Project,
    ProjectLayout,
    RowAssignment,
    TimelineLayout,
)
from .palette import resolve_phase_style
from .rows import assign_rows

LABEL_MIN_WIDTH = 60.0   # below this only the icon fits
DATES_MIN_WIDTH = 100.0  # above this the date range is shown too


def project_row_height(total_rows: int, config: TimelineConfig) -> int:
    """Height of one project row; identical for the list pane and the canvas."""
    n = max(int(total_rows), 1)
    return int(config.base_top_offset + n * (config.bar_height + config.row_gap) + config.row_gap)


def row_height_for(phases: Iterable[Phase], config: TimelineConfig) -> int:
    """Row height the list pane uses for a project; same computation as the canvas."""
    assignment = assign_rows(phases, share_row_on_touch=config.share_row_on_touch)
    return project_row_height(assignment.total_rows, config)


def row_top(row: int, config: TimelineConfig) -> int:
    return int(config.base_top_offset + row * (config.bar_height + config.row_gap) + config.row_gap)


def _label_level(width: float) -> str:
    if width <= LABEL_MIN_WIDTH:
        return "icon"
    if width <= DATES_MIN_WIDTH:
        return "label"
    return "full"


def phase_rect(phase: Phase, row: int, axis: PixelAxis) -> Optional[PhaseRect]:
    """Draw rectangle for one phase, or None when it has no usable dates."""
    if not phase.is_placeable:
        return None
    cfg = axis.config
    left = axis.date_to_x(phase.start)  # type: ignore[arg-type]
    right = axis.date_to_x(phase.end)  # type: ignore[arg-type]
    width = max(right - left, float(cfg.min_bar_width))
    progress = max(0, min(100, int(phase.progress)))
    return PhaseRect(
        phase_id=phase.id,
        row=int(row),
        left=left,
        width=width,
        top=row_top(row, cfg),
        height=int(cfg.bar_height),
        progress_width=width * progress / 100.0,
        kind=resolve_phase_style(phase.name).id,
        label_level=_label_level(width),
    )


def build_connectors(phases: Sequence[Phase], assignment: RowAssignment, axis: PixelAxis) -> List[Connector]:
    """Dashed links between consecutive phases sharing a row.

    A link is drawn only when the earlier phase's end is strictly left of the
    later phase's start; touching or overlapping neighbours get none.
    """
    cfg = axis.config
    by_row: Dict[int, List[Phase]] = {}
    for p in sorted((p for p in phases if p.is_placeable and p.id in assignment.rows), key=lambda p: p.start):  # type: ignore[arg-type,return-value]
        by_row.setdefault(assignment.rows[p.id], []).append(p)

    out: List[Connector] = []
    c = float(cfg.connector_curve)
    for row in sorted(by_row):
        seq = by_row[row]
        y = row_top(row, cfg) + cfg.bar_height / 2.0
        for prev, nxt in zip(seq, seq[1:]):
            x1 = axis.date_to_x(prev.effective_end)  # type: ignore[arg-type]
            x2 = axis.date_to_x(nxt.start)  # type: ignore[arg-type]
            if x2 <= x1:
                continue
            path = f"M {x1:g} {y:g} C {x1 + c:g} {y:g}, {x2 - c:g} {y:g}, {x2:g} {y:g}"
            out.append(Connector(from_id=prev.id, to_id=nxt.id, row=row, x1=x1, x2=x2, y=y, path=path))
    return out


def build_project_layout(project: Project, axis: PixelAxis, *, top: int = 0) -> ProjectLayout:
    cfg = axis.config
    assignment = assign_rows(project.phases, share_row_on_touch=cfg.share_row_on_touch)

    rects: List[PhaseRect] = []
    for p in project.phases:
        row = assignment.rows.get(p.id)
        if row is None:
            continue
        r = phase_rect(p, row, axis)
        if r is not None:
            rects.append(r)

    return ProjectLayout(
        project_id=project.id,
        assignment=assignment,
        row_height=project_row_height(assignment.total_rows, cfg),
        top=int(top),
        rects=tuple(rects),
        connectors=tuple(build_connectors(project.phases, assignment, axis)),
    )


def build_timeline_layout(projects: Iterable[Project], config: TimelineConfig) -> TimelineLayout:
    """Lay out every project, stacking project rows top to bottom in input order."""
    axis = PixelAxis(config)
    layouts: List[ProjectLayout] = []
    y = 0
    for project in projects:
        pl = build_project_layout(project, axis, top=y)
        layouts.append(pl)
        y += pl.row_height

    return TimelineLayout(
        projects=tuple(layouts),
        header=axis.build_header(),
        today_x=axis.date_to_x(config.resolve_today()),
        total_height=y,
    )


__all__ = [
    "project_row_height",
    "row_height_for",
    "row_top",
    "phase_rect",
    "build_connectors",
    "build_project_layout",
    "build_timeline_layout",
]
