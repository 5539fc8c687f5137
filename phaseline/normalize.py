# phaseline/normalize.py
from __future__ import annotations

import json
from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Set, Union

from .model import Phase, Project
from .util.console import obs_warn
from .util.timeparse import parse_iso_date


def _coerce_progress(v: Any) -> int:
    if isinstance(v, bool):
        return 0
    if isinstance(v, (int, float)):
        n = int(v)
    elif isinstance(v, str):
        try:
            n = int(float(v.strip()))
        except ValueError:
            return 0
    else:
        return 0
    return max(0, min(100, n))


def _streams(v: Any) -> tuple:
    if isinstance(v, list):
        return tuple(str(x) for x in v if x is not None and str(x).strip())
    if v is None:
        return ()
    s = str(v).strip()
    return (s,) if s else ()


def normalize_phase(p: Dict[str, Any], *, project_id: str = "", index: int = 0) -> Optional[Phase]:
    """Upstream phase mapping -> Phase.

    Unparsable dates are kept as None (the phase is then skipped by the
    layout); only records that are not mappings at all are dropped.
    """
    if not isinstance(p, dict):
        return None

    pid = str(p.get("id") or "").strip() or f"{project_id}#{index}"

    start_raw = p.get("startDate", p.get("start"))
    end_raw = p.get("endDate", p.get("end"))
    start = parse_iso_date(start_raw)
    end = parse_iso_date(end_raw)
    if start is None:
        obs_warn("normalize", f"invalid startDate project={project_id!r} phase={pid!r} value={start_raw!r}")
    if end is None:
        obs_warn("normalize", f"invalid endDate project={project_id!r} phase={pid!r} value={end_raw!r}")
    if start is not None and end is not None and end < start:
        obs_warn("normalize", f"endDate before startDate project={project_id!r} phase={pid!r}")

    return Phase(
        id=pid,
        name=str(p.get("name") or ""),
        start=start,
        end=end,
        progress=_coerce_progress(p.get("progress")),
    )


def normalize_project(t: Dict[str, Any]) -> Optional[Project]:
    if not isinstance(t, dict):
        return None
    project_id = str(t.get("id") or "").strip()
    if not project_id:
        return None

    raw_phases = t.get("phases") or []
    if not isinstance(raw_phases, list):
        raw_phases = []

    phases: List[Phase] = []
    seen: Set[str] = set()
    for i, rp in enumerate(raw_phases):
        ph = normalize_phase(rp, project_id=project_id, index=i)
        if ph is None:
            continue
        if ph.id in seen:
            # Row assignment is keyed by phase id; repeats need their own slot.
            new_id = f"{ph.id}#{i}"
            while new_id in seen:
                new_id += "#"
            obs_warn("normalize", f"duplicate phase id project={project_id!r} phase={ph.id!r} renamed to {new_id!r}")
            ph = replace(ph, id=new_id)
        seen.add(ph.id)
        phases.append(ph)

    return Project(
        id=project_id,
        phases=tuple(phases),
        name=str(t.get("name") or ""),
        code=str(t.get("code") or ""),
        priority=str(t.get("priority") or ""),
        status=str(t.get("status") or ""),
        streams=_streams(t.get("stream", t.get("streams"))),
        archived=bool(t.get("archived") is True),
    )


def normalize_projects(raw: Iterable[Any]) -> List[Project]:
    out: List[Project] = []
    for t in raw:
        pr = normalize_project(t)
        if pr is None:
            obs_warn("normalize", f"dropped project record without id: {t!r:.80}")
            continue
        out.append(pr)
    return out


def load_projects_from_json(path: Union[str, Path]) -> List[Project]:
    """Read projects from a JSON file: a list, or {"projects": [...]}."""
    p = Path(path)
    raw = json.loads(p.read_text(encoding="utf-8", errors="replace"))
    if isinstance(raw, dict) and isinstance(raw.get("projects"), list):
        raw = raw["projects"]
    if not isinstance(raw, list):
        raise ValueError(f"projects JSON must be a list or {{'projects': [...]}}; got {type(raw).__name__}")
    return normalize_projects(raw)


__all__ = [
    "normalize_phase",
    "normalize_project",
    "normalize_projects",
    "load_projects_from_json",
]
