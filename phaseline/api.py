"""phaseline.api

Stable *library* entrypoint for the timeline layout engine.

Policy:
  - Only names listed in __all__ are considered public API.
  - Everything else is internal and may change without notice.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from phaseline.autofocus import AutoFocusController
from phaseline.axis import PixelAxis
from phaseline.config import ConfigError, TimelineConfig, load_config_file
from phaseline.geometry import (
    build_project_layout,
    build_timeline_layout,
    project_row_height,
    row_height_for,
)
from phaseline.html_extract import extract_payload_json_from_html_file
from phaseline.model import Phase, Project, RowAssignment, TimelineLayout
from phaseline.normalize import load_projects_from_json, normalize_projects
from phaseline.payload import build_layout_payload
from phaseline.portfolio import daily_overview, filter_projects, sort_projects, split_archived
from phaseline.rows import assign_rows
from phaseline.scrollsync import DualPaneScrollSynchronizer
from phaseline.validate import PayloadValidationError, assert_valid_payload, validate_payload

JsonPath = Union[str, Path]
Payload = Dict[str, Any]


def _as_projects(projects: Iterable[Any]) -> List[Project]:
    out: List[Project] = []
    for p in projects:
        if isinstance(p, Project):
            out.append(p)
        else:
            out.extend(normalize_projects([p]))
    return out


def layout_projects(
    projects: Iterable[Any],
    config: Optional[TimelineConfig] = None,
    *,
    sort_by: Optional[str] = None,
    include_archived: bool = False,
) -> Payload:
    """Raw upstream records (or Project objects) -> layout payload.

    Archived projects are dropped unless include_archived=True; `sort_by`
    takes a phaseline.portfolio sort key.
    """
    items = _as_projects(projects)
    if not include_archived:
        items, _archived = split_archived(items)
    if sort_by:
        items = sort_projects(items, sort_by)
    return build_layout_payload(items, config)


def load_payload_from_json(path: JsonPath, *, validate: bool = True) -> Payload:
    p = Path(path)
    payload = json.loads(p.read_text(encoding="utf-8", errors="replace"))
    if not isinstance(payload, dict):
        raise ValueError(f"JSON payload must be an object/dict; got {type(payload).__name__}")
    if validate:
        assert_valid_payload(payload)
    return payload


def load_payload_from_html(path: JsonPath, *, validate: bool = True) -> Payload:
    """Extract the payload embedded in a rendered timeline page."""
    obj = extract_payload_json_from_html_file(Path(path))
    if not isinstance(obj, dict):
        raise ValueError(f"HTML payload must be an object/dict; got {type(obj).__name__}")
    if validate:
        assert_valid_payload(obj)
    return obj


def project_by_id(payload: Payload, project_id: str) -> Optional[dict]:
    projects = payload.get("projects") or []
    if not isinstance(projects, list):
        return None
    for p in projects:
        if isinstance(p, dict) and p.get("id") == project_id:
            return p
    return None


def config_from_file(path: Optional[str], **overrides: Any) -> TimelineConfig:
    cfg = TimelineConfig.from_mapping(load_config_file(path))
    return cfg.with_overrides(**overrides)


# --- Public API exports (locked by contract tests) ------------------------
# Keep changes intentional and reviewable.
# Prefer append-only unless you are intentionally reshaping the public surface.
_PUBLIC_EXPORTS = (
    "AutoFocusController",
    "ConfigError",
    "DualPaneScrollSynchronizer",
    "PayloadValidationError",
    "Phase",
    "PixelAxis",
    "Project",
    "RowAssignment",
    "TimelineConfig",
    "TimelineLayout",
    "assert_valid_payload",
    "assign_rows",
    "build_layout_payload",
    "build_project_layout",
    "build_timeline_layout",
    "config_from_file",
    "daily_overview",
    "filter_projects",
    "layout_projects",
    "load_payload_from_html",
    "load_payload_from_json",
    "load_projects_from_json",
    "normalize_projects",
    "project_by_id",
    "project_row_height",
    "row_height_for",
    "sort_projects",
    "validate_payload",
)

__all__ = [n for n in _PUBLIC_EXPORTS if n in globals()]
# --- /Public API exports --------------------------------------------------
