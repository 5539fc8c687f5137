# phaseline/palette.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class PhaseStyle:
    id: str
    label: str
    color: str


PHASE_STYLES: Tuple[PhaseStyle, ...] = (
    PhaseStyle("design", "Design", "#10b981"),
    PhaseStyle("dev", "Development", "#3b82f6"),
    PhaseStyle("unit_test", "Unit Test", "#6366f1"),
    PhaseStyle("sit", "SIT", "#f59e0b"),
    PhaseStyle("uat", "UAT", "#f43f5e"),
    PhaseStyle("implementation", "Deployment", "#a855f7"),
)

DEFAULT_COLOR = "#64748b"


def resolve_phase_style(name: Optional[str]) -> PhaseStyle:
    """Match a phase name against the catalogue (id or label, case-insensitive)."""
    key = (name or "").strip().lower()
    if key:
        for s in PHASE_STYLES:
            if s.id.lower() == key or s.label.lower() == key:
                return s
    return PhaseStyle("default", (name or "").strip() or "Phase", DEFAULT_COLOR)


__all__ = ["PhaseStyle", "PHASE_STYLES", "resolve_phase_style"]
