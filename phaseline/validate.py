"""Layout payload validation helpers (library-facing)."""

from __future__ import annotations

from typing import Any, Dict, List

from phaseline.payload import SCHEMA_VERSION


class PayloadValidationError(ValueError):
    """Raised when a payload fails validation."""


def _require(cond: bool, msg: str, errs: List[str]) -> None:
    if not cond:
        errs.append(msg)


def _is_num(v: Any) -> bool:
    return isinstance(v, (int, float)) and not isinstance(v, bool)


def _validate_project(p: Any, i: int, label: str, errs: List[str]) -> None:
    where = f"{label}: projects[{i}]"
    if not isinstance(p, dict):
        errs.append(f"{where} must be dict")
        return

    _require(isinstance(p.get("id"), str) and bool(p.get("id")), f"{where}.id must be non-empty string", errs)

    total_rows = p.get("total_rows")
    _require(isinstance(total_rows, int) and total_rows >= 1, f"{where}.total_rows must be int >= 1", errs)
    _require(isinstance(p.get("row_height"), int), f"{where}.row_height must be int", errs)

    rows = p.get("row_assignment")
    _require(isinstance(rows, dict), f"{where}.row_assignment must be dict", errs)
    if isinstance(rows, dict) and isinstance(total_rows, int):
        for pid, r in rows.items():
            if not isinstance(r, int) or r < 0 or r >= total_rows:
                errs.append(f"{where}.row_assignment[{pid!r}] out of range: {r!r} (total_rows={total_rows})")

    phases = p.get("phases")
    _require(isinstance(phases, list), f"{where}.phases must be list", errs)
    if isinstance(phases, list):
        for j, r in enumerate(phases):
            if not isinstance(r, dict):
                errs.append(f"{where}.phases[{j}] must be dict")
                continue
            for k in ("left", "width", "top", "height"):
                _require(_is_num(r.get(k)), f"{where}.phases[{j}].{k} must be number", errs)
            if isinstance(rows, dict):
                _require(r.get("id") in rows, f"{where}.phases[{j}].id not in row_assignment", errs)

    _require(isinstance(p.get("connectors", []), list), f"{where}.connectors must be list", errs)


def validate_payload(payload: Dict[str, Any], *, label: str = "payload") -> List[str]:
    if not isinstance(payload, dict):
        return [f"{label}: payload must be a dict/object"]

    sv = payload.get("schema_version")
    if isinstance(sv, int) and sv != SCHEMA_VERSION:
        return [f"Unsupported schema_version: {sv} (latest={SCHEMA_VERSION})"]
    if not isinstance(sv, int):
        return [f"{label}: schema_version must be an int"]

    errs: List[str] = []

    meta = payload.get("meta")
    _require(isinstance(meta, dict), f"{label}: meta must be dict", errs)
    if isinstance(meta, dict):
        ga = meta.get("generated_at")
        _require(isinstance(ga, str) and bool(ga.strip()), f"{label}: meta.generated_at must be non-empty string", errs)

    _require(isinstance(payload.get("cfg"), dict), f"{label}: cfg must be dict", errs)
    _require(_is_num(payload.get("today_x")), f"{label}: today_x must be number", errs)
    _require(_is_num(payload.get("width")), f"{label}: width must be number", errs)

    header = payload.get("header")
    _require(isinstance(header, dict), f"{label}: header must be dict", errs)
    if isinstance(header, dict):
        _require(isinstance(header.get("months"), list), f"{label}: header.months must be list", errs)
        _require(isinstance(header.get("weeks"), list), f"{label}: header.weeks must be list", errs)

    projects = payload.get("projects")
    _require(isinstance(projects, list), f"{label}: projects must be list", errs)
    if isinstance(projects, list):
        seen: set = set()
        expect_top = 0
        for i, p in enumerate(projects):
            _validate_project(p, i, label, errs)
            if not isinstance(p, dict):
                continue
            pid = p.get("id")
            if pid in seen:
                errs.append(f"{label}: duplicate project id {pid!r}")
            seen.add(pid)
            # Rows must stack without gaps so both panes share one y axis.
            if isinstance(p.get("top"), int) and isinstance(p.get("row_height"), int):
                if p["top"] != expect_top:
                    errs.append(f"{label}: projects[{i}].top={p['top']} expected {expect_top}")
                expect_top = p["top"] + p["row_height"]
        th = payload.get("total_height")
        if isinstance(th, int) and th != expect_top:
            errs.append(f"{label}: total_height={th} expected {expect_top}")

    return errs


def assert_valid_payload(payload: Dict[str, Any]) -> None:
    if not isinstance(payload, dict):
        raise PayloadValidationError("payload must be a JSON object")
    errs = validate_payload(payload, label="payload")
    if errs:
        raise PayloadValidationError(errs[0])


__all__ = [
    "PayloadValidationError",
    "assert_valid_payload",
    "validate_payload",
]
