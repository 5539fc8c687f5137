#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Tuple

from phaseline.api import load_payload_from_html, load_payload_from_json
from phaseline.html_extract import HtmlPayloadExtractError
from phaseline.validate import validate_payload

_TAG = "[phaseline-validate-payload]"


def _die(msg: str, rc: int = 2) -> int:
    print(f"{_TAG} ERROR: {msg}", file=sys.stderr)
    return rc


def _summary(payload: Dict[str, Any]) -> str:
    projects = payload.get("projects")
    if not isinstance(projects, list):
        return "no projects"
    rows = sum(int(p.get("total_rows") or 0) for p in projects if isinstance(p, dict))
    skipped = sum(len(p.get("skipped") or []) for p in projects if isinstance(p, dict))
    return f"{len(projects)} project(s), {rows} row(s), {skipped} skipped phase(s)"


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        prog="phaseline-validate-payload",
        description="Validate a timeline layout payload from JSON and/or a rendered HTML page.",
    )
    ap.add_argument("--in", dest="in_json", default=None, help="Layout payload JSON path")
    ap.add_argument("--from-html", dest="from_html", default=None, help="Rendered timeline page to extract from")
    ap.add_argument("--write-json", default=None, help="With --from-html: also write the extracted payload here")
    ns = ap.parse_args(argv)

    if not ns.in_json and not ns.from_html:
        return _die("Provide --in and/or --from-html")

    sources: List[Tuple[str, Dict[str, Any]]] = []

    if ns.in_json:
        p = Path(ns.in_json)
        if not p.exists():
            return _die(f"Missing JSON file: {p}")
        try:
            sources.append((f"json:{p}", load_payload_from_json(p, validate=False)))
        except (OSError, ValueError) as e:
            return _die(f"Failed to load JSON payload: {p} ({e})")

    if ns.from_html:
        p = Path(ns.from_html)
        if not p.exists():
            return _die(f"Missing HTML file: {p}")
        try:
            payload = load_payload_from_html(p, validate=False)
        except (OSError, ValueError, HtmlPayloadExtractError) as e:
            return _die(f"Failed to extract payload from HTML: {p} ({e})")
        if ns.write_json:
            out = Path(ns.write_json)
            out.parent.mkdir(parents=True, exist_ok=True)
            out.write_text(
                json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
                encoding="utf-8",
                newline="\n",
            )
        sources.append((f"html:{p}", payload))

    failed = False
    for src, payload in sources:
        errs = validate_payload(payload, label=src)
        if errs:
            failed = True
            print(f"{_TAG} FAIL {src}", file=sys.stderr)
            for e in errs:
                print(f"  - {e}", file=sys.stderr)
        else:
            print(f"{_TAG} OK {src}: {_summary(payload)}")

    return 3 if failed else 0


if __name__ == "__main__":
    raise SystemExit(main())
