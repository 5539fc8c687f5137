#!/usr/bin/env python3
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List

from phaseline.api import load_payload_from_json
from phaseline.render.inline import DEFAULT_TITLE, build_html
from phaseline.validate import validate_payload


def _die(msg: str, rc: int = 2) -> int:
    print(f"[phaseline-render] ERROR: {msg}", file=sys.stderr)
    return rc


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        prog="phaseline-render-payload",
        description="Replay a recorded layout payload JSON as a two-pane HTML timeline page.",
    )
    ap.add_argument("--in", dest="in_json", required=True, help="Layout payload JSON (from `phaseline --json`)")
    ap.add_argument("--out", required=True, help="Output HTML path")
    ap.add_argument("--title", default=DEFAULT_TITLE, help=f"Page title (default: {DEFAULT_TITLE!r})")
    ap.add_argument(
        "--no-validate",
        action="store_true",
        help="Render even when the payload fails validation (debugging only)",
    )
    ns = ap.parse_args(argv)

    in_path = Path(ns.in_json)
    if not in_path.exists():
        return _die(f"Missing input JSON: {in_path}")

    try:
        payload = load_payload_from_json(in_path, validate=False)
    except (OSError, ValueError) as e:
        return _die(f"Failed to load JSON: {in_path} ({e})")

    errs = validate_payload(payload)
    if errs and not ns.no_validate:
        return _die(f"Invalid payload: {'; '.join(errs[:10])}", rc=3)

    out = Path(ns.out).expanduser()
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(build_html(payload, title=ns.title), encoding="utf-8", newline="\n")

    print(f"[phaseline-render] OK: {out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
