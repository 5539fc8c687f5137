from __future__ import annotations

import argparse
import json
import os
import webbrowser
from pathlib import Path

from .api import config_from_file, layout_projects
from .config import ConfigError
from .normalize import load_projects_from_json
from .portfolio import SORT_KEYS
from .render.inline import DEFAULT_TITLE, build_html
from .util.console import eprint
from .util.timeparse import parse_date_yyyy_mm_dd
from .util.tz import normalize_tz_name


def main(argv: list[str] | None = None) -> None:
    default_out = os.path.join("build", "phaseline_timeline.html")
    ap = argparse.ArgumentParser(
        description="Lay out project phases on a calendar timeline and render a two-pane HTML view."
    )
    ap.add_argument("--in", dest="in_json", required=True, help="Projects JSON (list, or {\"projects\": [...]})")
    ap.add_argument("--config", default=None, help="Timeline config JSON (optional; missing file = defaults)")
    ap.add_argument("--start", default=None, help="Timeline anchor date YYYY-MM-DD (default: config or 2026-01-01)")
    ap.add_argument("--today", default=None, help="Pin 'today' to YYYY-MM-DD (default: clock date in --tz)")
    ap.add_argument("--pixels-per-day", type=float, default=None, help="Horizontal scale (default: week width / 7)")
    ap.add_argument("--week-width", type=float, default=None, help="Header week column width in pixels (default: 120)")
    ap.add_argument("--sort", default="code_asc", choices=list(SORT_KEYS), help="Project order (default: code_asc)")
    ap.add_argument("--include-archived", action="store_true", help="Keep archived projects in the view")
    ap.add_argument(
        "--tz",
        default=os.getenv("PHASELINE_TZ", None),
        help="Timezone used to resolve 'today' (default: env PHASELINE_TZ, config, or 'local')",
    )
    ap.add_argument("--json", action="store_true", help="Write the layout payload JSON instead of HTML")
    ap.add_argument("--out", default=None, help="Output path (default: ./build/phaseline_timeline.html, or .json with --json)")
    ap.add_argument("--title", default=DEFAULT_TITLE, help="HTML page title")
    ap.add_argument("--no-open", action="store_true", help="Do not open the generated HTML in a browser")

    args = ap.parse_args(argv)

    try:
        start = parse_date_yyyy_mm_dd(args.start) if args.start else None
        today = parse_date_yyyy_mm_dd(args.today) if args.today else None
    except ValueError as e:
        raise SystemExit(f"Invalid date: {e}")

    try:
        cfg = config_from_file(
            args.config,
            timeline_start=start,
            today=today,
            pixels_per_day=args.pixels_per_day,
            week_width=args.week_width,
            tz=normalize_tz_name(args.tz) if args.tz else None,
        )
    except ConfigError as e:
        raise SystemExit(f"Invalid timeline config: {e}")

    try:
        projects = load_projects_from_json(args.in_json)
    except (OSError, ValueError) as e:
        raise SystemExit(f"Failed to load projects: {e}")

    try:
        payload = layout_projects(projects, cfg, sort_by=args.sort, include_archived=bool(args.include_archived))
    except ConfigError as e:
        raise SystemExit(f"Invalid timeline config: {e}")

    if args.json:
        out_default = os.path.join("build", "phaseline_layout.json")
        out_path = os.path.abspath(args.out or out_default)
        text = json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True)
    else:
        out_path = os.path.abspath(args.out or default_out)
        text = build_html(payload, title=args.title)

    try:
        Path(out_path).parent.mkdir(parents=True, exist_ok=True)
    except PermissionError as e:
        if args.out is None:
            fallback = Path.home() / ".phaseline" / "build" / Path(out_path).name
            fallback.parent.mkdir(parents=True, exist_ok=True)
            out_path = str(fallback)
            eprint(f"[phaseline] WARN: default output directory is not writable; using {out_path}")
        else:
            raise SystemExit(f"Cannot create output directory '{Path(out_path).parent}': {e}")
    with open(out_path, "w", encoding="utf-8") as f:
        f.write(text)

    print(out_path)

    if not args.json and not args.no_open:
        try:
            webbrowser.open("file://" + out_path)
        except Exception:
            pass


if __name__ == "__main__":
    main()
