from __future__ import annotations

import io
import json
import os
import subprocess
import sys
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path

from phaseline import cli

REPO_ROOT = Path(__file__).resolve().parents[1]

PROJECTS = {
    "projects": [
        {
            "id": "P-1",
            "code": "BIL",
            "name": "Billing revamp",
            "priority": "High",
            "phases": [
                {"id": "d", "name": "Design", "startDate": "2026-01-01", "endDate": "2026-01-10"},
                {"id": "v", "name": "Development", "startDate": "2026-01-05", "endDate": "2026-02-10"},
            ],
        },
        {"id": "P-2", "code": "ARC", "archived": True},
    ]
}


def _env() -> dict:
    env = os.environ.copy()
    env["PYTHONPATH"] = str(REPO_ROOT)
    return env


class TestCliContract(unittest.TestCase):
    def setUp(self) -> None:
        self._td = tempfile.TemporaryDirectory()
        self.tmp = Path(self._td.name)
        self.in_json = self.tmp / "projects.json"
        self.in_json.write_text(json.dumps(PROJECTS), encoding="utf-8")

    def tearDown(self) -> None:
        self._td.cleanup()

    def _run(self, *extra: str) -> str:
        buf = io.StringIO()
        with redirect_stdout(buf):
            cli.main(["--in", str(self.in_json), "--no-open", "--today", "2026-01-11", *extra])
        return buf.getvalue().strip()

    def test_writes_html(self) -> None:
        out = self.tmp / "t.html"
        printed = self._run("--out", str(out))
        self.assertEqual(printed, os.path.abspath(str(out)))
        txt = out.read_text(encoding="utf-8")
        self.assertIn("Billing revamp", txt)
        self.assertNotIn("__DATA_JSON__", txt)

    def test_writes_json_payload(self) -> None:
        out = self.tmp / "layout.json"
        self._run("--json", "--out", str(out), "--pixels-per-day", "20", "--start", "2026-01-01")
        payload = json.loads(out.read_text(encoding="utf-8"))
        self.assertEqual([p["id"] for p in payload["projects"]], ["P-1"])
        self.assertEqual(payload["today_x"], 200.0)
        self.assertEqual(payload["cfg"]["pixels_per_day"], 20.0)

    def test_include_archived(self) -> None:
        out = self.tmp / "layout.json"
        self._run("--json", "--out", str(out), "--include-archived", "--sort", "code_asc")
        payload = json.loads(out.read_text(encoding="utf-8"))
        self.assertEqual([p["id"] for p in payload["projects"]], ["P-2", "P-1"])

    def test_config_file_is_applied(self) -> None:
        cfg = self.tmp / "cfg.json"
        cfg.write_text(json.dumps({"timeline": {"week_width": 70, "bar_height": 20}}), encoding="utf-8")
        out = self.tmp / "layout.json"
        self._run("--json", "--out", str(out), "--config", str(cfg))
        payload = json.loads(out.read_text(encoding="utf-8"))
        self.assertEqual(payload["cfg"]["pixels_per_day"], 10.0)
        self.assertEqual(payload["projects"][0]["phases"][0]["height"], 20)

    def test_bad_date_is_user_error(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            cli.main(["--in", str(self.in_json), "--no-open", "--start", "01/01/2026"])
        self.assertIn("Invalid date", str(ctx.exception))

    def test_bad_tz_is_user_error(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            cli.main(["--in", str(self.in_json), "--no-open", "--tz", "No/Such_Zone", "--out", str(self.tmp / "x.html")])
        self.assertIn("Invalid timeline config", str(ctx.exception))

    def test_missing_input_is_user_error(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            cli.main(["--in", str(self.tmp / "missing.json"), "--no-open"])
        self.assertIn("Failed to load projects", str(ctx.exception))


class TestPayloadToolsContract(unittest.TestCase):
    def test_validate_then_render_replay(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            td = Path(td)
            in_json = td / "projects.json"
            payload_json = td / "layout.json"
            replay_html = td / "replay.html"
            extracted = td / "extracted.json"
            in_json.write_text(json.dumps(PROJECTS), encoding="utf-8")

            subprocess.run(
                [sys.executable, "-m", "phaseline.cli", "--in", str(in_json), "--json",
                 "--out", str(payload_json), "--today", "2026-01-11"],
                cwd=str(REPO_ROOT), env=_env(), check=True, capture_output=True,
            )

            p = subprocess.run(
                [sys.executable, "-m", "phaseline.tools.validate_payload", "--in", str(payload_json)],
                cwd=str(REPO_ROOT), env=_env(), capture_output=True, text=True,
            )
            self.assertEqual(p.returncode, 0, p.stderr)
            self.assertIn("OK", p.stdout)

            p = subprocess.run(
                [sys.executable, "-m", "phaseline.tools.render_payload", "--in", str(payload_json),
                 "--out", str(replay_html), "--title", "Q3 plan"],
                cwd=str(REPO_ROOT), env=_env(), capture_output=True, text=True,
            )
            self.assertEqual(p.returncode, 0, p.stderr)
            self.assertIn("Billing revamp", replay_html.read_text(encoding="utf-8"))
            self.assertIn("<title>Q3 plan</title>", replay_html.read_text(encoding="utf-8"))

            p = subprocess.run(
                [sys.executable, "-m", "phaseline.tools.validate_payload", "--from-html", str(replay_html),
                 "--write-json", str(extracted)],
                cwd=str(REPO_ROOT), env=_env(), capture_output=True, text=True,
            )
            self.assertEqual(p.returncode, 0, p.stderr)
            self.assertEqual(
                json.loads(extracted.read_text(encoding="utf-8")),
                json.loads(payload_json.read_text(encoding="utf-8")),
            )

    def test_invalid_payload_exits_3(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            bad = Path(td) / "bad.json"
            bad.write_text(json.dumps({"schema_version": 1, "projects": "nope"}), encoding="utf-8")
            for mod in ("phaseline.tools.validate_payload", "phaseline.tools.render_payload"):
                args = [sys.executable, "-m", mod, "--in", str(bad)]
                if mod.endswith("render_payload"):
                    args += ["--out", str(Path(td) / "x.html")]
                p = subprocess.run(args, cwd=str(REPO_ROOT), env=_env(), capture_output=True, text=True)
                self.assertEqual(p.returncode, 3, (mod, p.stderr))

    def test_validate_requires_an_input(self) -> None:
        p = subprocess.run(
            [sys.executable, "-m", "phaseline.tools.validate_payload"],
            cwd=str(REPO_ROOT), env=_env(), capture_output=True, text=True,
        )
        self.assertEqual(p.returncode, 2)


if __name__ == "__main__":
    unittest.main(verbosity=2)
