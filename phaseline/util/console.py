# phaseline/util/console.py
from __future__ import annotations
import os
import sys
from typing import Any

_OBS_ENV = "PHASELINE_OBS_LOG"
_TRUTHY = {"1", "true", "yes", "on"}


def eprint(*args: Any) -> None:
    print(*args, file=sys.stderr)


def obs_enabled() -> bool:
    return (os.getenv(_OBS_ENV, "") or "").strip().lower() in _TRUTHY


def obs_warn(scope: str, msg: str) -> None:
    """Data-quality notice on stderr, only when PHASELINE_OBS_LOG is on."""
    if obs_enabled():
        eprint(f"[phaseline.{scope}] WARN: {msg}")
