# phaseline/autofocus.py
from __future__ import annotations

import datetime as dt
from typing import Any, Callable, Optional

from .axis import PixelAxis

Scheduler = Callable[[float, Callable[[], None]], Any]


def _run_now(_delay_s: float, fn: Callable[[], None]) -> None:
    fn()


class AutoFocusController:
    """Scroll the canvas so that `today` sits in the middle, once per mount.

    The pane must expose `client_width` and `scroll_to(left=..., smooth=...)`.
    `schedule(delay_s, fn)` defers the scroll until layout settles; pass an
    event loop's `call_later`. The default runs the callback immediately.
    """

    def __init__(
        self,
        axis: PixelAxis,
        today: Optional[dt.date] = None,
        *,
        settle_delay_ms: Optional[int] = None,
        schedule: Optional[Scheduler] = None,
    ) -> None:
        self.axis = axis
        self.today = today if today is not None else axis.config.resolve_today()
        if settle_delay_ms is None:
            settle_delay_ms = axis.config.settle_delay_ms
        self.settle_delay_ms = int(settle_delay_ms)
        self._schedule = schedule or _run_now
        self._pending = False
        self._done = False

    @property
    def today_x(self) -> float:
        return self.axis.date_to_x(self.today)

    @property
    def done(self) -> bool:
        return self._done

    def target_offset(self, visible_width: float) -> float:
        return max(0.0, self.today_x - float(visible_width) / 2.0)

    def on_layout(self, pane: Any) -> bool:
        """Call after every layout pass. Returns True when a scroll was scheduled."""
        if self._done or self._pending or pane is None:
            return False
        width = getattr(pane, "client_width", 0) or 0
        if width <= 0:
            # Not sized yet; wait for a real measurement.
            return False

        target = self.target_offset(width)
        self._pending = True

        def _fire() -> None:
            self._pending = False
            if not bool(getattr(pane, "attached", True)):
                return
            pane.scroll_to(left=target, smooth=True)
            self._done = True

        self._schedule(self.settle_delay_ms / 1000.0, _fire)
        return True

    def reset(self) -> None:
        """Re-arm for a fresh mount."""
        self._pending = False
        self._done = False


__all__ = ["AutoFocusController"]
