# phaseline/scrollsync.py
from __future__ import annotations

from typing import Any, Callable, Optional

from .model import ScrollSyncState


def _is_attached(pane: Any) -> bool:
    if pane is None:
        return False
    return bool(getattr(pane, "attached", True))


class DualPaneScrollSynchronizer:
    """Keep the list pane (left) and the canvas pane (right) at the same scroll_top.

    Panes are any objects with a read/write `scroll_top`. Writing a pane's
    offset may fire that pane's scroll listener synchronously (as browsers
    and toolkits do); the single `_syncing` flag turns that echo into a no-op
    so one user scroll produces exactly one write on the other pane.

    Optional pane hooks:
      - add_scroll_listener(cb) / remove_scroll_listener(cb): used by attach/detach
      - attached: False once the pane is unmounted; writes to it are skipped
    """

    def __init__(self, left: Any = None, right: Any = None) -> None:
        self._left: Any = None
        self._right: Any = None
        self._syncing = False
        self._left_offset = 0.0
        self._right_offset = 0.0
        if left is not None or right is not None:
            self.attach(left, right)

    # --- wiring ---------------------------------------------------------------

    def attach(self, left: Any = None, right: Any = None) -> None:
        """Attach (or replace) panes. Passing None leaves that side detached."""
        self.detach()
        self._left = left
        self._right = right
        self._listen(left, self.on_left_scroll, add=True)
        self._listen(right, self.on_right_scroll, add=True)

    def detach(self) -> None:
        self._listen(self._left, self.on_left_scroll, add=False)
        self._listen(self._right, self.on_right_scroll, add=False)
        self._left = None
        self._right = None
        self._reset()

    def replace_left(self, pane: Any) -> None:
        self.attach(pane, self._right)

    def replace_right(self, pane: Any) -> None:
        self.attach(self._left, pane)

    @staticmethod
    def _listen(pane: Any, cb: Callable[[], None], *, add: bool) -> None:
        if pane is None:
            return
        hook = getattr(pane, "add_scroll_listener" if add else "remove_scroll_listener", None)
        if callable(hook):
            hook(cb)

    def _reset(self) -> None:
        self._syncing = False
        self._left_offset = 0.0
        self._right_offset = 0.0

    # --- events ---------------------------------------------------------------

    def on_left_scroll(self) -> None:
        if self._syncing:
            return
        if not _is_attached(self._left):
            return
        offset = self._left.scroll_top
        self._left_offset = offset
        if self._copy_to(self._right, offset):
            self._right_offset = offset

    def on_right_scroll(self) -> None:
        if self._syncing:
            return
        if not _is_attached(self._right):
            return
        offset = self._right.scroll_top
        self._right_offset = offset
        if self._copy_to(self._left, offset):
            self._left_offset = offset

    def _copy_to(self, target: Any, offset: float) -> bool:
        if not _is_attached(target):
            return False
        self._syncing = True
        try:
            target.scroll_top = offset
        finally:
            # Cleared right after the write: the echo listener has already run.
            self._syncing = False
        return True

    @property
    def state(self) -> ScrollSyncState:
        return ScrollSyncState(
            left_offset=self._left_offset,
            right_offset=self._right_offset,
            is_syncing=self._syncing,
        )

    @property
    def left(self) -> Optional[Any]:
        return self._left

    @property
    def right(self) -> Optional[Any]:
        return self._right


__all__ = ["DualPaneScrollSynchronizer"]
