# phaseline/render/inline.py
from __future__ import annotations

import html as _html
import json
import re
from typing import List

from .html_markup import BODY_MARKUP
from .html_shell import HTML_SHELL
from .inline_css import CSS_BLOCK
from .inline_js import JS_BLOCK

try:
    import orjson  # type: ignore
except Exception:  # pragma: no cover
    orjson = None  # type: ignore

DEFAULT_TITLE = "Project Timeline"

_DATA_MARKER = "__DATA_JSON__"
_TITLE_MARKER = "__PAGE_TITLE__"
_MARKER_RE = re.compile(f"({_DATA_MARKER}|{_TITLE_MARKER})")

# Static parts are spliced once; title and data are filled per page.
PAGE_TEMPLATE = (
    HTML_SHELL
    .replace("__CSS_BLOCK__", CSS_BLOCK)
    .replace("__BODY_MARKUP__", BODY_MARKUP)
    .replace("__JS_BLOCK__", JS_BLOCK)
)

# Even indices are literal text, odd indices are marker names.
_PIECES: List[str] = _MARKER_RE.split(PAGE_TEMPLATE)


def _payload_json(payload: dict) -> str:
    if orjson is not None:
        text = orjson.dumps(payload).decode("utf-8")
    else:
        text = json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
    # A "</script>" inside a project name must not close the data block.
    return text.replace("</", r"<\/")


def build_html(payload: dict, *, title: str = DEFAULT_TITLE) -> str:
    """Self-contained two-pane timeline page with `payload` embedded as JSON.

    Markers are filled in one pass over the template, so marker-like text
    inside the title or the data is left alone.
    """
    if not isinstance(payload, dict):
        raise TypeError(f"payload must be dict, got {type(payload).__name__}")

    for marker in (_DATA_MARKER, _TITLE_MARKER):
        n = _PIECES[1::2].count(marker)
        if n != 1:
            raise RuntimeError(f"PAGE_TEMPLATE must contain {marker} exactly once (found {n})")

    values = {
        _DATA_MARKER: _payload_json(payload),
        _TITLE_MARKER: _html.escape(title or DEFAULT_TITLE),
    }
    return "".join(values[p] if i % 2 else p for i, p in enumerate(_PIECES))


__all__ = ["DEFAULT_TITLE", "PAGE_TEMPLATE", "build_html"]
