# Public helper API: extract the layout payload JSON from a rendered timeline page
from __future__ import annotations

import html as _html
import json
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any


@dataclass
class HtmlPayloadExtractError(RuntimeError):
    message: str
    def __str__(self) -> str:
        return self.message


_BY_ID_RE = re.compile(
    r'<script\b[^>]*\bid=["\']pl-data["\'][^>]*>(?P<body>.*?)</script>',
    flags=re.IGNORECASE | re.DOTALL,
)
_BY_TYPE_RE = re.compile(
    r'<script\b[^>]*\btype=["\']application/json(?:\s*;[^"\']*)?["\'][^>]*>(?P<body>.*?)</script>',
    flags=re.IGNORECASE | re.DOTALL,
)


def _loads_block(body: str):
    try:
        return json.loads(body)
    except ValueError:
        # Blocks re-saved by editors or browsers may carry HTML entities.
        return json.loads(_html.unescape(body))


def extract_payload_json_from_html_text(html_text: str):
    """
    Extract the layout payload JSON from HTML.

    Supported embeddings:
      1) Preferred: <script id="pl-data"> ...json... </script>   (type may be absent/variant)
      2) Also:      <script type="application/json[;...]" ...> ...json... </script>
    """
    for pat in (_BY_ID_RE, _BY_TYPE_RE):
        for m in pat.finditer(html_text):
            body = (m.group("body") or "").strip()
            if not body:
                continue
            try:
                return _loads_block(body)
            except ValueError:
                continue

    raise HtmlPayloadExtractError("No <script type='application/json'> payload block found in HTML.")


def extract_payload_json_from_html_file(path: str | Path) -> dict[str, Any]:
    p = Path(path)
    html = p.read_text(encoding="utf-8")
    return extract_payload_json_from_html_text(html)
