"""Text utilities: word counting and title extraction."""

from __future__ import annotations

import re
from typing import Optional

from ..dom.tree import HtmlNode

# The DOM whitespace class; str.split() would also split on \x1c-\x1f and \x85.
_WS = r"[ \t\n\r\f\v\u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]"
WHITESPACE_RE = re.compile(_WS + "+")
_EDGE_WHITESPACE_RE = re.compile(f"^{_WS}+|{_WS}+$")


def trim(text: str) -> str:
    return _EDGE_WHITESPACE_RE.sub("", text)


def count_words(text: str | None) -> int:
    """Number of non-empty whitespace-separated tokens in the trimmed text."""
    if not text:
        return 0
    return len([w for w in WHITESPACE_RE.split(trim(text)) if w])


def extract_title(doc: HtmlNode) -> Optional[str]:
    """Trimmed text of the first ``<title>`` element, or None if there is none."""
    title_el = doc.select_one("title")
    if title_el is None:
        return None
    return trim(title_el.text)
