"""Inline ``**bold**`` markup used in highlights and responsibilities."""

from __future__ import annotations

import html
import re
from typing import List, Tuple

_BOLD_PATTERN = re.compile(r"(\*\*.*?\*\*)")


def split_bold(text: str | None) -> List[Tuple[str, bool]]:
    """Split ``text`` into ``(segment, is_bold)`` pairs.

    Unbalanced markers are kept as plain text. Empty segments are dropped.
    """

    if not text:
        return []
    segments: List[Tuple[str, bool]] = []
    for part in _BOLD_PATTERN.split(str(text)):
        if not part:
            continue
        if len(part) >= 4 and part.startswith("**") and part.endswith("**"):
            if part[2:-2]:
                segments.append((part[2:-2], True))
        else:
            segments.append((part, False))
    return segments


def to_html(text: str | None) -> str:
    """Escape ``text`` and wrap bold segments in ``<strong>`` tags."""

    parts = []
    for segment, bold in split_bold(text):
        escaped = html.escape(segment)
        parts.append(f"<strong>{escaped}</strong>" if bold else escaped)
    return "".join(parts)


__all__ = ["split_bold", "to_html"]
