"""Access to the portfolio document bundled with the application."""

from __future__ import annotations

import copy
import json
from importlib import resources
from typing import Any, Dict

FALLBACK_RESOURCE = "portfolio.json"


def _read_bundled_document() -> Dict[str, Any]:
    text = resources.files(__package__).joinpath(FALLBACK_RESOURCE).read_text(encoding="utf-8")
    document = json.loads(text)
    if not isinstance(document, dict):
        raise TypeError(f"{FALLBACK_RESOURCE} must contain a JSON object")
    return document


# Parsed once at import; callers only receive copies.
_FALLBACK_DOCUMENT: Dict[str, Any] = _read_bundled_document()


def load_fallback_portfolio() -> Dict[str, Any]:
    """Return a private copy of the bundled portfolio document."""

    return copy.deepcopy(_FALLBACK_DOCUMENT)


__all__ = ["FALLBACK_RESOURCE", "load_fallback_portfolio"]
