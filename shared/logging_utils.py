"""Centralised logging helpers for Streamlit integrations."""

from __future__ import annotations

import logging
import warnings
from typing import Iterable

_STREAMLIT_LOGGERS: tuple[str, ...] = (
    "streamlit.runtime.scriptrunner_utils.script_run_context",
    "streamlit.runtime.state.session_state",
    "streamlit.runtime.caching",
)

_WARNING_FILTERS: tuple[tuple[str, str, str], ...] = (
    ("ignore", r".*bare mode.*", "streamlit"),
    ("ignore", r".*use_container_width.*", "streamlit"),
)


def silence_streamlit_warnings(extra_loggers: Iterable[str] | None = None) -> None:
    """Suppress noisy Streamlit logging and known warnings."""

    targets = list(_STREAMLIT_LOGGERS)
    if extra_loggers:
        targets.extend(str(name) for name in extra_loggers)

    for name in targets:
        logger = logging.getLogger(name)
        logger.setLevel(logging.ERROR)
        logger.propagate = False

    for action, message, module in _WARNING_FILTERS:
        warnings.filterwarnings(action, message, module=module)


__all__ = ["silence_streamlit_warnings"]
