from __future__ import annotations

import html
from typing import Any, Mapping

import streamlit as st

from shared.time_provider import TimeProvider
from shared.version import __version__


def get_version() -> str:
    return __version__


def render_footer(document: Mapping[str, Any] | None = None) -> None:
    info = document.get("personalInfo") if isinstance(document, Mapping) else None
    name = str(info.get("name") or "") if isinstance(info, Mapping) else ""
    title = str(info.get("title") or "") if isinstance(info, Mapping) else ""
    owner = " | ".join(part for part in (name, f"{title} Portfolio" if title else "") if part)
    year = TimeProvider.now_datetime().year
    st.markdown(
        f"""
        <hr>
        <div class='portfolio-footer' style='text-align: center'>
            <p><strong>{html.escape(owner or 'Portfolio')}</strong> · &copy; {year}</p>
            <p class='portfolio-muted'>Version {html.escape(get_version())} · Made with Streamlit</p>
        </div>
        """,
        unsafe_allow_html=True,
    )
