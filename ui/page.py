"""Page orchestration: load the document once per run and render every section."""
from __future__ import annotations

import logging

import streamlit as st

from services.portfolio_service import LoadResult, PortfolioDataService, get_portfolio_service
from shared.time_provider import TimeProvider

from .footer import render_footer
from .palette import get_palette
from .sections import (
    render_achievements,
    render_ai_projects,
    render_education,
    render_experience,
    render_profile,
    render_projects,
    render_skill_progress,
    render_stats,
    render_technical_skills,
)
from .ui_settings import init_ui, render_theme_toggle

logger = logging.getLogger(__name__)

REFRESH_BUTTON_KEY = "_portfolio_refresh"


def loading_message(service: PortfolioDataService) -> str:
    return "Loading data..." if service.is_remote_configured() else "Loading portfolio..."


def describe_source(result: LoadResult) -> str:
    """Short caption telling where the rendered document came from."""

    if result.source == "cache":
        snapshot = TimeProvider.from_millis(result.cached_at_ms)
        return f"Served from cache (saved {snapshot})" if snapshot else "Served from cache"
    if result.source == "remote":
        return "Fresh data from the remote source"
    if result.detail == "no-remote":
        return "Bundled portfolio data"
    return "Remote source unavailable, showing bundled data"


def render_controls(service: PortfolioDataService) -> bool:
    """Render refresh and theme controls. Return ``True`` when refresh was clicked."""

    refresh_col, theme_col = st.columns(2)
    refresh_requested = False
    if service.is_remote_configured():
        with refresh_col:
            refresh_requested = bool(
                st.button("🔄 Refresh", key=REFRESH_BUTTON_KEY, help="Refresh data from the remote source")
            )
    with theme_col:
        render_theme_toggle()
    return refresh_requested


def load_document(service: PortfolioDataService, *, refresh: bool = False) -> LoadResult:
    with st.spinner(loading_message(service)):
        return service.load(force=refresh)


def render_portfolio_page(service: PortfolioDataService | None = None) -> LoadResult:
    """Render the full page and return the load result used for it."""

    settings = init_ui()
    palette = get_palette(settings.theme)
    svc = service or get_portfolio_service()

    refresh = render_controls(svc)
    if refresh:
        logger.info("Manual refresh requested")
    result = load_document(svc, refresh=refresh)
    document = result.document

    render_profile(document)
    st.caption(describe_source(result))
    render_stats(document)

    main_col, side_col = st.columns([7, 3], gap="large")
    with side_col:
        render_education(document)
        render_skill_progress(document, palette)
        render_technical_skills(document)
    with main_col:
        render_experience(document)
        render_achievements(document)
        render_ai_projects(document)
        render_projects(document)

    render_footer(document)
    return result


__all__ = [
    "REFRESH_BUTTON_KEY",
    "describe_source",
    "load_document",
    "loading_message",
    "render_controls",
    "render_portfolio_page",
]
