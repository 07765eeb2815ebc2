"""Streamlit user interface for the portfolio page."""

from .footer import render_footer
from .page import render_portfolio_page
from .palette import get_active_palette, get_palette
from .ui_settings import UISettings, init_ui

__all__ = [
    "render_footer",
    "render_portfolio_page",
    "get_active_palette",
    "get_palette",
    "UISettings",
    "init_ui",
]
