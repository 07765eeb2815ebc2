# ui/ui_settings.py
from dataclasses import dataclass

import streamlit as st

from .palette import get_palette

THEME_KEY = "ui_theme"
THEME_QUERY_PARAM = "theme"
THEMES = ("dark", "light")
PAGE_TITLE = "Portfolio"


@dataclass
class UISettings:
    """Simple container for UI configuration."""

    layout: str = "wide"  # "wide" or "centered"
    theme: str = "dark"  # "light" or "dark"


def get_settings() -> UISettings:
    """Return current UI settings from session state, the URL or defaults.

    The theme is mirrored in the query string so a page reload keeps it.
    """
    theme = st.session_state.get(THEME_KEY) or st.query_params.get(THEME_QUERY_PARAM, "dark")
    if theme not in THEMES:
        theme = "dark"
    return UISettings(
        layout=st.session_state.get("ui_layout", "wide"),
        theme=theme,
    )


_PAGE_CONFIGURED_KEY = "_ui_page_configured"


def _ensure_page_config(layout: str) -> None:
    if st.session_state.get(_PAGE_CONFIGURED_KEY):
        return
    st.set_page_config(page_title=PAGE_TITLE, page_icon="💼", layout=layout or "wide")
    st.session_state[_PAGE_CONFIGURED_KEY] = True


def apply_settings(settings: UISettings) -> None:
    """Apply settings to the Streamlit page."""
    _ensure_page_config(settings.layout)
    pal = get_palette(settings.theme)
    style_block = f"""
        <style>
        :root {{
            color-scheme: {settings.theme};
            --color-bg: {pal.bg};
            --color-card-bg: {pal.card_bg};
            --color-border: {pal.border};
            --color-text: {pal.text};
            --color-muted: {pal.muted_text};
            --color-accent: {pal.accent};
            --color-heading: {pal.heading};
        }}
        html, body, [data-testid=\"stAppViewContainer\"] {{
            background-color: var(--color-bg);
            color: var(--color-text);
        }}
        .portfolio-card {{
            background: var(--color-card-bg);
            border: 1px solid var(--color-border);
            border-radius: 0.75rem;
            padding: 1rem 1.25rem;
            margin-bottom: 0.75rem;
        }}
        .portfolio-muted {{ color: var(--color-muted); }}
        .portfolio-heading {{ color: var(--color-heading); }}
        .portfolio-bar {{ height: 0.5rem; border-radius: 999px; }}
        </style>
    """
    st.markdown(style_block, unsafe_allow_html=True)


def init_ui() -> UISettings:
    """Convenience helper to obtain current settings and apply them."""
    s = get_settings()
    apply_settings(s)
    return s


def toggle_theme() -> str:
    """Flip between dark and light themes and return the new one."""
    current = get_settings().theme
    new_theme = "light" if current == "dark" else "dark"
    st.session_state[THEME_KEY] = new_theme
    st.query_params[THEME_QUERY_PARAM] = new_theme
    return new_theme


def render_theme_toggle() -> None:
    """Render the theme toggle button."""

    current = get_settings().theme
    label = "☀️ Light Mode" if current == "dark" else "🌙 Dark Mode"
    st.button(label, key="_ui_theme_toggle", on_click=toggle_theme)
