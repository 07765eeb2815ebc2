from __future__ import annotations

from ui import ui_settings


def test_defaults_to_dark_wide(fake_st) -> None:
    settings = ui_settings.get_settings()
    assert settings == ui_settings.UISettings(layout="wide", theme="dark")


def test_invalid_theme_falls_back_to_dark(fake_st) -> None:
    fake_st.session_state[ui_settings.THEME_KEY] = "neon"
    assert ui_settings.get_settings().theme == "dark"


def test_toggle_theme_flips_session_value(fake_st) -> None:
    assert ui_settings.toggle_theme() == "light"
    assert fake_st.session_state[ui_settings.THEME_KEY] == "light"
    assert ui_settings.toggle_theme() == "dark"


def test_init_ui_configures_page_once_and_injects_css(fake_st) -> None:
    ui_settings.init_ui()
    ui_settings.init_ui()

    assert fake_st.page_configs == [{"page_title": "Portfolio", "page_icon": "💼", "layout": "wide"}]
    assert "--color-bg: #161E2E" in fake_st.text


def test_light_theme_css(fake_st) -> None:
    fake_st.session_state[ui_settings.THEME_KEY] = "light"
    ui_settings.init_ui()
    assert "color-scheme: light" in fake_st.text


def test_theme_toggle_button_label_and_click(fake_st) -> None:
    ui_settings.render_theme_toggle()
    assert fake_st.buttons[-1]["label"] == "☀️ Light Mode"

    fake_st.clicked.add("_ui_theme_toggle")
    ui_settings.render_theme_toggle()
    assert fake_st.session_state[ui_settings.THEME_KEY] == "light"

    fake_st.clicked.clear()
    ui_settings.render_theme_toggle()
    assert fake_st.buttons[-1]["label"] == "🌙 Dark Mode"


def test_active_palette_follows_theme(fake_st) -> None:
    from ui.palette import PALETTES, get_active_palette

    fake_st.session_state[ui_settings.THEME_KEY] = "light"
    assert get_active_palette() is PALETTES["light"]


def test_theme_survives_reload_through_query_string(fake_st) -> None:
    ui_settings.toggle_theme()
    assert fake_st.query_params[ui_settings.THEME_QUERY_PARAM] == "light"

    fake_st.session_state.clear()
    assert ui_settings.get_settings().theme == "light"


def test_session_theme_wins_over_query_string(fake_st) -> None:
    fake_st.query_params[ui_settings.THEME_QUERY_PARAM] = "light"
    fake_st.session_state[ui_settings.THEME_KEY] = "dark"
    assert ui_settings.get_settings().theme == "dark"


def test_unknown_query_theme_is_ignored(fake_st) -> None:
    fake_st.query_params[ui_settings.THEME_QUERY_PARAM] = "neon"
    assert ui_settings.get_settings().theme == "dark"
