from __future__ import annotations

import logging

import app
from shared import config


def test_main_configures_logging_once_and_renders(monkeypatch, tmp_path) -> None:
    calls: list[str] = []
    root = logging.getLogger()
    original_handlers = root.handlers[:]

    def fake_configure() -> None:
        calls.append("logging")
        root.addHandler(config.DailyTimedRotatingFileHandler(tmp_path, retention_days=1))

    monkeypatch.setattr(app, "configure_logging", fake_configure)
    monkeypatch.setattr(app, "silence_streamlit_warnings", lambda: calls.append("silence"))
    monkeypatch.setattr(app, "render_portfolio_page", lambda: calls.append("page"))

    try:
        app.main()
        app.main()
    finally:
        for handler in root.handlers[:]:
            if handler not in original_handlers:
                root.removeHandler(handler)
                handler.close()

    assert calls == ["logging", "silence", "page", "page"]
