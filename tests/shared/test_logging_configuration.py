import json
import logging
import sys
from datetime import datetime, timedelta
from pathlib import Path

import pytest

from shared import config


@pytest.fixture()
def _isolated_root_logger():
    root_logger = logging.getLogger()
    original_level = root_logger.level
    original_handlers = root_logger.handlers[:]

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    try:
        yield root_logger
    finally:
        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)
            handler.close()

        for handler in original_handlers:
            root_logger.addHandler(handler)

        root_logger.setLevel(original_level)


@pytest.mark.parametrize("json_format", [False, True])
def test_configure_logging_adds_daily_file_handler(tmp_path, monkeypatch, _isolated_root_logger, json_format):
    monkeypatch.setattr(config.settings, "LOG_DIR", str(tmp_path), raising=False)

    config.configure_logging(level="INFO", json_format=json_format)
    file_handlers = [
        handler
        for handler in _isolated_root_logger.handlers
        if isinstance(handler, config.DailyTimedRotatingFileHandler)
    ]
    assert len(file_handlers) == 1

    log_file = Path(file_handlers[0].baseFilename)
    assert log_file.parent == tmp_path
    assert log_file.name == f"portfolio_{datetime.now().strftime('%Y-%m-%d')}.log"

    _isolated_root_logger.info("hello world")
    file_handlers[0].flush()

    last_line = log_file.read_text(encoding="utf-8").strip().splitlines()[-1]
    if json_format:
        record = json.loads(last_line)
        assert record["message"] == "hello world"
        assert record["level"] == "INFO"
    else:
        assert "hello world" in last_line
        assert " - INFO - " in last_line


def test_configure_logging_quiets_http_pool(tmp_path, monkeypatch, _isolated_root_logger):
    monkeypatch.setattr(config.settings, "LOG_DIR", str(tmp_path), raising=False)
    config.configure_logging(level="DEBUG", json_format=False)

    assert _isolated_root_logger.level == logging.DEBUG
    assert logging.getLogger("urllib3.connectionpool").level == logging.WARNING


def test_invalid_level_falls_back_to_info(tmp_path, monkeypatch, _isolated_root_logger):
    monkeypatch.setattr(config.settings, "LOG_DIR", str(tmp_path), raising=False)
    config.configure_logging(level="chatty", json_format=False)
    assert _isolated_root_logger.level == logging.INFO


def test_unwritable_log_dir_keeps_stream_handler(tmp_path, monkeypatch, _isolated_root_logger):
    blocker = tmp_path / "file"
    blocker.write_text("x", encoding="utf-8")
    monkeypatch.setattr(config.settings, "LOG_DIR", str(blocker / "logs"), raising=False)

    config.configure_logging(level="INFO", json_format=False)

    assert not any(
        isinstance(handler, config.DailyTimedRotatingFileHandler) for handler in _isolated_root_logger.handlers
    )
    assert any(isinstance(handler, logging.StreamHandler) for handler in _isolated_root_logger.handlers)


def test_configure_logging_prunes_old_log_files(tmp_path, monkeypatch, _isolated_root_logger):
    retention_days = 3
    monkeypatch.setattr(config.settings, "LOG_DIR", str(tmp_path), raising=False)
    monkeypatch.setattr(config.settings, "LOG_RETENTION_DAYS", retention_days, raising=False)

    today = datetime.now().date()
    for offset in range(retention_days + 3):
        day = today - timedelta(days=offset)
        (tmp_path / f"portfolio_{day.strftime('%Y-%m-%d')}.log").write_text("old", encoding="utf-8")
    unrelated = tmp_path / "portfolio.log"
    unrelated.write_text("keep", encoding="utf-8")

    config.configure_logging(level="INFO", json_format=False)

    remaining = {path.name for path in tmp_path.glob("portfolio_*.log")}
    expected = {
        f"portfolio_{(today - timedelta(days=offset)).strftime('%Y-%m-%d')}.log"
        for offset in range(retention_days)
    }
    assert remaining == expected
    assert unrelated.exists()


def test_json_formatter_includes_exception():
    formatter = config.JsonFormatter()
    try:
        raise ValueError("boom")
    except ValueError:
        record = logging.LogRecord("test", logging.ERROR, __file__, 1, "failed", None, sys.exc_info())

    payload = json.loads(formatter.format(record))
    assert payload["message"] == "failed"
    assert "ValueError: boom" in payload["exc_info"]
