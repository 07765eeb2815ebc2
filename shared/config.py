# shared/config.py
from __future__ import annotations
import os, json
import re
import time
from datetime import datetime, timedelta
from pathlib import Path
from typing import Any, Dict, Mapping
from dotenv import load_dotenv
import logging
from logging.handlers import TimedRotatingFileHandler
import streamlit as st
from streamlit.runtime.secrets import StreamlitSecretNotFoundError

logger = logging.getLogger(__name__)

# Project root (where app.py, .env and config.json live)
BASE_DIR = Path(__file__).resolve().parents[1]

# Load .env from the project root, then from the cwd
load_dotenv(BASE_DIR / ".env")
load_dotenv()

DEFAULT_LOG_RETENTION_DAYS = 7
DEFAULT_CACHE_BACKEND = "file"


def _load_cfg() -> Dict[str, Any]:
    """
    Load the optional config.json from the project root (or cwd). Missing file yields {}.
    """
    candidates = [BASE_DIR / "config.json", Path.cwd() / "config.json"]
    for p in candidates:
        try:
            if p.exists():
                return json.loads(p.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.exception("Could not load configuration %s: %s", p, e)
    return {}


class Settings:
    def __init__(self) -> None:
        cfg = _load_cfg()

        # --- Identity / headers ---
        self.USER_AGENT: str = os.getenv("USER_AGENT", cfg.get("USER_AGENT", "Personal-Portfolio/1.0 (+page)"))

        # --- Remote portfolio document ---
        self.PORTFOLIO_API_URL: str | None = self._normalise_url(
            self.secret_or_env("PORTFOLIO_API_URL", cfg.get("PORTFOLIO_API_URL"))
        )
        self.PORTFOLIO_API_TIMEOUT: float | None = self._optional_float(
            os.getenv("PORTFOLIO_API_TIMEOUT", cfg.get("PORTFOLIO_API_TIMEOUT"))
        )

        # --- Cache storage ---
        self.CACHE_BACKEND: str = str(
            os.getenv("CACHE_BACKEND", cfg.get("CACHE_BACKEND", DEFAULT_CACHE_BACKEND))
            or DEFAULT_CACHE_BACKEND
        ).strip().lower()
        self.CACHE_PATH: str | None = os.getenv("CACHE_PATH", cfg.get("CACHE_PATH"))

        # --- Logging ---
        retention_candidate = os.getenv(
            "LOG_RETENTION_DAYS", cfg.get("LOG_RETENTION_DAYS", DEFAULT_LOG_RETENTION_DAYS)
        )
        self.LOG_RETENTION_DAYS: int = self._coerce_positive_int(retention_candidate)
        self.LOG_LEVEL: str = str(os.getenv("LOG_LEVEL", cfg.get("LOG_LEVEL", "INFO"))).upper()
        self.LOG_FORMAT: str = str(os.getenv("LOG_FORMAT", cfg.get("LOG_FORMAT", "plain"))).lower()
        self.LOG_DIR: str = os.getenv("LOG_DIR", cfg.get("LOG_DIR", str(BASE_DIR / "logs")))

    def secret_or_env(self, key: str, default: Any | None = None) -> Any | None:
        try:
            return st.secrets[key]
        except (KeyError, FileNotFoundError, StreamlitSecretNotFoundError, AttributeError):
            return os.getenv(key, default)

    @staticmethod
    def _normalise_url(raw: Any) -> str | None:
        if raw is None:
            return None
        text = str(raw).strip()
        return text or None

    @staticmethod
    def _optional_float(raw: Any) -> float | None:
        if raw in (None, ""):
            return None
        try:
            value = float(raw)
        except (TypeError, ValueError):
            logger.warning("Invalid value for PORTFOLIO_API_TIMEOUT: %s", raw)
            return None
        return value if value > 0 else None

    def _coerce_positive_int(self, candidate: Any) -> int:
        try:
            value = int(candidate)
        except (TypeError, ValueError):
            return DEFAULT_LOG_RETENTION_DAYS
        return max(value, 1)


settings = Settings()


class JsonFormatter(logging.Formatter):
    """Simple JSON formatter for log records."""

    def format(self, record: logging.LogRecord) -> str:
        log_record = {
            "time": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_record["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(log_record)


LOG_FILENAME_PATTERN = re.compile(r"portfolio_(\d{4}-\d{2}-\d{2})\.log$")


def prune_old_logs(directory: Path, retention_days: int, current_file: str | None = None) -> None:
    """Remove ``portfolio_YYYY-MM-DD.log`` files older than the retention window."""

    try:
        retention_value = int(retention_days)
    except (TypeError, ValueError):
        retention_value = DEFAULT_LOG_RETENTION_DAYS

    retention_value = max(retention_value, 1)
    cutoff = datetime.now().date() - timedelta(days=retention_value - 1)

    current_path = Path(current_file) if current_file else None
    current_resolved = current_path.resolve() if current_path else None

    for candidate in directory.glob("portfolio_*.log"):
        if current_resolved is not None and candidate.resolve() == current_resolved:
            continue

        match = LOG_FILENAME_PATTERN.match(candidate.name)
        if not match:
            continue

        try:
            file_date = datetime.strptime(match.group(1), "%Y-%m-%d").date()
        except ValueError:
            continue

        if file_date < cutoff:
            try:
                candidate.unlink()
            except OSError as exc:
                logger.warning("Could not delete old log %s: %s", candidate, exc)


class DailyTimedRotatingFileHandler(TimedRotatingFileHandler):
    """Time-based file handler that writes daily log files with a date suffix."""

    def __init__(self, directory: Path, retention_days: int, encoding: str = "utf-8") -> None:
        self.log_directory = Path(directory)
        self.log_directory.mkdir(parents=True, exist_ok=True)
        try:
            retention_value = int(retention_days)
        except (TypeError, ValueError):
            retention_value = DEFAULT_LOG_RETENTION_DAYS
        self.retention_days = max(retention_value, 1)

        current_time = datetime.now()
        filename = self._filename_for(current_time)

        super().__init__(
            filename=str(filename),
            when="midnight",
            interval=1,
            backupCount=0,
            encoding=encoding,
            delay=False,
        )

        # Next rollover happens at the upcoming midnight regardless of the
        # file's modification time.
        self.rolloverAt = self.computeRollover(time.time())

        prune_old_logs(self.log_directory, self.retention_days, current_file=self.baseFilename)

    def _filename_for(self, moment: datetime) -> Path:
        return self.log_directory / f"portfolio_{moment.strftime('%Y-%m-%d')}.log"

    def doRollover(self) -> None:  # pragma: no cover - exercised indirectly
        if self.stream:
            self.stream.close()
            self.stream = None

        rollover_time = self.rolloverAt or time.time()
        next_moment = datetime.fromtimestamp(rollover_time)
        self.baseFilename = str(self._filename_for(next_moment))

        if not self.delay:
            self.stream = self._open()

        self.rolloverAt = self.computeRollover(rollover_time)
        prune_old_logs(self.log_directory, self.retention_days, current_file=self.baseFilename)


def configure_logging(level: str | None = None, json_format: bool | None = None) -> None:
    """Configure global logging.

    Defaults to ``INFO`` and the ``"plain"`` format. Invalid configured values
    fall back to those defaults. The parameters override the level and format
    read from the environment.
    """

    level_name = (level or getattr(settings, "LOG_LEVEL", "INFO")).upper()
    level_value = getattr(logging, level_name, None)
    if not isinstance(level_value, int):
        level_name = "INFO"
        level_value = logging.INFO

    if json_format is None:
        fmt = os.getenv("LOG_FORMAT", getattr(settings, "LOG_FORMAT", "plain"))
        fmt = str(fmt).lower()
        if fmt not in {"json", "plain"}:
            fmt = "plain"
        json_format = fmt == "json"

    if json_format:
        formatter: logging.Formatter = JsonFormatter(datefmt="%Y-%m-%d %H:%M:%S")
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    root = logging.getLogger()
    root.setLevel(level_value)
    root.handlers = []

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    root.addHandler(stream_handler)

    log_directory = Path(getattr(settings, "LOG_DIR", None) or BASE_DIR / "logs")
    retention_days = getattr(settings, "LOG_RETENTION_DAYS", DEFAULT_LOG_RETENTION_DAYS)
    try:
        retention_days = int(retention_days)
    except (TypeError, ValueError):
        retention_days = DEFAULT_LOG_RETENTION_DAYS
    retention_days = max(retention_days, 1)

    try:
        file_handler = DailyTimedRotatingFileHandler(
            directory=log_directory,
            retention_days=retention_days,
            encoding="utf-8",
        )
    except OSError as exc:
        logger.warning("File logging disabled, cannot write to %s: %s", log_directory, exc)
    else:
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    noisy_levels: Mapping[str, int] = {
        "urllib3.connectionpool": logging.WARNING,
        "plotly.io._base_renderers": logging.WARNING,
    }
    for logger_name, forced_level in noisy_levels.items():
        logging.getLogger(logger_name).setLevel(forced_level)


__all__ = [
    "BASE_DIR",
    "Settings",
    "settings",
    "JsonFormatter",
    "DailyTimedRotatingFileHandler",
    "prune_old_logs",
    "configure_logging",
]
