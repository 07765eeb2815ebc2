"""Application settings exposed for cross-module use.

This module centralizes access to the configuration values used across
services and infrastructure layers. Values are sourced from environment
variables, `streamlit` secrets or ``config.json`` via ``shared.config``.
"""
from __future__ import annotations

from shared.config import BASE_DIR
from shared.config import settings as _config_settings

# Re-export the shared Settings instance so existing imports keep working.
settings = _config_settings

# Remote document source. ``None`` means fallback-only operation.
portfolio_api_url: str | None = settings.PORTFOLIO_API_URL
portfolio_api_timeout: float | None = settings.PORTFOLIO_API_TIMEOUT
user_agent: str = settings.USER_AGENT

# Cache storage. The TTL itself is fixed in ``services.cache.portfolio_cache``.
cache_backend: str = settings.CACHE_BACKEND
cache_path: str | None = settings.CACHE_PATH
DEFAULT_FILE_CACHE_PATH: str = str(BASE_DIR / ".cache" / "portfolio")
DEFAULT_SQLITE_CACHE_PATH: str = str(BASE_DIR / ".cache" / "portfolio.db")

__all__ = [
    "settings",
    "portfolio_api_url",
    "portfolio_api_timeout",
    "user_agent",
    "cache_backend",
    "cache_path",
    "DEFAULT_FILE_CACHE_PATH",
    "DEFAULT_SQLITE_CACHE_PATH",
]
