"""Cache-aside loading of the portfolio document with a bundled fallback.

``fetch`` checks the durable cache, then the remote endpoint, and finally the
document shipped with the application. Failures never reach the caller: the
worst outcome is the fallback document.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Callable, Literal

from infrastructure.cache.kv_storage import build_storage
from services.cache.portfolio_cache import (
    CACHE_KEY,
    CACHE_TTL_MS,
    PortfolioCacheStore,
    PortfolioDocument,
)
from services.portfolio_source import RemotePortfolioSource, fetch_fallback
from shared.errors import HttpError, NetworkError, ParseError
from shared.settings import cache_backend, cache_path, portfolio_api_url

__all__ = [
    "LoadResult",
    "PortfolioDataService",
    "PortfolioSourceConfig",
    "get_portfolio_service",
]

logger = logging.getLogger(__name__)

LoadSource = Literal["cache", "remote", "fallback"]


@dataclass(frozen=True)
class PortfolioSourceConfig:
    """Remote endpoint resolved once at startup. ``None`` disables remote mode."""

    remote_url: str | None = None

    def __post_init__(self) -> None:
        url = self.remote_url.strip() if isinstance(self.remote_url, str) else None
        object.__setattr__(self, "remote_url", url or None)

    @classmethod
    def from_settings(cls) -> "PortfolioSourceConfig":
        return cls(remote_url=portfolio_api_url)


@dataclass(frozen=True)
class LoadResult:
    """A loaded document and where it came from."""

    document: PortfolioDocument
    source: LoadSource
    detail: str | None = None
    cached_at_ms: int | None = None


def _failure_detail(exc: Exception) -> str:
    if isinstance(exc, HttpError):
        return "http-error"
    if isinstance(exc, ParseError):
        return "parse-error"
    return "network-error"


class PortfolioDataService:
    """Decide between cache, remote endpoint and bundled fallback."""

    def __init__(
        self,
        config: PortfolioSourceConfig,
        cache: PortfolioCacheStore,
        *,
        remote: RemotePortfolioSource | None = None,
        fallback: Callable[[], PortfolioDocument] = fetch_fallback,
        cache_key: str = CACHE_KEY,
    ) -> None:
        self._config = config
        self._cache = cache
        self._remote = remote or RemotePortfolioSource()
        self._fallback = fallback
        self._cache_key = cache_key

    @property
    def config(self) -> PortfolioSourceConfig:
        return self._config

    def is_remote_configured(self) -> bool:
        return self._config.remote_url is not None

    def fetch(self) -> PortfolioDocument:
        return self.load().document

    def force_refresh(self) -> PortfolioDocument:
        return self.load(force=True).document

    def clear_cache(self) -> None:
        self._cache.clear(self._cache_key)

    def load(self, *, force: bool = False) -> LoadResult:
        """Return the document together with its origin.

        With ``force`` the cache entry is cleared first, so a still fresh entry
        is never served.
        """

        if force:
            self.clear_cache()
        elif self.is_remote_configured():
            cached = self._read_fresh_cache()
            if cached is not None:
                return cached

        url = self._config.remote_url
        if url is None:
            logger.info("Using bundled portfolio data (no remote endpoint configured)")
            return LoadResult(self._fallback(), "fallback", "no-remote")

        try:
            document = self._remote.fetch_remote(url)
        except (NetworkError, ParseError) as exc:
            detail = _failure_detail(exc)
            logger.error("Error fetching portfolio data (%s): %s", detail, exc)
            logger.warning("Falling back to bundled portfolio data")
            return LoadResult(self._fallback(), "fallback", detail)

        self._cache.put(self._cache_key, document)
        return LoadResult(document, "remote")

    def _read_fresh_cache(self) -> LoadResult | None:
        entry = self._cache.get(self._cache_key)
        if entry is None:
            return None
        now_ms = self._cache.now_ms()
        if not entry.is_fresh(now_ms, CACHE_TTL_MS):
            logger.info("Cache expired, fetching fresh data")
            return None
        remaining_minutes = entry.remaining_ms(now_ms, CACHE_TTL_MS) // 60_000
        logger.info("Using cached portfolio data (expires in %d minutes)", remaining_minutes)
        return LoadResult(entry.document, "cache", cached_at_ms=entry.written_at_ms)


@lru_cache(maxsize=1)
def get_portfolio_service() -> PortfolioDataService:
    """Return the process-wide service built from settings."""

    storage = build_storage(cache_backend, cache_path)
    service = PortfolioDataService(
        PortfolioSourceConfig.from_settings(),
        PortfolioCacheStore(storage),
    )
    if not service.is_remote_configured():
        logger.info("PORTFOLIO_API_URL not set; serving the bundled portfolio only")
    return service

