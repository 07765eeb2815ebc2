"""Cache services for the portfolio document."""

from .portfolio_cache import (
    CACHE_KEY,
    CACHE_TTL_MS,
    CacheEntry,
    PortfolioCacheStore,
    PortfolioDocument,
)

__all__ = [
    "CACHE_KEY",
    "CACHE_TTL_MS",
    "CacheEntry",
    "PortfolioCacheStore",
    "PortfolioDocument",
]
