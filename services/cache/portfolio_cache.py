"""Durable, timestamped cache for the portfolio document."""

from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict

from infrastructure.cache.kv_storage import KeyValueStorage
from shared.errors import CacheCorruptionError, CacheUnavailableError

__all__ = [
    "CACHE_KEY",
    "CACHE_TTL_MS",
    "TIMESTAMP_SUFFIX",
    "CacheEntry",
    "PortfolioCacheStore",
    "PortfolioDocument",
]

logger = logging.getLogger(__name__)

PortfolioDocument = Dict[str, Any]

CACHE_KEY = "portfolio_data_cache"
TIMESTAMP_SUFFIX = "_timestamp"
CACHE_TTL_MS = 2 * 60 * 60 * 1000


@dataclass(frozen=True)
class CacheEntry:
    """A cached document together with its write time in epoch milliseconds."""

    document: PortfolioDocument
    written_at_ms: int

    def age_ms(self, now_ms: int) -> int:
        return int(now_ms) - self.written_at_ms

    def remaining_ms(self, now_ms: int, ttl_ms: int = CACHE_TTL_MS) -> int:
        return max(ttl_ms - self.age_ms(now_ms), 0)

    def is_fresh(self, now_ms: int, ttl_ms: int = CACHE_TTL_MS) -> bool:
        return self.age_ms(now_ms) < ttl_ms


class PortfolioCacheStore:
    """Store documents as JSON next to a companion write timestamp.

    Every failure is contained here: unreadable entries behave as misses and
    rejected writes are logged, so callers never see a cache error.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        *,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self._storage = storage
        self._clock = clock or time.time

    @property
    def storage(self) -> KeyValueStorage:
        return self._storage

    @staticmethod
    def timestamp_key(key: str) -> str:
        return f"{key}{TIMESTAMP_SUFFIX}"

    def now_ms(self) -> int:
        return int(self._clock() * 1000)

    def get(self, key: str) -> CacheEntry | None:
        try:
            raw_payload = self._storage.get_item(key)
            raw_timestamp = self._storage.get_item(self.timestamp_key(key))
        except CacheUnavailableError as exc:
            logger.warning("Failed to read cache %s: %s", key, exc)
            return None

        if raw_payload is None or raw_timestamp is None:
            return None

        try:
            return self._decode(raw_payload, raw_timestamp)
        except CacheCorruptionError as exc:
            logger.warning("Ignoring corrupted cache entry %s: %s", key, exc)
            return None

    @staticmethod
    def _decode(raw_payload: str, raw_timestamp: str) -> CacheEntry:
        text = str(raw_timestamp)
        # Plain ASCII digits only: no sign, whitespace or underscores.
        if not (text.isascii() and text.isdigit()):
            raise CacheCorruptionError(f"invalid timestamp {raw_timestamp!r}")
        written_at_ms = int(text)
        try:
            document = json.loads(raw_payload)
        except (ValueError, RecursionError) as exc:
            raise CacheCorruptionError(f"invalid payload: {exc}") from exc
        if not isinstance(document, dict):
            raise CacheCorruptionError(
                f"payload is a {type(document).__name__}, expected an object"
            )
        return CacheEntry(document=document, written_at_ms=written_at_ms)

    def put(self, key: str, document: PortfolioDocument) -> None:
        try:
            payload = json.dumps(document, ensure_ascii=False)
        except (TypeError, ValueError, RecursionError) as exc:
            logger.warning("Failed to cache data, document is not serializable: %s", exc)
            return
        try:
            self._storage.set_item(key, payload)
            self._storage.set_item(self.timestamp_key(key), str(self.now_ms()))
        except CacheUnavailableError as exc:
            logger.warning("Failed to cache data: %s", exc)
            return
        logger.info("Portfolio data cached for %d minutes", CACHE_TTL_MS // 60_000)

    def clear(self, key: str) -> None:
        for name in (key, self.timestamp_key(key)):
            try:
                self._storage.remove_item(name)
            except CacheUnavailableError as exc:
                logger.warning("Failed to remove cache item %s: %s", name, exc)
        logger.info("Cache cleared (%s)", key)
