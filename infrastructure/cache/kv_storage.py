"""String key-value storage backends used by the portfolio cache.

Backends only move strings around: serialization, timestamps and freshness are
handled by :mod:`services.cache.portfolio_cache`. Every I/O failure surfaces as
:class:`shared.errors.CacheUnavailableError`.
"""

from __future__ import annotations

import logging
import os
import re
import sqlite3
import tempfile
from contextlib import closing
from pathlib import Path
from threading import Lock
from typing import Dict, Protocol

from shared.errors import CacheUnavailableError
from shared.settings import DEFAULT_FILE_CACHE_PATH, DEFAULT_SQLITE_CACHE_PATH

logger = logging.getLogger(__name__)

_SAFE_NAME = re.compile(r"[^A-Za-z0-9_.-]")


class KeyValueStorage(Protocol):
    """Durable string storage addressed by name."""

    def get_item(self, name: str) -> str | None:
        """Return the stored value or ``None`` when absent."""

    def set_item(self, name: str, value: str) -> None:
        """Store ``value`` under ``name``, replacing any previous value."""

    def remove_item(self, name: str) -> None:
        """Delete ``name``. Removing a missing name is a no-op."""


class MemoryKeyValueStorage:
    """Process-local storage, lost on restart."""

    def __init__(self, initial: Dict[str, str] | None = None) -> None:
        self._lock = Lock()
        self._items: Dict[str, str] = dict(initial or {})

    def get_item(self, name: str) -> str | None:
        with self._lock:
            return self._items.get(name)

    def set_item(self, name: str, value: str) -> None:
        with self._lock:
            self._items[name] = str(value)

    def remove_item(self, name: str) -> None:
        with self._lock:
            self._items.pop(name, None)

    def keys(self) -> list[str]:
        with self._lock:
            return sorted(self._items)


class FileKeyValueStorage:
    """Persist each item as a UTF-8 file inside ``directory``."""

    def __init__(self, directory: Path | str) -> None:
        self._directory = Path(directory)

    @property
    def directory(self) -> Path:
        return self._directory

    def _path_for(self, name: str) -> Path:
        safe = _SAFE_NAME.sub("_", str(name)) or "_"
        return self._directory / safe

    def get_item(self, name: str) -> str | None:
        path = self._path_for(name)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as exc:
            raise CacheUnavailableError(f"Cannot read cache item {name!r}: {exc}") from exc

    def set_item(self, name: str, value: str) -> None:
        path = self._path_for(name)
        tmp_name: str | None = None
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self._directory, prefix=".tmp-", suffix=path.name)
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(str(value))
            os.replace(tmp_name, path)
            tmp_name = None
        except OSError as exc:
            raise CacheUnavailableError(f"Cannot write cache item {name!r}: {exc}") from exc
        finally:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError:
                    logger.debug("Could not remove temporary file %s", tmp_name, exc_info=True)

    def remove_item(self, name: str) -> None:
        path = self._path_for(name)
        try:
            path.unlink()
        except FileNotFoundError:
            return
        except OSError as exc:
            raise CacheUnavailableError(f"Cannot remove cache item {name!r}: {exc}") from exc


class SQLiteKeyValueStorage:
    """Persist items in a single-table SQLite database."""

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)
        self._lock = Lock()
        self._initialised = False

    def database_path(self) -> Path:
        """Return the on-disk path for the SQLite database."""

        return self._path

    def _ensure(self) -> None:
        if self._initialised:
            return
        with self._lock:
            if self._initialised:
                return
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with closing(sqlite3.connect(self._path)) as conn, conn:
                conn.execute("CREATE TABLE IF NOT EXISTS kv (name TEXT PRIMARY KEY, value TEXT NOT NULL)")
            self._initialised = True

    def _connection(self) -> sqlite3.Connection:
        self._ensure()
        conn = sqlite3.connect(self._path)
        conn.execute("PRAGMA journal_mode=WAL")
        return conn

    def get_item(self, name: str) -> str | None:
        try:
            conn = self._connection()
            try:
                row = conn.execute("SELECT value FROM kv WHERE name = ?", (name,)).fetchone()
            finally:
                conn.close()
        except (OSError, sqlite3.Error) as exc:
            raise CacheUnavailableError(f"Cannot read cache item {name!r}: {exc}") from exc
        if row is None:
            return None
        return row[0]

    def set_item(self, name: str, value: str) -> None:
        try:
            conn = self._connection()
            try:
                with conn:
                    conn.execute(
                        "INSERT OR REPLACE INTO kv(name, value) VALUES(?, ?)",
                        (name, str(value)),
                    )
            finally:
                conn.close()
        except (OSError, sqlite3.Error) as exc:
            raise CacheUnavailableError(f"Cannot write cache item {name!r}: {exc}") from exc

    def remove_item(self, name: str) -> None:
        if not self._initialised and not self._path.exists():
            return
        try:
            conn = self._connection()
            try:
                with conn:
                    conn.execute("DELETE FROM kv WHERE name = ?", (name,))
            finally:
                conn.close()
        except (OSError, sqlite3.Error) as exc:
            raise CacheUnavailableError(f"Cannot remove cache item {name!r}: {exc}") from exc


def build_storage(backend: str | None, path: str | os.PathLike[str] | None = None) -> KeyValueStorage:
    """Return the storage backend named by ``backend``.

    Unknown names fall back to memory storage so the page keeps working.
    """

    backend_name = (backend or "").strip().lower() or "file"
    if backend_name == "memory":
        logger.info("Portfolio cache configured in memory mode (no persistence)")
        return MemoryKeyValueStorage()
    if backend_name == "file":
        directory = Path(os.fspath(path or DEFAULT_FILE_CACHE_PATH))
        logger.info("Portfolio cache persisted to directory %s", directory)
        return FileKeyValueStorage(directory)
    if backend_name == "sqlite":
        db_path = Path(os.fspath(path or DEFAULT_SQLITE_CACHE_PATH))
        logger.info("Portfolio cache persisted to SQLite database %s", db_path)
        return SQLiteKeyValueStorage(db_path)
    logger.warning("Unknown cache backend '%s'; using in-memory storage", backend_name)
    return MemoryKeyValueStorage()


__all__ = [
    "KeyValueStorage",
    "MemoryKeyValueStorage",
    "FileKeyValueStorage",
    "SQLiteKeyValueStorage",
    "build_storage",
]
