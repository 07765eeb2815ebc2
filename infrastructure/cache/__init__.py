"""Storage backends for the portfolio cache."""

from .kv_storage import (
    FileKeyValueStorage,
    KeyValueStorage,
    MemoryKeyValueStorage,
    SQLiteKeyValueStorage,
    build_storage,
)

__all__ = [
    "KeyValueStorage",
    "MemoryKeyValueStorage",
    "FileKeyValueStorage",
    "SQLiteKeyValueStorage",
    "build_storage",
]
