"""Common test utilities shared across the suite."""

from __future__ import annotations

from typing import Dict, List, Tuple

from infrastructure.cache.kv_storage import MemoryKeyValueStorage
from shared.errors import CacheUnavailableError


class RecordingStorage(MemoryKeyValueStorage):
    """Memory storage that records every operation."""

    def __init__(self, initial: Dict[str, str] | None = None) -> None:
        super().__init__(initial)
        self.operations: List[Tuple[str, str]] = []

    def get_item(self, name: str) -> str | None:
        self.operations.append(("get", name))
        return super().get_item(name)

    def set_item(self, name: str, value: str) -> None:
        self.operations.append(("set", name))
        super().set_item(name, value)

    def remove_item(self, name: str) -> None:
        self.operations.append(("remove", name))
        super().remove_item(name)


class FailingStorage:
    """Storage whose every operation is rejected, like a full or locked disk."""

    def __init__(self) -> None:
        self.attempts = 0

    def _fail(self, name: str) -> None:
        self.attempts += 1
        raise CacheUnavailableError(f"storage unavailable for {name}")

    def get_item(self, name: str) -> str | None:
        self._fail(name)
        return None

    def set_item(self, name: str, value: str) -> None:
        self._fail(name)

    def remove_item(self, name: str) -> None:
        self._fail(name)
