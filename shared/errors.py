"""Application error hierarchy shared across layers."""

from __future__ import annotations


class AppError(Exception):
    """Base exception for application specific errors."""


class NetworkError(AppError):
    """Raised when a transport failure prevents reaching the remote endpoint."""


class HttpError(NetworkError):
    """Raised when the remote endpoint answers with a non-success status."""

    def __init__(self, status_code: int, message: str | None = None) -> None:
        self.status_code = int(status_code)
        super().__init__(message or f"HTTP error {self.status_code}")


class ParseError(AppError):
    """Raised when a response body is not a well-formed portfolio document."""


class CacheUnavailableError(AppError):
    """Raised when the cache storage backend rejects a read or a write."""


class CacheCorruptionError(AppError):
    """Raised when a persisted cache entry cannot be decoded."""


__all__ = [
    "AppError",
    "NetworkError",
    "HttpError",
    "ParseError",
    "CacheUnavailableError",
    "CacheCorruptionError",
]
