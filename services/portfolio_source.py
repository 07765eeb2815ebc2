"""Retrieval strategies for the portfolio document: remote HTTP and bundled fallback."""
from __future__ import annotations

import logging
from typing import Any, Dict

import requests

from data.loaders import load_fallback_portfolio
from infrastructure.http.session import build_session
from shared.errors import HttpError, NetworkError, ParseError
from shared.settings import portfolio_api_timeout, user_agent

logger = logging.getLogger(__name__)

PortfolioDocument = Dict[str, Any]

ACCEPT_HEADERS = {"Accept": "application/json"}


class RemotePortfolioSource:
    """Fetch the portfolio document from a JSON endpoint.

    Each call issues exactly one ``GET`` request; retries and fallbacks are the
    caller's decision.
    """

    def __init__(
        self,
        *,
        session: requests.Session | None = None,
        timeout: float | None = None,
        user_agent: str | None = None,
    ) -> None:
        self._timeout = timeout if timeout is not None else portfolio_api_timeout
        self._user_agent = user_agent
        self._session = session

    def _get_session(self) -> requests.Session:
        if self._session is None:
            self._session = build_session(self._user_agent or user_agent)
        return self._session

    def fetch_remote(self, url: str) -> PortfolioDocument:
        """Return the document served at ``url``.

        Raises :class:`NetworkError` on transport failures, :class:`HttpError`
        on non-2xx responses and :class:`ParseError` when the body is not a
        JSON object.
        """

        logger.info("Fetching fresh portfolio data from %s", url)
        try:
            response = self._get_session().get(url, headers=ACCEPT_HEADERS, timeout=self._timeout)
        except requests.RequestException as exc:
            raise NetworkError(f"Request to {url} failed: {exc}") from exc

        status = int(response.status_code)
        if not 200 <= status < 300:
            raise HttpError(status, f"HTTP error! status: {status}")

        try:
            payload = response.json()
        except (ValueError, RecursionError) as exc:
            raise ParseError(f"Response from {url} is not valid JSON") from exc
        if not isinstance(payload, dict):
            raise ParseError(
                f"Response from {url} is a JSON {type(payload).__name__}, expected an object"
            )
        logger.info("Portfolio data loaded from remote endpoint")
        return payload


def fetch_fallback() -> PortfolioDocument:
    """Return the bundled portfolio document. Never fails."""

    return load_fallback_portfolio()


__all__ = ["ACCEPT_HEADERS", "RemotePortfolioSource", "fetch_fallback"]
