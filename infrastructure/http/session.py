# infrastructure/http/session.py
from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry


def build_session(user_agent: str, *, retries: int = 0, backoff: float = 0.3) -> requests.Session:
    """Return a ``requests`` session with a fixed User-Agent.

    ``retries`` defaults to zero so every call issues exactly one request.
    Timeouts are passed per request by the caller.
    """
    s = requests.Session()
    s.headers.update({"User-Agent": user_agent})

    retry = Retry(
        total=retries,
        connect=retries,
        read=retries,
        backoff_factor=backoff,
        status_forcelist=[429, 500, 502, 503, 504] if retries else [],
        allowed_methods=["HEAD", "GET", "OPTIONS"],
        raise_on_status=False,
    )
    adapter = HTTPAdapter(max_retries=retry)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    return s
