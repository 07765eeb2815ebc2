"""Timezone-aware clock used for footer dates and cache captions."""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo

TIMEZONE = os.getenv("APP_TIMEZONE", "UTC")
TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class TimeSnapshot:
    """A moment and its display text."""

    text: str
    moment: datetime

    def __str__(self) -> str:
        return self.text


class TimeProvider:
    _zone = ZoneInfo(TIMEZONE)

    @classmethod
    def now_datetime(cls) -> datetime:
        return datetime.now(cls._zone)

    @classmethod
    def from_millis(cls, ms: Optional[int | str]) -> Optional[TimeSnapshot]:
        """Format epoch milliseconds in the configured timezone.

        Missing, zero or unparsable values yield ``None``.
        """

        if ms is None:
            return None
        try:
            seconds = int(ms) / 1000.0
        except (TypeError, ValueError):
            return None
        if seconds <= 0:
            return None
        try:
            moment = datetime.fromtimestamp(seconds, tz=cls._zone)
        except (OverflowError, OSError, ValueError):
            return None
        return TimeSnapshot(moment.strftime(TIME_FORMAT), moment)


__all__ = ["TIMEZONE", "TIME_FORMAT", "TimeProvider", "TimeSnapshot"]
