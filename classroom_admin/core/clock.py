"""Clock abstraction used for timestamps and archive labels."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol


class Clock(Protocol):
    def now(self) -> datetime: ...


class SystemClock:
    """Wall clock returning aware datetimes in the local zone."""

    def now(self) -> datetime:
        return datetime.now().astimezone()
