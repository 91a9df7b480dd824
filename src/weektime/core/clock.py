"""Where ``WeeklyMoment.now`` gets the current instant from.

Library code never calls ``datetime.now()`` directly; it reads an IClock,
so tests can pin the instant with a FixedClock.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone, tzinfo
from typing import Protocol


class IClock(Protocol):
    def now(self) -> datetime:
        """Current instant as a timezone-aware datetime."""
        ...


class WallClock:
    """System time observed in one zone, UTC by default."""

    def __init__(self, tz: tzinfo = timezone.utc) -> None:
        self._tz = tz

    def now(self) -> datetime:
        return datetime.now(self._tz)


class FixedClock:
    """Clock that stands still until moved with :meth:`advance`."""

    def __init__(self, instant: datetime) -> None:
        self._instant = instant

    def now(self) -> datetime:
        return self._instant

    def advance(self, delta: timedelta) -> None:
        self._instant += delta
