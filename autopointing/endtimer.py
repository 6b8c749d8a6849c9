"""The time at which automatic operation stops."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Optional

SECONDS_PER_UNIT = 36
"""One unit is 36 seconds, so 100 units make an hour."""


def _now(now: Optional[float]) -> int:
    return int(time.time() if now is None else now)


@dataclass
class EndTimer:
    """An end time in seconds since the epoch, or None when unset."""

    end_time: Optional[int] = None

    def set(self, units: int, now: Optional[float] = None) -> int:
        """Set the end to ``now`` plus ``units`` (100 units per hour) and return it."""
        self.end_time = _now(now) + SECONDS_PER_UNIT * units
        return self.end_time

    def shift(self, seconds: int) -> None:
        """Move the end time by ``seconds``; nothing happens while it is unset."""
        if self.end_time is None:
            return
        self.end_time += seconds

    def text(self) -> str:
        """Return the end time as local 'YYYY/MM/DD hh:mm:ss', or '' when unset."""
        if self.end_time is None:
            return ""
        tm = time.localtime(self.end_time)
        return "%d/%02d/%02d %02d:%02d:%02d" % (
            tm.tm_year, tm.tm_mon, tm.tm_mday, tm.tm_hour, tm.tm_min, tm.tm_sec,
        )

    def expired(self, now: Optional[float] = None) -> bool:
        """Return True once ``now`` is past the end time."""
        if self.end_time is None:
            return False
        return self.end_time < _now(now)