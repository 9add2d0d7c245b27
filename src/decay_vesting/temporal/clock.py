"""Time abstraction for testability."""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod

from decay_vesting.core.utils import TIME_MAX, saturating_add

logger = logging.getLogger(__name__)


def _check_timestamp(value: int, name: str) -> int:
    if not isinstance(value, int):
        raise ValueError(f"{name} must be an integer number of seconds, got {value!r}")
    if value < 0 or value > TIME_MAX:
        raise ValueError(f"{name} must be between 0 and {TIME_MAX}, got {value}")
    return value


class Clock(ABC):
    """Abstract clock interface.

    Readings are whole seconds since an arbitrary epoch.
    """

    @abstractmethod
    def now(self) -> int:
        """Get current time in seconds."""
        ...


class SystemClock(Clock):
    """Real system time, as whole UNIX seconds."""

    def now(self) -> int:
        return int(time.time())


class LogicalClock(Clock):
    """Controllable clock that only moves when told to.

    Share one instance between accounts to advance them in lockstep, or give
    each simulation its own instance to keep them independent.
    """

    def __init__(self, start: int = 0) -> None:
        self._now = _check_timestamp(start, "start")

    def now(self) -> int:
        return self._now

    def advance(self, seconds: int) -> None:
        """Advance time by ``seconds``, saturating at ``TIME_MAX``.

        Args:
            seconds: Non-negative number of seconds to move forward
        """
        if not isinstance(seconds, int) or seconds < 0:
            raise ValueError(f"Cannot advance clock by {seconds!r}")
        if self._now + seconds > TIME_MAX:
            logger.warning("Logical clock saturated at %d", TIME_MAX)
        self._now = saturating_add(self._now, seconds, TIME_MAX)

    def reset(self, timestamp: int) -> None:
        """Set clock to a specific time, possibly in the past.

        Intended for test and simulation setup. Accounts read time moving
        backwards as zero elapsed time.
        """
        self._now = _check_timestamp(timestamp, "timestamp")

    def __repr__(self) -> str:
        return f"LogicalClock(now={self._now})"
