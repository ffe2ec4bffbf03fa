import time

from ..domain.validation import require_non_negative
from ..ports.clock import Timestamp


class SystemClock:
    """Production clock reading the host wall clock in epoch milliseconds."""

    def now(self) -> Timestamp:
        return time.time_ns() // 1_000_000

    def __repr__(self) -> str:
        return "SystemClock()"


class FixedClock:
    """Deterministic clock for tests. Always returns the same value."""

    __slots__ = ("_time",)

    def __init__(self, time: Timestamp = 0) -> None:
        self._time = require_non_negative(time, "time")

    @property
    def time(self) -> Timestamp:
        return self._time

    def now(self) -> Timestamp:
        return self._time

    def __repr__(self) -> str:
        return f"FixedClock(time={self._time})"
