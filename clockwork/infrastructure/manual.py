import threading

from ..domain.validation import InvalidArgument, require_int, require_non_negative
from ..ports.clock import Timestamp
from .logging import get_logger

logger = get_logger(__name__)


class ManualClock:
    """Clock under full control of the test.

    Time can jump to any later instant with ``set_time`` or move forward by an
    arbitrary amount with ``advance``. It never moves backwards: a ``set_time``
    that would land behind the current value is rejected, even when another
    thread advanced the clock in the meantime.
    """

    def __init__(self, initial_time: Timestamp = 0) -> None:
        self._current = require_non_negative(initial_time, "initial time")
        self._lock = threading.Lock()

    def now(self) -> Timestamp:
        return self._current

    def advance(self, delta: int) -> Timestamp:
        """Move forward by ``delta`` milliseconds and return the new time."""
        delta = require_int(delta, "delta")
        if delta < 0:
            logger.debug("clock_advance_rejected", current=self._current, delta=delta)
            raise InvalidArgument("delta must not be negative")
        with self._lock:
            self._current += delta
            return self._current

    def set_time(self, new_time: Timestamp) -> Timestamp:
        """Jump to ``new_time`` and return it.

        Raises InvalidArgument, leaving the clock untouched, if ``new_time`` is
        before the current time at the moment of the update.
        """
        new_time = require_int(new_time, "new time")
        with self._lock:
            current = self._current
            accepted = new_time >= current
            if accepted:
                self._current = new_time
        if not accepted:
            logger.debug("clock_set_time_rejected", current=current, new_time=new_time)
            raise InvalidArgument("new time must not be before current time")
        return new_time

    def __repr__(self) -> str:
        return f"ManualClock(now={self._current})"
