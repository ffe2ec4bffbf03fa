import threading

from ..domain.validation import require_non_negative, require_positive
from ..ports.clock import Timestamp


class IncrementalClock:
    """Clock that only moves when ticked, by a fixed step.

    Safe to tick from several threads at once: every tick is applied exactly
    once, so N ticks always move the clock by ``N * step``.
    """

    def __init__(self, initial_time: Timestamp = 0, step: int = 1) -> None:
        initial_time = require_non_negative(initial_time, "initial time")
        self._step = require_positive(step, "step")
        self._current = initial_time
        self._lock = threading.Lock()

    @property
    def step(self) -> int:
        return self._step

    def now(self) -> Timestamp:
        return self._current

    def tick(self) -> Timestamp:
        """Advance by one step and return the new time."""
        with self._lock:
            self._current += self._step
            return self._current

    def __repr__(self) -> str:
        return f"IncrementalClock(now={self._current}, step={self._step})"
