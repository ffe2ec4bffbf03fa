from typing import Protocol, runtime_checkable

Timestamp = int
"""Milliseconds since the Unix epoch. Never negative."""


@runtime_checkable
class Clock(Protocol):
    """Source of the current time.

    Application code depends on this protocol and receives a concrete clock
    by injection: SystemClock in production, a controllable clock in tests.
    Implementations must never return a negative value and never raise.
    """

    def now(self) -> Timestamp:
        ...
