"""Entry points for obtaining clocks.

``system`` is the clock production code should be wired with. The factories
return the concrete types so tests keep access to ``tick``, ``advance`` and
``set_time``::

    clock = clocks.manual(1_000)
    clock.advance(500)
    assert clock.now() == 1_500
"""

from .infrastructure.clock import FixedClock, SystemClock
from .infrastructure.incremental import IncrementalClock
from .infrastructure.manual import ManualClock
from .ports.clock import Timestamp

system = SystemClock()


def fixed(time: Timestamp = 0) -> FixedClock:
    """Clock that always reports ``time``."""
    return FixedClock(time)


def incremental(initial_time: Timestamp = 0, step: int = 1) -> IncrementalClock:
    """Clock starting at ``initial_time`` that moves ``step`` ms per tick()."""
    return IncrementalClock(initial_time, step)


def manual(initial_time: Timestamp = 0) -> ManualClock:
    """Clock starting at ``initial_time`` that moves only via set_time()/advance()."""
    return ManualClock(initial_time)
