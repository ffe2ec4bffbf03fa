from clockwork.config import build_clock, load_settings
from clockwork.infrastructure.incremental import IncrementalClock
from clockwork.infrastructure.logging import get_logger
from clockwork.infrastructure.manual import ManualClock
from clockwork.ports.clock import Clock

logger = get_logger(__name__)


def run(readings: int = 3) -> None:
    settings = load_settings()
    clock: Clock = build_clock(settings)

    for index in range(readings):
        logger.info("clock_reading", index=index, now=clock.now())
        if isinstance(clock, IncrementalClock):
            clock.tick()
        elif isinstance(clock, ManualClock):
            clock.advance(settings.step)


if __name__ == "__main__":
    run()
