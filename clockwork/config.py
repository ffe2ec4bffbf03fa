import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import tomllib

from . import clocks
from .domain.validation import InvalidArgument
from .infrastructure.logging import get_logger
from .ports.clock import Clock

logger = get_logger(__name__)

CLOCK_KINDS = ("system", "fixed", "incremental", "manual")


@dataclass(frozen=True)
class ClockSettings:
    kind: str = "system"
    initial_time: int = 0
    step: int = 1


def load_settings(settings_path: Path = Path("config/settings.toml")) -> ClockSettings:
    """Load clock configuration from environment with optional config file defaults."""

    file_settings = _load_file_settings(settings_path)

    kind = _config_value("CLOCK_KIND", file_settings, "clock", "kind", "system").strip().lower()
    if kind not in CLOCK_KINDS:
        raise InvalidArgument(f"clock kind must be one of {', '.join(CLOCK_KINDS)}, got {kind!r}")

    return ClockSettings(
        kind=kind,
        initial_time=_int_value(
            _config_value("CLOCK_INITIAL_TIME", file_settings, "clock", "initial_time", "0"), "initial_time"
        ),
        step=_int_value(_config_value("CLOCK_STEP", file_settings, "clock", "step", "1"), "step"),
    )


def _load_file_settings(settings_path: Path) -> Dict[str, Any]:
    if not settings_path.exists():
        return {}

    with settings_path.open("rb") as settings_file:
        return tomllib.load(settings_file)


def _config_value(
    env_key: str, settings: Dict[str, Any], section: str, key: str, default: str
) -> str:
    if env_key in os.environ:
        return os.environ[env_key]

    section_data = settings.get(section, {})
    return str(section_data.get(key, default))


def _int_value(raw: str, name: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise InvalidArgument(f"{name} must be an integer, got {raw!r}") from None


def build_clock(settings: Optional[ClockSettings] = None) -> Clock:
    """Construct the configured clock for wiring in main.py."""

    if settings is None:
        settings = load_settings()

    if settings.kind == "fixed":
        clock: Clock = clocks.fixed(settings.initial_time)
    elif settings.kind == "incremental":
        clock = clocks.incremental(settings.initial_time, settings.step)
    elif settings.kind == "manual":
        clock = clocks.manual(settings.initial_time)
    else:
        clock = clocks.system

    logger.info("clock_built", kind=settings.kind, clock=repr(clock))
    return clock
