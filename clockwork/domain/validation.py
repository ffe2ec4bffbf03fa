from typing import Any


class InvalidArgument(ValueError):
    """Raised when a clock is constructed or mutated with an invalid value."""


def require(condition: bool, message: str) -> None:
    if not condition:
        raise InvalidArgument(message)


def require_int(value: Any, name: str) -> int:
    # bool is an int subclass but never a meaningful timestamp
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"{name} must be an integer, got {type(value).__name__}")
    return value


def require_non_negative(value: Any, name: str) -> int:
    value = require_int(value, name)
    require(value >= 0, f"{name} must not be negative")
    return value


def require_positive(value: Any, name: str) -> int:
    value = require_int(value, name)
    require(value > 0, f"{name} must be positive")
    return value
