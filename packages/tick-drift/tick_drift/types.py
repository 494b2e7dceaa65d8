"""Shared constants, errors and protocols for the drift-correcting timer."""

from __future__ import annotations

import decimal
import math
import numbers
from typing import Any, Callable, Protocol

MIN_INTERVAL = 10

TickCallback = Callable[[float], None]


class InvalidArgument(ValueError):
    """Raised when a timer option is not a finite real number."""

    def __init__(self, name: str, value: Any, expected: str = "a number") -> None:
        self.name = name
        self.value = value
        super().__init__(f"{name} requires {expected}, got {value!r}")


class Host(Protocol):
    """Scheduling primitives supplied by the environment. All times are in ms."""

    def schedule_once(self, callback: Callable[[], None], delay: float) -> Any: ...

    def cancel(self, handle: Any) -> None: ...

    def now(self) -> float: ...


def check_number(name: str, value: Any) -> float:
    """Return ``value`` as a float if it is a finite real number, else raise InvalidArgument."""
    if isinstance(value, bool) or not isinstance(value, (numbers.Real, decimal.Decimal)):
        raise InvalidArgument(name, value)
    if isinstance(value, decimal.Decimal) and not value.is_finite():
        raise InvalidArgument(name, value)
    if math.isnan(value) or math.isinf(value):
        raise InvalidArgument(name, value)
    return float(value)
