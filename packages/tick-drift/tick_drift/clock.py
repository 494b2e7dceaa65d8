"""Clock for the ideal tick schedule."""

from tick_drift.types import MIN_INTERVAL


class Clock:
    def __init__(self, interval: float = MIN_INTERVAL) -> None:
        self._interval = interval
        self._tick_number = 0
        self._start_time = 0.0

    @property
    def interval(self) -> float:
        return self._interval

    @interval.setter
    def interval(self, value: float) -> None:
        self._interval = value

    @property
    def tick_number(self) -> int:
        return self._tick_number

    @property
    def start_time(self) -> float:
        return self._start_time

    @property
    def ideal(self) -> float:
        """Elapsed time since start_time if every tick so far had fired on schedule."""
        return self._interval * self._tick_number

    def advance(self) -> int:
        self._tick_number += 1
        return self._tick_number

    def drift(self, now: float) -> float:
        return (now - self._start_time) - self.ideal

    def reset(self, start_time: float, tick_number: int = 0) -> None:
        self._start_time = start_time
        self._tick_number = tick_number

    def rebase(self, offset: float) -> None:
        """Move the schedule origin forward by ``offset`` ms."""
        self._start_time += offset
