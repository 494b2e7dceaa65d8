"""Host scheduling primitives: asyncio, threading and a virtual clock."""
from __future__ import annotations

import asyncio
import heapq
import itertools
import threading
import time
from dataclasses import dataclass, field
from typing import Callable


class AsyncioHost:
    """Schedules callbacks on an asyncio event loop.

    Without an explicit loop, the running loop is looked up on every call, so
    the host can be created outside of a coroutine.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is not None:
            return self._loop
        return asyncio.get_running_loop()

    def schedule_once(self, callback: Callable[[], None], delay: float) -> asyncio.TimerHandle:
        return self.loop.call_later(delay / 1000.0, callback)

    def cancel(self, handle: asyncio.TimerHandle) -> None:
        handle.cancel()

    def now(self) -> float:
        return self.loop.time() * 1000.0


class ThreadingHost:
    """Schedules callbacks on daemon ``threading.Timer`` threads."""

    def schedule_once(self, callback: Callable[[], None], delay: float) -> threading.Timer:
        timer = threading.Timer(max(0.0, delay) / 1000.0, callback)
        timer.daemon = True
        timer.start()
        return timer

    def cancel(self, handle: threading.Timer) -> None:
        handle.cancel()

    def now(self) -> float:
        return time.monotonic() * 1000.0


@dataclass(order=True)
class ScheduledCall:
    due: float
    seq: int
    callback: Callable[[], None] = field(compare=False)
    cancelled: bool = field(default=False, compare=False)


class ManualHost:
    """Virtual millisecond clock; callbacks fire only when the clock is driven."""

    def __init__(self, start: float = 0.0) -> None:
        self._now = start
        self._queue: list[ScheduledCall] = []
        self._seq = itertools.count()

    @property
    def pending(self) -> int:
        return sum(1 for call in self._queue if not call.cancelled)

    def schedule_once(self, callback: Callable[[], None], delay: float) -> ScheduledCall:
        call = ScheduledCall(self._now + max(0.0, delay), next(self._seq), callback)
        heapq.heappush(self._queue, call)
        return call

    def cancel(self, handle: ScheduledCall) -> None:
        handle.cancelled = True

    def now(self) -> float:
        return self._now

    def next_due(self) -> float | None:
        """Due time of the earliest live callback, or None when nothing is pending."""
        self._drop_cancelled()
        if not self._queue:
            return None
        return self._queue[0].due

    def fire_next(self, at: float | None = None) -> bool:
        """Fire the earliest pending callback.

        ``at`` moves the clock to a later time than the due time before
        firing, which is how a late host is simulated. Returns False when
        nothing was pending.
        """
        self._drop_cancelled()
        if not self._queue:
            return False
        call = heapq.heappop(self._queue)
        fire_at = call.due if at is None else max(at, call.due)
        self._now = max(self._now, fire_at)
        call.callback()
        return True

    def advance(self, ms: float) -> int:
        """Move the clock forward by ``ms``, firing everything that comes due.

        Callbacks scheduled while advancing fire too if they fall inside the
        window. Returns the number of callbacks fired.
        """
        target = self._now + ms
        fired = 0
        while True:
            due = self.next_due()
            if due is None or due > target:
                break
            self.fire_next()
            fired += 1
        self._now = max(self._now, target)
        return fired

    def _drop_cancelled(self) -> None:
        while self._queue and self._queue[0].cancelled:
            heapq.heappop(self._queue)
