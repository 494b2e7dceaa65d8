"""DriftTimer - periodic ticks that correct for late host timeouts."""
from __future__ import annotations

import logging
from functools import partial
from typing import Any

from tick_drift.clock import Clock
from tick_drift.hosts import AsyncioHost
from tick_drift.types import MIN_INTERVAL, Host, InvalidArgument, TickCallback, check_number

_log = logging.getLogger(__name__)


class DriftTimer:
    """Repeating timer built from one-shot host timeouts.

    Each tick measures how far the actual elapsed time has drifted from the
    ideal schedule (``start_time + interval * tick_count``) and shortens or
    lengthens the next timeout by that amount. The callback receives the drift
    measured at the end of the previous tick, 0 on the first one.

    The default host is an AsyncioHost bound to the running loop, so a timer
    without an explicit ``host`` has to be started from inside a coroutine or
    loop callback.
    """

    def __init__(
        self,
        on_tick: TickCallback,
        interval: float,
        host: Host | None = None,
        *,
        resync_after: float | None = None,
    ) -> None:
        self._clock = Clock()
        self.set_interval(interval)
        self.set_on_tick(on_tick)
        self._host: Host = host if host is not None else AsyncioHost()
        if resync_after is not None:
            resync_after = check_number("resync_after", resync_after)
            if resync_after < 0:
                raise InvalidArgument("resync_after", resync_after, "a number >= 0")
        self._resync_after = resync_after

        self._handle: Any = None
        self._active = False
        self._drift = 0.0
        self._generation = 0

    @property
    def interval(self) -> float:
        return self._clock.interval

    @property
    def on_tick(self) -> TickCallback:
        return self._on_tick

    @property
    def active(self) -> bool:
        return self._active

    @property
    def start_time(self) -> float:
        return self._clock.start_time

    @property
    def tick_count(self) -> int:
        return self._clock.tick_number

    @property
    def drift(self) -> float:
        """Drift measured at the end of the last tick; passed to the next callback."""
        return self._drift

    @property
    def host(self) -> Host:
        return self._host

    # --- Lifecycle ---

    def start(self) -> DriftTimer:
        now = self._host.now()
        self._cancel_pending()
        self._generation += 1
        self._active = True
        self._drift = 0.0
        self._clock.reset(now)
        _log.debug("timer started at %.3f with interval %s", self._clock.start_time, self.interval)
        self._schedule(self.interval)
        return self

    def stop(self) -> DriftTimer:
        self._active = False
        self._cancel_pending()
        _log.debug("timer stopped after %d ticks", self.tick_count)
        return self

    # --- Configuration ---

    def set_interval(self, ms: float) -> DriftTimer:
        ms = check_number("set_interval", ms)
        if ms < MIN_INTERVAL:
            ms = MIN_INTERVAL
        self._clock.interval = ms
        return self

    def set_on_tick(self, on_tick: TickCallback) -> DriftTimer:
        self._on_tick = on_tick
        return self

    # --- Tick cycle ---

    def _schedule(self, delay: float) -> None:
        _log.debug("next tick in %.3f ms", delay)
        self._handle = self._host.schedule_once(partial(self._fire, self._generation), delay)

    def _cancel_pending(self) -> None:
        if self._handle is not None:
            self._host.cancel(self._handle)
            self._handle = None

    def _fire(self, generation: int) -> None:
        if not self._active or generation != self._generation:
            return
        self._handle = None

        self._on_tick(self._drift)
        # a restart inside the callback has already reset the clock
        if generation != self._generation:
            return

        self._clock.advance()
        self._drift = self._clock.drift(self._host.now())
        if not self._active:
            return
        if self._resync_after is not None and self._drift > self._resync_after:
            self._resync()

        self._schedule(self.interval - self._drift)

    def _resync(self) -> None:
        skipped = int(self._drift // self.interval)
        if skipped <= 0:
            return
        offset = skipped * self.interval
        self._clock.rebase(offset)
        self._drift -= offset
        _log.warning(
            "timer is %d intervals behind schedule, skipping them (drift now %.3f ms)",
            skipped,
            self._drift,
        )


def set_timer(on_tick: TickCallback, interval: float, host: Host | None = None) -> DriftTimer:
    """Create a DriftTimer and start it straight away.

    Without ``host`` the timer uses an AsyncioHost, so this must be called
    from inside a running event loop; otherwise ``asyncio.get_running_loop``
    raises RuntimeError.
    """
    return DriftTimer(on_tick, interval, host).start()


def clear_timer(timer: DriftTimer) -> None:
    timer.stop()
