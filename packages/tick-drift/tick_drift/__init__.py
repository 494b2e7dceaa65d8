"""tick-drift - A periodic timer that corrects its own drift."""

from tick_drift.clock import Clock
from tick_drift.hosts import AsyncioHost, ManualHost, ThreadingHost
from tick_drift.timer import DriftTimer, clear_timer, set_timer
from tick_drift.types import MIN_INTERVAL, Host, InvalidArgument, TickCallback

__all__ = [
    "DriftTimer",
    "set_timer",
    "clear_timer",
    "Clock",
    "Host",
    "AsyncioHost",
    "ThreadingHost",
    "ManualHost",
    "InvalidArgument",
    "TickCallback",
    "MIN_INTERVAL",
]
