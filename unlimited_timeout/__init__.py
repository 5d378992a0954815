"""Timers without the 24.8 day ceiling of native millisecond timers."""

from .delay import MAX_SAFE_INTEGER, MAX_TIMEOUT, normalize_delay
from .mini_loop import MiniLoop
from .policy import AsyncioHost, get_host, install, uninstall
from .scheduler import clear_interval, clear_timeout, set_interval, set_timeout
from .timer_handle import BRAND, Interval, Timeout, TimerHandle, is_handle

__all__ = [
    "MAX_TIMEOUT",
    "MAX_SAFE_INTEGER",
    "normalize_delay",
    "set_timeout",
    "clear_timeout",
    "set_interval",
    "clear_interval",
    "Timeout",
    "Interval",
    "TimerHandle",
    "BRAND",
    "is_handle",
    "MiniLoop",
    "AsyncioHost",
    "get_host",
    "install",
    "uninstall",
]
