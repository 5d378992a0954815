"""Chunked scheduling of timers longer than the host allows.

A delay above ``MAX_TIMEOUT`` is covered by a chain of host timers of at
most ``MAX_TIMEOUT`` each. Only one host timer per handle is live at a time;
the next one is armed when the previous one fires. At every chunk boundary
the remaining delay is recomputed from a fixed target time, so late chunks
do not push the deadline back.
"""

import logging
from typing import Any, Callable

from .delay import MAX_TIMEOUT, is_infinite, normalize_delay
from .policy import get_host
from .timer_handle import Interval, Timeout, TimerHandle, clear

logger = logging.getLogger(__name__)


class _Chain:
    """State shared by the chunks of one timer."""

    def __init__(self, host, handle: TimerHandle, delay: float, callback, args):
        self.host = host
        self.handle = handle
        self.delay = delay
        self.callback = callback
        self.args = args
        self.target = host.time() + delay

    def remaining(self) -> float:
        return max(0.0, self.target - self.host.time())

    def schedule(self, remaining: float) -> None:
        if self.handle.cleared:
            return
        if remaining <= MAX_TIMEOUT:
            ref = self.host.call_later(remaining, self._fire)
        else:
            logger.debug(
                "%r: %.0fms left, arming %dms chunk", self.handle, remaining, MAX_TIMEOUT
            )
            ref = self.host.call_later(MAX_TIMEOUT, self._rollover)
        self.handle._attach(ref)

    def _rollover(self) -> None:
        self.schedule(self.remaining())

    def _fire(self) -> None:
        if not self.handle.cleared:
            self.callback(*self.args)


class _RepeatingChain(_Chain):
    def _fire(self) -> None:
        if self.handle.cleared:
            return
        # Arm the next tick before running user code so a raising
        # callback cannot end the interval.
        self.target += self.delay
        self.schedule(self.remaining())
        self.callback(*self.args)


def _start(chain_cls, handle, callback, delay, args, host):
    if not callable(callback):
        raise TypeError("Expected callback to be callable")

    delay = normalize_delay(delay)
    if is_infinite(delay):
        logger.debug("%r: infinite delay, never scheduled", handle)
        return handle

    chain = chain_cls(get_host(host), handle, delay, callback, args)
    chain.schedule(delay)
    return handle


def set_timeout(
    callback: Callable[..., Any], delay: Any = None, *args: Any, host=None
) -> Timeout:
    """Call ``callback(*args)`` once after ``delay`` milliseconds.

    ``delay`` is coerced like a native timer delay: ``None``, NaN and
    negative values mean 0, infinity (or anything past ``MAX_SAFE_INTEGER``)
    means never. Delays above ``MAX_TIMEOUT`` are split into chunks.

    ``host`` is an asyncio loop or any object with ``call_later`` and
    ``time`` in milliseconds; see ``policy.get_host`` for the default.
    """
    return _start(_Chain, Timeout(), callback, delay, args, host)


def set_interval(
    callback: Callable[..., Any], delay: Any = None, *args: Any, host=None
) -> Interval:
    """Call ``callback(*args)`` every ``delay`` milliseconds.

    Ticks are kept on a fixed schedule measured from the first call. The
    next tick is armed before the callback runs, so an exception from the
    callback does not stop the interval.
    """
    return _start(_RepeatingChain, Interval(), callback, delay, args, host)


def clear_timeout(timeout) -> None:
    """Cancel a timer created by set_timeout. Ignores anything else."""
    clear(timeout)


def clear_interval(interval) -> None:
    """Cancel a timer created by set_interval. Ignores anything else."""
    clear(interval)
