import asyncio
import logging

logger = logging.getLogger(__name__)

_default_host = None


class AsyncioHost:
    """Expose an asyncio event loop through a millisecond timer interface."""

    def __init__(self, loop: asyncio.AbstractEventLoop):
        self.loop = loop

    def call_later(self, delay: float, callback, *args) -> asyncio.TimerHandle:
        return self.loop.call_later(delay / 1000, callback, *args)

    def time(self) -> float:
        return self.loop.time() * 1000

    def __repr__(self):
        return f"<AsyncioHost loop={self.loop!r}>"


def install(host) -> None:
    """Make *host* the default for timers scheduled without ``host=``."""
    global _default_host
    if isinstance(host, asyncio.AbstractEventLoop):
        host = AsyncioHost(host)
    logger.debug("installing default timer host %r", host)
    _default_host = host


def uninstall() -> None:
    """Go back to scheduling on the running asyncio loop."""
    global _default_host
    _default_host = None


def get_host(host=None):
    """Resolve the host a new timer is scheduled on.

    An explicit *host* wins, then the installed default, then the running
    asyncio loop. Raises RuntimeError when none of these exist.
    """
    if host is None:
        host = _default_host
    if host is None:
        host = asyncio.get_running_loop()
    if isinstance(host, asyncio.AbstractEventLoop):
        host = AsyncioHost(host)
    return host
