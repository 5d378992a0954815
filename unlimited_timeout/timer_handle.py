import logging
from typing import Any, Optional

logger = logging.getLogger(__name__)

# Handles are recognised by this attribute name rather than by class, so a
# handle created by a second, independently imported copy of the package is
# still accepted by this copy's clear functions.
BRAND = "__unlimited_timeout_brand__"


def is_handle(obj: Any) -> bool:
    """Return True if *obj* is a timer handle from any copy of this package."""
    if obj is None:
        return False
    try:
        return getattr(obj, BRAND, False) is True
    except Exception:
        return False


def _apply(ref: Any, directive: str) -> None:
    method = getattr(ref, directive, None)
    if callable(method):
        method()


class TimerHandle:
    """Handle returned by set_timeout/set_interval to allow cancellation.

    ``id`` holds the host timer backing the current chunk, or None when no
    host timer exists.
    """

    def __init__(self):
        setattr(self, BRAND, True)
        self.id: Optional[Any] = None
        self.cleared = False
        self._unref = False

    def ref(self):
        """Keep the host loop alive while this timer is pending."""
        self._unref = False
        if self.id is not None:
            _apply(self.id, "ref")
        return self

    def unref(self):
        """Let the host loop exit even though this timer is pending."""
        self._unref = True
        if self.id is not None:
            _apply(self.id, "unref")
        return self

    def has_ref(self) -> bool:
        return not self._unref

    def _attach(self, ref: Any) -> None:
        # Every chunk gets a fresh host timer; carry the unref over to it.
        self.id = ref
        if self._unref:
            _apply(ref, "unref")

    def cancel(self) -> None:
        """Same as passing the handle to clear_timeout or clear_interval."""
        clear(self)

    def __repr__(self):
        state = "cleared" if self.cleared else "pending"
        return f"<{type(self).__name__} {state} id={self.id!r}>"


class Timeout(TimerHandle):
    """Handle for a one-shot timer."""


class Interval(TimerHandle):
    """Handle for a repeating timer."""


def clear(handle: Any) -> None:
    """Mark *handle* cleared and cancel its host timer.

    Anything that is not a handle is ignored, and clearing twice is harmless.
    Only attributes shared by every copy of the package are touched.
    """
    if not is_handle(handle):
        return
    handle.cleared = True
    ref = handle.id
    if ref is not None:
        logger.debug("cancelling host timer %r", ref)
        ref.cancel()
        handle.id = None
