from collections import deque
import heapq
import itertools
import time


class Timer:
    """Timer returned by ``MiniLoop.call_later``."""

    def __init__(self, loop, when, callback, args):
        self._loop = loop
        self.when = when
        self._callback = callback
        self._args = args
        self._cancelled = False
        self._ref = True

    def cancel(self):
        if not self._cancelled:
            self._cancelled = True
            if self._ref:
                self._loop._refs -= 1

    def cancelled(self):
        return self._cancelled

    def ref(self):
        if not self._ref and not self._cancelled:
            self._loop._refs += 1
        self._ref = True
        return self

    def unref(self):
        if self._ref and not self._cancelled:
            self._loop._refs -= 1
        self._ref = False
        return self

    def has_ref(self):
        return self._ref

    def _run(self):
        # A fired timer no longer holds the loop open.
        self.cancel()
        self._callback(*self._args)

    def __repr__(self):
        state = " cancelled" if self._cancelled else ""
        return f"<Timer when={self.when}{state}>"


class MiniLoop:
    """A minimal event loop with a millisecond clock.

    With ``virtual=True`` the clock starts at 0 and jumps straight to the
    next timer instead of sleeping.
    """

    def __init__(self, virtual=False):
        # Queue for ready-to-run callbacks
        self.ready = deque()
        # Timers managed as a min-heap of (when, seq, timer) tuples
        self.timers = []
        self._seq = itertools.count()
        self._refs = 0
        self._stopping = False
        self._virtual = virtual
        self._now = 0.0

    def time(self):
        """Current loop time in milliseconds."""
        if self._virtual:
            return self._now
        return time.monotonic() * 1000

    def _sleep_until(self, when):
        if self._virtual:
            self._now = max(self._now, when)
            return
        delay = when - self.time()
        if delay > 0:
            time.sleep(delay / 1000)

    def call_soon(self, callback, *args):
        """Schedule a callback to be run on the next loop iteration."""
        self.ready.append((callback, args))

    def call_later(self, delay, callback, *args):
        """Schedule a callback to be run after ``delay`` milliseconds."""
        timer = Timer(self, self.time() + delay, callback, args)
        heapq.heappush(self.timers, (timer.when, next(self._seq), timer))
        self._refs += 1
        return timer

    def stop(self):
        self._stopping = True

    def _alive(self):
        return bool(self.ready) or self._refs > 0

    def _next_timer(self):
        while self.timers and self.timers[0][2].cancelled():
            heapq.heappop(self.timers)
        return self.timers[0][2] if self.timers else None

    def _run_once(self, limit=None):
        if not self.ready:
            timer = self._next_timer()
            if timer is None or (limit is not None and timer.when > limit):
                return False
            heapq.heappop(self.timers)
            self._sleep_until(timer.when)
            self.ready.append((timer._run, ()))

        callback, args = self.ready.popleft()
        callback(*args)
        return True

    def run(self):
        """Run callbacks and timers until nothing referenced remains.

        Exceptions raised by a callback propagate; calling ``run`` again
        resumes with the remaining work.
        """
        self._stopping = False
        while self._alive() and not self._stopping:
            if not self._run_once():
                break

    def run_until(self, deadline):
        """Run everything due up to ``deadline`` and move the clock there."""
        self._stopping = False
        while not self._stopping and self._run_once(limit=deadline):
            pass
        if not self._stopping:
            self._sleep_until(deadline)
