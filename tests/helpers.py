from unlimited_timeout.mini_loop import MiniLoop


class RecordingLoop(MiniLoop):
    """Virtual-clock loop that records every delay it is asked to wait."""

    def __init__(self):
        super().__init__(virtual=True)
        self.delays = []

    def call_later(self, delay, callback, *args):
        self.delays.append(delay)
        return super().call_later(delay, callback, *args)


class ManualTimer:
    def __init__(self, delay, callback, args):
        self.delay = delay
        self.callback = callback
        self.args = args
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class ManualHost:
    """Host whose timers only fire when the test says so, at a chosen time."""

    def __init__(self):
        self.now = 0.0
        self.pending = []

    def time(self):
        return self.now

    def call_later(self, delay, callback, *args):
        timer = ManualTimer(delay, callback, args)
        self.pending.append(timer)
        return timer

    def fire(self, at):
        timer = self.pending.pop(0)
        self.now = at
        timer.callback(*timer.args)
        return timer
