"""Fixed-interval periodic triggers driven by the frame loop."""

from __future__ import annotations

from typing import Callable


class IntervalTimer:
    """Calls ``callback`` once for every whole ``interval`` of time fed to it."""

    def __init__(self, interval: float, callback: Callable[[], None]) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.interval = interval
        self._callback = callback
        self._since_last = 0.0
        self.cancelled = False
        self.fired = 0

    def update(self, dt: float) -> int:
        """Advance by ``dt`` seconds. Returns how many times the callback ran.

        A long frame fires the callback several times so no interval is
        skipped. A cancel from inside the callback stops the catch-up run.
        """
        if self.cancelled:
            return 0
        self._since_last += dt
        count = 0
        while not self.cancelled and self._since_last >= self.interval:
            self._since_last -= self.interval
            self._callback()
            self.fired += 1
            count += 1
        return count

    def cancel(self) -> None:
        self.cancelled = True
        self._since_last = 0.0


class TickScheduler:
    """Owns the periodic timers of a session."""

    def __init__(self) -> None:
        self._timers: list[IntervalTimer] = []

    def every(self, interval_ms: float, callback: Callable[[], None]) -> IntervalTimer:
        timer = IntervalTimer(interval_ms / 1000.0, callback)
        self._timers.append(timer)
        return timer

    def advance(self, dt: float) -> None:
        for timer in list(self._timers):
            timer.update(dt)
        self._timers = [t for t in self._timers if not t.cancelled]

    def cancel_all(self) -> None:
        for timer in self._timers:
            timer.cancel()
        self._timers = []

    @property
    def active(self) -> int:
        return sum(1 for t in self._timers if not t.cancelled)
