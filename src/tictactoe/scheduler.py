"""
Virtual-time scheduler for session timers.

Nothing runs on its own: time only moves when advance() is called, which
fires every due timer in deadline order. Front ends advance it after
sleeping for real; tests advance it directly.
"""

import heapq
import itertools
from typing import Callable, List, Optional, Tuple


class Timer:
    """Handle for a scheduled callback."""

    def __init__(self, when: float, callback: Callable, args: tuple):
        self.when = when
        self._callback = callback
        self._args = args
        self.cancelled = False
        self.fired = False

    @property
    def active(self) -> bool:
        return not (self.cancelled or self.fired)

    def cancel(self):
        self.cancelled = True

    def _run(self):
        self.fired = True
        self._callback(*self._args)


class Scheduler:
    def __init__(self, start: float = 0.0):
        self.now = start
        self._queue: List[Tuple[float, int, Timer]] = []
        self._seq = itertools.count()

    def call_later(self, delay: float, callback: Callable, *args) -> Timer:
        """Schedule callback(*args) to run delay seconds from now."""
        if delay < 0:
            raise ValueError(f"delay must be >= 0, got {delay}")
        timer = Timer(self.now + delay, callback, args)
        heapq.heappush(self._queue, (timer.when, next(self._seq), timer))
        return timer

    def _drop_inactive(self):
        while self._queue and not self._queue[0][2].active:
            heapq.heappop(self._queue)

    def next_deadline(self) -> Optional[float]:
        """Time of the earliest live timer, or None."""
        self._drop_inactive()
        return self._queue[0][0] if self._queue else None

    @property
    def pending(self) -> int:
        return sum(1 for _, _, t in self._queue if t.active)

    def advance(self, seconds: float) -> int:
        """
        Move the clock forward and fire due timers.

        Timers scheduled by a callback are fired too if they fall due
        before the new time.

        Returns:
            Number of callbacks fired
        """
        if seconds < 0:
            raise ValueError(f"Cannot move time backwards ({seconds})")
        target = self.now + seconds
        fired = 0
        while True:
            deadline = self.next_deadline()
            if deadline is None or deadline > target:
                break
            _, _, timer = heapq.heappop(self._queue)
            self.now = timer.when
            timer._run()
            fired += 1
        self.now = target
        return fired
