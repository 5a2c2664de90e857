"""Deferred actions keyed to wall-clock deadlines.

Nothing runs in the background: the owner calls :meth:`Scheduler.advance`
with the current time and every action whose deadline has passed fires in
deadline order. A cancelled handle never fires.
"""

import heapq
import itertools
from typing import Callable, List


class TimerHandle:
    __slots__ = ("deadline", "callback", "cancelled")

    def __init__(self, deadline: int, callback: Callable[[], None]):
        self.deadline = deadline
        self.callback = callback
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class Scheduler:
    def __init__(self, now: int = 0):
        self.now = now
        self._queue: List[tuple] = []
        self._seq = itertools.count()

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> TimerHandle:
        handle = TimerHandle(self.now + delay_ms, callback)
        heapq.heappush(self._queue, (handle.deadline, next(self._seq), handle))
        return handle

    def advance(self, now: int) -> int:
        """Move the clock to ``now`` and run everything due; returns the count fired."""
        self.now = max(self.now, now)
        fired = 0
        while self._queue and self._queue[0][0] <= self.now:
            _, _, handle = heapq.heappop(self._queue)
            if handle.cancelled:
                continue
            handle.cancelled = True
            handle.callback()
            fired += 1
        return fired

    def __len__(self):
        return sum(1 for _, _, h in self._queue if not h.cancelled)
