from __future__ import annotations

import heapq
import itertools
import logging
import threading
from typing import Callable, List, Optional, Tuple

log = logging.getLogger("cardflip.scheduler")

Callback = Callable[[], None]


class TimerHandle:
    """A scheduled callback that can be cancelled until it runs."""

    def __init__(self, delay_ms: float, callback: Callback):
        self.delay_ms = delay_ms
        self.callback = callback
        self.cancelled = False
        self.fired = False
        self._timer: Optional[threading.Timer] = None

    @property
    def active(self) -> bool:
        return not (self.cancelled or self.fired)

    def cancel(self) -> None:
        self.cancelled = True
        if self._timer is not None:
            self._timer.cancel()

    def _run(self) -> None:
        if not self.active:
            return
        self.fired = True
        self.callback()


class ThreadingScheduler:
    """Runs each callback on a daemon threading.Timer after a real-time delay."""

    def schedule(self, delay_ms: float, callback: Callback) -> TimerHandle:
        handle = TimerHandle(delay_ms, callback)
        timer = threading.Timer(delay_ms / 1000.0, handle._run)
        timer.daemon = True
        handle._timer = timer
        timer.start()
        log.debug("scheduled callback in %.0f ms", delay_ms)
        return handle


class ManualScheduler:
    """
    Virtual monotonic clock. Nothing runs until advance() moves time forward;
    callbacks then run in due order on the caller's thread.
    """

    def __init__(self) -> None:
        self.now_ms: float = 0.0
        self._queue: List[Tuple[float, int, TimerHandle]] = []
        self._seq = itertools.count()

    def schedule(self, delay_ms: float, callback: Callback) -> TimerHandle:
        handle = TimerHandle(delay_ms, callback)
        heapq.heappush(self._queue, (self.now_ms + delay_ms, next(self._seq), handle))
        return handle

    def pending(self) -> int:
        return sum(1 for _, _, h in self._queue if h.active)

    def next_delay(self) -> Optional[float]:
        """Milliseconds until the next active callback is due, or None."""
        due = [t for t, _, h in self._queue if h.active]
        if not due:
            return None
        return max(0.0, min(due) - self.now_ms)

    def advance(self, ms: float) -> int:
        """Moves the clock forward and runs every callback due by then. Returns how many ran."""
        target = self.now_ms + ms
        ran = 0
        while self._queue and self._queue[0][0] <= target:
            due, _, handle = heapq.heappop(self._queue)
            self.now_ms = max(self.now_ms, due)
            if handle.active:
                handle._run()
                ran += 1
        self.now_ms = target
        return ran
