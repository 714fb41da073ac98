# planet_dash/game/scheduler.py
from __future__ import annotations
import heapq
import itertools
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple


@dataclass
class TimerHandle:
    """A pending deferred call or fixed-period interval."""
    when: float
    callback: Callable[[], None]
    interval: Optional[float] = None
    cancelled: bool = False
    _seq: int = field(default=0, repr=False)

    def cancel(self) -> None:
        self.cancelled = True


class Scheduler:
    """
    Single-threaded cooperative timer context on a millisecond clock.

    Nothing runs on its own: `advance(ms)` moves the clock forward and runs
    every callback that falls due, in (due time, arm order). Each callback runs
    to completion before the next one starts. The playable loop advances by
    real frame time, the env and the tests by fixed steps.
    """

    def __init__(self, start_ms: float = 0.0):
        self._now = float(start_ms)
        self._queue: List[Tuple[float, int, TimerHandle]] = []
        self._seq = itertools.count()

    def now(self) -> float:
        return self._now

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> TimerHandle:
        if delay_ms < 0:
            raise ValueError(f"delay_ms must be >= 0, got {delay_ms}")
        return self._push(TimerHandle(when=self._now + delay_ms, callback=callback))

    def call_every(self, period_ms: float, callback: Callable[[], None]) -> TimerHandle:
        """First call happens one period from now, like setInterval."""
        if period_ms <= 0:
            raise ValueError(f"period_ms must be > 0, got {period_ms}")
        return self._push(TimerHandle(when=self._now + period_ms, callback=callback,
                                      interval=float(period_ms)))

    def _push(self, handle: TimerHandle) -> TimerHandle:
        handle._seq = next(self._seq)
        heapq.heappush(self._queue, (handle.when, handle._seq, handle))
        return handle

    def advance(self, ms: float) -> int:
        """Run everything due within the next `ms` milliseconds. Returns callbacks run."""
        if ms < 0:
            raise ValueError(f"ms must be >= 0, got {ms}")
        target = self._now + ms
        ran = 0
        while self._queue and self._queue[0][0] <= target:
            when, _, handle = heapq.heappop(self._queue)
            if handle.cancelled:
                continue
            self._now = when
            if handle.interval is not None:
                # re-arm before running so the callback may cancel itself
                handle.when = when + handle.interval
                self._push(handle)
            handle.callback()
            ran += 1
        self._now = target
        return ran

    def pending(self) -> int:
        return sum(1 for _, _, h in self._queue if not h.cancelled)

    def cancel_all(self) -> None:
        for _, _, handle in self._queue:
            handle.cancel()
        self._queue.clear()
