"""Scheduler implementations for press-and-hold repeat timers.

The spin button never sleeps or spawns work itself. It asks a Scheduler to
run a callback after a delay and keeps the returned handle so it can cancel
it. Three schedulers are provided:

- VirtualScheduler: Deterministic virtual clock advanced by the caller.
  Used by tests and simulations; callbacks run on the caller's thread
  inside advance().
- AsyncioScheduler: Wraps loop.call_later() for asyncio-based hosts.
- ThreadingScheduler: Wraps threading.Timer for hosts without an event
  loop. Callbacks run on timer threads; SpinButton serializes them with
  its own lock.

All delays are in milliseconds.

Python 3.13+.
"""

from __future__ import annotations

import asyncio
import heapq
import itertools
import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .types import StepCallback, TimerHandle

__all__ = ["AsyncioScheduler", "ThreadingScheduler", "VirtualScheduler"]


_COMPACT_MIN_SIZE = 64


def _check_delay(delay_ms: float) -> None:
    if delay_ms < 0:
        msg = f"delay_ms must be non-negative, got {delay_ms}"
        raise ValueError(msg)


@dataclass(slots=True)
class _VirtualTimer:
    """Entry in the virtual queue. Cancelled entries are skipped lazily."""

    due: float
    callback: StepCallback
    cancelled: bool = False
    fired: bool = False

    def cancel(self) -> None:
        self.cancelled = True


class VirtualScheduler:
    """Scheduler driven by an explicit virtual clock.

    Time only moves when advance() is called. Callbacks due within the
    advanced span run in due-time order (ties in scheduling order), with
    ``now`` set to each callback's due time while it runs, so callbacks that
    re-arm themselves are timed from their own fire time.

    Example:
        >>> scheduler = VirtualScheduler()
        >>> calls = []
        >>> _ = scheduler.schedule(100, lambda: calls.append(scheduler.now))
        >>> scheduler.advance(99)
        >>> calls
        []
        >>> scheduler.advance(1)
        >>> calls
        [100.0]
    """

    __slots__ = ("_compact_at", "_counter", "_now", "_queue")

    def __init__(self, start_ms: float = 0.0) -> None:
        """Initialize scheduler.

        Args:
            start_ms: Initial value of the virtual clock
        """
        self._now = float(start_ms)
        self._queue: list[tuple[float, int, _VirtualTimer]] = []
        self._counter = itertools.count()
        self._compact_at = _COMPACT_MIN_SIZE

    @property
    def now(self) -> float:
        """Current virtual time in milliseconds."""
        return self._now

    @property
    def pending(self) -> int:
        """Number of scheduled callbacks that have neither fired nor been cancelled."""
        return sum(1 for _, _, timer in self._queue if not timer.cancelled)

    def schedule(self, delay_ms: float, callback: StepCallback) -> TimerHandle:
        """Run callback once when the clock reaches now + delay_ms.

        Raises:
            ValueError: If delay_ms is negative
        """
        _check_delay(delay_ms)
        self._discard_cancelled()
        timer = _VirtualTimer(due=self._now + delay_ms, callback=callback)
        heapq.heappush(self._queue, (timer.due, next(self._counter), timer))
        return timer

    def _discard_cancelled(self) -> None:
        """Drop cancelled entries so press/release churn cannot grow the queue.

        Cancelled heads are popped on every call. The whole heap is rebuilt
        once it has doubled in size since the last rebuild.
        """
        while self._queue and self._queue[0][2].cancelled:
            heapq.heappop(self._queue)
        if len(self._queue) < self._compact_at:
            return
        self._queue = [entry for entry in self._queue if not entry[2].cancelled]
        heapq.heapify(self._queue)
        self._compact_at = max(_COMPACT_MIN_SIZE, 2 * len(self._queue))

    def advance(self, delta_ms: float) -> None:
        """Move the clock forward, running every callback that falls due.

        Raises:
            ValueError: If delta_ms is negative
        """
        _check_delay(delta_ms)
        target = self._now + delta_ms
        while self._queue and self._queue[0][0] <= target:
            due, _, timer = heapq.heappop(self._queue)
            if timer.cancelled:
                continue
            self._now = due
            timer.fired = True
            timer.callback()
        self._now = target

    def run_until_idle(self, max_callbacks: int = 10_000) -> None:
        """Run callbacks in due order until none are pending.

        Args:
            max_callbacks: Upper bound on callbacks to run

        Raises:
            RuntimeError: If callbacks are still pending after max_callbacks
                runs (e.g., a press that is never released keeps re-arming)
        """
        for _ in range(max_callbacks):
            while self._queue and self._queue[0][2].cancelled:
                heapq.heappop(self._queue)
            if not self._queue:
                return
            self.advance(self._queue[0][0] - self._now)
        msg = f"Scheduler still busy after {max_callbacks} callbacks"
        raise RuntimeError(msg)


class AsyncioScheduler:
    """Scheduler backed by an asyncio event loop.

    asyncio.TimerHandle already provides cancel(), so it is returned as is.
    """

    __slots__ = ("_loop",)

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        """Initialize scheduler.

        Args:
            loop: Event loop to schedule on. If None, the running loop is
                looked up at each schedule() call.
        """
        self._loop = loop

    def schedule(self, delay_ms: float, callback: StepCallback) -> TimerHandle:
        """Run callback on the loop after delay_ms.

        Raises:
            ValueError: If delay_ms is negative
            RuntimeError: If no loop was given and none is running
        """
        _check_delay(delay_ms)
        loop = self._loop if self._loop is not None else asyncio.get_running_loop()
        return loop.call_later(delay_ms / 1000, callback)


class ThreadingScheduler:
    """Scheduler backed by daemon threading.Timer threads.

    Thread Safety:
        Callbacks run on timer threads. A timer cancelled while its callback
        is already starting may still invoke it; SpinButton tolerates this by
        discarding fires that belong to a cancelled generation.
    """

    __slots__ = ()

    def schedule(self, delay_ms: float, callback: StepCallback) -> TimerHandle:
        """Run callback on a new daemon thread after delay_ms.

        Raises:
            ValueError: If delay_ms is negative
        """
        _check_delay(delay_ms)
        timer = threading.Timer(delay_ms / 1000, callback)
        timer.daemon = True
        timer.start()
        return timer
