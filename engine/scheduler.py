"""
scheduler.py — Cancellable Deferred Actions
============================================
Autoplay needs "do this in 1.3 seconds, unless I change my mind".
That is all this module provides.

The scheduler is cooperative: nothing runs on its own.  The host calls
`run_due()` from its event loop (the web app does it on every state
poll), and every action whose deadline has passed fires then, on the
caller's thread.  No threads, no locks.

    sched = TickScheduler()
    action = sched.call_later(2.0, advance)
    ...
    action.cancel()          # never fires
    sched.run_due()          # fires whatever is due now

Tests pass their own `clock` and move time by hand.
"""

import heapq
import itertools
import logging
import time
from typing import Callable, List, Optional, Tuple

log = logging.getLogger(__name__)


class DeferredAction:
    """
    Handle for one scheduled call.

    Attributes:
        due       : Clock time at which the action becomes runnable.
        cancelled : True once cancel() was called.
        done      : True once the action fired.
    """

    __slots__ = ("due", "_fn", "cancelled", "done")

    def __init__(self, due: float, fn: Callable[[], None]):
        self.due:       float              = due
        self._fn:       Callable[[], None] = fn
        self.cancelled: bool               = False
        self.done:      bool               = False

    @property
    def pending(self) -> bool:
        return not (self.cancelled or self.done)

    def cancel(self) -> None:
        self.cancelled = True

    def _fire(self) -> None:
        self.done = True
        self._fn()

    def __repr__(self) -> str:
        state = "cancelled" if self.cancelled else "done" if self.done else "pending"
        return f"DeferredAction(due={self.due:.3f}, {state})"


class TickScheduler:
    """
    Attributes:
        clock : Zero-arg callable returning seconds (time.monotonic by default).
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self.clock = clock
        self._queue: List[Tuple[float, int, DeferredAction]] = []
        self._seq = itertools.count()

    def call_later(self, delay: float, fn: Callable[[], None]) -> DeferredAction:
        """Schedule fn to run `delay` seconds from now."""
        if delay < 0:
            raise ValueError(f"delay must be >= 0, got {delay}")
        action = DeferredAction(self.clock() + delay, fn)
        heapq.heappush(self._queue, (action.due, next(self._seq), action))
        return action

    def run_due(self, now: Optional[float] = None) -> int:
        """
        Fire every pending action whose deadline is <= now.

        Actions scheduled while this pass runs wait for the next pass, even
        with a zero delay.  Returns the number of actions fired.
        """
        if now is None:
            now = self.clock()
        batch: List[DeferredAction] = []
        while self._queue and self._queue[0][0] <= now:
            batch.append(heapq.heappop(self._queue)[2])

        fired = 0
        for action in batch:
            if action.cancelled:
                continue
            action._fire()
            fired += 1
        if fired:
            log.debug("scheduler: fired %d action(s)", fired)
        return fired

    def pending(self) -> int:
        return sum(1 for _, _, a in self._queue if a.pending)

    def next_due(self) -> Optional[float]:
        dues = [a.due for _, _, a in self._queue if a.pending]
        return min(dues) if dues else None

    def cancel_all(self) -> None:
        for _, _, action in self._queue:
            action.cancel()
        self._queue.clear()
