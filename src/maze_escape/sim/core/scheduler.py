"""Virtual-clock scheduler for delayed, cancellable one-shot callbacks.

The battle uses it to pace the enemy's automatic turn and the exit back to
the maze.  Nothing here sleeps: time only moves when the owner calls
:meth:`Scheduler.advance`, so tests can step through a battle without
real wall-clock delays.
"""

from __future__ import annotations

import heapq
from typing import Callable


# ---------------------------------------------------------------------------
# TimerHandle
# ---------------------------------------------------------------------------

class TimerHandle:
    """A pending callback returned by :meth:`Scheduler.schedule`."""

    def __init__(
        self,
        due_ms: int,
        callback: Callable[[], None],
        label: str = "",
    ) -> None:
        self.due_ms = due_ms
        self.callback = callback
        self.label = label
        self.cancelled = False
        self.fired = False

    @property
    def active(self) -> bool:
        return not (self.cancelled or self.fired)

    def cancel(self) -> bool:
        """Prevent the callback from firing.

        Returns ``False`` if it already fired or was already cancelled.
        """
        if not self.active:
            return False
        self.cancelled = True
        return True

    def __repr__(self) -> str:
        state = "cancelled" if self.cancelled else "fired" if self.fired else "pending"
        return f"TimerHandle(label={self.label!r}, due_ms={self.due_ms}, {state})"


# ---------------------------------------------------------------------------
# Scheduler
# ---------------------------------------------------------------------------

class Scheduler:
    """Min-heap of timers keyed by due time, then by scheduling order.

    Timers fire only from :meth:`advance` and :meth:`run_until_idle`.
    """

    def __init__(self) -> None:
        self._now_ms = 0
        self._seq = 0
        self._heap: list[tuple[int, int, TimerHandle]] = []

    # -- queries -------------------------------------------------------------

    @property
    def now_ms(self) -> int:
        return self._now_ms

    @property
    def pending(self) -> int:
        """Number of timers that will still fire."""
        return sum(1 for _, _, handle in self._heap if handle.active)

    @property
    def next_due_ms(self) -> int | None:
        self._drop_inactive_head()
        if not self._heap:
            return None
        return self._heap[0][0]

    # -- mutations -----------------------------------------------------------

    def schedule(
        self,
        delay_ms: int,
        callback: Callable[[], None],
        label: str = "",
    ) -> TimerHandle:
        """Run *callback* once, *delay_ms* after the current time."""
        if delay_ms < 0:
            raise ValueError(f"delay_ms must be >= 0, got {delay_ms}")
        handle = TimerHandle(self._now_ms + delay_ms, callback, label)
        heapq.heappush(self._heap, (handle.due_ms, self._seq, handle))
        self._seq += 1
        return handle

    def advance(self, ms: int) -> int:
        """Move the clock forward by *ms*, firing every timer that falls due.

        Callbacks scheduled while advancing also fire if their due time is
        inside the window.  Returns the number of callbacks fired.
        """
        if ms < 0:
            raise ValueError(f"Cannot advance by a negative amount, got {ms}")
        target = self._now_ms + ms
        fired = 0
        while self._heap and self._heap[0][0] <= target:
            due_ms, _, handle = heapq.heappop(self._heap)
            if not handle.active:
                continue
            self._now_ms = due_ms
            handle.fired = True
            handle.callback()
            fired += 1
        self._now_ms = target
        return fired

    def run_until_idle(self, max_callbacks: int = 10_000) -> int:
        """Advance the clock timer by timer until nothing is pending.

        *max_callbacks* bounds runaway chains of self-rescheduling timers.
        """
        fired = 0
        while fired < max_callbacks:
            due = self.next_due_ms
            if due is None:
                break
            fired += self.advance(due - self._now_ms)
        return fired

    def cancel_all(self) -> None:
        """Cancel every pending timer."""
        for _, _, handle in self._heap:
            handle.cancel()
        self._heap.clear()

    # -- internal helpers ----------------------------------------------------

    def _drop_inactive_head(self) -> None:
        while self._heap and not self._heap[0][2].active:
            heapq.heappop(self._heap)

    def __repr__(self) -> str:
        return f"Scheduler(now_ms={self._now_ms}, pending={self.pending})"
