"""Clock - single-threaded millisecond timer queue the driver schedules its ticks on."""
from __future__ import annotations

import heapq
import time
from typing import Callable


class TimerHandle:
    """Pending action returned by ``Clock.call_later``."""

    def __init__(self, due: int, action: Callable[[], None]) -> None:
        self._due = due
        self._action = action
        self._cancelled = False

    @property
    def due(self) -> int:
        return self._due

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True

    def _run(self) -> None:
        self._action()


class Clock:
    """Virtual time in milliseconds. Nothing runs until the clock is advanced.

    Actions due at the same time run in the order they were scheduled.
    """

    def __init__(self) -> None:
        self._now = 0
        self._counter = 0
        self._queue: list[tuple[int, int, TimerHandle]] = []

    @property
    def now(self) -> int:
        return self._now

    @property
    def pending(self) -> int:
        return sum(1 for _, _, handle in self._queue if not handle.cancelled)

    def call_later(self, delay_ms: int, action: Callable[[], None]) -> TimerHandle:
        if delay_ms < 0:
            raise ValueError(f"delay_ms must be non-negative, got {delay_ms}")
        handle = TimerHandle(self._now + delay_ms, action)
        heapq.heappush(self._queue, (handle.due, self._counter, handle))
        self._counter += 1
        return handle

    def _pop_due(self, until: int) -> TimerHandle | None:
        while self._queue and self._queue[0][0] <= until:
            _, _, handle = heapq.heappop(self._queue)
            if not handle.cancelled:
                return handle
        return None

    def _next_due(self) -> int | None:
        while self._queue and self._queue[0][2].cancelled:
            heapq.heappop(self._queue)
        if not self._queue:
            return None
        return self._queue[0][0]

    def advance(self, ms: int) -> int:
        """Move time forward by ``ms``, running everything that falls due.

        Returns the number of actions run.
        """
        if ms < 0:
            raise ValueError(f"ms must be non-negative, got {ms}")
        target = self._now + ms
        ran = 0
        handle = self._pop_due(target)
        while handle is not None:
            self._now = handle.due
            handle._run()
            ran += 1
            handle = self._pop_due(target)
        self._now = target
        return ran

    def step(self) -> bool:
        """Jump to the next pending action and run it. False when idle."""
        due = self._next_due()
        if due is None:
            return False
        handle = self._pop_due(due)
        if handle is None:
            return False
        self._now = handle.due
        handle._run()
        return True

    def run_until_idle(self, max_steps: int | None = None) -> int:
        steps = 0
        while max_steps is None or steps < max_steps:
            if not self.step():
                break
            steps += 1
        return steps

    def run_forever(self) -> None:
        """Run pending actions in wall-clock time until none are left."""
        origin = time.monotonic() - self._now / 1000.0
        while True:
            due = self._next_due()
            if due is None:
                break
            sleep_time = origin + due / 1000.0 - time.monotonic()
            if sleep_time > 0:
                time.sleep(sleep_time)
            self.step()
