"""Queued delivery of lifecycle events from the tick loop to the host."""
from __future__ import annotations

from typing import Callable

from cubegrid.log import get_logger

from cubegrid_signal.events import Lifecycle, LifecycleEvent

LifecycleHandler = Callable[[LifecycleEvent], None]

logger = get_logger(__name__)


class LifecycleBus:
    """Events raised inside a tick wait here until the host calls ``flush``.

    Handlers are keyed by :class:`Lifecycle` kind. The bus also remembers the
    last delivered event per grid, which is what a status display wants.
    """

    def __init__(self) -> None:
        self._handlers: dict[Lifecycle, list[LifecycleHandler]] = {kind: [] for kind in Lifecycle}
        self._queue: list[LifecycleEvent] = []
        self._last: dict[str, LifecycleEvent] = {}

    @property
    def pending(self) -> int:
        return len(self._queue)

    def subscribe(self, kind: Lifecycle, handler: LifecycleHandler) -> None:
        self._handlers[kind].append(handler)

    def unsubscribe(self, kind: Lifecycle, handler: LifecycleHandler) -> None:
        handlers = self._handlers[kind]
        if handler in handlers:
            handlers.remove(handler)

    def on(self, kind: Lifecycle) -> Callable[[LifecycleHandler], LifecycleHandler]:
        """Decorator form of :meth:`subscribe`."""

        def register(handler: LifecycleHandler) -> LifecycleHandler:
            self.subscribe(kind, handler)
            return handler

        return register

    def publish(self, event: LifecycleEvent) -> None:
        self._queue.append(event)

    def flush(self) -> list[LifecycleEvent]:
        """Deliver queued events in publish order and return them.

        Events published by a handler wait for the next flush.
        """
        batch, self._queue = self._queue, []
        for event in batch:
            previous = self._last.get(event.grid)
            if event.is_start and previous is not None and previous.is_start:
                logger.debug("Grid %s run %d restarted as run %d", event.grid, previous.run, event.run)
            self._last[event.grid] = event
            for handler in list(self._handlers[event.kind]):
                handler(event)
        return batch

    def last_event(self, grid: str) -> LifecycleEvent | None:
        return self._last.get(grid)

    def is_running(self, grid: str) -> bool:
        """True when the last delivered event for ``grid`` was a start.

        A driver stopped by hand raises no END, so this stays True for it
        until the next start or :meth:`forget`.
        """
        last = self._last.get(grid)
        return last is not None and last.is_start

    def forget(self, grid: str) -> None:
        self._last.pop(grid, None)

    def clear(self) -> None:
        self._queue.clear()
