"""Animation callback that turns driver start/end into lifecycle events."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Optional

from cubegrid_signal.bus import LifecycleBus
from cubegrid_signal.events import Lifecycle, LifecycleEvent

if TYPE_CHECKING:
    from cubegrid import CubeGridDriver


class SignalCallback:
    """``AnimationCallback`` that publishes to a :class:`LifecycleBus`.

    The callback goes into ``GridOptions`` before the driver exists, so the
    driver is attached afterwards with :meth:`bind` to stamp events with its
    elapsed time.
    """

    def __init__(self, bus: LifecycleBus, grid: str = "grid") -> None:
        self._bus = bus
        self._grid = grid
        self._run = 0
        self._driver: Optional[CubeGridDriver] = None

    @property
    def grid(self) -> str:
        return self._grid

    @property
    def run(self) -> int:
        return self._run

    def bind(self, driver: CubeGridDriver) -> CubeGridDriver:
        self._driver = driver
        return driver

    def on_animation_start(self) -> None:
        self._run += 1
        self._publish(Lifecycle.START)

    def on_animation_end(self) -> None:
        self._publish(Lifecycle.END)

    def _publish(self, kind: Lifecycle) -> None:
        elapsed = self._driver.elapsed if self._driver is not None else None
        self._bus.publish(LifecycleEvent(kind, self._grid, self._run, elapsed))


def make_flush_repaint(
    bus: LifecycleBus, repaint: Optional[Callable[[], None]] = None
) -> Callable[[], None]:
    """Repaint trigger that delivers pending lifecycle events after each repaint."""

    def flush_repaint() -> None:
        if repaint is not None:
            repaint()
        bus.flush()

    return flush_repaint
