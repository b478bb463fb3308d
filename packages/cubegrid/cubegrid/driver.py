"""CubeGridDriver - steps the staggered pulse animation over the tile grid."""
from __future__ import annotations

import enum
from typing import Callable, Iterator, Optional

from cubegrid_easing import pulse, resolve_interpolator

from cubegrid.config import DEFAULT_TIMING, PADDING_BANDS, GridOptions, PulseTiming
from cubegrid.delays import max_delay
from cubegrid.layout import build_tiles
from cubegrid.log import get_logger
from cubegrid.types import Cancellable, Renderer, Scheduler, Tile

logger = get_logger(__name__)


class DriverState(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"


class CubeGridDriver:
    """Owns the tiles and the tick loop that animates them.

    Each tick writes every tile's fraction, asks the host to repaint, advances
    ``elapsed`` by one step and schedules the next tick ``step_ms`` later. Once
    ``elapsed`` passes ``total_duration`` the loop ends and the callback's
    ``on_animation_end`` fires.
    """

    def __init__(
        self,
        options: GridOptions,
        scheduler: Scheduler,
        repaint: Optional[Callable[[], None]] = None,
        timing: PulseTiming = DEFAULT_TIMING,
    ) -> None:
        self._tiles = build_tiles(options, timing)
        self._options = options
        self._scheduler = scheduler
        self._repaint = repaint
        self._timing = timing
        self._callback = options.callback
        self._interpolator = resolve_interpolator(options.interpolator)

        if options.loop_count <= 0:
            logger.debug(
                "loop_count %d replaced by default %d",
                options.loop_count, options.resolved_loop_count,
            )
        self._loop_count = options.resolved_loop_count

        bands = max(
            PADDING_BANDS,
            max_delay(options.rows, options.columns, 1),
        )
        self._total = timing.cycle * self._loop_count + timing.delay_unit * bands
        self._elapsed = 0
        self._state = DriverState.IDLE
        self._pending: Optional[Cancellable] = None

    @property
    def tiles(self) -> list[list[Tile]]:
        return self._tiles

    @property
    def timing(self) -> PulseTiming:
        return self._timing

    @property
    def loop_count(self) -> int:
        return self._loop_count

    @property
    def total_duration(self) -> int:
        """``cycle * loops`` plus padding for the latest-starting tile.

        The padding is four delay units, or the top-right tile's delay when a
        grid is larger than four bands corner to corner.
        """
        return self._total

    @property
    def elapsed(self) -> int:
        return self._elapsed

    @property
    def state(self) -> DriverState:
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state is DriverState.RUNNING

    def __iter__(self) -> Iterator[Tile]:
        for row in self._tiles:
            yield from row

    def start(self) -> None:
        """Start, or restart from zero if already running."""
        self._cancel_pending()
        self._elapsed = 0
        self._state = DriverState.RUNNING
        logger.debug(
            "Starting %dx%d grid animation, %d loops, %d units total",
            self._options.rows, self._options.columns, self._loop_count, self._total,
        )
        if self._callback is not None:
            self._callback.on_animation_start()
        self.tick()

    def stop(self) -> None:
        """Cancel the pending tick without firing the end callback."""
        if self._state is DriverState.IDLE:
            return
        self._cancel_pending()
        self._state = DriverState.IDLE
        logger.debug("Stopped at %d of %d units", self._elapsed, self._total)

    def tick(self) -> None:
        """Run one step. Calling it by hand replaces the scheduled tick, never adds one."""
        self._cancel_pending()
        if self._state is not DriverState.RUNNING:
            return
        if self._elapsed <= self._total:
            self.update_fractions(self._elapsed)
            if self._repaint is not None:
                self._repaint()
            self._elapsed += self._timing.step
            self._pending = self._scheduler.call_later(self._timing.step_ms, self.tick)
            return

        self._state = DriverState.IDLE
        logger.debug("Animation finished after %d units", self._elapsed)
        if self._callback is not None:
            self._callback.on_animation_end()

    def update_fractions(self, elapsed: int) -> None:
        cycle = self._timing.cycle
        window = cycle * self._loop_count
        for tile in self:
            effective = elapsed - tile.delay
            if 0 < effective <= window:
                rate = (effective % cycle) / cycle
                tile.fraction = self._interpolator(pulse(rate))
            else:
                tile.fraction = 1.0

    def fractions(self) -> tuple[tuple[float, ...], ...]:
        """Copy of the current fractions, row-major."""
        return tuple(tuple(tile.fraction for tile in row) for row in self._tiles)

    def draw(self, renderer: Renderer) -> None:
        for tile in self:
            tile.draw(renderer)

    def _cancel_pending(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None
