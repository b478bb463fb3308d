"""Cube Grid Demo - the staggered pulse loader in a pygame window.

Exercises cubegrid, cubegrid-easing, cubegrid-signal and cubegrid-pygame.

Controls:
  Space   Start (or restart) the animation
  S       Stop without finishing
  1-4     Select interpolator; applies on the next start
  Esc     Quit
"""
from __future__ import annotations

import sys

import pygame

from cubegrid import Clock, CubeGridDriver, GridOptions
from cubegrid_pygame import PygameRenderer
from cubegrid_signal import (
    Lifecycle,
    LifecycleBus,
    LifecycleEvent,
    SignalCallback,
    make_flush_repaint,
)

from ui.constants import (
    BG_COLOR,
    CORNER_SIZE,
    FPS,
    GRID_COLUMNS,
    GRID_NAME,
    GRID_ROWS,
    GRID_SIZE,
    INTERPOLATOR_NAMES,
    LOOP_COUNT,
    PAD,
    SCREEN_H,
    SCREEN_W,
    TILE_COLOR,
)
from ui.status import draw_status_bar


class DemoState:
    """Holds the clock, bus and driver for the window."""

    def __init__(self) -> None:
        self.clock = Clock()
        self.bus = LifecycleBus()
        self.interpolator = INTERPOLATOR_NAMES[0]
        self.finished = 0
        self.ticks = 0
        self.bus.subscribe(Lifecycle.END, self._on_end)
        self.driver = self._build_driver()

    def _build_driver(self) -> CubeGridDriver:
        callback = SignalCallback(self.bus, grid=GRID_NAME)
        options = GridOptions(
            total_width=GRID_SIZE,
            total_height=GRID_SIZE,
            rows=GRID_ROWS,
            columns=GRID_COLUMNS,
            corner_size=CORNER_SIZE,
            fill_color=TILE_COLOR,
            loop_count=LOOP_COUNT,
            callback=callback,
            interpolator=self.interpolator,
        )
        # The window redraws every frame; the trigger only counts ticks.
        repaint = make_flush_repaint(self.bus, self._count_tick)
        return callback.bind(CubeGridDriver(options, self.clock, repaint=repaint))

    def _count_tick(self) -> None:
        self.ticks += 1

    def _on_end(self, event: LifecycleEvent) -> None:
        self.finished += 1

    def start(self) -> None:
        self.driver.stop()
        self.driver = self._build_driver()
        self.ticks = 0
        self.driver.start()

    def stop(self) -> None:
        self.driver.stop()
        self.bus.forget(GRID_NAME)

    def select(self, index: int) -> None:
        self.interpolator = INTERPOLATOR_NAMES[index]


def main() -> None:
    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Cube Grid - cubegrid demo")
    frame_clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)

    state = DemoState()
    renderer = PygameRenderer(screen, origin=(PAD, PAD))
    state.start()

    running = True
    while running:
        dt_ms = frame_clock.tick(FPS)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    state.start()
                elif event.key == pygame.K_s:
                    state.stop()
                elif event.key == pygame.K_1:
                    state.select(0)
                elif event.key == pygame.K_2:
                    state.select(1)
                elif event.key == pygame.K_3:
                    state.select(2)
                elif event.key == pygame.K_4:
                    state.select(3)

        # --- Tick ---
        state.clock.advance(dt_ms)
        # The ending tick does not repaint, so its event is delivered here.
        state.bus.flush()

        # --- Render ---
        screen.fill(BG_COLOR)
        state.driver.draw(renderer)
        draw_status_bar(
            screen,
            font,
            running=state.bus.is_running(GRID_NAME),
            elapsed=state.driver.elapsed,
            total=state.driver.total_duration,
            interpolator=state.interpolator,
            finished=state.finished,
            ticks=state.ticks,
        )

        pygame.display.flip()

    state.driver.stop()
    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
