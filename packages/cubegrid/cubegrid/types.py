"""Shared types, protocols and errors for the cube grid."""

from __future__ import annotations

import enum
from typing import Any, Callable, Protocol

Color = tuple[int, int, int]
Rect = tuple[float, float, float, float]


class CornerLocation(enum.Enum):
    NONE = "none"
    TOP_LEFT = "top_left"
    TOP_RIGHT = "top_right"
    BOTTOM_LEFT = "bottom_left"
    BOTTOM_RIGHT = "bottom_right"


class ConfigurationError(ValueError):
    """Raised when grid or timing options cannot produce a valid grid."""


class Cancellable(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Runs an action after a delay on the same thread that draws."""

    def call_later(self, delay_ms: int, action: Callable[[], None]) -> Cancellable: ...


class Renderer(Protocol):
    """Draws one filled tile, optionally rounded on a single corner."""

    def fill_tile(
        self, rect: Rect, color: Color, corner: CornerLocation, corner_size: int
    ) -> None: ...


class AnimationCallback(Protocol):
    def on_animation_start(self) -> None: ...

    def on_animation_end(self) -> None: ...


class Tile:
    """One cell of the grid. ``fraction`` is the current scale about its centre."""

    def __init__(
        self,
        x: int,
        y: int,
        width: int,
        height: int,
        color: Any = (0, 0, 0),
        row: int = 0,
        column: int = 0,
        delay: int = 0,
        corner: CornerLocation = CornerLocation.NONE,
        corner_size: int = 0,
    ) -> None:
        self.x = x
        self.y = y
        self._width = width
        self._height = height
        self.color = color
        self.row = row
        self.column = column
        self.delay = delay
        self.corner = corner
        self.corner_size = corner_size
        self.fraction = 1.0

    def __repr__(self) -> str:
        return (
            f"Tile(row={self.row}, column={self.column}, x={self.x}, y={self.y}, "
            f"width={self._width}, height={self._height}, corner={self.corner.name}, "
            f"fraction={self.fraction:.3f})"
        )

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def scaled_rect(self) -> Rect:
        w = self._width * self.fraction
        h = self._height * self.fraction
        cx = self.x + self._width / 2
        cy = self.y + self._height / 2
        return (cx - w / 2, cy - h / 2, w, h)

    def draw(self, renderer: Renderer) -> None:
        renderer.fill_tile(self.scaled_rect(), self.color, self.corner, self.corner_size)
