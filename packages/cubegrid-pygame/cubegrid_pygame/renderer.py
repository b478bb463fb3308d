"""pygame renderer for cube grid tiles."""
from __future__ import annotations

import pygame

from cubegrid.types import Color, CornerLocation, Rect

_CORNER_KWARG = {
    CornerLocation.TOP_LEFT: "border_top_left_radius",
    CornerLocation.TOP_RIGHT: "border_top_right_radius",
    CornerLocation.BOTTOM_LEFT: "border_bottom_left_radius",
    CornerLocation.BOTTOM_RIGHT: "border_bottom_right_radius",
}


def to_pygame_rect(rect: Rect) -> pygame.Rect:
    x, y, w, h = rect
    return pygame.Rect(round(x), round(y), round(w), round(h))


class PygameRenderer:
    """Fills tiles onto a surface, offset by ``origin``.

    The decorated corner's radius shrinks with the tile so it never exceeds
    half the scaled side.
    """

    def __init__(self, surface: pygame.Surface, origin: tuple[int, int] = (0, 0)) -> None:
        self.surface = surface
        self.origin = origin

    def fill_tile(
        self, rect: Rect, color: Color, corner: CornerLocation, corner_size: int
    ) -> None:
        target = to_pygame_rect(rect).move(self.origin)
        if target.width <= 0 or target.height <= 0:
            return

        kwargs = {}
        kwarg = _CORNER_KWARG.get(corner)
        if kwarg is not None and corner_size > 0:
            kwargs[kwarg] = min(corner_size, target.width // 2, target.height // 2)
        pygame.draw.rect(self.surface, color, target, **kwargs)
