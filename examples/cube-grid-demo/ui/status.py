"""Bottom status bar."""
from __future__ import annotations

import pygame

from ui.constants import SCREEN_H, SCREEN_W, STATUS_BG, STATUS_H, TEXT_COLOR, TEXT_DIM


def draw_status_bar(
    surface: pygame.Surface,
    font: pygame.font.Font,
    running: bool,
    elapsed: int,
    total: int,
    interpolator: str,
    finished: int,
    ticks: int,
) -> None:
    """Draw progress, current interpolator and key hints."""
    y = SCREEN_H - STATUS_H
    pygame.draw.rect(surface, STATUS_BG, (0, y, SCREEN_W, STATUS_H))

    state = f"{min(elapsed, total)}/{total}" if running else "idle"
    left = font.render(f"{state}  {interpolator}  runs: {finished}  ticks: {ticks}", True, TEXT_COLOR)
    surface.blit(left, (8, y + 4))

    hints = font.render("Space start  S stop  1-4 curve  Esc quit", True, TEXT_DIM)
    surface.blit(hints, (8, y + 4 + left.get_height()))
