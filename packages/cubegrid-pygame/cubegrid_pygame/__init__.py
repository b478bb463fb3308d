"""cubegrid-pygame - Draw the cube grid onto a pygame surface."""
from __future__ import annotations

from cubegrid_pygame.renderer import PygameRenderer, to_pygame_rect

__all__ = ["PygameRenderer", "to_pygame_rect"]
