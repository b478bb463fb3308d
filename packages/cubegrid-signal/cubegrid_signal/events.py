"""Lifecycle event types published for a running grid."""
from __future__ import annotations

import enum
from dataclasses import dataclass


class Lifecycle(enum.Enum):
    START = "animation_start"
    END = "animation_end"


@dataclass(frozen=True)
class LifecycleEvent:
    """One start or end of a grid's animation.

    ``run`` counts starts for the grid, so a restart while running opens run
    ``n + 1`` and run ``n`` never receives an END. ``elapsed`` is the driver's
    elapsed time when the event was raised, or None if no driver is bound.
    """

    kind: Lifecycle
    grid: str
    run: int
    elapsed: int | None = None

    @property
    def is_start(self) -> bool:
        return self.kind is Lifecycle.START
