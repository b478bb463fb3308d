"""Grid and timing options."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, Union

from cubegrid.types import AnimationCallback, Color, ConfigurationError

# Animation units in one shrink/grow/hold cycle.
ANIM_CYCLE = 1300
# Animation units advanced per tick.
ANIM_STEP = 20
# Milliseconds between ticks.
ANIM_STEP_MS = 20
# Stagger between diagonal bands, in animation units.
ANIM_DELAY = 100
# Bands covered by the fixed duration padding (the 3x3 grid's widest delay).
PADDING_BANDS = 4

DEFAULT_LOOP_COUNT = 50
DEFAULT_FILL_COLOR: Color = (0x33, 0x33, 0x33)


@dataclass(frozen=True)
class PulseTiming:
    cycle: int = ANIM_CYCLE
    step: int = ANIM_STEP
    step_ms: int = ANIM_STEP_MS
    delay_unit: int = ANIM_DELAY

    def validate(self) -> None:
        for name in ("cycle", "step", "step_ms"):
            value = getattr(self, name)
            if value <= 0:
                raise ConfigurationError(f"{name} must be positive, got {value}")
        if self.delay_unit < 0:
            raise ConfigurationError(
                f"delay_unit must be non-negative, got {self.delay_unit}"
            )


DEFAULT_TIMING = PulseTiming()


@dataclass(frozen=True)
class GridOptions:
    """Everything the layout builder and driver read from the host.

    ``interpolator`` is a registry name or a ``float -> float`` callable;
    ``None`` selects the decelerate curve.
    """

    total_width: int
    total_height: int
    rows: int
    columns: int
    corner_size: int = 0
    fill_color: Any = DEFAULT_FILL_COLOR
    loop_count: int = DEFAULT_LOOP_COUNT
    callback: Optional[AnimationCallback] = None
    interpolator: Union[str, Callable[[float], float], None] = None

    def validate(self) -> None:
        for name in ("rows", "columns", "total_width", "total_height"):
            value = getattr(self, name)
            if value <= 0:
                raise ConfigurationError(f"{name} must be positive, got {value}")
        if self.tile_width == 0 or self.tile_height == 0:
            raise ConfigurationError(
                f"{self.total_width}x{self.total_height} px is too small for "
                f"{self.rows}x{self.columns} tiles"
            )
        if self.corner_size < 0:
            raise ConfigurationError(
                f"corner_size must be non-negative, got {self.corner_size}"
            )

    @property
    def resolved_loop_count(self) -> int:
        if self.loop_count > 0:
            return self.loop_count
        return DEFAULT_LOOP_COUNT

    @property
    def tile_width(self) -> int:
        return self.total_width // self.columns

    @property
    def tile_height(self) -> int:
        return self.total_height // self.rows
