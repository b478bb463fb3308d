"""cubegrid - Staggered pulse animation over a grid of tiles."""

from cubegrid.clock import Clock, TimerHandle
from cubegrid.config import DEFAULT_TIMING, GridOptions, PulseTiming
from cubegrid.delays import REFERENCE_DELAYS, delay_for, delay_table
from cubegrid.driver import CubeGridDriver, DriverState
from cubegrid.layout import build_tiles, classify_corner
from cubegrid.types import (
    AnimationCallback,
    ConfigurationError,
    CornerLocation,
    Renderer,
    Scheduler,
    Tile,
)

__all__ = [
    "AnimationCallback",
    "Clock",
    "ConfigurationError",
    "CornerLocation",
    "CubeGridDriver",
    "DEFAULT_TIMING",
    "DriverState",
    "GridOptions",
    "PulseTiming",
    "REFERENCE_DELAYS",
    "Renderer",
    "Scheduler",
    "Tile",
    "TimerHandle",
    "build_tiles",
    "classify_corner",
    "delay_for",
    "delay_table",
]
