"""cubegrid-easing - Pulse easing and interpolator curves for the cube grid."""
from __future__ import annotations

from cubegrid_easing.easing import (
    INTERPOLATORS,
    Interpolator,
    accelerate,
    accelerate_decelerate,
    decelerate,
    linear,
    pulse,
    resolve_interpolator,
)

__all__ = [
    "INTERPOLATORS",
    "Interpolator",
    "accelerate",
    "accelerate_decelerate",
    "decelerate",
    "linear",
    "pulse",
    "resolve_interpolator",
]
