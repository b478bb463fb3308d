"""Pulse easing and interpolator curves for the cube grid animation."""
from __future__ import annotations

import math
from typing import Callable, Union

Interpolator = Callable[[float], float]

SHRINK_END = 0.35
GROW_END = 0.7


def pulse(rate: float) -> float:
    """Map cycle progress to a tile scale: shrink, grow back, then hold.

    0..0.35 goes 1 -> 0, 0.35..0.7 goes 0 -> 1, the rest of the cycle stays at 1.
    """
    if rate <= SHRINK_END:
        return 1 - rate / SHRINK_END
    if rate <= GROW_END:
        return (rate - SHRINK_END) / SHRINK_END
    return 1.0


def linear(t: float) -> float:
    return t


def decelerate(factor: float = 1.0) -> Interpolator:
    """Return an ease-out curve; rate of change falls off as t approaches 1."""

    def curve(t: float) -> float:
        if factor == 1.0:
            return 1 - (1 - t) * (1 - t)
        return 1 - (1 - t) ** (2 * factor)

    return curve


def accelerate(factor: float = 1.0) -> Interpolator:
    def curve(t: float) -> float:
        if factor == 1.0:
            return t * t
        return t ** (2 * factor)

    return curve


def accelerate_decelerate(t: float) -> float:
    return math.cos((t + 1) * math.pi) / 2 + 0.5


INTERPOLATORS: dict[str, Interpolator] = {
    "linear": linear,
    "decelerate": decelerate(),
    "accelerate": accelerate(),
    "accelerate_decelerate": accelerate_decelerate,
}

DEFAULT_INTERPOLATOR = "decelerate"


def resolve_interpolator(curve: Union[str, Interpolator, None]) -> Interpolator:
    """Turn None, a registry name, or a callable into an interpolator.

    Unknown names raise KeyError. Callables are returned as-is and their
    output is never clamped.
    """
    if curve is None:
        return INTERPOLATORS[DEFAULT_INTERPOLATOR]
    if isinstance(curve, str):
        try:
            return INTERPOLATORS[curve]
        except KeyError:
            raise KeyError(
                f"Unknown interpolator {curve!r}, expected one of {sorted(INTERPOLATORS)}"
            ) from None
    return curve
