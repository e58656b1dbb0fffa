"""Normalization functions shared by every progress value."""
from __future__ import annotations

import math
from typing import Callable

from tick_progress.types import Normalization


def clamp(value: float, low: float, high: float) -> float:
    # nan falls through both comparisons and is returned unchanged
    if value < low:
        return low
    if value > high:
        return high
    return value


def clamp01(value: float) -> float:
    return clamp(value, 0.0, 1.0)


def smoothstep(t: float) -> float:
    """Cubic Hermite 3t^2 - 2t^3 over the clamped unit interval."""
    t = clamp01(t)
    return t * t * (3.0 - 2.0 * t)


def unlimited(t: float) -> float:
    return t


NORMALIZERS: dict[Normalization, Callable[[float], float]] = {
    Normalization.CLAMP: clamp01,
    Normalization.SMOOTH_CLAMP: smoothstep,
    Normalization.UNLIMITED: unlimited,
}


def ratio(current: float, target: float) -> float:
    """Return current / target with IEEE semantics for a zero target.

    A zero target yields +/-inf for a non-zero current and nan otherwise,
    rather than raising ZeroDivisionError.
    """
    if target == 0:
        if current == 0 or math.isnan(current):
            return math.nan
        return math.copysign(math.inf, current) * math.copysign(1.0, target)
    return current / target


def normalize(current: float, target: float, normalization: Normalization) -> float:
    return NORMALIZERS[normalization](ratio(current, target))


def inverse(progress: float) -> float:
    return 1.0 - progress


def midway(progress: float) -> float:
    """Map progress onto a 0 -> 1 -> 0 triangle peaking at 0.5."""
    half = progress if progress < 0.5 else 1.0 - progress
    return half * 2.0
