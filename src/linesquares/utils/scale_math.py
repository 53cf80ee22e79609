"""Scalar helpers shared by the progress update path and the geometry mapping."""
from __future__ import annotations

import math

from linesquares.constants import SCALE_DIVISOR, SCALE_GAP


def inverse(n: int) -> float:
    return 1.0 / n


def scale_factor(scale: float) -> float:
    """Step index of ``scale``: 0 below the divisor, 1 above it."""
    return float(math.floor(scale / SCALE_DIVISOR))


def max_scale(scale: float, i: int, n: int) -> float:
    return max(0.0, scale - i * inverse(n))


def divide_scale(scale: float, i: int, n: int) -> float:
    """Local progress in [0, 1] of segment ``i`` out of ``n`` for a global ``scale``.

    Segments fill in order as ``scale`` rises: segment ``i`` is 0 while
    ``scale <= i / n`` and saturates at 1 once ``scale >= (i + 1) / n``.
    """
    return min(inverse(n), max_scale(scale, i, n)) * n


def mirror_value(scale: float, a: int, b: int) -> float:
    """Blend of the reciprocal rates ``1/a`` and ``1/b`` keyed on the step index."""
    k = scale_factor(scale)
    return (1 - k) * inverse(a) + k * inverse(b)


def update_value(scale: float, direction: float, a: int, b: int) -> float:
    """Delta applied to ``scale`` for one frame in ``direction``."""
    return mirror_value(scale, a, b) * direction * SCALE_GAP
