"""Solving the quadratic equations that come from ray intersections."""

from __future__ import annotations

import math
from typing import Optional


def _divide(numerator: float, denominator: float) -> float:
    """Floating point division that yields infinities or NaN instead of raising."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def quadratic_has_solution(a, b, c, limit) -> bool:
    """Return True if the quadratic has a real solution at or beyond ``limit``.

    The leading coefficient is taken to be one, so ``a`` is not used.
    """
    discriminant = b * b - 4 * c
    if discriminant < 0:
        return False
    root = math.sqrt(discriminant)
    return (-b - root >= limit) or (-b + root >= limit)


def first_positive_quadratic_solution(a, b, c, limit) -> Optional[float]:
    """Return the smallest non-negative real root if it is at least ``limit``."""
    discriminant = b * b - 4 * a * c
    if discriminant < 0:
        return None
    root = math.sqrt(discriminant)
    q = -0.5 * (b + (-root if b < 0 else root))
    t0, t1 = _divide(q, a), _divide(c, q)
    if t1 < t0:
        t0, t1 = t1, t0
    t = t1 if t0 < 0 else t0
    if t < limit:
        return None
    return t