"""Linear interpolation over time."""

from __future__ import annotations


def _divide(numerator, denominator):
    """Divide, truncating toward zero when both operands are integers."""
    if isinstance(numerator, int) and isinstance(denominator, int):
        quotient = abs(numerator) // abs(denominator)
        return -quotient if (numerator < 0) != (denominator < 0) else quotient
    return numerator / denominator


def proportion(end, time, outof):
    """Return ``end`` scaled by the fraction ``time / outof``."""
    return _divide(end * time, outof)


def linear(start, end, time, outof):
    """Interpolate linearly from ``start`` to ``end`` as ``time`` goes to ``outof``."""
    return start + proportion(end - start, time, outof)