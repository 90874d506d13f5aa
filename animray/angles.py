"""Angle helpers: degrees expressed as radians."""

from __future__ import annotations

import math

PI = math.pi


def degrees(value) -> float:
    """Convert an angle in degrees to radians."""
    return PI / 180.0 * value