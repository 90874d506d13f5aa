"""Cross and dot products of points and unit vectors."""

from __future__ import annotations

from typing import Union

from animray.point3d import Point3D, UnitVector

Vector = Union[Point3D, UnitVector]


def cross(b: Vector, c: Vector) -> Point3D:
    """Return the cross product of two vectors as a point."""
    return Point3D(
        b.y() * c.z() - b.z() * c.y(),
        b.z() * c.x() - b.x() * c.z(),
        b.x() * c.y() - b.y() * c.x(),
    )


def dot(a: Vector, b: Vector):
    """Return the dot product of two vectors."""
    return a.x() * b.x() + a.y() * b.y() + a.z() * b.z()