"""Homogeneous 3D points and unit vectors."""

from __future__ import annotations

import math
from numbers import Number

from animray.array_based import _quotient


class Point3D:
    """A location or vector stored in homogeneous co-ordinates."""

    __slots__ = ("_array",)

    def __init__(self, x=0, y=0, z=0, h=1):
        self._array = (x, y, z, h)

    @property
    def array(self) -> tuple:
        """The four underlying homogeneous co-ordinates."""
        return self._array

    def x(self):
        return _quotient(self._array[0], self._array[3])

    def y(self):
        return _quotient(self._array[1], self._array[3])

    def z(self):
        return _quotient(self._array[2], self._array[3])

    def _coords(self) -> tuple:
        return (self.x(), self.y(), self.z())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point3D):
            return NotImplemented
        return self._coords() == other._coords()

    def __hash__(self) -> int:
        return hash(self._coords())

    def __add__(self, other):
        if not isinstance(other, (Point3D, UnitVector)):
            return NotImplemented
        return Point3D(self.x() + other.x(), self.y() + other.y(), self.z() + other.z())

    def __sub__(self, other):
        if not isinstance(other, (Point3D, UnitVector)):
            return NotImplemented
        return Point3D(self.x() - other.x(), self.y() - other.y(), self.z() - other.z())

    def __mul__(self, other):
        """Scale by a number, or multiply component-wise by another point."""
        if isinstance(other, Point3D):
            return Point3D(*(a * b for a, b in zip(self._array, other._array)))
        if isinstance(other, Number):
            if other == 0:
                return Point3D(0, 0, 0)
            x, y, z, h = self._array
            return Point3D(x, y, z, _quotient(h, other))
        return NotImplemented

    def __truediv__(self, scalar):
        if not isinstance(scalar, Number):
            return NotImplemented
        x, y, z, h = self._array
        return Point3D(x, y, z, h * scalar)

    def __neg__(self) -> "Point3D":
        return self * -1

    def unit(self) -> "UnitVector":
        """Return a unit vector pointing in the same direction."""
        x, y, z, _ = self._array
        return UnitVector(x, y, z, self.magnitude())

    def dot(self):
        """The dot product of this vector with itself."""
        x, y, z, h = self._array
        return _quotient(x * x + y * y + z * z, h * h)

    def magnitude(self) -> float:
        """The length of this vector."""
        return math.sqrt(self.dot())

    def __str__(self) -> str:
        return "(" + ", ".join(str(v) for v in self._array) + ")"

    def __repr__(self) -> str:
        return "Point3D({}, {}, {}, {})".format(*self._array)


class UnitVector:
    """A direction of unit length, stored as a vector and its magnitude."""

    __slots__ = ("_array",)

    def __init__(self, x=0, y=0, z=1, m=1):
        self._array = (x, y, z, m)

    @classmethod
    def from_point(cls, point: Point3D) -> "UnitVector":
        """Build the unit vector pointing from the origin towards ``point``."""
        return point.unit()

    @property
    def array(self) -> tuple:
        """The four underlying co-ordinates."""
        return self._array

    def x(self):
        return _quotient(self._array[0], self._array[3])

    def y(self):
        return _quotient(self._array[1], self._array[3])

    def z(self):
        return _quotient(self._array[2], self._array[3])

    def to_point(self) -> Point3D:
        """The same direction as a point at unit distance from the origin."""
        return Point3D(*self._array)

    def __mul__(self, scalar):
        if not isinstance(scalar, Number):
            return NotImplemented
        x, y, z, m = self._array
        return Point3D(x * scalar, y * scalar, z * scalar, m)

    def __add__(self, other):
        if not isinstance(other, (Point3D, UnitVector)):
            return NotImplemented
        return self.to_point() + other

    def __neg__(self) -> "UnitVector":
        x, y, z, m = self._array
        return UnitVector(x, y, z, -m)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnitVector):
            return NotImplemented
        return (self.x(), self.y(), self.z()) == (other.x(), other.y(), other.z())

    def __hash__(self) -> int:
        return hash((self.x(), self.y(), self.z()))

    def __str__(self) -> str:
        return "(" + ", ".join(str(v) for v in self._array) + ")"

    def __repr__(self) -> str:
        return "UnitVector({}, {}, {}, {})".format(*self._array)