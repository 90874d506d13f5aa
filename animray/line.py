"""Line segments through 3D space."""

from __future__ import annotations

from dataclasses import dataclass, field

from animray.point3d import Point3D


@dataclass
class Line:
    """The part of a line between two end points."""

    start: Point3D = field(default_factory=Point3D)
    end: Point3D = field(default_factory=Point3D)

    def length_squared(self):
        """The square of the length of the segment."""
        dx = self.end.x() - self.start.x()
        dy = self.end.y() - self.start.y()
        dz = self.end.z() - self.start.z()
        return dx * dx + dy * dy + dz * dz

    def proportion_along(self, proportion) -> Point3D:
        """The point a given fraction of the way from start to end."""
        return self.start + (self.end - self.start) * proportion

    def __str__(self) -> str:
        return f"{self.start} -> {self.end}"