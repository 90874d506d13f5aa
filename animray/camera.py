"""Cameras that map pixel co-ordinates to positions and rays."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any, Callable, Optional

from animray.line import Line
from animray.point3d import Point3D

Sampler = Callable[[], float]
RayFactory = Callable[[Point3D, Point3D], Any]

_HALF = 0.5


@dataclass
class FlatCamera:
    """A 2D camera mapping pixel positions to points on a flat image plane."""

    width: float
    height: float
    columns: int
    rows: int

    def pixel_width(self) -> float:
        """The width of one pixel in world co-ordinates."""
        return self.width / self.columns

    def pixel_height(self) -> float:
        """The height of one pixel in world co-ordinates."""
        return self.height / self.rows

    def __call__(self, x, y) -> tuple[float, float]:
        """Return the world ``(x, y)`` position of the centre of a pixel."""
        return (
            self.width * ((x + _HALF) / self.columns - _HALF),
            -self.height * ((y + _HALF) / self.rows - _HALF),
        )


class FlatJitterCamera:
    """A flat camera that randomly offsets each sample within its pixel."""

    def __init__(
        self,
        width: float,
        height: float,
        columns: int,
        rows: int,
        sampler: Optional[Sampler] = None,
    ):
        self.inner_camera = FlatCamera(width, height, columns, rows)
        self.sampler: Sampler = sampler if sampler is not None else random.random

    def pixel_width(self) -> float:
        return self.inner_camera.pixel_width()

    def pixel_height(self) -> float:
        return self.inner_camera.pixel_height()

    def __call__(self, x, y) -> tuple[float, float]:
        px, py = self.inner_camera(x, y)
        return (
            px + self.sampler() * self.inner_camera.pixel_width(),
            py + self.sampler() * self.inner_camera.pixel_height(),
        )


class PinholeCamera:
    """A camera whose rays all start from a single point behind the image plane."""

    def __init__(
        self,
        width: float,
        height: float,
        columns: int,
        rows: int,
        focal_length: float,
        focal_plane: float = 0,
        camera: Callable[..., Any] = FlatCamera,
        ray_factory: RayFactory = Line,
    ):
        self.camera = camera(width, height, columns, rows)
        self.focal_plane = focal_plane
        self.focal_length = focal_length
        self.ray_factory = ray_factory

    def __call__(self, x, y):
        """Build the ray that passes through the requested pixel."""
        px, py = self.camera(x, y)
        return self.ray_factory(
            Point3D(0, 0, self.focal_plane),
            Point3D(px, py, self.focal_plane + self.focal_length),
        )


class OrthoCamera:
    """A camera whose rays are all parallel."""

    def __init__(
        self,
        width: float,
        height: float,
        columns: int,
        rows: int,
        focal_plane: float = -1,
        direction: float = 1,
        camera: Callable[..., Any] = FlatCamera,
        ray_factory: RayFactory = Line,
    ):
        self.camera = camera(width, height, columns, rows)
        self.focal_plane = focal_plane
        self.direction = direction
        self.ray_factory = ray_factory

    def __call__(self, x, y):
        """Build the ray for the requested pixel."""
        px, py = self.camera(x, y)
        return self.ray_factory(
            Point3D(px, py, self.focal_plane),
            Point3D(px, py, self.focal_plane + self.direction),
        )


@dataclass
class FrameRay:
    """A ray tagged with the (possibly fractional) frame it belongs to."""

    ray: Any
    frame: Any = 0


class StacattoMovie:
    """A movie camera that takes each frame as an instantaneous shot."""

    def __init__(self, frame_camera: Callable[[Any, Any], Any], frame=0):
        self.frame_camera = frame_camera
        self.frame = frame

    def __call__(self, x, y) -> FrameRay:
        return FrameRay(self.frame_camera(x, y), self.frame)


class Movie:
    """A movie camera that spreads samples over the shutter time for motion blur."""

    def __init__(
        self,
        frame_camera: Callable[[Any, Any], Any],
        frame=0,
        shutter: float = 1.0,
        sampler: Optional[Sampler] = None,
    ):
        self.frame_camera = frame_camera
        self.frame = frame
        self.shutter = shutter
        self.sampler: Sampler = sampler if sampler is not None else random.random

    def __call__(self, x, y) -> FrameRay:
        ray = self.frame_camera(x, y)
        return FrameRay(ray, self.frame + self.sampler() * self.shutter)