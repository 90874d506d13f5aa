"""Surfaces: geometry together with the layers that describe how it shades."""

from __future__ import annotations

import operator
from functools import reduce
from typing import Any, Optional


def _total(values):
    values = list(values)
    if not values:
        raise ValueError("A surface needs at least one layer")
    return reduce(operator.add, values)


class SurfaceIntersection:
    """A geometry hit together with the surface layers of the object hit.

    Attributes of the underlying hit are available directly on this object.
    """

    def __init__(self, hit: Any = None, surfaces: tuple = ()):
        self.hit = hit
        self.surfaces = tuple(surfaces)

    def __getattr__(self, name):
        hit = self.__dict__.get("hit")
        if hit is None:
            raise AttributeError(name)
        return getattr(hit, name)

    def __mul__(self, by) -> "SurfaceIntersection":
        """Transform the hit into another co-ordinate space."""
        return SurfaceIntersection(self.hit * by, self.surfaces)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SurfaceIntersection):
            return NotImplemented
        return self.hit == other.hit and self.surfaces == other.surfaces

    __hash__ = None

    def __repr__(self) -> str:
        return f"SurfaceIntersection({self.hit!r}, {self.surfaces!r})"


class Surface:
    """Geometry combined with one or more surface layers."""

    def __init__(self, geometry, *args):
        self.geometry = geometry
        self.surfaces = tuple(args)

    def __call__(self, transform) -> "Surface":
        """Apply an affine transformation to the geometry."""
        self.geometry(transform)
        return self

    def intersects(self, ray, epsilon) -> Optional[SurfaceIntersection]:
        """Return where the ray hits the geometry, or None if it misses."""
        hit = self.geometry.intersects(ray, epsilon)
        if hit is None:
            return None
        return SurfaceIntersection(hit, self.surfaces)

    def occludes(self, ray, epsilon) -> bool:
        """Whether this object blocks the ray.

        Only possible when every layer can occlude; a layer without a
        ``can_occlude`` attribute is taken to be able to.
        """
        return all(
            getattr(layer, "can_occlude", True) for layer in self.surfaces
        ) and bool(self.geometry.occludes(ray, epsilon))


def surface_interaction(observer, light, intersection, incident, scene):
    """Sum the light each surface layer sends towards the observer."""
    return _total(
        layer(observer, light, intersection, incident, scene)
        for layer in intersection.surfaces
    )


def surface_emission(observer, intersection, scene, initial=0):
    """Sum the light each surface layer emits, starting each from ``initial``."""
    return _total(
        layer(initial, observer, intersection, scene)
        for layer in intersection.surfaces
    )