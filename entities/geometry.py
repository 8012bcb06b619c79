"""
geometry.py – World-space value types shared by the host model.

Bounds (AABB), Ray and Plane mirror the small set of geometry
primitives the extension helpers need.  Vectors are pygame's
``Vector3`` so everything composes with the rest of the pygame stack.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from pygame.math import Vector3

_EPSILON = 1e-6


@dataclass
class Bounds:
    """Axis-aligned bounding box described by its centre and full size."""

    center: Vector3 = field(default_factory=Vector3)
    size: Vector3 = field(default_factory=Vector3)

    def __post_init__(self):
        self.center = Vector3(self.center)
        self.size = Vector3(self.size)

    @classmethod
    def from_min_max(cls, lo, hi) -> Bounds:
        lo, hi = Vector3(lo), Vector3(hi)
        return cls(center=(lo + hi) * 0.5, size=hi - lo)

    @property
    def extents(self) -> Vector3:
        return self.size * 0.5

    @property
    def min(self) -> Vector3:
        return self.center - self.extents

    @property
    def max(self) -> Vector3:
        return self.center + self.extents

    def translated(self, offset) -> Bounds:
        """Return a copy moved by *offset*."""
        return Bounds(self.center + Vector3(offset), self.size)


class Ray:
    """Half-line with a normalised direction."""

    __slots__ = ("origin", "direction")

    def __init__(self, origin, direction):
        self.origin = Vector3(origin)
        self.direction = Vector3(direction).normalize()

    def get_point(self, distance: float) -> Vector3:
        return self.origin + self.direction * distance

    def __repr__(self):
        return f"Ray(origin={tuple(self.origin)}, direction={tuple(self.direction)})"


class Plane:
    """Infinite plane ``normal · p + distance = 0``.

    Usage::

        ground = Plane.from_point(Vector3(0, 1, 0), player.world_position)
        hit, enter = ground.raycast(ray)
    """

    __slots__ = ("normal", "distance")

    def __init__(self, normal, distance: float = 0.0):
        self.normal = Vector3(normal).normalize()
        self.distance = distance

    @classmethod
    def from_point(cls, normal, point) -> Plane:
        n = Vector3(normal).normalize()
        return cls(n, -n.dot(Vector3(point)))

    def get_distance_to_point(self, point) -> float:
        return self.normal.dot(Vector3(point)) + self.distance

    def raycast(self, ray: Ray) -> tuple[bool, float]:
        """Intersect *ray* with the plane.

        Returns ``(hit, enter)`` where *enter* is the distance along the
        ray.  A ray parallel to the plane reports ``(False, 0.0)``; a
        plane behind the ray origin reports ``False`` with a negative
        *enter*.
        """
        vdot = ray.direction.dot(self.normal)
        ndot = -ray.origin.dot(self.normal) - self.distance
        if abs(vdot) < _EPSILON:
            return False, 0.0
        enter = ndot / vdot
        return enter > 0.0, enter
