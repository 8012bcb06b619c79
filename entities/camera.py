"""
camera.py – Perspective camera: screen rays and frustum planes.

Conventions
-----------
- Left-handed world: +X right, +Y up, +Z forward at yaw 0.
- Positive pitch looks down.
- Screen coordinates are pygame's (origin top-left, y down, pixels).

Frustum planes are returned as a numpy array of shape (6, 4), one
row per plane ``[nx, ny, nz, d]`` with the normal pointing into the
visible volume, ordered left, right, bottom, top, near, far.
"""

from __future__ import annotations

import math

import numpy as np
from pygame.math import Vector2, Vector3

from settings import (
    CAMERA_FOV, CAMERA_NEAR, CAMERA_FAR, SCREEN_WIDTH, SCREEN_HEIGHT,
)
from entities.geometry import Bounds, Ray


class Camera:
    """Perspective camera placed by position + pitch/yaw (degrees)."""

    def __init__(self, position=None, pitch: float = 0.0, yaw: float = 0.0,
                 fov: float = CAMERA_FOV,
                 pixel_width: int = SCREEN_WIDTH,
                 pixel_height: int = SCREEN_HEIGHT,
                 near: float = CAMERA_NEAR, far: float = CAMERA_FAR):
        self.position = Vector3(position) if position is not None else Vector3()
        self.pitch = pitch
        self.yaw = yaw
        self.fov = fov
        self.pixel_width = pixel_width
        self.pixel_height = pixel_height
        self.near = near
        self.far = far

    # ── Basis ─────────────────────────────────────────────
    @property
    def aspect(self) -> float:
        return self.pixel_width / self.pixel_height

    @property
    def forward(self) -> Vector3:
        p, y = math.radians(self.pitch), math.radians(self.yaw)
        return Vector3(math.sin(y) * math.cos(p),
                       -math.sin(p),
                       math.cos(y) * math.cos(p))

    @property
    def right(self) -> Vector3:
        y = math.radians(self.yaw)
        return Vector3(math.cos(y), 0.0, -math.sin(y))

    @property
    def up(self) -> Vector3:
        return self.forward.cross(self.right)

    # ── Rays ──────────────────────────────────────────────
    def screen_point_to_ray(self, screen_pos) -> Ray:
        """Ray from the camera through pixel *screen_pos*."""
        sx, sy = Vector2(screen_pos)
        ndc_x = 2.0 * sx / self.pixel_width - 1.0
        ndc_y = 1.0 - 2.0 * sy / self.pixel_height
        half_h = math.tan(math.radians(self.fov) * 0.5)
        half_w = half_h * self.aspect
        direction = (self.forward
                     + self.right * (ndc_x * half_w)
                     + self.up * (ndc_y * half_h))
        return Ray(self.position, direction)


# ══════════════════════════════════════════════════════════
#  Frustum
# ══════════════════════════════════════════════════════════

def _plane_row(normal: Vector3, point: Vector3) -> list[float]:
    n = normal.normalize()
    return [n.x, n.y, n.z, -n.dot(point)]


def calculate_frustum_planes(camera: Camera) -> np.ndarray:
    """Return the six inward-facing frustum planes of *camera*."""
    fwd, right, up = camera.forward, camera.right, camera.up
    pos = camera.position
    half_h = math.tan(math.radians(camera.fov) * 0.5)
    half_w = half_h * camera.aspect

    rows = [
        _plane_row(fwd * half_w + right, pos),   # left
        _plane_row(fwd * half_w - right, pos),   # right
        _plane_row(fwd * half_h + up, pos),      # bottom
        _plane_row(fwd * half_h - up, pos),      # top
        _plane_row(fwd, pos + fwd * camera.near),
        _plane_row(-fwd, pos + fwd * camera.far),
    ]
    return np.asarray(rows, dtype=np.float64)


def planes_intersect_aabb(planes: np.ndarray, bounds: Bounds) -> bool:
    """Conservative AABB/planes test.

    False only when the box lies entirely on the outside of at least
    one plane; boxes straddling a frustum corner may report True.
    """
    center = np.array(tuple(bounds.center), dtype=np.float64)
    extents = np.array(tuple(bounds.extents), dtype=np.float64)
    normals = planes[:, :3]
    dist = normals @ center + planes[:, 3]
    radius = np.abs(normals) @ extents
    return bool(np.all(dist + radius >= 0.0))

