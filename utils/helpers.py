"""helpers.py - Reusable extension routines for the host model.

Every function here is a leaf: it reads the objects it is given (or
the process-wide Runtime) and either returns a value or makes one
small mutation.  None of them validate their input; bad arguments
surface as whatever exception the underlying arithmetic raises.
"""

from __future__ import annotations

import logging
import math
import threading
from contextlib import contextmanager
from typing import TypeVar

from pygame.math import Vector2, Vector3

from settings import GRAVITY, WORLD_UP, DEFAULT_ROTATION_SPEED, SCROLL_TOP, SCROLL_BOTTOM
from entities.camera import calculate_frustum_planes, planes_intersect_aabb
from entities.geometry import Plane
from entities.protocols import (
    ComponentContainer, HasBounds, HasColor, HasLayer, HasParameters, HasPosition, Scrollable,
)
from systems.runtime import get_runtime

logger = logging.getLogger(__name__)

T = TypeVar("T")

_FACING_EPSILON = 1e-12


# ══════════════════════════════════════════════════════════
#  Animator
# ══════════════════════════════════════════════════════════

def has_parameter(animator: HasParameters, name: str | None, kind) -> bool:
    """Return True if *animator* declares a parameter called *name* of *kind*."""
    if not name:
        return False
    for param in animator.parameters:
        if param.kind == kind and param.name == name:
            return True
    return False


# ══════════════════════════════════════════════════════════
#  Visibility / Overlap
# ══════════════════════════════════════════════════════════

def is_visible_from(renderer: HasBounds, camera) -> bool:
    """True unless *renderer*'s bounds are entirely outside *camera*'s frustum."""
    planes = calculate_frustum_planes(camera)
    return planes_intersect_aabb(planes, renderer.bounds)


def rects_intersect(a, b) -> bool:
    """Axis-aligned overlap test.  Touching edges count as intersecting.

    Works with pygame.Rect or anything exposing left/right/top/bottom.
    """
    return not (a.right < b.left or b.right < a.left
                or a.bottom < b.top or b.bottom < a.top)


# ══════════════════════════════════════════════════════════
#  Layer masks
# ══════════════════════════════════════════════════════════

def mask_contains_layer(mask: int, layer: int) -> bool:
    """True if bit *layer* is set in *mask*.

    *layer* is expected in 0..31.  Larger values do not wrap (Python
    ints are unbounded) so they test bits above a 32-bit mask; negative
    values raise ValueError from the shift.
    """
    return (mask & (1 << layer)) != 0


def mask_contains(mask: int, obj: HasLayer) -> bool:
    """True if *obj*.layer is part of *mask*."""
    return mask_contains_layer(mask, obj.layer)


# ══════════════════════════════════════════════════════════
#  Component lookup
# ══════════════════════════════════════════════════════════

class ScratchBufferBusyError(RuntimeError):
    """Raised when a ComponentBuffer is borrowed while already in use."""


class ComponentBuffer:
    """Reusable result list for component lookups.

    One borrower at a time: a nested borrow raises
    ScratchBufferBusyError instead of handing out a list that another
    caller is still filling.  The list is always empty once a borrow
    ends.
    """

    __slots__ = ("_items", "_busy")

    def __init__(self):
        self._items: list = []
        self._busy = False

    def __len__(self):
        return len(self._items)

    @property
    def busy(self) -> bool:
        return self._busy

    @contextmanager
    def borrow(self):
        if self._busy:
            raise ScratchBufferBusyError("component buffer is already in use")
        self._busy = True
        try:
            yield self._items
        finally:
            self._items.clear()
            self._busy = False


_local = threading.local()


def default_component_buffer() -> ComponentBuffer:
    """Return this thread's shared lookup buffer."""
    buffer = getattr(_local, "buffer", None)
    if buffer is None:
        buffer = _local.buffer = ComponentBuffer()
    return buffer


def get_component(container: ComponentContainer, component_type: type[T],
                  buffer: ComponentBuffer | None = None) -> T | None:
    """Return the first component of *component_type* on *container*, or None.

    Reuses *buffer* (default: the thread's shared one) instead of
    allocating a result list per call.
    """
    if buffer is None:
        buffer = default_component_buffer()
    with buffer.borrow() as results:
        container.get_components(component_type, results)
        return results[0] if results else None


# ══════════════════════════════════════════════════════════
#  Angles / 2D vectors
# ══════════════════════════════════════════════════════════

def rotate(v, degrees: float) -> Vector2:
    """Rotate *v* counter-clockwise about the origin."""
    rad = math.radians(degrees)
    cos_a, sin_a = math.cos(rad), math.sin(rad)
    x, y = v[0], v[1]
    return Vector2(x * cos_a - y * sin_a, x * sin_a + y * cos_a)


def normalize_angle(degrees: float) -> float:
    """Reduce *degrees* to the half-open range [0, 360)."""
    angle = math.fmod(degrees, 360.0)
    if angle < 0:
        angle += 360.0
        # -1e-20 + 360 rounds to exactly 360
        if angle >= 360.0:
            angle = 0.0
    return angle


# ══════════════════════════════════════════════════════════
#  Hierarchy
# ══════════════════════════════════════════════════════════

def destroy_children(node, runtime=None):
    """Destroy every immediate child of *node*, last index first.

    While the runtime is running the children are queued and disposed
    at the end of the step; otherwise they are disposed immediately.
    """
    if runtime is None:
        runtime = get_runtime()
    destroy = runtime.destroy if runtime.is_running else runtime.destroy_immediate
    count = node.child_count
    for i in range(count - 1, -1, -1):
        destroy(node.get_child(i))
    logger.debug("Destroyed %d child(ren) of %s (deferred=%s)",
                 count, node.name, runtime.is_running)


# ══════════════════════════════════════════════════════════
#  Scroll views
# ══════════════════════════════════════════════════════════

def scroll_to_top(view: Scrollable):
    view.normalized_position = Vector2(SCROLL_TOP)


def scroll_to_bottom(view: Scrollable):
    view.normalized_position = Vector2(SCROLL_BOTTOM)


# ══════════════════════════════════════════════════════════
#  Ballistics / distances
# ══════════════════════════════════════════════════════════

def calculate_trajectory_velocity(target, origin, time: float,
                                  gravity: float = GRAVITY) -> Vector3:
    """Initial velocity that carries a projectile from *origin* to *target*
    in *time* seconds under a constant downward *gravity*.

    Parameters
    ----------
    target, origin : Vector3-like world positions
    time           : flight time in seconds, must be non-zero
    gravity        : magnitude of downward acceleration
    """
    displacement = Vector3(target) - Vector3(origin)
    horizontal = Vector3(displacement.x, 0.0, displacement.z)
    horizontal_distance = horizontal.length()

    horizontal_speed = horizontal_distance / time
    vertical_speed = displacement.y / time + 0.5 * gravity * time

    if horizontal_distance > 0:
        velocity = horizontal.normalize() * horizontal_speed
    else:
        velocity = Vector3()
    velocity.y = vertical_speed
    return velocity


def check_distance_to(target, pos, range_: float) -> bool:
    """True if *pos* is strictly closer than *range_* to *target*."""
    return Vector3(pos).distance_squared_to(Vector3(target)) < range_ * range_


def check_distance_between(target, pos, min_range: float, max_range: float) -> bool:
    """True if *pos* lies strictly inside the annulus (min_range, max_range)."""
    sqr = Vector3(pos).distance_squared_to(Vector3(target))
    return min_range * min_range < sqr < max_range * max_range


# ══════════════════════════════════════════════════════════
#  Pointer → ground plane
# ══════════════════════════════════════════════════════════

def _raycast_mouse(reference: HasPosition, camera, runtime) -> tuple[bool, Vector3]:
    if runtime is None:
        runtime = get_runtime()
    if camera is None:
        camera = runtime.main_camera
    plane = Plane.from_point(WORLD_UP, reference.world_position)
    ray = camera.screen_point_to_ray(runtime.mouse_position)
    hit, enter = plane.raycast(ray)
    if not hit:
        return False, Vector3()
    return True, ray.get_point(enter)


def get_mouse_point_on_plane(reference: HasPosition, camera=None, runtime=None) -> Vector3:
    """Point under the pointer on the horizontal plane through *reference*.

    Returns a zero vector when the pointer ray misses the plane.
    """
    _, point = _raycast_mouse(reference, camera, runtime)
    return point


def rotate_towards_mouse(transform: HasPosition, rotation_speed: float = DEFAULT_ROTATION_SPEED,
                         camera=None, runtime=None):
    """Turn *transform*'s yaw toward the point under the pointer.

    The step is ``rotation_speed * delta_time`` of the remaining arc
    (clamped to the full arc), taking the short way round.  No change
    when the pointer ray misses the plane or points at the transform
    itself.
    """
    if runtime is None:
        runtime = get_runtime()
    hit, point = _raycast_mouse(transform, camera, runtime)
    if not hit:
        return
    direction = point - transform.world_position
    if direction.x * direction.x + direction.z * direction.z < _FACING_EPSILON:
        return

    target_yaw = math.degrees(math.atan2(direction.x, direction.z))
    t = min(max(rotation_speed * runtime.delta_time, 0.0), 1.0)
    current = transform.rotation.y
    delta = (target_yaw - current + 180.0) % 360.0 - 180.0
    transform.rotation = Vector3(transform.rotation.x,
                                 normalize_angle(current + delta * t),
                                 transform.rotation.z)


# ══════════════════════════════════════════════════════════
#  UI colour
# ══════════════════════════════════════════════════════════

def change_alpha(graphic: HasColor, alpha: float) -> HasColor:
    """Replace the alpha channel of *graphic*.color; returns *graphic*."""
    r, g, b, _ = graphic.color
    graphic.color = (r, g, b, alpha)
    return graphic
