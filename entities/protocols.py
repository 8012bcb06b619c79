"""Capability interfaces the extension helpers are written against.

Any object satisfying one of these protocols works with the matching
helper, whether it is one of the host classes in this package or a
game-specific type.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol, TypeVar, runtime_checkable

from pygame.math import Vector2, Vector3

T = TypeVar("T")


@runtime_checkable
class HasParameters(Protocol):
    """Controller exposing a list of named, typed parameters."""

    @property
    def parameters(self) -> Sequence[Any]:
        """Entries carrying ``name`` and ``kind`` attributes."""
        ...


@runtime_checkable
class HasBounds(Protocol):
    """Renderable with a world-space axis-aligned bounding box."""

    @property
    def bounds(self) -> Any:
        ...


class HasLayer(Protocol):
    layer: int


class HasPosition(Protocol):
    """Transform with a local position and a resolved world position."""

    position: Vector3
    rotation: Vector3

    @property
    def world_position(self) -> Vector3:
        ...


class ComponentContainer(Protocol):
    """Object that can list its components of a given type."""

    def get_components(self, component_type: type[T], results: list[T]) -> None:
        """Append every component that is an instance of *component_type*."""
        ...


class Scrollable(Protocol):
    normalized_position: Vector2


@runtime_checkable
class HasColor(Protocol):
    """UI element with a settable RGBA colour (floats, 0–1 expected)."""

    color: tuple[float, float, float, float]
