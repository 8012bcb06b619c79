"""
node.py – Scene nodes and the components attached to them.

A Node is both the hierarchy entry (ordered children, parent link)
and the transform (position + euler rotation in degrees).  Components
hang off a node and are looked up by type.

Nodes are never destroyed directly; the Runtime decides whether a
destroy happens now or at the end of the current step.
"""

from __future__ import annotations

import logging
import math
from typing import TypeVar

from pygame.math import Vector3

from entities.geometry import Bounds

logger = logging.getLogger(__name__)

T = TypeVar("T")


# ══════════════════════════════════════════════════════════
#  Component
# ══════════════════════════════════════════════════════════

class Component:
    """Base class for anything attached to a Node."""

    def __init__(self):
        self.node: Node | None = None

    @property
    def layer(self) -> int:
        return self.node.layer if self.node is not None else 0

    def on_destroy(self):
        """Hook called once when the owning node is disposed."""


class Renderer(Component):
    """Renderable with local-space bounds, offset by its node's position."""

    def __init__(self, local_bounds: Bounds | None = None):
        super().__init__()
        self.local_bounds = local_bounds or Bounds(size=(1, 1, 1))
        self.enabled = True

    @property
    def bounds(self) -> Bounds:
        """World-space AABB."""
        if self.node is None:
            return self.local_bounds
        return self.local_bounds.translated(self.node.world_position)


# ══════════════════════════════════════════════════════════
#  Node
# ══════════════════════════════════════════════════════════

class Node:
    """Hierarchy node with a transform, a layer and components.

    Attributes
    ----------
    name      : str      – debug name
    layer     : int      – logical layer index (0..31)
    position  : Vector3  – local position relative to the parent
    rotation  : Vector3  – euler angles in degrees (pitch, yaw, roll)
    destroyed : bool     – True once disposed
    """

    def __init__(self, name: str = "Node", layer: int = 0,
                 position=None, parent: Node | None = None):
        self.name = name
        self.layer = layer
        self.position = Vector3(position) if position is not None else Vector3()
        self.rotation = Vector3()
        self.parent: Node | None = None
        self.destroyed = False
        self._children: list[Node] = []
        self._components: list[Component] = []
        if parent is not None:
            self.set_parent(parent)

    def __repr__(self):
        return f"Node({self.name!r})"

    # ── Hierarchy ─────────────────────────────────────────
    @property
    def child_count(self) -> int:
        return len(self._children)

    @property
    def children(self) -> tuple[Node, ...]:
        return tuple(self._children)

    def get_child(self, index: int) -> Node:
        return self._children[index]

    def set_parent(self, parent: Node | None):
        if self.parent is not None:
            self.parent._children.remove(self)
        self.parent = parent
        if parent is not None:
            parent._children.append(self)

    # ── Transform ─────────────────────────────────────────
    @property
    def world_position(self) -> Vector3:
        if self.parent is None:
            return Vector3(self.position)
        return self.parent.world_position + self.position

    @property
    def yaw(self) -> float:
        return self.rotation.y

    @property
    def forward(self) -> Vector3:
        """Unit facing vector in the XZ plane derived from yaw (+Z at yaw 0)."""
        rad = math.radians(self.rotation.y)
        return Vector3(math.sin(rad), 0.0, math.cos(rad))

    # ── Components ────────────────────────────────────────
    def add_component(self, component: T) -> T:
        component.node = self
        self._components.append(component)
        return component

    def get_components(self, component_type: type[T], results: list[T]) -> None:
        """Append every attached component of *component_type* to *results*."""
        for component in self._components:
            if isinstance(component, component_type):
                results.append(component)

    # ── Disposal (called by Runtime) ──────────────────────
    def _dispose(self):
        if self.destroyed:
            return
        for child in reversed(list(self._children)):
            child._dispose()
        for component in self._components:
            component.on_destroy()
        self._components.clear()
        self.set_parent(None)
        self.destroyed = True
        logger.debug("Disposed %s", self.name)
