"""entities package – Host model: nodes, components, cameras, UI widgets, geometry."""

from .geometry import Bounds, Ray, Plane
from .node import Node, Component, Renderer
from .animator import Animator, AnimatorParameter, ParameterType
from .camera import Camera, calculate_frustum_planes, planes_intersect_aabb
from .ui import ScrollView, Graphic, Text
from .protocols import (
    HasParameters, HasBounds, HasLayer, HasPosition,
    ComponentContainer, Scrollable, HasColor,
)
