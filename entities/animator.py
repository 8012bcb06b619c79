"""
animator.py – Minimal animation controller parameter model.

Only the parameter table is modelled: clip playback and state
machines belong to whatever drives the sprites.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from entities.node import Component


class ParameterType(IntEnum):
    """Kinds of controller parameter."""

    FLOAT = 1
    INT = 3
    BOOL = 4
    TRIGGER = 9


@dataclass
class AnimatorParameter:
    name: str
    kind: ParameterType
    default: float | int | bool = 0


class Animator(Component):
    """Holds the controller's declared parameters and their live values."""

    def __init__(self, parameters: list[AnimatorParameter] | None = None):
        super().__init__()
        self._parameters: list[AnimatorParameter] = list(parameters or [])
        self._values = {p.name: p.default for p in self._parameters}

    @property
    def parameters(self) -> list[AnimatorParameter]:
        return list(self._parameters)

    def add_parameter(self, name: str, kind: ParameterType, default=0) -> AnimatorParameter:
        param = AnimatorParameter(name, kind, default)
        self._parameters.append(param)
        self._values[name] = default
        return param

    def set_value(self, name: str, value):
        if name not in self._values:
            raise KeyError(f"Unknown animator parameter: {name!r}")
        self._values[name] = value

    def get_value(self, name: str):
        return self._values[name]
