"""
ui.py – UI widgets consumed by the helpers: scroll views and graphics.

Colours are RGBA float tuples.  Values outside 0–1 are stored as-is;
clamping only happens when converting to a pygame colour for drawing.
"""

from __future__ import annotations

import pygame
from pygame.math import Vector2

from entities.node import Component


class ScrollView(Component):
    """Scrollable viewport whose offset is a normalised (x, y) position.

    (0, 1) is the top of the content and (0, 0) the bottom.
    """

    def __init__(self, normalized_position=(0.0, 1.0)):
        super().__init__()
        self.normalized_position = Vector2(normalized_position)

    def content_offset(self, content_height: float, view_height: float) -> float:
        """Pixel offset of the content for the current vertical position."""
        overflow = max(0.0, content_height - view_height)
        return (1.0 - self.normalized_position.y) * overflow


class Graphic(Component):
    """Drawable UI element with a settable colour."""

    def __init__(self, color=(1.0, 1.0, 1.0, 1.0)):
        super().__init__()
        self.color = tuple(color)

    def to_pygame_color(self) -> pygame.Color:
        """Colour clamped to 0–255 per channel, ready for drawing."""
        return pygame.Color(*(max(0, min(255, round(c * 255))) for c in self.color))


class Text(Graphic):
    """Single line of text."""

    def __init__(self, text: str = "", color=(1.0, 1.0, 1.0, 1.0)):
        super().__init__(color)
        self.text = text
