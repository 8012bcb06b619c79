import pygame
import pytest
from pygame.math import Vector2

from entities import Graphic, HasColor, ScrollView, Text
from utils.helpers import change_alpha, scroll_to_bottom, scroll_to_top


def test_scroll_to_top_and_bottom() -> None:
    view = ScrollView(normalized_position=(0.4, 0.5))
    scroll_to_bottom(view)
    assert view.normalized_position == Vector2(0, 0)
    scroll_to_top(view)
    assert view.normalized_position == Vector2(0, 1)


def test_scroll_view_content_offset_follows_position() -> None:
    view = ScrollView()
    assert view.content_offset(content_height=500, view_height=200) == 0
    scroll_to_bottom(view)
    assert view.content_offset(content_height=500, view_height=200) == 300
    assert view.content_offset(content_height=100, view_height=200) == 0


def test_change_alpha_preserves_rgb_and_returns_graphic() -> None:
    graphic = Graphic(color=(1.0, 0.0, 0.0, 1.0))
    result = change_alpha(graphic, 0.3)
    assert result is graphic
    assert graphic.color == (1.0, 0.0, 0.0, 0.3)


def test_change_alpha_chains() -> None:
    label = Text("score", color=(0.2, 0.4, 0.6, 1.0))
    change_alpha(change_alpha(label, 0.5), 0.25)
    assert label.color == (0.2, 0.4, 0.6, 0.25)
    assert isinstance(label, HasColor)


def test_change_alpha_passes_out_of_range_values_through() -> None:
    graphic = change_alpha(Graphic(), 1.7)
    assert graphic.color[3] == 1.7
    assert graphic.to_pygame_color() == pygame.Color(255, 255, 255, 255)


def test_change_alpha_on_plain_object() -> None:
    class Swatch:
        color = (0.1, 0.2, 0.3, 0.4)

    swatch = change_alpha(Swatch(), 0.9)
    assert swatch.color == pytest.approx((0.1, 0.2, 0.3, 0.9))
