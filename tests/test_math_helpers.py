import math

import pygame
import pytest
from hypothesis import given
from hypothesis import strategies as st
from pygame.math import Vector2

from utils.helpers import (
    calculate_trajectory_velocity,
    check_distance_between,
    check_distance_to,
    mask_contains,
    mask_contains_layer,
    normalize_angle,
    rects_intersect,
    rotate,
)


@given(st.floats(allow_nan=False, allow_infinity=False))
def test_normalize_angle_stays_in_half_open_range(angle: float) -> None:
    result = normalize_angle(angle)
    assert 0.0 <= result < 360.0


@given(st.integers(-1_000_000, 1_000_000), st.integers(-5, 5))
def test_normalize_angle_ignores_full_turns(angle: int, turns: int) -> None:
    assert normalize_angle(float(angle)) == normalize_angle(float(angle + 360 * turns))


@pytest.mark.parametrize(
    ("angle", "expected"),
    [(0.0, 0.0), (360.0, 0.0), (-10.0, 350.0), (-370.0, 350.0), (725.0, 5.0), (-1e-20, 0.0)],
)
def test_normalize_angle_examples(angle: float, expected: float) -> None:
    assert normalize_angle(angle) == pytest.approx(expected)


def test_rotate_by_zero_is_identity() -> None:
    assert rotate(Vector2(3.5, -2.0), 0.0) == Vector2(3.5, -2.0)


def test_rotate_full_turn_returns_to_start() -> None:
    assert tuple(rotate((3.5, -2.0), 360.0)) == pytest.approx((3.5, -2.0), abs=1e-9)


def test_rotate_is_counter_clockwise() -> None:
    assert tuple(rotate((1.0, 0.0), 90.0)) == pytest.approx((0.0, 1.0), abs=1e-12)


@given(
    st.floats(-720, 720, allow_nan=False),
    st.floats(-720, 720, allow_nan=False),
)
def test_rotate_composes(a: float, b: float) -> None:
    v = Vector2(2.0, 1.0)
    assert tuple(rotate(rotate(v, a), b)) == pytest.approx(tuple(rotate(v, a + b)), abs=1e-9)


def test_rects_touching_edges_intersect() -> None:
    a = pygame.Rect(0, 0, 10, 10)
    assert rects_intersect(a, pygame.Rect(10, 0, 5, 5))
    assert rects_intersect(pygame.Rect(10, 0, 5, 5), a)


def test_rects_separated_on_either_axis_do_not_intersect() -> None:
    a = pygame.Rect(0, 0, 10, 10)
    assert not rects_intersect(a, pygame.Rect(11, 0, 5, 5))
    assert not rects_intersect(a, pygame.Rect(0, 11, 5, 5))
    assert not rects_intersect(pygame.Rect(-20, -20, 5, 5), a)


def test_rect_intersects_itself() -> None:
    a = pygame.Rect(3, 4, 5, 6)
    assert rects_intersect(a, a)


def test_mask_contains_layer_bits() -> None:
    assert mask_contains_layer(0b0110, 1)
    assert mask_contains_layer(0b0110, 2)
    assert not mask_contains_layer(0b0110, 0)
    assert not mask_contains_layer(0b0110, 3)


def test_mask_layer_above_31_tests_bits_outside_a_32_bit_mask() -> None:
    assert not mask_contains_layer(0xFFFFFFFF, 32)


def test_mask_negative_layer_raises() -> None:
    with pytest.raises(ValueError):
        mask_contains_layer(0b1, -1)


def test_mask_contains_reads_object_layer() -> None:
    class Tagged:
        layer = 5

    assert mask_contains(1 << 5, Tagged())
    assert not mask_contains(1 << 4, Tagged())


def test_trajectory_straight_up() -> None:
    velocity = calculate_trajectory_velocity((0, 10, 0), (0, 0, 0), 1.0, gravity=10.0)
    assert tuple(velocity) == pytest.approx((0.0, 15.0, 0.0))


def test_trajectory_lands_on_target() -> None:
    target, origin, time, gravity = (3.0, 0.0, 4.0), (0.0, 0.0, 0.0), 1.0, 10.0
    velocity = calculate_trajectory_velocity(target, origin, time, gravity)
    assert tuple(velocity) == pytest.approx((3.0, 5.0, 4.0))
    landing_y = velocity.y * time - 0.5 * gravity * time * time
    assert landing_y == pytest.approx(0.0)


def test_trajectory_uses_default_gravity() -> None:
    velocity = calculate_trajectory_velocity((0, 0, 0), (0, 0, 0), 2.0)
    assert velocity.y == pytest.approx(9.81)


def test_trajectory_zero_time_raises() -> None:
    with pytest.raises(ZeroDivisionError):
        calculate_trajectory_velocity((1, 0, 0), (0, 0, 0), 0.0)


def test_check_distance_to_is_strict() -> None:
    assert check_distance_to((0, 0, 0), (3, 0, 0), 5)
    assert not check_distance_to((0, 0, 0), (3, 0, 0), 2)
    assert not check_distance_to((0, 0, 0), (3, 0, 0), 3)


@pytest.mark.parametrize(
    ("distance", "expected"),
    [(3.0, True), (2.0, False), (5.0, False), (6.0, False), (math.sqrt(10), True)],
)
def test_check_distance_between_annulus(distance: float, expected: bool) -> None:
    assert check_distance_between((0, 0, 0), (distance, 0, 0), 2.0, 5.0) is expected
