"""utils package – Reusable extension routines and the time-scale pulse."""

from .helpers import (
    has_parameter, is_visible_from, rects_intersect,
    mask_contains_layer, mask_contains,
    ComponentBuffer, ScratchBufferBusyError, default_component_buffer, get_component,
    rotate, normalize_angle, destroy_children,
    scroll_to_top, scroll_to_bottom,
    calculate_trajectory_velocity, check_distance_to, check_distance_between,
    get_mouse_point_on_plane, rotate_towards_mouse,
    change_alpha,
)
from .time_scale import TimeScalePulse, pulse_time_scale
