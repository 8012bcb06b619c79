"""
settings.py - Engine constants for the extension helpers.

All configurable values live here so they're easy to tweak
and easy to reference from any module.
"""

# ── Physics ───────────────────────────────────────────────
GRAVITY = 9.81                 # downward acceleration magnitude (units/s²)

# ── World axes ────────────────────────────────────────────
WORLD_UP = (0.0, 1.0, 0.0)

# ── Time ──────────────────────────────────────────────────
DEFAULT_TIME_SCALE = 1.0

# ── Facing ────────────────────────────────────────────────
DEFAULT_ROTATION_SPEED = 10.0  # slerp factor per second

# ── Screen / Camera ───────────────────────────────────────
SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
CAMERA_FOV = 60.0              # vertical field of view, degrees
CAMERA_NEAR = 0.3
CAMERA_FAR = 1000.0

# ── UI scroll extremes (normalized x, y) ──────────────────
SCROLL_TOP = (0.0, 1.0)
SCROLL_BOTTOM = (0.0, 0.0)
