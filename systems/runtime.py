"""
runtime.py – Process-wide engine state.

Owns everything the helpers read as "the environment":

- is_running flag (set by start()/stop())
- scaled / unscaled clocks and the global time-scale
- pointer position (refreshed by poll_input())
- the main camera
- the deferred-destroy queue, flushed by end_step()
- one-shot timers ticked with unscaled (real) time

Usage::

    runtime = get_runtime()
    runtime.start()
    while running:
        runtime.poll_input()
        runtime.tick(clock.tick(FPS) / 1000.0)
        ...update / draw...
        runtime.end_step()
"""

from __future__ import annotations

import logging
from collections.abc import Callable

import pygame
from pygame.math import Vector2

from settings import DEFAULT_TIME_SCALE

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════
#  Timers
# ══════════════════════════════════════════════════════════

class Timer:
    """Handle for a callback scheduled on the runtime's unscaled clock."""

    __slots__ = ("due", "callback", "cancelled", "fired")

    def __init__(self, due: float, callback: Callable[[], None]):
        self.due = due
        self.callback = callback
        self.cancelled = False
        self.fired = False

    @property
    def pending(self) -> bool:
        return not (self.cancelled or self.fired)

    def cancel(self):
        """Prevent the callback from running.  No-op once fired."""
        if not self.fired:
            self.cancelled = True


# ══════════════════════════════════════════════════════════
#  Runtime
# ══════════════════════════════════════════════════════════

class Runtime:
    """Explicit engine state the helpers consult instead of globals."""

    def __init__(self):
        self.is_running = False
        self.time_scale = DEFAULT_TIME_SCALE
        self.time = 0.0
        self.unscaled_time = 0.0
        self.delta_time = 0.0
        self.unscaled_delta_time = 0.0
        self.frame_count = 0
        self.mouse_position = Vector2()
        self.main_camera = None
        self._pending_destroy: list = []
        self._timers: list[Timer] = []

    # ── Lifecycle ─────────────────────────────────────────
    def start(self):
        self.is_running = True
        logger.info("Runtime started")

    def stop(self):
        """Leave play mode.  Anything still queued for destruction goes now."""
        self.end_step()
        self.is_running = False
        logger.info("Runtime stopped after %d frames", self.frame_count)

    # ── Input ─────────────────────────────────────────────
    def poll_input(self):
        """Refresh the pointer position from pygame."""
        self.mouse_position = Vector2(pygame.mouse.get_pos())

    # ── Stepping ──────────────────────────────────────────
    def tick(self, raw_dt: float) -> float:
        """Advance the clocks by *raw_dt* real seconds and fire due timers.

        Returns the scaled delta for this step.
        """
        self.unscaled_delta_time = raw_dt
        self.delta_time = raw_dt * self.time_scale
        self.unscaled_time += raw_dt
        self.time += self.delta_time
        self.frame_count += 1
        self._fire_timers()
        return self.delta_time

    def end_step(self):
        """Dispose every node destroyed with destroy() during this step."""
        pending, self._pending_destroy = self._pending_destroy, []
        for node in pending:
            node._dispose()
        if pending:
            logger.debug("Flushed %d deferred destroy(s)", len(pending))

    # ── Destruction ───────────────────────────────────────
    def destroy(self, node):
        """Queue *node* for disposal at the end of the current step."""
        if node.destroyed or node in self._pending_destroy:
            logger.debug("Ignoring repeated destroy of %s", node.name)
            return
        self._pending_destroy.append(node)

    def destroy_immediate(self, node):
        """Dispose *node* (and its subtree) right now."""
        if node.destroyed:
            logger.debug("Ignoring repeated destroy of %s", node.name)
            return
        if node in self._pending_destroy:
            self._pending_destroy.remove(node)
        node._dispose()

    @property
    def pending_destroy_count(self) -> int:
        return len(self._pending_destroy)

    # ── Timers ────────────────────────────────────────────
    def call_later(self, delay: float, callback: Callable[[], None]) -> Timer:
        """Run *callback* once *delay* unscaled seconds from now."""
        timer = Timer(self.unscaled_time + delay, callback)
        self._timers.append(timer)
        return timer

    @property
    def pending_timer_count(self) -> int:
        return len(self._timers)

    def _fire_timers(self):
        now = self.unscaled_time
        due = [t for t in self._timers if t.pending and t.due <= now]
        # cancelled timers leave the list on the next tick
        self._timers = [t for t in self._timers if t.pending and t.due > now]
        due.sort(key=lambda t: t.due)
        for timer in due:
            if timer.cancelled:
                continue
            timer.fired = True
            logger.debug("Timer due at %.3f fired", timer.due)
            timer.callback()


# Process-wide default instance
_runtime = Runtime()


def get_runtime() -> Runtime:
    """Return the process-wide Runtime."""
    return _runtime
