"""
time_scale.py  –  Temporary slow-motion pulses on the global time-scale.

A pulse drops ``runtime.time_scale`` to a given strength and restores
it to 1.0 after a duration measured in *real* (unscaled) seconds.
Cancelling a pulse, or leaving its ``with`` block, restores the scale
right away so the game can never be left stuck in slow motion.
"""

from __future__ import annotations

import logging

from settings import DEFAULT_TIME_SCALE
from systems.runtime import get_runtime

logger = logging.getLogger(__name__)


class TimeScalePulse:
    """Handle for one slow-motion window.

    Usage::

        pulse = pulse_time_scale(strength=0.3, duration=0.15)
        ...
        pulse.cancel()          # optional, restores immediately

    Overlapping pulses share the one global scale: whichever restores
    last leaves it at 1.0.
    """

    def __init__(self, runtime, strength: float, duration: float):
        self.strength = strength
        self.duration = duration
        self._runtime = runtime
        self._timer = None
        self._restored = False

    def start(self) -> TimeScalePulse:
        self._runtime.time_scale = self.strength
        self._timer = self._runtime.call_later(self.duration, self._restore)
        logger.info("Time-scale pulse %.2f for %.2fs", self.strength, self.duration)
        return self

    def _restore(self):
        if self._restored:
            return
        self._restored = True
        self._runtime.time_scale = DEFAULT_TIME_SCALE
        logger.info("Time-scale restored to %.2f", DEFAULT_TIME_SCALE)

    def cancel(self):
        """Drop the pending restore and restore now."""
        if self._timer is not None:
            self._timer.cancel()
        self._restore()

    @property
    def active(self) -> bool:
        return not self._restored

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.cancel()
        return False


def pulse_time_scale(strength: float, duration: float, runtime=None) -> TimeScalePulse:
    """Set the time-scale to *strength* now and back to 1.0 after *duration*."""
    if runtime is None:
        runtime = get_runtime()
    return TimeScalePulse(runtime, strength, duration).start()
