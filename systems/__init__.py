"""systems package – Engine runtime state: clocks, time-scale, input, destruction, timers."""

from .runtime import Runtime, Timer, get_runtime
