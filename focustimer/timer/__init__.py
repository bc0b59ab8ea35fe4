"""Timer package."""

from .engine import (
    TimerEngine,
    TimerState,
    TimerMode,
    TimerStatus,
    MODE_DURATIONS,
    DEFAULT_CUSTOM_SECONDS,
    MIN_CUSTOM_SECONDS,
    TICK_INTERVAL_MS,
    DEBUG_TICK_INTERVAL_MS,
)
from .display import DISPLAY_POLL_MS, format_time, mode_label, button_states

__all__ = [
    "TimerEngine",
    "TimerState",
    "TimerMode",
    "TimerStatus",
    "MODE_DURATIONS",
    "DEFAULT_CUSTOM_SECONDS",
    "MIN_CUSTOM_SECONDS",
    "TICK_INTERVAL_MS",
    "DEBUG_TICK_INTERVAL_MS",
    "DISPLAY_POLL_MS",
    "format_time",
    "mode_label",
    "button_states",
]
