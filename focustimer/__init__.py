"""FocusTimer — a reusable pomodoro countdown engine."""

import logging

from .timer import TimerEngine, TimerState, TimerMode, TimerStatus

__version__ = "0.1.0"

__all__ = ["TimerEngine", "TimerState", "TimerMode", "TimerStatus"]

logging.getLogger(__name__).addHandler(logging.NullHandler())
