"""Presentation helpers for widgets that poll :class:`TimerEngine`.

The engine only counts whole seconds; a display polls ``get_state()``
every ``DISPLAY_POLL_MS`` and renders it with these helpers.
"""

from __future__ import annotations

from .engine import TimerMode, TimerStatus


DISPLAY_POLL_MS = 100  # 10 Hz

MODE_LABELS: dict[TimerMode, str] = {
    TimerMode.WORK:   "Work",
    TimerMode.BREAK:  "Break",
    TimerMode.CUSTOM: "Custom",
}

# (start, pause, reset) enabled flags per status
BUTTON_STATES: dict[TimerStatus, tuple[bool, bool, bool]] = {
    TimerStatus.IDLE:    (True, False, False),
    TimerStatus.RUNNING: (False, True, True),
    TimerStatus.PAUSED:  (True, False, True),
}


def format_time(seconds: int) -> str:
    """``MM:SS`` with zero padding.  Minutes are not capped at 99."""
    seconds = max(0, int(seconds))
    minutes, secs = divmod(seconds, 60)
    return f"{minutes:02d}:{secs:02d}"


def mode_label(mode: TimerMode | str) -> str:
    return MODE_LABELS[TimerMode(mode)]


def button_states(status: TimerStatus | str) -> dict[str, bool]:
    """Which controls should be enabled for *status*."""
    start, pause, reset = BUTTON_STATES[TimerStatus(status)]
    return {"start": start, "pause": pause, "reset": reset}
