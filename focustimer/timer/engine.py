"""Countdown state machine for FocusTimer.

States
------
IDLE      Not counting — waiting for ``start()``.
RUNNING   Counting down, one tick per interval.
PAUSED    Frozen with the remaining time preserved.

Transitions
-----------
IDLE → RUNNING                   (start)
RUNNING → PAUSED                 (pause)
PAUSED → RUNNING                 (start)
RUNNING → IDLE                   (countdown reaches 0, callback fires once)
Any → IDLE                       (reset / set_mode / set_custom_time)

Modes
-----
``work`` and ``break`` have fixed durations.  ``custom`` uses whatever
was last assigned through ``set_custom_time()``; before any assignment
it falls back to ``custom_default_seconds``.

Every tick runs on the engine's own thread via ``QTimer``, so public
calls and ticks never interleave and no locking is needed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from PyQt6.QtCore import QObject, QTimer, pyqtSignal


logger = logging.getLogger(__name__)


# ── enums ─────────────────────────────────────────────────────────────────


class TimerMode(Enum):
    WORK = "work"
    BREAK = "break"
    CUSTOM = "custom"


class TimerStatus(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"


@dataclass(frozen=True)
class TimerState:
    """Immutable snapshot returned by :meth:`TimerEngine.get_state`."""

    mode: TimerMode
    status: TimerStatus
    remaining_seconds: int


# ── constants ─────────────────────────────────────────────────────────────

MODE_DURATIONS: dict[TimerMode, int] = {
    TimerMode.WORK: 25 * 60,
    TimerMode.BREAK: 5 * 60,
}

DEFAULT_CUSTOM_SECONDS = 25 * 60
MIN_CUSTOM_SECONDS = 1
TICK_INTERVAL_MS = 1000
DEBUG_TICK_INTERVAL_MS = 100  # 10x speed for watching completions

CompletionCallback = Callable[[TimerMode], None]


def _no_completion(mode: TimerMode) -> None:
    pass


# ── engine ────────────────────────────────────────────────────────────────


class TimerEngine(QObject):
    """Qt-based countdown engine with work / break / custom modes.

    Signals
    -------
    tick(remaining_seconds: int)
        Emitted after every decrement while running.  On the final tick
        the engine is already IDLE when this fires.
    state_changed(snapshot: TimerState)
        Emitted after every operation that changes the snapshot.
    completed(mode: TimerMode)
        Emitted once when the countdown naturally reaches zero, right
        after the ``on_complete`` callback (even if the callback raised;
        such errors are logged, never propagated into the Qt loop).

    ``debug=True`` ticks every ``DEBUG_TICK_INTERVAL_MS`` and takes
    precedence over ``tick_interval_ms``.
    """

    tick = pyqtSignal(int)
    state_changed = pyqtSignal(object)
    completed = pyqtSignal(object)

    def __init__(
        self,
        on_complete: CompletionCallback | None = None,
        parent: QObject | None = None,
        *,
        tick_interval_ms: int = TICK_INTERVAL_MS,
        debug: bool = False,
        custom_default_seconds: int = DEFAULT_CUSTOM_SECONDS,
    ) -> None:
        super().__init__(parent)

        # ── configuration ─────────────────────────────────────────────
        self._on_complete: CompletionCallback = (
            _no_completion if on_complete is None else on_complete
        )
        self._debug: bool = debug
        self._custom_seconds: int = max(MIN_CUSTOM_SECONDS, int(custom_default_seconds))

        # ── countdown state ───────────────────────────────────────────
        self._mode: TimerMode = TimerMode.WORK
        self._status: TimerStatus = TimerStatus.IDLE
        self._remaining: int = MODE_DURATIONS[TimerMode.WORK]

        # ── Qt timer (the one and only decrement task) ────────────────
        self._qt_timer = QTimer(self)
        self._qt_timer.setInterval(
            DEBUG_TICK_INTERVAL_MS if debug else max(1, int(tick_interval_ms))
        )
        self._qt_timer.timeout.connect(self._on_tick)

    @classmethod
    def from_settings(
        cls,
        settings,
        on_complete: CompletionCallback | None = None,
        parent: QObject | None = None,
    ) -> "TimerEngine":
        """Build an engine from a :class:`focustimer.settings.Settings`."""
        return cls(
            on_complete,
            parent,
            tick_interval_ms=settings.tick_interval_ms,
            debug=settings.debug_mode,
            custom_default_seconds=settings.custom_default_seconds,
        )

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def mode(self) -> TimerMode:
        return self._mode

    @property
    def status(self) -> TimerStatus:
        return self._status

    @property
    def remaining(self) -> int:
        """Seconds left on the clock."""
        return self._remaining

    @property
    def total_duration(self) -> int:
        """Full length of the current mode's countdown."""
        return self.duration_for(self._mode)

    @property
    def percent_complete(self) -> float:
        """0.0 → 1.0 progress through the current countdown."""
        total = self.total_duration
        if total <= 0:
            return 0.0
        elapsed = total - self._remaining
        return max(0.0, min(1.0, elapsed / total))

    @property
    def is_running(self) -> bool:
        return self._status == TimerStatus.RUNNING

    @property
    def tick_interval_ms(self) -> int:
        return self._qt_timer.interval()

    @property
    def debug(self) -> bool:
        return self._debug

    def duration_for(self, mode: TimerMode) -> int:
        if mode == TimerMode.CUSTOM:
            return self._custom_seconds
        return MODE_DURATIONS[mode]

    def get_state(self) -> TimerState:
        """Snapshot of ``(mode, status, remaining_seconds)``.

        Safe to poll at any rate; never blocks or mutates anything.
        """
        return TimerState(self._mode, self._status, self._remaining)

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def start(self) -> None:
        """Start or resume the countdown.  No-op while already running.

        Starting a finished countdown (0 left) reloads the mode's full
        duration first, so the engine is never running at zero.
        """
        if self._status == TimerStatus.RUNNING:
            return
        if self._remaining <= 0:
            self._remaining = self.duration_for(self._mode)
        self._status = TimerStatus.RUNNING
        self._qt_timer.start()
        logger.debug("started %s with %ds left", self._mode.value, self._remaining)
        self._emit_state()

    def pause(self) -> None:
        """Freeze the countdown.  Idle engines stay idle."""
        self._cancel_task()
        if self._status == TimerStatus.IDLE:
            return
        if self._status != TimerStatus.PAUSED:
            self._status = TimerStatus.PAUSED
            logger.debug("paused %s at %ds", self._mode.value, self._remaining)
            self._emit_state()

    def reset(self) -> None:
        """Stop and restore the current mode's full duration."""
        self._cancel_task()
        self._status = TimerStatus.IDLE
        self._remaining = self.duration_for(self._mode)
        logger.debug("reset %s to %ds", self._mode.value, self._remaining)
        self._emit_state()

    def set_mode(self, mode: TimerMode | str) -> None:
        """Switch modes, discarding any countdown in progress."""
        mode = TimerMode(mode)
        self._cancel_task()
        self._mode = mode
        self._status = TimerStatus.IDLE
        self._remaining = self.duration_for(mode)
        logger.debug("mode set to %s (%ds)", mode.value, self._remaining)
        self._emit_state()

    def set_custom_time(self, minutes: int, seconds: int) -> None:
        """Switch to custom mode with ``minutes:seconds`` on the clock.

        Totals below one second are clamped to one second; fractional
        totals are truncated to whole seconds.
        """
        self._cancel_task()
        self._custom_seconds = max(MIN_CUSTOM_SECONDS, int(minutes * 60 + seconds))
        self._mode = TimerMode.CUSTOM
        self._status = TimerStatus.IDLE
        self._remaining = self._custom_seconds
        logger.debug("custom time set to %ds", self._remaining)
        self._emit_state()

    def set_custom_minutes(self, minutes: int) -> None:
        self.set_custom_time(minutes, 0)

    def shutdown(self) -> None:
        """Cancel any scheduled tick.  Call before discarding the engine."""
        self._cancel_task()

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL — timer mechanics
    # ══════════════════════════════════════════════════════════════════

    def _on_tick(self) -> None:
        if self._status != TimerStatus.RUNNING:
            # stale timeout delivered after a cancel
            return
        self._remaining = max(0, self._remaining - 1)
        finished = self._remaining == 0
        if finished:
            # settle IDLE before anyone can observe the zero
            self._cancel_task()
            self._status = TimerStatus.IDLE
        if self._debug:
            logger.debug("tick %s: %ds left", self._mode.value, self._remaining)
        completed_mode = self._mode
        self.tick.emit(self._remaining)

        if finished:
            self._finish(completed_mode)

    def _finish(self, completed_mode: TimerMode) -> None:
        logger.info("%s countdown completed", completed_mode.value)
        self._emit_state()
        try:
            self._on_complete(completed_mode)
        except Exception:
            logger.exception("completion callback failed for %s", completed_mode.value)
        self.completed.emit(completed_mode)

    def _cancel_task(self) -> None:
        if self._qt_timer.isActive():
            self._qt_timer.stop()

    def _emit_state(self) -> None:
        self.state_changed.emit(self.get_state())
