"""Shared test helpers for FocusTimer."""

from focustimer.timer.engine import TimerEngine


class SignalCollector:
    """Utility to capture pyqtSignal emissions into a list."""

    def __init__(self):
        self.items: list = []

    def slot(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __call__(self, *args):
        self.slot(*args)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None

    def clear(self):
        self.items.clear()


def advance(engine: TimerEngine, seconds: int) -> None:
    """Simulate *seconds* of wall-clock time.

    Fires the tick once per second, but only while the engine's QTimer
    is actually scheduled, exactly as the Qt event loop would.
    """
    for _ in range(seconds):
        if engine._qt_timer.isActive():
            engine._on_tick()
