"""Timer settings with JSON persistence.

Settings are stored at:
    ~/.config/FocusTimer/settings.json

Usage::

    settings = load_settings()
    settings.debug_mode = True
    save_settings(settings)
    engine = TimerEngine.from_settings(settings)

Only engine configuration lives here.  Countdown state is never saved.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, asdict, fields
from pathlib import Path


logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".config" / "FocusTimer"
SETTINGS_PATH = CONFIG_DIR / "settings.json"


@dataclass
class Settings:
    """All user-configurable preferences."""

    # ── timer ─────────────────────────────────────────────────────────
    tick_interval_ms: int = 1000
    custom_default_seconds: int = 25 * 60

    # ── diagnostics ───────────────────────────────────────────────────
    debug_mode: bool = False               # fast ticks + per-tick logging
    log_level: str = "WARNING"


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from disk, falling back to defaults."""
    path = path or SETTINGS_PATH
    if not path.exists():
        return Settings()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        # Only use keys that exist in the dataclass
        defaults = {f.name: f.default for f in fields(Settings)}
        filtered = {k: v for k, v in data.items() if k in defaults}
    except (OSError, ValueError, TypeError, AttributeError) as exc:
        logger.warning("ignoring unreadable settings file %s: %s", path, exc)
        return Settings()

    # bool is an int subclass, so compare exact types
    for key, value in list(filtered.items()):
        if type(value) is not type(defaults[key]):
            logger.warning(
                "ignoring setting %s=%r in %s: expected %s",
                key, value, path, type(defaults[key]).__name__,
            )
            del filtered[key]
    return Settings(**filtered)


def save_settings(settings: Settings, path: Path | None = None) -> None:
    """Write settings to disk as JSON."""
    path = path or SETTINGS_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(asdict(settings), indent=2) + "\n",
        encoding="utf-8",
    )


def configure_logging(level: str | int) -> None:
    """Set the level of the ``focustimer`` package logger."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logging.getLogger("focustimer").setLevel(level)
