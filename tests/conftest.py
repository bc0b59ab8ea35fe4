"""Shared pytest fixtures for FocusTimer tests."""

import sys
import pytest

from PyQt6.QtCore import QCoreApplication

from focustimer.timer.engine import TimerEngine


@pytest.fixture(scope="session")
def qapp():
    """A single Qt application instance shared across the entire test run."""
    app = QCoreApplication.instance() or QCoreApplication(sys.argv)
    yield app


@pytest.fixture
def engine(qapp):
    """Fresh TimerEngine with no completion callback."""
    e = TimerEngine()
    yield e
    e.shutdown()


@pytest.fixture
def completions():
    """A list that records every completion callback invocation."""
    return []


@pytest.fixture
def engine_cb(qapp, completions):
    """Fresh TimerEngine whose callback appends to ``completions``."""
    e = TimerEngine(completions.append)
    yield e
    e.shutdown()
