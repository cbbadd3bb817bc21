"""Shared test fixtures and configuration.

Keeps the application log out of the real user log directory and provides
stand-ins for the keyboard and the display so countdowns run instantly.
"""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

from reps_cli.models.countdown.keyboard import PollResult


@pytest.fixture(autouse=True)
def isolated_logger(tmp_path):
    """Point the logger at *tmp_path* and reset its singleton around each test."""
    import reps_cli.utils.logger as logger_mod

    logger_mod._logger = None
    logging.getLogger("reps_cli").handlers.clear()

    with patch("reps_cli.utils.logger.user_log_dir", return_value=str(tmp_path / "logs")):
        yield

    for handler in logging.getLogger("reps_cli").handlers:
        handler.close()
    logging.getLogger("reps_cli").handlers.clear()
    logger_mod._logger = None


class FakeKeyboard:
    """Returns scripted poll results, then EMPTY forever.

    An exception instance in the script is raised instead of returned.
    """

    def __init__(self, script=()):
        self.script = list(script)
        self.calls = 0
        self.stopped = False

    def drain(self) -> PollResult:
        self.calls += 1
        if not self.script:
            return PollResult.EMPTY
        item = self.script.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item

    def stop(self):
        self.stopped = True

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.stop()


class RecordingDisplay:
    """Records frames instead of drawing them."""

    def __init__(self):
        self.events: list[tuple] = []

    def show_phase(self, phase):
        self.events.append(("frame", phase.label, phase.remaining_seconds, phase.color))

    def show_pause(self):
        self.events.append(("pause",))

    @property
    def frames(self) -> list[tuple]:
        return [e for e in self.events if e[0] == "frame"]


@pytest.fixture()
def display():
    return RecordingDisplay()


@pytest.fixture()
def sleeps():
    """List that collects every requested sleep duration."""
    return []


@pytest.fixture()
def make_keyboard():
    """Factory for FakeKeyboard instances with a poll script."""
    return FakeKeyboard
