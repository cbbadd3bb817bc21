"""Unit tests for models/countdown/ui.py."""

from __future__ import annotations

from io import StringIO

import pytest
from rich.console import Console

from reps_cli.models.countdown.ui import PAUSE_MESSAGE, CountdownDisplay
from reps_cli.models.session import CountdownPhase, PhaseColor

CLEAR = "\x1b[2J"
HOME = "\x1b[H"
HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"


@pytest.fixture()
def console(monkeypatch):
    monkeypatch.setenv("TERM", "xterm-256color")
    return Console(file=StringIO(), force_terminal=True, color_system="standard", width=40)


@pytest.fixture()
def display(console):
    return CountdownDisplay(console)


def _output(console) -> str:
    return console.file.getvalue()


def _phase(label="Rep 1/2", remaining=3, color=PhaseColor.RED):
    return CountdownPhase(label=label, remaining_seconds=remaining, color=color)


class TestCreateFrame:
    def test_label_then_seconds(self, display):
        frame = display.create_frame(_phase())
        assert frame.plain == "Rep 1/2\n3s"

    def test_label_uses_phase_color(self, display):
        frame = display.create_frame(_phase(color=PhaseColor.GREEN))
        assert str(frame.spans[0].style) == "green"

    def test_seconds_use_accent_color(self, display):
        frame = display.create_frame(_phase(color=PhaseColor.RED))
        assert str(frame.spans[-1].style) == "blue"


class TestShowPhase:
    def test_clears_and_homes_before_frame(self, display, console):
        display.show_phase(_phase(label="Starting in", remaining=2, color=PhaseColor.BLUE))

        output = _output(console)
        assert output.startswith(CLEAR + HOME)
        assert "Starting in" in output
        assert "2s" in output

    def test_only_latest_frame_after_clear(self, display, console):
        display.show_phase(_phase(remaining=2))
        display.show_phase(_phase(remaining=1))

        last = _output(console).rsplit(CLEAR, 1)[-1]
        assert "1s" in last
        assert "2s" not in last


class TestShowPause:
    def test_pause_message(self, display, console):
        display.show_pause()

        output = _output(console)
        assert output.startswith(CLEAR + HOME)
        assert PAUSE_MESSAGE in output


class TestScreen:
    def test_hides_then_shows_cursor(self, display, console):
        with display.screen():
            assert HIDE_CURSOR in _output(console)
            assert SHOW_CURSOR not in _output(console)

        assert _output(console).endswith(SHOW_CURSOR)

    def test_restores_on_error(self, display, console):
        with pytest.raises(RuntimeError):
            with display.screen():
                raise RuntimeError("boom")

        assert SHOW_CURSOR in _output(console)

    def test_non_terminal_console_writes_no_control_codes(self):
        console = Console(file=StringIO(), force_terminal=False)
        display = CountdownDisplay(console)

        with display.screen():
            display.show_phase(_phase())

        output = console.file.getvalue()
        assert "\x1b" not in output
        assert "Rep 1/2" in output
