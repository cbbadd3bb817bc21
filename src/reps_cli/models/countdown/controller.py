"""Phase sequencing with pause and exit handling."""

import time
from collections.abc import Callable

from rich.console import Console

from reps_cli.constants import INTRO_SECONDS, PAUSE_POLL_SECONDS, TICK_SECONDS
from reps_cli.models.exceptions import ExitRequested, RunAborted
from reps_cli.models.session import (
    INTRO_LABEL,
    RELAX_LABEL,
    CountdownPhase,
    PhaseColor,
    RunOutcome,
    SessionConfig,
    rep_label,
)
from reps_cli.utils.logger import get_logger

from .keyboard import PollResult, open_keyboard
from .ui import CountdownDisplay


class CountdownController:
    """Runs countdown phases one after another, one frame per second.

    The keyboard is polled once after every tick. Any key pauses the run,
    ESC or Ctrl-C ends it. Exit and read errors travel up as RunAborted
    and are turned into a RunOutcome by run_session.
    """

    def __init__(
        self,
        keyboard,
        display: CountdownDisplay,
        sleep: Callable[[float], None] | None = None,
    ):
        self.keyboard = keyboard
        self.display = display
        self.sleep = sleep or time.sleep
        self.logger = get_logger()

    def run_phase(self, label: str, color: PhaseColor, duration: int) -> None:
        """Count *duration* seconds down, rendering each second from duration to 1."""
        self.logger.debug("Phase %r: %ss", label, duration)
        phase = CountdownPhase(label=label, remaining_seconds=duration, color=color)
        while not phase.finished:
            self.display.show_phase(phase)
            self.sleep(TICK_SECONDS)
            self.handle_pause()
            phase.tick()

    def handle_pause(self) -> None:
        """Pause on any keystroke until another one arrives."""
        result = self.keyboard.drain()
        if result is PollResult.EXIT_REQUESTED:
            raise ExitRequested()
        if result is PollResult.EMPTY:
            return

        self.logger.info("Paused")
        self.display.show_pause()
        while True:
            result = self.keyboard.drain()
            if result is PollResult.EXIT_REQUESTED:
                raise ExitRequested()
            if result is PollResult.ACTIVITY:
                break
            self.sleep(PAUSE_POLL_SECONDS)
        self.logger.info("Resumed")

    def run_session(self, config: SessionConfig) -> RunOutcome:
        """Intro, then a rep and a rest phase per repetition."""
        self.logger.info(
            "Session start: %d reps x %ds, %ds rest, %ds total",
            config.num_reps,
            config.rep_time,
            config.relax_time,
            config.total_seconds,
        )
        try:
            self.run_phase(INTRO_LABEL, PhaseColor.BLUE, INTRO_SECONDS)
            for rep in range(1, config.num_reps + 1):
                self.run_phase(rep_label(rep, config.num_reps), PhaseColor.RED, config.rep_time)
                self.run_phase(RELAX_LABEL, PhaseColor.GREEN, config.relax_time)
        except RunAborted as e:
            self.logger.info("Session aborted: %s", e.reason)
            return RunOutcome.aborted(e.reason)
        except KeyboardInterrupt:
            # Only reachable when stdin is not a raw-mode terminal
            self.logger.info("Session interrupted")
            return RunOutcome.aborted(ExitRequested().reason)

        self.logger.info("Session completed")
        return RunOutcome.completed()


def run_in_terminal(config: SessionConfig, console: Console | None = None) -> RunOutcome:
    """Run a session with the terminal in raw mode, restoring it on every path."""
    display = CountdownDisplay(console)
    with open_keyboard() as keyboard, display.screen():
        controller = CountdownController(keyboard, display)
        return controller.run_session(config)
