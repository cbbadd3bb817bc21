"""Full-screen rendering of countdown frames."""

from collections.abc import Iterator
from contextlib import contextmanager

from rich.console import Console
from rich.text import Text

from reps_cli.constants import ACCENT_STYLE
from reps_cli.models.session import CountdownPhase

PAUSE_MESSAGE = "PAUSE"


class CountdownDisplay:
    """Draws one countdown frame at a time in the top-left corner."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console(highlight=False)

    def prepare(self) -> None:
        """Clear the screen and hide the cursor for the run."""
        self.console.clear(home=True)
        self.console.show_cursor(False)

    def create_frame(self, phase: CountdownPhase) -> Text:
        """Label line in the phase color, remaining seconds below it."""
        frame = Text()
        frame.append(phase.label, style=phase.color.value)
        frame.append("\n")
        frame.append(f"{phase.remaining_seconds}s", style=ACCENT_STYLE)
        return frame

    def show_phase(self, phase: CountdownPhase) -> None:
        self.console.clear()
        self.console.print(self.create_frame(phase))

    def show_pause(self) -> None:
        self.console.clear()
        self.console.print(Text(PAUSE_MESSAGE))

    def restore(self) -> None:
        """Leave the terminal usable: blank, cursor visible, default color."""
        self.console.clear()
        self.console.show_cursor(True)
        self.console.file.flush()

    @contextmanager
    def screen(self) -> Iterator["CountdownDisplay"]:
        """Own the screen for a run and always give it back."""
        self.prepare()
        try:
            yield self
        finally:
            self.restore()
