"""Main entry point for Reps."""

import sys

import typer

from reps_cli import __version__
from reps_cli.models.countdown import run_in_terminal
from reps_cli.models.session import SessionConfig
from reps_cli.utils.exit_codes import (
    ERROR_GENERAL,
    ERROR_INVALID_ARGS,
    exit_code_for,
    get_exit_code_name,
)
from reps_cli.utils.logger import get_logger
from reps_cli.utils.ui.console import get_console

app = typer.Typer(
    name="reps",
    help="Full-screen countdown for timed workout repetitions",
    add_completion=False,
)

# Parent of typer.BadParameter: every argument parsing error Typer raises
UsageError = typer.BadParameter.__mro__[1]

console = get_console()


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"reps {__version__}")
        raise typer.Exit()


@app.command()
def start(
    num_reps: int = typer.Argument(..., min=1, help="Number of repetitions"),
    rep_time: int = typer.Argument(..., min=1, help="Seconds per repetition"),
    relax_time: int = typer.Argument(..., min=0, help="Seconds of rest after each rep"),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Count down NUM_REPS reps of REP_TIME seconds with RELAX_TIME seconds of rest.

    Press any key to pause, any key again to resume, ESC or Ctrl-C to quit.
    """
    config = SessionConfig(num_reps=num_reps, rep_time=rep_time, relax_time=relax_time)
    outcome = run_in_terminal(config, console=console)

    console.print(outcome.message)
    code = exit_code_for(outcome)
    get_logger().info("Exit %s: %s", get_exit_code_name(code), outcome.message)
    raise typer.Exit(code)


def main():
    """Main entry point."""
    try:
        code = app(standalone_mode=False)
    except UsageError as e:
        get_logger().warning("Bad arguments: %s", e.format_message())
        e.show(file=sys.stdout)
        sys.exit(e.exit_code or ERROR_INVALID_ARGS)
    except typer.Abort:
        sys.exit(ERROR_GENERAL)
    sys.exit(code or 0)


if __name__ == "__main__":
    main()
