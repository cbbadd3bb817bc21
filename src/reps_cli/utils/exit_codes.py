"""
Exit codes for Reps.

A run stopped with ESC or Ctrl-C is an intentional cancel, not a failure,
so it shares SUCCESS with a completed run.
"""

from reps_cli.models.session import RunOutcome

# Success (completed or cancelled run)
SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# Invalid or missing arguments
ERROR_INVALID_ARGS = 2


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_GENERAL: "ERROR_GENERAL",
        ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
    }
    return code_names.get(code, f"UNKNOWN({code})")


def exit_code_for(outcome: RunOutcome) -> int:
    """Map a run outcome to the process exit code."""
    return SUCCESS
