"""Exceptions that stop a running session early."""

EXIT_REASON = "Exiting"


class RunAborted(Exception):
    """Base exception for everything that ends a run before its last phase."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class ExitRequested(RunAborted):
    """Raised when ESC or Ctrl-C was read from the keyboard."""

    def __init__(self):
        super().__init__(EXIT_REASON)


class InputReadError(RunAborted):
    """Raised when reading from the keyboard stream fails."""

    def __init__(self, error: OSError):
        super().__init__(f"Error: {error}")
        self.error = error
