"""Non-blocking keyboard polling for the countdown controls."""

import os
import select
import sys
from enum import Enum
from typing import Optional

from reps_cli.constants import EXIT_KEYS, READ_CHUNK_SIZE
from reps_cli.models.exceptions import InputReadError
from reps_cli.utils.logger import get_logger

if sys.platform != "win32":
    import termios
    import tty


class PollResult(Enum):
    """What the keystrokes buffered since the last poll amount to."""

    EMPTY = "empty"
    ACTIVITY = "activity"
    EXIT_REQUESTED = "exit_requested"


def classify_keystrokes(data: bytes) -> PollResult:
    """Classify a drained batch of keystrokes. An exit key anywhere wins."""
    if not data:
        return PollResult.EMPTY
    if any(byte in EXIT_KEYS for byte in data):
        return PollResult.EXIT_REQUESTED
    return PollResult.ACTIVITY


class KeyboardHandler:
    """Raw-mode stdin reader that never blocks."""

    def __init__(self):
        self.fd = sys.stdin.fileno()
        self.old_settings: Optional[list] = None
        self._stopped = False
        self._setup()

    def _setup(self):
        """Switch the terminal to raw, non-echoing input."""
        try:
            self.old_settings = termios.tcgetattr(self.fd)
        except termios.error as e:
            get_logger().warning("stdin is not a terminal, keeping its mode: %s", e)
            return

        mode = list(self.old_settings)
        mode[tty.CC] = list(mode[tty.CC])
        mode[tty.IFLAG] &= ~(termios.ICRNL | termios.IXON)
        # ISIG off: Ctrl-C reaches us as byte 3 instead of SIGINT
        mode[tty.LFLAG] &= ~(termios.ECHO | termios.ICANON | termios.ISIG | termios.IEXTEN)
        mode[tty.CC][termios.VMIN] = 0
        mode[tty.CC][termios.VTIME] = 0
        termios.tcsetattr(self.fd, termios.TCSAFLUSH, mode)

    def _read_pending(self) -> bytes:
        """Read every byte currently buffered, returning immediately."""
        chunks = []
        try:
            while select.select([self.fd], [], [], 0)[0]:
                chunk = os.read(self.fd, READ_CHUNK_SIZE)
                if not chunk:
                    # EOF
                    break
                chunks.append(chunk)
        except OSError as e:
            get_logger().error("Reading keyboard input failed: %s", e)
            raise InputReadError(e) from e
        return b"".join(chunks)

    def drain(self) -> PollResult:
        """Consume all pending keystrokes and classify them."""
        return classify_keystrokes(self._read_pending())

    def stop(self):
        """Restore terminal settings. Safe to call more than once."""
        if self._stopped:
            return
        self._stopped = True
        if self.old_settings:
            termios.tcsetattr(self.fd, termios.TCSADRAIN, self.old_settings)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.stop()


class WindowsKeyboardHandler:
    """Keyboard handler for Windows using msvcrt."""

    def __init__(self):
        try:
            import msvcrt

            self.msvcrt = msvcrt
        except ImportError:
            self.msvcrt = None

    def _read_pending(self) -> bytes:
        if not self.msvcrt:
            return b""

        chunks = []
        try:
            while self.msvcrt.kbhit():
                key = self.msvcrt.getch()
                if isinstance(key, str):
                    key = key.encode("utf-8", errors="ignore")
                chunks.append(key)
        except OSError as e:
            raise InputReadError(e) from e
        return b"".join(chunks)

    def drain(self) -> PollResult:
        return classify_keystrokes(self._read_pending())

    def stop(self):
        """No cleanup needed on Windows."""
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.stop()


def open_keyboard():
    """Create the keyboard handler for the current platform."""
    if sys.platform == "win32":
        return WindowsKeyboardHandler()
    return KeyboardHandler()
