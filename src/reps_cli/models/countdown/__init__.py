"""Countdown mode - interactive rep timer for Reps."""

from .controller import CountdownController, run_in_terminal
from .keyboard import (
    KeyboardHandler,
    PollResult,
    WindowsKeyboardHandler,
    classify_keystrokes,
    open_keyboard,
)
from .ui import CountdownDisplay

__all__ = [
    "CountdownController",
    "CountdownDisplay",
    "KeyboardHandler",
    "PollResult",
    "WindowsKeyboardHandler",
    "classify_keystrokes",
    "open_keyboard",
    "run_in_terminal",
]
