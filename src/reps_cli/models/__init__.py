"""Data models for Reps."""

from .exceptions import ExitRequested, InputReadError, RunAborted
from .session import CountdownPhase, PhaseColor, RunOutcome, SessionConfig

__all__ = [
    "CountdownPhase",
    "ExitRequested",
    "InputReadError",
    "PhaseColor",
    "RunAborted",
    "RunOutcome",
    "SessionConfig",
]
