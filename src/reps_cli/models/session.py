"""Session configuration, countdown phases and run outcomes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from reps_cli.constants import INTRO_SECONDS

INTRO_LABEL = "Starting in"
RELAX_LABEL = "Relax!"


class PhaseColor(str, Enum):
    """Label colors, valued as Rich style names."""

    BLUE = "blue"
    RED = "red"
    GREEN = "green"


class SessionConfig(BaseModel):
    """Immutable settings for one run, built from the command line."""

    model_config = ConfigDict(frozen=True)

    num_reps: int = Field(ge=1, description="Number of repetitions")
    rep_time: int = Field(ge=1, description="Seconds per repetition")
    relax_time: int = Field(ge=0, description="Seconds of rest after each rep")

    @property
    def total_seconds(self) -> int:
        """Seconds the whole run takes when never paused."""
        return INTRO_SECONDS + self.num_reps * (self.rep_time + self.relax_time)


def rep_label(rep: int, total: int) -> str:
    return f"Rep {rep}/{total}"


@dataclass
class CountdownPhase:
    """One labeled countdown, alive only while it is running."""

    label: str
    remaining_seconds: int
    color: PhaseColor

    @property
    def finished(self) -> bool:
        return self.remaining_seconds <= 0

    def tick(self) -> None:
        """Count one second down."""
        if self.remaining_seconds > 0:
            self.remaining_seconds -= 1


@dataclass(frozen=True)
class RunOutcome:
    """How a run ended: completed, or aborted with a reason."""

    status: Literal["completed", "aborted"]
    reason: str | None = None

    @classmethod
    def completed(cls) -> RunOutcome:
        return cls(status="completed")

    @classmethod
    def aborted(cls, reason: str) -> RunOutcome:
        return cls(status="aborted", reason=reason)

    @property
    def is_completed(self) -> bool:
        return self.status == "completed"

    @property
    def message(self) -> str:
        """Final line printed once the terminal is restored."""
        if self.is_completed:
            return "done"
        return self.reason or ""
