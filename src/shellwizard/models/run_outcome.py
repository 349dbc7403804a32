"""Result model for the confirm-then-execute step."""

from dataclasses import dataclass, field
from enum import Enum


class RunStatus(str, Enum):
    """Terminal states of a confirmation run."""

    ABORTED = "aborted"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass
class RunOutcome:
    """What happened to the suggested commands after the user was asked."""

    status: RunStatus
    executed: list[str] = field(default_factory=list)
    failed_command: str | None = None
    returncode: int | None = None
    error: str | None = None
