"""Launch outcome model."""

from dataclasses import dataclass
from enum import Enum


class OutcomeKind(str, Enum):
    SUCCESS = "success"
    EXPECTED_FAILURE = "expected-failure"
    FAILURE = "failure"


@dataclass(frozen=True)
class Outcome:
    """Classification of a finished child process."""

    kind: OutcomeKind
    exit_code: int

    @property
    def ok(self) -> bool:
        return self.kind is not OutcomeKind.FAILURE

    def __str__(self) -> str:
        if self.kind is OutcomeKind.FAILURE:
            return f"failure (exit code {self.exit_code})"
        return self.kind.value
