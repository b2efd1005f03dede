"""Concrete process launch model."""

from dataclasses import dataclass


@dataclass
class LaunchCommand:
    """How to start one Julia child process."""

    executable: str
    argv: list[str]
    env: dict[str, str]
    cwd: str
