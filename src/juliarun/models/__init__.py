"""Model package for juliarun."""

from juliarun.models.launch_command import LaunchCommand
from juliarun.models.launch_config import LaunchConfig
from juliarun.models.outcome import Outcome, OutcomeKind
from juliarun.models.run_options import Depwarn, RunOptions
from juliarun.models.runner_settings import DEFAULT_JULIA, RunnerSettings

__all__ = [
    "DEFAULT_JULIA",
    "Depwarn",
    "LaunchCommand",
    "LaunchConfig",
    "Outcome",
    "OutcomeKind",
    "RunOptions",
    "RunnerSettings",
]
