"""Start a Julia child process and classify how it exited."""

import logging
import os
import shlex
import subprocess
from pathlib import Path

from juliarun.models import LaunchCommand, LaunchConfig, Outcome, OutcomeKind

log = logging.getLogger(__name__)

STRICT_LOAD_PATH = "@"


class SpawnError(RuntimeError):
    """The child process could not be started."""

    def __init__(self, executable: str, cause: OSError) -> None:
        super().__init__(f"Unable to start {executable}: {cause}")
        self.executable = executable
        self.cause = cause


def _yes_no(value: bool) -> str:
    return "yes" if value else "no"


def julia_flags(config: LaunchConfig) -> list[str]:
    """Translate a LaunchConfig into Julia command-line options."""
    flags = [f"--project={config.project}"]
    if config.fast:
        flags.append("--compile=min")
    if config.compiled_modules is not None:
        flags.append(f"--compiled-modules={_yes_no(config.compiled_modules)}")
    if config.code_coverage is not None:
        flags.append("--code-coverage=" + ("user" if config.code_coverage else "none"))
    if config.check_bounds is not None:
        flags.append(f"--check-bounds={_yes_no(config.check_bounds)}")
    if isinstance(config.depwarn, bool):
        flags.append(f"--depwarn={_yes_no(config.depwarn)}")
    elif config.depwarn is not None:
        flags.append(f"--depwarn={config.depwarn}")
    return flags


def launch_env(config: LaunchConfig, base: dict[str, str] | None = None) -> dict[str, str]:
    """Return the child environment for a LaunchConfig."""
    env = dict(os.environ if base is None else base)
    # --project must decide the active environment.
    env.pop("JULIA_PROJECT", None)
    if config.strict:
        env["JULIA_LOAD_PATH"] = STRICT_LOAD_PATH
    return env


def build_command(
    config: LaunchConfig,
    program: list[str],
    cwd: Path | str | None = None,
) -> LaunchCommand:
    """Assemble the argv, environment and working directory for one launch."""
    argv = [config.julia, *julia_flags(config), *program]
    return LaunchCommand(
        executable=config.julia,
        argv=argv,
        env=launch_env(config),
        cwd=str(cwd if cwd is not None else config.project),
    )


def classify_exit(config: LaunchConfig, exit_code: int) -> Outcome:
    """Classify an exit code; allowed exit codes take precedence over xfail."""
    if exit_code == 0:
        return Outcome(OutcomeKind.SUCCESS, exit_code)
    if config.exitcodes:
        if exit_code in config.exitcodes:
            return Outcome(OutcomeKind.SUCCESS, exit_code)
        return Outcome(OutcomeKind.FAILURE, exit_code)
    if config.xfail:
        return Outcome(OutcomeKind.EXPECTED_FAILURE, exit_code)
    return Outcome(OutcomeKind.FAILURE, exit_code)


def run_command(command: LaunchCommand) -> int:
    """Run a LaunchCommand to completion and return its exit code."""
    log.debug("running (cwd=%s): %s", command.cwd, shlex.join(command.argv))
    try:
        result = subprocess.run(
            command.argv,
            env=command.env,
            cwd=command.cwd,
            check=False,
        )
    except OSError as e:
        raise SpawnError(command.executable, e) from e
    log.debug("%s exited with %d", command.executable, result.returncode)
    return result.returncode


def launch(
    config: LaunchConfig,
    script: Path | str,
    *,
    args: list[str] | None = None,
) -> Outcome:
    """Run ``script`` in the configured project and classify the result.

    Blocks until the child exits. Raises SpawnError if the Julia executable
    cannot be started.
    """
    script_path = Path(script).absolute()
    command = build_command(config, [str(script_path), *(args or [])], cwd=script_path.parent)
    outcome = classify_exit(config, run_command(command))
    log.info("%s: %s", script_path, outcome)
    return outcome


def launch_code(config: LaunchConfig, code: str) -> Outcome:
    """Evaluate a Julia expression in the configured project."""
    command = build_command(config, ["-e", code])
    return classify_exit(config, run_command(command))
