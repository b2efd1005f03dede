"""Resolve caller options and session settings into a LaunchConfig."""

import logging
from pathlib import Path
from typing import TypeVar

from juliarun.models import LaunchConfig, RunnerSettings, RunOptions

log = logging.getLogger(__name__)

T = TypeVar("T")


def _first_set(*values: T | None) -> T | None:
    for value in values:
        if value is not None:
            return value
    return None


def resolve_prepare(options: RunOptions) -> bool:
    """Prepare unless told otherwise; fast mode only changes the default."""
    if options.prepare is not None:
        return options.prepare
    return not options.fast


def resolve_precompile(options: RunOptions, compiled_modules: bool | None) -> bool:
    """Disabled compiled modules always win over an explicit precompile."""
    if compiled_modules is False:
        if options.precompile:
            log.warning("precompile=True ignored because compiled_modules=False")
        return False
    if options.precompile is not None:
        return options.precompile
    return True


def resolve_launch_config(
    project: Path | str,
    options: RunOptions | None = None,
    settings: RunnerSettings | None = None,
) -> LaunchConfig:
    """Build a fully resolved LaunchConfig.

    Unset tri-state options inherit from the session ``settings``; anything
    still unset after that is left as ``None`` so that no flag is passed and
    the child process uses the runtime default.
    """
    options = options or RunOptions()
    settings = settings or RunnerSettings()

    compiled_modules = _first_set(options.compiled_modules, settings.compiled_modules)
    config = LaunchConfig(
        project=Path(project).absolute(),
        julia=settings.julia,
        fast=bool(options.fast),
        prepare=resolve_prepare(options),
        compiled_modules=compiled_modules,
        precompile=resolve_precompile(options, compiled_modules),
        strict=_first_set(options.strict, True),
        code_coverage=_first_set(options.code_coverage, settings.code_coverage),
        check_bounds=_first_set(options.check_bounds, settings.check_bounds),
        depwarn=_first_set(options.depwarn, settings.depwarn),
        xfail=bool(options.xfail),
        exitcodes=frozenset(options.exitcodes or ()),
        parent_project=options.parent_project,
    )
    log.debug("resolved launch config: %s", config)
    return config
