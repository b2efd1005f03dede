"""Run scripts, tests and docs builds in isolated project environments."""

import json
import logging
from pathlib import Path
from typing import Any

from juliarun.config import load_settings
from juliarun.launcher import launch, launch_code
from juliarun.models import LaunchConfig, Outcome, RunnerSettings, RunOptions
from juliarun.options import resolve_launch_config

log = logging.getLogger(__name__)

PROJECT_FILE = "Project.toml"
MANIFEST_FILE = "Manifest.toml"
TEST_SCRIPT = "runtests.jl"
DOCS_SCRIPT = "make.jl"
TEST_DEFAULTS = {"code_coverage": True, "check_bounds": True, "depwarn": True}


def _julia_string(value: str) -> str:
    """Quote a Python string as a Julia string literal."""
    return json.dumps(value).replace("$", "\\$")


def _project_dir(project: Path | str) -> Path:
    path = Path(project)
    if path.name == PROJECT_FILE:
        return path.parent
    return path


def _entry_script(path: Path | str, default_name: str) -> Path:
    """Return ``path`` itself for a file, or ``path/default_name`` for a directory."""
    path = Path(path)
    if path.is_dir():
        return path / default_name
    return path


def prepare_code(project: Path, *, precompile: bool, parent_project: Path | None) -> str:
    """Return the Julia code that instantiates ``project``."""
    lines = ["using Pkg"]
    if not (project / MANIFEST_FILE).exists():
        parent = parent_project if parent_project is not None else project.parent
        parent = _project_dir(parent).absolute()
        if (parent / PROJECT_FILE).is_file():
            log.debug("%s has no manifest; developing %s", project, parent)
            lines.append(f"Pkg.develop(PackageSpec(path={_julia_string(str(parent))}))")
        else:
            log.warning("no %s in parent project %s; skipping develop", PROJECT_FILE, parent)
    lines.append("Pkg.instantiate()")
    if precompile:
        lines.append("Pkg.precompile()")
    return "; ".join(lines)


def prepare(
    path: Path | str,
    *,
    precompile: bool = True,
    parent_project: Path | str | None = None,
    julia: str | None = None,
    settings: RunnerSettings | None = None,
) -> Outcome:
    """Instantiate ``path/Project.toml``, developing the parent project if needed.

    ``julia`` overrides the executable from the session settings.
    """
    project = _project_dir(path).absolute()
    if not (project / PROJECT_FILE).is_file():
        raise FileNotFoundError(f"No {PROJECT_FILE} found in {project}")
    settings = settings or load_settings()

    config = LaunchConfig(
        project=project,
        julia=julia or settings.julia,
        prepare=False,
        precompile=precompile,
        strict=False,
    )
    code = prepare_code(
        project,
        precompile=precompile,
        parent_project=Path(parent_project) if parent_project is not None else None,
    )
    log.info("preparing %s", project)
    outcome = launch_code(config, code)
    if not outcome.ok:
        log.error("preparing %s failed: %s", project, outcome)
    return outcome


def prepare_test(path: Path | str = "test", **kwargs: Any) -> Outcome:
    """Alias of ``prepare("test")``."""
    return prepare(path, **kwargs)


def prepare_docs(path: Path | str = "docs", **kwargs: Any) -> Outcome:
    """Alias of ``prepare("docs")``."""
    return prepare(path, **kwargs)


def script(
    path: Path | str,
    *,
    project: Path | str | None = None,
    args: list[str] | None = None,
    settings: RunnerSettings | None = None,
    **options: Any,
) -> Outcome:
    """Run the Julia script at ``path`` after activating its project.

    The project defaults to the directory containing the script. Keyword
    options are those of RunOptions. When preparation is enabled and fails,
    its outcome is returned and the script is not run.
    """
    script_path = Path(path)
    if not script_path.is_file():
        raise FileNotFoundError(f"No such script: {script_path}")
    project_dir = _project_dir(project) if project is not None else script_path.parent
    if not project_dir.is_dir():
        raise FileNotFoundError(f"No such project directory: {project_dir}")
    settings = settings or load_settings()

    config = resolve_launch_config(project_dir, RunOptions(**options), settings)
    if config.prepare:
        prepared = prepare(
            config.project,
            precompile=config.precompile,
            parent_project=config.parent_project,
            julia=config.julia,
            settings=settings,
        )
        if not prepared.ok:
            return prepared
    return launch(config, script_path, args=args)


def test(path: Path | str = "test", **options: Any) -> Outcome:
    """Run ``path/runtests.jl`` with coverage, bounds checks and depwarn enabled.

    ``path`` can also point at a script file.
    """
    for name, value in TEST_DEFAULTS.items():
        if options.get(name) is None:
            options[name] = value
    return script(_entry_script(path, TEST_SCRIPT), **options)


def docs(path: Path | str = "docs", **options: Any) -> Outcome:
    """Run ``path/make.jl``; ``path`` can also point at a script file."""
    return script(_entry_script(path, DOCS_SCRIPT), **options)
