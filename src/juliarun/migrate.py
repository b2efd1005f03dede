"""Move test-only dependencies from ``[targets]`` into ``test/Project.toml``."""

import json
import logging
import tomllib
from pathlib import Path
from typing import Any

from juliarun.run import PROJECT_FILE

log = logging.getLogger(__name__)


class MigrationError(ValueError):
    """The project cannot be migrated to a test/Project.toml setup."""


def _load_project(path: Path) -> dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except FileNotFoundError as e:
        raise MigrationError(f"No {PROJECT_FILE} found at {path}") from e
    except tomllib.TOMLDecodeError as e:
        raise MigrationError(f"Invalid TOML in {path}: {e}") from e
    except OSError as e:
        raise MigrationError(f"Unable to read {path}: {e}") from e


def _table(project: dict[str, Any], key: str) -> dict[str, Any]:
    value = project.get(key, {})
    if not isinstance(value, dict):
        raise MigrationError(f"[{key}] in {PROJECT_FILE} must be a table")
    return value


def collect_test_deps(project: dict[str, Any]) -> dict[str, str]:
    """Return ``{name: uuid}`` for the root package and its test target."""
    targets_table = _table(project, "targets")
    targets = targets_table.get("test")
    if not targets:
        raise MigrationError("No [targets] test entry to migrate")
    if not isinstance(targets, list):
        raise MigrationError("[targets] test must be a list of package names")

    extras = _table(project, "extras")
    deps = _table(project, "deps")
    result: dict[str, str] = {}

    name, uuid = project.get("name"), project.get("uuid")
    if name and uuid:
        result[name] = uuid

    for dep in targets:
        dep_uuid = extras.get(dep) or deps.get(dep)
        if not dep_uuid:
            raise MigrationError(f"No UUID found for test dependency {dep!r}")
        result[dep] = dep_uuid
    return result


def render_project(deps: dict[str, str]) -> str:
    lines = ["[deps]"]
    for name in sorted(deps):
        lines.append(f"{name} = {json.dumps(deps[name])}")
    return "\n".join(lines) + "\n"


def migratetest(path: Path | str = ".") -> Path:
    """Write ``path/test/Project.toml`` from ``[targets]`` in ``path/Project.toml``.

    The root Project.toml is not modified. Returns the written file.
    """
    root = Path(path)
    destination = root / "test" / PROJECT_FILE
    if destination.exists():
        raise MigrationError(f"{destination} already exists")

    deps = collect_test_deps(_load_project(root / PROJECT_FILE))
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(render_project(deps), encoding="utf-8")
    except OSError as e:
        raise MigrationError(f"Unable to write {destination}: {e}") from e
    log.info("wrote %s with %d dependencies", destination, len(deps))
    log.warning(
        "remove the test entries of [targets] and [extras] from %s",
        root / PROJECT_FILE,
    )
    return destination
