"""Session settings for juliarun.

Settings come from ``~/.juliarun/config.json`` and ``JULIARUN_*`` environment
variables, the environment taking precedence. They stand in for the "current
session" that unset tri-state options inherit from.
"""

import json
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from juliarun.models import RunnerSettings

log = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".juliarun"
CONFIG_FILE = CONFIG_DIR / "config.json"

ENV_PREFIX = "JULIARUN_"
ENV_FIELDS = ("julia", "compiled_modules", "code_coverage", "check_bounds", "depwarn")

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}
_INHERIT_VALUES = {"", "inherit", "default", "nothing"}


def parse_tristate(value: str) -> bool | str | None:
    """Parse a yes/no/inherit string; other words (e.g. ``error``) pass through."""
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    if normalized in _INHERIT_VALUES:
        return None
    return normalized


def _read_config_file(path: Path) -> dict[str, Any]:
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        log.debug("no config file at %s", path)
        return {}
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Invalid config in {path}: expected a JSON object")
    log.debug("loaded config from %s", path)
    return data


def _env_overrides(environ: Mapping[str, str]) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    for field in ENV_FIELDS:
        raw = environ.get(ENV_PREFIX + field.upper())
        if raw is None:
            continue
        overrides[field] = raw.strip() if field == "julia" else parse_tristate(raw)
        log.debug("%s%s=%r", ENV_PREFIX, field.upper(), raw)
    return overrides


def load_settings(
    config_file: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> RunnerSettings:
    """Load session settings from the config file and environment."""
    path = CONFIG_FILE if config_file is None else config_file
    data = _read_config_file(path)
    data.update(_env_overrides(os.environ if environ is None else environ))
    if not data.get("julia"):
        data.pop("julia", None)
    try:
        return RunnerSettings(**data)
    except ValidationError as e:
        raise ValueError(f"Invalid juliarun settings ({path}): {e}") from e
