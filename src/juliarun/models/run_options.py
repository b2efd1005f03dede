"""Caller-supplied keyword options."""

from pathlib import Path
from typing import Annotated, Literal

from pydantic import BaseModel, BeforeValidator, ConfigDict


def normalize_depwarn(value: object) -> object:
    """Accept ``":error"`` and mixed case spellings of depwarn modes."""
    if isinstance(value, str):
        return value.strip().lstrip(":").lower()
    return value


# A symbol-like value such as "error" is passed through as --depwarn=<value>.
Depwarn = Annotated[bool | Literal["error"] | None, BeforeValidator(normalize_depwarn)]


class RunOptions(BaseModel):
    """Every recognised run option. ``None`` means the caller did not set it."""

    model_config = ConfigDict(extra="forbid")

    fast: bool | None = None
    prepare: bool | None = None
    compiled_modules: bool | None = None
    precompile: bool | None = None
    strict: bool | None = None
    code_coverage: bool | None = None
    check_bounds: bool | None = None
    depwarn: Depwarn = None
    xfail: bool | None = None
    exitcodes: list[int] | None = None
    parent_project: Path | None = None
