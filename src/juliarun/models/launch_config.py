"""Resolved launch configuration model."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, model_validator

from juliarun.models.run_options import Depwarn
from juliarun.models.runner_settings import DEFAULT_JULIA


class LaunchConfig(BaseModel):
    """Fully resolved options for one Julia subprocess invocation.

    Tri-state fields use ``True``/``False`` for an explicit yes/no and
    ``None`` to inherit the runtime default (no flag is passed).
    """

    model_config = ConfigDict(frozen=True)

    project: Path
    julia: str = DEFAULT_JULIA
    fast: bool = False
    prepare: bool = True
    compiled_modules: bool | None = None
    precompile: bool = True
    strict: bool = True
    code_coverage: bool | None = None
    check_bounds: bool | None = None
    depwarn: Depwarn = None
    xfail: bool = False
    exitcodes: frozenset[int] = frozenset()
    parent_project: Path | None = None

    @model_validator(mode="after")
    def _no_precompile_without_compiled_modules(self) -> "LaunchConfig":
        if self.compiled_modules is False and self.precompile:
            raise ValueError("precompile must be False when compiled_modules is False")
        return self
