"""Session settings model for juliarun."""

from pydantic import BaseModel

from juliarun.models.run_options import Depwarn

DEFAULT_JULIA = "julia"


class RunnerSettings(BaseModel):
    """Ambient defaults inherited by options the caller leaves unset."""

    julia: str = DEFAULT_JULIA
    compiled_modules: bool | None = None
    code_coverage: bool | None = None
    check_bounds: bool | None = None
    depwarn: Depwarn = None
