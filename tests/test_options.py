"""Unit tests for juliarun.options and the LaunchConfig model."""

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from juliarun.models import LaunchConfig, RunnerSettings, RunOptions
from juliarun.options import resolve_launch_config


def resolve(settings=None, **options):
    return resolve_launch_config("test", RunOptions(**options), settings)


class TestDefaults:
    def test_unset_options(self):
        config = resolve()
        assert config.fast is False
        assert config.prepare is True
        assert config.precompile is True
        assert config.strict is True
        assert config.xfail is False
        assert config.exitcodes == frozenset()
        assert config.compiled_modules is None
        assert config.code_coverage is None
        assert config.check_bounds is None
        assert config.depwarn is None
        assert config.julia == "julia"

    def test_project_is_absolute(self):
        config = resolve_launch_config("test")
        assert config.project.is_absolute()
        assert config.project == Path("test").absolute()


class TestFastPrecedence:
    def test_fast_skips_prepare(self):
        config = resolve(fast=True)
        assert config.fast is True
        assert config.prepare is False

    def test_explicit_prepare_wins_over_fast(self):
        assert resolve(fast=True, prepare=True).prepare is True

    def test_explicit_no_prepare_without_fast(self):
        assert resolve(prepare=False).prepare is False

    def test_fast_does_not_change_precompile(self):
        assert resolve(fast=True, prepare=True).precompile is True


class TestPrecompilePrecedence:
    def test_disabled_compiled_modules_forces_precompile_off(self):
        config = resolve(compiled_modules=False)
        assert config.compiled_modules is False
        assert config.precompile is False

    def test_disabled_compiled_modules_overrides_explicit_precompile(self, caplog):
        with caplog.at_level(logging.WARNING, logger="juliarun.options"):
            config = resolve(compiled_modules=False, precompile=True)
        assert config.precompile is False
        assert "precompile=True ignored" in caplog.text

    def test_session_compiled_modules_also_forces_precompile_off(self):
        config = resolve(RunnerSettings(compiled_modules=False), precompile=True)
        assert config.precompile is False

    def test_explicit_precompile_off(self):
        assert resolve(precompile=False).precompile is False

    def test_enabled_compiled_modules_keeps_precompile(self):
        assert resolve(compiled_modules=True).precompile is True

    def test_model_rejects_precompile_with_disabled_compiled_modules(self):
        with pytest.raises(ValidationError):
            LaunchConfig(project=Path("/p"), compiled_modules=False, precompile=True)


class TestSessionInheritance:
    def test_unset_tristates_inherit_session_settings(self):
        settings = RunnerSettings(
            julia="/opt/julia/bin/julia",
            code_coverage=False,
            check_bounds=True,
            depwarn="error",
        )
        config = resolve(settings)
        assert config.julia == "/opt/julia/bin/julia"
        assert config.code_coverage is False
        assert config.check_bounds is True
        assert config.depwarn == "error"

    def test_explicit_options_win_over_session(self):
        settings = RunnerSettings(check_bounds=True, depwarn=True)
        config = resolve(settings, check_bounds=False, depwarn=False)
        assert config.check_bounds is False
        assert config.depwarn is False


class TestOptionValues:
    def test_unknown_option_is_rejected(self):
        with pytest.raises(ValidationError):
            RunOptions(compile_modules=False)

    def test_exitcodes_become_frozenset(self):
        assert resolve(exitcodes=[2, 3, 2]).exitcodes == frozenset({2, 3})

    def test_depwarn_symbol_spelling(self):
        assert resolve(depwarn=":error").depwarn == "error"

    def test_unknown_depwarn_mode_is_rejected(self):
        with pytest.raises(ValidationError):
            RunOptions(depwarn="loud")

    def test_non_strict(self):
        assert resolve(strict=False).strict is False

    def test_config_is_immutable(self):
        config = resolve()
        with pytest.raises(ValidationError):
            config.fast = True
