"""`juliarun test|docs|script` command implementation."""

import argparse
import sys
from typing import Any

from juliarun.cli.shared import (
    add_debug_argument,
    configure_logging,
    depwarn_mode,
    exit_status,
    yes_no,
)
from juliarun.launcher import SpawnError
from juliarun.run import docs, script, test

COMMANDS = {
    "test": ("test", "Run PATH/runtests.jl after activating PATH/Project.toml"),
    "docs": ("docs", "Run PATH/make.jl after activating PATH/Project.toml"),
    "script": (None, "Run the Julia script PATH after activating its project"),
}

OPTION_NAMES = (
    "fast",
    "prepare",
    "compiled_modules",
    "precompile",
    "strict",
    "code_coverage",
    "check_bounds",
    "depwarn",
    "xfail",
    "exitcodes",
    "parent_project",
)


def build_parser(command: str) -> argparse.ArgumentParser:
    """Build parser for the script-running commands."""
    default_path, description = COMMANDS[command]
    parser = argparse.ArgumentParser(prog=f"juliarun {command}", description=description)
    add_debug_argument(parser)
    if default_path is None:
        parser.add_argument("path", help="Julia script to run")
    else:
        parser.add_argument(
            "path",
            nargs="?",
            default=default_path,
            help=f"Directory or script file (default: {default_path})",
        )
    parser.add_argument(
        "--fast",
        action="store_true",
        default=None,
        help="Skip preparation and pass --compile=min to Julia",
    )
    prepare_group = parser.add_mutually_exclusive_group()
    prepare_group.add_argument(
        "--prepare",
        action="store_true",
        default=None,
        help="Instantiate the project before running (default unless --fast)",
    )
    prepare_group.add_argument(
        "--no-prepare",
        dest="prepare",
        action="store_false",
        help="Do not instantiate the project before running",
    )
    precompile_group = parser.add_mutually_exclusive_group()
    precompile_group.add_argument(
        "--precompile",
        action="store_true",
        default=None,
        help="Precompile during preparation (default unless --compiled-modules=no)",
    )
    precompile_group.add_argument(
        "--no-precompile",
        dest="precompile",
        action="store_false",
        help="Do not precompile during preparation",
    )
    parser.add_argument(
        "--compiled-modules",
        type=yes_no,
        metavar="yes|no",
        help="Pass --compiled-modules to Julia; no also disables precompilation",
    )
    parser.add_argument(
        "--no-strict",
        dest="strict",
        action="store_false",
        default=None,
        help="Keep the default environments in JULIA_LOAD_PATH",
    )
    parser.add_argument("--code-coverage", type=yes_no, metavar="yes|no")
    parser.add_argument("--check-bounds", type=yes_no, metavar="yes|no")
    parser.add_argument("--depwarn", type=depwarn_mode, metavar="yes|no|error")
    parser.add_argument(
        "--xfail",
        action="store_true",
        default=None,
        help="Treat a non-zero exit code as success",
    )
    parser.add_argument(
        "--exitcode",
        dest="exitcodes",
        type=int,
        action="append",
        metavar="N",
        help="Allowed exit code (repeatable); --xfail is ignored when given",
    )
    parser.add_argument("--project", help="Project to use instead of the script's directory")
    parser.add_argument("--parent-project", help="Project to develop when there is no manifest")
    return parser


def split_script_args(argv: list[str]) -> tuple[list[str], list[str]]:
    """Split ``argv`` at the first ``--``; the tail is passed to the script."""
    if "--" not in argv:
        return argv, []
    index = argv.index("--")
    return argv[:index], argv[index + 1 :]


def collect_options(args: argparse.Namespace) -> dict[str, Any]:
    """Return only the run options given on the command line."""
    options = {name: getattr(args, name) for name in OPTION_NAMES}
    return {name: value for name, value in options.items() if value is not None}


def run(command: str, argv: list[str]) -> int:
    """Execute a script-running command and return the process exit status."""
    argv, script_args = split_script_args(argv)
    args = build_parser(command).parse_args(argv)
    configure_logging(args.debug)

    runner = {"test": test, "docs": docs, "script": script}[command]
    options = collect_options(args)
    if args.project is not None:
        options["project"] = args.project
    if script_args:
        options["args"] = script_args

    try:
        outcome = runner(args.path, **options)
    except (SpawnError, FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not outcome.ok:
        print(f"{args.path}: {outcome}", file=sys.stderr)
        return exit_status(outcome)
    return 0
