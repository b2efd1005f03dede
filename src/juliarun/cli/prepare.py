"""`juliarun prepare` command implementation."""

import argparse
import sys

from juliarun.cli.shared import add_debug_argument, configure_logging, exit_status
from juliarun.launcher import SpawnError
from juliarun.run import prepare

COMMANDS = {"prepare": None, "prepare-test": "test", "prepare-docs": "docs"}


def build_parser(command: str) -> argparse.ArgumentParser:
    """Build parser for the prepare commands."""
    parser = argparse.ArgumentParser(
        prog=f"juliarun {command}",
        description="Instantiate a project, developing its parent project if needed",
    )
    add_debug_argument(parser)
    default_path = COMMANDS[command]
    if default_path is None:
        parser.add_argument("path", help="Directory containing Project.toml")
    else:
        parser.add_argument(
            "path",
            nargs="?",
            default=default_path,
            help=f"Directory containing Project.toml (default: {default_path})",
        )
    parser.add_argument(
        "--no-precompile",
        dest="precompile",
        action="store_false",
        help="Skip precompiling the project",
    )
    parser.add_argument(
        "--parent-project",
        help="Project to develop when there is no Manifest.toml (default: parent directory)",
    )
    return parser


def run(command: str, argv: list[str]) -> int:
    """Execute a prepare command."""
    args = build_parser(command).parse_args(argv)
    configure_logging(args.debug)

    try:
        outcome = prepare(
            args.path,
            precompile=args.precompile,
            parent_project=args.parent_project,
        )
    except (SpawnError, FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return exit_status(outcome)
