"""`juliarun migratetest` command implementation."""

import argparse
import sys

from juliarun.cli.shared import add_debug_argument, configure_logging
from juliarun.migrate import MigrationError, migratetest


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="juliarun migratetest",
        description="Migrate [targets] in PATH/Project.toml to PATH/test/Project.toml",
    )
    add_debug_argument(parser)
    parser.add_argument("path", nargs="?", default=".", help="Package root (default: .)")
    return parser


def run(argv: list[str]) -> int:
    """Execute the migratetest command."""
    args = build_parser().parse_args(argv)
    configure_logging(args.debug)

    try:
        destination = migratetest(args.path)
    except MigrationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(f"Wrote {destination}")
    return 0
