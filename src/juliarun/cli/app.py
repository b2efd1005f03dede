"""Top-level CLI router."""

import sys

from juliarun import __version__

from . import migrate as migrate_cmd
from . import prepare as prepare_cmd
from . import run as run_cmd

USAGE = """usage: juliarun <command> [options]

commands:
  test [PATH]          run PATH/runtests.jl (default: test)
  docs [PATH]          run PATH/make.jl (default: docs)
  script PATH          run a Julia script in its project
  prepare PATH         instantiate PATH/Project.toml
  prepare-test [PATH]  prepare the test project (default: test)
  prepare-docs [PATH]  prepare the docs project (default: docs)
  migratetest [PATH]   move [targets] test deps into test/Project.toml

Run `juliarun <command> --help` for command options."""


def main(argv: list[str] | None = None) -> int:
    """Route to the requested subcommand."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args or args[0] in {"-h", "--help"}:
        print(USAGE)
        return 0 if args else 2
    command, rest = args[0], args[1:]
    if command in {"-V", "--version"}:
        print(f"juliarun {__version__}")
        return 0
    if command in run_cmd.COMMANDS:
        return run_cmd.run(command, rest)
    if command in prepare_cmd.COMMANDS:
        return prepare_cmd.run(command, rest)
    if command == "migratetest":
        return migrate_cmd.run(rest)
    print(f"Error: unknown command {command!r}\n\n{USAGE}", file=sys.stderr)
    return 2


def entrypoint() -> None:
    """Console script entrypoint."""
    raise SystemExit(main())
