"""Shared CLI helpers."""

import argparse
import logging

from juliarun.config import parse_tristate
from juliarun.models import Outcome


def configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )


def yes_no(value: str) -> bool | None:
    """argparse type for yes/no/inherit options."""
    parsed = parse_tristate(value)
    if isinstance(parsed, str):
        raise argparse.ArgumentTypeError(f"expected yes, no or inherit, got {value!r}")
    return parsed


def depwarn_mode(value: str) -> bool | str | None:
    """argparse type for --depwarn: yes, no, error or inherit."""
    parsed = parse_tristate(value)
    if isinstance(parsed, str) and parsed.lstrip(":") != "error":
        raise argparse.ArgumentTypeError(f"expected yes, no, error or inherit, got {value!r}")
    return parsed


def add_debug_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")


def exit_status(outcome: Outcome) -> int:
    """Map an outcome to a process exit status; signals become 1."""
    if outcome.ok:
        return 0
    return outcome.exit_code if outcome.exit_code > 0 else 1
