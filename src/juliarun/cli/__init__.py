"""Command-line interface for juliarun."""

from juliarun.cli.app import entrypoint, main

__all__ = ["entrypoint", "main"]
