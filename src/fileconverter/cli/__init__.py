"""Command-line interface for fileconverter.

This package provides the Typer app for all CLI commands and user-facing output.

- app: The Typer application object, used by the console script entry point.
- Output goes through Rich consoles created by ConsoleManager so the
  ``--no-rich`` flag applies uniformly.
"""

from fileconverter.cli.commands import app, main

__all__ = ["app", "main"]
