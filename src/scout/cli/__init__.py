"""CLI package for Project Scout.

This package provides the command-line interface using Typer.
The CLI is a thin wrapper around the commands layer.
"""

from scout.cli.app import app, console

__all__ = ["app", "console"]
