"""Command-line interface for glyphpath.

This module provides the CLI using Typer with rich output for
error reporting.

Key features:
- Two positional arguments: font path and character
- Result on stdout, errors and logs on stderr
- Distinct messages for each failure step
"""

from glyphpath.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
