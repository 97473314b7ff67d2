"""Command-line interface for polyshaper.

This module provides the CLI using Typer with rich output for
inspecting shapes and boolean operations from the shell.

Key features:
- Letter and rectangle shape construction
- Boolean combination, merge and difference of inline polygons
- Verbose/quiet output modes
- Detailed error reporting
"""

from polyshaper.cli.app import cli, main

__all__ = ["cli", "main"]
