"""Command-line interface for regionizer.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- solve: write verified regions as text or JSON
- inspect: arrangement statistics and the area check
- Quiet mode for scripting
- Detailed error reporting
"""

from regionizer.cli.app import cli

__all__ = ["cli"]
