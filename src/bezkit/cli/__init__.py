"""Command-line interface for bezkit.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- extrema: Add points at path extrema
- interpolate: Blend between two paths
- dash: Convert a dashed stroke into dash paths
- Quiet mode printing only path data
"""

from bezkit.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
