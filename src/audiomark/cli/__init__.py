"""Command-line interface for audiomark.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Specimen sheet rendering to PDF
- Symbol catalog listing
- Caption measurement against a font
- Verbose logging to file
"""

from audiomark.cli.app import cli, main

__all__ = ["cli", "main"]
