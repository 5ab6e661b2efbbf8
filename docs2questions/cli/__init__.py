"""Command-line interface for docs2questions."""

from docs2questions.cli.cli_main import cli, main

__all__ = ["cli", "main"]
