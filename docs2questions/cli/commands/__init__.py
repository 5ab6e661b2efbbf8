"""CLI command modules."""

from docs2questions.cli.commands.extract import extract
from docs2questions.cli.commands.generate import generate, strategies

__all__ = [
    "extract",
    "generate",
    "strategies",
]
