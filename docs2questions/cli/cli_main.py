"""Main CLI entry point for docs2questions.

This module provides the main CLI command group and registers
all subcommands from the commands package.
"""

from __future__ import annotations

from pathlib import Path

import click

from docs2questions import __version__
from docs2questions.cli.commands import extract, generate, strategies
from docs2questions.utils import get_config, load_config, setup_cli_logging


@click.group()
@click.version_option(version=__version__, prog_name="docs2questions")
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be repeated: -v, -vv)",
)
@click.option(
    "--config",
    type=click.Path(exists=True),
    help="Path to configuration YAML file",
)
@click.pass_context
def cli(ctx: click.Context, verbose: int, config: str | None) -> None:
    """docs2questions - Generate study questions from PDF documents.

    Extracts the text of a PDF, picks its first meaningful sentences and asks
    template, contextual and generative questions about each of them.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose

    # Load configuration first (needed for logging setup)
    if config:
        ctx.obj["config"] = load_config(config)
        ctx.obj["config_path"] = Path(config).resolve()
    else:
        ctx.obj["config"] = get_config()
        ctx.obj["config_path"] = None

    setup_cli_logging(verbose=verbose, config=ctx.obj["config"])


# Register all commands
cli.add_command(extract)
cli.add_command(generate)
cli.add_command(strategies)


def main(argv: list[str] | None = None) -> None:  # pragma: no cover
    """Entry point for CLI."""
    import sys

    cli(args=argv or sys.argv[1:])


if __name__ == "__main__":  # pragma: no cover
    main()
