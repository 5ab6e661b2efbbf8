"""Text extraction command."""

from __future__ import annotations

import asyncio
from pathlib import Path

import click

from docs2questions.cli.utils import (
    MEDIA_TYPE_HELP,
    build_pipeline,
    read_document,
    report_document_error,
    write_or_echo,
)
from docs2questions.preprocess.errors import DocumentError
from docs2questions.utils import get_logger

logger = get_logger(__name__)


@click.command("extract")
@click.argument("pdf", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--media-type",
    type=str,
    default=None,
    help=MEDIA_TYPE_HELP,
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the extracted text to this file instead of stdout.",
)
@click.pass_context
def extract(
    ctx: click.Context, pdf: Path, media_type: str | None, output: Path | None
) -> None:
    """Extract the text of PDF, one line per page."""
    pipeline = build_pipeline(ctx)
    raw = read_document(pdf, media_type)

    try:
        text = asyncio.run(pipeline.process(raw))
    except DocumentError as e:
        report_document_error(e, pdf)
        return

    write_or_echo(text, output)
