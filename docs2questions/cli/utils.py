"""Shared utility functions for CLI commands."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Optional

import click

from docs2questions.integration.pipeline import QuestionPipeline
from docs2questions.preprocess.errors import DocumentError
from docs2questions.preprocess.schema import PDF_MEDIA_TYPE, RawDocument
from docs2questions.qa.config import GenerationOptions
from docs2questions.utils.logging import get_logger

logger = get_logger(__name__)


def fail(message: str) -> None:
    """Print an error in red and exit with status 1."""
    click.echo(click.style(f"✗ Error: {message}", fg="red"), err=True)
    sys.exit(1)


def read_document(path: Path, media_type: Optional[str]) -> RawDocument:
    """Read a document from disk, using `media_type` when the caller declares one."""
    raw = RawDocument.from_path(path)
    if media_type:
        raw = RawDocument(data=raw.data, media_type=media_type, name=raw.name)
    return raw


def build_pipeline(ctx: click.Context) -> QuestionPipeline:
    """Return the pipeline stored on the context, or build one from config."""
    pipeline = ctx.obj.get("pipeline")
    if pipeline is None:
        pipeline = QuestionPipeline.from_config(ctx.obj.get("config"))
        ctx.obj["pipeline"] = pipeline
    return pipeline


def resolve_options(
    config: Any,
    template: Optional[bool],
    contextual: Optional[bool],
    generative: Optional[bool],
) -> GenerationOptions:
    """Merge CLI strategy flags over the configured defaults."""
    defaults = GenerationOptions.from_config(config)
    return GenerationOptions(
        template=defaults.template if template is None else template,
        contextual=defaults.contextual if contextual is None else contextual,
        generative=defaults.generative if generative is None else generative,
    )


def report_document_error(error: DocumentError, path: Path) -> None:
    logger.error(f"Failed to process {path}: {error}")
    fail(f"Could not process {path}: {error}")


def write_or_echo(content: str, output: Optional[Path]) -> None:
    if output is None:
        click.echo(content)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(content, encoding="utf-8")
    click.echo(click.style(f"✓ Saved to {output}", fg="green"))


MEDIA_TYPE_HELP = (
    f"Declared media type of the input. Defaults to a guess from the file "
    f"name; only {PDF_MEDIA_TYPE} is accepted."
)
