"""Question generation commands."""

from __future__ import annotations

import asyncio
from pathlib import Path

import click

from docs2questions.cli.utils import (
    MEDIA_TYPE_HELP,
    build_pipeline,
    read_document,
    report_document_error,
    resolve_options,
)
from docs2questions.preprocess.errors import DocumentError
from docs2questions.qa.export import (
    render_questions,
    report_path_from_config,
    write_report,
)
from docs2questions.qa.strategies import QuestionGeneratorFactory
from docs2questions.qa.synthesizer import QuestionSynthesizer
from docs2questions.utils import get_logger

logger = get_logger(__name__)


@click.command("generate")
@click.argument("pdf", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--template/--no-template",
    default=None,
    help="Template-based questions. Defaults to config.generation.strategies.template.",
)
@click.option(
    "--contextual/--no-contextual",
    default=None,
    help="Contextual analysis questions. Defaults to config.generation.strategies.contextual.",
)
@click.option(
    "--generative/--no-generative",
    default=None,
    help="Generative questions. Defaults to config.generation.strategies.generative.",
)
@click.option(
    "--seed",
    type=int,
    default=None,
    help="Seed for template selection. Defaults to config.generation.seed.",
)
@click.option(
    "--media-type",
    type=str,
    default=None,
    help=MEDIA_TYPE_HELP,
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"], case_sensitive=False),
    default="text",
    show_default=True,
    help="Report layout: flat text report or JSON list.",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the report to this file instead of stdout.",
)
@click.option(
    "--save",
    is_flag=True,
    default=False,
    help="Write the report to config.export.filename (ignored with --output).",
)
@click.pass_context
def generate(
    ctx: click.Context,
    pdf: Path,
    template: bool | None,
    contextual: bool | None,
    generative: bool | None,
    seed: int | None,
    media_type: str | None,
    output_format: str,
    output: Path | None,
    save: bool,
) -> None:
    """Generate questions from the first meaningful sentences of PDF."""
    cfg = ctx.obj.get("config")
    options = resolve_options(cfg, template, contextual, generative)
    if not options.enabled():
        click.echo(
            click.style("⚠ All strategies are disabled; nothing to generate.", fg="yellow"),
            err=True,
        )

    pipeline = build_pipeline(ctx)
    if seed is not None:
        pipeline.synthesizer = QuestionSynthesizer(seed=seed)
    raw = read_document(pdf, media_type)

    try:
        _, questions = asyncio.run(pipeline.run(raw, options))
    except DocumentError as e:
        report_document_error(e, pdf)
        return

    if not questions:
        click.echo(
            click.style(f"No questions found in {pdf}.", fg="yellow"), err=True
        )

    logger.info(f"Generated {len(questions)} questions from {pdf}")

    if save and output is None:
        output = report_path_from_config(cfg)
    if output is None:
        click.echo(render_questions(questions, output_format))
        return

    path = write_report(questions, output, output_format=output_format)
    click.echo(click.style(f"✓ Saved to {path}", fg="green"))


@click.command("strategies")
def strategies() -> None:
    """List question strategies in output order."""
    for name in QuestionGeneratorFactory.list_strategies():
        click.echo(name)
