"""Flat text report of generated questions."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Sequence

from docs2questions.qa.schema import GeneratedQuestion, questions_to_json
from docs2questions.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_REPORT_FILENAME = "generated-questions.txt"
SOURCE_PREVIEW_CHARS = 100


def format_question(index: int, question: GeneratedQuestion) -> str:
    """Format one report record; `index` is 1-based."""
    return (
        f"{index}. {question.question_text}\n"
        f"   Source: {question.source_sentence[:SOURCE_PREVIEW_CHARS]}...\n"
        f"   Type: {question.strategy.value.upper()}\n"
    )


def format_report(questions: Iterable[GeneratedQuestion]) -> str:
    """Render questions in output order, one record per question.

    Records end with a newline and are joined by another, leaving a blank
    line between them. The layout matches earlier exports byte for byte.
    """
    return "\n".join(
        format_question(index, question)
        for index, question in enumerate(questions, start=1)
    )


def render_questions(
    questions: Sequence[GeneratedQuestion], output_format: str = "text"
) -> str:
    """Render questions as the text report or as a JSON list."""
    if output_format.lower() == "json":
        return questions_to_json(questions, indent=2)
    return format_report(questions)


def write_report(
    questions: Sequence[GeneratedQuestion],
    path: str | Path = DEFAULT_REPORT_FILENAME,
    *,
    output_format: str = "text",
) -> Path:
    """Write the rendered questions to `path` as UTF-8 and return the path."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_questions(questions, output_format), encoding="utf-8")
    logger.info(f"Saved question report to {path}")
    return path


def report_path_from_config(config: Any) -> Path:
    """Default report location, from ``export.filename``."""
    filename = config.get("export.filename") if config is not None else None
    return Path(filename or DEFAULT_REPORT_FILENAME)
