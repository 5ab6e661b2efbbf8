"""Caller-side state for one document at a time.

A front end shows one uploaded document, its extracted text and the latest
questions. `QuestionSession` keeps that state consistent: a failed upload
leaves the previous document in place, and a failed regeneration keeps the
extracted text.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from docs2questions.integration.pipeline import QuestionPipeline
from docs2questions.preprocess.schema import RawDocument
from docs2questions.qa.config import GenerationOptions
from docs2questions.qa.export import format_report
from docs2questions.qa.schema import GeneratedQuestion
from docs2questions.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class QuestionSession:
    pipeline: QuestionPipeline = field(default_factory=QuestionPipeline)
    document_name: Optional[str] = None
    text: str = ""
    questions: List[GeneratedQuestion] = field(default_factory=list)

    @property
    def has_document(self) -> bool:
        return self.document_name is not None

    async def load(self, raw: RawDocument) -> str:
        """Extract a new document, replacing the current one on success."""
        try:
            text = await self.pipeline.process(raw)
        except Exception:
            logger.exception(f"Failed to process {raw.name or '<buffer>'}; keeping previous document")
            raise
        self.document_name = raw.name or "<buffer>"
        self.text = text
        self.questions = []
        return text

    async def regenerate(
        self, options: Optional[GenerationOptions] = None
    ) -> List[GeneratedQuestion]:
        """Replace the questions for the current document."""
        if not self.has_document:
            raise RuntimeError("No document loaded; call load() first")
        self.questions = await self.pipeline.generate(self.text, options)
        return self.questions

    def reset(self) -> None:
        """Forget the current document, e.g. when the file is removed."""
        self.document_name = None
        self.text = ""
        self.questions = []

    def report(self) -> str:
        return format_report(self.questions)
