"""Document-to-questions pipeline orchestration."""

from __future__ import annotations

import asyncio
from typing import Any, List, Optional, Tuple

from docs2questions.preprocess.extractor import extract_text
from docs2questions.preprocess.pdfplumber_proc import PDFPlumberLoader
from docs2questions.preprocess.schema import RawDocument
from docs2questions.qa.config import GenerationOptions
from docs2questions.qa.schema import GeneratedQuestion
from docs2questions.qa.selector import SentenceSelector
from docs2questions.qa.synthesizer import QuestionSynthesizer
from docs2questions.utils.config import Config, get_config
from docs2questions.utils.logging import get_logger
from docs2questions.utils.timer import timer

logger = get_logger(__name__)


class QuestionPipeline:
    """Coordinates loading, extraction, sentence selection and synthesis.

    `process` covers the binary side (PDF bytes to text) and `generate` the
    text side (text to questions), so questions can be regenerated without
    extracting the document again. The pipeline keeps no per-call state.
    """

    def __init__(
        self,
        loader: Optional[PDFPlumberLoader] = None,
        selector: Optional[SentenceSelector] = None,
        synthesizer: Optional[QuestionSynthesizer] = None,
        default_options: Optional[GenerationOptions] = None,
    ) -> None:
        self.loader = loader or PDFPlumberLoader()
        self.selector = selector or SentenceSelector()
        self.synthesizer = synthesizer or QuestionSynthesizer()
        self.default_options = default_options or GenerationOptions()

    @classmethod
    def from_config(cls, config: Optional[Config] = None) -> "QuestionPipeline":
        config = config or get_config()
        seed: Any = config.get("generation.seed")
        return cls(
            loader=PDFPlumberLoader.from_config(config),
            selector=SentenceSelector.from_config(config),
            synthesizer=QuestionSynthesizer(
                seed=int(seed) if seed is not None else None
            ),
            default_options=GenerationOptions.from_config(config),
        )

    async def process(self, raw: RawDocument) -> str:
        """Load a document and return its linear text.

        Loader errors (`UnsupportedFormat`, `CorruptDocument`) propagate
        unchanged. If the awaiting task is cancelled, the worker's result is
        discarded and nothing is returned.
        """
        name = raw.name or "<buffer>"
        with timer(f"process {name}"):
            doc = await asyncio.to_thread(self.loader.load, raw)
            text = extract_text(doc)
        logger.info(f"Extracted {len(text)} chars from {doc.page_count} pages of {name}")
        return text

    async def generate(
        self, text: str, options: Optional[GenerationOptions] = None
    ) -> List[GeneratedQuestion]:
        """Select candidate sentences from `text` and synthesize questions."""
        options = options if options is not None else self.default_options
        with timer("generate"):
            candidates = self.selector.select(text)
            questions = self.synthesizer.synthesize(candidates, options)
        if not questions:
            logger.info("No questions generated (no candidate sentences or strategies)")
        return questions

    async def run(
        self, raw: RawDocument, options: Optional[GenerationOptions] = None
    ) -> Tuple[str, List[GeneratedQuestion]]:
        """Process a document and generate questions from it."""
        text = await self.process(raw)
        questions = await self.generate(text, options)
        return text, questions
