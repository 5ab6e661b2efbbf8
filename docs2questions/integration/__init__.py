"""End-to-end orchestration of the document-to-questions pipeline."""

from docs2questions.integration.pipeline import QuestionPipeline
from docs2questions.integration.session import QuestionSession

__all__ = ["QuestionPipeline", "QuestionSession"]
