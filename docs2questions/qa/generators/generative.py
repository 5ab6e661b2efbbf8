"""Generative question generation strategy.

Stands in for a sequence-to-sequence question generator (the "T5" option of
earlier releases). Questions refer back to the passage.
"""

from __future__ import annotations

from docs2questions.qa.generators.base import TemplateBankGenerator
from docs2questions.qa.schema import StrategyTag


class GenerativeQuestionGenerator(TemplateBankGenerator):
    """Generate passage-grounded questions about the anchor word."""

    strategy = StrategyTag.GENERATIVE

    TEMPLATE_BANK = (
        "What does the text say about {anchor}?",
        "Based on this information, what is {anchor}?",
        "According to the passage, how is {anchor} defined?",
        "What key point does the text make about {anchor}?",
    )
