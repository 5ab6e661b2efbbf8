"""Contextual question generation strategy.

Stands in for an encoder-model analysis step (the "BERT" option of earlier
releases). Questions ask the reader to analyze the anchor in context.
"""

from __future__ import annotations

from docs2questions.qa.generators.base import TemplateBankGenerator
from docs2questions.qa.schema import StrategyTag


class ContextualQuestionGenerator(TemplateBankGenerator):
    """Generate analysis questions about the anchor word."""

    strategy = StrategyTag.CONTEXTUAL

    TEMPLATE_BANK = (
        "What can you tell about {anchor}?",
        "How would you analyze {anchor}?",
        "What is the significance of {anchor} in this context?",
        "Can you explain the role of {anchor}?",
    )
