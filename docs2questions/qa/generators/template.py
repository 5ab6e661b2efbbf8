"""Template question generation strategy.

Asks short wh-questions about the anchor word of a sentence.
"""

from __future__ import annotations

from docs2questions.qa.generators.base import TemplateBankGenerator
from docs2questions.qa.schema import StrategyTag


class TemplateQuestionGenerator(TemplateBankGenerator):
    """Generate who/what/where/why/how questions from the anchor word."""

    strategy = StrategyTag.TEMPLATE

    TEMPLATE_BANK = (
        "Who {anchor_lower}?",
        "What is the main contribution of {anchor}?",
        "Where is {anchor} from?",
        "Why is {anchor} significant?",
        "How does {anchor} relate to the topic?",
    )
