"""Question generation strategies.

Each strategy implements a specific approach to turning a candidate sentence
into a question.
"""

from docs2questions.qa.generators.base import (
    BaseQuestionGenerator,
    TemplateBankGenerator,
    TemplateChooser,
    anchor_word,
)
from docs2questions.qa.generators.contextual import ContextualQuestionGenerator
from docs2questions.qa.generators.generative import GenerativeQuestionGenerator
from docs2questions.qa.generators.template import TemplateQuestionGenerator

__all__ = [
    "BaseQuestionGenerator",
    "TemplateBankGenerator",
    "TemplateChooser",
    "anchor_word",
    "TemplateQuestionGenerator",
    "ContextualQuestionGenerator",
    "GenerativeQuestionGenerator",
]
