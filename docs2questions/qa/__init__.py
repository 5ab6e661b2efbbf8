"""Question generation utilities.

This subpackage selects candidate sentences from extracted text and turns
them into questions using independent generation strategies.
"""

from docs2questions.qa.config import GenerationOptions
from docs2questions.qa.export import (
    format_report,
    render_questions,
    report_path_from_config,
    write_report,
)
from docs2questions.qa.generators import (
    BaseQuestionGenerator,
    ContextualQuestionGenerator,
    GenerativeQuestionGenerator,
    TemplateBankGenerator,
    TemplateQuestionGenerator,
    anchor_word,
)
from docs2questions.qa.schema import STRATEGY_ORDER, GeneratedQuestion, StrategyTag
from docs2questions.qa.selector import SentenceSelector, select_sentences
from docs2questions.qa.strategies import QuestionGeneratorFactory
from docs2questions.qa.synthesizer import QuestionSynthesizer

__all__ = [
    # Data model
    "GeneratedQuestion",
    "StrategyTag",
    "STRATEGY_ORDER",
    "GenerationOptions",
    # Selection
    "SentenceSelector",
    "select_sentences",
    # Generators
    "BaseQuestionGenerator",
    "TemplateBankGenerator",
    "TemplateQuestionGenerator",
    "ContextualQuestionGenerator",
    "GenerativeQuestionGenerator",
    "QuestionGeneratorFactory",
    "anchor_word",
    # Synthesis
    "QuestionSynthesizer",
    # Export
    "format_report",
    "render_questions",
    "report_path_from_config",
    "write_report",
]
