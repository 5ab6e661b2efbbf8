"""Base classes for question generators."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Callable, ClassVar, Optional, Sequence, Tuple

from docs2questions.qa.schema import StrategyTag
from docs2questions.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_ANCHOR_WORD = "this"

# Picks one template out of a bank
TemplateChooser = Callable[[Sequence[str]], str]


def anchor_word(sentence: str) -> str:
    """First whitespace-delimited token of a sentence, or ``"this"``."""
    tokens = sentence.split()
    return tokens[0] if tokens else DEFAULT_ANCHOR_WORD


class BaseQuestionGenerator(ABC):
    """Abstract base class for question generation strategies.

    A strategy turns one candidate sentence (and its anchor word) into one
    question. Subclasses can be backed by a template bank or by a model; the
    synthesizer only relies on `generate`.
    """

    strategy: ClassVar[StrategyTag]

    def __init__(self) -> None:
        self.logger = get_logger(f"{__name__}.{self.__class__.__name__}")

    @abstractmethod
    def generate(self, sentence: str, anchor: str) -> str:
        """Generate a question for a sentence.

        Args:
            sentence: Candidate sentence the question is about
            anchor: Anchor word of the sentence

        Returns:
            Generated question string

        Raises:
            NotImplementedError: If strategy doesn't implement this method
        """
        raise NotImplementedError("Subclasses must implement generate method")

    def __repr__(self) -> str:
        """String representation."""
        return f"{self.__class__.__name__}(strategy={self.strategy.value})"


class TemplateBankGenerator(BaseQuestionGenerator):
    """Question generator that fills one template from a fixed bank.

    Templates are `str.format` strings using ``{anchor}`` for the verbatim
    anchor word and ``{anchor_lower}`` where the wording needs it lower-cased.
    """

    TEMPLATE_BANK: ClassVar[Tuple[str, ...]] = ()

    def __init__(
        self,
        chooser: Optional[TemplateChooser] = None,
        seed: Optional[int] = None,
    ) -> None:
        """Initialize template bank generator.

        Args:
            chooser: Function picking a template from the bank. Defaults to a
                uniform random choice.
            seed: Seed for the default random chooser (ignored with `chooser`)
        """
        super().__init__()
        if not self.TEMPLATE_BANK:
            raise ValueError(f"{self.__class__.__name__} has an empty template bank")
        self.chooser: TemplateChooser = chooser or random.Random(seed).choice

    @property
    def templates(self) -> Tuple[str, ...]:
        return self.TEMPLATE_BANK

    def render(self, template: str, anchor: str) -> str:
        return template.format(anchor=anchor, anchor_lower=anchor.lower())

    def generate(self, sentence: str, anchor: str) -> str:
        template = self.chooser(self.TEMPLATE_BANK)
        if template not in self.TEMPLATE_BANK:
            raise ValueError(
                f"Chooser returned a template outside the {self.strategy.value} bank: {template!r}"
            )
        return self.render(template, anchor)
