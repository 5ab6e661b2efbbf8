"""Question synthesis over candidate sentences."""

from __future__ import annotations

from typing import Dict, List, Mapping, Optional, Sequence

from docs2questions.qa.config import GenerationOptions
from docs2questions.qa.generators.base import (
    BaseQuestionGenerator,
    TemplateBankGenerator,
    TemplateChooser,
    anchor_word,
)
from docs2questions.qa.schema import STRATEGY_ORDER, GeneratedQuestion, StrategyTag
from docs2questions.qa.strategies import STRATEGY_REGISTRY
from docs2questions.utils.logging import get_logger

logger = get_logger(__name__)


def question_id(strategy: StrategyTag, candidate_index: int) -> str:
    return f"{strategy.value}-{candidate_index}"


class QuestionSynthesizer:
    """Fan candidate sentences out over the enabled strategies.

    Output is grouped by candidate, then by strategy in the fixed order
    template, contextual, generative. Synthesis never fails on empty input:
    no candidates or no enabled strategies simply yield no questions.
    """

    def __init__(
        self,
        generators: Optional[Mapping[StrategyTag | str, BaseQuestionGenerator]] = None,
        seed: Optional[int] = None,
        chooser: Optional[TemplateChooser] = None,
    ) -> None:
        """Initialize the synthesizer.

        Args:
            generators: Explicit generator per strategy. Strategies missing
                here are created from the registry.
            seed: Seed for template selection. Every call restarts one stream
                per strategy derived from it, so a fixed seed reproduces the
                output of each call and one strategy never shifts another's
                choices.
            chooser: Template chooser passed to default template-bank
                generators (takes precedence over `seed`)
        """
        self.seed = seed
        self._chooser: Optional[TemplateChooser] = chooser
        self._generators: Dict[StrategyTag, BaseQuestionGenerator] = {
            StrategyTag.parse(tag): generator
            for tag, generator in (generators or {}).items()
        }

    def _strategy_seed(self, strategy: StrategyTag) -> Optional[int]:
        if self.seed is None:
            return None
        return self.seed * len(STRATEGY_ORDER) + STRATEGY_ORDER.index(strategy)

    def generator_for(self, strategy: StrategyTag) -> BaseQuestionGenerator:
        """Return the generator for one synthesis run.

        Explicit generators are reused as given. Registry generators are built
        fresh, so a seeded synthesizer starts every call from the same stream.
        """
        generator = self._generators.get(strategy)
        if generator is not None:
            return generator
        generator_class = STRATEGY_REGISTRY[strategy]
        if issubclass(generator_class, TemplateBankGenerator):
            return generator_class(
                chooser=self._chooser, seed=self._strategy_seed(strategy)
            )
        return generator_class()

    def synthesize(
        self,
        candidates: Sequence[str],
        options: Optional[GenerationOptions] = None,
    ) -> List[GeneratedQuestion]:
        """Generate one question per candidate per enabled strategy."""
        options = options if options is not None else GenerationOptions()
        strategies = options.enabled()
        generators = {strategy: self.generator_for(strategy) for strategy in strategies}
        questions: List[GeneratedQuestion] = []

        for index, sentence in enumerate(candidates):
            anchor = anchor_word(sentence)
            for strategy in strategies:
                text = generators[strategy].generate(sentence, anchor)
                questions.append(
                    GeneratedQuestion(
                        id=question_id(strategy, index),
                        question_text=text,
                        strategy=strategy,
                        source_sentence=sentence,
                    )
                )

        logger.info(
            f"Generated {len(questions)} questions from {len(candidates)} sentences "
            f"using {', '.join(s.value for s in strategies) or 'no strategies'}"
        )
        return questions

    def __repr__(self) -> str:
        names = ", ".join(tag.value for tag in STRATEGY_ORDER if tag in self._generators)
        return f"QuestionSynthesizer(generators=[{names}])"
