"""Strategy registry and factory for question generators."""

from __future__ import annotations

from typing import Any, Dict, List, Type

from docs2questions.qa.generators.base import BaseQuestionGenerator
from docs2questions.qa.generators.contextual import ContextualQuestionGenerator
from docs2questions.qa.generators.generative import GenerativeQuestionGenerator
from docs2questions.qa.generators.template import TemplateQuestionGenerator
from docs2questions.qa.schema import STRATEGY_ORDER, StrategyTag
from docs2questions.utils.logging import get_logger

logger = get_logger(__name__)

# Strategy registry
STRATEGY_REGISTRY: Dict[StrategyTag, Type[BaseQuestionGenerator]] = {
    StrategyTag.TEMPLATE: TemplateQuestionGenerator,
    StrategyTag.CONTEXTUAL: ContextualQuestionGenerator,
    StrategyTag.GENERATIVE: GenerativeQuestionGenerator,
}


class QuestionGeneratorFactory:
    """Factory for creating question generators based on strategy name."""

    @staticmethod
    def create(strategy: StrategyTag | str, **kwargs: Any) -> BaseQuestionGenerator:
        """Create a question generator instance.

        Args:
            strategy: Strategy name (template, contextual, generative; the
                legacy names bert and t5 are accepted)
            **kwargs: Arguments passed to the generator (e.g. chooser, seed)

        Returns:
            Question generator instance

        Raises:
            ValueError: If strategy is not registered

        Example:
            >>> generator = QuestionGeneratorFactory.create("template", seed=7)
            >>> generator.generate("Albert Einstein developed relativity", "Albert")
        """
        tag = StrategyTag.parse(strategy)
        generator_class = STRATEGY_REGISTRY[tag]
        logger.debug(f"Creating {generator_class.__name__} generator")
        return generator_class(**kwargs)

    @staticmethod
    def register(
        strategy: StrategyTag | str, generator_class: Type[BaseQuestionGenerator]
    ) -> None:
        """Replace the generator used for a strategy.

        Strategies are a closed set with a fixed output order, so only their
        implementation can change, e.g. swapping a template bank for a
        model-backed generator.

        Args:
            strategy: Strategy name
            generator_class: Generator class (must inherit from BaseQuestionGenerator)
        """
        if not isinstance(generator_class, type) or not issubclass(
            generator_class, BaseQuestionGenerator
        ):
            raise TypeError(
                f"Generator class must inherit from BaseQuestionGenerator, "
                f"got {generator_class}"
            )

        tag = StrategyTag.parse(strategy)
        STRATEGY_REGISTRY[tag] = generator_class
        logger.info(
            f"Registered {generator_class.__name__} for question strategy: {tag.value}"
        )

    @staticmethod
    def list_strategies() -> List[str]:
        """List all strategies in output order.

        Returns:
            List of strategy names
        """
        return [tag.value for tag in STRATEGY_ORDER]
