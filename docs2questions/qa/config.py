"""Configuration for question generation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping

from docs2questions.qa.schema import STRATEGY_ORDER, StrategyTag
from docs2questions.utils.logging import get_logger

logger = get_logger(__name__)

# Upload form keys from earlier versions, mapped onto strategy names
_LEGACY_OPTION_KEYS: Dict[str, str] = {
    "useTemplate": "template",
    "useBert": "contextual",
    "useT5": "generative",
    "bert": "contextual",
    "t5": "generative",
}


@dataclass(frozen=True)
class GenerationOptions:
    """Which question strategies are enabled.

    Every flag is independent; disabling all of them is valid and produces
    no questions.
    """

    template: bool = True
    contextual: bool = True
    generative: bool = True

    def is_enabled(self, strategy: StrategyTag | str) -> bool:
        return bool(getattr(self, StrategyTag.parse(strategy).value))

    def enabled(self) -> List[StrategyTag]:
        """Enabled strategies in the fixed output order."""
        return [tag for tag in STRATEGY_ORDER if self.is_enabled(tag)]

    @classmethod
    def none(cls) -> "GenerationOptions":
        return cls(template=False, contextual=False, generative=False)

    @classmethod
    def from_strategies(cls, strategies: Iterable[StrategyTag | str]) -> "GenerationOptions":
        """Enable exactly the named strategies."""
        names = {StrategyTag.parse(s).value for s in strategies}
        return cls(**{tag.value: tag.value in names for tag in STRATEGY_ORDER})

    @classmethod
    def from_dict(cls, options: Mapping[str, Any]) -> "GenerationOptions":
        """Build options from a flag mapping; missing flags default to enabled."""
        flags: Dict[str, bool] = {}
        for key, value in options.items():
            name = _LEGACY_OPTION_KEYS.get(key, key)
            try:
                flags[StrategyTag.parse(name).value] = bool(value)
            except ValueError:
                logger.warning(f"Ignoring unknown generation option: {key}")
        return cls(**flags)

    @classmethod
    def from_config(cls, config: Any) -> "GenerationOptions":
        strategies = config.get("generation.strategies")
        if strategies is None:
            return cls()
        if isinstance(strategies, Mapping):
            return cls.from_dict(strategies)
        if isinstance(strategies, (list, tuple)):
            return cls.from_strategies(strategies)
        logger.warning(
            f"generation.strategies must be a mapping or list, got {type(strategies).__name__}"
        )
        return cls()
