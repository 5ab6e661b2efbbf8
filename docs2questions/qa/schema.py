"""Schema models for generated questions."""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional


class StrategyTag(str, Enum):
    """Question generation strategy.

    Notes
    -----
    Earlier releases labelled the contextual and generative strategies after
    the models they imitated ("bert" and "t5"); `parse` still accepts those.
    """

    TEMPLATE = "template"
    CONTEXTUAL = "contextual"
    GENERATIVE = "generative"

    @classmethod
    def parse(cls, value: "str | StrategyTag") -> "StrategyTag":
        if isinstance(value, StrategyTag):
            return value
        name = str(value).lower().strip()
        name = LEGACY_STRATEGY_NAMES.get(name, name)
        try:
            return cls(name)
        except ValueError:
            available = ", ".join(tag.value for tag in STRATEGY_ORDER)
            raise ValueError(
                f"Unknown question strategy: {value}. Available strategies: {available}"
            ) from None


LEGACY_STRATEGY_NAMES: Dict[str, str] = {
    "bert": StrategyTag.CONTEXTUAL.value,
    "t5": StrategyTag.GENERATIVE.value,
}

# Output order within one sentence; consumers rely on it.
STRATEGY_ORDER = (
    StrategyTag.TEMPLATE,
    StrategyTag.CONTEXTUAL,
    StrategyTag.GENERATIVE,
)


@dataclass(frozen=True)
class GeneratedQuestion:
    """A question generated from one candidate sentence by one strategy.

    Attributes
    ----------
    id : str
        Identifier unique within one synthesis run (``"{strategy}-{index}"``).
    question_text : str
        The generated question.
    strategy : StrategyTag
        Strategy that produced the question.
    source_sentence : str
        Candidate sentence the question was derived from.
    """

    id: str
    question_text: str
    strategy: StrategyTag
    source_sentence: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "question": self.question_text,
            "type": self.strategy.value,
            "sentence": self.source_sentence,
        }


def questions_to_json(
    questions: Iterable[GeneratedQuestion], *, indent: Optional[int] = None
) -> str:
    payload: List[Dict[str, Any]] = [q.to_dict() for q in questions]
    return json.dumps(payload, ensure_ascii=False, indent=indent)
