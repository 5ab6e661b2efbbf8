"""Selection of meaningful sentences from extracted text.

Extracted PDF text is noisy: headers, page numbers and fragments are split
into "sentences" just like real prose. The selector keeps the first few
segments that look like sentences by length and word count.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Iterator, List

from docs2questions.utils.logging import get_logger

logger = get_logger(__name__)

# Segments are the text between runs of sentence-terminal punctuation.
_SEGMENT_PATTERN = re.compile(r"[^.!?]+")

DEFAULT_MIN_LENGTH = 20
DEFAULT_MIN_WORDS = 4
DEFAULT_MAX_CANDIDATES = 5


def _segments(text: str) -> Iterator[str]:
    for match in _SEGMENT_PATTERN.finditer(text):
        yield match.group().strip()


@dataclass(frozen=True)
class SentenceSelector:
    """Pick candidate sentences in document order.

    A segment is kept when it is longer than `min_length` characters and has
    more than `min_words` whitespace-separated tokens. Scanning stops as soon
    as `max_candidates` segments are kept; this is truncation, not ranking.
    """

    min_length: int = DEFAULT_MIN_LENGTH
    min_words: int = DEFAULT_MIN_WORDS
    max_candidates: int = DEFAULT_MAX_CANDIDATES

    def __post_init__(self) -> None:
        if self.min_length < 0:
            raise ValueError("min_length must be >= 0")
        if self.min_words < 0:
            raise ValueError("min_words must be >= 0")
        if self.max_candidates < 0:
            raise ValueError("max_candidates must be >= 0")

    @classmethod
    def from_config(cls, config: Any) -> "SentenceSelector":
        return cls(
            min_length=int(config.get("selection.min_length", DEFAULT_MIN_LENGTH)),
            min_words=int(config.get("selection.min_words", DEFAULT_MIN_WORDS)),
            max_candidates=int(
                config.get("selection.max_candidates", DEFAULT_MAX_CANDIDATES)
            ),
        )

    def is_meaningful(self, segment: str) -> bool:
        return len(segment) > self.min_length and len(segment.split()) > self.min_words

    def select(self, text: str) -> List[str]:
        candidates: List[str] = []
        if self.max_candidates == 0:
            return candidates

        for segment in _segments(text):
            if not self.is_meaningful(segment):
                continue
            candidates.append(segment)
            if len(candidates) >= self.max_candidates:
                break

        logger.debug(f"Selected {len(candidates)} candidate sentences")
        return candidates


def select_sentences(text: str) -> List[str]:
    """Select candidate sentences with the default thresholds."""
    return SentenceSelector().select(text)
