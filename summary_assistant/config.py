from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Union


class SummaryLength(str, Enum):
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"

    @classmethod
    def parse(cls, value: Union[str, "SummaryLength", None]) -> "SummaryLength":
        """Accepts enum members or names; anything unknown ("default" included) is medium."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.MEDIUM


@dataclass(frozen=True)
class SummaryOptions:
    length: SummaryLength = SummaryLength.MEDIUM
    include_bullets: bool = False
    include_keywords: bool = True
    include_suggestions: bool = False

    def __post_init__(self):
        object.__setattr__(self, "length", SummaryLength.parse(self.length))


def _default_ratios() -> Dict[SummaryLength, float]:
    return {
        SummaryLength.SHORT: 0.06,
        SummaryLength.MEDIUM: 0.12,
        SummaryLength.LONG: 0.22,
    }


@dataclass(frozen=True)
class SummarizerConfig:
    length_ratios: Dict[SummaryLength, float] = field(default_factory=_default_ratios)
    min_sentences: int = 3
    max_sentences: int = 20
    bullet_limit: int = 8       # bullets repeat the first N selected sentences
    keyword_limit: int = 12


@dataclass(frozen=True)
class SuggestionConfig:
    long_sentence_asl: float = 28
    difficult_fre: float = 50
    passive_limit: int = 5
    min_bullet_lines: int = 3
    sentences_per_heading: int = 20


DEFAULT_SUMMARIZER_CONFIG = SummarizerConfig()
DEFAULT_SUGGESTION_CONFIG = SuggestionConfig()
