from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from .config import SummaryLength

@dataclass(frozen=True)
class Sentence:
    index: int
    text: str

@dataclass(frozen=True)
class ScoredSentence:
    index: int
    text: str
    score: float

@dataclass(frozen=True)
class Readability:
    fre: float
    asl: float  # average sentence length (words)
    asw: float  # average syllables per word
    sentence_count: int = 0
    word_count: int = 0
    syllable_count: int = 0

    def as_dict(self) -> Dict[str, float]:
        return {"FRE": self.fre, "ASL": self.asl, "ASW": self.asw}

@dataclass(frozen=True)
class SuggestionReport:
    suggestions: Tuple[str, ...]
    fre: int
    asl: int

@dataclass(frozen=True)
class SummaryResult:
    summary_text: str
    summary: str = ""
    length: SummaryLength = SummaryLength.MEDIUM
    sentences: Tuple[ScoredSentence, ...] = ()
    bullets: Optional[Tuple[str, ...]] = None
    keywords: Optional[Tuple[str, ...]] = None
    suggestions: Optional[SuggestionReport] = None
    notice: Optional[str] = None  # set instead of raising when there is nothing to summarize

    @property
    def is_empty(self) -> bool:
        return self.notice is not None

FrequencyTable = Dict[str, int]  # token -> count, first-occurrence order
