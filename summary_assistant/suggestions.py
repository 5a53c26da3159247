from __future__ import annotations
import logging
import re
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence
from .config import DEFAULT_SUGGESTION_CONFIG, SuggestionConfig
from .datatypes import Readability, SuggestionReport
from .readability import readability, round_half_up

logger = logging.getLogger(__name__)

# be-verb + word ending in "ed", optionally followed by "by"
RE_PASSIVE = re.compile(r"\b(is|are|was|were|be|been|being)\s+\w+ed(\s+by)?\b", re.I | re.ASCII)
# "# Heading" or an ALL CAPS line of 7+ characters
RE_HEADING = re.compile(r"(^|\n)\s*(#+\s+|[A-Z][A-Z0-9 \-]{6,}\n)")
RE_BULLET  = re.compile(r"(^|\n)\s*[\-\*•]\s+")

NO_ISSUES = "Looks good! No obvious structural issues detected."


def _count(pattern: re.Pattern, text: str) -> int:
    return sum(1 for _ in pattern.finditer(text))

def count_passive_voice(text: str) -> int:
    return _count(RE_PASSIVE, text)

def count_heading_lines(text: str) -> int:
    return _count(RE_HEADING, text)

def count_bullet_lines(text: str) -> int:
    return _count(RE_BULLET, text)


@dataclass(frozen=True)
class TextMetrics:
    readability: Readability
    passive_hits: int
    heading_lines: int
    bullet_lines: int

    @property
    def sentence_count(self) -> int:
        return self.readability.sentence_count

def measure(text: str) -> TextMetrics:
    return TextMetrics(
        readability=readability(text),
        passive_hits=count_passive_voice(text),
        heading_lines=count_heading_lines(text),
        bullet_lines=count_bullet_lines(text),
    )


@dataclass(frozen=True)
class SuggestionRule:
    name: str
    message: str
    applies: Callable[[TextMetrics, SuggestionConfig], bool]

def _long_sentences(m: TextMetrics, cfg: SuggestionConfig) -> bool:
    return m.readability.asl > cfg.long_sentence_asl

def _difficult(m: TextMetrics, cfg: SuggestionConfig) -> bool:
    return m.readability.fre < cfg.difficult_fre

def _passive(m: TextMetrics, cfg: SuggestionConfig) -> bool:
    return m.passive_hits > cfg.passive_limit

def _few_headings(m: TextMetrics, cfg: SuggestionConfig) -> bool:
    expected = max(1, m.sentence_count // cfg.sentences_per_heading)
    return m.heading_lines < expected

def _few_bullets(m: TextMetrics, cfg: SuggestionConfig) -> bool:
    return m.bullet_lines < cfg.min_bullet_lines

DEFAULT_RULES = (
    SuggestionRule("long_sentences",
                   "Sentences are long on average; split complex sentences for clarity.",
                   _long_sentences),
    SuggestionRule("difficult_reading",
                   "Reading level is difficult; prefer simpler words and shorter sentences.",
                   _difficult),
    SuggestionRule("passive_voice",
                   "Frequent passive voice; convert to active voice where possible.",
                   _passive),
    SuggestionRule("headings",
                   "Add descriptive headings/subheadings for structure.",
                   _few_headings),
    SuggestionRule("bullets",
                   "Use bullet points or numbered lists to present key points.",
                   _few_bullets),
)


def improvement_suggestions(text: str,
                            rules: Sequence[SuggestionRule] = DEFAULT_RULES,
                            cfg: Optional[SuggestionConfig] = None) -> SuggestionReport:
    cfg = cfg or DEFAULT_SUGGESTION_CONFIG
    metrics = measure(text)

    suggestions: List[str] = []
    for rule in rules:
        if rule.applies(metrics, cfg):
            logger.debug("Suggestion rule fired: %s", rule.name)
            suggestions.append(rule.message)
    if not suggestions:
        suggestions.append(NO_ISSUES)

    return SuggestionReport(
        suggestions=tuple(suggestions),
        fre=round_half_up(metrics.readability.fre),
        asl=round_half_up(metrics.readability.asl),
    )
