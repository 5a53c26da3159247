from __future__ import annotations
import logging
from typing import List, Optional, Sequence, Union
from .config import DEFAULT_SUMMARIZER_CONFIG, SummarizerConfig, SummaryLength, SummaryOptions
from .datatypes import ScoredSentence, SummaryResult
from .features import top_keywords, word_freq
from .formatting import format_summary
from .preprocessing import split_sentences, tokenize
from .readability import round_half_up
from .scoring import score_sentences
from .suggestions import improvement_suggestions

logger = logging.getLogger(__name__)

NO_TEXT = "No text to summarize."
NO_SENTENCES = "Couldn't detect sentences to summarize."

def choose_sentence_count(total_sentences: int,
                          length: Union[SummaryLength, str] = SummaryLength.MEDIUM,
                          cfg: Optional[SummarizerConfig] = None) -> int:
    cfg = cfg or DEFAULT_SUMMARIZER_CONFIG
    ratio = cfg.length_ratios[SummaryLength.parse(length)]
    n = round_half_up(total_sentences * ratio)
    n = max(cfg.min_sentences, min(cfg.max_sentences, n))
    # short documents: never ask for sentences that don't exist
    return max(0, min(n, total_sentences))

def select_top_sentences(scored: Sequence[ScoredSentence],
                         length: Union[SummaryLength, str] = SummaryLength.MEDIUM,
                         n: Optional[int] = None,
                         cfg: Optional[SummarizerConfig] = None) -> List[ScoredSentence]:
    if n is None:
        n = choose_sentence_count(len(scored), length, cfg=cfg)
    # stable sort: equal scores keep document order
    ranked = sorted(scored, key=lambda s: s.score, reverse=True)
    selected = ranked[:max(0, n)]
    return sorted(selected, key=lambda s: s.index)  # restore original order

def _empty(notice: str, options: SummaryOptions) -> SummaryResult:
    logger.info("Nothing to summarize: %s", notice)
    return SummaryResult(summary_text="", length=options.length, notice=notice)

def summarize(text: str,
              options: Optional[SummaryOptions] = None,
              cfg: Optional[SummarizerConfig] = None) -> SummaryResult:
    # Pipeline glue
    options = options or SummaryOptions()
    cfg = cfg or DEFAULT_SUMMARIZER_CONFIG

    text = (text or "").strip()
    if not text:
        return _empty(NO_TEXT, options)
    sentences = split_sentences(text)
    if not sentences:
        return _empty(NO_SENTENCES, options)

    freq = word_freq(tokenize(text))
    scored = score_sentences(sentences, freq)
    chosen = select_top_sentences(scored, options.length, cfg=cfg)
    logger.debug("Selected %d of %d sentences (length=%s, %d distinct terms)",
                 len(chosen), len(sentences), options.length.value, len(freq))

    bullets = None
    if options.include_bullets:
        bullets = tuple(s.text for s in chosen[:cfg.bullet_limit])
    keywords = None
    if options.include_keywords:
        keywords = tuple(top_keywords(freq, cfg.keyword_limit))
    report = None
    if options.include_suggestions:
        report = improvement_suggestions(text)

    return SummaryResult(
        summary_text=format_summary(options.length, chosen, bullets, keywords, report),
        summary=" ".join(s.text for s in chosen),
        length=options.length,
        sentences=tuple(chosen),
        bullets=bullets,
        keywords=keywords,
        suggestions=report,
    )
