from __future__ import annotations
from typing import Optional, Sequence
from .config import SummaryLength
from .datatypes import ScoredSentence, SuggestionReport

BULLET = "•"

def format_summary(length: SummaryLength,
                   sentences: Sequence[ScoredSentence],
                   bullets: Optional[Sequence[str]] = None,
                   keywords: Optional[Sequence[str]] = None,
                   report: Optional[SuggestionReport] = None) -> str:
    """Assemble the output document. None for any optional part leaves it out."""
    summary = " ".join(s.text for s in sentences)
    out = f"Summary ({SummaryLength.parse(length).value}):\n{summary}"

    if bullets is not None:
        out += f"\n\n{BULLET} " + f"\n{BULLET} ".join(bullets)
    if keywords is not None:
        out += "\n\nKeywords: " + ", ".join(keywords)
    if report is not None:
        out += "\n\nImprovement Suggestions:\n" + "\n".join(f"{BULLET} {s}" for s in report.suggestions)
        out += f"\n\nReadability (Flesch): {report.fre} | Avg sentence length: {report.asl}"
    return out
