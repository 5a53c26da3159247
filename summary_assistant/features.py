from __future__ import annotations
from collections import Counter
from typing import Iterable, List
from .datatypes import FrequencyTable
from .preprocessing import STOPWORDS, is_valid_token

def word_freq(tokens: Iterable[str]) -> FrequencyTable:
    """Term frequency over the whole document, stopwords excluded.

    Keys keep first-occurrence order, which is what keyword ties fall back on.
    """
    tf: Counter = Counter()
    for t in tokens:
        if t in STOPWORDS:
            continue
        if not is_valid_token(t):
            continue
        tf[t] += 1
    return dict(tf)

def top_keywords(freq: FrequencyTable, k: int = 10) -> List[str]:
    if k <= 0:
        return []
    # sorted() is stable: equal counts stay in first-occurrence order
    ranked = sorted(freq.items(), key=lambda kv: kv[1], reverse=True)
    return [w for w, _ in ranked[:k]]
