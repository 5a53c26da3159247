from __future__ import annotations
from typing import List, Sequence
from .datatypes import FrequencyTable, ScoredSentence, Sentence
from .preprocessing import tokenize

def _sentence_score(text: str, freq: FrequencyTable) -> float:
    tokens = tokenize(text)
    if not tokens:
        return 0.0
    total = sum(freq.get(t, 0) for t in tokens)
    return total / len(tokens)

def score_sentences(sentences: Sequence[Sentence], freq: FrequencyTable) -> List[ScoredSentence]:
    """
    Score each sentence by the average document frequency of its tokens.

    Score(S) = Σ freq(t) / |tokens(S)|  for every token t in S, repeats included.
    Stopwords are absent from the table and only add to the denominator.

    Args:
        sentences: Segmented sentences in document order
        freq: Document-level frequency table

    Returns:
        One ScoredSentence per input sentence, same order
    """
    return [
        ScoredSentence(index=s.index, text=s.text, score=_sentence_score(s.text, freq))
        for s in sentences
    ]
