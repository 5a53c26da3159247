from __future__ import annotations

import pytest

from summary_assistant.datatypes import Sentence
from summary_assistant.features import word_freq
from summary_assistant.preprocessing import split_sentences, tokenize
from summary_assistant.scoring import score_sentences


def test_scores_are_average_term_frequency() -> None:
    text = "Cats are great. Dogs are great too. Cats and dogs are pets."
    scored = score_sentences(split_sentences(text), word_freq(tokenize(text)))
    assert [s.index for s in scored] == [0, 1, 2]
    assert scored[0].score == pytest.approx(4 / 3)   # cats(2) are(0) great(2)
    assert scored[1].score == pytest.approx(1.0)     # dogs(2) are great(2) too
    assert scored[2].score == pytest.approx(1.0)     # cats dogs pets(1) over 5 tokens


def test_repeated_tokens_count_each_time() -> None:
    scored = score_sentences([Sentence(0, "apple apple pear")], {"apple": 3, "pear": 1})
    assert scored[0].score == pytest.approx((3 + 3 + 1) / 3)


def test_sentence_without_tokens_scores_zero() -> None:
    scored = score_sentences([Sentence(0, "?!"), Sentence(1, "apple.")], {"apple": 2})
    assert scored[0].score == 0.0
    assert scored[1].score == 2.0


def test_empty_frequency_table_scores_zero() -> None:
    sents = split_sentences("The and of. It is to.")
    assert all(s.score == 0.0 for s in score_sentences(sents, {}))
