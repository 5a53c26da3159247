from __future__ import annotations

import re

from summary_assistant.preprocessing import STOPWORDS, normalize_whitespace, split_sentences, tokenize


TOKEN_RE = re.compile(r"^[a-z0-9][a-z0-9\-']*$")

SAMPLES = [
    "",
    "   \n\t ",
    "Hello, World! It's a well-known fact: 42 apples.",
    "Mixed -- dashes ' quotes \"and\" (parens) — unicode café",
    "ALL CAPS TEXT? yes. No!",
]


def test_tokenize_lowercases_and_strips_punctuation() -> None:
    assert tokenize("Hello, World! It's a well-known fact.") == [
        "hello", "world", "it's", "a", "well-known", "fact",
    ]


def test_tokenize_empty_string() -> None:
    assert tokenize("") == []


def test_tokenize_only_valid_tokens_and_idempotent() -> None:
    for text in SAMPLES:
        tokens = tokenize(text)
        assert all(TOKEN_RE.match(t) for t in tokens)
        assert tokenize(" ".join(tokens)) == tokens


def test_tokenize_drops_lone_dashes_and_quotes() -> None:
    assert tokenize("a - b ' c --") == ["a", "b", "c"]


def test_tokenize_drops_fragments_starting_with_punctuation() -> None:
    tokens = tokenize("Cats - dogs are 'nice'.")
    assert tokens == ["cats", "dogs", "are"]
    assert len(tokens) == 3


def test_stopwords_are_lowercase_and_include_contractions() -> None:
    assert "the" in STOPWORDS
    assert "you've" in STOPWORDS
    assert "don't" in STOPWORDS
    assert all(w == w.strip().lower() for w in STOPWORDS)
    assert 150 <= len(STOPWORDS) <= 200


def test_split_sentences_empty() -> None:
    assert split_sentences("") == []
    assert split_sentences(" \r\n  ") == []


def test_split_sentences_indexes_and_text() -> None:
    sents = split_sentences("First one. Second one!\nThird one? 4 is a number.")
    assert [s.index for s in sents] == [0, 1, 2, 3]
    assert [s.text for s in sents] == ["First one.", "Second one!", "Third one?", "4 is a number."]


def test_split_sentences_keeps_lowercase_continuations() -> None:
    sents = split_sentences("See e.g. this example. Then stop.")
    assert [s.text for s in sents] == ["See e.g. this example.", "Then stop."]


def test_split_sentences_single_sentence() -> None:
    sents = split_sentences("Hello world.")
    assert len(sents) == 1
    assert sents[0].text == "Hello world."


def test_split_sentences_reconstructs_normalized_text() -> None:
    for text in SAMPLES + ["Line one.\n\nLine Two.\r\n  Line three!  Done."]:
        joined = " ".join(s.text for s in split_sentences(text))
        assert joined == normalize_whitespace(text)
