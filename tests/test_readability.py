from __future__ import annotations

import pytest

from summary_assistant.readability import count_syllables, readability, round_half_up


def test_count_syllables_vowel_groups() -> None:
    assert count_syllables("hello") == 2
    assert count_syllables("world") == 1
    assert count_syllables("beautiful") == 3   # eau, i, u
    assert count_syllables("rhythm") == 1
    assert count_syllables("2024") == 1


def test_readability_empty_text() -> None:
    r = readability("")
    assert r.asl == 0
    assert r.asw == 0
    assert r.fre == pytest.approx(206.835)
    assert r.as_dict() == {"FRE": pytest.approx(206.835), "ASL": 0, "ASW": 0}


def test_readability_simple_sentence() -> None:
    r = readability("Hello world.")
    assert r.sentence_count == 1
    assert r.word_count == 2
    assert r.syllable_count == 3
    assert r.asl == pytest.approx(2.0)
    assert r.asw == pytest.approx(1.5)
    assert r.fre == pytest.approx(206.835 - 1.015 * 2 - 84.6 * 1.5)


def test_readability_is_not_clamped() -> None:
    long_words = " ".join(["internationalization"] * 60) + "."
    assert readability(long_words).fre < 0


def test_round_half_up() -> None:
    assert round_half_up(2.5) == 3
    assert round_half_up(0.36) == 0
    assert round_half_up(-2.5) == -2
    assert round_half_up(77.905) == 78
