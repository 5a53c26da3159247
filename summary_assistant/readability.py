from __future__ import annotations
import math
import re
from .datatypes import Readability
from .preprocessing import split_sentences, tokenize

RE_VOWEL_GROUP = re.compile(r"[aeiouy]+")

def round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))

def count_syllables(word: str) -> int:
    # vowel groups approximate syllables; numerals and "hmm" still count as one
    return max(1, len(RE_VOWEL_GROUP.findall(word.lower())))

def readability(text: str) -> Readability:
    """
    Approximate Flesch Reading Ease.

    FRE = 206.835 - 1.015 × ASL - 84.6 × ASW

    The score is not clamped to 0-100; degenerate input (one huge sentence,
    no words at all) may land outside that range.
    """
    sentences = split_sentences(text)
    words = tokenize(text)
    syllables = sum(count_syllables(w) for w in words)

    if words:
        asl = len(words) / max(1, len(sentences))
        asw = syllables / len(words)
    else:
        asl = 0.0
        asw = 0.0

    fre = 206.835 - 1.015 * asl - 84.6 * asw
    return Readability(
        fre=fre,
        asl=asl,
        asw=asw,
        sentence_count=len(sentences),
        word_count=len(words),
        syllable_count=syllables,
    )
