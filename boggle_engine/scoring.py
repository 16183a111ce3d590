from __future__ import annotations

from typing import Iterable

from boggle_engine.errors import InvalidInput
from boggle_engine.lexicon import Lexicon


def word_score(word: str, minimum_length: int) -> int:
    """One point for reaching the minimum length plus one per extra letter."""
    if len(word) < minimum_length:
        return 0
    return 1 + len(word) - minimum_length


def score_words(words: Iterable[str], minimum_length: int, lexicon: Lexicon) -> int:
    """Sum the scores of the words that are long enough and in the lexicon.

    Membership is checked on each word exactly as given; callers fold case.
    """
    if minimum_length is None or minimum_length < 1:
        raise InvalidInput(f"minimum length must be >= 1, got {minimum_length}")
    if words is None:
        raise InvalidInput("word set is required")
    lexicon.require_loaded()

    total = 0
    for word in words:
        if len(word) >= minimum_length and lexicon.contains(word):
            total += word_score(word, minimum_length)
    return total
