from __future__ import annotations

from typing import Iterable, Sequence

from boggle_engine.board import Board
from boggle_engine.errors import InvalidInput
from boggle_engine.lexicon import Lexicon, load_lexicon
from boggle_engine.scoring import score_words
from boggle_engine.solver import find_all_words, locate_word


class WordSearchGame:
    """One board and one lexicon behind the classic word-search game calls.

    The board starts as the built-in default; the lexicon is not ready until
    :meth:`load_lexicon` succeeds. Failed calls leave both unchanged.
    """

    def __init__(self, lexicon: Lexicon | None = None, prune: bool = True):
        self.board = Board.default()
        self.lexicon = lexicon if lexicon is not None else Lexicon()
        self.prune = prune

    def load_lexicon(self, path):
        self.lexicon = load_lexicon(path)

    def set_board(self, tiles: Sequence[str]):
        self.board = Board.from_flat_array(tiles)

    def get_board(self) -> str:
        return self.board.render()

    def get_all_scorable_words(self, minimum_length: int) -> list[str]:
        return find_all_words(self.board, self.lexicon, minimum_length, prune=self.prune)

    def get_score_for_words(self, words: Iterable[str], minimum_length: int) -> int:
        return score_words(words, minimum_length, self.lexicon)

    def is_valid_word(self, word: str) -> bool:
        if word is None:
            raise InvalidInput("word is required")
        return self.lexicon.contains(word.lower())

    def is_valid_prefix(self, prefix: str) -> bool:
        if prefix is None:
            raise InvalidInput("prefix is required")
        return self.lexicon.has_word_with_prefix(prefix.lower())

    def is_on_board(self, word: str) -> list[int]:
        return locate_word(self.board, word)
