from __future__ import annotations

import logging
from typing import Callable, Optional

from boggle_engine.board import LOCATE_STEPS, MOORE_STEPS, Board
from boggle_engine.errors import InvalidInput
from boggle_engine.lexicon import Lexicon, TrieNode

logger = logging.getLogger("boggle")


class PathSearch:
    """Depth-first backtracking over simple paths of adjacent cells.

    One instance owns a single ``visited`` flag per cell and a single ``path``
    buffer shared by every frame of the recursion. A cell is marked and
    appended before its neighbours are explored and released after its
    subtree is exhausted, so the active path never repeats a cell.

    ``advance(state, tile)`` returns the state after stepping onto a tile, or
    None to reject the cell. ``accept(state, path)`` is called once the cell
    is on the path and returns True to stop the whole search, in which case
    the path is left in place for the caller.
    """

    def __init__(
        self,
        board: Board,
        advance: Callable[[object, str], Optional[object]],
        accept: Callable[[object, list[int]], bool],
        order=MOORE_STEPS,
    ):
        self.board = board
        self.advance = advance
        self.accept = accept
        self.neighbors = board.adjacency(order)
        self.visited: list[bool] = [False] * len(board)
        self.path: list[int] = []

    def run(self, start: int, state) -> bool:
        next_state = self.advance(state, self.board.tiles[start])
        if next_state is None:
            return False

        self.visited[start] = True
        self.path.append(start)
        if self.accept(next_state, self.path):
            return True

        for nidx in self.neighbors[start]:
            if not self.visited[nidx] and self.run(nidx, next_state):
                return True

        self.path.pop()
        self.visited[start] = False
        return False

    def run_all(self, state) -> bool:
        """Search from every cell in row-major order until one stops."""
        for start in range(len(self.board)):
            if self.run(start, state):
                return True
        return False


def _check_minimum_length(minimum_length: int):
    if minimum_length is None or minimum_length < 1:
        raise InvalidInput(f"minimum length must be >= 1, got {minimum_length}")


def find_all_words(board: Board, lexicon: Lexicon, minimum_length: int, prune: bool = True) -> list[str]:
    """Return every lexicon word of at least ``minimum_length`` characters
    that can be traced on the board, sorted and without duplicates.

    With ``prune`` the search walks the lexicon trie and abandons a path as
    soon as its letters stop being a prefix of any word. Without it every
    simple path is spelled out and checked against the lexicon; both modes
    return the same words.
    """
    _check_minimum_length(minimum_length)
    if board is None:
        raise InvalidInput("board is required")
    # Raises NotReady before any traversal work
    trie = lexicon.trie

    found: set[str] = set()
    tiles = [t.lower() for t in board.tiles]

    def spelled(path: list[int]) -> str:
        return "".join(tiles[i] for i in path)

    if prune:
        def advance(node: TrieNode, tile: str) -> TrieNode | None:
            # Walk trie through all characters in this tile (handles "QU")
            current = node
            for ch in tile.lower():
                current = current.children.get(ch)
                if current is None:
                    return None
            return current

        def accept(node: TrieNode, path: list[int]) -> bool:
            if node.is_word:
                word = spelled(path)
                if len(word) >= minimum_length:
                    found.add(word)
            return False

        start_state = trie.root
    else:
        def advance(prefix: str, tile: str) -> str:
            return prefix + tile.lower()

        def accept(word: str, path: list[int]) -> bool:
            if len(word) >= minimum_length and lexicon.contains(word):
                found.add(word)
            return False

        start_state = ""

    search = PathSearch(board, advance, accept, MOORE_STEPS)
    search.run_all(start_state)

    logger.debug("Found %d words on %dx%d board (prune=%s)", len(found), board.size(), board.size(), prune)
    return sorted(found)


def locate_word(board: Board, word: str) -> list[int]:
    """Return the first path of cell indices spelling ``word``, or [].

    Start cells are tried in row-major order and neighbours axis-aligned
    before diagonal, so the result is deterministic. Matching ignores case.
    A multi-letter tile such as "Qu" matches all of its letters at once, so
    "quit" can be located through a "Qu" tile; with single-letter tiles this
    is plain per-character matching.
    """
    if word is None:
        raise InvalidInput("word is required")
    if board is None:
        raise InvalidInput("board is required")
    target = word.lower()
    if not target:
        return []

    def advance(offset: int, tile: str) -> int | None:
        piece = tile.lower()
        if target.startswith(piece, offset):
            return offset + len(piece)
        return None

    def accept(offset: int, path: list[int]) -> bool:
        return offset == len(target)

    search = PathSearch(board, advance, accept, LOCATE_STEPS)
    if search.run_all(0):
        return list(search.path)
    return []
