from __future__ import annotations

import logging
from bisect import bisect_left
from typing import Iterable

from boggle_engine.errors import InvalidInput, NotReady

logger = logging.getLogger("boggle")


class TrieNode:
    __slots__ = ("children", "is_word")

    def __init__(self):
        self.children: dict[str, TrieNode] = {}
        self.is_word: bool = False


class Trie:
    def __init__(self):
        self.root = TrieNode()

    def insert(self, word: str):
        node = self.root
        for ch in word:
            if ch not in node.children:
                node.children[ch] = TrieNode()
            node = node.children[ch]
        node.is_word = True

    def find(self, prefix: str) -> TrieNode | None:
        node = self.root
        for ch in prefix:
            node = node.children.get(ch)
            if node is None:
                return None
        return node


class Lexicon:
    """A fixed set of lowercase words answering membership and prefix queries.

    ``Lexicon()`` is the not-loaded state: every query raises NotReady until
    a loaded instance is built with :meth:`from_words` or :func:`load_lexicon`.
    """

    def __init__(self):
        self._sorted: list[str] | None = None
        self._members: frozenset[str] = frozenset()
        self._trie: Trie | None = None

    @classmethod
    def from_words(cls, words: Iterable[str] | None) -> Lexicon:
        if words is None:
            raise InvalidInput("word list is required")
        members = set()
        for idx, raw in enumerate(words):
            if not isinstance(raw, str):
                raise InvalidInput(f"word {idx} must be a string, got {raw!r}")
            word = raw.strip().lower()
            if word:
                members.add(word)

        trie = Trie()
        for word in members:
            trie.insert(word)

        lexicon = cls()
        lexicon._sorted = sorted(members)
        lexicon._members = frozenset(members)
        lexicon._trie = trie
        return lexicon

    @property
    def is_loaded(self) -> bool:
        return self._sorted is not None

    def require_loaded(self):
        if self._sorted is None:
            raise NotReady("lexicon has not been loaded")

    @property
    def trie(self) -> Trie:
        self.require_loaded()
        return self._trie

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self):
        self.require_loaded()
        return iter(self._sorted)

    def contains(self, word: str) -> bool:
        """Exact membership on the stored lowercase form; callers fold case."""
        if word is None:
            raise InvalidInput("word is required")
        self.require_loaded()
        return word in self._members

    __contains__ = contains

    def ceiling(self, key: str) -> str | None:
        """Return the least stored word >= ``key``, or None."""
        if key is None:
            raise InvalidInput("key is required")
        self.require_loaded()
        i = bisect_left(self._sorted, key)
        if i < len(self._sorted):
            return self._sorted[i]
        return None

    def has_word_with_prefix(self, prefix: str) -> bool:
        # Any word starting with prefix sorts at or after it, and the least
        # such word precedes every word that does not share the prefix.
        successor = self.ceiling(prefix)
        return successor is not None and successor.startswith(prefix)


def load_lexicon(path) -> Lexicon:
    """Read a newline-delimited word file into a loaded Lexicon."""
    if path is None:
        raise InvalidInput("dictionary path is required")
    try:
        with open(path, "r", encoding="utf-8") as f:
            lexicon = Lexicon.from_words(f)
    except OSError as e:
        raise InvalidInput(f"cannot read dictionary {path}: {e}") from e
    logger.info("Loaded %d words from %s", len(lexicon), path)
    return lexicon
