import pytest

from boggle_engine.errors import InvalidInput, NotReady
from boggle_engine.lexicon import Lexicon, Trie, load_lexicon


def _make_lexicon(words: list[str]) -> Lexicon:
    return Lexicon.from_words(words)


def test_words_are_lowercased():
    lexicon = _make_lexicon(["Cat", "DOG"])
    assert lexicon.contains("cat")
    assert lexicon.contains("dog")
    # Lookups are exact on the stored form
    assert not lexicon.contains("CAT")


def test_duplicates_and_blank_lines_collapse():
    lexicon = _make_lexicon(["cat\n", "CAT", "cat", "\n", "  "])
    assert len(lexicon) == 1
    assert list(lexicon) == ["cat"]


def test_iteration_is_sorted():
    lexicon = _make_lexicon(["pear", "apple", "fig"])
    assert list(lexicon) == ["apple", "fig", "pear"]


def test_has_word_with_prefix():
    lexicon = _make_lexicon(["ab", "ad", "abc", "abd", "abdc"])
    assert lexicon.has_word_with_prefix("ab")
    assert lexicon.has_word_with_prefix("abd")
    assert lexicon.has_word_with_prefix("abdc")
    assert not lexicon.has_word_with_prefix("z")
    assert not lexicon.has_word_with_prefix("abdcx")
    assert not lexicon.has_word_with_prefix("ac")


def test_empty_prefix():
    assert _make_lexicon(["a"]).has_word_with_prefix("")
    assert not _make_lexicon([]).has_word_with_prefix("")


def test_prefix_past_last_word():
    lexicon = _make_lexicon(["apple", "banana"])
    assert lexicon.ceiling("c") is None
    assert not lexicon.has_word_with_prefix("c")


def test_ceiling():
    lexicon = _make_lexicon(["apple", "banana", "cherry"])
    assert lexicon.ceiling("b") == "banana"
    assert lexicon.ceiling("banana") == "banana"
    assert lexicon.ceiling("bananas") == "cherry"


def test_prefix_monotonicity():
    words = ["tap", "taps", "tape", "tin", "top", "stop", "spot"]
    lexicon = _make_lexicon(words)
    alphabet = "abcdefghijklmnopqrstuvwxyz"
    prefixes = ["", "t", "ta", "x", "st", "sx", "tapx", "q"]
    for prefix in prefixes:
        if not lexicon.has_word_with_prefix(prefix):
            for ch in alphabet:
                assert not lexicon.has_word_with_prefix(prefix + ch)


def test_prefix_query_agrees_with_trie():
    words = ["tap", "taps", "tape", "tin", "top", "stop", "spot"]
    lexicon = _make_lexicon(words)
    for prefix in ["t", "ta", "tap", "tapes", "s", "sp", "spa", "o"]:
        assert lexicon.has_word_with_prefix(prefix) == (lexicon.trie.find(prefix) is not None)


def test_queries_before_load_raise_not_ready():
    lexicon = Lexicon()
    assert not lexicon.is_loaded
    with pytest.raises(NotReady):
        lexicon.contains("cat")
    with pytest.raises(NotReady):
        lexicon.has_word_with_prefix("c")
    with pytest.raises(NotReady):
        lexicon.trie


def test_none_arguments_raise_invalid_input():
    lexicon = _make_lexicon(["cat"])
    with pytest.raises(InvalidInput):
        lexicon.contains(None)
    with pytest.raises(InvalidInput):
        lexicon.has_word_with_prefix(None)
    with pytest.raises(InvalidInput):
        Lexicon.from_words(None)


def test_non_string_entry_raises_invalid_input():
    with pytest.raises(InvalidInput):
        Lexicon.from_words(["cat", 42])


def test_trie_insert_and_find():
    trie = Trie()
    trie.insert("cat")
    trie.insert("car")
    node = trie.find("ca")
    assert node is not None
    assert not node.is_word
    assert set(node.children) == {"t", "r"}
    assert trie.find("cat").is_word
    assert trie.find("cow") is None


def test_load_lexicon_from_file(tmp_path):
    dict_file = tmp_path / "words.txt"
    dict_file.write_text("Apple\nbanana\n\nCHERRY\napple\n", encoding="utf-8")
    lexicon = load_lexicon(dict_file)
    assert lexicon.is_loaded
    assert list(lexicon) == ["apple", "banana", "cherry"]


def test_load_lexicon_missing_file(tmp_path):
    with pytest.raises(InvalidInput):
        load_lexicon(tmp_path / "missing.txt")


def test_load_lexicon_none_path():
    with pytest.raises(InvalidInput):
        load_lexicon(None)
