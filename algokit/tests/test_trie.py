import pytest

from algokit.data_structures.advanced.trie import Trie


@pytest.fixture
def trie():
    t = Trie()
    for word in ["apple", "app", "apply", "banana", "band"]:
        t.insert(word)
    return t


def test_search_requires_complete_word(trie):
    assert trie.search("apple")
    assert trie.search("app")
    assert not trie.search("appl")
    assert not trie.search("ban")
    assert not trie.search("bandana")


def test_starts_with_any_prefix_of_inserted_word(trie):
    for word in ["apple", "apply", "banana", "band"]:
        for i in range(len(word) + 1):
            assert trie.starts_with(word[:i])
    assert not trie.starts_with("c")
    assert not trie.starts_with("bands")


def test_prefix_is_not_a_word_until_inserted():
    t = Trie()
    t.insert("apple")
    assert not t.search("app")
    assert t.starts_with("app")
    t.insert("app")
    assert t.search("app")


def test_insert_is_idempotent(trie):
    before = len(trie)
    trie.insert("apple")
    trie.insert("apple")
    assert len(trie) == before == 5
    assert trie.words_with_prefix("apple") == ["apple"]


def test_empty_trie_and_empty_word():
    t = Trie()
    assert not t.search("")
    assert t.starts_with("")
    assert len(t) == 0
    t.insert("")
    assert t.search("")
    assert "" in t


def test_words_with_prefix(trie):
    assert sorted(trie.words_with_prefix("app")) == ["app", "apple", "apply"]
    assert trie.words_with_prefix("ban") == ["banana", "band"]
    assert trie.words_with_prefix("zzz") == []
    assert sorted(trie) == sorted(trie.execute())
    assert sorted(trie.execute()) == ["app", "apple", "apply", "banana", "band"]


def test_unicode_and_arbitrary_characters():
    t = Trie()
    t.insert("naïve")
    t.insert("日本語")
    t.insert("a b\tc")
    assert t.search("naïve")
    assert t.starts_with("日本")
    assert t.search("a b\tc")
    assert not t.search("naive")


def test_contains(trie):
    assert "band" in trie
    assert "ban" not in trie
    assert 42 not in trie


def test_deep_word_does_not_recurse():
    t = Trie()
    word = "x" * 20000
    t.insert(word)
    assert t.search(word)
    assert t.words_with_prefix("x" * 19999) == [word]
