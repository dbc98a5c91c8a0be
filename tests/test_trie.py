import pytest

from patternkit.trie import Trie

WORDS = ["Garden", "Java", "Language", "Trie", "Ga"]


@pytest.fixture
def trie():
    t = Trie()
    for word in WORDS:
        t.insert(word)
    return t


def test_finds_inserted_word(trie):
    assert trie.find("Java") is True


@pytest.mark.parametrize("word", WORDS)
def test_all_inserted_words_found(trie, word):
    assert trie.find(word)


@pytest.mark.parametrize("word", ["Ja", "Gar", "Lang", "Planet", "java", ""])
def test_prefixes_and_unknown_words_not_found(trie, word):
    assert trie.find(word) is False


def test_root_character():
    assert Trie().root.char == "/"


def test_shared_prefix_nodes(trie):
    ga = trie.root.children["G"].children["a"]
    assert ga.is_ending is True
    assert list(ga.children) == ["r"]


def test_unicode_words():
    t = Trie()
    t.insert("你好")
    assert t.find("你好")
    assert not t.find("你")