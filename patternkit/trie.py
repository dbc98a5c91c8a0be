"""A character trie supporting insertion and exact-word lookup."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class TrieNode:
    """A trie node holding one character and its children keyed by character."""

    char: str
    is_ending: bool = False
    children: dict[str, TrieNode] = field(default_factory=dict)


class Trie:
    """A trie of words, looked up by exact match."""

    def __init__(self) -> None:
        self.root = TrieNode("/")

    def insert(self, word: str) -> None:
        """Add a word to the trie."""
        node = self.root
        for ch in word:
            node = node.children.setdefault(ch, TrieNode(ch))
        node.is_ending = True

    def find(self, word: str) -> bool:
        """Return True if the exact word was inserted; prefixes do not match."""
        node = self.root
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                return False
            node = child
        return node.is_ending