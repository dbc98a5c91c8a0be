"""Rate limiters, a trie, functional helpers and classic design patterns."""

__version__ = "0.1.0"