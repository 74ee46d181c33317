"""Typo-tolerant prefix autocompletion over a trie with an edit-vector automaton."""

__version__ = "0.1.0"
__all__ = ["automaton", "bitmap", "cli", "textutils", "trie", "vectrie"]