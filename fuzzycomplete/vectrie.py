"""A trie keyed by sequences of small non-negative integers."""

from __future__ import annotations

from collections.abc import Sequence


class _Node:
    __slots__ = ("ident", "children")

    def __init__(self, size: int) -> None:
        self.ident: int | None = None
        self.children: list[_Node | None] = [None] * size


class VectorTrie:
    """Maps integer vectors whose elements lie in ``range(size)`` to identifiers."""

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError("size must be positive")
        self.size = size
        self._root = _Node(size)

    def _check(self, value: int) -> None:
        if not 0 <= value < self.size:
            raise IndexError(f"vector element {value} outside range(0, {self.size})")

    def insert(self, vec: Sequence[int], ident: int) -> None:
        """Store ``ident`` under ``vec``, replacing any previous identifier."""
        node = self._root
        for value in vec:
            self._check(value)
            child = node.children[value]
            if child is None:
                child = node.children[value] = _Node(self.size)
            node = child
        node.ident = ident

    def get(self, vec: Sequence[int]) -> int | None:
        """Return the identifier stored under ``vec``, or None."""
        node = self._root
        for value in vec:
            self._check(value)
            child = node.children[value]
            if child is None:
                return None
            node = child
        return node.ident