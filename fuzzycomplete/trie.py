"""Character trie with edit-distance bounded prefix completion."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass, field

from .automaton import DEAD_STATE, INITIAL_STATE, EditVectorAutomaton
from .bitmap import Bitmap


def _fold_case(ch: str) -> str:
    return ch.lower() if ch.isascii() else ch


@dataclass
class _Node:
    is_word: bool = False
    children: dict[str, _Node] = field(default_factory=dict)


class Trie:
    """A set of words supporting exact lookup and fuzzy prefix completion."""

    def __init__(self) -> None:
        self._root = _Node()

    def insert(self, word: str) -> None:
        """Add ``word``; ASCII letters are stored lower-cased."""
        node = self._root
        for ch in word:
            node = node.children.setdefault(_fold_case(ch), _Node())
        node.is_word = True

    def search(self, word: str) -> bool:
        """Return True if ``word`` was inserted (ASCII case ignored)."""
        node = self._root
        for ch in word:
            child = node.children.get(_fold_case(ch))
            if child is None:
                return False
            node = child
        return node.is_word

    def traverse(
        self, query: str, automaton: EditVectorAutomaton, bitmap: Bitmap
    ) -> list[str]:
        """Return words whose prefix lies within the automaton's threshold of ``query``."""
        threshold = automaton.threshold
        width = automaton.editvec_length
        lower_bound = len(query) - threshold
        upper_bound = len(query) + threshold

        matches: list[str] = []
        active: deque[tuple[_Node, str, int, int]] = deque(
            [(self._root, "", INITIAL_STATE, 0)]
        )
        while active:
            node, prefix, state, level = active.popleft()
            for ch, child in node.children.items():
                bitmask = bitmap.extract_bitmask(ch, level, width)
                next_state = automaton.next_state(state, bitmask)
                if next_state == DEAD_STATE:
                    continue

                extended = prefix + ch
                entry = (child, extended, next_state, level + 1)
                if len(extended) < lower_bound:
                    active.append(entry)
                elif len(extended) <= upper_bound:
                    editvec = automaton.editvec(next_state)
                    distance = editvec[threshold + len(query) - len(extended)]
                    if distance > threshold:
                        active.append(entry)
                    elif len(extended) >= len(query):
                        matches.extend(self._collect(child, extended))
                    elif child.is_word:
                        matches.append(extended)
                    else:
                        active.append(entry)
        return matches

    @staticmethod
    def _collect(node: _Node, prefix: str) -> Iterator[str]:
        stack = [(node, prefix)]
        while stack:
            current, word = stack.pop()
            if current.is_word:
                yield word
            stack.extend((child, word + ch) for ch, child in current.children.items())