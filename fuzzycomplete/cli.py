"""Interactive fuzzy autocompletion over a word list."""

from __future__ import annotations

import sys
from collections.abc import Iterable

from .automaton import EditVectorAutomaton
from .bitmap import Bitmap
from .textutils import normalize, split
from .trie import Trie

QUERY_LIMIT = 2048
EDIT_DISTANCE_THRESHOLD = 1


def load_dictionary(lines: Iterable[str]) -> tuple[Trie, set[str]]:
    """Build a trie and its character set from space-separated words in ``lines``."""
    trie = Trie()
    charset: set[str] = set()
    for line in lines:
        for token in split(line.rstrip("\n"), " "):
            word = normalize(token)
            charset.update(word)
            trie.insert(word)
    return trie, charset


def process(
    query: str, charset: set[str], automaton: EditVectorAutomaton, trie: Trie
) -> list[str]:
    """Return completions for an already normalised ``query``."""
    if len(query) <= automaton.threshold or len(query) > QUERY_LIMIT:
        return []
    bitmap = Bitmap(query, charset, automaton.threshold)
    return trie.traverse(query, automaton, bitmap)


def main(argv: list[str] | None = None) -> int:
    """Load a word list, then answer queries read from standard input."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print("Usage: fuzzycomplete <suggestions>")
        return 1

    try:
        with open(args[0], encoding="utf-8") as handle:
            trie, charset = load_dictionary(handle)
    except OSError as exc:
        print(f"fuzzycomplete: cannot read {args[0]}: {exc}", file=sys.stderr)
        return 1

    automaton = EditVectorAutomaton(EDIT_DISTANCE_THRESHOLD)

    print("Query: ", end="", flush=True)
    for line in sys.stdin:
        query = line.rstrip("\n")
        if not query:
            break
        suggestions = process(normalize(query), charset, automaton, trie)
        for suggestion in suggestions:
            print(f"Suggestion: {suggestion}")
        print(len(suggestions))
        print("Query: ", end="", flush=True)
    return 0


if __name__ == "__main__":
    sys.exit(main())