# fuzzycomplete

Typo-tolerant autocompletion. Dictionary words are stored in a trie. Each query is matched against the trie with an edit-vector automaton, so suggestions still appear when the query is off by up to one edit: an insertion, a deletion or a substitution.

## Installation

```
pip install .
```

## Command line

```
fuzzycomplete suggestions.txt
```

`suggestions.txt` is a UTF-8 text file. Each line is split on spaces, and every non-empty token is normalised and added to the dictionary.

If the command is not given exactly one argument, it prints a usage line and exits with status 1. If the file cannot be read, it reports the error on standard error and exits with status 1.

After loading the file, the program prompts with `Query: ` and reads one query per line from standard input. It normalises each query the same way as the dictionary words, then prints:

- one `Suggestion: <word>` line for every match;
- the number of matches.

An empty line, or the end of input, ends the session.

Two kinds of query always give no suggestions:

- queries no longer than the edit-distance threshold, which is 1;
- queries longer than 2048 characters (`QUERY_LIMIT`).

## Normalisation

`fuzzycomplete.textutils.normalize` works on the UTF-8 bytes of its input:

- ASCII characters are lower-cased;
- the byte `0xC3`, which leads the two-byte encoding of Latin-1 letters, is dropped;
- a following byte for a common accented letter (`à`–`ä`, `è`–`ë`, `ì`–`ï`, `ò`–`ö`, `ù`–`ü`, `ç`, `ñ`, in upper or lower case) becomes its plain letter;
- every other non-ASCII byte becomes `?`.

`split(text, delim)` splits on a delimiter and drops empty tokens. `ascii_fold(byte)` folds a single byte value; signed values from -128 to -1 are accepted as well.

## Library use

```python
from fuzzycomplete.automaton import EditVectorAutomaton
from fuzzycomplete.cli import load_dictionary, process
from fuzzycomplete.textutils import normalize

trie, charset = load_dictionary(["apple application apply", "banana"])
automaton = EditVectorAutomaton(1)

print(process(normalize("aple"), charset, automaton, trie))
```

`load_dictionary(lines)` returns a `Trie` and the set of characters in its words. `process(query, charset, automaton, trie)` expects a query that has already been normalised.

The building blocks can also be used directly:

- `fuzzycomplete.trie.Trie`: `insert(word)` and `search(word)` add and look up words, ignoring ASCII case. `traverse(query, automaton, bitmap)` runs the fuzzy search and returns the matching words.
- `fuzzycomplete.bitmap.Bitmap(text, charset, offset)` records where each character of the charset occurs in the query. `extract_bitmask(ch, lo, width)` packs a window of those positions into an integer. For `traverse`, build it from the query, the dictionary's character set and the automaton's `threshold`.
- `fuzzycomplete.automaton.EditVectorAutomaton(threshold)` precomputes every state and transition. `next_state(state, bitmask)` raises `KeyError` for an unknown transition. `editvec(state)` raises `IndexError` for an unknown state. `describe()` returns a text listing of all transitions.
- `fuzzycomplete.vectrie.VectorTrie(size)` maps integer vectors with elements in `range(size)` to identifiers. The automaton uses it internally.

## Limitations

- Suggestions are not ranked. They come out in the order the search reaches them.
- The dictionary is rebuilt from the word list on every run and is never saved.
- The command always uses an edit-distance threshold of 1. Other thresholds are only available through the library.

## Running the tests

```
pip install .[test]
pytest
```