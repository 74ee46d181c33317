import io

import pytest

from fuzzycomplete.automaton import EditVectorAutomaton
from fuzzycomplete.cli import QUERY_LIMIT, load_dictionary, main, process


@pytest.fixture
def automaton():
    return EditVectorAutomaton(1)


def test_load_dictionary_normalises_words():
    trie, charset = load_dictionary(["Hello  world\n", "Café help"])
    assert trie.search("hello")
    assert trie.search("world")
    assert trie.search("cafe")
    assert trie.search("help")
    assert {"c", "a", "f", "e", "h", "l", "o", "p", "w", "r", "d"} == charset


def test_process_finds_completions(automaton):
    trie, charset = load_dictionary(["hello help world"])
    assert sorted(process("helo", charset, automaton, trie)) == ["hello", "help"]


def test_process_rejects_short_query(automaton):
    trie, charset = load_dictionary(["a ab"])
    assert process("a", charset, automaton, trie) == []
    assert process("", charset, automaton, trie) == []


def test_process_query_limit(automaton):
    long_word = "a" * (QUERY_LIMIT + 1)
    trie, charset = load_dictionary([long_word])
    assert process("a" * (QUERY_LIMIT + 1), charset, automaton, trie) == []
    assert process("a" * QUERY_LIMIT, charset, automaton, trie) == [long_word]


def test_main_usage(capsys):
    assert main([]) == 1
    assert "Usage:" in capsys.readouterr().out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1
    assert "absent.txt" in capsys.readouterr().err


def test_main_answers_queries(tmp_path, monkeypatch, capsys):
    words = tmp_path / "words.txt"
    words.write_text("hello help\nworld\n", encoding="utf-8")
    monkeypatch.setattr("sys.stdin", io.StringIO("HELO\n\nworld\n"))
    assert main([str(words)]) == 0
    out = capsys.readouterr().out
    lines = out.split("\n")
    suggestions = {line.split("Suggestion: ")[1] for line in lines if "Suggestion: " in line}
    assert suggestions == {"hello", "help"}
    assert "2" in lines
    assert "world" not in suggestions
    assert out.count("Query: ") == 2


def test_main_stops_at_eof(tmp_path, monkeypatch, capsys):
    words = tmp_path / "words.txt"
    words.write_text("world\n", encoding="utf-8")
    monkeypatch.setattr("sys.stdin", io.StringIO("wrld"))
    assert main([str(words)]) == 0
    out = capsys.readouterr().out
    assert "Suggestion: world" in out
    assert out.endswith("Query: ")