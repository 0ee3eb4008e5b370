import re

import pytest

from looneygrep.matching import (
    file_type_note,
    find_matches,
    highlight_all_matches,
    replace_all_matches,
    search,
    syntax_highlight_line,
)

ANSI = re.compile(r"\x1b\[[0-9;]*m")


def test_context_lines():
    contents = "line1\nmatch\nline3\nmatch\nline5"
    matches = find_matches(contents.splitlines(), "match", False)
    assert matches == [(1, "match"), (3, "match")]


def test_find_matches_ignore_case():
    lines = ["Alpha", "beta", "ALPHABET"]
    assert find_matches(lines, "alpha", True) == [(0, "Alpha"), (2, "ALPHABET")]
    assert find_matches(lines, "alpha", False) == []


def test_replace_all_matches():
    assert replace_all_matches("foo bar foo", "foo", "baz", False) == "baz bar baz"


def test_replace_all_matches_ignore_case_keeps_other_text():
    assert replace_all_matches("Foo bar FOO", "foo", "X", True) == "X bar X"


def test_replace_case_sensitive_skips_other_case():
    assert replace_all_matches("Foo foo", "foo", "X", False) == "Foo X"


def test_highlight_all_matches():
    highlighted = highlight_all_matches("foo bar foo", "foo", False)
    assert "\x1b[31mfoo\x1b[0m" in highlighted
    assert highlighted.count("\x1b[31m") == 2


def test_highlight_ignore_case_keeps_original_text():
    highlighted = highlight_all_matches("Foo bar", "foo", True)
    assert highlighted == "\x1b[31mFoo\x1b[0m bar"


def test_highlight_strips_back_to_original():
    line = "abcabcab"
    assert ANSI.sub("", highlight_all_matches(line, "ab", False)) == line


def test_highlight_empty_query_returns_line():
    assert highlight_all_matches("foo", "", False) == "foo"


def test_search_with_matcher():
    lines = ["foo", "bar", "baz"]
    assert search(lines, lambda line: "ba" in line) == ["bar", "baz"]


@pytest.mark.parametrize(
    ("path", "note"),
    [
        ("test.rs", "(Rust source file detected)"),
        ("test.py", "(Python source file detected)"),
        ("test.txt", "(Text file detected)"),
        ("dir/page.htm", "(HTML file detected)"),
        ("header.h", "(C source/header file detected)"),
    ],
)
def test_file_type_note(path, note):
    assert file_type_note(path) == note


@pytest.mark.parametrize("path", ["test.unknown", "Makefile", "<web page>", ".bashrc"])
def test_file_type_note_unknown(path):
    assert file_type_note(path) is None


def test_syntax_highlight_line():
    highlighted = syntax_highlight_line("fn main() {}", "test.rs")
    assert "\x1b[" in highlighted


@pytest.mark.parametrize("path", ["test.rs", "notes.txt", "noext", "x.py"])
def test_syntax_highlight_preserves_text(path):
    line = "fn main() { let x = 1; }"
    assert ANSI.sub("", syntax_highlight_line(line, path)) == line