"""Line matching, highlighting, replacement and file-type helpers."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from functools import lru_cache
from pathlib import PurePath

from pygments import highlight
from pygments.formatters import TerminalTrueColorFormatter
from pygments.lexer import Lexer
from pygments.lexers import get_lexer_for_filename
from pygments.lexers.special import TextLexer
from pygments.util import ClassNotFound

RED = "\x1b[31m"
RESET = "\x1b[0m"

_FILE_TYPE_NOTES = {
    "rs": "(Rust source file detected)",
    "txt": "(Text file detected)",
    "md": "(Markdown file detected)",
    "html": "(HTML file detected)",
    "htm": "(HTML file detected)",
    "css": "(CSS file detected)",
    "json": "(JSON file detected)",
    "xml": "(XML file detected)",
    "yaml": "(YAML file detected)",
    "yml": "(YAML file detected)",
    "toml": "(TOML file detected)",
    "log": "(Log file detected)",
    "csv": "(CSV file detected)",
    "conf": "(Configuration file detected)",
    "cfg": "(Configuration file detected)",
    "sh": "(Shell script detected)",
    "bat": "(Batch script detected)",
    "php": "(PHP source file detected)",
    "java": "(Java source file detected)",
    "go": "(Go source file detected)",
    "py": "(Python source file detected)",
    "js": "(JavaScript source file detected)",
    "c": "(C source/header file detected)",
    "h": "(C source/header file detected)",
}

_FORMATTER = TerminalTrueColorFormatter(style="monokai")


def search(lines: Iterable[str], matcher: Callable[[str], bool]) -> list[str]:
    """Return the lines for which ``matcher`` is true."""
    return [line for line in lines if matcher(line)]


def _contains(line: str, query: str, ignore_case: bool) -> bool:
    if ignore_case:
        return query.lower() in line.lower()
    return query in line


def find_matches(
    lines: Iterable[str], query: str, ignore_case: bool
) -> list[tuple[int, str]]:
    """Return ``(index, line)`` pairs for every line containing ``query``."""
    return [
        (index, line)
        for index, line in enumerate(lines)
        if _contains(line, query, ignore_case)
    ]


def _match_spans(line: str, query: str, ignore_case: bool) -> Iterator[int]:
    """Yield start positions of non-overlapping matches of a non-empty query."""
    haystack, needle = (line.lower(), query.lower()) if ignore_case else (line, query)
    start = 0
    while (pos := haystack.find(needle, start)) != -1:
        yield pos
        start = pos + len(query)


def highlight_all_matches(line: str, query: str, ignore_case: bool) -> str:
    """Wrap every occurrence of ``query`` in ``line`` in red ANSI escapes."""
    if not query:
        return line
    parts = []
    last = 0
    for pos in _match_spans(line, query, ignore_case):
        end = pos + len(query)
        parts.append(line[last:pos])
        parts.append(f"{RED}{line[pos:end]}{RESET}")
        last = end
    parts.append(line[last:])
    return "".join(parts)


def replace_all_matches(
    line: str, query: str, replacement: str, ignore_case: bool
) -> str:
    """Replace every occurrence of ``query`` in ``line`` with ``replacement``."""
    if not ignore_case or not query:
        return line.replace(query, replacement)
    parts = []
    last = 0
    for pos in _match_spans(line, query, ignore_case):
        parts.append(line[last:pos])
        parts.append(replacement)
        last = pos + len(query)
    parts.append(line[last:])
    return "".join(parts)


def _extension(file_path: str) -> str:
    suffix = PurePath(file_path).suffix
    return suffix[1:] if suffix else ""


def file_type_note(file_path: str) -> str | None:
    """Return a short note naming the file type, or None for unknown extensions."""
    return _FILE_TYPE_NOTES.get(_extension(file_path))


@lru_cache(maxsize=None)
def _lexer_for(extension: str) -> Lexer:
    if extension:
        try:
            return get_lexer_for_filename(
                f"file.{extension}", stripnl=False, ensurenl=False
            )
        except ClassNotFound:
            pass
    return TextLexer(stripnl=False, ensurenl=False)


def syntax_highlight_line(line: str, file_path: str) -> str:
    """Colour ``line`` for a true-colour terminal using the lexer for the file's extension."""
    return highlight(line, _lexer_for(_extension(file_path)), _FORMATTER)