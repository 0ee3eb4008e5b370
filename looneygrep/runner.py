"""Running a search over files, a directory or a web page."""

from __future__ import annotations

import dataclasses
import os
import sys
import urllib.error
import urllib.request
from pathlib import Path
from typing import TextIO

from looneygrep.config import Config
from looneygrep.matching import (
    file_type_note,
    find_matches,
    highlight_all_matches,
    replace_all_matches,
    syntax_highlight_line,
)

MAX_PREVIEW_MATCHES = 1000
REPLACEMENT = "<REPLACED>"
WEB_PAGE_LABEL = "<web page>"


def fetch_url(url: str) -> str:
    """Return the body of ``url`` as text, whatever the response status."""
    try:
        response = urllib.request.urlopen(url)
    except urllib.error.HTTPError as err:
        response = err
    with response:
        raw = response.read()
        charset = response.headers.get_content_charset() or "utf-8"
    try:
        return raw.decode(charset, errors="replace")
    except LookupError:
        return raw.decode("utf-8", errors="replace")


def _split_lines(contents: str) -> list[str]:
    lines = contents.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _print_preview(
    lines: list[str],
    matches: list[tuple[int, str]],
    config: Config,
    file_path: str,
    out: TextIO,
) -> None:
    print("Preview of matches:", file=out)
    printed: set[int] = set()
    for shown, (index, _) in enumerate(matches, start=1):
        start = max(index - config.context, 0)
        end = min(index + 1 + config.context, len(lines))
        for line_idx in range(start, end):
            if line_idx in printed:
                continue
            text = lines[line_idx]
            if line_idx == index:
                text = highlight_all_matches(text, config.query, config.ignore_case)
            print(f"{line_idx + 1}: {syntax_highlight_line(text, file_path)}", file=out)
            printed.add(line_idx)
        print("---", file=out)
        if shown >= MAX_PREVIEW_MATCHES:
            print("Output truncated. Too many results.", file=out)
            break


def _prompt_replacements(
    lines: list[str],
    matches: list[tuple[int, str]],
    config: Config,
    out: TextIO,
    inp: TextIO,
) -> bool:
    """Ask about each match and replace in ``lines``; return whether anything changed."""
    replace_all = False
    changed = False
    for index, line in matches:
        if not replace_all:
            shown = highlight_all_matches(line, config.query, config.ignore_case)
            out.write(f"Replace in line {index + 1}? (y/n/all/quit): {shown} ")
            out.flush()
            answer = inp.readline().strip()
            if answer == "quit":
                break
            if answer == "all":
                replace_all = True
            elif answer != "y":
                continue
        lines[index] = replace_all_matches(
            lines[index], config.query, REPLACEMENT, config.ignore_case
        )
        changed = True
    return changed


def search_contents(
    contents: str,
    config: Config,
    file_path: str,
    out: TextIO | None = None,
    inp: TextIO | None = None,
) -> None:
    """Preview matches in ``contents`` and, if asked, replace them interactively."""
    out = sys.stdout if out is None else out
    inp = sys.stdin if inp is None else inp

    lines = _split_lines(contents)
    matches = find_matches(lines, config.query, config.ignore_case)
    _print_preview(lines, matches, config, file_path, out)

    if config.replace:
        if config.url is not None:
            print(
                "Warning: --replace is not supported when searching a URL. "
                "No changes will be made.",
                file=out,
            )
            return
        if _prompt_replacements(lines, matches, config, out, inp):
            Path(file_path).write_text("\n".join(lines), encoding="utf-8", newline="")
            print("Replacements made and file saved.", file=out)
        else:
            print("No replacements made.", file=out)

    if config.url is None:
        note = file_type_note(file_path)
        if note is not None:
            print(note, file=out)


def _read_file(path: str) -> str:
    with open(path, encoding="utf-8", newline="") as handle:
        return handle.read()


def search_file(
    config: Config, out: TextIO | None = None, inp: TextIO | None = None
) -> None:
    """Search the file named by ``config.file_path``."""
    search_contents(_read_file(config.file_path), config, config.file_path, out, inp)


def run(config: Config, out: TextIO | None = None, inp: TextIO | None = None) -> None:
    """Run the search described by ``config``."""
    out = sys.stdout if out is None else out
    if config.search_all:
        with os.scandir(".") as entries:
            files = sorted(
                (entry for entry in entries if entry.is_file()),
                key=lambda entry: entry.name,
            )
        for entry in files:
            path = os.path.join(".", entry.name)
            file_config = dataclasses.replace(config, file_path=path, url=None)
            print(f"\n=== Searching in file: {path} ===", file=out)
            search_file(file_config, out, inp)
        return

    if config.url is not None:
        search_contents(fetch_url(config.url), config, WEB_PAGE_LABEL, out, inp)
    else:
        search_file(config, out, inp)