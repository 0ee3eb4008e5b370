"""Command-line configuration for a search."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable
from dataclasses import dataclass

_CONTEXT_RE = re.compile(r"\+?[0-9]+")


class ConfigError(ValueError):
    """Raised when the command-line arguments do not describe a search."""


def _parse_context(value: str | None) -> int:
    if value is None or not _CONTEXT_RE.fullmatch(value):
        return 0
    return int(value)


@dataclass
class Config:
    """Options for one search run."""

    query: str
    file_path: str = ""
    ignore_case: bool = False
    replace: bool = False
    url: str | None = None
    context: int = 0
    search_all: bool = False

    @classmethod
    def build(cls, args: Iterable[str]) -> Config:
        """Build a configuration from an argument list whose first item is the program name.

        The ``IGNORE_CASE`` environment variable, when set, turns on
        case-insensitive matching.
        """
        items = iter(args)
        next(items, None)
        query = next(items, None)
        if query is None:
            raise ConfigError("Didn't get a query string")

        file_path = ""
        url: str | None = None
        ignore_case = "IGNORE_CASE" in os.environ
        replace = False
        context = 0
        search_all = False

        for arg in items:
            if arg == "--replace":
                replace = True
            elif arg == "--ignore-case":
                ignore_case = True
            elif arg == "--url":
                url = next(items, None)
            elif arg == "--context":
                context = _parse_context(next(items, None))
            elif arg == "--all":
                search_all = True
            else:
                file_path = arg

        if not search_all and not file_path and url is None:
            raise ConfigError("Didn't get a file path or URL")

        return cls(
            query=query,
            file_path=file_path,
            ignore_case=ignore_case,
            replace=replace,
            url=url,
            context=context,
            search_all=search_all,
        )