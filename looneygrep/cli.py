"""The ``lg`` command."""

from __future__ import annotations

import sys

from looneygrep.config import Config, ConfigError
from looneygrep.runner import run

PROGRAM_NAME = "lg"


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, run the search and return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        config = Config.build([PROGRAM_NAME, *args])
    except ConfigError as err:
        print(f"Problem parsing arguments: {err}", file=sys.stderr)
        return 1
    try:
        run(config)
    except (OSError, ValueError) as err:
        print(f"Application error: {err}", file=sys.stderr)
        return 1
    print("Search completed successfully.")
    return 0


if __name__ == "__main__":
    sys.exit(main())