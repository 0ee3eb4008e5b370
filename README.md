# looneygrep

A command-line search tool that finds a string in a file, in every file in the
current directory, or in a web page. It highlights each match in red, can
print the lines around it, colours each printed line by file type, and can ask
before replacing each match.

## Installation

```sh
pip install .
```

This installs the `lg` command. The same command can also be started with
`python -m looneygrep.cli`.

## Usage

```sh
lg <query> <filename> [--ignore-case] [--replace] [--context N] [--url <url>] [--all]
```

The first argument is always the query. After that, options may come in any
order. Any argument that is not an option is taken as the file name. If more
than one is given, the last one is used.

| Option          | Effect                                                          |
|-----------------|-----------------------------------------------------------------|
| `--ignore-case` | Match without regard to case                                    |
| `--replace`     | Ask for each matching line whether to replace the matches       |
| `--context N`   | Also print `N` lines before and after each match (a value that is not a whole number counts as 0) |
| `--url <url>`   | Search the body of a web page instead of a file                 |
| `--all`         | Search every regular file in the current directory, in name order |

Setting the `IGNORE_CASE` environment variable to any value turns on
case-insensitive matching, the same as `--ignore-case`.

A file name, `--url` or `--all` is required. Without one of them, or without a
query, the command prints `Problem parsing arguments: ...` and exits with
status 1. If a file or web page cannot be read, it prints
`Application error: ...` and exits with status 1. Otherwise it ends with
`Search completed successfully.` and exits with status 0.

### Output

Each search starts with `Preview of matches:`. For every matching line, that
line and any context lines are printed with their line numbers, and each group
ends with `---`. A line that falls in the context of several matches is
printed only once. After 1000 matches the preview stops with
`Output truncated. Too many results.`

Printed lines are coloured for a true-colour terminal with a lexer chosen by
the file's extension. Lines from files with an unknown extension, and from web
pages, get plain-text colouring.

With `--all`, each file's results are headed by
`=== Searching in file: ./<name> ===`.

After a file has been searched, a short note about its type is printed for
known extensions (for example `(Python source file detected)`).

### Examples

Find `TODO` in a source file, with two lines of context:

```sh
lg TODO main.py --context 2
```

Search every file in the current directory without regard to case:

```sh
lg error --all --ignore-case
```

Search a web page:

```sh
lg Python --url https://example.com/
```

### Replacing

With `--replace`, each matching line is shown and you are asked:

```
Replace in line 12? (y/n/all/quit):
```

- `y` replaces the matches on that line.
- `n`, or any other answer, skips it.
- `all` replaces this line and every later match without asking again.
- `quit` stops asking.

Replaced matches become `<REPLACED>`. When at least one line was changed, the
file is written back with its lines joined by a single newline (without a
final one) and `Replacements made and file saved.` is printed. Otherwise
`No replacements made.` is printed. With `--url`, nothing is replaced and a
warning is printed instead.

## Using it from Python

```python
from looneygrep.config import Config
from looneygrep.runner import run

config = Config.build(["lg", "foo", "notes.txt", "--context", "1"])
run(config)
```

`Config.build` takes the full argument list, program name first, and raises
`looneygrep.config.ConfigError` when the arguments do not describe a search.
`run`, `search_file` and `search_contents` in `looneygrep.runner` accept
optional `out` and `inp` text streams in place of standard output and
standard input. `fetch_url` returns the body of a web page as text.

`looneygrep.matching` provides the building blocks on their own:
`search`, `find_matches`, `highlight_all_matches`, `replace_all_matches`,
`file_type_note` and `syntax_highlight_line`.