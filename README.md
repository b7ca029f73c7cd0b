# rgitkit

Small helpers for building command-line Git tools: terminal-aware text
formatting, relative time strings, and validation and parsing of
Git-related values. The only dependency is `wcwidth`.

## Installation

```
pip install rgitkit
```

## Text and display helpers: `rgitkit.text`

```python
from rgitkit.text import (
    TextAlign,
    format_time_ago,
    humanize_size,
    pad_string,
    truncate_string,
    word_wrap,
    create_progress_bar,
)

humanize_size(1536)                        # "1.5 KB"
truncate_string("hello world", 5)          # "he..."
pad_string("id", 6, TextAlign.RIGHT)       # "    id"
word_wrap("a long line of text", 10)       # ["a long", "line of", "text"]
create_progress_bar(50, 100, 20)           # 10 filled cells, 10 empty cells
format_time_ago(1_700_000_000 - 300, 1_700_000_000)   # "5 minutes ago"
```

Also in this module:

- `format_time`, `format_date` and `format_local_date` turn a Unix
  timestamp into `YYYY-MM-DD HH:MM:SS` (UTC, UTC with a ` UTC` suffix, or
  local time). `current_time` returns the current Unix time in seconds.
  `format_time_ago` uses the current time when `now` is not given.
- `truncate_by_width`, `pad_string` and `center_text` measure text in
  terminal cells, so wide characters such as CJK text are handled correctly.
- `create_separator(width, character)` draws a line at most 120 cells long.
- `get_terminal_size()` returns `(columns, rows)`, or `(80, 24)` when
  standard output is not a terminal.
- `colorize(text, *names)` wraps text in ANSI codes for style names such as
  `"bold"` or `"dimmed"` and colour names such as `"red"` or
  `"bright_blue"`; an unknown name raises `ValueError`. Colour is turned
  off when `NO_COLOR` is set or `CLICOLOR` is `0`, and forced on by a
  non-zero `CLICOLOR_FORCE`.
- `highlight_matches(text, pattern, case_sensitive)` highlights every
  literal occurrence of `pattern` in bold yellow.

`humanize_size` raises `ValueError` for a negative size, and
`create_progress_bar` raises `ValueError` when `current` lies outside
`0..total`.

## Git helpers: `rgitkit.gitinfo`

```python
from rgitkit.gitinfo import (
    parse_git_url,
    is_valid_ref_name,
    is_valid_email,
    validate_commit_message,
    find_common_prefix,
    shorten_oid,
    FileChangeStats,
    BranchStatus,
)

info = parse_git_url("git@example.com:user/repo.git")
info.protocol, info.host, info.path        # ("ssh", "example.com", "user/repo")
info.repository_name()                     # "repo"
info.owner()                               # "user"

is_valid_ref_name("feature/new-feature")   # True
is_valid_ref_name("feature..name")         # False
is_valid_email("user@example.com")         # True

validate_commit_message("Fix bug.")        # ["Subject line should not end with a period"]

find_common_prefix(["/home/user/project/src/main.rs",
                    "/home/user/project/tests/test.rs"])
# PosixPath("/home/user/project")

shorten_oid("a1b2c3d4e5f6789012345678901234567890abcd", 7)   # "a1b2c3d"

FileChangeStats(files=2, additions=10, deletions=1).format_summary()
# "2 files, 10 insertions, 1 deletion"

BranchStatus(has_upstream=True, ahead=2).is_up_to_date()   # False
```

Further details:

- `parse_git_url` understands `git@host:path`, `https://`, `http://` and
  `git://` URLs and returns `None` for anything else; a trailing `.git` or
  `/` is dropped from the path.
- `get_relative_path` strips the repository root from a path, leaving paths
  outside it unchanged. `is_path_in_repo` resolves the path on disk and
  returns `False` if it does not exist.
- `shorten_oid` accepts a hexadecimal object id or 20 raw bytes and raises
  `ValueError` for anything else.
- `BranchStatus.format_status()` returns a coloured text such as
  `"2 ahead, 1 behind"`, `"up to date"` or `"no upstream"`.
- `generate_random_string(length)` returns random lower-case letters and
  digits.

## What this package does not do

It does not read Git repositories. `FileChangeStats` and `BranchStatus`
hold and format counts that the caller supplies; nothing here computes a
diff or an ahead/behind count from a repository. There is no command-line
program: the package is a library of functions.

## Running the tests

```
pip install -e ".[test]"
pytest
```