# grepkit

grepkit holds the core logic of a search-and-replace tool as plain Python functions and
classes. It has no GUI code and no dependencies outside the standard library.

## Modules

- **`grepkit.replacement`** parses a replacement string that contains backreferences
  (`\1`, `\12`, ...) into literal strings and group numbers with `tokenize`.
  `with_backreferences` expands those tokens against one `re.Match`. `replace_line`
  replaces every match in a line. With `preserve_case` set, each expanded piece takes
  the case of the whole match: lower, upper, capitalized, or left as it is when the
  case is mixed (`TextCase`, `text_case`, `to_text_case`). The module also has
  `same_case`, `rtrimmed`, `backreference_length` and `file_href`. `file_href` builds
  a `file:///...?line=N` link and shows a zero-based line number one-based.
- **`grepkit.zebra`** takes matched line numbers and builds context ranges around
  them, merging ranges that touch (`merge_ranges`). `do_zebra` gives each merged range
  an alternating stripe value. It returns the stripe value for every line and the
  value the next call should start with.
- **`grepkit.replacer`** plans line changes for a file with `build_replace_file`,
  giving a `ReplaceFile` that holds `ReplaceItem`s. `rename_targets` computes the new
  paths when a pattern is applied to file names. `apply_replacements` writes the
  changes back to disk and keeps line endings. It skips any file whose lines no longer
  match the expected text and returns a `ReplaceOutcome` that counts files, lines and
  errors. `rename_files` performs renames without overwriting existing targets and
  returns `(successful, failed)`.
- **`grepkit.utils`** has path helpers:
  - `ext` gives the lower-cased extension.
  - `is_bin_ext` tells whether the extension belongs to a known binary format.
  - `rel_path` gives a path relative to a base, compared case-insensitively.
- **`grepkit.progress`** builds the status shown while searching, replacing and
  renaming, as a `ProgressStatus`, using `started_status`, `progress_status`,
  `aborted_status`, `replaced_status` and `renamed_status`.
- **`grepkit.buttons`** models configurable buttons that float over table rows or
  columns (`TableButton`, `Orientation`, `ButtonType`, `ButtonPosition`).
  `TableButtonGroup` gives the joint bounds of the buttons of one orientation.
- **`grepkit.tablebuttons`** works out where those buttons go. `Header` describes the
  section sizes and scroll offset of a table header. `TableButtons.layout` returns one
  `Placement` per button for a given pointer position.
- **`grepkit.viewoptions`** provides `ViewOptions`, the visibility flags for the
  search, filter, display, navigate and cache controls. It has toggles, `all`,
  `set_all` and JSON round-tripping with `to_json` and `from_json`.
- **`grepkit.settings`** provides `Settings`, which keeps sessions, patterns, paths,
  style, view options and editors in `settings.json`. The file lives in a given
  directory or, by default, in the per-user data directory under `grepkit`.
  `load` and `save` read and write it. `error` reports a directory that could not be
  created.

## Installation

```
pip install .
```

## Examples

```python
import re
from grepkit.replacement import tokenize, replace_line

tokens = tokenize(r"new_\1")
print(replace_line("OLD_FOO and old_bar", re.compile(r"old_(\w+)", re.I), tokens, True))
# NEW_FOO and new_bar
```

```python
from grepkit.zebra import do_zebra

stripes, initial = do_zebra(2, 2, [2, 4, 10], True)
# lines 0..6 -> True, lines 8..12 -> False; initial stays True (two ranges)
```

## What grepkit does not do

grepkit does not walk directories or search files itself. The caller supplies the
matched lines. It does not render results as HTML, and it has no windows, dialogs,
colour themes or command-line command. It is a library to build such a tool on.

## Running the tests

```
pip install .[test]
pytest
```