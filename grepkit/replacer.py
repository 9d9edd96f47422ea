"""Planning and applying line replacements and file renames."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from typing import Iterable, Mapping, Union

from grepkit.replacement import replace_line, tokenize


@dataclass(frozen=True)
class ReplaceItem:
    """One line to change: its zero-based number and the text before and after."""

    line: int
    before: str
    after: str


@dataclass
class ReplaceFile:
    """All planned line changes for one file."""

    path: str
    items: list[ReplaceItem] = field(default_factory=list)


@dataclass(frozen=True)
class ReplaceOutcome:
    """Counts of changed files and lines, and of files that could not be changed."""

    files: int
    lines: int
    errors: int


def build_replace_file(
    path: str,
    lines: Mapping[int, str],
    matched: Iterable[int],
    pattern: Union[str, re.Pattern],
    replacement: str,
    preserve_case: bool,
) -> ReplaceFile:
    """Plan the replacement of every matched line of ``path``.

    ``lines`` maps zero-based line numbers to their text; missing lines count as empty.
    """
    regex = re.compile(pattern)
    tokens = tokenize(replacement)
    result = ReplaceFile(path)
    for number in matched:
        text = lines.get(number, "")
        result.items.append(
            ReplaceItem(number, text, replace_line(text, regex, tokens, preserve_case))
        )
    return result


def rename_targets(
    paths: Iterable[str],
    pattern: Union[str, re.Pattern],
    replacement: str,
    preserve_case: bool,
) -> list[tuple[str, str]]:
    """Pair each path with the path its file name becomes after replacement."""
    regex = re.compile(pattern)
    tokens = tokenize(replacement)
    renames = []
    for path in paths:
        directory, name = os.path.split(path)
        new_name = replace_line(name, regex, tokens, preserve_case)
        renames.append((path, os.path.join(directory, new_name)))
    return renames


def _read_lines(path: str) -> list[tuple[str, str]]:
    with open(path, encoding="utf-8", errors="surrogateescape", newline="") as handle:
        result = []
        for raw in handle:
            body = raw.rstrip("\r\n")
            result.append((body, raw[len(body):]))
        return result


def _write_lines(path: str, lines: list[tuple[str, str]]) -> None:
    with open(path, "w", encoding="utf-8", errors="surrogateescape", newline="") as handle:
        handle.write("".join(body + ending for body, ending in lines))


def _apply_file(file: ReplaceFile) -> bool:
    try:
        lines = _read_lines(file.path)
    except OSError:
        return False
    for item in file.items:
        if item.line < 0 or item.line >= len(lines):
            return False
        body, ending = lines[item.line]
        if body != item.before:
            return False
        lines[item.line] = (item.after, ending)
    try:
        _write_lines(file.path, lines)
    except OSError:
        return False
    return True


def apply_replacements(files: Iterable[ReplaceFile]) -> ReplaceOutcome:
    """Write the planned changes, skipping any file whose lines no longer match."""
    changed_files = changed_lines = errors = 0
    for file in files:
        if _apply_file(file):
            changed_files += 1
            changed_lines += len(file.items)
        else:
            errors += 1
    return ReplaceOutcome(changed_files, changed_lines, errors)


def rename_files(renames: Iterable[tuple[str, str]]) -> tuple[int, int]:
    """Rename files, never over an existing target; return (successful, failed)."""
    successful = failed = 0
    for source, target in renames:
        if os.path.lexists(target):
            failed += 1
            continue
        try:
            os.rename(source, target)
        except OSError:
            failed += 1
        else:
            successful += 1
    return successful, failed