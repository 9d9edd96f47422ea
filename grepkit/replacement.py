"""Backreference-aware replacement of regular-expression matches."""

from __future__ import annotations

import os
import re
from enum import Enum
from typing import Iterable, Union

Token = Union[str, int]


class TextCase(Enum):
    """Letter case of a piece of text."""

    LOWER = "lower"
    UPPER = "upper"
    CAPITALIZED = "capitalized"
    MIXED = "mixed"


def backreference_length(text: str, pos: int) -> int:
    """Length of the backreference (``\\`` plus digits) starting at ``pos``.

    Returns 0 when no backreference starts there.
    """
    if text[pos] != "\\" or pos + 1 >= len(text) or not text[pos + 1].isdigit():
        return 0
    end = pos + 1
    while end < len(text) and text[end].isdigit():
        end += 1
    return end - pos


def tokenize(replacement: str) -> list[Token]:
    """Split a replacement into literal strings and group numbers."""
    tokens: list[Token] = []
    prev = 0
    i = 0
    while i < len(replacement):
        length = backreference_length(replacement, i)
        if length:
            if i > prev:
                tokens.append(replacement[prev:i])
            tokens.append(int(replacement[i + 1:i + length]))
            i += length
            prev = i
        else:
            i += 1
    if prev < len(replacement):
        tokens.append(replacement[prev:])
    return tokens


def text_case(text: str) -> TextCase:
    """Classify the letter case of ``text``."""
    if not text:
        return TextCase.LOWER
    first_upper = text[0].isalpha() and text[0].isupper()
    rest_lower = not any(ch.isalpha() and ch.isupper() for ch in text[1:])
    if first_upper and rest_lower:
        return TextCase.CAPITALIZED
    letters = [ch for ch in text if ch.isalpha()]
    has_lower = any(ch.islower() for ch in letters)
    has_upper = any(ch.isupper() for ch in letters)
    if has_lower and has_upper:
        return TextCase.MIXED
    if has_upper:
        return TextCase.UPPER
    return TextCase.LOWER


def to_text_case(text: str, case: TextCase) -> str:
    """Convert ``text`` to ``case``; mixed case leaves it unchanged."""
    if case is TextCase.CAPITALIZED:
        return text[:1].upper() + text[1:].lower()
    if case is TextCase.UPPER:
        return text.upper()
    if case is TextCase.LOWER:
        return text.lower()
    return text


def same_case(repl: str, orig: str) -> str:
    """Give ``repl`` the case of ``orig`` when that is all lower or all upper."""
    if orig.lower() == orig:
        return repl.lower()
    if orig.upper() == orig:
        return repl.upper()
    return repl


def _group(match: re.Match, index: int) -> str:
    try:
        value = match.group(index)
    except IndexError:
        return ""
    return value or ""


def with_backreferences(match: re.Match, tokens: Iterable[Token], preserve_case: bool) -> str:
    """Expand ``tokens`` against ``match``, optionally keeping the match's case."""
    case = text_case(match.group(0))
    parts = []
    for token in tokens:
        if isinstance(token, int) and not isinstance(token, bool):
            piece = _group(match, token)
        elif isinstance(token, str):
            piece = token
        else:
            raise TypeError(f"invalid replacement token: {token!r}")
        parts.append(to_text_case(piece, case) if preserve_case else piece)
    return "".join(parts)


def replace_line(
    line: str,
    pattern: Union[str, re.Pattern],
    tokens: Iterable[Token],
    preserve_case: bool,
) -> str:
    """Replace every match of ``pattern`` in ``line`` with the expanded tokens."""
    regex = re.compile(pattern)
    tokens = list(tokens)
    parts = []
    prev = 0
    for match in regex.finditer(line):
        parts.append(line[prev:match.start()])
        parts.append(with_backreferences(match, tokens, preserve_case))
        prev = match.end()
    parts.append(line[prev:])
    return "".join(parts)


def rtrimmed(line: str) -> str:
    """``line`` without trailing whitespace."""
    return line.rstrip()


def file_href(path: str, line_number: int) -> str:
    """Link to a file, with the zero-based line number shown one-based."""
    native = path.replace("/", "\\") if os.sep == "\\" else path
    return f"file:///{native}?line={line_number + 1}"