"""Path helpers: extensions, binary detection and relative paths."""

from __future__ import annotations

import os

_BINARY_EXTS = frozenset(
    {
        "7z", "a", "avi", "bin", "bmp", "cab", "cdr", "chw", "db", "djvu",
        "dll", "doc", "docx", "dot", "dwg", "exe", "flv", "gif", "gz", "ico",
        "iso", "jar", "jpeg", "jpg", "mdb", "mp3", "mp4", "msi", "o", "obj",
        "ods", "odt", "pdb", "pdf", "png", "ppt", "pyc", "rar", "rtf",
        "sqlite", "swf", "sys", "tgz", "tiff", "ttf", "wav", "wmv", "xla",
        "xls", "xlsm", "xlsx", "xlt", "xmcd", "zip",
    }
)


def _native(path: str) -> str:
    return path.replace("/", "\\") if os.sep == "\\" else path


def ext(path: str) -> str:
    """Lower-cased text after the last dot of ``path``, or ``""`` without a dot."""
    if "." in path:
        return path.rsplit(".", 1)[1].lower()
    return ""


def is_bin_ext(path: str) -> bool:
    """Whether the extension of ``path`` belongs to a known binary format."""
    return ext(path) in _BINARY_EXTS


def rel_path(path: str, base: str) -> str:
    """``path`` relative to ``base``, compared case-insensitively.

    When ``path`` does not start with ``base`` it is returned unchanged.
    """
    native_path = _native(path)
    native_base = _native(base).lower()
    if native_path.lower().startswith(native_base):
        return native_path[len(native_base) + 1:]
    return path