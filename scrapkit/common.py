"""Common string, file and directory helpers used across the scraper."""

from __future__ import annotations

import os
import time
from pathlib import Path

_FORBIDDEN_DIR_CHARS = frozenset('\\<>?":*|')


def digit_count(number: int) -> int:
    """Return the number of decimal digits of a non-negative integer."""
    if number < 0:
        raise ValueError(f"number must not be negative: {number}")
    if number == 0:
        return 1
    count = 0
    while number > 0:
        number //= 10
        count += 1
    return count


def count_occurrences(text: str, occur: str) -> int:
    """Count occurrences of ``occur`` in ``text``, overlapping ones included."""
    if not occur:
        raise ValueError("occurrence to search must not be empty")
    count = 0
    position = text.find(occur)
    while position != -1:
        count += 1
        position = text.find(occur, position + 1)
    return count


def find_last(text: str, occur: str) -> int | None:
    """Return the start index of the last occurrence of ``occur``, or None."""
    if not occur:
        raise ValueError("occurrence to search must not be empty")
    index = text.rfind(occur)
    return None if index == -1 else index


def split(text: str, delimiter: str) -> list[str]:
    """Split ``text`` on any character of ``delimiter``, dropping empty tokens."""
    if not delimiter:
        raise ValueError("delimiter must not be empty")
    tokens: list[str] = []
    current: list[str] = []
    for char in text:
        if char in delimiter:
            if current:
                tokens.append("".join(current))
                current = []
        else:
            current.append(char)
    if current:
        tokens.append("".join(current))
    return tokens


def proper_split(text: str, delimiter: str) -> list[str]:
    """Split ``text`` like :func:`split`; a trailing delimiter yields no extra token."""
    if not text:
        raise ValueError("text to split must not be empty")
    return split(text, delimiter)


def index_after(text: str, occur: str) -> int | None:
    """Return the index just past the first occurrence of ``occur``, or None."""
    start = text.find(occur)
    if start == -1:
        return None
    return start + len(occur)


def read_file(path: str | os.PathLike[str], mode: str = "r") -> str | bytes:
    """Read a whole file with carriage returns removed.

    ``mode`` is ``"r"`` (returns str) or ``"rb"`` (returns bytes).
    """
    if mode == "r":
        with open(path, "r", newline="") as handle:
            return handle.read().replace("\r", "")
    if mode == "rb":
        with open(path, "rb") as handle:
            return handle.read().replace(b"\r", b"")
    raise ValueError(f"unsupported mode {mode!r}; expected 'r' or 'rb'")


def current_time() -> str:
    """Return the current local time, e.g. ``"Sun Oct  1 13:12:00 2019"``."""
    return time.ctime(time.time())


def make_dirs(path: str | os.PathLike[str]) -> Path:
    """Create a directory and its parents, like ``mkdir -p``.

    Raises ValueError if the path holds a forbidden character or no component.
    """
    text = os.fspath(path)
    bad = _FORBIDDEN_DIR_CHARS.intersection(text)
    if bad:
        raise ValueError(f"directory path contains forbidden characters: {''.join(sorted(bad))}")
    if not any(part for part in text.split("/")):
        raise ValueError(f"directory path has no component: {text!r}")
    target = Path(text)
    target.mkdir(parents=True, exist_ok=True)
    return target


def dir_exists(path: str | os.PathLike[str]) -> bool:
    """Return True if ``path`` is an existing directory."""
    return os.path.isdir(path)