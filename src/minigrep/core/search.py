"""Substring line filters."""
from __future__ import annotations

from typing import Callable, Iterator

LineFilter = Callable[[str, str], "list[str]"]


def iter_lines(contents: str) -> Iterator[str]:
    """
    Yield the lines of ``contents``.

    Lines end at ``"\\n"``; a trailing ``"\\r"`` is dropped and a final newline
    does not produce an empty last line.
    """
    if not contents:
        return
    lines = contents.split("\n")
    if lines[-1] == "":
        lines.pop()
    for line in lines:
        yield line[:-1] if line.endswith("\r") else line


def search(pattern: str, contents: str) -> list[str]:
    """Return the lines of ``contents`` containing ``pattern``, in order."""
    return [line for line in iter_lines(contents) if pattern in line]


def search_case_insensitive(pattern: str, contents: str) -> list[str]:
    """Like :func:`search`, but compares lowercased text. Returns original lines."""
    pattern = pattern.lower()
    return [line for line in iter_lines(contents) if pattern in line.lower()]


def select_filter(case_sensitive: bool) -> LineFilter:
    return search if case_sensitive else search_case_insensitive
