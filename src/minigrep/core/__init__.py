"""Core logic - line filtering and the run pipeline."""
from __future__ import annotations

from minigrep.core.search import search, search_case_insensitive, select_filter
from minigrep.core.runner import read_contents, run

__all__ = [
    "search",
    "search_case_insensitive",
    "select_filter",
    "read_contents",
    "run",
]
