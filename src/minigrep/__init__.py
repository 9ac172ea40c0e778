from __future__ import annotations

__version__ = "0.1.0"
__author__ = "minigrep Contributors"

from minigrep.models import SearchConfig
from minigrep.errors import MinigrepError, InsufficientArguments, FileReadError
from minigrep.config import Config
from minigrep.core import search, search_case_insensitive, run

__all__ = [
    "SearchConfig",
    "MinigrepError",
    "InsufficientArguments",
    "FileReadError",
    "Config",
    "search",
    "search_case_insensitive",
    "run",
]
