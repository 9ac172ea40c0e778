"""
Configuration resolution from command-line arguments and the environment.

Sources (highest to lowest):
1. Process environment variables
2. .env files (./.env, ~/.minigrep/.env); never override variables already set
3. Hardcoded constants (constants.py)
"""

from __future__ import annotations

import logging
import os
import re
from typing import Callable, Sequence, overload
from pathlib import Path
from dotenv import load_dotenv

from ..errors import InsufficientArguments
from ..models import SearchConfig
from .constants import (
    DEFAULT_DATA_DIR,
    ENV_FILE,
    ENV_CASE_INSENSITIVE,
    CASE_INSENSITIVE_ENABLED,
    REQUIRED_ARG_COUNT,
    ERROR_NOT_ENOUGH_ARGUMENTS,
)

logger = logging.getLogger(__name__)

Getenv = Callable[[str], "str | None"]

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def load_env_files() -> list[Path]:
    """Load .env files from standard locations. Returns the files that were loaded.

    Files that cannot be read or decoded are skipped.
    """
    env_locations = [
        Path.cwd() / ENV_FILE,  # Working directory
        DEFAULT_DATA_DIR / ENV_FILE,  # Data directory
    ]

    loaded = []
    for env_path in env_locations:
        if env_path.exists():
            try:
                load_dotenv(env_path, override=False)  # Don't override already-set vars
            except (OSError, UnicodeDecodeError) as e:
                logger.debug("Skipping unreadable env file %s: %s", env_path, e)
                continue
            loaded.append(env_path)
    return loaded


@overload
def _get_env_str(key: str, default: str, getenv: Getenv | None = None) -> str: ...


@overload
def _get_env_str(key: str, default: None = None, getenv: Getenv | None = None) -> str | None: ...


def _get_env_str(key: str, default: str | None = None, getenv: Getenv | None = None) -> str | None:
    """Get string value from environment variable. Empty strings are treated as missing."""
    value = (getenv or os.getenv)(key)
    if value is None or value == "":
        return default
    return value


def _get_env_int(key: str, default: int, getenv: Getenv | None = None) -> int:
    """Get integer value from environment variable.

    Only an optional sign followed by ASCII digits is accepted; anything else
    (whitespace, underscores, non-ASCII digits) falls back to ``default``.
    """
    value = (getenv or os.getenv)(key)
    if value is None or not _INTEGER_RE.fullmatch(value):
        return default
    return int(value)


def resolve_case_sensitive(getenv: Getenv | None = None) -> bool:
    """Search is case-insensitive iff CASE_INSENSITIVE parses as the integer 1."""
    return _get_env_int(ENV_CASE_INSENSITIVE, 0, getenv) != CASE_INSENSITIVE_ENABLED


class Config:
    """Builds the immutable SearchConfig for one invocation."""

    @classmethod
    def from_argv(cls, argv: Sequence[str], getenv: Getenv | None = None) -> SearchConfig:
        """
        Resolve configuration from full program arguments.

        Args:
            argv: Invocation arguments; the first element is the program name
            getenv: Environment lookup, defaults to os.getenv

        Raises:
            InsufficientArguments: If pattern or filename is missing
        """
        return cls.from_args(list(argv)[1:], getenv=getenv)

    @classmethod
    def from_args(cls, args: Sequence[str], getenv: Getenv | None = None) -> SearchConfig:
        """Resolve configuration from the meaningful arguments (pattern, filename, ...)."""
        if len(args) < REQUIRED_ARG_COUNT:
            raise InsufficientArguments(ERROR_NOT_ENOUGH_ARGUMENTS)

        pattern, filename = args[0], args[1]
        return SearchConfig(
            pattern=pattern,
            filename=filename,
            case_sensitive=resolve_case_sensitive(getenv),
        )
