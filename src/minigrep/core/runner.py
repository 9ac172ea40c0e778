"""Run pipeline: read the file, filter it, print the matches."""
from __future__ import annotations

import sys
from typing import TextIO

from minigrep.core.logging_config import get_logger
from minigrep.core.search import select_filter
from minigrep.errors import FileReadError
from minigrep.models import SearchConfig

logger = get_logger(__name__)


def read_contents(filename: str) -> str:
    """
    Read the whole file as UTF-8 text.

    Newlines are returned untranslated.

    Raises:
        FileReadError: If the file cannot be opened, read or decoded
    """
    try:
        with open(filename, encoding="utf-8", newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise FileReadError(filename, e) from e


def run(config: SearchConfig, out: TextIO | None = None) -> None:
    """
    Print every line of the configured file that contains the pattern.

    Args:
        config: Resolved search configuration
        out: Output stream, defaults to sys.stdout

    Raises:
        FileReadError: If the file cannot be read
    """
    logger.debug(
        "Searching %s for %r (case_sensitive=%s)",
        config.filename,
        config.pattern,
        config.case_sensitive,
    )
    contents = read_contents(config.filename)

    results = select_filter(config.case_sensitive)(config.pattern, contents)
    logger.debug("Found %d matching lines", len(results))

    stream = out if out is not None else sys.stdout
    for line in results:
        stream.write(f"{line}\n")
