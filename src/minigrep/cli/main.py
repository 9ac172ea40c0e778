#!/usr/bin/env python
"""minigrep - print the lines of a file that contain a pattern"""
from __future__ import annotations

import sys

from rich.console import Console
from rich.markup import escape

from minigrep.config import Config, load_env_files
from minigrep.config.constants import (
    USAGE,
    HELP_TEXT,
    ERROR_PARSING_ARGUMENTS,
    ERROR_APPLICATION,
)
from minigrep.core import run
from minigrep.core.logging_config import LogConfig, setup_logging, get_logger
from minigrep.errors import InsufficientArguments, FileReadError

logger = get_logger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Entry point"""
    if argv is None:
        argv = sys.argv
    err_console = Console(stderr=True)

    # Flags only count when given alone; otherwise every argument is search input
    flags = set(argv[1:]) if len(argv) == 2 else set()
    if "--version" in flags:
        from minigrep import __version__

        print(__version__)
        return 0
    if "-h" in flags or "--help" in flags:
        print(USAGE)
        print()
        print(HELP_TEXT, end="")
        return 0

    load_env_files()
    setup_logging(LogConfig.from_env())

    # Prepare configuration
    try:
        config = Config.from_argv(argv)
    except InsufficientArguments as e:
        err_console.print(f"[red]{ERROR_PARSING_ARGUMENTS}:[/red] {escape(str(e))}")
        err_console.print(USAGE, markup=False, highlight=False)
        return 1

    # Run
    try:
        run(config)
    except FileReadError as e:
        logger.debug("Run failed", exc_info=True)
        err_console.print(f"[red]{ERROR_APPLICATION}:[/red] {escape(str(e))}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
