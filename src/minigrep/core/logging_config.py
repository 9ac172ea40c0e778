"""Centralized logging configuration for minigrep."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from logging.handlers import RotatingFileHandler

from rich.console import Console
from rich.logging import RichHandler

from minigrep.config.constants import (
    DEFAULT_DATA_DIR,
    DEFAULT_LOGS_SUBDIR,
    DEFAULT_LOG_FILE_NAME,
    DEFAULT_LOG_LEVEL,
    ENV_LOG_LEVEL,
    ENV_LOG_FILE,
)
from minigrep.config.settings import Getenv, _get_env_str


@dataclass
class LogConfig:
    """Logging configuration."""

    level: str = DEFAULT_LOG_LEVEL
    file_enabled: bool = False
    file_path: str = str(DEFAULT_DATA_DIR / DEFAULT_LOGS_SUBDIR / DEFAULT_LOG_FILE_NAME)
    file_max_bytes: int = 10485760  # 10MB
    file_backup_count: int = 5
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    use_rich_console: bool = True

    @classmethod
    def from_env(cls, getenv: Getenv | None = None) -> "LogConfig":
        """Create LogConfig from MINIGREP_LOG_* environment variables."""
        file_path = _get_env_str(ENV_LOG_FILE, getenv=getenv)
        config = cls(level=_get_env_str(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL, getenv=getenv))
        if file_path is not None:
            config.file_enabled = True
            config.file_path = file_path
        return config


def setup_logging(config: LogConfig) -> None:
    """
    Configure logging with optional file rotation and console output on stderr.

    Stdout is reserved for matching lines, so every console handler writes
    to stderr.

    Args:
        config: Logging configuration
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, config.level.upper(), logging.WARNING))

    # Remove existing handlers
    root_logger.handlers.clear()

    formatter = logging.Formatter(config.format)

    if config.file_enabled:
        log_path = Path(config.file_path).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=config.file_max_bytes,
            backupCount=config.file_backup_count,
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    if config.use_rich_console:
        console_handler = RichHandler(console=Console(stderr=True), rich_tracebacks=True)
        console_handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        console_handler = logging.StreamHandler()  # stderr
        console_handler.setFormatter(formatter)

    root_logger.addHandler(console_handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the given name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)
