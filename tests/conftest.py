"""Pytest configuration and fixtures for minigrep tests."""

from __future__ import annotations

import logging

import pytest

import minigrep.config.settings as settings_module
from minigrep.config.constants import ENV_CASE_INSENSITIVE, ENV_LOG_LEVEL, ENV_LOG_FILE


# ============================================================================
# PYTEST FIXTURES
# ============================================================================

@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch, tmp_path):
    """Keep the real environment and ~/.minigrep/.env out of every test."""
    for name in (ENV_CASE_INSENSITIVE, ENV_LOG_LEVEL, ENV_LOG_FILE):
        # setenv first so values loaded from .env files are undone at teardown
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    data_dir = tmp_path / ".minigrep"
    data_dir.mkdir()
    monkeypatch.setattr(settings_module, "DEFAULT_DATA_DIR", data_dir)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """setup_logging replaces root handlers; put the originals back."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def poem_file(tmp_path):
    """Sample text file with the four-line poem."""
    path = tmp_path / "poem.txt"
    path.write_text("Rust:\nsafe, fast, productive.\nPick three.\nTrust me.\n", encoding="utf-8")
    return path


@pytest.fixture
def env():
    """Fake environment lookup backed by a dict."""
    values: dict[str, str] = {}

    def getenv(name: str) -> str | None:
        return values.get(name)

    getenv.values = values
    return getenv
