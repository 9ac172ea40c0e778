"""Tests for minigrep.core.runner."""
from __future__ import annotations

import io
import logging

import pytest

from minigrep.core.runner import read_contents, run
from minigrep.errors import FileReadError, MinigrepError
from minigrep.models import SearchConfig


class TestReadContents:
    """Tests for read_contents."""

    def test_reads_whole_file(self, poem_file):
        assert read_contents(str(poem_file)).startswith("Rust:\nsafe")

    def test_keeps_crlf(self, tmp_path):
        path = tmp_path / "crlf.txt"
        path.write_bytes(b"one\r\ntwo\r\n")
        assert read_contents(str(path)) == "one\r\ntwo\r\n"

    def test_missing_file_raises(self, tmp_path):
        missing = tmp_path / "n0t @ f!L3"
        with pytest.raises(FileReadError) as exc_info:
            read_contents(str(missing))

        assert isinstance(exc_info.value.cause, FileNotFoundError)
        assert exc_info.value.__cause__ is exc_info.value.cause
        assert exc_info.value.filename == str(missing)
        assert str(exc_info.value) == str(exc_info.value.cause)
        assert str(exc_info.value).count(str(missing)) == 1

    def test_directory_raises(self, tmp_path):
        with pytest.raises(FileReadError) as exc_info:
            read_contents(str(tmp_path))

        assert isinstance(exc_info.value.cause, OSError)

    def test_invalid_utf8_raises(self, tmp_path):
        path = tmp_path / "binary.dat"
        path.write_bytes(b"ok\n\xff\xfe\xfa\n")
        with pytest.raises(FileReadError) as exc_info:
            read_contents(str(path))

        assert isinstance(exc_info.value.cause, UnicodeDecodeError)
        assert str(exc_info.value).startswith(f"{path}: ")


class TestRun:
    """Tests for run."""

    def test_prints_matches(self, poem_file):
        out = io.StringIO()
        run(SearchConfig("duct", str(poem_file), True), out=out)
        assert out.getvalue() == "safe, fast, productive.\n"

    def test_case_insensitive_dispatch(self, poem_file):
        out = io.StringIO()
        run(SearchConfig("RuSt", str(poem_file), case_sensitive=False), out=out)
        assert out.getvalue() == "Rust:\nTrust me.\n"

    def test_no_matches_is_success(self, poem_file):
        out = io.StringIO()
        run(SearchConfig("absent", str(poem_file)), out=out)
        assert out.getvalue() == ""

    def test_defaults_to_stdout(self, poem_file, capsys):
        run(SearchConfig("Pick", str(poem_file)))
        assert capsys.readouterr().out == "Pick three.\n"

    def test_run_failure(self, tmp_path):
        config = SearchConfig("pattern", str(tmp_path / "n0t @ f!L3"))
        with pytest.raises(MinigrepError):
            run(config, out=io.StringIO())

    def test_logs_match_count(self, poem_file, caplog):
        with caplog.at_level(logging.DEBUG, logger="minigrep.core.runner"):
            run(SearchConfig("e", str(poem_file)), out=io.StringIO())

        assert "Found 3 matching lines" in caplog.text
