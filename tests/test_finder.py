"""Tests for the search service."""

from __future__ import annotations

import io
import logging
from pathlib import Path

import pytest
from rich.console import Console
from rich.logging import RichHandler

from latest_file.config import ConfigError, SearchConfig
from latest_file.finder import LatestFileFinder


@pytest.fixture
def console_buffer() -> io.StringIO:
    """Buffer capturing progress output."""
    return io.StringIO()


def _finder(config: SearchConfig, buffer: io.StringIO) -> LatestFileFinder:
    return LatestFileFinder(config, console=Console(file=buffer, width=200))


class TestLogging:
    """Tests for logger setup."""

    def test_rich_handler_installed(self, tmp_path: Path, console_buffer: io.StringIO) -> None:
        """Test that a RichHandler is attached at the configured level."""
        finder = _finder(SearchConfig(root_path=tmp_path, log_level="INFO"), console_buffer)

        handlers = finder.logger.handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], RichHandler)
        assert handlers[0].level == logging.INFO

    def test_handlers_not_duplicated(self, tmp_path: Path, console_buffer: io.StringIO) -> None:
        """Test that recreating the finder replaces old handlers."""
        config = SearchConfig(root_path=tmp_path)
        _finder(config, console_buffer)
        finder = _finder(config, console_buffer)

        assert len(finder.logger.handlers) == 1

    def test_file_handler(self, tmp_path: Path, console_buffer: io.StringIO) -> None:
        """Test that diagnostics are written to the log file."""
        log_file = tmp_path / "logs" / "latest.log"
        config = SearchConfig(root_path=tmp_path / "missing", log_file=log_file)

        finder = _finder(config, console_buffer)
        finder.find()
        for handler in finder.logger.handlers:
            handler.flush()

        text = log_file.read_text(encoding="utf-8")
        assert "| WARNING | Cannot open" in text
        assert "Walk finished" in text


class TestFind:
    """Tests for running a search."""

    def test_find_returns_best_and_stats(self, tmp_path: Path, console_buffer: io.StringIO) -> None:
        """Test that find() returns the match and records walk stats."""
        (tmp_path / "a.txt").write_text("x")
        finder = _finder(SearchConfig(root_path=tmp_path), console_buffer)

        best = finder.find()

        assert best.path == tmp_path / "a.txt"
        assert finder.stats.entries_seen == 1
        assert finder.stats.complete

    def test_verbose_progress(self, tmp_path: Path, console_buffer: io.StringIO) -> None:
        """Test that verbose searches print entering lines to the console."""
        (tmp_path / "sub").mkdir()
        finder = _finder(SearchConfig(root_path=tmp_path, verbose=True), console_buffer)

        finder.find()

        assert console_buffer.getvalue() == f"entering {tmp_path / 'sub'}\n"

    def test_requires_root(self, console_buffer: io.StringIO) -> None:
        """Test that searching without a root path is rejected."""
        finder = _finder(SearchConfig(), console_buffer)

        with pytest.raises(ValueError):
            finder.find()

    def test_unusable_log_file(self, tmp_path: Path, console_buffer: io.StringIO) -> None:
        """Test that a log file that cannot be created raises ConfigError."""
        blocker = tmp_path / "blocker"
        blocker.write_text("x")
        config = SearchConfig(root_path=tmp_path, log_file=blocker / "log.txt")

        with pytest.raises(ConfigError, match="Cannot open log file"):
            _finder(config, console_buffer)
