"""Runs one latest-file search."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler

from .accumulator import BestMatch
from .config import ConfigError
from .filesystem import LocalFileSystem
from .walker import TreeWalker, WalkStats

if TYPE_CHECKING:
    from .config import SearchConfig
    from .filesystem import FileSystem


class LatestFileFinder:
    """Wires configuration, logging and the tree walker together."""

    def __init__(
        self,
        config: SearchConfig,
        filesystem: FileSystem | None = None,
        console: Console | None = None,
    ) -> None:
        """Initialize the finder.

        Args:
            config: Validated search configuration.
            filesystem: Filesystem to walk. Uses the local one if None.
            console: Console for progress lines. Uses stdout if None.

        """
        self.config = config
        self.console = console or Console()
        self.logger = self._setup_logging()
        self.walker = TreeWalker(
            config,
            filesystem or LocalFileSystem(),
            self.logger,
            on_enter=self._print_entering,
        )
        self.stats = WalkStats()

    def _setup_logging(self) -> logging.Logger:
        """Set up logging for the search.

        Returns:
            Configured logger instance.

        """
        logger = logging.getLogger("latest-file")
        logger.setLevel(logging.DEBUG if self.config.log_file else self.config.numeric_log_level)

        # Clear existing handlers to avoid duplicates if the finder is recreated
        if logger.handlers:
            logger.handlers.clear()

        # Diagnostics go to stderr so stdout only carries the result
        console_handler = RichHandler(
            console=Console(stderr=True),
            show_time=False,
            show_path=False,
        )
        console_handler.setLevel(self.config.numeric_log_level)
        logger.addHandler(console_handler)

        if self.config.log_file is not None:
            try:
                self.config.log_file.parent.mkdir(parents=True, exist_ok=True)
                file_handler = logging.FileHandler(self.config.log_file)
            except OSError as e:
                raise ConfigError(f"Cannot open log file {self.config.log_file}: {e}") from e
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(
                logging.Formatter("%(asctime)s | %(levelname)s | %(message)s")
            )
            logger.addHandler(file_handler)

        return logger

    def _print_entering(self, path: Path) -> None:
        self.console.print(f"entering {path}", markup=False, highlight=False, soft_wrap=True)

    def find(self) -> BestMatch:
        """Walk the configured root and return the newest candidate.

        Returns:
            The best match; empty if nothing qualified.

        """
        best = BestMatch()
        root = self.config.root_path
        if root is None:
            raise ValueError("root_path must be set before searching")

        self.logger.debug("Searching %s", root)
        self.stats = self.walker.walk(root, best)
        self.logger.debug(
            "Walk finished: directories=%d, entries=%d, candidates=%d, failures=%d",
            self.stats.directories_visited,
            self.stats.entries_seen,
            self.stats.candidates,
            len(self.stats.failures),
        )
        return best
