"""Recursive directory walk feeding the best-match accumulator."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Callable, Literal

from .filesystem import FileRecord
from .filters import is_after_cutoff, is_excluded

if TYPE_CHECKING:
    from .accumulator import BestMatch
    from .config import SearchConfig
    from .filesystem import FileSystem

_PSEUDO_ENTRIES = frozenset({os.curdir, os.pardir})


@dataclass(frozen=True)
class EntryFailure:
    """A directory or entry that could not be read."""

    path: Path
    reason: Literal["open", "stat"]
    error: str

    def __str__(self) -> str:
        action = "open" if self.reason == "open" else "get the file information of"
        return f"Cannot {action} {self.path}: {self.error}"


@dataclass
class WalkStats:
    """Counters collected during one walk."""

    directories_visited: int = 0
    entries_seen: int = 0
    candidates: int = 0
    failures: list[EntryFailure] = field(default_factory=list)

    @property
    def complete(self) -> bool:
        """True when every directory and entry was readable."""
        return not self.failures


class TreeWalker:
    """Depth-first walk that offers filtered entries to a BestMatch.

    Filters decide which entries are candidates, never which subtrees are
    explored: every directory is descended into.
    """

    def __init__(
        self,
        config: SearchConfig,
        filesystem: FileSystem,
        logger: logging.Logger,
        on_enter: Callable[[Path], None] | None = None,
    ) -> None:
        """Initialize the walker.

        Args:
            config: Search configuration supplying the filters.
            filesystem: Filesystem to read.
            logger: Logger for per-entry diagnostics.
            on_enter: Called with each subdirectory before descending into it
                when the config is verbose.

        """
        self.config = config
        self.filesystem = filesystem
        self.logger = logger
        self.on_enter = on_enter

    def walk(self, root: Path, best: BestMatch) -> WalkStats:
        """Walk the tree under ``root``, updating ``best`` in place.

        Args:
            root: Directory to start from.
            best: Accumulator receiving candidates.

        Returns:
            Statistics, including any local failures.

        """
        stats = WalkStats()
        self._walk_directory(Path(root), best, stats)
        return stats

    def is_candidate(self, record: FileRecord) -> bool:
        """Apply the cutoff and exclusion filters to one entry."""
        if self.config.cutoff_date is not None and not is_after_cutoff(
            record.effective_time, self.config.cutoff_date
        ):
            return False
        if self.config.exclude_pattern and is_excluded(record.name, self.config.exclude_pattern):
            return False
        return True

    def _read_entry(self, path: Path) -> FileRecord | EntryFailure:
        try:
            return self.filesystem.stat(path)
        except OSError as e:
            return EntryFailure(path=path, reason="stat", error=e.strerror or str(e))

    def _record_failure(self, failure: EntryFailure, stats: WalkStats) -> None:
        self.logger.warning("%s", failure)
        stats.failures.append(failure)

    def _offer(self, record: FileRecord, best: BestMatch) -> None:
        try:
            if best.update(record.path, record.effective_time):
                self.logger.debug("New latest: %s", record.path)
        except MemoryError:
            self.logger.error("Cannot allocate memory recording %s", record.path)

    def _walk_directory(self, directory: Path, best: BestMatch, stats: WalkStats) -> None:
        try:
            names = self.filesystem.list_dir(directory)
        except OSError as e:
            self._record_failure(
                EntryFailure(path=directory, reason="open", error=e.strerror or str(e)),
                stats,
            )
            return

        stats.directories_visited += 1

        for name in names:
            if name in _PSEUDO_ENTRIES:
                continue

            result = self._read_entry(directory / name)
            if isinstance(result, EntryFailure):
                # Skip only this entry
                self._record_failure(result, stats)
                continue

            stats.entries_seen += 1

            if self.is_candidate(result):
                stats.candidates += 1
                self._offer(result, best)

            if result.is_directory:
                if self.config.verbose and self.on_enter is not None:
                    self.on_enter(result.path)
                self._walk_directory(result.path, best, stats)
