"""Filesystem access used by the tree walker."""

from __future__ import annotations

import stat
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class FileRecord:
    """Metadata snapshot of one directory entry."""

    path: Path
    is_directory: bool
    change_time: float
    modify_time: float

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def effective_time(self) -> float:
        """The later of the metadata-change and content-modification times."""
        return max(self.change_time, self.modify_time)


@runtime_checkable
class FileSystem(Protocol):
    """Interface the walker uses to read a directory tree."""

    def list_dir(self, path: Path) -> list[str]:
        """List entry names of a directory.

        Args:
            path: Directory to list.

        Returns:
            Entry names in the order the filesystem enumerates them.

        Raises:
            OSError: If the directory cannot be opened.

        """
        ...

    def stat(self, path: Path) -> FileRecord:
        """Read metadata for a path.

        Args:
            path: Path to inspect.

        Returns:
            FileRecord for the path.

        Raises:
            OSError: If the metadata cannot be read.

        """
        ...


class LocalFileSystem:
    """FileSystem backed by the operating system."""

    def list_dir(self, path: Path) -> list[str]:
        return [entry.name for entry in path.iterdir()]

    def stat(self, path: Path) -> FileRecord:
        st = path.stat()
        return FileRecord(
            path=path,
            is_directory=stat.S_ISDIR(st.st_mode),
            change_time=st.st_ctime,
            modify_time=st.st_mtime,
        )
