"""Output of the search result."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from rich.console import Console

if TYPE_CHECKING:
    from .accumulator import BestMatch

TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_timestamp(timestamp: float) -> str:
    """Format a POSIX timestamp as local ``YYYY-MM-DD HH:MM:SS``."""
    return datetime.fromtimestamp(timestamp).strftime(TIME_FORMAT)


def report(best: BestMatch, console: Console | None = None) -> None:
    """Print the best match, or a message that nothing qualified.

    Args:
        best: Result of the walk.
        console: Console to print to. Uses stdout if None.

    """
    console = console or Console()

    if not best.found:
        console.print("No file found", markup=False, highlight=False)
        return

    console.print(
        f"File: {best.path} Date: {format_timestamp(best.time)}",
        markup=False,
        highlight=False,
        soft_wrap=True,
    )
