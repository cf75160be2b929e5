"""Main entry point for latest-file."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from rich.console import Console

from .config import ConfigError, SearchConfig
from .finder import LatestFileFinder
from .reporter import report


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed arguments.

    """
    parser = argparse.ArgumentParser(
        prog="latest-file",
        description="Find the most recently changed file in a directory tree",
    )

    parser.add_argument(
        "--path",
        "-p",
        type=Path,
        required=True,
        help="Specify the path to search",
    )
    parser.add_argument(
        "--before",
        "-b",
        default=None,
        metavar="YYYY-MM-DD",
        help="Exclude files modified before this date",
    )
    parser.add_argument(
        "--exclude",
        "-e",
        default=None,
        metavar="PATTERN",
        help="Exclude files whose name contains this text",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Print each directory as it is entered",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to configuration file",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Diagnostic log level (DEBUG, INFO, WARNING, ERROR)",
    )

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code.

    """
    args = parse_args(argv)

    console = Console()
    try:
        config = SearchConfig.from_args(args)
        finder = LatestFileFinder(config, console=console)
    except ConfigError as e:
        Console(stderr=True).print(f"Error: {e}", style="red", markup=False, highlight=False)
        return 1

    best = finder.find()
    report(best, console)
    return 0


if __name__ == "__main__":
    sys.exit(main())
