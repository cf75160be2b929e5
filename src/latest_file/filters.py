"""Candidate filters applied to each visited entry."""

from __future__ import annotations

from datetime import date, datetime, time


def cutoff_timestamp(cutoff_date: date) -> float:
    """Return the POSIX timestamp of local midnight at the start of ``cutoff_date``."""
    return datetime.combine(cutoff_date, time.min).timestamp()


def is_after_cutoff(file_time: float, cutoff_date: date) -> bool:
    """Check whether a timestamp falls on or after the cutoff date.

    Args:
        file_time: POSIX timestamp of the entry.
        cutoff_date: First day that still counts.

    Returns:
        True if ``file_time`` is at or after local midnight of ``cutoff_date``.

    """
    return file_time >= cutoff_timestamp(cutoff_date)


def is_excluded(name: str, pattern: str) -> bool:
    """Check whether ``pattern`` occurs literally anywhere in ``name``."""
    return pattern in name
