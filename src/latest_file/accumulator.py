"""Best-match tracking across a walk."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass
class BestMatch:
    """The newest candidate seen so far.

    Replacement is strictly greater-than, so among equal times the first
    candidate offered is kept.
    """

    path: Path | None = None
    time: float = 0.0

    @property
    def found(self) -> bool:
        return self.path is not None

    def update(self, path: Path, time: float) -> bool:
        """Offer a candidate.

        Args:
            path: Candidate path.
            time: Candidate effective time.

        Returns:
            True if the candidate replaced the current best.

        """
        if self.path is not None and not time > self.time:
            return False

        # Both fields change together or not at all
        self.path, self.time = Path(path), time
        return True

    def merge(self, other: BestMatch) -> bool:
        """Fold another accumulator's result into this one.

        Returns:
            True if this accumulator changed.

        """
        if other.path is None:
            return False
        return self.update(other.path, other.time)
