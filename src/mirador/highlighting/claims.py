"""Claimed character ranges for the syntax tokenizer.

Each tokenizer pass claims ranges of the code for one role. A later pass
may only claim characters no earlier pass has claimed, so comments win
over strings, strings over numbers, and so on.

ClaimedRanges keeps the claims sorted by start offset. Overlap checks and
insertion are binary searches over that list, so a pass over n matches
costs O(n log n) instead of comparing every match to every claim.

Thread Safety:
    A ClaimedRanges is built and consumed inside one highlight() call and
    never shared. FormattedRun is frozen.
"""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from enum import Enum


class SyntaxRole(Enum):
    """Semantic role of a run of code. The theme maps roles to colors."""

    PLAIN = "plain"
    COMMENT = "comment"
    STRING = "string"
    NUMBER = "number"
    KEYWORD = "keyword"
    TYPE = "type"
    FUNCTION = "function"


@dataclass(frozen=True, slots=True)
class FormattedRun:
    """A run of code ``[start, end)`` tagged with a role.

    ``emphasized`` marks runs drawn in a heavier weight (keywords).
    """

    start: int
    end: int
    role: SyntaxRole
    emphasized: bool = False

    @property
    def length(self) -> int:
        return self.end - self.start


class ClaimedRanges:
    """Sorted set of disjoint, half-open claimed ranges."""

    __slots__ = ("_starts", "_runs")

    def __init__(self) -> None:
        self._starts: list[int] = []
        self._runs: list[FormattedRun] = []

    def __len__(self) -> int:
        return len(self._runs)

    def overlaps(self, start: int, end: int) -> bool:
        """Check if ``[start, end)`` shares a character with any claim."""
        i = bisect_right(self._starts, start)
        if i > 0 and self._runs[i - 1].end > start:
            return True
        return i < len(self._starts) and self._starts[i] < end

    def claim(self, start: int, end: int, role: SyntaxRole, *, emphasized: bool = False) -> bool:
        """Claim ``[start, end)`` for a role.

        Returns:
            True if the range was claimed, False if it was empty or overlaps
            an existing claim (nothing is recorded then).
        """
        if end <= start or self.overlaps(start, end):
            return False
        i = bisect_right(self._starts, start)
        self._starts.insert(i, start)
        self._runs.insert(i, FormattedRun(start, end, role, emphasized))
        return True

    def partition(self, length: int) -> tuple[FormattedRun, ...]:
        """Cover ``[0, length)`` with the claims plus PLAIN gap runs.

        The result is sorted with no gaps and no overlaps.
        """
        runs: list[FormattedRun] = []
        pos = 0
        for run in self._runs:
            if run.start > pos:
                runs.append(FormattedRun(pos, run.start, SyntaxRole.PLAIN))
            runs.append(run)
            pos = run.end
        if pos < length:
            runs.append(FormattedRun(pos, length, SyntaxRole.PLAIN))
        return tuple(runs)


__all__ = ["ClaimedRanges", "FormattedRun", "SyntaxRole"]
