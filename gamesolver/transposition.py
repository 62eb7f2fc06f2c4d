"""Transposition tables for memoizing solved positions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Hashable, Optional


class ScoreKind(Enum):
    """Which bound a stored score is."""

    LOWER_BOUND = "lower"
    UPPER_BOUND = "upper"


@dataclass(frozen=True)
class Score:
    """A bound on the score of a position."""

    kind: ScoreKind
    value: int

    @classmethod
    def lower_bound(cls, value: int) -> Score:
        """A lower bound on the score."""
        return cls(ScoreKind.LOWER_BOUND, value)

    @classmethod
    def upper_bound(cls, value: int) -> Score:
        """An upper bound on the score, which prunes many branches."""
        return cls(ScoreKind.UPPER_BOUND, value)


class TranspositionTable:
    """A memo of score bounds keyed by position."""

    def __init__(self) -> None:
        self._scores: dict[Hashable, Score] = {}

    def get(self, board: Hashable) -> Optional[Score]:
        """The stored score for ``board``, or None."""
        return self._scores.get(board)

    def insert(self, board: Hashable, score: Score) -> None:
        """Store ``score`` for ``board``, replacing any earlier one."""
        self._scores[board] = score

    def has(self, board: Hashable) -> bool:
        """Whether ``board`` has a stored score."""
        return board in self._scores

    def __contains__(self, board: Hashable) -> bool:
        return self.has(board)

    def __len__(self) -> int:
        return len(self._scores)