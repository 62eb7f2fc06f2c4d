"""Tracking of visited positions for games that can repeat."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, Hashable, TypeVar

T = TypeVar("T", bound=Hashable)


class LoopyTracker(Generic[T]):
    """The positions visited since the last irreversible move.

    A game updates it when a move is made and checks it for its state.
    """

    def __init__(self) -> None:
        self._visited: list[T] = []

    def has_visited(self, state: T) -> bool:
        """Whether ``state`` has been visited."""
        return state in self._visited

    def mark_visited(self, state: T) -> None:
        """Record ``state`` as visited."""
        self._visited.append(state)

    def halfmoves(self) -> int:
        """The number of positions visited."""
        return len(self._visited)

    def clear(self) -> None:
        """Forget all positions; used in place of marking on irreversible moves."""
        self._visited.clear()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LoopyTracker):
            return NotImplemented
        return self._visited == other._visited

    def __hash__(self) -> int:
        return hash(tuple(self._visited))

    def __repr__(self) -> str:
        return f"LoopyTracker(visited={self._visited!r})"


class Loopy(ABC):
    """A game whose positions can repeat, holding a LoopyTracker."""

    @abstractmethod
    def tracker(self) -> LoopyTracker:
        """The tracker of visited positions."""

    @abstractmethod
    def without_tracker(self) -> Any:
        """A representation of this position without its tracker."""