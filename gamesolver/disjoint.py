"""The disjoint sum of two normal play impartial games."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Iterator, Optional

from gamesolver.game import MoveError, NormalImpartialGame
from gamesolver.player import ImpartialPlayer


class Side(Enum):
    """Which component of a disjoint sum a move is played on."""

    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class DisjointMove:
    """A move on one component of a disjoint sum."""

    side: Side
    move: Any


class DisjointMoveError(MoveError):
    """A move on one component of a disjoint sum could not be made."""

    def __init__(self, side: Side, cause: MoveError) -> None:
        super().__init__(f"Could not make the move on {side.value}: {cause}")
        self.side = side
        self.cause = cause


def _interleave(first: Iterable[Any], second: Iterable[Any]) -> Iterator[Any]:
    """Alternate items of both iterables, then finish whichever is longer."""
    iterators = [iter(first), iter(second)]
    while iterators:
        for iterator in list(iterators):
            try:
                yield next(iterator)
            except StopIteration:
                iterators.remove(iterator)


class DisjointImpartialNormalGame(NormalImpartialGame):
    """The disjoint sum of two normal play impartial games.

    On each turn the player on move chooses one component and moves in it.
    """

    def __init__(self, left: NormalImpartialGame, right: NormalImpartialGame) -> None:
        self.left = left
        self.right = right

    @property
    def move_count(self) -> int:
        """Moves played on both components together."""
        return self.left.move_count + self.right.move_count

    def max_moves(self) -> Optional[int]:
        left_max = self.left.max_moves()
        right_max = self.right.max_moves()
        if left_max is None or right_max is None:
            return None
        return left_max + right_max

    def make_move(self, move: DisjointMove) -> None:
        target = self.left if move.side is Side.LEFT else self.right
        try:
            target.make_move(move.move)
        except MoveError as err:
            raise DisjointMoveError(move.side, err) from err

    def possible_moves(self) -> Iterator[DisjointMove]:
        left_moves = (DisjointMove(Side.LEFT, m) for m in self.left.possible_moves())
        right_moves = (DisjointMove(Side.RIGHT, m) for m in self.right.possible_moves())
        return _interleave(left_moves, right_moves)

    def player(self) -> ImpartialPlayer:
        return ImpartialPlayer.NEXT

    def copy(self) -> DisjointImpartialNormalGame:
        return DisjointImpartialNormalGame(self.left.copy(), self.right.copy())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DisjointImpartialNormalGame):
            return NotImplemented
        return self.left == other.left and self.right == other.right

    def __hash__(self) -> int:
        return hash((self.left, self.right))

    def __repr__(self) -> str:
        return f"DisjointImpartialNormalGame(left={self.left!r}, right={self.right!r})"