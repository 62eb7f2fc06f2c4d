"""Chomp: players eat rectangles out of a bar of chocolate."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional, Sequence, Union

from gamesolver.game import MoveError, NormalImpartialGame
from gamesolver.games.util import NaturalMove, move_failable
from gamesolver.grid import Grid
from gamesolver.player import ImpartialPlayer


class ChompMoveError(MoveError):
    """A chomp move can not be made."""

    def __init__(self, move: NaturalMove, message: Optional[str] = None) -> None:
        super().__init__(message or f"position {move!r} is already filled.")
        self.move = move


@dataclass
class ChompArgs:
    """Setup of a chomp game: its size and moves written ``x-y``."""

    width: int = 6
    height: int = 4
    moves: Sequence[Union[NaturalMove, str]] = field(default_factory=list)


class Chomp(NormalImpartialGame):
    """Chomp on a width by height board.

    Playing (x, y) eats every square with column at least x and row at
    most y. The square at (0, height - 1) is never playable.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._board = Grid.filled_with(width, height, True)
        self._board.set(0, height - 1, False)
        self.move_count = 0

    @classmethod
    def from_args(cls, args: ChompArgs) -> Chomp:
        """A game of the given size with the given moves played."""
        game = cls(args.width, args.height)
        for move in args.moves:
            if isinstance(move, str):
                move = NaturalMove.parse(move, 2)
            move_failable(game, move)
        return game

    def max_moves(self) -> Optional[int]:
        return self.width * self.height

    def make_move(self, move: NaturalMove) -> None:
        x, y = move
        if self._board.idx(x, y) is None:
            raise ChompMoveError(move, f"position {move!r} is out of bounds.")
        if not self._board[x, y]:
            raise ChompMoveError(move)
        for i in range(x, self.width):
            for j in range(y + 1):
                self._board[i, j] = False
        self.move_count += 1

    def possible_moves(self) -> Iterator[NaturalMove]:
        return iter([
            NaturalMove((x, y))
            for y in reversed(range(self.height))
            for x in range(self.width)
            if self._board[x, y]
        ])

    def player(self) -> ImpartialPlayer:
        return ImpartialPlayer.NEXT

    def copy(self) -> Chomp:
        clone = Chomp.__new__(Chomp)
        clone.width = self.width
        clone.height = self.height
        clone._board = Grid(self.width, self.height, self._board.data)
        clone.move_count = self.move_count
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Chomp):
            return NotImplemented
        return (self.width, self.height, self._board, self.move_count) == (
            other.width,
            other.height,
            other._board,
            other.move_count,
        )

    def __hash__(self) -> int:
        return hash((self.width, self.height, self._board, self.move_count))

    def __str__(self) -> str:
        return "".join(
            "".join("X" if cell else "." for cell in row) + "\n"
            for row in self._board.rows_iter()
        )

    def __repr__(self) -> str:
        return str(self)