"""Domineering: players place dominoes, one vertically and one horizontally."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional, Sequence, Union

from gamesolver.game import MoveError, NormalGame
from gamesolver.games.util import MoveParseError, move_failable
from gamesolver.grid import Grid
from gamesolver.player import PartizanPlayer

_NUMBER = re.compile(r"\+?[0-9]+")


class Orientation(Enum):
    """The direction a domino is laid in."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    def turn(self) -> Orientation:
        """The other orientation."""
        if self is Orientation.HORIZONTAL:
            return Orientation.VERTICAL
        return Orientation.HORIZONTAL


@dataclass(frozen=True, order=True)
class DomineeringMove:
    """The square (x, y) a domino's first half is placed on."""

    x: int
    y: int

    @classmethod
    def parse(cls, text: str) -> DomineeringMove:
        """Read a move written as ``x-y``."""
        parts = text.split("-")
        for part in parts:
            if not _NUMBER.fullmatch(part):
                raise MoveParseError(f"Not a number: {part!r}")
        if len(parts) < 2:
            raise MoveParseError(f"move {text!r} must be written as x-y")
        return cls(int(parts[0]), int(parts[1]))

    def __str__(self) -> str:
        return f"DomineeringMove({self.x}, {self.y})"


class DomineeringMoveError(MoveError):
    """A domineering move can not be made."""


def _player_name(player: PartizanPlayer) -> str:
    return player.value.capitalize()


class BlockingAdjacentError(DomineeringMoveError):
    """The second half of the domino would not fit on the board."""

    def __init__(self, move: DomineeringMove, player: PartizanPlayer) -> None:
        super().__init__(
            f"While no domino is present at {move}, player {_player_name(player)} "
            f"can not move at {move} because a domino is in way of placement."
        )
        self.move = move
        self.player = player


class BlockingCurrentError(DomineeringMoveError):
    """The chosen square is already covered."""

    def __init__(self, move: DomineeringMove, player: PartizanPlayer) -> None:
        super().__init__(
            f"Player {_player_name(player)} can not move at {move} "
            f"because a domino is already at {move}."
        )
        self.move = move
        self.player = player


@dataclass
class DomineeringArgs:
    """Setup of a domineering game: moves written ``x-y``."""

    moves: Sequence[Union[DomineeringMove, str]] = field(default_factory=list)


class Domineering(NormalGame):
    """Domineering on a width by height board.

    The first player lays dominoes in ``orientation``, the second in the
    other orientation.
    """

    def __init__(
        self,
        width: int,
        height: int,
        orientation: Orientation = Orientation.VERTICAL,
    ) -> None:
        self.width = width
        self.height = height
        self.primary_orientation = orientation
        self._board = Grid.filled_with(width, height, True)
        self.move_count = 0

    @classmethod
    def from_args(cls, args: DomineeringArgs, width: int = 5, height: int = 5) -> Domineering:
        """A game of the given size with the given moves played."""
        game = cls(width, height)
        for move in args.moves:
            if isinstance(move, str):
                move = DomineeringMove.parse(move)
            move_failable(game, move)
        return game

    def _orientation(self) -> Orientation:
        if self.player() is PartizanPlayer.LEFT:
            return self.primary_orientation
        return self.primary_orientation.turn()

    def max_moves(self) -> Optional[int]:
        return self.width * self.height

    def make_move(self, move: DomineeringMove) -> None:
        if self._board.idx(move.x, move.y) is None:
            raise DomineeringMoveError(f"move {move} is out of bounds.")
        if not self._board[move.x, move.y]:
            raise BlockingCurrentError(move, self.player())
        if self._orientation() is Orientation.HORIZONTAL:
            if move.x == self.width - 1:
                raise BlockingAdjacentError(move, self.player())
            self._board[move.x, move.y] = False
            self._board[move.x + 1, move.y] = False
        else:
            if move.y == self.height - 1:
                raise BlockingAdjacentError(move, self.player())
            self._board[move.x, move.y] = False
            self._board[move.x, move.y + 1] = False
        self.move_count += 1

    def possible_moves(self) -> Iterator[DomineeringMove]:
        board = self._board
        if self._orientation() is Orientation.HORIZONTAL:
            moves = [
                DomineeringMove(x, y)
                for y in range(self.height)
                for x in range(self.width - 1)
                if board[x, y] and board[x + 1, y]
            ]
        else:
            moves = [
                DomineeringMove(x, y)
                for y in range(self.height - 1)
                for x in range(self.width)
                if board[x, y] and board[x, y + 1]
            ]
        return iter(moves)

    def player(self) -> PartizanPlayer:
        return PartizanPlayer.LEFT if self.move_count % 2 == 0 else PartizanPlayer.RIGHT

    def copy(self) -> Domineering:
        clone = Domineering.__new__(Domineering)
        clone.width = self.width
        clone.height = self.height
        clone.primary_orientation = self.primary_orientation
        clone._board = Grid(self.width, self.height, self._board.data)
        clone.move_count = self.move_count
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Domineering):
            return NotImplemented
        return (
            self._board == other._board
            and self.move_count == other.move_count
            and self.primary_orientation is other.primary_orientation
        )

    def __hash__(self) -> int:
        return hash((self._board, self.move_count, self.primary_orientation))

    def __str__(self) -> str:
        return "".join(
            "".join("X" if cell else "." for cell in row) + "\n"
            for row in self._board.rows_iter()
        )

    def __repr__(self) -> str:
        return str(self)