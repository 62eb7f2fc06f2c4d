"""Tic tac toe on a board of any size and any number of dimensions."""

from __future__ import annotations

import itertools
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional, Sequence, Union

from gamesolver.game import Game, GameState, MoveError
from gamesolver.games.util import MoveParseError, move_failable
from gamesolver.player import PartizanPlayer

_NUMBER = re.compile(r"\+?[0-9]+")

Index = tuple[int, ...]


class Square(Enum):
    """A mark on the board: X for Left, O for Right."""

    X = "X"
    O = "O"  # noqa: E741

    def to_player(self) -> PartizanPlayer:
        """The player who plays this mark."""
        return PartizanPlayer.LEFT if self is Square.X else PartizanPlayer.RIGHT

    @classmethod
    def from_player(cls, player: PartizanPlayer) -> Square:
        """The mark played by ``player``."""
        return cls.X if player is PartizanPlayer.LEFT else cls.O


@dataclass(frozen=True)
class TicTacToeMove:
    """A mark placed at ``index``, one coordinate per dimension."""

    index: Index

    def __post_init__(self) -> None:
        index = tuple(int(v) for v in self.index)
        if any(v < 0 for v in index):
            raise ValueError(f"move index {index} must not be negative")
        object.__setattr__(self, "index", index)

    @classmethod
    def parse(cls, text: str) -> TicTacToeMove:
        """Read a move written as hyphen-separated coordinates, such as ``0-2``."""
        parts = text.split("-")
        if not all(_NUMBER.fullmatch(part) for part in parts):
            raise MoveParseError("Not a number!")
        return cls(tuple(int(part) for part in parts))

    def __str__(self) -> str:
        return "[" + ", ".join(str(v) for v in self.index) + "]"


class NonEmptySquareError(MoveError):
    """The chosen square already holds a mark."""

    def __init__(self, move: TicTacToeMove) -> None:
        super().__init__(f"the chosen move {move} is already filled")
        self.move = move


@dataclass
class TicTacToeArgs:
    """Setup of a tic tac toe game: dimensions, size and moves such as ``0-2``."""

    dimensions: int = 2
    size: int = 3
    moves: Sequence[Union[TicTacToeMove, str]] = field(default_factory=list)


def _add_checked(point: Index, offset: Sequence[int], sign: int = 1) -> Optional[Index]:
    """``point`` moved by ``sign * offset``, or None if a coordinate goes negative."""
    result = tuple(p + sign * o for p, o in zip(point, offset))
    if any(v < 0 for v in result):
        return None
    return result


def offsets(point: Sequence[int], size: int) -> list[tuple[int, ...]]:
    """Every non-zero step of -1, 0 or 1 per axis that stays on a board of ``size``."""
    point = tuple(point)
    result = []
    for offset in itertools.product((-1, 0, 1), repeat=len(point)):
        if not any(offset):
            continue
        moved = _add_checked(point, offset)
        if moved is not None and all(v < size for v in moved):
            result.append(offset)
    return result


class TicTacToe(Game):
    """Tic tac toe: a line of ``size`` equal marks in any direction wins.

    Left plays X and moves first. A full board is a tie.
    """

    def __init__(self, dim: int, size: int) -> None:
        if dim < 0 or size < 0:
            raise ValueError("dimensions and size must not be negative")
        self.dim = dim
        self.size = size
        self._board: dict[Index, Square] = {}
        self.move_count = 0

    @classmethod
    def from_args(cls, args: TicTacToeArgs) -> TicTacToe:
        """A game of the given shape with the given moves played."""
        game = cls(args.dimensions, args.size)
        for move in args.moves:
            if isinstance(move, str):
                move = TicTacToeMove.parse(move)
            move_failable(game, move)
        return game

    def _indices(self) -> Iterator[Index]:
        return itertools.product(range(self.size), repeat=self.dim)

    def _in_bounds(self, index: Index) -> bool:
        return len(index) == self.dim and all(0 <= v < self.size for v in index)

    def _winning_line(self, point: Index, offset: Sequence[int]) -> Optional[Square]:
        square = self._board.get(point)
        if square is None:
            return None
        n = 1
        for sign in (1, -1):
            current: Optional[Index] = point
            while True:
                current = _add_checked(current, offset, sign)
                if current is None or self._board.get(current) != square:
                    break
                n += 1
        return square if n >= self.size else None

    def max_moves(self) -> Optional[int]:
        return self.size ** self.dim

    def state(self) -> GameState:
        if self.move_count == self.max_moves():
            return GameState.tie()
        for index in sorted(self._board):
            for offset in offsets(index, self.size):
                square = self._winning_line(index, offset)
                if square is not None:
                    return GameState.win(square.to_player())
        return GameState.playable()

    def make_move(self, move: TicTacToeMove) -> None:
        index = move.index
        if not self._in_bounds(index):
            raise MoveError(f"move {move} is out of bounds.")
        if index in self._board:
            raise NonEmptySquareError(move)
        self._board[index] = Square.from_player(self.player())
        self.move_count += 1

    def possible_moves(self) -> Iterator[TicTacToeMove]:
        return iter([
            TicTacToeMove(index) for index in self._indices() if index not in self._board
        ])

    def find_immediately_resolvable_game(self) -> Optional[TicTacToe]:
        # No line can be completed before this many moves.
        if self.move_count + 1 < self.size * 2 - 1:
            return None
        return super().find_immediately_resolvable_game()

    def player(self) -> PartizanPlayer:
        return PartizanPlayer.LEFT if self.move_count % 2 == 0 else PartizanPlayer.RIGHT

    def copy(self) -> TicTacToe:
        clone = TicTacToe(self.dim, self.size)
        clone._board = dict(self._board)
        clone.move_count = self.move_count
        return clone

    def _key(self) -> tuple:
        return (self.dim, self.size, frozenset(self._board.items()), self.move_count)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TicTacToe):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        lines = []
        for index in self._indices():
            square = self._board.get(index)
            shown = "None" if square is None else f"Some({square.name})"
            lines.append(f"{shown} @ {TicTacToeMove(index)}\n")
        return "".join(lines)

    def __repr__(self) -> str:
        return str(self)