"""Order and Chaos: Order tries to make a line, Chaos tries to stop it."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional, Sequence, Union

from gamesolver.game import Game, GameState, MoveError
from gamesolver.games.util import MoveParseError, move_failable
from gamesolver.player import PartizanPlayer


class CellType(Enum):
    """A piece either player may place."""

    X = "X"
    O = "O"  # noqa: E741

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class OrderAndChaosMove:
    """Placing ``cell`` at ``position``, given as (row, column)."""

    position: tuple[int, int]
    cell: CellType

    @classmethod
    def parse(cls, text: str) -> OrderAndChaosMove:
        """Read a move written as ``row-column-x`` or ``row-column-o``."""
        parts = text.split("-")
        if len(parts) != 3:
            raise MoveParseError(f"move {text!r} must be written as row-column-piece")
        numbers = []
        for part in parts[:2]:
            if not part.isascii() or not part.isdigit():
                raise MoveParseError(f"Not a number: {part!r}")
            numbers.append(int(part))
        piece = parts[2].lower()
        if piece == "x":
            cell = CellType.X
        elif piece == "o":
            cell = CellType.O
        else:
            raise MoveParseError("Invalid player!")
        return cls((numbers[0], numbers[1]), cell)

    def __str__(self) -> str:
        row, column = self.position
        return f"{self.cell} @ ({row}, {column})"


class OrderAndChaosMoveError(MoveError):
    """An order and chaos move can not be made."""


class OutOfBoundsError(OrderAndChaosMoveError):
    """The move lies outside the board."""

    def __init__(self, played: tuple[int, int], width: int, height: int) -> None:
        super().__init__(
            f"Can not make move {played!r} as it is out of bounds of (w:{width},h:{height})"
        )
        self.played = played
        self.width = width
        self.height = height


class AlreadyPresentError(OrderAndChaosMoveError):
    """The square is already filled."""

    def __init__(self, position: tuple[int, int]) -> None:
        super().__init__(f"There is already a filled in value present at {position!r}.")
        self.position = position


@dataclass
class OrderAndChaosArgs:
    """Setup of an order and chaos game: moves written ``row-column-piece``."""

    moves: Sequence[Union[OrderAndChaosMove, str]] = field(default_factory=list)


class OrderAndChaos(Game):
    """Order and Chaos; Left is Order and Right is Chaos.

    Order wins by making a line of ``min_win_length`` equal pieces; Chaos
    wins if the board fills without one.
    """

    def __init__(
        self,
        width: int = 6,
        height: int = 6,
        min_win_length: int = 5,
        max_win_length: int = 6,
    ) -> None:
        if min_win_length > max_win_length:
            raise ValueError("MIN > MAX win length?")
        if max_win_length > max(width, height):
            raise ValueError("Win length should not be longer than the board")
        self.width = width
        self.height = height
        self.min_win_length = min_win_length
        self.max_win_length = max_win_length
        self._board: list[list[Optional[CellType]]] = [
            [None] * width for _ in range(height)
        ]
        self.move_count = 0

    @classmethod
    def from_board(cls, text: str) -> OrderAndChaos:
        """A six by six game from rows of ``X``, ``O`` and ``.``; newlines are ignored."""
        symbols = {"X": CellType.X, "O": CellType.O, ".": None}
        cells = []
        for ch in text:
            if ch == "\n":
                continue
            if ch not in symbols:
                raise ValueError("There shouldn't be other characters in the string!")
            cells.append(symbols[ch])
        game = cls(6, 6, 5, 6)
        if len(cells) != game.width * game.height:
            raise ValueError(f"expected {game.width * game.height} cells, got {len(cells)}")
        game._board = [cells[row * game.width:(row + 1) * game.width] for row in range(game.height)]
        game.move_count = sum(1 for cell in cells if cell is not None)
        return game

    @classmethod
    def from_args(cls, args: OrderAndChaosArgs) -> OrderAndChaos:
        """A six by six game with the given moves played."""
        game = cls()
        for move in args.moves:
            if isinstance(move, str):
                move = OrderAndChaosMove.parse(move)
            move_failable(game, move)
        return game

    def _at(self, first: int, second: int) -> Optional[CellType]:
        return self._board[first][second]

    def max_moves(self) -> Optional[int]:
        return self.width * self.height

    def make_move(self, move: OrderAndChaosMove) -> None:
        row, column = move.position
        if not (0 <= row < self.height and 0 <= column < self.width):
            raise OutOfBoundsError(move.position, self.width, self.height)
        if self._board[row][column] is not None:
            raise AlreadyPresentError(move.position)
        self._board[row][column] = move.cell
        self.move_count += 1

    def possible_moves(self) -> Iterator[OrderAndChaosMove]:
        return iter([
            OrderAndChaosMove((row, column), cell)
            for row in range(self.height)
            for column in range(self.width)
            if self._board[row][column] is None
            for cell in (CellType.X, CellType.O)
        ])

    def _line_from(self, cells: Iterator[Optional[CellType]], first: CellType) -> Optional[bool]:
        """True if all cells match ``first``; False at the first mismatch."""
        for cell in cells:
            if cell != first:
                return False
        return True

    def state(self) -> GameState:
        length = self.min_win_length
        if self.move_count < length:
            return GameState.playable()

        # A mismatch stops the scan of the rest of that line.
        for i in range(self.height):
            for j in range(self.width - length + 1):
                first = self._at(j, i)
                if first is None:
                    continue
                end = min(length + j, self.width)
                if self._line_from((self._at(k, i) for k in range(j + 1, end)), first):
                    return GameState.win(PartizanPlayer.LEFT)
                break

        for i in range(self.width):
            for j in range(self.height - length + 1):
                first = self._at(i, j)
                if first is None:
                    continue
                end = min(length + j, self.height)
                if self._line_from((self._at(i, k) for k in range(j + 1, end)), first):
                    return GameState.win(PartizanPlayer.LEFT)
                break

        steps = min(length, self.width, self.height)
        for i in range(self.width - length + 1):
            for j in range(self.height - length + 1):
                first = self._at(i, j)
                if first is None:
                    continue
                if self._line_from((self._at(i + k, j + k) for k in range(1, steps)), first):
                    return GameState.win(PartizanPlayer.LEFT)
                break

        if self.move_count == self.width * self.height:
            return GameState.win(PartizanPlayer.RIGHT)
        return GameState.playable()

    def player(self) -> PartizanPlayer:
        return PartizanPlayer.LEFT if self.move_count % 2 == 0 else PartizanPlayer.RIGHT

    def copy(self) -> OrderAndChaos:
        clone = OrderAndChaos.__new__(OrderAndChaos)
        clone.width = self.width
        clone.height = self.height
        clone.min_win_length = self.min_win_length
        clone.max_win_length = self.max_win_length
        clone._board = [list(row) for row in self._board]
        clone.move_count = self.move_count
        return clone

    def _key(self) -> tuple:
        return (
            self.width,
            self.height,
            self.min_win_length,
            self.max_win_length,
            tuple(tuple(row) for row in self._board),
            self.move_count,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrderAndChaos):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        return "".join(
            "".join("-" if cell is None else str(cell) for cell in row) + "\n"
            for row in self._board
        )

    def __repr__(self) -> str:
        return str(self)