"""Zener: a stacking race in which each side tries to reach the far gutter."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, Optional

from gamesolver.game import GameState, MoveError, NormalGame
from gamesolver.games.util import MoveParseError
from gamesolver.grid import Grid
from gamesolver.loopy import Loopy, LoopyTracker
from gamesolver.player import PartizanPlayer

WIDTH = 5
HEIGHT = 7


class InnerCellType(Enum):
    """The symbol printed on a piece."""

    WAVE = "~"
    CROSS = "+"
    CIRCLE = "∘"
    SQUARE = "□"
    STAR = "⋆"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ZenerCell:
    """A piece: its symbol and the player who owns it."""

    inner: InnerCellType
    player: PartizanPlayer

    def __str__(self) -> str:
        return str(self.inner)


@dataclass(frozen=True)
class ZenerPosition:
    """A square of the board, or the gutter when both coordinates are None."""

    x: Optional[int] = None
    y: Optional[int] = None

    @property
    def is_gutter(self) -> bool:
        """Whether this position is the gutter beyond the board."""
        return self.x is None


GUTTER = ZenerPosition()


class Direction(Enum):
    """A direction a piece can step in."""

    UP = "up"
    LEFT = "left"
    RIGHT = "right"
    DOWN = "down"

    @classmethod
    def parse(cls, text: str) -> Direction:
        """Read a direction name, ignoring case."""
        try:
            return cls(text.lower())
        except ValueError:
            raise MoveParseError(
                f"Direction {text} does not exist. Valid options are up/down/left/right"
            ) from None

    def as_step(self) -> tuple[int, int]:
        """The (dx, dy) of one step; up decreases y."""
        return {
            Direction.UP: (0, -1),
            Direction.DOWN: (0, 1),
            Direction.LEFT: (-1, 0),
            Direction.RIGHT: (1, 0),
        }[self]

    @classmethod
    def biased_directions(cls, player: PartizanPlayer) -> list[Direction]:
        """All directions, the player's forward direction first."""
        if player is PartizanPlayer.LEFT:
            return [cls.UP, cls.LEFT, cls.RIGHT, cls.DOWN]
        return [cls.DOWN, cls.LEFT, cls.RIGHT, cls.UP]

    def apply_to_position(self, position: tuple[int, int]) -> ZenerPosition:
        """Where one step from ``position`` lands; ValueError if off the board."""
        dx, dy = self.as_step()
        new_x = position[0] + dx
        new_y = position[1] + dy
        if new_y in (-1, HEIGHT):
            return GUTTER
        if HEIGHT < new_y:
            raise ValueError(f"out of height bounds ({HEIGHT} < {new_y})")
        if new_x < 0:
            raise ValueError(f"out of width bounds ({new_x} < 0)")
        if WIDTH <= new_x:
            raise ValueError(f"out of width bounds ({WIDTH} <= {new_x})")
        return ZenerPosition(new_x, new_y)


@dataclass(frozen=True)
class ZenerMove:
    """Moving the top piece of the stack at ``start`` one step in ``direction``."""

    start: tuple[int, int]
    direction: Direction

    @classmethod
    def parse(cls, text: str) -> ZenerMove:
        """Read a move written as ``x:y:direction``."""
        parts = text.split(":")
        if len(parts) != 3:
            raise MoveParseError("move must be separated as `x:y:direction`")
        x_text, y_text, direction_text = parts
        coordinates = []
        for name, value in (("x", x_text), ("y", y_text)):
            if not value.isascii() or not value.isdigit():
                raise MoveParseError(f"{name} {value} is not a number")
            coordinates.append(int(value))
        return cls((coordinates[0], coordinates[1]), Direction.parse(direction_text))

    def __str__(self) -> str:
        x, y = self.start
        return f"({x}, {y}) -> {self.direction.value.capitalize()}"


class ZenerMoveError(MoveError):
    """A zener move can not be made; ``reason`` names the rule broken."""

    def __init__(self, message: str, reason: str) -> None:
        super().__init__(message)
        self.reason = reason


@dataclass
class ZenerArgs:
    """Setup of a zener game; there is nothing to choose."""


def _player_name(player: PartizanPlayer) -> str:
    return player.value.capitalize()


class Zener(NormalGame, Loopy):
    """Zener on a five by seven board of stacks.

    Left starts on the bottom row and wins by stepping a piece off the top
    into the gutter; Right starts on the top row and aims for the bottom.
    """

    def __init__(self) -> None:
        board = Grid.filled_with(WIDTH, HEIGHT, [])
        row = (
            InnerCellType.STAR,
            InnerCellType.SQUARE,
            InnerCellType.WAVE,
            InnerCellType.CROSS,
            InnerCellType.CIRCLE,
        )
        for x, inner in enumerate(row):
            board[x, 0].append(ZenerCell(inner, PartizanPlayer.RIGHT))
        for x, inner in enumerate(reversed(row)):
            board[x, HEIGHT - 1].append(ZenerCell(inner, PartizanPlayer.LEFT))
        self._board = board
        self.compulsory: Optional[InnerCellType] = None
        self.move_count = 0
        self.gutter: Optional[ZenerCell] = None
        self._loopy: LoopyTracker = LoopyTracker()
        self._history: list[Zener] = []
        self._frozen_hash: Optional[int] = None

    @classmethod
    def from_args(cls, args: ZenerArgs) -> Zener:
        """The starting position."""
        return cls()

    def tracker(self) -> LoopyTracker:
        return self._loopy

    def without_tracker(self) -> tuple:
        """The position as (stacks row by row, compulsory, move count, gutter)."""
        return (
            tuple(tuple(stack) for stack in self._board.data),
            self.compulsory,
            self.move_count,
            self.gutter,
        )

    def max_moves(self) -> Optional[int]:
        return None

    def make_move(self, move: ZenerMove) -> None:
        if self.gutter is not None:
            raise ZenerMoveError("the gutter is filled - the game is already won!", "gutter_filled")
        try:
            position = move.direction.apply_to_position(move.start)
        except ValueError:
            raise ZenerMoveError(
                f"can not move a piece 'from' a non-existent position {move.start!r} "
                f"in direction {move.direction.value.capitalize()}",
                "to_out_of_bounds",
            ) from None

        previous = self.copy()
        player = self.player()

        stack = self._board.get(*move.start)
        if stack is None:
            raise ZenerMoveError(
                f"can not move a piece 'from' a non-existent position {move.start!r}",
                "from_out_of_bounds",
            )
        if not stack:
            raise ZenerMoveError(
                f"can not move from {move.start!r} since there's no piece!", "no_piece"
            )
        piece = stack[-1]
        if piece.player is not player:
            raise ZenerMoveError(
                f"tried to play as {_player_name(piece.player)}, but is {_player_name(player)}",
                "wrong_player",
            )
        if position.is_gutter and self._own_gutter(move.start[1], player):
            raise ZenerMoveError("can't move a player into their own gutter!", "wrong_move_gutter")
        if self.compulsory is not None and piece.inner is not self.compulsory:
            raise ZenerMoveError(
                f"can't move {piece!r}: need to move {self.compulsory!r}", "compulsory"
            )

        stack.pop()
        if position.is_gutter:
            self.gutter = piece
        else:
            self._board[position.x, position.y].append(piece)
        self.move_count += 1
        previous._frozen_hash = hash(previous)
        self._loopy.mark_visited(previous)
        self._history.append(previous)
        self._frozen_hash = None

    @staticmethod
    def _own_gutter(y: int, player: PartizanPlayer) -> bool:
        return (y == 0 and player is PartizanPlayer.RIGHT) or (
            y != 0 and player is PartizanPlayer.LEFT
        )

    def possible_moves(self) -> Iterator[ZenerMove]:
        if self.gutter is not None:
            return iter(())
        player = self.player()
        moves: list[ZenerMove] = []
        for x, y in self._board.indices_row_major():
            stack = self._board[x, y]
            if not stack or stack[-1].player is not player:
                continue
            for direction in Direction.biased_directions(player):
                try:
                    position = direction.apply_to_position((x, y))
                except ValueError:
                    continue
                if position.is_gutter and self._own_gutter(y, player):
                    continue
                moves.append(ZenerMove((x, y), direction))
        return iter(moves)

    def state(self) -> GameState:
        if self._loopy.has_visited(self):
            return GameState.tie()
        return super().state()

    def player(self) -> PartizanPlayer:
        return PartizanPlayer.LEFT if self.move_count % 2 == 0 else PartizanPlayer.RIGHT

    def copy(self) -> Zener:
        clone = Zener.__new__(Zener)
        clone._board = Grid(WIDTH, HEIGHT, [list(stack) for stack in self._board.data])
        clone.compulsory = self.compulsory
        clone.move_count = self.move_count
        clone.gutter = self.gutter
        clone._loopy = LoopyTracker()
        clone._history = list(self._history)
        for state in clone._history:
            clone._loopy.mark_visited(state)
        clone._frozen_hash = None
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Zener):
            return NotImplemented
        return self.without_tracker() == other.without_tracker() and self._loopy == other._loopy

    def __hash__(self) -> int:
        if self._frozen_hash is not None:
            return self._frozen_hash
        return hash((self.without_tracker(), self._loopy))

    def __str__(self) -> str:
        lines = []
        for row in self._board.rows_iter():
            cells = []
            for stack in row:
                if not stack:
                    cells.append("{   }")
                    continue
                top = stack[-1]
                count = str(len(stack)) if len(stack) != 1 else " "
                if top.player is PartizanPlayer.LEFT:
                    cells.append(f"[ {top}{count}]")
                else:
                    cells.append(f"( {top}{count})")
            lines.append("".join(cells) + "\n")
        return "".join(lines)

    def __repr__(self) -> str:
        return str(self)


def _describe(value: Any) -> str:
    return repr(value)