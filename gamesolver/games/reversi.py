"""Reversi on a six by six board."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional, Sequence, Union

from gamesolver.game import Game, GameState, MoveError
from gamesolver.games.util import NaturalMove, move_failable
from gamesolver.player import PartizanPlayer

WIDTH = 6
HEIGHT = 6

_DIRECTIONS = (
    (0, 1),
    (1, 1),
    (1, 0),
    (1, -1),
    (0, -1),
    (-1, -1),
    (-1, 0),
    (-1, 1),
)


class ReversiMoveError(MoveError):
    """A reversi move can not be made."""


@dataclass
class ReversiArgs:
    """Setup of a reversi game: moves written ``x-y``."""

    moves: Sequence[Union[NaturalMove, str]] = field(default_factory=list)


def _on_board(x: int, y: int) -> bool:
    return 0 <= x < WIDTH and 0 <= y < HEIGHT


def _player_char(player: Optional[PartizanPlayer]) -> str:
    if player is PartizanPlayer.LEFT:
        return "X"
    if player is PartizanPlayer.RIGHT:
        return "O"
    return "-"


class Reversi(Game):
    """Reversi: a move must flank opposing pieces, which are then flipped.

    Left plays X and moves first. A move is ``NaturalMove((x, y))``.
    """

    def __init__(self) -> None:
        self._board: dict[tuple[int, int], PartizanPlayer] = {
            (WIDTH // 2 - 1, HEIGHT // 2 - 1): PartizanPlayer.LEFT,
            (WIDTH // 2, HEIGHT // 2): PartizanPlayer.LEFT,
            (WIDTH // 2 - 1, HEIGHT // 2): PartizanPlayer.RIGHT,
            (WIDTH // 2, HEIGHT // 2 - 1): PartizanPlayer.RIGHT,
        }
        self.move_count = 0

    @classmethod
    def from_args(cls, args: ReversiArgs) -> Reversi:
        """A fresh game with the given moves played."""
        game = cls()
        for move in args.moves:
            if isinstance(move, str):
                move = NaturalMove.parse(move, 2)
            move_failable(game, move)
        return game

    def flips_for(self, move: NaturalMove) -> list[NaturalMove]:
        """The pieces the player on move would flip; empty if the move is illegal."""
        mx, my = move
        if not _on_board(mx, my):
            raise ReversiMoveError(f"move {move} is out of bounds.")
        if (mx, my) in self._board:
            return []
        player = self.player()
        opposing = player.next()
        flips: list[NaturalMove] = []
        for dx, dy in _DIRECTIONS:
            x, y = mx + dx, my + dy
            if self._board.get((x, y)) is not opposing:
                continue
            x, y = x + dx, y + dy
            while self._board.get((x, y)) is opposing:
                x, y = x + dx, y + dy
                if not _on_board(x, y):
                    break
            if not _on_board(x, y):
                continue
            if self._board.get((x, y)) is player:
                x, y = x - dx, y - dy
                while (x, y) != (mx, my):
                    flips.append(NaturalMove((x, y)))
                    x, y = x - dx, y - dy
        return flips

    def max_moves(self) -> Optional[int]:
        return WIDTH * HEIGHT

    def make_move(self, move: NaturalMove) -> None:
        flips = self.flips_for(move)
        if not flips:
            raise ReversiMoveError(f"move {move} is not a legal move.")
        player = self.player()
        self._board[tuple(move)] = player
        for flip in flips:
            self._board[tuple(flip)] = player
        self.move_count += 1

    def possible_moves(self) -> Iterator[NaturalMove]:
        return iter([
            NaturalMove((x, y))
            for x in range(WIDTH)
            for y in range(HEIGHT)
            if self.flips_for(NaturalMove((x, y)))
        ])

    def state(self) -> GameState:
        if next(self.possible_moves(), None) is not None:
            return GameState.playable()
        left = sum(1 for p in self._board.values() if p is PartizanPlayer.LEFT)
        right = sum(1 for p in self._board.values() if p is PartizanPlayer.RIGHT)
        if left > right:
            return GameState.win(PartizanPlayer.LEFT)
        if left < right:
            return GameState.win(PartizanPlayer.RIGHT)
        return GameState.tie()

    def player(self) -> PartizanPlayer:
        return PartizanPlayer.LEFT if self.move_count % 2 == 0 else PartizanPlayer.RIGHT

    def copy(self) -> Reversi:
        clone = Reversi.__new__(Reversi)
        clone._board = dict(self._board)
        clone.move_count = self.move_count
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Reversi):
            return NotImplemented
        return self._board == other._board and self.move_count == other.move_count

    def __hash__(self) -> int:
        return hash((frozenset(self._board.items()), self.move_count))

    def __str__(self) -> str:
        moves = set(self.possible_moves())
        lines = [f"Current player: {_player_char(self.player())}"]
        for y in range(HEIGHT):
            lines.append("".join(
                "*" if NaturalMove((x, y)) in moves else _player_char(self._board.get((x, y)))
                for x in range(WIDTH)
            ))
        return "\n".join(lines) + "\n"

    def __repr__(self) -> str:
        return str(self)