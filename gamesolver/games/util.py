"""Helpers shared by the games: natural-number moves and safe moving."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Iterator

from gamesolver.game import Game, GameStateKind

_NUMBER = re.compile(r"\+?[0-9]+")


class GameOverError(Exception):
    """A move was attempted on a game that is already over."""


class MoveParseError(ValueError):
    """Text could not be read as a move."""


def _ordinal(n: int) -> str:
    if 10 <= n % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


@dataclass(frozen=True, order=True)
class NaturalMove:
    """A move made of a fixed number of natural numbers, written as ``a-b-...``."""

    values: tuple[int, ...]

    def __post_init__(self) -> None:
        values = tuple(int(v) for v in self.values)
        if any(v < 0 for v in values):
            raise ValueError(f"move values {values} must not be negative")
        object.__setattr__(self, "values", values)

    @classmethod
    def parse(cls, text: str, length: int) -> NaturalMove:
        """Read ``length`` hyphen-separated natural numbers."""
        if length <= 0:
            raise ValueError("Length must be greater than 0")
        if length >= 32:
            raise ValueError("Length must be less than 32.")
        parts = text.split("-")
        if len(parts) != length:
            pattern = "-".join(["x"] * length)
            raise MoveParseError(
                f"Must be {length} numbers separated by a hyphen ({pattern})"
            )
        for position, part in enumerate(parts, start=1):
            if not _NUMBER.fullmatch(part):
                raise MoveParseError(f"The {_ordinal(position)} number is not a number.")
        return cls(tuple(int(part) for part in parts))

    def __iter__(self) -> Iterator[int]:
        return iter(self.values)

    def __getitem__(self, index: int) -> int:
        return self.values[index]

    def __len__(self) -> int:
        return len(self.values)

    def __str__(self) -> str:
        return "-".join(str(v) for v in self.values)


def move_failable(game: Game, move: Any) -> None:
    """Play ``move`` on ``game``, refusing if the game is already over.

    Raises GameOverError for a finished game; a move the game rejects
    raises that game's MoveError.
    """
    state = game.state()
    if state.kind is GameStateKind.TIE:
        raise GameOverError("Can't continue - game is tied.")
    if state.kind is GameStateKind.WIN:
        raise GameOverError(f"Can't continue game if player {state.player} already won.")
    game.make_move(move)