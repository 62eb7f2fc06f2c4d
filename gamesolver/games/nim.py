"""Nim, analysed naively as a whole game."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional, Sequence, Union

from gamesolver.game import MoveError, NormalImpartialGame
from gamesolver.games.util import NaturalMove, move_failable
from gamesolver.player import ImpartialPlayer

_NUMBER = re.compile(r"\+?[0-9]+")


class NimMoveError(MoveError):
    """A nim move can not be made."""


class HeapOutOfBoundsError(NimMoveError):
    """The chosen heap does not exist."""

    def __init__(self, heap: int, heap_count: int) -> None:
        super().__init__(
            f"chosen heap {heap} is out of bounds of the amount of heaps {heap_count}."
        )
        self.heap = heap
        self.heap_count = heap_count


class TooManyObjectsRemovalError(NimMoveError):
    """More objects were taken than the heap holds."""

    def __init__(self, heap: int, removal_count: int, actual_count: int) -> None:
        super().__init__(
            f"can't remove {removal_count} when there is only {actual_count} in {heap}."
        )
        self.heap = heap
        self.removal_count = removal_count
        self.actual_count = actual_count


@dataclass
class NimArgs:
    """Setup of a nim game: heap sizes such as ``3,5,7`` and moves ``heap-amount``."""

    configuration: str = "3,5,7"
    moves: Sequence[Union[NaturalMove, str]] = field(default_factory=list)


class Nim(NormalImpartialGame):
    """Nim: players take any positive number of objects from one heap.

    A move is ``NaturalMove((heap, amount))``.
    """

    def __init__(self, heaps: Iterable[int]) -> None:
        self._heaps = list(heaps)
        if any(h < 0 for h in self._heaps):
            raise ValueError("heap sizes must not be negative")
        self.move_count = 0
        # every move removes at least one object
        self._max_moves = sum(self._heaps)

    @classmethod
    def from_args(cls, args: NimArgs) -> Nim:
        """A game from its configuration, with the given moves played."""
        sizes = []
        for part in args.configuration.split(","):
            if not _NUMBER.fullmatch(part.strip()):
                raise ValueError(f"Not a number: {part!r}")
            sizes.append(int(part))
        game = cls(sizes)
        for move in args.moves:
            if isinstance(move, str):
                move = NaturalMove.parse(move, 2)
            move_failable(game, move)
        return game

    @property
    def heaps(self) -> tuple[int, ...]:
        """The current heap sizes."""
        return tuple(self._heaps)

    def max_moves(self) -> Optional[int]:
        return self._max_moves

    def make_move(self, move: NaturalMove) -> None:
        heap, amount = move
        if heap >= len(self._heaps):
            raise HeapOutOfBoundsError(heap, len(self._heaps))
        if amount > self._heaps[heap]:
            raise TooManyObjectsRemovalError(heap, amount, self._heaps[heap])
        self._heaps[heap] -= amount
        self.move_count += 1

    def possible_moves(self) -> Iterator[NaturalMove]:
        return iter([
            NaturalMove((i, amount))
            for i, size in enumerate(self._heaps)
            for amount in range(1, size + 1)
        ])

    def player(self) -> ImpartialPlayer:
        return ImpartialPlayer.NEXT

    def copy(self) -> Nim:
        clone = Nim(self._heaps)
        clone.move_count = self.move_count
        clone._max_moves = self._max_moves
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Nim):
            return NotImplemented
        return (self._heaps, self.move_count, self._max_moves) == (
            other._heaps,
            other.move_count,
            other._max_moves,
        )

    def __hash__(self) -> int:
        return hash((tuple(self._heaps), self.move_count, self._max_moves))

    def __str__(self) -> str:
        return "".join(f"Heap {i}: {size}\n" for i, size in enumerate(self._heaps))

    def __repr__(self) -> str:
        return f"Nim(heaps={self._heaps!r}, move_count={self.move_count})"