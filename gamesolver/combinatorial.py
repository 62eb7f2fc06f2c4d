"""Combinatorial games written out as their left and right options."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable


class Outcome(Enum):
    """The outcome class of a game."""

    LEFT = "left"
    RIGHT = "right"
    NEXT = "next"
    PREVIOUS = "previous"


@dataclass(frozen=True)
class VecGame:
    """A game {left | right} given by its lists of options.

    Not necessarily in canonical form; suited to small games only.
    """

    left: tuple[VecGame, ...]
    right: tuple[VecGame, ...]

    def __init__(self, left: Iterable[VecGame] = (), right: Iterable[VecGame] = ()) -> None:
        object.__setattr__(self, "left", tuple(left))
        object.__setattr__(self, "right", tuple(right))

    @classmethod
    def zero(cls) -> VecGame:
        """The only game born on day 0: {|}."""
        return cls((), ())

    @classmethod
    def singleton(cls, left: VecGame, right: VecGame) -> VecGame:
        """The game with exactly one option for each side."""
        return cls((left,), (right,))

    @classmethod
    def star(cls) -> VecGame:
        """Star: {0 | 0}."""
        return cls.singleton(cls.zero(), cls.zero())

    @classmethod
    def up(cls) -> VecGame:
        """Up: {0 | *}."""
        return cls.singleton(cls.zero(), cls.star())

    @classmethod
    def down(cls) -> VecGame:
        """Down: {* | 0}."""
        return cls.up().flip()

    def flip(self) -> VecGame:
        """This game with its left and right options swapped."""
        return VecGame(self.right, self.left)

    def negate(self) -> VecGame:
        """A game whose options are the negations of these, each kept on its own side."""
        return VecGame(
            (g.negate() for g in self.left),
            (g.negate() for g in self.right),
        )

    def birthday(self) -> int:
        """The day the game is born: 0 for {|}, else one more than its oldest option."""
        options = self.left + self.right
        if not options:
            return 0
        return 1 + max(g.birthday() for g in options)