"""Players of combinatorial games."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PartizanPlayer(Enum):
    """A player in a two-player partizan game.

    The players differ in what they may do or in how they win, so the
    player on move stays the same player from one position to the next.
    """

    LEFT = "left"
    RIGHT = "right"

    @classmethod
    def count(cls) -> int:
        """The number of players."""
        return len(cls)

    def idx(self) -> int:
        """Index of this player, starting at 0."""
        return 0 if self is PartizanPlayer.LEFT else 1

    def next(self) -> PartizanPlayer:
        """The player who plays after this one."""
        return PartizanPlayer.RIGHT if self is PartizanPlayer.LEFT else PartizanPlayer.LEFT

    def previous(self) -> PartizanPlayer:
        """The player who played before this one."""
        return self.next()

    def turn(self) -> PartizanPlayer:
        """How this player changes after a move: in partizan games it does not."""
        return self

    def other(self) -> PartizanPlayer:
        """The opposing player."""
        return self.next()


class ImpartialPlayer(Enum):
    """A player in a two-player impartial game.

    Only the order of play distinguishes the players: NEXT is about to
    move, PREVIOUS has just moved.
    """

    NEXT = "next"
    PREVIOUS = "previous"

    @staticmethod
    def from_move_count(initial_move_count: int, final_move_count: int) -> ImpartialPlayer:
        """The player on move after going from one move count to another."""
        if final_move_count < initial_move_count:
            raise ValueError(
                f"final move count {final_move_count} is below "
                f"initial move count {initial_move_count}"
            )
        if (final_move_count - initial_move_count) % 2 == 0:
            return ImpartialPlayer.NEXT
        return ImpartialPlayer.PREVIOUS

    @classmethod
    def count(cls) -> int:
        """The number of players."""
        return len(cls)

    def idx(self) -> int:
        """Index of this player, starting at 0."""
        return 0 if self is ImpartialPlayer.NEXT else 1

    def next(self) -> ImpartialPlayer:
        """The player who plays after this one."""
        return ImpartialPlayer.PREVIOUS if self is ImpartialPlayer.NEXT else ImpartialPlayer.NEXT

    def previous(self) -> ImpartialPlayer:
        """The player who played before this one."""
        return self.next()

    def turn(self) -> ImpartialPlayer:
        """How this player changes after a move: NEXT and PREVIOUS swap."""
        return self.next()

    def other(self) -> ImpartialPlayer:
        """The opposing player."""
        return self.next()


@dataclass(frozen=True, order=True)
class NPlayerPartizan:
    """A player in a partizan game with a fixed number of players."""

    index: int
    count: int

    def __post_init__(self) -> None:
        if self.count <= 0:
            raise ValueError(f"player count {self.count} must be positive")
        if not 0 <= self.index < self.count:
            raise ValueError(
                f"Player index {self.index} >= max player count {self.count}"
            )

    def idx(self) -> int:
        """Index of this player, starting at 0."""
        return self.index

    def next(self) -> NPlayerPartizan:
        """The player who plays after this one, wrapping around."""
        return NPlayerPartizan((self.index + 1) % self.count, self.count)

    def previous(self) -> NPlayerPartizan:
        """The player who played before this one, wrapping around."""
        return NPlayerPartizan((self.index - 1) % self.count, self.count)

    def turn(self) -> NPlayerPartizan:
        """How this player changes after a move: in partizan games it does not."""
        return self