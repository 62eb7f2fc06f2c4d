"""The game protocol and outcomes of combinatorial games."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Iterator, Optional, TypeVar

P = TypeVar("P")

# Score bound used for games that have no known maximum number of moves.
UNBOUNDED_UPPER_BOUND = (2**63 - 1) // 2

_MISSING = object()


class MoveError(Exception):
    """Raised when a move can not be made on a game."""


class GameStateKind(Enum):
    """Whether a game goes on, ended in a tie, or was won."""

    PLAYABLE = "playable"
    TIE = "tie"
    WIN = "win"


@dataclass(frozen=True)
class GameState(Generic[P]):
    """The state of a game; ``player`` is set only for a win."""

    kind: GameStateKind
    player: Optional[P] = None

    def __post_init__(self) -> None:
        if (self.kind is GameStateKind.WIN) != (self.player is not None):
            raise ValueError("a player is given exactly when the state is a win")

    @classmethod
    def playable(cls) -> GameState:
        """It is still a player's turn."""
        return cls(GameStateKind.PLAYABLE)

    @classmethod
    def tie(cls) -> GameState:
        """The game ended with no winner."""
        return cls(GameStateKind.TIE)

    @classmethod
    def win(cls, player: P) -> GameState:
        """The game was won by ``player``."""
        return cls(GameStateKind.WIN, player)


class Game(ABC):
    """A combinatorial game.

    Implementations expose ``move_count`` (the number of moves played so
    far) as an attribute or property.
    """

    move_count: int

    @abstractmethod
    def max_moves(self) -> Optional[int]:
        """The most moves this game can last, or None if unbounded."""

    @abstractmethod
    def make_move(self, move: Any) -> None:
        """Play ``move``; raises MoveError if it can not be played."""

    @abstractmethod
    def possible_moves(self) -> Iterator[Any]:
        """All moves playable now, likely best moves first."""

    @abstractmethod
    def state(self) -> GameState:
        """The current state of the game."""

    @abstractmethod
    def player(self) -> Any:
        """The player whose turn it is."""

    def copy(self) -> Game:
        """An independent copy of this game."""
        return copy.deepcopy(self)

    def find_immediately_resolvable_game(self) -> Optional[Game]:
        """A game one move away whose outcome is decided, best for the mover.

        A win for the player on move is returned at once; otherwise a tie is
        preferred over a loss. None if no move ends the game.
        """
        best_non_winning: Optional[Game] = None
        mover = self.player().turn()
        for move in self.possible_moves():
            new_game = self.copy()
            new_game.make_move(move)
            state = new_game.state()
            if state.kind is GameStateKind.PLAYABLE:
                continue
            if state.kind is GameStateKind.TIE:
                best_non_winning = new_game
            elif state.player == mover:
                return new_game
            elif best_non_winning is None:
                best_non_winning = new_game
        return best_non_winning


class NormalGame(Game):
    """A game under the normal play convention: whoever moves last wins."""

    def state(self) -> GameState:
        if next(iter(self.possible_moves()), _MISSING) is _MISSING:
            return GameState.win(self.player().previous())
        return GameState.playable()


class NormalImpartialGame(NormalGame):
    """A normal play impartial game, which may be split into a sum of games."""

    def split(self) -> Optional[list]:
        """The games this one is a disjoint sum of, or None if it can not be split."""
        return None


class MisereGame(Game):
    """A game under the misère play convention: whoever moves last loses."""

    def state(self) -> GameState:
        if next(iter(self.possible_moves()), _MISSING) is _MISSING:
            return GameState.win(self.player())
        return GameState.playable()


class OutcomeKind(Enum):
    """A win, a loss or a tie."""

    WIN = "win"
    LOSS = "loss"
    TIE = "tie"


@dataclass(frozen=True)
class GameScoreOutcome:
    """An outcome with the number of moves until it, unset for a tie."""

    kind: OutcomeKind
    moves: Optional[int] = None


def upper_bound(game: Game) -> int:
    """The upper score bound of a game: its maximum move count if it has one."""
    max_moves = game.max_moves()
    return UNBOUNDED_UPPER_BOUND if max_moves is None else max_moves


def score_to_outcome(game: Game, score: int) -> GameScoreOutcome:
    """Turn a score into the number of moves until a win or loss, or a tie."""
    bound = upper_bound(game) - game.move_count
    if score > 0:
        return GameScoreOutcome(OutcomeKind.WIN, bound - score)
    if score < 0:
        return GameScoreOutcome(OutcomeKind.LOSS, bound + score)
    return GameScoreOutcome(OutcomeKind.TIE)