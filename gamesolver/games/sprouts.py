"""Sprouts: players join sprouts with lines until no sprout has a life left."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional, Sequence, Union

from gamesolver.game import MoveError, NormalImpartialGame
from gamesolver.games.util import MoveParseError, move_failable
from gamesolver.player import ImpartialPlayer

# Sprout indices fit in one byte.
MAX_SPROUT_INDEX = 255
# A sprout with this many lines attached is dead.
MAX_SPROUTS = 3


@dataclass(frozen=True, order=True)
class SproutsMove:
    """A line drawn from sprout ``start`` to sprout ``end``."""

    start: int
    end: int

    @classmethod
    def parse(cls, text: str) -> SproutsMove:
        """Read a move written as ``i-j``."""
        parts = text.split("-")
        if len(parts) != 2:
            raise MoveParseError("a move shouldn't connect more than two sprouts")
        indices = []
        for part in parts:
            if not part.isascii() or not part.lstrip("+").isdigit() or part.count("+") > 1:
                raise MoveParseError(f"{part!r} is not a sprout index")
            value = int(part)
            if value > MAX_SPROUT_INDEX:
                raise MoveParseError(f"sprout index {value} is too large")
            indices.append(value)
        return cls(indices[0], indices[1])

    def __str__(self) -> str:
        return f"({self.start} {self.end})"


class SproutsMoveError(MoveError):
    """A sprouts move can not be made."""


class MoveOutOfBoundsError(SproutsMoveError):
    """A sprout named by the move does not exist."""

    def __init__(self, index: int, move: SproutsMove) -> None:
        super().__init__(f"chosen index {index} from move {move!r} is out of bounds.")
        self.index = index
        self.move = move


class DeadSproutError(SproutsMoveError):
    """A sprout named by the move has no lives left."""

    def __init__(self, index: int, move: SproutsMove) -> None:
        super().__init__(f"chosen index {index} from move {move!r} references a dead sprout.")
        self.index = index
        self.move = move


class SproutsConnectedError(SproutsMoveError):
    """The two sprouts are already joined."""

    def __init__(self, move: SproutsMove) -> None:
        super().__init__(f"a move for {move!r} has already been made")
        self.move = move


@dataclass
class SproutsArgs:
    """Setup of a sprouts game: the starting sprouts and moves written ``i-j``."""

    starting_sprouts: int = 6
    moves: Sequence[Union[SproutsMove, str]] = field(default_factory=list)


def _key(a: int, b: int) -> tuple[int, int]:
    return (a, b) if a <= b else (b, a)


class Sprouts(NormalImpartialGame):
    """Sprouts played on a graph of sprouts joined by lines.

    Equality compares the graph as stored, without isomorphism checks.
    """

    def __init__(self, node_count: int) -> None:
        if not 0 <= node_count <= MAX_SPROUT_INDEX:
            raise ValueError(f"sprout count {node_count} must be between 0 and {MAX_SPROUT_INDEX}")
        self.node_count = node_count
        self._edges: set[tuple[int, int]] = set()

    @classmethod
    def from_args(cls, args: SproutsArgs) -> Sprouts:
        """A game with the given sprouts and moves played."""
        game = cls(args.starting_sprouts)
        for move in args.moves:
            if isinstance(move, str):
                move = SproutsMove.parse(move)
            move_failable(game, move)
        return game

    @property
    def move_count(self) -> int:
        """Every move adds one line, so this is the number of lines."""
        return len(self._edges)

    def _has_edge(self, a: int, b: int) -> bool:
        return _key(a, b) in self._edges

    def _degree(self, node: int) -> int:
        return sum(1 for a, b in self._edges if a == node or b == node)

    def _edge_references(self) -> list[tuple[int, int]]:
        return sorted(self._edges)

    def max_moves(self) -> Optional[int]:
        return 3 * self.node_count - 1

    def make_move(self, move: SproutsMove) -> None:
        if self._has_edge(move.start, move.end):
            raise SproutsConnectedError(move)
        for index in (move.start, move.end):
            if not 0 <= index < self.node_count:
                raise MoveOutOfBoundsError(index, move)
        for index in (move.start, move.end):
            if self._degree(index) >= MAX_SPROUTS:
                raise DeadSproutError(index, move)
        self._edges.add(_key(move.start, move.end))

    def possible_moves(self) -> Iterator[SproutsMove]:
        degrees = [self._degree(node) for node in range(self.node_count)]
        moves: list[SproutsMove] = []
        for node, degree in enumerate(degrees):
            if degree > MAX_SPROUTS:
                raise RuntimeError("No node should have more than three edges")
            if degree == MAX_SPROUTS:
                continue
            if degree < 2 and not self._has_edge(node, node):
                moves.append(SproutsMove(node, node))
            moves.extend(
                SproutsMove(node, other)
                for other in range(node + 1, self.node_count)
                if degrees[other] < MAX_SPROUTS and not self._has_edge(node, other)
            )
        return iter(moves)

    def player(self) -> ImpartialPlayer:
        return ImpartialPlayer.NEXT

    def copy(self) -> Sprouts:
        clone = Sprouts(self.node_count)
        clone._edges = set(self._edges)
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sprouts):
            return NotImplemented
        return (self.node_count, self._edge_references()) == (
            other.node_count,
            other._edge_references(),
        )

    def __hash__(self) -> int:
        return hash((self.node_count, tuple(self._edge_references())))

    def __str__(self) -> str:
        references = self._edge_references()
        text = f"graph of vertices count {len(references)}\n"
        if not references:
            return text
        return text + "".join(f"{a}-{b} " for a, b in references) + "\n"

    def __repr__(self) -> str:
        return str(self)