"""The games the package knows, with their names and default setups."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Optional

from gamesolver.game import Game
from gamesolver.games.chomp import Chomp, ChompArgs
from gamesolver.games.domineering import Domineering, DomineeringArgs
from gamesolver.games.nim import Nim, NimArgs
from gamesolver.games.order_and_chaos import OrderAndChaos, OrderAndChaosArgs
from gamesolver.games.reversi import Reversi, ReversiArgs
from gamesolver.games.sprouts import Sprouts, SproutsArgs
from gamesolver.games.tic_tac_toe import TicTacToe, TicTacToeArgs
from gamesolver.games.zener import Zener, ZenerArgs


class GameKind(Enum):
    """A game, identified by its command name."""

    REVERSI = "reversi"
    TIC_TAC_TOE = "tic-tac-toe"
    ORDER_AND_CHAOS = "order-and-chaos"
    NAIVE_NIM = "naive-nim"
    DOMINEERING = "domineering"
    CHOMP = "chomp"
    SPROUTS = "sprouts"
    ZENER = "zener"

    def display_name(self) -> str:
        """The human-readable name of the game."""
        return _NAMES[self]

    def default_args(self) -> Any:
        """The default setup of the game."""
        return _ARGS[self]()

    def build(self, args: Optional[Any] = None) -> Game:
        """A game built from ``args``, or from the default setup."""
        if args is None:
            args = self.default_args()
        expected = _ARGS[self]
        if not isinstance(args, expected):
            raise TypeError(
                f"{self.display_name()} expects {expected.__name__}, got {type(args).__name__}"
            )
        return _BUILDERS[self](args)


_NAMES = {
    GameKind.REVERSI: "Reversi",
    GameKind.TIC_TAC_TOE: "Tic Tac Toe",
    GameKind.ORDER_AND_CHAOS: "Order and Chaos",
    GameKind.NAIVE_NIM: "Nim (Naive)",
    GameKind.DOMINEERING: "Domineering",
    GameKind.CHOMP: "Chomp",
    GameKind.SPROUTS: "Sprouts",
    GameKind.ZENER: "Zener",
}

_ARGS: dict[GameKind, type] = {
    GameKind.REVERSI: ReversiArgs,
    GameKind.TIC_TAC_TOE: TicTacToeArgs,
    GameKind.ORDER_AND_CHAOS: OrderAndChaosArgs,
    GameKind.NAIVE_NIM: NimArgs,
    GameKind.DOMINEERING: DomineeringArgs,
    GameKind.CHOMP: ChompArgs,
    GameKind.SPROUTS: SproutsArgs,
    GameKind.ZENER: ZenerArgs,
}

_BUILDERS: dict[GameKind, Callable[[Any], Game]] = {
    GameKind.REVERSI: Reversi.from_args,
    GameKind.TIC_TAC_TOE: TicTacToe.from_args,
    GameKind.ORDER_AND_CHAOS: OrderAndChaos.from_args,
    GameKind.NAIVE_NIM: Nim.from_args,
    GameKind.DOMINEERING: lambda args: Domineering.from_args(args, 5, 5),
    GameKind.CHOMP: Chomp.from_args,
    GameKind.SPROUTS: Sprouts.from_args,
    GameKind.ZENER: Zener.from_args,
}


def default_games() -> list[tuple[GameKind, Any]]:
    """Every game paired with its default setup, in registry order."""
    return [(kind, kind.default_args()) for kind in GameKind]