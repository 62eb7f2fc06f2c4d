"""Command line entry: play the games interactively."""

from __future__ import annotations

import argparse
import sys
from typing import Any, Callable, Optional, Sequence, TextIO

from gamesolver.game import Game, MoveError
from gamesolver.games.chomp import Chomp, ChompArgs
from gamesolver.games.domineering import Domineering, DomineeringArgs, DomineeringMove
from gamesolver.games.nim import Nim, NimArgs
from gamesolver.games.order_and_chaos import OrderAndChaos, OrderAndChaosArgs, OrderAndChaosMove
from gamesolver.games.registry import GameKind
from gamesolver.games.reversi import Reversi, ReversiArgs
from gamesolver.games.sprouts import Sprouts, SproutsArgs, SproutsMove
from gamesolver.games.tic_tac_toe import TicTacToe, TicTacToeArgs, TicTacToeMove
from gamesolver.games.util import GameOverError, NaturalMove, move_failable
from gamesolver.games.zener import Zener, ZenerArgs, ZenerMove
from gamesolver.player import ImpartialPlayer

_CLEAR = "\x1b[2J\x1b[H"
_RED = "\x1b[31m"
_RESET = "\x1b[0m"

_MOVE_PARSERS: list[tuple[type, Callable[[str], Any]]] = [
    (Nim, lambda text: NaturalMove.parse(text, 2)),
    (Chomp, lambda text: NaturalMove.parse(text, 2)),
    (Reversi, lambda text: NaturalMove.parse(text, 2)),
    (Domineering, DomineeringMove.parse),
    (OrderAndChaos, OrderAndChaosMove.parse),
    (Sprouts, SproutsMove.parse),
    (TicTacToe, TicTacToeMove.parse),
    (Zener, ZenerMove.parse),
]


def _move_parser(game: Game) -> Callable[[str], Any]:
    for game_type, parser in _MOVE_PARSERS:
        if isinstance(game, game_type):
            return parser
    raise TypeError(f"no move syntax is known for {type(game).__name__}")


def announce_player(game: Game, stream: Optional[TextIO] = None) -> None:
    """Say whose turn it is."""
    out = stream if stream is not None else sys.stdout
    player = game.player()
    if isinstance(player, ImpartialPlayer):
        out.write("Impartial game; Next player is moving.\n")
    else:
        out.write(f"Player {player.name.capitalize()} to move\n")


def _is_tty(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def _clear(stream: TextIO) -> None:
    if _is_tty(stream):
        stream.write(_CLEAR)


def _error(stream: TextIO, message: str) -> None:
    if _is_tty(stream):
        message = f"{_RED}{message}{_RESET}"
    stream.write(message + "\n")


def play_interactive(
    game: Game,
    read_line: Optional[Callable[[str], str]] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Show the game and play the moves read until input runs out.

    ``read_line`` is called with the prompt ``Move`` and raises EOFError
    when there is no more input.
    """
    out = stream if stream is not None else sys.stdout
    reader = read_line if read_line is not None else (lambda prompt: input(f"{prompt}: "))
    parse = _move_parser(game)
    while True:
        out.write(f"{game}\n")
        announce_player(game, out)
        try:
            text = reader("Move")
        except EOFError:
            return
        try:
            move = parse(text)
        except ValueError as err:
            _clear(out)
            _error(out, f"Invalid move {text}: {err!r}")
            continue
        try:
            move_failable(game, move)
        except (MoveError, GameOverError) as err:
            _clear(out)
            _error(out, f"Failed to make move {move!r}: {err!r}")
            continue
        _clear(out)


def _add_game_arguments(kind: GameKind, parser: argparse.ArgumentParser) -> None:
    if kind is GameKind.TIC_TAC_TOE:
        parser.add_argument("dimensions", type=int, help="the amount of dimensions in the game")
        parser.add_argument("size", type=int, help="the length of each side of the board")
    elif kind is GameKind.NAIVE_NIM:
        parser.add_argument("configuration", help="heap sizes, for example 3,5,7")
    elif kind is GameKind.CHOMP:
        parser.add_argument("--width", type=int, default=6, help="the width of the game")
        parser.add_argument("--height", type=int, default=4, help="the height of the game")
    elif kind is GameKind.SPROUTS:
        parser.add_argument("starting_sprouts", type=int, help="the amount of sprouts to start with")
    if kind is not GameKind.ZENER:
        parser.add_argument("moves", nargs="*", help="moves to play before starting")


def _args_for(kind: GameKind, ns: argparse.Namespace) -> Any:
    moves = list(getattr(ns, "moves", []))
    if kind is GameKind.REVERSI:
        return ReversiArgs(moves)
    if kind is GameKind.TIC_TAC_TOE:
        return TicTacToeArgs(ns.dimensions, ns.size, moves)
    if kind is GameKind.ORDER_AND_CHAOS:
        return OrderAndChaosArgs(moves)
    if kind is GameKind.NAIVE_NIM:
        return NimArgs(ns.configuration, moves)
    if kind is GameKind.DOMINEERING:
        return DomineeringArgs(moves)
    if kind is GameKind.CHOMP:
        return ChompArgs(ns.width, ns.height, moves)
    if kind is GameKind.SPROUTS:
        return SproutsArgs(ns.starting_sprouts, moves)
    return ZenerArgs()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gamesolver",
        description="A utility that helps analyze various combinatorial games.",
    )
    commands = parser.add_subparsers(dest="command", required=True)
    play = commands.add_parser("play", help="play a game interactively")
    games = play.add_subparsers(dest="game", required=True)
    for kind in GameKind:
        sub = games.add_parser(kind.value, help=kind.display_name())
        _add_game_arguments(kind, sub)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line; returns the exit status."""
    ns = _build_parser().parse_args(argv)
    kind = GameKind(ns.game)
    try:
        game = kind.build(_args_for(kind, ns))
    except (ValueError, MoveError, GameOverError) as err:
        sys.stderr.write(f"error: {err}\n")
        return 1
    play_interactive(game)
    return 0


if __name__ == "__main__":
    sys.exit(main())