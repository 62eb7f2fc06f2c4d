import pytest

from gamesolver.game import GameStateKind
from gamesolver.games.chomp import Chomp, ChompArgs, ChompMoveError
from gamesolver.games.util import NaturalMove
from gamesolver.player import ImpartialPlayer

# The moves available from the start of a 6 by 4 game.
OPENING_MOVES = [
    (2, 2), (5, 0), (4, 0), (3, 0), (2, 0), (0, 0), (5, 1), (4, 1),
    (3, 1), (2, 1), (0, 1), (5, 2), (4, 2), (3, 2), (5, 3), (1, 0),
    (1, 1), (1, 2), (4, 3), (3, 3), (2, 3), (0, 2), (1, 3),
]


def test_opening_moves():
    game = Chomp(6, 4)
    moves = list(game.possible_moves())
    assert sorted(moves) == sorted(NaturalMove(m) for m in OPENING_MOVES)
    assert len(moves) == len(OPENING_MOVES)


def test_moves_start_from_last_row():
    game = Chomp(6, 4)
    assert next(iter(game.possible_moves())) == NaturalMove((1, 3))


def test_initial_display():
    assert str(Chomp(6, 4)) == "XXXXXX\nXXXXXX\nXXXXXX\n.XXXXX\n"


def test_eating_a_rectangle():
    game = Chomp(6, 4)
    game.make_move(NaturalMove((2, 2)))
    assert str(game) == "XX....\nXX....\nXX....\n.XXXXX\n"
    assert game.move_count == 1


def test_eaten_square_rejected():
    game = Chomp(6, 4)
    game.make_move(NaturalMove((2, 2)))
    with pytest.raises(ChompMoveError, match="already filled") as info:
        game.make_move(NaturalMove((3, 1)))
    assert info.value.move == NaturalMove((3, 1))
    assert game.move_count == 1


def test_poison_square_rejected():
    with pytest.raises(ChompMoveError):
        Chomp(6, 4).make_move(NaturalMove((0, 3)))


def test_out_of_bounds_rejected():
    with pytest.raises(ChompMoveError):
        Chomp(6, 4).make_move(NaturalMove((6, 0)))


def test_max_moves_is_area():
    assert Chomp(6, 4).max_moves() == 6 * 4


def test_single_square_is_over():
    state = Chomp(1, 1).state()
    assert state.kind is GameStateKind.WIN
    assert state.player is ImpartialPlayer.PREVIOUS


def test_order_of_moves_does_not_matter():
    first = Chomp(6, 4)
    first.make_move(NaturalMove((3, 3)))
    first.make_move(NaturalMove((2, 2)))
    second = Chomp(6, 4)
    second.make_move(NaturalMove((2, 2)))
    second.make_move(NaturalMove((3, 3)))
    assert first == second
    assert hash(first) == hash(second)


def test_from_args():
    assert Chomp.from_args(ChompArgs()) == Chomp(6, 4)
    game = Chomp.from_args(ChompArgs(width=6, height=4, moves=["2-2"]))
    expected = Chomp(6, 4)
    expected.make_move(NaturalMove((2, 2)))
    assert game == expected


def test_copy_is_independent():
    game = Chomp(3, 3)
    clone = game.copy()
    assert clone == game
    clone.make_move(NaturalMove((0, 0)))
    assert game.move_count == 0
    assert NaturalMove((0, 0)) in list(game.possible_moves())
    assert NaturalMove((0, 0)) not in list(clone.possible_moves())