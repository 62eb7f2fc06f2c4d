import pytest

from gamesolver.game import GameStateKind
from gamesolver.games.reversi import HEIGHT, WIDTH, Reversi, ReversiArgs, ReversiMoveError
from gamesolver.games.util import NaturalMove
from gamesolver.player import PartizanPlayer


def board_rows(game):
    return str(game).splitlines()[1:]


def cell_char(game, x, y):
    return board_rows(game)[y][x]


def count(game, char):
    return sum(row.count(char) for row in board_rows(game))


def test_initial_centre():
    game = Reversi()
    assert cell_char(game, WIDTH // 2 - 1, HEIGHT // 2 - 1) == "X"
    assert cell_char(game, WIDTH // 2, HEIGHT // 2) == "X"
    assert cell_char(game, WIDTH // 2 - 1, HEIGHT // 2) == "O"
    assert cell_char(game, WIDTH // 2, HEIGHT // 2 - 1) == "O"
    assert len(board_rows(game)) == HEIGHT


def test_header_names_player():
    game = Reversi()
    assert str(game).startswith("Current player: X\n")
    game.make_move(next(game.possible_moves()))
    assert str(game).startswith("Current player: O\n")


def test_stars_mark_possible_moves():
    game = Reversi()
    moves = list(game.possible_moves())
    assert count(game, "*") == len(moves)
    for move in moves:
        assert cell_char(game, move[0], move[1]) == "*"
        assert game.flips_for(move)


def test_make_move_flips_pieces():
    game = Reversi()
    move = next(game.possible_moves())
    flips = game.flips_for(move)
    before = count(game, "X") + count(game, "O")
    game.make_move(move)
    assert game.move_count == 1
    assert game.player() is PartizanPlayer.RIGHT
    after = count(game, "X") + count(game, "O")
    assert after == before + 1
    for square in [move, *flips]:
        assert cell_char(game, square[0], square[1]) == "X"


def test_flip_from_centre_move():
    game = Reversi()
    move = NaturalMove((WIDTH // 2 - 1, HEIGHT // 2 + 1))
    assert game.flips_for(move) == [NaturalMove((WIDTH // 2 - 1, HEIGHT // 2))]


def test_occupied_square_is_illegal():
    game = Reversi()
    occupied = NaturalMove((WIDTH // 2, HEIGHT // 2))
    assert game.flips_for(occupied) == []
    with pytest.raises(ReversiMoveError):
        game.make_move(occupied)
    assert game.move_count == 0


def test_isolated_square_is_illegal():
    game = Reversi()
    with pytest.raises(ReversiMoveError):
        game.make_move(NaturalMove((0, 0)))


def test_out_of_bounds_move():
    with pytest.raises(ReversiMoveError):
        Reversi().make_move(NaturalMove((WIDTH, 0)))


def test_initial_state_and_bounds():
    game = Reversi()
    assert game.state().kind is GameStateKind.PLAYABLE
    assert game.max_moves() == WIDTH * HEIGHT


def test_game_played_out_ends_by_piece_count():
    game = Reversi()
    while game.state().kind is GameStateKind.PLAYABLE:
        game.make_move(next(game.possible_moves()))
    state = game.state()
    x_count, o_count = count(game, "X"), count(game, "O")
    assert count(game, "*") == 0
    if x_count > o_count:
        assert state.player is PartizanPlayer.LEFT
    elif x_count < o_count:
        assert state.player is PartizanPlayer.RIGHT
    else:
        assert state.kind is GameStateKind.TIE


def test_from_args_matches_direct_play():
    first = next(Reversi().possible_moves())
    game = Reversi.from_args(ReversiArgs([str(first)]))
    direct = Reversi()
    direct.make_move(first)
    assert game == direct
    assert hash(game) == hash(direct)


def test_copy_is_independent():
    game = Reversi()
    clone = game.copy()
    assert clone == game
    clone.make_move(next(clone.possible_moves()))
    assert clone != game
    assert game.move_count == 0