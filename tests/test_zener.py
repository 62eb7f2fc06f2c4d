import pytest

from gamesolver.game import GameStateKind
from gamesolver.games.util import MoveParseError
from gamesolver.games.zener import (
    GUTTER,
    Direction,
    InnerCellType,
    Zener,
    ZenerArgs,
    ZenerMove,
    ZenerMoveError,
    ZenerPosition,
)
from gamesolver.player import PartizanPlayer


def mv(x, y, direction):
    return ZenerMove((x, y), direction)


WINNING_LINE = [
    mv(0, 6, Direction.UP),
    mv(4, 0, Direction.DOWN),
    mv(0, 5, Direction.UP),
    mv(4, 1, Direction.DOWN),
    mv(0, 4, Direction.UP),
    mv(4, 2, Direction.DOWN),
    mv(0, 3, Direction.UP),
    mv(4, 3, Direction.DOWN),
    mv(0, 2, Direction.UP),
    mv(4, 4, Direction.DOWN),
    mv(0, 1, Direction.UP),
    mv(1, 0, Direction.DOWN),
]


def test_initial_board_rendering():
    lines = str(Zener()).splitlines()
    assert lines[0] == "( ⋆ )( □ )( ~ )( + )( ∘ )"
    assert lines[6] == "[ ∘ ][ + ][ ~ ][ □ ][ ⋆ ]"
    assert all(line == "{   }" * 5 for line in lines[1:6])


def test_initial_moves_are_left_bottom_row_up_first():
    game = Zener()
    moves = list(game.possible_moves())
    assert moves[0] == mv(0, 6, Direction.UP)
    assert all(m.start[1] == 6 for m in moves)
    assert Direction.DOWN not in {m.direction for m in moves}
    assert mv(0, 6, Direction.LEFT) not in moves


def test_make_move_changes_player_and_count():
    game = Zener()
    game.make_move(mv(2, 6, Direction.UP))
    assert game.move_count == 1
    assert game.player() is PartizanPlayer.RIGHT
    assert str(game).splitlines()[5] == "{   }{   }[ ~ ]{   }{   }"
    assert game.tracker().halfmoves() == 1


def test_stacking_shows_count_and_gutter_wins():
    game = Zener()
    for move in WINNING_LINE[:11]:
        game.make_move(move)
    assert str(game).splitlines()[0].startswith("[ ∘2]")
    game.make_move(WINNING_LINE[11])
    game.make_move(mv(0, 0, Direction.UP))
    assert game.gutter.inner is InnerCellType.CIRCLE
    assert list(game.possible_moves()) == []
    state = game.state()
    assert state.kind is GameStateKind.WIN
    assert state.player is PartizanPlayer.LEFT
    with pytest.raises(ZenerMoveError) as info:
        game.make_move(mv(1, 1, Direction.DOWN))
    assert info.value.reason == "gutter_filled"


@pytest.mark.parametrize(
    "move, reason",
    [
        (mv(0, 0, Direction.DOWN), "wrong_player"),
        (mv(2, 3, Direction.UP), "no_piece"),
        (mv(0, 6, Direction.LEFT), "to_out_of_bounds"),
        (mv(0, 8, Direction.UP), "from_out_of_bounds"),
        (mv(0, 6, Direction.DOWN), "wrong_move_gutter"),
    ],
)
def test_move_errors(move, reason):
    game = Zener()
    with pytest.raises(ZenerMoveError) as info:
        game.make_move(move)
    assert info.value.reason == reason
    assert game == Zener()


def test_compulsory_piece_is_enforced():
    game = Zener()
    game.compulsory = InnerCellType.STAR
    with pytest.raises(ZenerMoveError) as info:
        game.make_move(mv(0, 6, Direction.UP))
    assert info.value.reason == "compulsory"
    game.make_move(mv(4, 6, Direction.UP))
    assert game.move_count == 1


def test_copy_is_equal_and_independent():
    game = Zener()
    game.make_move(mv(1, 6, Direction.UP))
    clone = game.copy()
    assert clone == game
    assert hash(clone) == hash(game)
    clone.make_move(mv(0, 0, Direction.DOWN))
    assert clone != game
    assert game.move_count == 1


def test_state_playable_at_start_and_without_tracker():
    game = Zener()
    assert game.state().kind is GameStateKind.PLAYABLE
    board, compulsory, move_count, gutter = game.without_tracker()
    assert len(board) == 35
    assert (compulsory, move_count, gutter) == (None, 0, None)


def test_direction_parse_and_steps():
    assert Direction.parse("UP") is Direction.UP
    assert Direction.parse("left") is Direction.LEFT
    with pytest.raises(MoveParseError):
        Direction.parse("north")
    assert Direction.UP.as_step() == (0, -1)
    assert Direction.biased_directions(PartizanPlayer.RIGHT)[0] is Direction.DOWN


def test_apply_to_position():
    assert Direction.UP.apply_to_position((0, 0)) == GUTTER
    assert Direction.DOWN.apply_to_position((3, 6)).is_gutter
    assert Direction.RIGHT.apply_to_position((1, 2)) == ZenerPosition(2, 2)
    with pytest.raises(ValueError):
        Direction.RIGHT.apply_to_position((4, 3))
    with pytest.raises(ValueError):
        Direction.LEFT.apply_to_position((0, 3))


def test_move_parse_and_display():
    move = ZenerMove.parse("1:2:left")
    assert move == mv(1, 2, Direction.LEFT)
    assert str(move) == "(1, 2) -> Left"
    with pytest.raises(MoveParseError):
        ZenerMove.parse("1:2")
    with pytest.raises(MoveParseError):
        ZenerMove.parse("a:2:up")


def test_from_args_is_start():
    assert Zener.from_args(ZenerArgs()) == Zener()