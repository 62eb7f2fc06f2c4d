import pytest

from gamesolver.game import (
    UNBOUNDED_UPPER_BOUND,
    Game,
    GameScoreOutcome,
    GameState,
    GameStateKind,
    MisereGame,
    MoveError,
    NormalGame,
    NormalImpartialGame,
    OutcomeKind,
    score_to_outcome,
    upper_bound,
)
from gamesolver.player import ImpartialPlayer, PartizanPlayer


class Subtraction(NormalImpartialGame):
    """Take one or two from a pile."""

    def __init__(self, pile, bounded=True):
        self.pile = pile
        self.move_count = 0
        self.bounded = bounded

    def max_moves(self):
        return self.pile + self.move_count if self.bounded else None

    def make_move(self, move):
        if move > self.pile:
            raise MoveError("too many")
        self.pile -= move
        self.move_count += 1

    def possible_moves(self):
        return iter([m for m in (1, 2) if m <= self.pile])

    def player(self):
        return ImpartialPlayer.NEXT


class MisereSubtraction(Subtraction, MisereGame):
    state = MisereGame.state


class Choice(NormalGame):
    """Left picks one of several fixed outcomes."""

    def __init__(self, outcomes):
        self.outcomes = outcomes
        self.chosen = None
        self.move_count = 0

    def max_moves(self):
        return 1

    def make_move(self, move):
        self.chosen = move
        self.move_count += 1

    def possible_moves(self):
        return iter(range(len(self.outcomes)) if self.chosen is None else [])

    def state(self):
        if self.chosen is None:
            return GameState.playable()
        return self.outcomes[self.chosen]

    def player(self):
        return PartizanPlayer.LEFT


class Broken(Subtraction):
    def make_move(self, move):
        raise MoveError("broken")


def test_game_state_constructors():
    assert GameState.win(PartizanPlayer.LEFT).kind is GameStateKind.WIN
    assert GameState.win(PartizanPlayer.LEFT).player is PartizanPlayer.LEFT
    assert GameState.tie().kind is GameStateKind.TIE
    assert GameState.playable().player is None


def test_game_state_requires_player_for_win():
    with pytest.raises(ValueError):
        GameState(GameStateKind.WIN)
    with pytest.raises(ValueError):
        GameState(GameStateKind.TIE, PartizanPlayer.LEFT)


def test_normal_state():
    assert Subtraction(0).state() == GameState.win(ImpartialPlayer.PREVIOUS)
    assert Subtraction(3).state() == GameState.playable()


def test_misere_state():
    assert MisereSubtraction(0).state() == GameState.win(ImpartialPlayer.NEXT)
    assert MisereSubtraction(3).state() == GameState.playable()


def test_split_default():
    assert NormalImpartialGame.split(Subtraction(4)) is None


def test_copy_is_independent():
    game = Subtraction(4)
    other = Game.copy(game)
    other.make_move(2)
    assert game.pile == 4
    assert other.pile == 2


def test_resolvable_finds_win():
    game = Subtraction(2)
    result = Game.find_immediately_resolvable_game(game)
    assert result.pile == 0
    assert result.state() == GameState.win(ImpartialPlayer.PREVIOUS)
    assert game.pile == 2


def test_resolvable_none_when_no_ending_move():
    game = Subtraction(5)
    assert Game.find_immediately_resolvable_game(game) is None
    assert game.state() == GameState.playable()


def test_resolvable_prefers_tie_over_loss():
    loss = GameState.win(PartizanPlayer.RIGHT)
    game = Choice([loss, GameState.tie()])
    assert game.find_immediately_resolvable_game().state() == GameState.tie()
    game = Choice([GameState.tie(), loss])
    assert game.find_immediately_resolvable_game().state() == GameState.tie()


def test_resolvable_prefers_win():
    win = GameState.win(PartizanPlayer.LEFT)
    game = Choice([GameState.tie(), win, GameState.win(PartizanPlayer.RIGHT)])
    assert game.find_immediately_resolvable_game().state() == win


def test_resolvable_returns_loss_when_only_option():
    loss = GameState.win(PartizanPlayer.RIGHT)
    game = Choice([GameState.playable(), loss])
    assert game.find_immediately_resolvable_game().state() == loss


def test_resolvable_propagates_move_error():
    with pytest.raises(MoveError):
        Game.find_immediately_resolvable_game(Broken(3))


def test_upper_bound():
    assert upper_bound(Subtraction(10)) == 10
    unbounded = Subtraction(10, bounded=False)
    assert upper_bound(unbounded) == UNBOUNDED_UPPER_BOUND
    assert upper_bound(unbounded) > upper_bound(Subtraction(10))


def test_score_to_outcome_tie():
    assert score_to_outcome(Subtraction(6), 0) == GameScoreOutcome(OutcomeKind.TIE)


@pytest.mark.parametrize("score", [1, 3, 7])
def test_score_to_outcome_win(score):
    game = Subtraction(9)
    game.make_move(1)
    outcome = score_to_outcome(game, score)
    assert outcome.kind is OutcomeKind.WIN
    assert outcome.moves + score == upper_bound(game) - game.move_count


@pytest.mark.parametrize("score", [-1, -3, -7])
def test_score_to_outcome_loss(score):
    game = Subtraction(9)
    game.make_move(2)
    outcome = score_to_outcome(game, score)
    assert outcome.kind is OutcomeKind.LOSS
    assert outcome.moves - score == upper_bound(game) - game.move_count