from gamesolver.transposition import Score, ScoreKind, TranspositionTable


def test_score_constructors():
    assert Score.lower_bound(4) == Score(ScoreKind.LOWER_BOUND, 4)
    assert Score.upper_bound(4) == Score(ScoreKind.UPPER_BOUND, 4)
    assert Score.lower_bound(4) != Score.upper_bound(4)


def test_missing_board():
    table = TranspositionTable()
    assert table.get((1, 2)) is None
    assert not table.has((1, 2))
    assert len(table) == 0


def test_insert_and_get():
    table = TranspositionTable()
    table.insert((1, 2), Score.upper_bound(-3))
    assert table.get((1, 2)) == Score.upper_bound(-3)
    assert table.has((1, 2))
    assert (1, 2) in table
    assert (2, 1) not in table


def test_insert_overwrites():
    table = TranspositionTable()
    table.insert("board", Score.lower_bound(1))
    table.insert("board", Score.upper_bound(5))
    assert table.get("board") == Score.upper_bound(5)
    assert len(table) == 1