import pytest

from gamesolver.grid import Grid, GridIndexError


def _numbered(width=3, height=2):
    return Grid(width, height, range(width * height))


def test_size_mismatch_rejected():
    with pytest.raises(ValueError, match="SIZE must be equal to W \\* H"):
        Grid(3, 2, [0] * 5)


def test_filled_with_copies_each_cell():
    grid = Grid.filled_with(2, 2, [])
    grid[0, 0].append(1)
    assert grid[0, 0] == [1]
    assert grid[1, 0] == []
    assert grid[1, 1] == []


def test_set_then_get_round_trip():
    grid = Grid.filled_with(4, 3, None)
    grid.set(3, 2, "z")
    grid[1, 0] = "a"
    assert grid.get(3, 2) == "z"
    assert grid[1, 0] == "a"
    assert grid[1, 0] == grid.data[grid.idx(1, 0)]


def test_idx_is_none_outside():
    grid = _numbered()
    assert grid.idx(3, 0) is None
    assert grid.idx(0, 2) is None
    assert grid.idx(-1, 0) is None


def test_get_past_data_is_none():
    grid = _numbered()
    assert grid.get(0, 2) is None
    assert grid.get(-1, 0) is None


def test_set_out_of_bounds_raises():
    grid = _numbered()
    with pytest.raises(GridIndexError):
        grid.set(3, 0, 9)
    with pytest.raises(IndexError):
        grid[0, 5]


def test_row_iter_matches_indexing():
    grid = _numbered()
    for y in range(grid.height):
        assert list(grid.row_iter(y)) == [grid[x, y] for x in range(grid.width)]


def test_column_iter_matches_indexing():
    grid = _numbered()
    for x in range(grid.width):
        assert list(grid.column_iter(x)) == [grid[x, y] for y in range(grid.height)]


def test_row_iter_error_message():
    grid = _numbered()
    with pytest.raises(GridIndexError, match="Indices 2 and 0 are out of bounds"):
        grid.row_iter(2)


def test_column_iter_out_of_bounds():
    grid = _numbered()
    with pytest.raises(GridIndexError) as info:
        grid.column_iter(3)
    assert info.value.indices == (0, 3)


def test_rows_and_columns_cover_all_data():
    grid = _numbered()
    rows = [list(row) for row in grid.rows_iter()]
    columns = [list(column) for column in grid.columns_iter()]
    assert [v for row in rows for v in row] == grid.data
    assert sorted(v for column in columns for v in column) == sorted(grid.data)
    assert len(rows) == grid.height
    assert len(columns) == grid.width


def test_index_orders():
    grid = _numbered(3, 2)
    row_major = list(grid.indices_row_major())
    column_major = list(grid.indices_column_major())
    assert [grid[i] for i in row_major] == grid.data
    assert set(row_major) == set(column_major)
    assert len(column_major) == 6
    assert column_major[:2] == [(0, 0), (0, 1)]


def test_equality_and_hash():
    first = _numbered()
    second = _numbered()
    assert first == second
    assert hash(first) == hash(second)
    second[0, 0] = 99
    assert first != second