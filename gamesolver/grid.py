"""A fixed-size two-dimensional grid addressed by (x, y)."""

from __future__ import annotations

import copy
from typing import Any, Iterable, Iterator, Optional


class GridIndexError(IndexError):
    """Indices fall outside the grid."""

    def __init__(self, first: int, second: int) -> None:
        super().__init__(f"Indices {first} and {second} are out of bounds")
        self.indices = (first, second)


class Grid:
    """A width by height grid stored row by row."""

    def __init__(self, width: int, height: int, data: Iterable[Any]) -> None:
        if width < 0 or height < 0:
            raise ValueError("width and height must not be negative")
        self.width = width
        self.height = height
        self.data = list(data)
        if len(self.data) != width * height:
            raise ValueError("SIZE must be equal to W * H")

    @classmethod
    def filled_with(cls, width: int, height: int, value: Any) -> Grid:
        """A grid whose every cell holds its own copy of ``value``."""
        return cls(width, height, (copy.deepcopy(value) for _ in range(width * height)))

    def idx(self, x: int, y: int) -> Optional[int]:
        """The flat index of (x, y), or None if it is outside the grid."""
        if 0 <= x < self.width and 0 <= y < self.height:
            return y * self.width + x
        return None

    def get(self, x: int, y: int) -> Optional[Any]:
        """The value at the flat position of (x, y), or None past the data."""
        if x < 0 or y < 0:
            return None
        index = y * self.width + x
        if index >= len(self.data):
            return None
        return self.data[index]

    def set(self, x: int, y: int, value: Any) -> None:
        """Store ``value`` at (x, y)."""
        index = self.idx(x, y)
        if index is None:
            raise GridIndexError(x, y)
        self.data[index] = value

    def __getitem__(self, key: tuple[int, int]) -> Any:
        x, y = key
        index = self.idx(x, y)
        if index is None:
            raise GridIndexError(x, y)
        return self.data[index]

    def __setitem__(self, key: tuple[int, int], value: Any) -> None:
        x, y = key
        self.set(x, y, value)

    def row_iter(self, row_index: int) -> Iterator[Any]:
        """The values of one row, left to right."""
        start = self.idx(0, row_index)
        if start is None:
            raise GridIndexError(row_index, 0)
        return iter(self.data[start:start + self.width])

    def column_iter(self, column_index: int) -> Iterator[Any]:
        """The values of one column, top to bottom."""
        if not 0 <= column_index < self.width:
            raise GridIndexError(0, column_index)
        return iter(self.data[column_index::self.width])

    def rows_iter(self) -> Iterator[Iterator[Any]]:
        """Every row, top to bottom."""
        return (self.row_iter(row) for row in range(self.height))

    def columns_iter(self) -> Iterator[Iterator[Any]]:
        """Every column, left to right."""
        return (self.column_iter(column) for column in range(self.width))

    def indices_row_major(self) -> Iterator[tuple[int, int]]:
        """Every (x, y), row by row."""
        return ((x, y) for y in range(self.height) for x in range(self.width))

    def indices_column_major(self) -> Iterator[tuple[int, int]]:
        """Every (x, y), column by column."""
        return ((x, y) for x in range(self.width) for y in range(self.height))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (self.width, self.height, self.data) == (other.width, other.height, other.data)

    def __hash__(self) -> int:
        return hash((self.width, self.height, tuple(self.data)))

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height}, data={self.data!r})"