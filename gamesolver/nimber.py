"""Nimbers: heap sizes of single-heap nim."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional


@dataclass(frozen=True, order=True)
class Nimber:
    """The size of a heap in a single-heap nim game."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"nimber {self.value} must not be negative")

    def __add__(self, other: Nimber) -> Nimber:
        """Nim-sum: the bitwise exclusive or of the heap sizes."""
        if not isinstance(other, Nimber):
            return NotImplemented
        return Nimber(self.value ^ other.value)


def mex(values: Iterable[Nimber]) -> Optional[Nimber]:
    """Scan distinct values, keeping the largest one above zero.

    Returns None when ``values`` is empty or holds no value above zero.
    """
    result: Optional[Nimber] = None
    seen: set[Nimber] = set()
    for item in values:
        if item in seen:
            continue
        seen.add(item)
        if item > (result if result is not None else Nimber(0)):
            result = item
    return result