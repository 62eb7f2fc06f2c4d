"""Counters gathered while solving a game."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any


@dataclass
class TerminalEnds:
    """Counts of terminal positions reached, by outcome."""

    winning: int = 0
    tie: int = 0
    losing: int = 0
    _lock: threading.Lock = field(
        default_factory=threading.Lock, repr=False, compare=False
    )

    def record_winning(self) -> None:
        """Count a winning terminal position."""
        with self._lock:
            self.winning += 1

    def record_tie(self) -> None:
        """Count a tied terminal position."""
        with self._lock:
            self.tie += 1

    def record_losing(self) -> None:
        """Count a losing terminal position."""
        with self._lock:
            self.losing += 1


@dataclass
class Stats:
    """Solver statistics; safe to update from several threads."""

    original_player: Any
    original_move_count: int
    states_explored: int = 0
    max_depth: int = 0
    cache_hits: int = 0
    pruning_cutoffs: int = 0
    terminal_ends: TerminalEnds = field(default_factory=TerminalEnds)
    _lock: threading.Lock = field(
        default_factory=threading.Lock, repr=False, compare=False
    )

    @classmethod
    def for_game(cls, game: Any) -> Stats:
        """Fresh statistics for solving ``game`` from its current position."""
        return cls(original_player=game.player(), original_move_count=game.move_count)

    def record_state(self, depth: int) -> None:
        """Count an explored state at ``depth``."""
        with self._lock:
            self.states_explored += 1
            if depth > self.max_depth:
                self.max_depth = depth

    def record_cache_hit(self) -> None:
        """Count a transposition table hit."""
        with self._lock:
            self.cache_hits += 1

    def record_pruning_cutoff(self) -> None:
        """Count a pruning cutoff."""
        with self._lock:
            self.pruning_cutoffs += 1