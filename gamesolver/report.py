"""Printing of solver statistics."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from gamesolver.stats import Stats


def format_stats(stats: Stats) -> str:
    """The statistics as printed after solving."""
    ends = stats.terminal_ends
    lines = [
        "Stats: ",
        "",
        f"States explored: {stats.states_explored}",
        f"Max depth:       {stats.max_depth}",
        f"Cache hits:      {stats.cache_hits}",
        f"Pruning cutoffs: {stats.pruning_cutoffs}",
        "End nodes:",
        f"\tWinning: {ends.winning}",
        f"\tLosing:  {ends.losing}",
        f"\tTies:    {ends.tie}",
        "",
    ]
    return "\n".join(lines) + "\n"


def show_stats(stats: Stats, stream: Optional[TextIO] = None) -> None:
    """Write the statistics to ``stream``, standard output by default."""
    (stream if stream is not None else sys.stdout).write(format_stats(stats))