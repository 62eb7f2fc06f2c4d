"""Combinatorial game models, players, nimbers and analysis building blocks."""

__version__ = "0.1.0"