"""
Nonogram puzzle model with an edge-forcing line solver and a verifier.

Quick use:
    >>> from nonogram import Puzzle
    >>> p = Puzzle.from_clues([[1, 1], [1, 1], [0], [1, 1], [3]],
    ...                       [[1], [1, 2], [1], [1, 2], [1]])
    >>> p.solve()
    False
"""

from nonogram.core.grid_types import Cell, CellIndexError
from nonogram.core.puzzle import Puzzle

__all__ = ["Cell", "CellIndexError", "Puzzle"]
