"""
Line extraction: rows and columns as index lists into the flat cell buffer.

Row and column views overlap in the same backing buffer, so a Line never
holds references to cells. It carries the flat indices of its cells in line
order and callers resolve them against puzzle.array on each access:

    row y:    y*W, y*W + 1, ..., y*W + W - 1
    column x: x, x + W, x + 2W, ..., x + (H-1)W

Order is significant: both the line solver and the verifier are positional.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Literal

import numpy as np

from nonogram.core.grid_types import ClueSequence
from nonogram.core.puzzle import Puzzle


Axis = Literal["row", "column"]


@dataclass(frozen=True)
class Line:
    """
    One row or column of a puzzle.

    Attributes:
        axis: "row" or "column"
        index: y for a row, x for a column
        indices: Flat buffer indices of the line's cells, in line order
        clues: Declared clue sequence for this line
    """
    axis: Axis
    index: int
    indices: np.ndarray
    clues: ClueSequence

    def __len__(self) -> int:
        return int(self.indices.size)


def row_indices(y: int, width: int) -> np.ndarray:
    """Flat indices of row y, left to right."""
    start = y * width
    return np.arange(start, start + width, dtype=np.intp)


def column_indices(x: int, width: int, height: int) -> np.ndarray:
    """Flat indices of column x, top to bottom."""
    return x + width * np.arange(height, dtype=np.intp)


def get_row(puzzle: Puzzle, y: int) -> Line:
    return Line("row", y, row_indices(y, puzzle.width), puzzle.row_clues[y])


def get_column(puzzle: Puzzle, x: int) -> Line:
    return Line("column", x, column_indices(x, puzzle.width, puzzle.height), puzzle.column_clues[x])


def iter_rows(puzzle: Puzzle) -> Iterator[Line]:
    for y in range(puzzle.height):
        yield get_row(puzzle, y)


def iter_columns(puzzle: Puzzle) -> Iterator[Line]:
    for x in range(puzzle.width):
        yield get_column(puzzle, x)


def iter_lines(puzzle: Puzzle) -> Iterator[Line]:
    """Yield every row (top to bottom), then every column (left to right)."""
    yield from iter_rows(puzzle)
    yield from iter_columns(puzzle)


def line_cells(puzzle: Puzzle, line: Line) -> np.ndarray:
    """Return a copy of the line's current cell values, in line order."""
    return puzzle.array[line.indices]
