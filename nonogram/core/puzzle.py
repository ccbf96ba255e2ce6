"""
Puzzle model: the flat cell buffer plus row and column clue lists.

The grid is stored as a single row-major numpy buffer of length
height * width. Width and height are derived from the clue lists, never
from the buffer, and the buffer is reallocated (all EMPTY) every time a
clue sequence is appended so that

    array.size == len(row_clues) * len(column_clues)

holds after every public call. Appending a clue after cells have been
solved therefore discards that progress: add every row and column clue
before relying on any cell value.
"""

from __future__ import annotations

from typing import List, Sequence

import numpy as np

from nonogram.core.grid_types import (
    CELL_DTYPE,
    Cell,
    CellIndexError,
    ClueSequence,
    Grid,
    normalize_clues,
    pixel_index,
)


class Puzzle:
    """
    A nonogram puzzle: clues for every row and column and the current cells.

    Attributes:
        array: Flat int8 buffer of Cell values, row-major
        row_clues: One clue sequence per row (top to bottom)
        column_clues: One clue sequence per column (left to right)

    Example:
        >>> p = Puzzle()
        >>> p.append_row_clues([2])
        >>> p.append_column_clues([1])
        >>> p.append_column_clues([1])
        >>> p.solve()
        True
    """

    def __init__(self) -> None:
        self.array: np.ndarray = np.zeros(0, dtype=CELL_DTYPE)
        self.row_clues: List[ClueSequence] = []
        self.column_clues: List[ClueSequence] = []

    # ---------------- construction ----------------
    def _recalculate_size(self) -> None:
        self.array = np.full(self.height * self.width, Cell.EMPTY, dtype=CELL_DTYPE)

    def append_row_clues(self, clues: Sequence[int]) -> None:
        """Append the clue sequence for the next row and reset every cell to EMPTY."""
        self.row_clues.append(normalize_clues(clues))
        self._recalculate_size()

    def append_column_clues(self, clues: Sequence[int]) -> None:
        """Append the clue sequence for the next column and reset every cell to EMPTY."""
        self.column_clues.append(normalize_clues(clues))
        self._recalculate_size()

    @classmethod
    def from_clues(
        cls,
        row_clues: Sequence[Sequence[int]],
        column_clues: Sequence[Sequence[int]],
    ) -> Puzzle:
        """Build a puzzle by appending every row clue, then every column clue."""
        puzzle = cls()
        for clues in row_clues:
            puzzle.append_row_clues(clues)
        for clues in column_clues:
            puzzle.append_column_clues(clues)
        return puzzle

    # ---------------- dimensions ----------------
    @property
    def width(self) -> int:
        return len(self.column_clues)

    @property
    def height(self) -> int:
        return len(self.row_clues)

    @property
    def longest_row_clue_count(self) -> int:
        """Maximum number of clues in any row (0 when there are no rows)."""
        return max((len(clues) for clues in self.row_clues), default=0)

    @property
    def longest_column_clue_count(self) -> int:
        """Maximum number of clues in any column (0 when there are no columns)."""
        return max((len(clues) for clues in self.column_clues), default=0)

    # ---------------- cell access ----------------
    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise CellIndexError(
                f"Cell ({x}, {y}) is outside the {self.width}x{self.height} grid"
            )
        return pixel_index(x, y, self.width)

    def cell_at(self, x: int, y: int) -> Cell:
        """
        Return the cell at column x, row y.

        Raises:
            CellIndexError: If (x, y) is outside the grid
        """
        return Cell(int(self.array[self._index(x, y)]))

    def set_cell(self, x: int, y: int, value: Cell) -> None:
        """
        Overwrite the cell at column x, row y.

        Raises:
            CellIndexError: If (x, y) is outside the grid
        """
        self.array[self._index(x, y)] = Cell(value)

    def to_grid(self) -> Grid:
        """Return a (height, width) copy of the current cells."""
        return self.array.reshape(self.height, self.width).copy()

    def load_cells(self, grid: Sequence[Sequence[int]] | np.ndarray) -> None:
        """
        Replace every cell with the values of a known grid.

        Used to check an externally supplied solution with verify().

        Args:
            grid: (height, width) array-like of Cell values

        Raises:
            ValueError: If the shape does not match the clue dimensions or a
                value is not a valid Cell
        """
        values = np.asarray(grid, dtype=int)
        if values.size == 0 and self.height * self.width == 0:
            self._recalculate_size()
            return
        if values.shape != (self.height, self.width):
            raise ValueError(
                f"Grid shape {values.shape} does not match puzzle shape "
                f"({self.height}, {self.width})"
            )
        valid = np.isin(values, [int(c) for c in Cell])
        if not valid.all():
            bad = sorted(set(values[~valid].tolist()))
            raise ValueError(f"Grid contains invalid cell values: {bad}")

        self.array = values.reshape(-1).astype(CELL_DTYPE)

    def filled_count(self) -> int:
        """Number of FILLED cells in the grid."""
        return int(np.count_nonzero(self.array == Cell.FILLED))

    # ---------------- solving ----------------
    def solve(self) -> bool:
        """
        Run edge-forcing to a fixed point, then verify.

        Mutates the grid in place. Returns True only if every row and column
        matches its clues afterwards.
        """
        from nonogram.solver.puzzle_solver import solve_puzzle

        return solve_puzzle(self).solved

    def verify(self) -> bool:
        """Return True iff every row's and column's runs equal its clues."""
        from nonogram.solver.verifier import verify_puzzle

        return verify_puzzle(self)

    def __str__(self) -> str:
        from nonogram.core.render import render_puzzle

        return render_puzzle(self)

    def __repr__(self) -> str:
        return f"Puzzle(width={self.width}, height={self.height}, filled={self.filled_count()})"
