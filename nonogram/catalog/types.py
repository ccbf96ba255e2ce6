"""
Catalog types for stored puzzles.

A PuzzleRecord is the serialisable description of a puzzle: its clues and,
when known, its solution grid. Parsers produce records; the solver works on
the Puzzle built from a record.
"""

from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np

from nonogram.core.grid_types import CELL_DTYPE, Grid
from nonogram.core.puzzle import Puzzle


@dataclass
class PuzzleRecord:
    """
    A named puzzle definition.

    Attributes:
        name: Human-readable identifier
        row_clues: One clue list per row, top to bottom
        column_clues: One clue list per column, left to right
        solution: Optional known solution as rows of Cell values (0/1/2)

    Example:
        >>> rec = PuzzleRecord("bar", row_clues=[[2]], column_clues=[[1], [1]])
        >>> rec.to_puzzle().width
        2
    """
    name: str
    row_clues: List[List[int]]
    column_clues: List[List[int]]
    solution: Optional[List[List[int]]] = field(default=None)

    @property
    def width(self) -> int:
        return len(self.column_clues)

    @property
    def height(self) -> int:
        return len(self.row_clues)

    def to_puzzle(self) -> Puzzle:
        """Build an unsolved Puzzle (all cells EMPTY) from the clues."""
        return Puzzle.from_clues(self.row_clues, self.column_clues)

    def solution_grid(self) -> Optional[Grid]:
        """Return the known solution as a (height, width) array, or None."""
        if self.solution is None:
            return None
        return np.asarray(self.solution, dtype=CELL_DTYPE).reshape(self.height, self.width)

    def solution_puzzle(self) -> Optional[Puzzle]:
        """Return a Puzzle with the known solution loaded, or None."""
        if self.solution is None:
            return None
        puzzle = self.to_puzzle()
        puzzle.load_cells(self.solution)
        return puzzle
