"""
Verifier: compare each line's actual runs against its declared clues.

A line is decoded into the lengths of its maximal runs of FILLED cells,
left to right. A line with no FILLED cell decodes to (0,), the same
encoding used for a "no runs" clue. The puzzle is verified iff every row
and every column decodes to exactly its clue sequence (same length, same
order). A puzzle with no rows and no columns verifies vacuously.

Run labelling uses scipy.ndimage.label on the 1-D filled mask; labels are
assigned in scan order, so bincount over the labels gives run lengths in
line order.
"""

from __future__ import annotations

from typing import List, Sequence

import numpy as np
from scipy import ndimage as ndi

from nonogram.core.grid_types import Cell, ClueSequence, NO_RUNS
from nonogram.core.lines import Line, iter_columns, iter_lines, iter_rows, line_cells
from nonogram.core.puzzle import Puzzle


def decode_runs(cells: Sequence[int] | np.ndarray) -> ClueSequence:
    """
    Decode a line of cells into its run-length sequence.

    EMPTY and CROSSED both terminate a run.

    Args:
        cells: Cell values in line order

    Returns:
        Tuple of run lengths, or (0,) if no cell is FILLED

    Example:
        >>> decode_runs([0, 1, 1, 0, 1])
        (2, 1)
        >>> decode_runs([0, 2, 0])
        (0,)
    """
    mask = np.asarray(cells) == Cell.FILLED
    if not mask.any():
        return NO_RUNS

    labels, num_runs = ndi.label(mask)
    lengths = np.bincount(labels.ravel(), minlength=num_runs + 1)[1:]
    return tuple(int(n) for n in lengths)


def verify_line(cells: Sequence[int] | np.ndarray, clues: Sequence[int]) -> bool:
    """True iff the decoded runs of cells equal clues exactly."""
    return decode_runs(cells) == tuple(clues)


def line_matches(puzzle: Puzzle, line: Line) -> bool:
    return verify_line(line_cells(puzzle, line), line.clues)


def verify_rows(puzzle: Puzzle) -> bool:
    return all(line_matches(puzzle, line) for line in iter_rows(puzzle))


def verify_columns(puzzle: Puzzle) -> bool:
    return all(line_matches(puzzle, line) for line in iter_columns(puzzle))


def verify_puzzle(puzzle: Puzzle) -> bool:
    """
    Check whether the puzzle's current cells satisfy every clue.

    Read-only; usable on a hand-built or externally loaded grid as well as
    after solving.
    """
    return verify_rows(puzzle) and verify_columns(puzzle)


def failing_lines(puzzle: Puzzle) -> List[Line]:
    """Every row and column whose decoded runs differ from its clues, rows first."""
    return [line for line in iter_lines(puzzle) if not line_matches(puzzle, line)]
