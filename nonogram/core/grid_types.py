"""
Core cell types and index utilities for the nonogram solver.

This module defines the fundamental cell representation and the flat
indexing functions shared by the puzzle model, line extraction, the
line solver and the verifier.

Grid: always shape (H, W), dtype=int8, values in {0, 1, 2} (see Cell)
Cells: addressed as (x, y) coordinates or as flat row-major indices in [0, H*W-1]
"""

from enum import IntEnum
from typing import Sequence, Tuple, TypeAlias

import numpy as np


class Cell(IntEnum):
    """
    Three-valued cell state.

    EMPTY:   undetermined
    FILLED:  part of a clued run
    CROSSED: confirmed not part of any run (never produced by edge-forcing)
    """
    EMPTY = 0
    FILLED = 1
    CROSSED = 2


# Type aliases
Grid: TypeAlias = np.ndarray  # shape: (H, W), dtype: int8, values in Cell
Coord: TypeAlias = Tuple[int, int]  # (x, y) in {0, ..., W-1} x {0, ..., H-1}
ClueSequence: TypeAlias = Tuple[int, ...]

# Canonical "this line has no runs" encoding
NO_RUNS: ClueSequence = (0,)

CELL_DTYPE = np.int8


class CellIndexError(IndexError):
    """Raised when a cell coordinate falls outside the puzzle grid."""
    pass


def pixel_index(x: int, y: int, width: int) -> int:
    """
    Map (column x, row y) to a flat index in [0, H*W-1], row-major.

    Formula: idx = y * width + x

    Args:
        x: Column index (0-based)
        y: Row index (0-based)
        width: Grid width W

    Returns:
        Flat cell index

    Raises:
        CellIndexError: If x or y is negative
    """
    if x < 0 or y < 0:
        raise CellIndexError(f"Cell coordinates must be non-negative, got x={x}, y={y}")

    return y * width + x


def index_to_pixel(idx: int, width: int) -> Coord:
    """
    Inverse of pixel_index: given flat idx and width, return (x, y).

    Args:
        idx: Flat cell index
        width: Grid width W (must be positive)

    Returns:
        (x, y) tuple

    Raises:
        CellIndexError: If idx is negative
    """
    if idx < 0:
        raise CellIndexError(f"Index must be non-negative, got idx={idx}")

    return (idx % width, idx // width)


def normalize_clues(clues: Sequence[int]) -> ClueSequence:
    """
    Validate a clue sequence and convert it to a tuple.

    Clues are unsigned by construction: a negative or non-integer value is
    rejected here rather than surfacing later as a nonsensical deduction.
    An empty sequence becomes the canonical (0,).

    Raises:
        ValueError: If any clue is negative or not an integer
    """
    out = []
    for clue in clues:
        # bool is an int subclass but never a meaningful run length
        if isinstance(clue, bool) or not isinstance(clue, (int, np.integer)):
            raise ValueError(f"Clue values must be integers, got {clue!r}")
        if clue < 0:
            raise ValueError(f"Clue values must be non-negative, got {clue}")
        out.append(int(clue))

    if not out:
        return NO_RUNS

    return tuple(out)


def empty_grid(height: int, width: int) -> Grid:
    """Return a (height, width) grid with every cell EMPTY."""
    return np.full((height, width), Cell.EMPTY, dtype=CELL_DTYPE)


if __name__ == "__main__":
    # Self-test: verify index mapping roundtrip
    width, height = 4, 3
    for y in range(height):
        for x in range(width):
            idx = pixel_index(x, y, width)
            assert index_to_pixel(idx, width) == (x, y), f"Roundtrip failed at {(x, y)}"

    print("Index roundtrip test passed.")
