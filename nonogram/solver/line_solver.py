"""
Edge-forcing deduction for a single line.

Given a line of length L and clues c_1..c_k, pack every run as far left as
possible with exactly one gap between runs. The cells left over are the
slack:

    slack = L - (sum(c) + (k - 1))

Any run longer than the slack overlaps itself between its leftmost and
rightmost placements, so the last (c_i - slack) cells of its leftmost
placement are FILLED in every solution of the line.

The deduction only runs on a line whose cells are all EMPTY. A line that
already carries progress is skipped, which is why the puzzle solver has to
iterate rows and columns to a fixed point. Cells only ever go
EMPTY -> FILLED; CROSSED is never produced here.
"""

import logging
from typing import List, Sequence

import numpy as np

from nonogram.core.grid_types import Cell


logger = logging.getLogger(__name__)


def line_slack(length: int, clues: Sequence[int]) -> int:
    """
    Cells left over after packing every run left with single gaps.

    An empty clue sequence has slack equal to the line length. A negative
    result means the clues cannot fit in the line at all.

    Example:
        >>> line_slack(5, [1, 1])
        2
        >>> line_slack(5, [4])
        1
    """
    if not clues:
        return length
    return length - (sum(clues) + len(clues) - 1)


def forced_positions(length: int, clues: Sequence[int]) -> List[int]:
    """
    Positions edge-forcing fills on an all-EMPTY line of the given length.

    Args:
        length: Number of cells in the line
        clues: Clue sequence for the line

    Returns:
        Sorted list of 0-based positions guaranteed FILLED. Empty when no
        run exceeds the slack, or when the clues do not fit the line.

    Example:
        >>> forced_positions(5, [4])
        [1, 2, 3]
        >>> forced_positions(10, [3, 4])
        [2, 6, 7]
    """
    slack = line_slack(length, clues)
    if slack < 0:
        return []

    positions: List[int] = []
    leftmost_start = 0
    for clue in clues:
        if clue > slack:
            # rightmost (clue - slack) cells of the leftmost placement
            positions.extend(range(leftmost_start + slack, leftmost_start + clue))
        leftmost_start += clue + 1

    return positions


def apply_edge_forcing(array: np.ndarray, indices: np.ndarray, clues: Sequence[int]) -> bool:
    """
    Run edge-forcing on one line of the cell buffer, in place.

    Args:
        array: Flat cell buffer (puzzle.array)
        indices: Flat indices of the line's cells, in line order
        clues: Clue sequence for the line

    Returns:
        True if at least one cell changed from EMPTY to FILLED
    """
    cells = array[indices]
    if not np.all(cells == Cell.EMPTY):
        return False

    slack = line_slack(len(indices), clues)
    if slack < 0:
        logger.warning(
            "Clues %s need %d cells but the line has only %d; skipping",
            tuple(clues), len(indices) - slack, len(indices),
        )
        return False

    positions = forced_positions(len(indices), clues)
    if not positions:
        return False

    array[indices[positions]] = Cell.FILLED
    return True


if __name__ == "__main__":
    # Self-test on the overlap cases
    assert forced_positions(5, [5]) == [0, 1, 2, 3, 4]
    assert forced_positions(5, [1]) == []
    assert forced_positions(5, [4]) == [1, 2, 3]
    assert forced_positions(5, [0]) == []

    buf = np.zeros(5, dtype=np.int8)
    changed = apply_edge_forcing(buf, np.arange(5), [4])
    print(f"changed={changed}, cells={buf.tolist()}")
    assert buf.tolist() == [0, 1, 1, 1, 0]

    print("✓ line_solver.py self-test passed.")
