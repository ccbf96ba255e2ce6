"""
Tests for line extraction: index order and clue pairing for rows and columns.
"""

import numpy as np

from nonogram.core.grid_types import Cell
from nonogram.core.lines import (
    column_indices,
    get_column,
    get_row,
    iter_lines,
    line_cells,
    row_indices,
)
from nonogram.core.puzzle import Puzzle


def make_3x4() -> Puzzle:
    """3 rows, 4 columns, each line with a distinct clue."""
    return Puzzle.from_clues([[1], [2], [3]], [[1], [1, 1], [2], [0]])


def test_row_indices_contiguous():
    assert row_indices(0, 4).tolist() == [0, 1, 2, 3]
    assert row_indices(2, 4).tolist() == [8, 9, 10, 11]


def test_column_indices_strided():
    assert column_indices(0, 4, 3).tolist() == [0, 4, 8]
    assert column_indices(3, 4, 3).tolist() == [3, 7, 11]


def test_lines_carry_their_clues():
    p = make_3x4()

    row = get_row(p, 1)
    assert row.axis == "row" and row.index == 1
    assert row.clues == (2,)
    assert len(row) == 4

    col = get_column(p, 1)
    assert col.axis == "column" and col.index == 1
    assert col.clues == (1, 1)
    assert len(col) == 3


def test_iter_lines_rows_then_columns():
    p = make_3x4()
    lines = list(iter_lines(p))

    assert [(l.axis, l.index) for l in lines] == [
        ("row", 0), ("row", 1), ("row", 2),
        ("column", 0), ("column", 1), ("column", 2), ("column", 3),
    ]


def test_line_cells_follow_line_order():
    """Row and column views resolve against the same buffer."""
    p = make_3x4()
    p.set_cell(3, 1, Cell.FILLED)
    p.set_cell(1, 2, Cell.CROSSED)

    assert line_cells(p, get_row(p, 1)).tolist() == [0, 0, 0, 1]
    assert line_cells(p, get_column(p, 3)).tolist() == [0, 1, 0]
    assert line_cells(p, get_column(p, 1)).tolist() == [0, 0, 2]


def test_line_cells_is_a_copy():
    p = make_3x4()
    cells = line_cells(p, get_row(p, 0))
    cells[:] = Cell.FILLED

    assert np.all(p.array == Cell.EMPTY)


def test_empty_puzzle_has_no_lines():
    assert list(iter_lines(Puzzle())) == []
