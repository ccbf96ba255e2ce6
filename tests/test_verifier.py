"""
Tests for the verifier: run-length decoding and whole-puzzle checks on
hand-built grids.
"""

import pytest

from nonogram.catalog.builtin import DEFAULT_10X10, REFERENCE_5X5
from nonogram.core.grid_types import Cell
from nonogram.core.puzzle import Puzzle
from nonogram.solver.verifier import (
    decode_runs,
    failing_lines,
    verify_columns,
    verify_line,
    verify_puzzle,
    verify_rows,
)


@pytest.mark.parametrize("cells, expected", [
    ([0, 0, 0, 0], (0,)),
    ([1, 1, 1, 1], (4,)),
    ([1, 0, 1, 1, 0], (1, 2)),
    ([0, 1, 1, 0, 0, 1], (2, 1)),
    ([1, 2, 1], (1, 1)),          # CROSSED ends a run like EMPTY
    ([2, 2, 2], (0,)),
    ([], (0,)),
])
def test_decode_runs(cells, expected):
    assert decode_runs(cells) == expected


def test_verify_line_exact_match():
    assert verify_line([0, 1, 0, 1, 1], [1, 2])
    # order matters
    assert not verify_line([0, 1, 0, 1, 1], [2, 1])
    # length matters
    assert not verify_line([0, 1, 0, 1, 1], [1])
    assert not verify_line([0, 1, 1, 1, 0], [1, 2])


def test_empty_line_matches_zero_clue():
    assert verify_line([0, 0, 0], [0])
    assert not verify_line([0, 0, 0], [1])
    assert not verify_line([0, 1, 0], [0])


def test_reference_solution_verifies():
    """Hand-built 5x5 grid whose runs are known to match every clue."""
    p = REFERENCE_5X5.solution_puzzle()
    assert verify_rows(p)
    assert verify_columns(p)
    assert verify_puzzle(p)
    assert p.verify()
    assert failing_lines(p) == []


def test_default_10x10_solution_verifies():
    p = DEFAULT_10X10.solution_puzzle()
    assert p.verify()


def test_single_wrong_cell_fails():
    p = REFERENCE_5X5.solution_puzzle()
    p.set_cell(0, 2, Cell.FILLED)  # row 2 must stay empty

    assert not p.verify()
    failing = [(line.axis, line.index) for line in failing_lines(p)]
    assert failing == [("row", 2), ("column", 0)]


def test_crossed_cells_count_as_not_filled():
    p = REFERENCE_5X5.solution_puzzle()
    for y in range(p.height):
        for x in range(p.width):
            if p.cell_at(x, y) == Cell.EMPTY:
                p.set_cell(x, y, Cell.CROSSED)

    assert p.verify()


def test_blank_grid_fails_against_runs():
    p = REFERENCE_5X5.to_puzzle()
    assert not p.verify()


def test_no_clue_puzzle_verifies():
    """Zero rows and zero columns: empty array, vacuously verified."""
    p = Puzzle()
    assert p.array.size == 0
    assert p.verify()


def test_verify_is_read_only():
    p = REFERENCE_5X5.solution_puzzle()
    before = p.to_grid()
    p.verify()
    assert (p.to_grid() == before).all()
