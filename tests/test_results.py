"""
Tests for solve diagnostics and grid mismatch reporting.
"""

import json

import numpy as np

from nonogram.catalog.builtin import DEFAULT_10X10, REFERENCE_5X5, get_builtin
from nonogram.catalog.types import PuzzleRecord
from nonogram.runners.results import compute_grid_mismatches, solve_with_diagnostics


def test_compute_grid_mismatches_same_shape():
    true = np.array([[0, 1], [1, 0]])
    pred = np.array([[0, 1], [0, 0]])

    assert compute_grid_mismatches(true, pred) == [{"x": 0, "y": 1, "true": 1, "pred": 0}]
    assert compute_grid_mismatches(true, true.copy()) == []


def test_compute_grid_mismatches_filled_only():
    """EMPTY vs CROSSED is not a mismatch when only fills are compared."""
    true = np.array([[2, 1, 0]])
    pred = np.array([[0, 1, 1]])

    assert len(compute_grid_mismatches(true, pred)) == 2
    assert compute_grid_mismatches(true, pred, filled_only=True) == [
        {"x": 2, "y": 0, "true": 0, "pred": 1}
    ]


def test_compute_grid_mismatches_shape():
    out = compute_grid_mismatches(np.zeros((1, 2)), np.zeros((2, 2)))
    assert out == [{"shape_mismatch": True, "true_shape": (1, 2), "pred_shape": (2, 2)}]


def test_diagnostics_partial_reference():
    """
    The reference puzzle stops partway: rows 0, 1, 4 and columns 0, 1, 3, 4
    still fail, and none of the filled cells contradicts the solution.
    """
    puzzle, diag = solve_with_diagnostics(REFERENCE_5X5)

    assert diag.name == "reference_5x5"
    assert diag.status == "partial"
    assert (diag.width, diag.height) == (5, 5)
    assert diag.cycles == 2
    assert diag.cells_filled == 3
    assert diag.filled_total == puzzle.filled_count() == 3
    assert diag.failing_rows == [0, 1, 4]
    assert diag.failing_columns == [0, 1, 3, 4]
    assert diag.solution_mismatches == []


def test_diagnostics_solved():
    rec = PuzzleRecord(
        name="block",
        row_clues=[[3], [3]],
        column_clues=[[2], [2], [2]],
        solution=[[1, 1, 1], [1, 1, 1]],
    )
    _, diag = solve_with_diagnostics(rec)

    assert diag.status == "solved"
    assert diag.failing_rows == [] and diag.failing_columns == []
    assert diag.solution_mismatches == []


def test_diagnostics_mismatch_against_recorded_solution():
    """A grid that verifies but differs from the recorded solution is a "mismatch"."""
    rec = PuzzleRecord(
        name="diag",
        row_clues=[[2], [0]],
        column_clues=[[1], [1]],
        solution=[[0, 0], [1, 1]],  # deliberately wrong
    )
    _, diag = solve_with_diagnostics(rec)

    assert diag.status == "mismatch"
    assert len(diag.solution_mismatches) == 4


def test_diagnostics_without_solution():
    rec = PuzzleRecord(name="nosol", row_clues=[[1]], column_clues=[[0], [0], [0]])
    _, diag = solve_with_diagnostics(rec)

    assert diag.status == "partial"
    assert diag.solution_mismatches == []


def test_diagnostics_serialise_to_json():
    _, diag = solve_with_diagnostics(get_builtin("default_10x10"))
    data = json.loads(json.dumps(diag.to_dict()))

    assert data["name"] == DEFAULT_10X10.name
    assert data["status"] in ("solved", "partial")
    assert data["solution_mismatches"] == []
