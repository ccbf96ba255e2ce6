"""
Result and diagnostics structures for solve runs.

This module defines SolveDiagnostics, the structured record of one solve
attempt, including which lines still fail verification and, when a known
solution is available, how the solver's grid differs from it.

Key components:
  - SolveDiagnostics: Complete solve attempt record
  - compute_grid_mismatches: Per-cell diff between a known and a solved grid
  - solve_with_diagnostics: Solve a PuzzleRecord and build its diagnostics
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Literal, Optional, Tuple

import numpy as np

from nonogram.catalog.types import PuzzleRecord
from nonogram.core.grid_types import Cell, Grid
from nonogram.core.puzzle import Puzzle
from nonogram.solver.puzzle_solver import SolverConfig, solve_puzzle
from nonogram.solver.verifier import failing_lines


SolveStatus = Literal["solved", "partial", "mismatch"]


@dataclass
class SolveDiagnostics:
    """
    Diagnostics for a single solve attempt.

    Attributes:
        name: Puzzle name
        width: Number of columns
        height: Number of rows
        status: Solve outcome - one of:
            - "solved": every row and column matches its clues
            - "partial": edge-forcing stopped before the grid was complete
            - "mismatch": the grid verifies but differs from the known solution
              (the puzzle has more than one solution)
        cycles: Row+column cycles run by the solver
        cells_filled: Cells the solver turned FILLED
        filled_total: FILLED cells in the final grid
        failing_rows: Row indices whose runs differ from their clues
        failing_columns: Column indices whose runs differ from their clues
        solution_mismatches: Filled cells that disagree with the known solution.
            Each element: {"x": int, "y": int, "true": int, "pred": int},
            or a single shape-mismatch record
    """
    name: str
    width: int
    height: int
    status: SolveStatus
    cycles: int
    cells_filled: int
    filled_total: int

    failing_rows: List[int] = field(default_factory=list)
    failing_columns: List[int] = field(default_factory=list)

    # Only when the record carries a known solution
    solution_mismatches: List[Dict[str, Any]] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def compute_grid_mismatches(
    true_grid: Grid,
    pred_grid: Grid,
    filled_only: bool = False,
) -> List[Dict[str, Any]]:
    """
    Compute per-cell mismatches between a known grid and a solver grid.

    This function handles two cases:

    1. Shapes match: Returns per-cell differences
       - Each mismatch: {"x": col, "y": row, "true": value, "pred": value}

    2. Shapes differ: Returns a single shape mismatch record
       - {"shape_mismatch": True, "true_shape": (H, W), "pred_shape": (H, W)}

    Args:
        true_grid: Known grid (H x W)
        pred_grid: Solver grid (H' x W')
        filled_only: If True, compare only FILLED-ness. A partial solve
            leaves undetermined cells EMPTY, so this reports only cells the
            solver filled wrongly or the solution fills and the grid does not.

    Returns:
        List of mismatch records, empty if the grids agree

    Example:
        >>> true = np.array([[0, 1], [1, 0]])
        >>> pred = np.array([[0, 1], [0, 0]])
        >>> compute_grid_mismatches(true, pred)
        [{'x': 0, 'y': 1, 'true': 1, 'pred': 0}]
    """
    true_shape: Tuple[int, ...] = tuple(true_grid.shape)
    pred_shape: Tuple[int, ...] = tuple(pred_grid.shape)

    if true_shape != pred_shape:
        return [{
            "shape_mismatch": True,
            "true_shape": true_shape,
            "pred_shape": pred_shape,
        }]

    if filled_only:
        mismatch_mask = (true_grid == Cell.FILLED) != (pred_grid == Cell.FILLED)
    else:
        mismatch_mask = true_grid != pred_grid

    diff_cells = []
    for y, x in np.argwhere(mismatch_mask):
        diff_cells.append({
            "x": int(x),
            "y": int(y),
            "true": int(true_grid[y, x]),
            "pred": int(pred_grid[y, x]),
        })

    return diff_cells


def solve_with_diagnostics(
    record: PuzzleRecord,
    config: Optional[SolverConfig] = None,
) -> Tuple[Puzzle, SolveDiagnostics]:
    """
    Build a puzzle from a record, solve it and summarise the outcome.

    Args:
        record: Puzzle definition (optionally with a known solution)
        config: Optional SolverConfig passed to solve_puzzle

    Returns:
        Tuple of (solved puzzle, diagnostics)
    """
    puzzle = record.to_puzzle()
    result = solve_puzzle(puzzle, config)

    failing = failing_lines(puzzle)
    status: SolveStatus = "solved" if result.solved else "partial"

    mismatches: List[Dict[str, Any]] = []
    known = record.solution_grid()
    if known is not None:
        grid = puzzle.to_grid()
        if result.solved:
            mismatches = compute_grid_mismatches(known, grid, filled_only=True)
            if mismatches:
                status = "mismatch"
        else:
            # a partial grid is only wrong where it filled a cell the solution leaves empty
            mismatches = [
                m for m in compute_grid_mismatches(known, grid, filled_only=True)
                if m.get("pred") == Cell.FILLED
            ]

    diagnostics = SolveDiagnostics(
        name=record.name,
        width=puzzle.width,
        height=puzzle.height,
        status=status,
        cycles=result.cycles,
        cells_filled=result.cells_filled,
        filled_total=puzzle.filled_count(),
        failing_rows=[line.index for line in failing if line.axis == "row"],
        failing_columns=[line.index for line in failing if line.axis == "column"],
        solution_mismatches=mismatches,
    )

    return puzzle, diagnostics
