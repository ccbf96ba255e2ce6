"""
Fixed-point driver for edge-forcing over a whole puzzle.

One cycle runs the line solver over every row (top to bottom) and then
every column (left to right). Cycles repeat until a full cycle changes
nothing, and the final grid is handed to the verifier.

A cycle counts as progress if ANY line in it changed: the per-line results
are OR-reduced across both phases. Because fills are monotonic and the grid
is finite, at most width * height cycles can make progress, so the loop
always terminates.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from nonogram.core.grid_types import Grid
from nonogram.core.lines import iter_columns, iter_rows
from nonogram.core.puzzle import Puzzle
from nonogram.solver.line_solver import apply_edge_forcing
from nonogram.solver.verifier import verify_puzzle


logger = logging.getLogger(__name__)


@dataclass
class SolverConfig:
    """
    Options for solve_puzzle.

    Attributes:
        max_cycles: Upper bound on row+column cycles. None means
            width * height + 1, which a monotonic fill can never exceed.
        record_history: If True, keep a copy of the grid after every cycle
    """
    max_cycles: Optional[int] = None
    record_history: bool = False


@dataclass
class SolveResult:
    """
    Outcome of one solve_puzzle call.

    Attributes:
        solved: Verifier result on the final grid
        cycles: Number of row+column cycles run (including the final idle one)
        cells_filled: Cells turned FILLED by this call
        lines_changed: Total count of line-solver calls that changed a cell
        history: Grid snapshot after each cycle (only with record_history)
    """
    solved: bool
    cycles: int
    cells_filled: int
    lines_changed: int
    history: List[Grid] = field(default_factory=list)


def _run_cycle(puzzle: Puzzle) -> int:
    """Run one row phase and one column phase; return how many lines changed."""
    changed_lines = 0

    for line in iter_rows(puzzle):
        if apply_edge_forcing(puzzle.array, line.indices, line.clues):
            changed_lines += 1

    for line in iter_columns(puzzle):
        if apply_edge_forcing(puzzle.array, line.indices, line.clues):
            changed_lines += 1

    return changed_lines


def solve_puzzle(puzzle: Puzzle, config: SolverConfig | None = None) -> SolveResult:
    """
    Apply edge-forcing to every line until no line changes, then verify.

    Mutates puzzle.array in place. The result may be a partial solve: the
    technique is not complete, and a puzzle it cannot finish is reported
    through solved=False.

    Args:
        puzzle: Puzzle with all row and column clues appended
        config: Optional SolverConfig

    Returns:
        SolveResult with the verifier outcome and progress counters

    Example:
        >>> p = Puzzle.from_clues([[5]], [[1]] * 5)
        >>> solve_puzzle(p).solved
        True
    """
    if config is None:
        config = SolverConfig()

    max_cycles = config.max_cycles
    if max_cycles is None:
        max_cycles = puzzle.width * puzzle.height + 1

    filled_before = puzzle.filled_count()
    history: List[Grid] = []
    cycles = 0
    lines_changed = 0
    changed = True

    while changed:
        if cycles >= max_cycles:
            logger.warning("Stopping after max_cycles=%d with changes still pending", max_cycles)
            break

        cycles += 1
        changed_in_cycle = _run_cycle(puzzle)
        lines_changed += changed_in_cycle
        changed = changed_in_cycle > 0

        logger.debug("Cycle %d: %d line(s) changed", cycles, changed_in_cycle)
        if config.record_history:
            history.append(puzzle.to_grid())

    solved = verify_puzzle(puzzle)
    cells_filled = puzzle.filled_count() - filled_before

    logger.info(
        "%dx%d puzzle %s after %d cycle(s), %d cell(s) filled",
        puzzle.width, puzzle.height,
        "solved" if solved else "partially solved",
        cycles, cells_filled,
    )

    return SolveResult(
        solved=solved,
        cycles=cycles,
        cells_filled=cells_filled,
        lines_changed=lines_changed,
        history=history,
    )
