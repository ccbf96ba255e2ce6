"""
Command-line runner: load a puzzle, solve it with edge-forcing, report.

Usage:
    # Solve a puzzle file (JSON or clue text)
    python -m nonogram.runners.solve_puzzle puzzles/reference_5x5.json

    # Solve a built-in puzzle and write diagnostics
    python -m nonogram.runners.solve_puzzle --builtin default_10x10 \
        --diagnostics-out logs/default_10x10.json

Exit status:
    0 - every row and column matches its clues
    1 - partial solve, or the grid differs from the known solution
    2 - the puzzle could not be loaded
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import List, Optional

from nonogram.catalog.builtin import BUILTIN_PUZZLES, get_builtin
from nonogram.catalog.types import PuzzleRecord
from nonogram.core.clue_io import ClueFormatError, load_puzzle_file
from nonogram.core.render import render_puzzle
from nonogram.runners.results import SolveDiagnostics, solve_with_diagnostics
from nonogram.solver.puzzle_solver import SolverConfig


# Logger for this module
logger = logging.getLogger(__name__)

EXIT_SOLVED = 0
EXIT_UNSOLVED = 1
EXIT_INPUT_ERROR = 2


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments for the solve runner.

    Returns:
        Parsed arguments with puzzle_path or builtin, and solver options
    """
    parser = argparse.ArgumentParser(
        description="Solve a nonogram with edge-forcing and verify the result."
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "puzzle_path",
        type=Path,
        nargs="?",
        help="Path to a puzzle file (.json, or clue text for any other suffix)",
    )
    source.add_argument(
        "--builtin",
        choices=sorted(BUILTIN_PUZZLES),
        help="Solve one of the built-in puzzles instead of a file",
    )
    parser.add_argument(
        "--max-cycles",
        type=int,
        default=None,
        help="Upper bound on row+column cycles (default: width*height + 1).",
    )
    parser.add_argument(
        "--diagnostics-out",
        type=Path,
        default=None,
        help="Write SolveDiagnostics as JSON to this path.",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Do not print the rendered grid.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log per-cycle solver progress.",
    )
    return parser.parse_args(argv)


def load_record(args: argparse.Namespace) -> PuzzleRecord:
    if args.builtin is not None:
        return get_builtin(args.builtin)
    return load_puzzle_file(args.puzzle_path)


def write_diagnostics(diagnostics: SolveDiagnostics, path: Path) -> None:
    """Write diagnostics as pretty-printed JSON, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(diagnostics.to_dict(), f, indent=2)
    logger.info("Wrote diagnostics to %s", path)


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entrypoint; returns the process exit status."""
    args = parse_args(argv)

    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    try:
        record = load_record(args)
    except (ClueFormatError, OSError, KeyError) as e:
        logger.error("Could not load puzzle: %s", e)
        return EXIT_INPUT_ERROR

    logger.info("Solving %s (%dx%d)", record.name, record.width, record.height)
    config = SolverConfig(max_cycles=args.max_cycles)
    puzzle, diagnostics = solve_with_diagnostics(record, config)

    if not args.quiet:
        print(render_puzzle(puzzle), end="")

    if diagnostics.status == "solved":
        logger.info("✓ %s solved", record.name)
    else:
        logger.warning(
            "%s: status=%s, failing rows=%s, failing columns=%s",
            record.name, diagnostics.status,
            diagnostics.failing_rows, diagnostics.failing_columns,
        )
        if diagnostics.solution_mismatches:
            logger.warning("  %d cell(s) differ from the known solution", len(diagnostics.solution_mismatches))

    if args.diagnostics_out is not None:
        write_diagnostics(diagnostics, args.diagnostics_out)

    return EXIT_SOLVED if diagnostics.status == "solved" else EXIT_UNSOLVED


if __name__ == "__main__":
    raise SystemExit(main())
