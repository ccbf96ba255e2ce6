"""
Built-in puzzles with known solutions.

These are the fixtures used by the tests and by the CLI's --builtin option:

  - reference_5x5: small puzzle that edge-forcing only partially solves
  - default_10x10: 10x10 picture puzzle with its full solution
"""

from typing import Dict, List

from nonogram.catalog.types import PuzzleRecord


def _grid_from_strings(*rows: str) -> List[List[int]]:
    """'#' -> FILLED (1), anything else -> EMPTY (0)."""
    return [[1 if ch == "#" else 0 for ch in row] for row in rows]


REFERENCE_5X5 = PuzzleRecord(
    name="reference_5x5",
    row_clues=[[1, 1], [1, 1], [0], [1, 1], [3]],
    column_clues=[[1], [1, 2], [1], [1, 2], [1]],
    solution=_grid_from_strings(
        ".#.#.",
        "#...#",
        ".....",
        ".#.#.",
        ".###.",
    ),
)

DEFAULT_10X10 = PuzzleRecord(
    name="default_10x10",
    row_clues=[
        [7],
        [1, 1, 1],
        [2, 1],
        [1, 1, 1],
        [1, 2, 1],
        [4, 2],
        [2, 1, 1],
        [1, 1, 1],
        [2, 2],
        [5],
    ],
    column_clues=[
        [1, 1],
        [3, 4],
        [1, 3, 2],
        [1, 1, 1],
        [1, 2, 1],
        [2, 1, 1],
        [1, 1, 2],
        [1, 5],
        [1, 1],
        [4],
    ],
    solution=_grid_from_strings(
        "..#######.",
        ".#...#...#",
        "##.......#",
        ".#...#...#",
        "..#...##.#",
        "####...##.",
        ".##.#..#..",
        ".#..#..#..",
        ".##...##..",
        "..#####...",
    ),
)

BUILTIN_PUZZLES: Dict[str, PuzzleRecord] = {
    rec.name: rec for rec in (REFERENCE_5X5, DEFAULT_10X10)
}


def get_builtin(name: str) -> PuzzleRecord:
    """
    Look up a built-in puzzle by name.

    Raises:
        KeyError: If no built-in puzzle has that name
    """
    try:
        return BUILTIN_PUZZLES[name]
    except KeyError:
        known = ", ".join(sorted(BUILTIN_PUZZLES))
        raise KeyError(f"Unknown built-in puzzle {name!r}; known: {known}") from None
