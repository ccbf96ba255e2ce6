"""
Text rendering of a puzzle with its clues as axis labels.

Layout, for a puzzle whose longest row clue sequence has R entries and
longest column clue sequence has K entries:

      2  1        <- K lines of column clues, bottom-aligned
    ------        <- one dash per character of the grid area
 2 |  0  0        <- R*3 characters of row clues, then '|', then 3 per cell
 1 |  .  .

Cells are drawn as '.' (EMPTY), '0' (FILLED) and '/' (CROSSED). Every line
is padded to the full width and ends with a newline.
"""

from typing import Dict, List

from nonogram.core.grid_types import Cell
from nonogram.core.puzzle import Puzzle


CELL_SYMBOLS: Dict[Cell, str] = {
    Cell.EMPTY: ".",
    Cell.FILLED: "0",
    Cell.CROSSED: "/",
}

# characters per grid column and per row clue
SLOT_WIDTH = 3


def render_puzzle(puzzle: Puzzle) -> str:
    """
    Render the puzzle's clues and current cells as a text grid.

    Args:
        puzzle: Puzzle to render

    Returns:
        Multi-line string, one newline-terminated line per text row
    """
    row_label_width = puzzle.longest_row_clue_count * SLOT_WIDTH
    column_label_height = puzzle.longest_column_clue_count
    grid_width = puzzle.width * SLOT_WIDTH

    # +1 for the '|' column and the '-' row
    text_width = row_label_width + grid_width + 1
    text_height = column_label_height + puzzle.height + 1

    canvas: List[List[str]] = [[" "] * text_width for _ in range(text_height)]

    def put(x: int, y: int, text: str) -> None:
        for k, ch in enumerate(text):
            if 0 <= x + k < text_width:
                canvas[y][x + k] = ch

    # column clues, last clue directly above the dash line
    for i, clues in enumerate(puzzle.column_clues):
        for j, clue in enumerate(reversed(clues)):
            put(row_label_width + SLOT_WIDTH + i * SLOT_WIDTH, column_label_height - j - 1, str(clue))

    # row clues, last clue directly left of the bar
    for i, clues in enumerate(puzzle.row_clues):
        for j, clue in enumerate(reversed(clues)):
            put(row_label_width - j * SLOT_WIDTH - 2, column_label_height + 1 + i, str(clue))

    for i in range(grid_width):
        canvas[column_label_height][row_label_width + 1 + i] = "-"

    for i in range(puzzle.height):
        canvas[column_label_height + 1 + i][row_label_width] = "|"

    grid = puzzle.to_grid()
    for y in range(puzzle.height):
        for x in range(puzzle.width):
            symbol = CELL_SYMBOLS[Cell(int(grid[y, x]))]
            canvas[column_label_height + 1 + y][row_label_width + SLOT_WIDTH + x * SLOT_WIDTH] = symbol

    return "".join("".join(line) + "\n" for line in canvas)


def print_puzzle(puzzle: Puzzle) -> None:
    """Print the rendered puzzle for human inspection."""
    print(render_puzzle(puzzle), end="")
