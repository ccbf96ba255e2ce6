"""
Puzzle file IO: JSON and line-oriented clue text.

JSON structure:

{
  "name": "reference_5x5",                  # optional
  "rows":    [[1, 1], [1, 1], [0], ...],    # one clue list per row
  "columns": [[1], [1, 2], [1], ...],       # one clue list per column
  "solution": [[0, 1, 0, 1, 0], ...]        # optional, rows of 0/1/2
}

Text structure ('#' starts a comment, blank lines are ignored):

    name: reference_5x5
    rows
    1 1
    1,1
    0
    columns
    1
    1 2

Format problems raise ClueFormatError. Nothing here re-validates clue
consistency (whether the clues admit a solution); that is not checked
anywhere.
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any, Dict, List, Optional

from nonogram.catalog.types import PuzzleRecord


class ClueFormatError(ValueError):
    """Raised when a puzzle file or dict does not match the expected format."""
    pass


_SECTION_HEADERS = {"rows": "rows", "columns": "columns", "cols": "columns"}
_TOKEN_SPLIT = re.compile(r"[\s,]+")


def parse_clue_sequence(text: str, line_no: Optional[int] = None) -> List[int]:
    """
    Parse one line of clues ("1 2", "1,2" or "1, 2") into a list of ints.

    Raises:
        ClueFormatError: On a non-integer or negative token
    """
    where = f" on line {line_no}" if line_no is not None else ""
    clues = []
    for token in _TOKEN_SPLIT.split(text.strip()):
        if not token:
            continue
        try:
            value = int(token)
        except ValueError:
            raise ClueFormatError(f"Invalid clue {token!r}{where}") from None
        if value < 0:
            raise ClueFormatError(f"Negative clue {value}{where}")
        clues.append(value)

    if not clues:
        raise ClueFormatError(f"Empty clue sequence{where}")

    return clues


def parse_clue_text(text: str, name: str = "puzzle") -> PuzzleRecord:
    """
    Parse the line-oriented clue format into a PuzzleRecord.

    Args:
        text: File contents
        name: Name to use when the text has no "name:" line

    Returns:
        PuzzleRecord without a solution

    Raises:
        ClueFormatError: On unknown lines, clues before a section header,
            repeated sections or a missing section
    """
    sections: Dict[str, List[List[int]]] = {}
    current: Optional[str] = None

    for line_no, raw in enumerate(text.splitlines(), start=1):
        line = raw.split("#", 1)[0].strip()
        if not line:
            continue

        header = line.rstrip(":").strip().lower()
        if header in _SECTION_HEADERS:
            current = _SECTION_HEADERS[header]
            if current in sections:
                raise ClueFormatError(f"Duplicate '{current}' section on line {line_no}")
            sections[current] = []
            continue

        if line.lower().startswith("name:"):
            if sections:
                raise ClueFormatError(f"'name:' must come before the clue sections (line {line_no})")
            name = line[len("name:"):].strip() or name
            continue

        if current is None:
            raise ClueFormatError(f"Clues on line {line_no} appear before a 'rows' or 'columns' header")

        sections[current].append(parse_clue_sequence(line, line_no))

    for section in ("rows", "columns"):
        if section not in sections:
            raise ClueFormatError(f"Missing '{section}' section")

    return PuzzleRecord(name=name, row_clues=sections["rows"], column_clues=sections["columns"])


def format_clue_text(record: PuzzleRecord) -> str:
    """Write a PuzzleRecord's clues in the text format (solution is not included)."""
    lines = [f"name: {record.name}", "rows"]
    lines.extend(" ".join(str(c) for c in clues) for clues in record.row_clues)
    lines.append("columns")
    lines.extend(" ".join(str(c) for c in clues) for clues in record.column_clues)
    return "\n".join(lines) + "\n"


def _clue_lists(data: Dict[str, Any], key: str) -> List[List[int]]:
    value = data.get(key)
    if not isinstance(value, list):
        raise ClueFormatError(f"'{key}' must be a list of clue lists")

    out = []
    for i, clues in enumerate(value):
        if not isinstance(clues, list):
            raise ClueFormatError(f"'{key}[{i}]' must be a list of integers")
        for clue in clues:
            if isinstance(clue, bool) or not isinstance(clue, int) or clue < 0:
                raise ClueFormatError(f"'{key}[{i}]' contains invalid clue {clue!r}")
        out.append(list(clues) or [0])
    return out


def _solution_rows(value: Any, height: int, width: int) -> List[List[int]]:
    if not isinstance(value, list) or len(value) != height:
        raise ClueFormatError(f"'solution' must be a list of {height} rows")

    rows = []
    for y, row in enumerate(value):
        if not isinstance(row, list) or len(row) != width:
            raise ClueFormatError(f"'solution[{y}]' must be a list of {width} cells")
        for cell in row:
            if isinstance(cell, bool) or cell not in (0, 1, 2):
                raise ClueFormatError(f"'solution[{y}]' contains invalid cell {cell!r}")
        rows.append(list(row))
    return rows


def record_from_dict(data: Any, default_name: str = "puzzle") -> PuzzleRecord:
    """
    Convert a decoded JSON object into a PuzzleRecord.

    Raises:
        ClueFormatError: If required keys are missing or malformed
    """
    if not isinstance(data, dict):
        raise ClueFormatError(f"Puzzle JSON must be an object, got {type(data).__name__}")

    row_clues = _clue_lists(data, "rows")
    column_clues = _clue_lists(data, "columns")

    solution = None
    if data.get("solution") is not None:
        solution = _solution_rows(data["solution"], len(row_clues), len(column_clues))

    name = data.get("name") or default_name
    return PuzzleRecord(name=str(name), row_clues=row_clues, column_clues=column_clues, solution=solution)


def record_to_dict(record: PuzzleRecord) -> Dict[str, Any]:
    """Convert a PuzzleRecord into a JSON-serialisable dict."""
    data: Dict[str, Any] = {
        "name": record.name,
        "rows": [list(clues) for clues in record.row_clues],
        "columns": [list(clues) for clues in record.column_clues],
    }
    if record.solution is not None:
        data["solution"] = [list(row) for row in record.solution]
    return data


def load_puzzle_json(path: Path) -> PuzzleRecord:
    """
    Load a puzzle from a JSON file.

    The file stem is used as the name when the JSON has no "name" key.

    Raises:
        ClueFormatError: If the file is not valid JSON or not a puzzle
        OSError: If the file cannot be read
    """
    path = Path(path)
    with path.open("r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ClueFormatError(f"{path}: invalid JSON: {e}") from e

    return record_from_dict(data, default_name=path.stem)


def save_puzzle_json(record: PuzzleRecord, path: Path) -> None:
    """Write a PuzzleRecord to a JSON file, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(record_to_dict(record), f, indent=2)


def load_puzzle_file(path: Path) -> PuzzleRecord:
    """Load a puzzle from .json or from the clue text format (any other suffix)."""
    path = Path(path)
    if path.suffix.lower() == ".json":
        return load_puzzle_json(path)

    text = path.read_text(encoding="utf-8")
    return parse_clue_text(text, name=path.stem)
