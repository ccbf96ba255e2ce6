"""
Integration tests for the solve runner CLI.

These run main() end to end: load a puzzle (file or built-in), solve it,
print the grid, write diagnostics and return the exit status.
"""

import json
from pathlib import Path

import pytest

from nonogram.runners.solve_puzzle import (
    EXIT_INPUT_ERROR,
    EXIT_SOLVED,
    EXIT_UNSOLVED,
    main,
)


PUZZLES_DIR = Path(__file__).resolve().parents[2] / "puzzles"


def test_cli_solves_text_puzzle(capsys):
    """block_3x4 is fully forced by its rows."""
    code = main([str(PUZZLES_DIR / "block_3x4.txt")])
    out = capsys.readouterr().out

    assert code == EXIT_SOLVED
    assert " 4 |  0  0  0  0" in out
    assert "." not in out


def test_cli_partial_builtin_writes_diagnostics(tmp_path, capsys):
    diag_path = tmp_path / "logs" / "reference.json"

    code = main(["--builtin", "reference_5x5", "--diagnostics-out", str(diag_path)])
    out = capsys.readouterr().out

    assert code == EXIT_UNSOLVED
    assert "|" in out

    with diag_path.open("r", encoding="utf-8") as f:
        diag = json.load(f)

    assert diag["status"] == "partial"
    assert diag["failing_rows"] == [0, 1, 4]
    assert diag["failing_columns"] == [0, 1, 3, 4]
    assert diag["cells_filled"] == 3


def test_cli_json_file_quiet(capsys):
    code = main([str(PUZZLES_DIR / "reference_5x5.json"), "--quiet"])
    out = capsys.readouterr().out

    assert code == EXIT_UNSOLVED
    assert out == ""


def test_cli_max_cycles_option(tmp_path):
    diag_path = tmp_path / "diag.json"
    code = main(["--builtin", "default_10x10", "--max-cycles", "1", "--quiet",
                 "--diagnostics-out", str(diag_path)])

    diag = json.loads(diag_path.read_text(encoding="utf-8"))
    assert diag["cycles"] == 1
    assert code in (EXIT_SOLVED, EXIT_UNSOLVED)


def test_cli_bad_file_returns_input_error(tmp_path):
    bad = tmp_path / "bad.txt"
    bad.write_text("rows\n1 x\ncolumns\n1\n", encoding="utf-8")

    assert main([str(bad), "--quiet"]) == EXIT_INPUT_ERROR


def test_cli_missing_file_returns_input_error(tmp_path):
    assert main([str(tmp_path / "missing.json"), "--quiet"]) == EXIT_INPUT_ERROR


def test_cli_requires_a_source():
    with pytest.raises(SystemExit):
        main([])


def test_cli_rejects_two_sources():
    with pytest.raises(SystemExit):
        main([str(PUZZLES_DIR / "block_3x4.txt"), "--builtin", "reference_5x5"])
