"""Command entry point: solve the built-in example puzzle."""

from __future__ import annotations

from collections.abc import Sequence

from .puzzle import Cell, Puzzle
from .solver import SolverError, solve_sudoku

# Each row lists nine digits; a zero marks an empty cell.
EXAMPLE_ROWS = (
    "530070000",
    "600195000",
    "098000060",
    "800060003",
    "400803001",
    "700020006",
    "060000280",
    "000419005",
    "000080079",
)


def _example_grid() -> tuple[Cell, ...]:
    """Build the 81 cells of the example puzzle, row by row."""
    return tuple(Cell(int(digit)) for row in EXAMPLE_ROWS for digit in row)


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the example puzzle and report the outcome."""
    grid = _example_grid()
    print(f"67: {grid[67]}")

    try:
        solve_sudoku(Puzzle(grid))
    except SolverError as error:
        print(error)
    else:
        print("Found a solution!")
    return 0