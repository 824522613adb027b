"""Backtracking Sudoku solver."""

from __future__ import annotations

import logging

from .puzzle import Puzzle
from .sort import merge_sort

logger = logging.getLogger(__name__)


class SolverError(Exception):
    """Base class for solver failures."""


class InvalidRowError(SolverError):
    def __init__(self, index: int) -> None:
        super().__init__(f"Row {index} of the puzzle is not valid!")
        self.index = index


class InvalidColumnError(SolverError):
    def __init__(self, index: int) -> None:
        super().__init__(f"Column {index} of the puzzle is not valid!")
        self.index = index


class InvalidBlockError(SolverError):
    def __init__(self, index: int) -> None:
        super().__init__(f"Block {index} of the puzzle is not valid!")
        self.index = index


class DeadEndError(SolverError):
    def __init__(self, puzzle: Puzzle) -> None:
        super().__init__(
            "Solver reached a dead end (this should not be a user-facing error)"
        )
        self.puzzle = puzzle


def solve_sudoku(puzzle: Puzzle) -> Puzzle:
    """Return a solved copy of ``puzzle`` or raise ``DeadEndError``."""
    if puzzle.is_solved():
        return puzzle

    candidates = [
        (index, puzzle.possibilities(index)) for index, _ in puzzle.iter_unset_cells()
    ]
    # Most constrained cells first.
    candidates = merge_sort(candidates, lambda a, b: len(a[1]) < len(b[1]))
    logger.debug("Post sort: %r", candidates)

    for cell_index, options in candidates:
        for option in options:
            try:
                return solve_sudoku(puzzle.set_cell(cell_index, option))
            except DeadEndError:
                continue

    raise DeadEndError(puzzle)