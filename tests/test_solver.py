import pytest

from zognorp.puzzle import Cell, Puzzle
from zognorp.solver import (
    DeadEndError,
    InvalidBlockError,
    InvalidColumnError,
    InvalidRowError,
    SolverError,
    solve_sudoku,
)

SOLVED = [
    5, 3, 4, 6, 7, 8, 9, 1, 2,
    6, 7, 2, 1, 9, 5, 3, 4, 8,
    1, 9, 8, 3, 4, 2, 5, 6, 7,
    8, 5, 9, 7, 6, 1, 4, 2, 3,
    4, 2, 6, 8, 5, 3, 7, 9, 1,
    7, 1, 3, 9, 2, 4, 8, 5, 6,
    9, 6, 1, 5, 3, 7, 2, 8, 4,
    2, 8, 7, 4, 1, 9, 6, 3, 5,
    3, 4, 5, 2, 8, 6, 1, 7, 9,
]


def make(values):
    return Puzzle(tuple(Cell(v) for v in values))


def test_solved_puzzle_is_returned_unchanged():
    puzzle = make(SOLVED)
    assert puzzle.is_solved()
    assert solve_sudoku(puzzle) == puzzle


@pytest.mark.parametrize("blanks", [[0], [0, 40, 80], [1, 11, 21, 31, 41, 51, 61, 71]])
def test_fills_blanked_cells(blanks):
    values = [0 if i in blanks else v for i, v in enumerate(SOLVED)]
    result = solve_sudoku(make(values))
    assert result == make(SOLVED)
    assert result.is_solved()


def test_solution_keeps_givens():
    values = [0 if i % 4 == 0 else v for i, v in enumerate(SOLVED)]
    puzzle = make(values)
    result = solve_sudoku(puzzle)
    assert result.is_solved()
    for original, solved in zip(puzzle.cells, result.cells):
        if original.is_set():
            assert solved == original


def test_full_invalid_grid_is_dead_end():
    values = list(SOLVED)
    values[0], values[1] = values[1], values[0]
    puzzle = make(values)
    with pytest.raises(DeadEndError) as info:
        solve_sudoku(puzzle)
    assert info.value.puzzle == puzzle


def test_invalid_grid_with_blank_is_dead_end():
    values = list(SOLVED)
    values[0] = 0
    values[2] = 3
    with pytest.raises(DeadEndError):
        solve_sudoku(make(values))


def test_error_messages():
    assert str(InvalidRowError(3)) == "Row 3 of the puzzle is not valid!"
    assert str(InvalidColumnError(4)) == "Column 4 of the puzzle is not valid!"
    assert str(InvalidBlockError(5)) == "Block 5 of the puzzle is not valid!"
    assert str(DeadEndError(make(SOLVED))) == (
        "Solver reached a dead end (this should not be a user-facing error)"
    )


def test_errors_share_base_class():
    error = InvalidRowError(2)
    assert isinstance(error, SolverError)
    assert error.index == 2