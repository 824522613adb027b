from zognorp.main import main
from zognorp.puzzle import Cell, Puzzle
from zognorp.solver import solve_sudoku

_ROWS = (
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

EXAMPLE = tuple(int(digit) for row in _ROWS for digit in row)


def test_main_reports_solution(capsys):
    assert main() == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "67: One"
    assert lines[-1] == "Found a solution!"


def test_example_solution_respects_givens():
    puzzle = Puzzle(tuple(Cell(v) for v in EXAMPLE))
    result = solve_sudoku(puzzle)
    assert result.is_solved()
    for given, solved in zip(EXAMPLE, result.cells):
        if given:
            assert int(solved) == given