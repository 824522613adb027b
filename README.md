# zognorp

zognorp is a small Sudoku solver. It models a 9x9 board and searches it by backtracking. At each step it tries the empty cells with the fewest legal values first.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Command line

```
zognorp
```

This command takes no options. It loads a built-in example puzzle and prints cell 67 of that puzzle, for example `67: One`. It then tries to solve the puzzle. If it finds a solution it prints `Found a solution!`. If the search fails it prints the error message instead. The command always exits with status 0.

## Library use

```python
from zognorp.puzzle import Cell, Puzzle
from zognorp.solver import solve_sudoku, SolverError

grid = [Cell(v) for v in [
    5, 3, 0, 0, 7, 0, 0, 0, 0,
    6, 0, 0, 1, 9, 5, 0, 0, 0,
    0, 9, 8, 0, 0, 0, 0, 6, 0,
    8, 0, 0, 0, 6, 0, 0, 0, 3,
    4, 0, 0, 8, 0, 3, 0, 0, 1,
    7, 0, 0, 0, 2, 0, 0, 0, 6,
    0, 6, 0, 0, 0, 0, 2, 8, 0,
    0, 0, 0, 4, 1, 9, 0, 0, 5,
    0, 0, 0, 0, 8, 0, 0, 7, 9,
]]

puzzle = Puzzle(grid)
print(puzzle.row(0))
print(puzzle.possibilities(50))   # legal values for cell 50

try:
    solved = solve_sudoku(puzzle)
except SolverError as err:
    print(err)
```

### `zognorp.puzzle`

- **`Cell`** is an `IntEnum`. It has the members `UNSET` (0) and `ONE` through `NINE` (1 to 9). `str(cell)` gives the name in title case, such as `One`. `Cell.is_set()` is true for every member except `UNSET`.
- **`Puzzle(cells)`** is an immutable board of 81 cells, stored row by row. Each value is converted with `Cell(...)`, so plain integers from 0 to 9 are accepted. A value outside that range raises `ValueError`. A count of cells other than 81 also raises `ValueError`.
  - `row(i)`, `column(i)` and `block(i)` each return a tuple of 9 cells. Blocks are numbered from 0 to 8, left to right and then top to bottom. An index outside 0 to 8 raises `IndexError`.
  - `possibilities(index)` returns the set of values that do not already appear in the cell's row, column or block.
  - `set_cell(index, cell)` returns a new puzzle with that cell replaced. The original puzzle is left unchanged.
  - `iter_unset_cells()` yields `(index, cell)` for every empty cell.
  - `is_valid()` is true when no row, column or block repeats a value. When it finds a repeat, it logs a debug message through the standard `logging` module.
  - `is_solved()` is true when the board is valid and every cell is filled.
- **`group_is_valid(group)`** checks a single row, column or block. It is true when no set value appears twice in that group.

### `zognorp.solver`

- **`solve_sudoku(puzzle)`** returns a solved `Puzzle`. If the board is already solved, the same puzzle comes back. If the search cannot complete the board, it raises `DeadEndError`, and the error's `puzzle` attribute holds the board on which the search gave up. The function does not check the board for errors before searching. A board with a repeated value therefore ends in `DeadEndError`. After a dead end the search goes on to try the other empty cells, so a board without a solution can take a long time to fail.
- All solver errors derive from `SolverError`. The module also defines `InvalidRowError`, `InvalidColumnError` and `InvalidBlockError`. Each of these carries an `index`. `solve_sudoku` does not raise them itself.

### `zognorp.sort`

- **`merge_sort(array, compare)`** returns a new sorted list. `compare(a, b)` must return true when `a` should come before `b`. When it returns false, the element from the right-hand half is taken first. This means that a strict predicate such as `<` does not keep equal elements in their original order.

## What it does not do

- The command cannot read a puzzle from a file or from its arguments. It only works on the built-in example.
- Neither the command nor the library prints or formats a board. The solved board is returned as a `Puzzle`, and you read its cells through `cells`, `row`, `column` or `block`.