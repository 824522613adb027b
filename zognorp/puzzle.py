"""Sudoku cells and boards."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import IntEnum

logger = logging.getLogger(__name__)

GRID_SIZE = 81
GROUP_SIZE = 9


class Cell(IntEnum):
    """A value held by a Sudoku cell; ``UNSET`` marks an empty cell."""

    UNSET = 0
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9

    def is_set(self) -> bool:
        return self is not Cell.UNSET

    def __str__(self) -> str:
        return self.name.title()


_ALL_VALUES = frozenset(cell for cell in Cell if cell.is_set())


def group_is_valid(group: Iterable[Cell]) -> bool:
    """Return True if no set value appears twice in ``group``."""
    seen: set[Cell] = set()
    for cell in group:
        if not cell.is_set():
            continue
        if cell in seen:
            return False
        seen.add(cell)
    return True


def _check_group_index(index: int) -> None:
    if not 0 <= index < GROUP_SIZE:
        raise IndexError(f"group index {index} out of range")


@dataclass(frozen=True)
class Puzzle:
    """An immutable 9x9 Sudoku board stored row by row."""

    cells: tuple[Cell, ...]

    def __post_init__(self) -> None:
        cells = tuple(Cell(value) for value in self.cells)
        if len(cells) != GRID_SIZE:
            raise ValueError(f"a puzzle needs {GRID_SIZE} cells, got {len(cells)}")
        object.__setattr__(self, "cells", cells)

    def set_cell(self, index: int, cell: Cell) -> Puzzle:
        """Return a copy of the board with the cell at ``index`` replaced."""
        if not 0 <= index < GRID_SIZE:
            raise IndexError(f"cell index {index} out of range")
        cells = list(self.cells)
        cells[index] = Cell(cell)
        return Puzzle(tuple(cells))

    def iter_unset_cells(self) -> Iterator[tuple[int, Cell]]:
        """Yield ``(index, cell)`` for every empty cell."""
        return ((i, c) for i, c in enumerate(self.cells) if not c.is_set())

    def column(self, index: int) -> tuple[Cell, ...]:
        _check_group_index(index)
        return self.cells[index::GROUP_SIZE]

    def row(self, index: int) -> tuple[Cell, ...]:
        _check_group_index(index)
        start = GROUP_SIZE * index
        return self.cells[start : start + GROUP_SIZE]

    def block(self, index: int) -> tuple[Cell, ...]:
        """Return the 3x3 block ``index``, numbered left to right, top to bottom."""
        _check_group_index(index)
        start = 27 * (index // 3) + 3 * (index % 3)
        return tuple(
            cell
            for offset in (0, 9, 18)
            for cell in self.cells[start + offset : start + offset + 3]
        )

    def possibilities(self, cell_index: int) -> set[Cell]:
        """Return the values not yet used in the cell's row, column or block."""
        if not 0 <= cell_index < GRID_SIZE:
            raise IndexError(f"cell index {cell_index} out of range")
        row_index, column_index = divmod(cell_index, GROUP_SIZE)
        block_index = (row_index // 3) * 3 + column_index // 3
        used = {
            *self.row(row_index),
            *self.column(column_index),
            *self.block(block_index),
        }
        return set(_ALL_VALUES - used)

    def is_valid(self) -> bool:
        """Return True if no row, column or block repeats a value."""
        for i in range(GROUP_SIZE):
            if not group_is_valid(self.row(i)):
                logger.debug("Row %d is invalid", i)
                return False
            if not group_is_valid(self.column(i)):
                logger.debug("Column %d is invalid", i)
                return False
            if not group_is_valid(self.block(i)):
                logger.debug("Block %d is invalid", i)
                return False
        return True

    def is_solved(self) -> bool:
        return self.is_valid() and all(cell.is_set() for cell in self.cells)