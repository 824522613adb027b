"""Backtracking Sudoku solver: board model, solver, merge sort and a command."""

__version__ = "0.1.0"