from sudoku_game.carver import CELLS_TO_REMOVE, cells_to_remove, make_puzzle
from sudoku_game.exceptions import CarvingInvariantError, SudokuError, UnsolvableGrid
from sudoku_game.grid import Grid, find_empty, format_grid, is_solved, is_valid
from sudoku_game.session import CheckResult, GameSession, SessionStatus
from sudoku_game.solver import (
    SolutionCount,
    count_solutions_capped,
    generate_full_grid,
    has_unique_solution,
    solve,
)

__all__ = [
    "CELLS_TO_REMOVE",
    "CarvingInvariantError",
    "CheckResult",
    "GameSession",
    "Grid",
    "SessionStatus",
    "SolutionCount",
    "SudokuError",
    "UnsolvableGrid",
    "cells_to_remove",
    "count_solutions_capped",
    "find_empty",
    "format_grid",
    "generate_full_grid",
    "has_unique_solution",
    "is_solved",
    "is_valid",
    "make_puzzle",
    "solve",
]
