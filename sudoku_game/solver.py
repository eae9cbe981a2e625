# solver.py

import logging
from enum import IntEnum
from random import Random
from typing import Callable, List, Optional

from .exceptions import UnsolvableGrid
from .grid import (
    DIGITS,
    EMPTY,
    Grid,
    Pos,
    copy_grid,
    empty_grid,
    find_empty,
    is_valid,
)
from .shuffle import shuffle

logger = logging.getLogger(__name__)

MAX_GENERATION_ATTEMPTS = 10

DigitOrder = Callable[[], List[int]]


class SolutionCount(IntEnum):
    NONE = 0
    UNIQUE = 1
    MULTIPLE = 2


class _Frame:
    __slots__ = ("pos", "digits", "next_index")

    def __init__(self, pos: Pos, digits: List[int]) -> None:
        self.pos = pos
        self.digits = digits
        self.next_index = 0


class Solver:
    """
    Backtracking search over empty cells, taken in find_empty() order.

    The recursion is kept on an explicit stack of frames, one per cell being
    filled, each holding its digit order and the next digit to try. The
    exploration order is the same as the recursive formulation: a cell's
    digit order is drawn when the cell is first reached, and a frame is only
    revisited after everything below it has been exhausted.

    The search stops once max_solutions complete assignments are found.
    The board is worked on in place; when the search stops on a solution
    it is left holding that solution.
    """

    def __init__(
        self,
        board: Grid,
        digit_order: Optional[DigitOrder] = None,
        max_solutions: int = 1,
    ) -> None:
        self.board = board
        self.digit_order = digit_order or (lambda: list(DIGITS))
        self.max_solutions = max_solutions

        self.solutions_found = 0
        self.first_solution: Optional[Grid] = None

    def _advance(self, frame: _Frame) -> bool:
        """Place the next valid digit of frame, or clear its cell."""
        r, c = frame.pos
        self.board[r][c] = EMPTY
        while frame.next_index < len(frame.digits):
            v = frame.digits[frame.next_index]
            frame.next_index += 1
            if is_valid(self.board, r, c, v):
                self.board[r][c] = v
                return True
        return False

    def _search(self) -> None:
        pos = find_empty(self.board)
        if pos is None:
            self._record()
            return

        stack = [_Frame(pos, self.digit_order())]
        while stack:
            frame = stack[-1]
            if not self._advance(frame):
                stack.pop()
                continue
            pos = find_empty(self.board)
            if pos is None:
                self._record()
                if self.solutions_found >= self.max_solutions:
                    return
                continue
            stack.append(_Frame(pos, self.digit_order()))

    def _record(self) -> None:
        self.solutions_found += 1
        if self.first_solution is None:
            self.first_solution = copy_grid(self.board)

    def solve_one(self) -> Optional[Grid]:
        self._search()
        return self.first_solution

    def solve_count(self) -> int:
        self._search()
        return self.solutions_found


# --------------------------
# Solution search
# --------------------------


def solve(grid: Grid, rng: Random) -> bool:
    """
    Fill grid in place, trying digits in a freshly shuffled order at every
    cell. Returns False when no completion exists; the grid contents are
    then unspecified.
    """
    solver = Solver(grid, digit_order=lambda: shuffle(list(DIGITS), rng))
    return solver.solve_one() is not None


def generate_full_grid(rng: Random) -> Grid:
    """
    Build a random solved grid from an empty board whose first row is an
    independent permutation of 1-9. A failed attempt is thrown away and
    retried from a new first row.
    """
    for attempt in range(1, MAX_GENERATION_ATTEMPTS + 1):
        grid = empty_grid()
        grid[0] = shuffle(list(DIGITS), rng)
        if solve(grid, rng):
            return grid
        logger.warning(
            "Full grid generation attempt %d/%d failed, retrying",
            attempt,
            MAX_GENERATION_ATTEMPTS,
        )
    raise UnsolvableGrid(
        f"No solved grid after {MAX_GENERATION_ATTEMPTS} attempts"
    )


# --------------------------
# Uniqueness oracle
# --------------------------


def count_solutions_capped(grid: Grid) -> SolutionCount:
    """
    Count completions of grid with digits tried in ascending order,
    stopping as soon as a second one turns up. Works on a private copy.
    """
    solver = Solver(copy_grid(grid), max_solutions=2)
    return SolutionCount(solver.solve_count())


def has_unique_solution(grid: Grid) -> bool:
    return count_solutions_capped(grid) is SolutionCount.UNIQUE
