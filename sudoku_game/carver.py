# carver.py

import logging
from random import Random
from typing import Dict

from .exceptions import CarvingInvariantError
from .grid import EMPTY, SIZE, Grid, copy_grid
from .shuffle import shuffle
from .solver import SolutionCount, count_solutions_capped

logger = logging.getLogger(__name__)

CELLS_TO_REMOVE: Dict[str, int] = {
    "easy": 40,
    "medium": 50,
    "hard": 60,
}
DEFAULT_DIFFICULTY = "hard"


def cells_to_remove(difficulty: str) -> int:
    """Target number of empty cells; unknown difficulties count as hard."""
    return CELLS_TO_REMOVE.get(difficulty, CELLS_TO_REMOVE[DEFAULT_DIFFICULTY])


def make_puzzle(solved_grid: Grid, difficulty: str, rng: Random) -> Grid:
    """
    Create a puzzle by clearing cells of a solved grid in random order,
    keeping a removal only while the puzzle still has exactly one solution.

    The target from cells_to_remove() is an upper bound: when the shuffled
    order runs out first, the puzzle is simply denser than requested.
    solved_grid itself is left untouched.
    """
    target_remove = cells_to_remove(difficulty)

    puzzle = copy_grid(solved_grid)
    scratch = copy_grid(solved_grid)

    positions = [(r, c) for r in range(SIZE) for c in range(SIZE)]
    shuffle(positions, rng)

    removed = 0
    for r, c in positions:
        if removed >= target_remove:
            break
        saved = puzzle[r][c]
        puzzle[r][c] = EMPTY
        scratch[r][c] = EMPTY

        count = count_solutions_capped(scratch)
        if count is SolutionCount.NONE:
            raise CarvingInvariantError(
                f"Removing ({r}, {c}) left the puzzle without a solution"
            )
        if count is not SolutionCount.UNIQUE:
            # Not unique, revert removal
            puzzle[r][c] = saved
            scratch[r][c] = saved
        else:
            removed += 1

    if removed < target_remove:
        logger.debug(
            "Carved %d of %d requested cells for difficulty %r",
            removed,
            target_remove,
            difficulty,
        )
    return puzzle
