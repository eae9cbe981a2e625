from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from random import Random, randrange
from typing import Any, Callable, Optional, Tuple

from .carver import make_puzzle
from .grid import DIGITS, EMPTY, SIZE, Grid, copy_grid, count_empty, empty_grid
from .solver import generate_full_grid

logger = logging.getLogger(__name__)


class CheckResult(Enum):
    SOLVED = "solved"
    INCORRECT = "incorrect"


class SessionStatus(Enum):
    PLAYING = "playing"
    SOLVED = "solved"
    REVEALED = "revealed"


def format_elapsed(seconds: int) -> str:
    minutes, seconds = divmod(int(seconds), 60)
    return f"{minutes:02d}:{seconds:02d}"


def _parse_digit(value: Any) -> Optional[int]:
    """Return the digit 1-9 carried by value, or None for anything else."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value in DIGITS else None
    if isinstance(value, str) and len(value) == 1 and value in "123456789":
        return int(value)
    return None


@dataclass
class GameSession:
    """
    One game at a time: the solved grid, the puzzle carved from it and the
    grid the player is filling in, plus the play timer.

    A game is generated on construction, so there is always a solution to
    check against or reveal. Every later generate() replaces the whole state.
    Grids handed out are copies.
    """

    difficulty: str = "easy"
    seed: int = field(default_factory=lambda: randrange(2**31 - 1))
    clock: Callable[[], float] = time.monotonic

    # internal
    _rng: Random = field(init=False, repr=False)
    _solution: Grid = field(default_factory=empty_grid, init=False, repr=False)
    _puzzle: Grid = field(default_factory=empty_grid, init=False, repr=False)
    _player: Grid = field(default_factory=empty_grid, init=False, repr=False)
    _started_at: Optional[float] = field(default=None, init=False, repr=False)
    _stopped_at: Optional[float] = field(default=None, init=False, repr=False)
    _status: SessionStatus = field(
        default=SessionStatus.PLAYING, init=False, repr=False
    )
    _last_result: Optional[CheckResult] = field(
        default=None, init=False, repr=False
    )

    def __post_init__(self) -> None:
        self._rng = Random(self.seed)
        self.generate()

    # --------------------------
    # Public API
    # --------------------------

    def generate(self, difficulty: Optional[str] = None) -> Tuple[Grid, Grid]:
        """
        Start a new game and return (puzzle, solution).
        difficulty defaults to the session's current one.
        """
        if difficulty is not None:
            self.difficulty = difficulty

        solution = generate_full_grid(self._rng)
        self._solution = copy_grid(solution)
        self._puzzle = make_puzzle(solution, self.difficulty, self._rng)
        self._player = copy_grid(self._puzzle)

        self._started_at = None
        self._stopped_at = None
        self._status = SessionStatus.PLAYING
        self._last_result = None

        logger.info(
            "New %s game with %d empty cells",
            self.difficulty,
            count_empty(self._puzzle),
        )
        return copy_grid(self._puzzle), copy_grid(self._solution)

    def set_cell(self, row: int, col: int, value: Any) -> bool:
        """
        Enter value at (row, col). Only the digits 1-9 (as int or one-char
        str) are accepted; anything else leaves the cell empty. Givens and
        revealed games are read-only. Returns True if a digit was placed.
        """
        self._check_pos(row, col)
        if self._status is SessionStatus.REVEALED or self.is_given(row, col):
            return False

        digit = _parse_digit(value)
        if digit is None:
            self._player[row][col] = EMPTY
            return False

        self._player[row][col] = digit
        if self._started_at is None and self._status is SessionStatus.PLAYING:
            self._started_at = self.clock()
        return True

    def check(self) -> CheckResult:
        result = CheckResult.SOLVED
        for r in range(SIZE):
            for c in range(SIZE):
                if self._player[r][c] != self._solution[r][c]:
                    result = CheckResult.INCORRECT
                    break
            if result is CheckResult.INCORRECT:
                break

        if result is CheckResult.SOLVED and self._status is SessionStatus.PLAYING:
            self._stop_timer()
            self._status = SessionStatus.SOLVED
            logger.info(
                "Puzzle solved in %s", format_elapsed(self.elapsed_seconds())
            )
        self._last_result = result
        return result

    def reveal(self) -> Tuple[Grid, int]:
        """Return (solution, elapsed seconds) and end the game."""
        self._stop_timer()
        self._status = SessionStatus.REVEALED
        elapsed = self.elapsed_seconds()
        logger.info("Answer revealed after %s", format_elapsed(elapsed))
        return copy_grid(self._solution), elapsed

    def elapsed_seconds(self) -> int:
        """Whole seconds since the first entry; 0 if nothing was entered."""
        if self._started_at is None:
            return 0
        end = self._stopped_at if self._stopped_at is not None else self.clock()
        return int(end - self._started_at)

    def is_given(self, row: int, col: int) -> bool:
        self._check_pos(row, col)
        return self._puzzle[row][col] != EMPTY

    @property
    def puzzle(self) -> Grid:
        return copy_grid(self._puzzle)

    @property
    def player_grid(self) -> Grid:
        return copy_grid(self._player)

    @property
    def solution(self) -> Grid:
        return copy_grid(self._solution)

    @property
    def status(self) -> SessionStatus:
        return self._status

    @property
    def last_result(self) -> Optional[CheckResult]:
        return self._last_result

    # --------------------------
    # Internals / helpers
    # --------------------------

    def _stop_timer(self) -> None:
        if self._stopped_at is None:
            self._stopped_at = self.clock()

    @staticmethod
    def _check_pos(row: int, col: int) -> None:
        if not (0 <= row < SIZE and 0 <= col < SIZE):
            raise IndexError(f"Cell ({row}, {col}) is outside the grid")
