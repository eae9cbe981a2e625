import argparse
import logging
import sys
from typing import List, Optional

from .carver import CELLS_TO_REMOVE
from .grid import count_empty, format_grid
from .session import GameSession


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="sudoku_game",
        description="Generate a Sudoku puzzle with a unique solution.",
    )
    parser.add_argument(
        "--difficulty",
        choices=sorted(CELLS_TO_REMOVE),
        default="easy",
        help="how many cells to try to clear (default: easy)",
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument(
        "--solution", action="store_true", help="also print the solution"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="debug logging"
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.seed is None:
        session = GameSession(difficulty=args.difficulty)
    else:
        session = GameSession(difficulty=args.difficulty, seed=args.seed)

    puzzle = session.puzzle
    print(f"Seed: {session.seed}")
    print(f"Difficulty: {args.difficulty} ({count_empty(puzzle)} empty cells)")
    print(format_grid(puzzle))
    if args.solution:
        print("Solution:")
        print(format_grid(session.solution))
    return 0


if __name__ == "__main__":
    sys.exit(main())
