# grid.py

from typing import List, Optional, Set, Tuple

SIZE = 9
BOX = 3
EMPTY = 0
DIGITS = tuple(range(1, SIZE + 1))

Cell = int
Grid = List[List[Cell]]
Pos = Tuple[int, int]


def empty_grid() -> Grid:
    return [[EMPTY] * SIZE for _ in range(SIZE)]


def copy_grid(grid: Grid) -> Grid:
    return [row[:] for row in grid]


def box_index(row: int, col: int) -> int:
    return (row // BOX) * BOX + (col // BOX)


def is_valid(grid: Grid, row: int, col: int, num: int) -> bool:
    """
    True if num does not already occur in the row, column or box of
    (row, col). The target cell itself is not inspected, so callers only
    ask about empty cells.
    """
    for i in range(SIZE):
        if grid[row][i] == num or grid[i][col] == num:
            return False
    br = (row // BOX) * BOX
    bc = (col // BOX) * BOX
    for r in range(br, br + BOX):
        for c in range(bc, bc + BOX):
            if grid[r][c] == num:
                return False
    return True


def find_empty(grid: Grid) -> Optional[Pos]:
    """First empty cell in row-major order, or None if the grid is full."""
    for row in range(SIZE):
        for col in range(SIZE):
            if grid[row][col] == EMPTY:
                return row, col
    return None


def count_empty(grid: Grid) -> int:
    return sum(1 for row in grid for v in row if v == EMPTY)


def is_complete(grid: Grid) -> bool:
    return find_empty(grid) is None


def units() -> List[List[Pos]]:
    """Rows, columns and boxes, in that order."""
    result: List[List[Pos]] = []
    for r in range(SIZE):
        result.append([(r, c) for c in range(SIZE)])
    for c in range(SIZE):
        result.append([(r, c) for r in range(SIZE)])
    for br in range(0, SIZE, BOX):
        for bc in range(0, SIZE, BOX):
            result.append(
                [(br + dr, bc + dc) for dr in range(BOX) for dc in range(BOX)]
            )
    return result


def _check_unit(grid: Grid, positions: List[Pos]) -> bool:
    seen: Set[int] = set()
    for r, c in positions:
        v = grid[r][c]
        if v == EMPTY:
            continue
        if v not in DIGITS or v in seen:
            return False
        seen.add(v)
    return True


def is_consistent(grid: Grid) -> bool:
    """
    Checks the grid for rule violations (duplicate digits in a row,
    column or box). Empty cells are allowed.
    """
    if len(grid) != SIZE or any(len(row) != SIZE for row in grid):
        return False
    return all(_check_unit(grid, unit) for unit in units())


def is_solved(grid: Grid) -> bool:
    return is_consistent(grid) and is_complete(grid)


def format_grid(grid: Grid) -> str:
    """ASCII board with box separators; empty cells are blank."""
    horiz = ("+-" + "--" * BOX) * BOX + "+"
    lines = []
    for r, row in enumerate(grid):
        if r % BOX == 0:
            lines.append(horiz)
        cells = [str(v) if v != EMPTY else " " for v in row]
        line = "| "
        for b in range(BOX):
            line += " ".join(cells[b * BOX: (b + 1) * BOX]) + " | "
        lines.append(line.rstrip())
    lines.append(horiz)
    return "\n".join(lines)
