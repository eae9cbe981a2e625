# exceptions.py


class SudokuError(Exception):
    pass


class UnsolvableGrid(SudokuError):
    pass


class CarvingInvariantError(SudokuError):
    """Raised when a carve step leaves the scratch grid with no solution."""
