from typing import List, Sequence

from constants import UNPLACED


class BoardSizeError(ValueError):
    pass


class PlacementError(ValueError):
    """A place/remove call that would leave the tracking arrays out of sync."""


def rising_index(size: int, x: int, y: int) -> int:
    """Index of the rising diagonal through (x, y): y - x + (size - 1)."""
    idx = y - x + (size - 1)
    assert 0 <= idx < 2 * size - 1, f"rising diagonal {idx} out of range for n={size}"
    return idx


def falling_index(size: int, x: int, y: int) -> int:
    """Index of the falling diagonal through (x, y): y + x."""
    idx = y + x
    assert 0 <= idx < 2 * size - 1, f"falling diagonal {idx} out of range for n={size}"
    return idx


class Board:
    def __init__(self, size: int):
        if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
            raise BoardSizeError(f"Board size must be a positive integer, got {size!r}")
        self.size = size
        # solution[y] is the column of the queen in row y
        self.solution: List[int] = [UNPLACED] * size
        self.column_free: List[bool] = [True] * size
        self.diag_rising_free: List[bool] = [True] * (2 * size - 1)
        self.diag_falling_free: List[bool] = [True] * (2 * size - 1)
        self.disposed = False

    def reset(self) -> None:
        """Remove every queen in O(n), reusing the same lists."""
        self._check_alive()
        n = self.size
        for i in range(n):
            self.solution[i] = UNPLACED
            self.column_free[i] = True
        for i in range(2 * n - 1):
            self.diag_rising_free[i] = True
            self.diag_falling_free[i] = True

    def dispose(self) -> None:
        """Counterpart of construction. Storage is left to the garbage
        collector; every later query or mutation raises PlacementError."""
        self.disposed = True

    def _check_alive(self) -> None:
        if self.disposed:
            raise PlacementError("Board has been disposed")

    def _check_square(self, x: int, y: int) -> None:
        if not (0 <= x < self.size and 0 <= y < self.size):
            raise PlacementError(f"Square ({x}, {y}) is outside a {self.size}x{self.size} board")

    def can_place(self, x: int, y: int) -> bool:
        self._check_alive()
        self._check_square(x, y)
        return (
            self.column_free[x]
            and self.diag_rising_free[rising_index(self.size, x, y)]
            and self.diag_falling_free[falling_index(self.size, x, y)]
        )

    def place(self, x: int, y: int) -> None:
        self._check_alive()
        self._check_square(x, y)
        if self.solution[y] != UNPLACED:
            raise PlacementError(f"Row {y} already holds a queen at column {self.solution[y]}")
        if not self.can_place(x, y):
            raise PlacementError(f"Square ({x}, {y}) is attacked")
        self.solution[y] = x
        self.column_free[x] = False
        self.diag_rising_free[rising_index(self.size, x, y)] = False
        self.diag_falling_free[falling_index(self.size, x, y)] = False

    def remove(self, x: int, y: int) -> None:
        self._check_alive()
        self._check_square(x, y)
        if self.solution[y] != x:
            raise PlacementError(f"No queen at ({x}, {y}) to remove")
        self.solution[y] = UNPLACED
        self.column_free[x] = True
        self.diag_rising_free[rising_index(self.size, x, y)] = True
        self.diag_falling_free[falling_index(self.size, x, y)] = True

    def is_complete(self) -> bool:
        # Both searches fill rows in increasing order, so the last row
        # is placed only once every row is.
        self._check_alive()
        return self.solution[self.size - 1] != UNPLACED

    def placed_count(self) -> int:
        self._check_alive()
        return sum(1 for x in self.solution if x != UNPLACED)

    def read_solution(self) -> List[int]:
        self._check_alive()
        return self.solution[:]

    def __repr__(self) -> str:
        return f"Board(size={self.size}, solution={self.solution})"


def create_board(size: int) -> Board:
    return Board(size)


def reset_board(board: Board) -> None:
    board.reset()


def dispose_board(board: Board) -> None:
    board.dispose()


def read_solution(board: Board) -> List[int]:
    return board.read_solution()


def is_valid_solution(columns: Sequence[int]) -> bool:
    """Full check of a placement, independent of any tracking arrays.

    Args:
        columns: columns[y] is the column of the queen in row y.

    Returns:
        True if every row holds a queen and no two queens share a column
        or a diagonal.
    """
    n = len(columns)
    if n == 0:
        return False
    if any(not (0 <= x < n) for x in columns):
        return False
    if len(set(columns)) != n:
        return False
    if len({y - x for y, x in enumerate(columns)}) != n:
        return False
    if len({y + x for y, x in enumerate(columns)}) != n:
        return False
    return True
