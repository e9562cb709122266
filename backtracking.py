import sys

from board import Board
from constants import UNPLACED

# Headroom over the backtracking depth for the caller's own frames
RECURSION_HEADROOM = 200


def ensure_recursion_limit(depth: int) -> None:
    """Backtracking recurses once per row; make room for depth rows."""
    needed = depth + RECURSION_HEADROOM
    if sys.getrecursionlimit() < needed:
        sys.setrecursionlimit(needed)


def backtrack(board: Board, start_row: int = 0) -> bool:
    """Complete the board row by row from start_row, leftmost column first.

    Recurses once per remaining row and raises the interpreter recursion
    limit to cover board.size - start_row frames.

    Args:
        board: Board with rows 0..start_row-1 placed and the rest empty.
        start_row: First row left to fill.

    Returns:
        True if a full solution was reached. The solution stays on the board.
        On False, rows from start_row on are unplaced again; rows above
        start_row are the caller's to clean up.
    """
    if not 0 <= start_row <= board.size:
        raise ValueError(f"start_row must be in 0..{board.size}, got {start_row}")
    # is_complete() only looks at the last row, so rows must fill in order
    sol = board.solution
    if any(x == UNPLACED for x in sol[:start_row]) or any(x != UNPLACED for x in sol[start_row:]):
        raise ValueError(
            f"backtrack from row {start_row} needs exactly rows 0..{start_row - 1} placed, "
            f"got {sol}"
        )
    ensure_recursion_limit(board.size - start_row)
    return _backtrack(board, start_row)


def _backtrack(board: Board, y: int) -> bool:
    if board.is_complete():
        return True

    for x in range(board.size):
        if board.can_place(x, y):
            board.place(x, y)
            if _backtrack(board, y + 1):
                return True
            board.remove(x, y)
    return False
