import random
from typing import List, Optional

from backtracking import backtrack
from board import Board


class TrialsExhaustedError(RuntimeError):
    def __init__(self, random_queens: int, trials: int) -> None:
        super().__init__(
            f"No solution after {trials} trials with {random_queens} random queens"
        )
        self.random_queens = random_queens
        self.trials = trials


class LasVegasResult:
    def __init__(self, solved: bool, trials: int, solution: Optional[List[int]]) -> None:
        self.solved = solved
        self.trials = trials
        self.solution = solution

    def to_dict(self) -> dict:
        return {
            "solved": self.solved,
            "trials": self.trials,
            "solution": self.solution,
        }


def _check_random_queens(board: Board, random_queens: int) -> None:
    if not 0 <= random_queens <= board.size:
        raise ValueError(
            f"random_queens must be in 0..{board.size}, got {random_queens}"
        )


def solve_random_prefix(
    board: Board, random_queens: int, rng: Optional[random.Random] = None
) -> bool:
    """Place random_queens queens at random, then backtrack from there.

    Args:
        board: An empty board.
        random_queens: How many leading rows get a uniformly random free column.
        rng: Random source; the module-level random stream when None.

    Returns:
        True if the board now holds a full solution. On False the board is
        left partially placed and must be reset before reuse.
    """
    _check_random_queens(board, random_queens)
    if rng is None:
        rng = random

    for y in range(random_queens):
        available_cols = [x for x in range(board.size) if board.can_place(x, y)]
        if not available_cols:
            return False
        board.place(rng.choice(available_cols), y)
    return backtrack(board, random_queens)


def run_las_vegas(
    board: Board,
    random_queens: int,
    rng: Optional[random.Random] = None,
    max_trials: Optional[int] = None,
) -> LasVegasResult:
    """Retry solve_random_prefix on a freshly reset board until it succeeds
    or max_trials attempts have failed. max_trials=None never gives up."""
    _check_random_queens(board, random_queens)
    if max_trials is not None and max_trials < 1:
        raise ValueError(f"max_trials must be >= 1, got {max_trials}")

    trials = 0
    while max_trials is None or trials < max_trials:
        board.reset()
        trials += 1
        if solve_random_prefix(board, random_queens, rng):
            return LasVegasResult(True, trials, board.read_solution())
    return LasVegasResult(False, trials, None)


def solve_until_success(
    board: Board,
    random_queens: int,
    rng: Optional[random.Random] = None,
    max_trials: Optional[int] = None,
) -> int:
    """Return the number of trials needed; the board holds the solution.

    Without max_trials this does not terminate when random_queens makes a
    solution unreachable. With it, TrialsExhaustedError is raised instead.
    """
    result = run_las_vegas(board, random_queens, rng, max_trials)
    if not result.solved:
        raise TrialsExhaustedError(random_queens, result.trials)
    return result.trials
