import csv
import random
import sys
import time
from typing import List, Optional, TextIO

import numpy as np

from board import Board
from constants import CSV_DELIMITER, CSV_HEADER, CSV_PRECISION
from las_vegas import TrialsExhaustedError, solve_until_success


class StatsRow:
    def __init__(
        self,
        random_queens: int,
        mean_ms: float,
        mean_trials: float,
        reps: int,
        exhausted: bool = False,
    ) -> None:
        self.random_queens = random_queens
        self.mean_ms = mean_ms
        self.mean_trials = mean_trials
        self.reps = reps
        # True when a solve hit max_trials; the row then reports s = 0
        self.exhausted = exhausted

    @property
    def success_probability(self) -> float:
        # Trials until success are geometric, so 1/E[trials] estimates p
        if self.exhausted or self.mean_trials <= 0:
            return 0.0
        return 1.0 / self.mean_trials

    def to_dict(self) -> dict:
        return {
            "random_queens": self.random_queens,
            "mean_ms": self.mean_ms,
            "mean_trials": self.mean_trials,
            "success_probability": self.success_probability,
            "reps": self.reps,
            "exhausted": self.exhausted,
        }


def measure(
    board: Board,
    random_queens: int,
    reps: int,
    rng: Optional[random.Random] = None,
    max_trials: Optional[int] = None,
) -> StatsRow:
    """Solve the board reps times with random_queens random queens.

    Returns:
        A StatsRow with the mean wall time per solve (ms) and the mean
        number of Las Vegas trials per solve.
    """
    reps = int(reps)
    if reps < 1:
        raise ValueError(f"reps must be >= 1, got {reps}")

    total_trials = 0
    start = time.perf_counter()
    for _ in range(reps):
        total_trials += solve_until_success(board, random_queens, rng, max_trials)
    elapsed = time.perf_counter() - start
    return StatsRow(
        random_queens=random_queens,
        mean_ms=elapsed * 1000.0 / reps,
        mean_trials=total_trials / reps,
        reps=reps,
    )


def sweep(
    board_size: int,
    reps: int,
    rng: Optional[random.Random] = None,
    max_trials: Optional[int] = None,
    verbose: bool = False,
) -> List[StatsRow]:
    """Measure every k from board_size down to 0 on a single board.

    A k whose solve runs out of max_trials still gets a row, marked
    exhausted, with the time spent before giving up; the sweep goes on.
    """
    board = Board(board_size)
    rows: List[StatsRow] = []
    try:
        for k in range(board_size, -1, -1):
            start = time.perf_counter()
            try:
                row = measure(board, k, reps, rng, max_trials)
            except TrialsExhaustedError:
                row = StatsRow(
                    random_queens=k,
                    mean_ms=(time.perf_counter() - start) * 1000.0,
                    mean_trials=float("inf"),
                    reps=reps,
                    exhausted=True,
                )
            rows.append(row)
            if verbose:
                print(
                    f"k={k:4d} | t={row.mean_ms:.5f}ms | s={row.success_probability:.5f} "
                    f"| trials={row.mean_trials:.2f}",
                    file=sys.stderr,
                )
    finally:
        board.dispose()
    return rows


def write_stats_csv(rows: List[StatsRow], fh: TextIO) -> None:
    writer = csv.writer(fh, delimiter=CSV_DELIMITER, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for row in rows:
        writer.writerow([
            row.random_queens,
            f"{row.mean_ms:.{CSV_PRECISION}f}",
            f"{row.success_probability:.{CSV_PRECISION}f}",
        ])


def summarize(rows: List[StatsRow]) -> dict:
    """Aggregate a sweep: fastest solved k and overall means."""
    if not rows:
        return {}
    times = np.array([r.mean_ms for r in rows], dtype=float)
    probs = np.array([r.success_probability for r in rows], dtype=float)
    solved = np.array([not r.exhausted for r in rows])
    best = int(np.argmin(np.where(solved, times, np.inf))) if solved.any() else None
    return {
        "best_random_queens": rows[best].random_queens if best is not None else None,
        "best_mean_ms": float(times[best]) if best is not None else float("nan"),
        "exhausted": [r.random_queens for r in rows if r.exhausted],
        "mean_ms": float(times.mean()),
        "mean_success_probability": float(probs.mean()),
        "min_success_probability": float(probs.min()),
    }
