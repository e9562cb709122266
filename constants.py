"""
Central defaults and recommendations for the Las Vegas N-Queens solver.

This module provides:
 - BOARD_SIZE: default board size
 - UNPLACED: marker for a row without a queen
 - get_stats_reps(n): how many repetitions a stats sweep takes per k
 - recommend_random_queens(n): a good number of random queens for solving
   a single large board quickly
 - DEMO_PLAN: the sequence of runs performed by ``app.py --demo``
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

# Problem constant: default board size
BOARD_SIZE = 8  # Try 8, 39, 100, 1000, ...

# solution[y] == UNPLACED means row y holds no queen
UNPLACED = -1

# Retry cap for the Las Vegas loop. None = retry until success.
MAX_TRIALS: Optional[int] = None

# Board sizes with no solution at all; an uncapped retry loop never ends
UNSOLVABLE_SIZES = (2, 3)

# Defaults for stats sweeps
STATS_REPS = 1000             # Default repetitions per k when measuring

# Per-board-size overrides for stats repetitions. Every k from n down to 0
# is measured, and large k on large boards needs many trials per success.
STATS_REPS_PER_BOARD: Dict[str, int] = {
    "8": 100000,
    "12": 20000,
    "16": 5000,
    "20": 2000,
    "39": 100,
    "64": 20,
}

# CSV layout of a stats sweep: k;t;s
CSV_DELIMITER = ";"
CSV_HEADER = ["k", "t", "s"]
CSV_PRECISION = 5


def get_stats_reps(n: int) -> int:
    """Return the repetitions per k for a stats sweep on board size n.

    Priority:
      1) Exact per-board override in STATS_REPS_PER_BOARD if present
      2) Nearest-neighbour per-board override (closest defined n)
      3) Global STATS_REPS fallback
    """
    n_int = int(n)
    reps = STATS_REPS_PER_BOARD.get(str(n_int))
    if reps is None and STATS_REPS_PER_BOARD:
        candidates = [(abs(int(k) - n_int), int(k)) for k in STATS_REPS_PER_BOARD]
        _, nearest = min(candidates, key=lambda t: t[0])
        reps = STATS_REPS_PER_BOARD[str(nearest)]
    if reps is None:
        reps = STATS_REPS
    return max(1, int(reps))


# Anchors for the backtracking tail (n - k) left after the random prefix.
# Small boards are solved fastest by plain backtracking; for 100 and 1000
# the tails come from measured runs (k=88 and k=983).
TAIL_ANCHORS: List[tuple[int, int]] = [
    (20, 20),
    (100, 12),
    (1000, 17),
]


def recommend_random_queens(n: int) -> int:
    """Return a recommended number of random queens for board size n.

    The backtracking tail n - k is linearly interpolated between
    TAIL_ANCHORS, clamped at both ends, and the result is kept in 0..n.
    """
    ni = int(n)
    if ni <= 0:
        return 0

    # Below the smallest anchor -> pure backtracking
    if ni <= TAIL_ANCHORS[0][0]:
        return 0
    # Above the largest anchor -> keep the last tail
    if ni >= TAIL_ANCHORS[-1][0]:
        tail = TAIL_ANCHORS[-1][1]
    else:
        for i in range(1, len(TAIL_ANCHORS)):
            if ni <= TAIL_ANCHORS[i][0]:
                n_lo, tail_lo = TAIL_ANCHORS[i - 1]
                n_hi, tail_hi = TAIL_ANCHORS[i]
                break
        t = (ni - n_lo) / max(1, n_hi - n_lo)
        tail = int(round(tail_lo + t * (tail_hi - tail_lo)))
    return max(0, min(ni, ni - tail))


# What ``app.py --demo`` runs, in order. Repetitions are far below what a
# compiled solver can afford; raise them for publication-quality numbers.
DEMO_PLAN: List[Dict[str, Any]] = [
    {"mode": "stats", "board_size": 8, "reps": 10000},
    {"mode": "solution", "board_size": 100, "random_queens": 88},
    {"mode": "solution", "board_size": 1000, "random_queens": 983},
    {"mode": "stats", "board_size": 39, "reps": 10},
]
