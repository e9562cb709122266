from typing import List, Optional, Sequence

import matplotlib.pyplot as plt
import numpy as np

from constants import UNPLACED

# Above this size queens are drawn as dots instead of letters
TEXT_QUEENS_MAX = 32


def format_solution(columns: Sequence[int]) -> str:
    """One line, e.g. [1,3,0,2]."""
    return "[" + ",".join(str(x) for x in columns) + "]"


def render_board(columns: Sequence[int]) -> str:
    n = len(columns)
    rows = []
    for x_queen in columns:
        rows.append(" ".join("Q" if x == x_queen else "." for x in range(n)))
    return "\n".join(rows)


def print_board_box(columns: Sequence[int], title: Optional[str] = None) -> None:
    lines = render_board(columns).splitlines()
    width = max((len(line) for line in lines), default=0)
    if title:
        print(title)
    print("+" + "-" * (width + 2) + "+")
    for line in lines:
        print("| " + line.ljust(width) + " |")
    print("+" + "-" * (width + 2) + "+")


def _checkerboard(n: int) -> np.ndarray:
    ##Alternating pattern (like a chessboard), 1 = white tile
    idx = np.arange(n)
    return ((idx[:, None] + idx[None, :]) % 2 == 0).astype(float)


def plot_board(columns: Sequence[int], title: Optional[str] = None):
    """Draw a placement on a chessboard and return the figure."""
    n = len(columns)
    fig, ax = plt.subplots(figsize=(8, 8))
    fig.patch.set_facecolor('grey')
    ax.set_facecolor('grey')
    ax.imshow(_checkerboard(n), cmap='binary', interpolation='nearest')

    placed = [(x, y) for y, x in enumerate(columns) if x != UNPLACED]
    if n <= TEXT_QUEENS_MAX:
        for x, y in placed:
            ##Black tiles get a white Q, white tiles a black one
            color = 'white' if (x + y) % 2 == 0 else 'black'
            ax.text(x, y, 'Q', fontsize=200 / n, ha='center', va='center',
                    color=color, weight='bold')
    elif placed:
        xs, ys = zip(*placed)
        ax.scatter(xs, ys, s=max(1.0, 4000.0 / n), c='red', marker='s')

    ax.set_xticks([])
    ax.set_yticks([])
    ax.set_title(title or f'{n}-Queens Solution', color='white', fontsize=16)
    fig.tight_layout()
    return fig


def plot_stats(rows: List, board_size: int):
    """Success probability and mean time per solve against k."""
    ks = [r.random_queens for r in rows]
    probs = [r.success_probability for r in rows]
    times = [r.mean_ms for r in rows]

    fig, (ax_s, ax_t) = plt.subplots(2, 1, figsize=(8, 8), sharex=True)
    ax_s.plot(ks, probs, 'b-', linewidth=2, marker='o', markersize=4)
    ax_s.set_ylabel('Success probability', fontsize=10)
    ax_s.set_title(f'Las Vegas + backtracking, n = {board_size}')
    ax_s.grid(True, alpha=0.3)

    ax_t.plot(ks, times, 'r-', linewidth=2, marker='o', markersize=4)
    ax_t.set_xlabel('Random queens (k)', fontsize=10)
    ax_t.set_ylabel('Mean time (ms)', fontsize=10)
    ax_t.grid(True, alpha=0.3)

    fig.tight_layout()
    return fig


def show() -> None:
    plt.show()
