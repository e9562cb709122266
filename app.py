import argparse
import random
import sys
import time
from typing import Optional

from board import Board, BoardSizeError, read_solution
from constants import (
    BOARD_SIZE,
    DEMO_PLAN,
    MAX_TRIALS,
    UNSOLVABLE_SIZES,
    get_stats_reps,
    recommend_random_queens,
)
from las_vegas import TrialsExhaustedError, solve_until_success
from stats import summarize, sweep, write_stats_csv
import view


# ---------------------------
# Runs
# ---------------------------

def run_solution(
    board_size: int,
    random_queens: int,
    rng: Optional[random.Random] = None,
    max_trials: Optional[int] = MAX_TRIALS,
    box: bool = False,
    plot: bool = False,
) -> list:
    """Solve one board and print it. Returns the solution."""
    board = Board(board_size)
    try:
        start = time.perf_counter()
        trials = solve_until_success(board, random_queens, rng, max_trials)
        duration = time.perf_counter() - start
        solution = read_solution(board)
    finally:
        board.dispose()

    print(f"Solved n={board_size} k={random_queens} in {trials} trials ({duration:.3f}s)")
    if box:
        view.print_board_box(solution, title="\nBoard:")
    else:
        print(view.format_solution(solution))
    if plot:
        view.plot_board(solution)
        view.show()
    return solution


def run_stats(
    board_size: int,
    reps: int,
    rng: Optional[random.Random] = None,
    max_trials: Optional[int] = MAX_TRIALS,
    verbose: bool = False,
    plot: bool = False,
) -> list:
    """Sweep k from n down to 0 and print the k;t;s CSV.

    Rows whose solves ran out of max_trials are still written (s = 0)
    and reported with a [warn] on stderr.
    """
    rows = sweep(board_size, reps, rng=rng, max_trials=max_trials, verbose=verbose)
    write_stats_csv(rows, sys.stdout)
    exhausted = [r.random_queens for r in rows if r.exhausted]
    if exhausted:
        print(f"[warn] max_trials={max_trials} reached for k={exhausted}; reported as s=0",
              file=sys.stderr)
    if verbose:
        s = summarize(rows)
        print(
            f"Fastest k={s['best_random_queens']} ({s['best_mean_ms']:.5f}ms) | "
            f"min success={s['min_success_probability']:.5f}",
            file=sys.stderr,
        )
    if plot:
        view.plot_stats(rows, board_size)
        view.show()
    return rows


def run_demo(rng: Optional[random.Random] = None, max_trials: Optional[int] = MAX_TRIALS) -> None:
    for step in DEMO_PLAN:
        n = step["board_size"]
        if step["mode"] == "stats":
            print(f"Some stats for n = {n}:\n")
            run_stats(n, step.get("reps", get_stats_reps(n)), rng=rng, max_trials=max_trials)
        else:
            print(f"A solution for n = {n}:\n")
            run_solution(n, step["random_queens"], rng=rng, max_trials=max_trials)
        print("\n")


# ---------------------------
# Entry point and CLI
# ---------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="N-Queens via Las Vegas random placement plus backtracking"
    )
    parser.add_argument("--board-size", type=int, default=BOARD_SIZE)
    parser.add_argument("--random-queens", type=int, default=None,
                        help="Queens placed randomly before backtracking (default: recommended for n)")
    parser.add_argument("--max-trials", type=int, default=MAX_TRIALS,
                        help="Give up after this many Las Vegas trials (default: never)")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the random generator")
    parser.add_argument("--stats", action="store_true", help="Print k;t;s CSV for every k from n down to 0")
    parser.add_argument("--reps", type=int, default=None, help="Repetitions per k for --stats")
    parser.add_argument("--demo", action="store_true", help="Run the built-in demo sequence")
    parser.add_argument("--box", action="store_true", help="Print the solution as a board")
    parser.add_argument("--plot", action="store_true", help="Show matplotlib figures")
    parser.add_argument("--verbose", action="store_true", help="Progress output for --stats")
    parser.add_argument("--no-run", action="store_true", help="Parse and exit")
    return parser


def main(argv: Optional[list] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.no_run:
        print("Execution disabled (--no-run). Exiting.")
        return 0

    n = args.board_size
    if n <= 0:
        parser.error(f"--board-size must be positive, got {n}")
    k = args.random_queens if args.random_queens is not None else recommend_random_queens(n)
    if not 0 <= k <= n:
        parser.error(f"--random-queens must be in 0..{n}, got {k}")
    if args.max_trials is not None and args.max_trials < 1:
        parser.error(f"--max-trials must be >= 1, got {args.max_trials}")
    if args.reps is not None and args.reps < 1:
        parser.error(f"--reps must be >= 1, got {args.reps}")
    if n in UNSOLVABLE_SIZES and args.max_trials is None and not args.demo:
        parser.error(f"no solution exists for n={n}; pass --max-trials to run anyway")

    rng = random.Random(args.seed)

    try:
        if args.demo:
            run_demo(rng=rng, max_trials=args.max_trials)
            return 0

        if args.stats:
            reps = args.reps if args.reps is not None else get_stats_reps(n)
            print(f"Config | n={n} | reps={reps} | max_trials={args.max_trials} | seed={args.seed}",
                  file=sys.stderr)
            rows = run_stats(n, reps, rng=rng, max_trials=args.max_trials,
                             verbose=args.verbose, plot=args.plot)
            return 1 if any(r.exhausted for r in rows) else 0

        print(f"Config | n={n} | k={k} | max_trials={args.max_trials} | seed={args.seed}")
        run_solution(n, k, rng=rng, max_trials=args.max_trials, box=args.box, plot=args.plot)
    except TrialsExhaustedError as e:
        print(f"[warn] {e}", file=sys.stderr)
        return 1
    except BoardSizeError as e:
        parser.error(str(e))
    except KeyboardInterrupt:
        print("\nInterrupted by user.", file=sys.stderr)
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
