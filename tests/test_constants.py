import unittest

from constants import (
    STATS_REPS,
    STATS_REPS_PER_BOARD,
    get_stats_reps,
    recommend_random_queens,
)


class TestStatsReps(unittest.TestCase):

    def test_exact_override(self):
        self.assertEqual(get_stats_reps(8), STATS_REPS_PER_BOARD["8"])
        self.assertEqual(get_stats_reps(39), STATS_REPS_PER_BOARD["39"])

    def test_nearest_override(self):
        self.assertEqual(get_stats_reps(9), STATS_REPS_PER_BOARD["8"])
        self.assertEqual(get_stats_reps(40), STATS_REPS_PER_BOARD["39"])
        self.assertEqual(get_stats_reps(1000), STATS_REPS_PER_BOARD["64"])

    def test_global_default_is_positive(self):
        self.assertGreaterEqual(STATS_REPS, 1)


class TestRecommendRandomQueens(unittest.TestCase):

    def test_anchor_values(self):
        self.assertEqual(recommend_random_queens(100), 88)
        self.assertEqual(recommend_random_queens(1000), 983)

    def test_small_boards_use_plain_backtracking(self):
        for n in (1, 4, 8, 20):
            self.assertEqual(recommend_random_queens(n), 0)

    def test_large_boards_keep_last_tail(self):
        self.assertEqual(recommend_random_queens(5000), 4983)

    def test_always_in_range(self):
        for n in range(0, 300, 7):
            k = recommend_random_queens(n)
            self.assertTrue(0 <= k <= max(0, n), f"n={n} k={k}")


if __name__ == "__main__":
    unittest.main()
