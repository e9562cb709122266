"""Tests for the board state and placement operations.

Validates:
  - Fresh boards have every row unplaced and every line free
  - place/remove keep the column and diagonal tracks in lockstep
  - A well-nested place/remove sequence restores a fresh board
  - Contract violations raise instead of corrupting state
  - The independent solution check
"""

import unittest

from board import (
    Board,
    BoardSizeError,
    PlacementError,
    create_board,
    dispose_board,
    falling_index,
    is_valid_solution,
    read_solution,
    reset_board,
    rising_index,
)
from constants import UNPLACED


def _snapshot(board):
    return (
        board.size,
        list(board.solution),
        list(board.column_free),
        list(board.diag_rising_free),
        list(board.diag_falling_free),
    )


class TestBoardCreation(unittest.TestCase):

    def test_fresh_board_is_empty_and_free(self):
        for n in range(1, 9):
            board = create_board(n)
            self.assertEqual(board.solution, [UNPLACED] * n)
            self.assertEqual(board.column_free, [True] * n)
            self.assertEqual(board.diag_rising_free, [True] * (2 * n - 1))
            self.assertEqual(board.diag_falling_free, [True] * (2 * n - 1))
            self.assertFalse(board.is_complete())
            self.assertEqual(board.placed_count(), 0)

    def test_non_positive_size_rejected(self):
        for bad in (0, -1, -8):
            with self.assertRaises(BoardSizeError):
                Board(bad)

    def test_non_integer_size_rejected(self):
        for bad in (2.5, "8", True, None):
            with self.assertRaises(BoardSizeError):
                Board(bad)

    def test_size_error_is_value_error(self):
        self.assertTrue(issubclass(BoardSizeError, ValueError))


class TestIndexMapping(unittest.TestCase):

    def test_rising_index(self):
        self.assertEqual(rising_index(4, 0, 0), 3)
        self.assertEqual(rising_index(4, 3, 0), 0)
        self.assertEqual(rising_index(4, 0, 3), 6)

    def test_falling_index(self):
        self.assertEqual(falling_index(4, 0, 0), 0)
        self.assertEqual(falling_index(4, 3, 3), 6)
        self.assertEqual(falling_index(4, 1, 2), 3)

    def test_every_square_maps_inside_the_tracks(self):
        n = 6
        for y in range(n):
            for x in range(n):
                self.assertTrue(0 <= rising_index(n, x, y) < 2 * n - 1)
                self.assertTrue(0 <= falling_index(n, x, y) < 2 * n - 1)


class TestPlacement(unittest.TestCase):

    def test_place_marks_all_tracks(self):
        board = Board(4)
        board.place(1, 0)
        self.assertEqual(board.solution, [1, UNPLACED, UNPLACED, UNPLACED])
        self.assertFalse(board.column_free[1])
        self.assertFalse(board.diag_rising_free[rising_index(4, 1, 0)])
        self.assertFalse(board.diag_falling_free[falling_index(4, 1, 0)])
        self.assertEqual(board.placed_count(), 1)

    def test_can_place_sees_attacks(self):
        board = Board(4)
        board.place(1, 0)
        self.assertFalse(board.can_place(1, 2))  # same column
        self.assertFalse(board.can_place(2, 1))  # rising diagonal
        self.assertFalse(board.can_place(0, 1))  # falling diagonal
        self.assertTrue(board.can_place(3, 1))

    def test_can_place_does_not_mutate(self):
        board = Board(5)
        board.place(2, 0)
        before = _snapshot(board)
        for y in range(5):
            for x in range(5):
                board.can_place(x, y)
        self.assertEqual(_snapshot(board), before)

    def test_remove_frees_all_tracks(self):
        board = Board(4)
        board.place(1, 0)
        board.remove(1, 0)
        self.assertEqual(_snapshot(board), _snapshot(Board(4)))

    def test_well_nested_unwind_restores_fresh_board(self):
        fresh = _snapshot(Board(8))
        board = Board(8)
        placements = [(0, 0), (4, 1), (7, 2), (5, 3), (2, 4), (6, 5), (1, 6), (3, 7)]
        for x, y in placements:
            board.place(x, y)
        self.assertTrue(board.is_complete())
        for x, y in reversed(placements):
            board.remove(x, y)
        self.assertEqual(_snapshot(board), fresh)

    def test_partial_unwind_matches_shorter_history(self):
        board = Board(6)
        board.place(1, 0)
        expected = _snapshot(board)
        board.place(3, 1)
        board.place(5, 2)
        board.remove(5, 2)
        board.remove(3, 1)
        self.assertEqual(_snapshot(board), expected)

    def test_placing_on_attacked_square_raises(self):
        board = Board(4)
        board.place(1, 0)
        before = _snapshot(board)
        with self.assertRaises(PlacementError):
            board.place(1, 3)
        with self.assertRaises(PlacementError):
            board.place(2, 1)
        self.assertEqual(_snapshot(board), before)

    def test_placing_twice_in_a_row_raises(self):
        board = Board(8)
        board.place(0, 0)
        with self.assertRaises(PlacementError):
            board.place(5, 0)

    def test_removing_missing_queen_raises(self):
        board = Board(4)
        with self.assertRaises(PlacementError):
            board.remove(0, 0)
        board.place(1, 0)
        with self.assertRaises(PlacementError):
            board.remove(2, 0)
        self.assertEqual(board.solution[0], 1)

    def test_out_of_range_square_raises(self):
        board = Board(4)
        for x, y in ((-1, 0), (4, 0), (0, -1), (0, 4)):
            with self.assertRaises(PlacementError):
                board.can_place(x, y)
            with self.assertRaises(PlacementError):
                board.place(x, y)

    def test_is_complete_checks_last_row(self):
        board = Board(4)
        for x, y in ((1, 0), (3, 1), (0, 2)):
            board.place(x, y)
            self.assertFalse(board.is_complete())
        board.place(2, 3)
        self.assertTrue(board.is_complete())


class TestResetAndDispose(unittest.TestCase):

    def test_reset_restores_fresh_state_in_place(self):
        board = Board(4)
        lists = (board.solution, board.column_free, board.diag_rising_free, board.diag_falling_free)
        for x, y in ((1, 0), (3, 1), (0, 2), (2, 3)):
            board.place(x, y)
        reset_board(board)
        self.assertEqual(_snapshot(board), _snapshot(Board(4)))
        self.assertIs(board.solution, lists[0])
        self.assertIs(board.column_free, lists[1])
        self.assertIs(board.diag_rising_free, lists[2])
        self.assertIs(board.diag_falling_free, lists[3])

    def test_disposed_board_refuses_use(self):
        board = Board(4)
        dispose_board(board)
        with self.assertRaises(PlacementError):
            board.place(0, 0)
        with self.assertRaises(PlacementError):
            board.reset()

    def test_disposed_board_refuses_queries(self):
        board = Board(4)
        board.place(1, 0)
        dispose_board(board)
        with self.assertRaises(PlacementError):
            board.can_place(3, 1)
        with self.assertRaises(PlacementError):
            board.is_complete()
        with self.assertRaises(PlacementError):
            board.placed_count()
        with self.assertRaises(PlacementError):
            read_solution(board)

    def test_read_solution_is_a_copy(self):
        board = Board(4)
        board.place(2, 0)
        columns = read_solution(board)
        columns[0] = 0
        self.assertEqual(board.solution[0], 2)


class TestIsValidSolution(unittest.TestCase):

    def test_known_solutions(self):
        self.assertTrue(is_valid_solution([0]))
        self.assertTrue(is_valid_solution([1, 3, 0, 2]))
        self.assertTrue(is_valid_solution([2, 0, 3, 1]))
        self.assertTrue(is_valid_solution([0, 4, 7, 5, 2, 6, 1, 3]))

    def test_shared_column(self):
        self.assertFalse(is_valid_solution([1, 3, 1, 2]))

    def test_shared_diagonal(self):
        self.assertFalse(is_valid_solution([0, 1, 2, 3]))
        self.assertFalse(is_valid_solution([3, 2, 1, 0]))

    def test_unplaced_or_out_of_range(self):
        self.assertFalse(is_valid_solution([1, 3, 0, UNPLACED]))
        self.assertFalse(is_valid_solution([1, 3, 0, 4]))
        self.assertFalse(is_valid_solution([]))


if __name__ == "__main__":
    unittest.main()
