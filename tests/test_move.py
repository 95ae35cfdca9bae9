from unittest import TestCase, main

from numpy import array

from tilt2048.core.gamemove import (
    adjacent_match_exists,
    at_least_one_move_exists,
    empty_space_exists,
    is_done,
    legal_sides,
    legal_sides_mask,
    max_tile_exists,
)
from tilt2048.core.side import Side

# ##>: Full board without any pair of equal neighbours.
CHECKERED = array([[2, 4, 2, 4], [4, 2, 4, 2], [2, 4, 2, 4], [4, 2, 4, 2]])


class TestGameMove(TestCase):
    def test_legal_sides(self):
        """
        Test if legal sides are correctly identified.
        """
        board = array([[2, 0, 0, 0], [2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        self.assertEqual(legal_sides(board), [Side.NORTH, Side.EAST, Side.SOUTH])

    def test_legal_sides_mask(self):
        """
        Test that a tile in the top-left corner can only go right or down.
        """
        board = array([[2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        mask = legal_sides_mask(board)
        self.assertEqual(
            mask, {Side.NORTH: False, Side.EAST: True, Side.SOUTH: True, Side.WEST: False}
        )

    def test_no_legal_sides(self):
        self.assertEqual(legal_sides(CHECKERED), [])

    def test_empty_board_has_no_legal_side(self):
        self.assertEqual(legal_sides(array([[0, 0], [0, 0]])), [])


class TestGameOver(TestCase):
    def test_empty_space_exists(self):
        self.assertFalse(empty_space_exists(CHECKERED))
        board = CHECKERED.copy()
        board[2, 1] = 0
        self.assertTrue(empty_space_exists(board))

    def test_max_tile_exists(self):
        board = array([[0, 0], [0, 2048]])
        self.assertTrue(max_tile_exists(board, 2048))
        self.assertFalse(max_tile_exists(board, 4096))

    def test_adjacent_match(self):
        """
        Test that only equal tiles match, never empty cells.
        """
        self.assertFalse(adjacent_match_exists(CHECKERED))
        self.assertFalse(adjacent_match_exists(array([[0, 0], [0, 2]])))
        self.assertTrue(adjacent_match_exists(array([[2, 4], [2, 8]])))
        self.assertTrue(adjacent_match_exists(array([[2, 4], [8, 8]])))

    def test_sparse_board(self):
        """
        Test that a board with few tiles is not over and does not fault.
        """
        board = array([[2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 4, 0], [0, 0, 0, 0]])
        self.assertTrue(at_least_one_move_exists(board))
        self.assertFalse(is_done(board, 2048))

    def test_done_by_exhaustion(self):
        self.assertTrue(is_done(CHECKERED, 2048))
        self.assertFalse(max_tile_exists(CHECKERED, 2048))

    def test_done_by_max_tile(self):
        """
        Test that reaching the winning value ends the game despite empty cells.
        """
        board = array([[2048, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        self.assertTrue(is_done(board, 2048))

    def test_not_done_with_merge(self):
        board = CHECKERED.copy()
        board[0, 1] = 2
        self.assertFalse(is_done(board, 2048))


if __name__ == '__main__':
    main()
