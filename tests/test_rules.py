import unittest

from engine.board import Board
from engine.pieces import Cell
from engine.rules import WINNING_LINES, find_winning_line, in_bounds, victory


class TestVictory(unittest.TestCase):
    def test_line_scan_order(self):
        self.assertEqual(len(WINNING_LINES), 8)
        self.assertEqual(WINNING_LINES[0], ((0, 0), (0, 1), (0, 2)))
        self.assertEqual(WINNING_LINES[3], ((0, 0), (1, 0), (2, 0)))
        self.assertEqual(WINNING_LINES[6], ((0, 0), (1, 1), (2, 2)))
        self.assertEqual(WINNING_LINES[7], ((0, 2), (1, 1), (2, 0)))

    def test_row_win(self):
        board = Board.from_rows(["...", "XXX", "OO."])
        self.assertIs(victory(board), Cell.X)
        self.assertEqual(find_winning_line(board), ((1, 0), (1, 1), (1, 2)))

    def test_column_win(self):
        board = Board.from_rows(["XO.", "XO.", ".OX"])
        self.assertIs(victory(board), Cell.O)

    def test_diagonal_wins(self):
        self.assertIs(victory(Board.from_rows(["XO.", "OX.", "..X"])), Cell.X)
        self.assertIs(victory(Board.from_rows(["XXO", ".O.", "OX."])), Cell.O)

    def test_no_winner(self):
        self.assertIs(victory(Board()), Cell.EMPTY)
        self.assertIs(victory(Board.from_rows(["XO.", ".X.", "..O"])), Cell.EMPTY)
        self.assertIsNone(find_winning_line(Board.from_rows(["XOX", "XOO", "OXX"])))

    def test_mixed_line_is_not_a_win(self):
        self.assertIs(victory(Board.from_rows(["XXO", "...", "..."])), Cell.EMPTY)

    def test_recomputed_after_each_placement(self):
        board = Board.from_rows(["XX.", "OO.", "..."])
        self.assertIs(victory(board), Cell.EMPTY)
        board.grid[0][2] = Cell.X
        self.assertIs(victory(board), Cell.X)

    def test_requires_three_by_three(self):
        with self.assertRaises(ValueError):
            victory(Board(rows=4, cols=4))

    def test_in_bounds(self):
        self.assertTrue(in_bounds((2, 2)))
        self.assertFalse(in_bounds((3, 0)))
        self.assertFalse(in_bounds((0, -1)))
        self.assertTrue(in_bounds((3, 4), rows=4, cols=5))


if __name__ == "__main__":
    unittest.main()
