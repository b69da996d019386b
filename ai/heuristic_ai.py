"""Heuristic AI: win if possible, otherwise block, otherwise first free cell."""

from __future__ import annotations

import logging
from typing import Optional

from ai.base_ai import BaseAI
from engine.board import Board, Move
from engine.pieces import Cell
from engine.rules import BOARD_COLS, BOARD_ROWS, WINNING_LINES, Position

LOGGER = logging.getLogger(__name__)


def find_completing_cell(board: Board, piece: Cell) -> Optional[Position]:
    """Return the empty cell of the first line holding two of `piece`.

    Lines are scanned in WINNING_LINES order, so ties are broken the same way
    every time.
    """
    for line in WINNING_LINES:
        own = 0
        empty: Optional[Position] = None
        for row, col in line:
            cell = board.get(row, col)
            if cell is piece:
                own += 1
            elif cell is Cell.EMPTY:
                empty = (row, col)
        if own == 2 and empty is not None:
            return empty
    return None


class HeuristicAI(BaseAI):
    """Rule-based AI for the 3x3 board."""

    def choose_move(self, board: Board) -> Move:
        if (board.rows, board.cols) != (BOARD_ROWS, BOARD_COLS):
            raise ValueError(f"HeuristicAI only plays on a {BOARD_ROWS}x{BOARD_COLS} board")
        if board.is_full():
            raise RuntimeError("No legal moves available.")

        target = find_completing_cell(board, self.piece)
        if target is not None:
            LOGGER.debug("Heuristic AI (%s) completes a line at %s", self.piece.symbol, target)
            return Move(target[0], target[1], self.piece)

        target = find_completing_cell(board, self.piece.opponent())
        if target is not None:
            LOGGER.debug("Heuristic AI (%s) blocks at %s", self.piece.symbol, target)
            return Move(target[0], target[1], self.piece)

        move = self._first_empty(board)
        LOGGER.debug("Heuristic AI (%s) falls back to %s", self.piece.symbol, move.position)
        return move
