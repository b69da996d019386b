"""Naive AI: takes the first free cell."""

from __future__ import annotations

import logging

from ai.base_ai import BaseAI
from engine.board import Board, Move

LOGGER = logging.getLogger(__name__)


class NaiveAI(BaseAI):
    """Scans row-major and plays the first empty cell."""

    def choose_move(self, board: Board) -> Move:
        move = self._first_empty(board)
        LOGGER.debug("Naive AI (%s) plays %s", self.piece.symbol, move.position)
        return move
