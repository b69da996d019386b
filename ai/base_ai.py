"""Base AI interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from engine.board import Board, Move
from engine.pieces import Cell


class BaseAI(ABC):
    """Abstract AI strategy contract.

    Implementations are stateless: every call recomputes from the board.
    """

    def __init__(self, piece: Cell) -> None:
        if not piece.is_piece:
            raise ValueError(f"AI needs an X or O piece, got {piece!r}")
        self._piece = piece

    @property
    def piece(self) -> Cell:
        return self._piece

    @abstractmethod
    def choose_move(self, board: Board) -> Move:
        """Choose a legal move for the given board state."""
        raise NotImplementedError

    def _first_empty(self, board: Board) -> Move:
        for row, col in board.iter_positions():
            if board.get(row, col) is Cell.EMPTY:
                return Move(row, col, self._piece)
        raise RuntimeError("No legal moves available.")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(piece={self._piece.symbol})"
