"""Cell values and piece helpers for tic-tac-toe."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple


class Cell(str, Enum):
    """State of a single board cell."""

    EMPTY = "."
    X = "X"
    O = "O"

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def is_piece(self) -> bool:
        return self is not Cell.EMPTY

    def opponent(self) -> "Cell":
        if self is Cell.EMPTY:
            raise ValueError("An empty cell has no opponent.")
        return Cell.O if self is Cell.X else Cell.X

    @classmethod
    def from_symbol(cls, text: str) -> "Cell":
        """Parse a piece symbol ("X" or "O", any case)."""
        normalized = text.strip().upper()
        if normalized not in PIECE_BY_SYMBOL:
            raise ValueError(f"Unknown piece symbol: {text!r}")
        return PIECE_BY_SYMBOL[normalized]


PIECES: Tuple[Cell, Cell] = (Cell.X, Cell.O)

PIECE_BY_SYMBOL: Dict[str, Cell] = {piece.symbol: piece for piece in PIECES}

# Integer encoding used for line sums.
CELL_VALUES: Dict[Cell, int] = {
    Cell.EMPTY: 0,
    Cell.X: 1,
    Cell.O: -1,
}
