"""Tic-tac-toe board state and move placement."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence

import numpy as np

from engine.pieces import CELL_VALUES, Cell
from engine.rules import BOARD_COLS, BOARD_ROWS, Position, in_bounds


@dataclass(frozen=True)
class Move:
    """A request to put a piece on one cell."""

    row: int
    col: int
    piece: Cell

    def __post_init__(self) -> None:
        if not self.piece.is_piece:
            raise ValueError(f"Move needs an X or O piece, got {self.piece!r}")

    @property
    def position(self) -> Position:
        return (self.row, self.col)


class Board:
    """Fixed-size grid where every cell is filled at most once."""

    def __init__(self, rows: int = BOARD_ROWS, cols: int = BOARD_COLS) -> None:
        if rows <= 0 or cols <= 0:
            raise ValueError(f"Board dimensions must be positive, got {rows}x{cols}")
        self._rows = rows
        self._cols = cols
        self.grid: List[List[Cell]] = [[Cell.EMPTY for _ in range(cols)] for _ in range(rows)]

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "Board":
        """Build a board from symbol strings, e.g. ["XO.", "...", "..."]."""
        board = cls(rows=len(rows), cols=len(rows[0]) if rows else 0)
        for row, line in enumerate(rows):
            if len(line) != board.cols:
                raise ValueError(f"Row {row} has {len(line)} cells, expected {board.cols}")
            for col, symbol in enumerate(line):
                cell = Cell(symbol.upper())
                if cell.is_piece:
                    board.place(Move(row, col, cell))
        return board

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    def iter_positions(self) -> Iterable[Position]:
        """Yield all board positions in row-major order."""
        for row in range(self._rows):
            for col in range(self._cols):
                yield (row, col)

    def get(self, row: int, col: int) -> Cell:
        return self.grid[row][col]

    def place(self, move: Move) -> bool:
        """Put move.piece on an empty in-bounds cell; return False otherwise."""
        if not in_bounds(move.position, self._rows, self._cols):
            return False
        if self.grid[move.row][move.col] is not Cell.EMPTY:
            return False
        self.grid[move.row][move.col] = move.piece
        return True

    def is_full(self) -> bool:
        return all(cell is not Cell.EMPTY for row in self.grid for cell in row)

    def empty_cells(self) -> List[Position]:
        return [pos for pos in self.iter_positions() if self.get(*pos) is Cell.EMPTY]

    def to_array(self) -> np.ndarray:
        """Encode the grid as int8 (X=+1, O=-1, empty=0)."""
        return np.array([[CELL_VALUES[cell] for cell in row] for row in self.grid], dtype=np.int8)

    def render_ascii(self) -> str:
        """Return the board as console text, one line per row."""
        return "\n".join(" ".join(cell.symbol for cell in row) for row in self.grid)

    def __str__(self) -> str:
        return self.render_ascii()
