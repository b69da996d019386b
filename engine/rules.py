"""Line geometry and victory evaluation for the 3x3 board."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Tuple

from engine.pieces import Cell

if TYPE_CHECKING:
    from engine.board import Board

BOARD_ROWS = 3
BOARD_COLS = 3

Position = Tuple[int, int]
Line = Tuple[Position, Position, Position]


def _build_lines() -> List[Line]:
    lines: List[Line] = []
    for row in range(BOARD_ROWS):
        lines.append(((row, 0), (row, 1), (row, 2)))
    for col in range(BOARD_COLS):
        lines.append(((0, col), (1, col), (2, col)))
    lines.append(((0, 0), (1, 1), (2, 2)))
    lines.append(((0, 2), (1, 1), (2, 0)))
    return lines


# Scan order: rows top-to-bottom, columns left-to-right, main diagonal, anti-diagonal.
WINNING_LINES: Tuple[Line, ...] = tuple(_build_lines())


def in_bounds(pos: Position, rows: int = BOARD_ROWS, cols: int = BOARD_COLS) -> bool:
    """Return whether a position is inside a rows x cols board."""
    row, col = pos
    return 0 <= row < rows and 0 <= col < cols


def _require_standard_board(board: "Board") -> None:
    if (board.rows, board.cols) != (BOARD_ROWS, BOARD_COLS):
        raise ValueError(
            f"Line evaluation needs a {BOARD_ROWS}x{BOARD_COLS} board, got {board.rows}x{board.cols}"
        )


def find_winning_line(board: "Board") -> Optional[Line]:
    """Return the first line holding three identical pieces, if any."""
    _require_standard_board(board)
    grid = board.to_array()
    for line in WINNING_LINES:
        rows, cols = zip(*line)
        total = int(grid[list(rows), list(cols)].sum())
        if abs(total) == len(line):
            return line
    return None


def victory(board: "Board") -> Cell:
    """Return the winning piece, or Cell.EMPTY when nobody has won yet."""
    line = find_winning_line(board)
    if line is None:
        return Cell.EMPTY
    row, col = line[0]
    return board.get(row, col)
