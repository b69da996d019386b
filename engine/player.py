"""Human move source reading coordinates from the console."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional, Tuple

from engine.board import Board, Move
from engine.pieces import Cell

LOGGER = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


def parse_coordinates(text: str) -> Optional[Tuple[int, int]]:
    """Parse "<row> <col>"; return None unless exactly two integers are given."""
    parts = text.split()
    if len(parts) != 2:
        return None
    try:
        row, col = int(parts[0]), int(parts[1])
    except ValueError:
        return None
    return row, col


@dataclass(frozen=True)
class Player:
    """A human player identified by name and piece."""

    name: str
    piece: Cell
    read_input: InputFn = field(default=input, repr=False, compare=False)
    write_output: OutputFn = field(default=print, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.piece.is_piece:
            raise ValueError(f"Player {self.name!r} needs an X or O piece")

    @property
    def prompt(self) -> str:
        return f"Your turn {self.name} ({self.piece.symbol}): "

    def choose_move(self, board: Board) -> Move:
        """Prompt until a move lands on the board; return the placed move.

        Occupied and out-of-range cells just repeat the prompt. EOFError from
        the input channel is not handled here.
        """
        while True:
            raw = self.read_input(self.prompt)
            coords = parse_coordinates(raw)
            if coords is None:
                LOGGER.warning("Ignoring malformed input from %s: %r", self.name, raw)
                self.write_output("Invalid numeric input.")
                continue
            move = Move(coords[0], coords[1], self.piece)
            if board.place(move):
                return move
