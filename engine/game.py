"""Game state: board, move sources and final status."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional, Union

from ai.base_ai import BaseAI
from ai.heuristic_ai import HeuristicAI
from ai.naive_ai import NaiveAI
from engine.board import Board, Move
from engine.config import DIFFICULTY_NAIVE, GameConfig
from engine.pieces import Cell
from engine.player import InputFn, OutputFn, Player
from engine.rules import victory

LOGGER = logging.getLogger(__name__)

MoveSource = Union[Player, BaseAI]


class GameStatus(str, Enum):
    """Progress of a game; every value but IN_PROGRESS is terminal."""

    IN_PROGRESS = "in_progress"
    X_WON = "x_won"
    O_WON = "o_won"
    DRAW = "draw"


WIN_STATUS = {
    Cell.X: GameStatus.X_WON,
    Cell.O: GameStatus.O_WON,
}


def build_ai(difficulty: int, piece: Cell) -> BaseAI:
    """Difficulty 1 gives the naive AI, anything else the heuristic one."""
    if difficulty == DIFFICULTY_NAIVE:
        return NaiveAI(piece)
    return HeuristicAI(piece)


class Game:
    """One game of tic-tac-toe between player 1 and a human or AI opponent."""

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        read_input: InputFn = input,
        write_output: OutputFn = print,
    ) -> None:
        config = config or GameConfig()
        if config.two_players is None:
            raise ValueError("Game mode must be decided before the game starts")

        self.board = Board()
        self.status = GameStatus.IN_PROGRESS
        self.is_two_player_game = config.two_players
        self.first_player = Player(config.player1_name, config.player1_piece, read_input, write_output)
        self.second_player: MoveSource
        if self.is_two_player_game:
            self.second_player = Player(config.player2_name, config.player2_piece, read_input, write_output)
        else:
            difficulty = config.difficulty if config.difficulty is not None else DIFFICULTY_NAIVE
            self.second_player = build_ai(difficulty, config.player2_piece)
        LOGGER.info(
            "New game: %s (%s) vs %s",
            self.first_player.name,
            self.first_player.piece.symbol,
            self._describe(self.second_player),
        )

    @staticmethod
    def _describe(source: MoveSource) -> str:
        if isinstance(source, Player):
            return f"{source.name} ({source.piece.symbol})"
        return repr(source)

    def make_move(self, first: bool) -> Move:
        """Let the mover whose turn it is put one piece on the board."""
        source = self.first_player if first else self.second_player
        if isinstance(source, Player):
            return source.choose_move(self.board)
        move = source.choose_move(self.board)
        if not self.board.place(move):
            raise RuntimeError(f"{source!r} chose an unavailable cell: {move}")
        return move

    def victory(self) -> Cell:
        """Winning piece, or Cell.EMPTY; recomputed from the board every call."""
        return victory(self.board)

    def set_status(self, status: GameStatus) -> None:
        if self.status is not GameStatus.IN_PROGRESS:
            raise RuntimeError(f"Game already finished with status {self.status.value}")
        self.status = status
        LOGGER.info("Game finished: %s", status.value)

    def resolve_status(self) -> GameStatus:
        """Set the terminal status from the current board."""
        winner = self.victory()
        if winner.is_piece:
            self.set_status(WIN_STATUS[winner])
        elif self.board.is_full():
            self.set_status(GameStatus.DRAW)
        else:
            raise RuntimeError("Game is still in progress.")
        return self.status
