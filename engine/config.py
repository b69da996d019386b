"""Game configuration loaded from a JSON file and/or command-line options."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, Optional

from engine.pieces import Cell

DIFFICULTY_NAIVE = 1
DIFFICULTY_HEURISTIC = 2
DIFFICULTIES = (DIFFICULTY_NAIVE, DIFFICULTY_HEURISTIC)


class GameConfig:
    """Container for game settings.

    `two_players` and `difficulty` may be None, meaning the runner asks for
    them on the console.
    """

    def __init__(self, payload: Optional[Dict[str, object]] = None) -> None:
        payload = payload or {}
        two_players = payload.get("two_players")
        if two_players is not None and not isinstance(two_players, bool):
            raise ValueError(f"two_players must be true or false, got {two_players!r}")
        self.two_players = two_players
        difficulty = payload.get("difficulty")
        if difficulty is not None and (isinstance(difficulty, bool) or not isinstance(difficulty, (int, str))):
            raise ValueError(f"difficulty must be a number, got {difficulty!r}")
        self.difficulty = None if difficulty is None else int(difficulty)

        players = payload.get("players", {})
        if not isinstance(players, dict):
            raise ValueError(f"players must be a JSON object, got {players!r}")
        self.player1_name = str(players.get("first_name", "Player1"))
        self.player2_name = str(players.get("second_name", "Player2"))
        self.player1_piece = Cell.from_symbol(str(players.get("first_symbol", "X")))

        self.validate()

    @classmethod
    def from_json(cls, path: str | Path) -> "GameConfig":
        payload = json.loads(Path(path).read_text(encoding="utf-8"))
        if not isinstance(payload, dict):
            raise ValueError(f"Config file {path} must hold a JSON object")
        return cls(payload)

    @property
    def player2_piece(self) -> Cell:
        return self.player1_piece.opponent()

    def validate(self) -> None:
        if self.difficulty is not None and self.difficulty not in DIFFICULTIES:
            raise ValueError(f"Difficulty must be one of {DIFFICULTIES}, got {self.difficulty}")
        if not self.player1_name.strip() or not self.player2_name.strip():
            raise ValueError("Player names must not be blank")
