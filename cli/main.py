"""CLI entrypoint for playing tic-tac-toe in the terminal."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from engine.config import DIFFICULTY_HEURISTIC, DIFFICULTY_NAIVE, GameConfig
from engine.game import Game, GameStatus
from engine.pieces import Cell
from engine.player import InputFn, OutputFn

LOGGER = logging.getLogger("tictactoe.cli")

MODE_VS_AI = 1
MODE_VS_HUMAN = 2

RESULT_MESSAGES = {
    GameStatus.DRAW: "Draw!",
    GameStatus.O_WON: "O won!",
    GameStatus.X_WON: "X won!",
}


class ConsoleRunner:
    """Drives the turn loop and reports the result."""

    def __init__(self, game: Game, output: OutputFn = print) -> None:
        self.game = game
        self.output = output

    def play(self) -> GameStatus:
        first_to_move = True
        board = self.game.board
        while not board.is_full() and not self.game.victory().is_piece:
            self.output(board.render_ascii())
            self.game.make_move(first_to_move)
            first_to_move = not first_to_move

        self.output(board.render_ascii())
        return self.game.resolve_status()

    def result_message(self) -> str:
        status = self.game.status
        if status is GameStatus.IN_PROGRESS:
            raise RuntimeError("Game has not finished yet.")
        return RESULT_MESSAGES[status]

    def print_result(self) -> None:
        self.output(self.result_message())


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play tic-tac-toe in the terminal.")
    parser.add_argument("--config", type=str, default=None, help="Path to game config JSON")
    parser.add_argument(
        "--mode",
        type=int,
        default=None,
        choices=[MODE_VS_AI, MODE_VS_HUMAN],
        help="1 - player vs AI, 2 - player vs player (asked interactively when omitted)",
    )
    parser.add_argument(
        "--difficulty",
        type=int,
        default=None,
        choices=[DIFFICULTY_NAIVE, DIFFICULTY_HEURISTIC],
        help="AI level: 1 - naive, 2 - heuristic (asked interactively when omitted)",
    )
    parser.add_argument("--name1", type=str, default=None, help="Name of the first player")
    parser.add_argument("--name2", type=str, default=None, help="Name of the second player")
    parser.add_argument(
        "--symbol",
        type=str,
        default=None,
        choices=["X", "O", "x", "o"],
        help="Piece of the first player, who always moves first",
    )
    parser.add_argument("--log-level", type=str, default="WARNING", help="Python logging level")
    return parser.parse_args(argv)


def read_int(read_input: InputFn, prompt: str) -> int:
    raw = read_input(prompt).strip()
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"Expected a number, got {raw!r}") from None


def build_config(args: argparse.Namespace) -> GameConfig:
    """Merge the optional config file with command-line overrides."""
    config = GameConfig.from_json(args.config) if args.config else GameConfig()
    if args.mode is not None:
        config.two_players = args.mode == MODE_VS_HUMAN
    if args.difficulty is not None:
        config.difficulty = args.difficulty
    if args.name1 is not None:
        config.player1_name = args.name1
    if args.name2 is not None:
        config.player2_name = args.name2
    if args.symbol is not None:
        config.player1_piece = Cell.from_symbol(args.symbol)
    config.validate()
    return config


def complete_config(config: GameConfig, read_input: InputFn, output: OutputFn) -> GameConfig:
    """Ask on the console for the mode and AI level when they are not configured."""
    if config.two_players is None:
        output(f"Choose game mode:\n{MODE_VS_AI} - Player vs AI\n{MODE_VS_HUMAN} - Player vs Player")
        # Anything other than 1 starts a two-player game.
        config.two_players = read_int(read_input, "") != MODE_VS_AI
    if not config.two_players and config.difficulty is None:
        level = read_int(read_input, "Choose AI level (1 - naive, 2 - heuristic): ")
        config.difficulty = DIFFICULTY_NAIVE if level == DIFFICULTY_NAIVE else DIFFICULTY_HEURISTIC
    return config


def _input_ended(output: OutputFn) -> int:
    LOGGER.error("Input ended before the game finished.")
    output("Input ended before the game finished.")
    return 1


def run_cli(
    argv: Optional[List[str]] = None,
    read_input: InputFn = input,
    output: OutputFn = print,
) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))

    try:
        config = complete_config(build_config(args), read_input, output)
    except (ValueError, OSError) as exc:
        LOGGER.error("Cannot start game: %s", exc)
        output(f"Error: {exc}")
        return 1
    except (EOFError, KeyboardInterrupt):
        return _input_ended(output)

    runner = ConsoleRunner(Game(config, read_input=read_input, write_output=output), output=output)
    try:
        runner.play()
    except (EOFError, KeyboardInterrupt):
        return _input_ended(output)

    runner.print_result()
    return 0


def main() -> None:
    sys.exit(run_cli())


if __name__ == "__main__":
    main()
