"""
cli.py - Command-line interface for Connect Four

This module provides a terminal Display for the GameController and a small
argparse CLI for playing against the computer, analysing a board position
and benchmarking the engine.
"""

import argparse
import random
import sys
from typing import List, Optional, Sequence

import numpy as np

from connectfour.ai.difficulty_two import DifficultyTwo
from connectfour.ai.factory import MAX_DIFFICULTY, create_ai
from connectfour.debug import debug, DebugLevel
from connectfour.game.board import Board
from connectfour.game.controller import ControllerState, GameController
from connectfour.game.gravity import place_and_settle
from connectfour.game.rules import check_outcome, find_winning_line
from connectfour.utils import ROWS, COLS, GameResult, Player, render_board_ascii

QUIT = 'q'
RESTART = 'r'


class ConsoleDisplay:
    """Display that renders to stdout and reads choices from stdin."""

    def __init__(self, difficulty: Optional[int] = None):
        """
        Args:
            difficulty: Opponent to use for every game instead of asking
        """
        self.difficulty = difficulty
        self.last_grid = np.zeros((ROWS, COLS), dtype=int)
        self.last_result: Optional[GameResult] = None

    def update_board(self, grid: np.ndarray) -> None:
        self.last_grid = grid
        self.last_result = None
        # a finished position is drawn once, with its line marked, by game_over
        if check_outcome(Board.from_rows(grid)).is_game_over():
            return
        print(render_board_ascii(grid))

    def game_over(self, result: GameResult) -> None:
        self.last_result = result
        board = Board.from_rows(self.last_grid)
        print(render_board_ascii(self.last_grid, find_winning_line(board)))

        if result == GameResult.PLAYER_ONE_WIN:
            print("You win! Congratulations!")
        elif result == GameResult.PLAYER_TWO_WIN:
            print("The computer wins! Better luck next time.")
        else:
            print("It's a draw!")

    def prompt_for_opponent_difficulty(self, max_level: int) -> int:
        if self.difficulty is not None:
            return self.difficulty

        while True:
            user_input = input(f"Choose opponent difficulty (1-{max_level}): ").strip()
            try:
                level = int(user_input)
            except ValueError:
                print("Please enter a number.")
                continue

            if 1 <= level <= max_level:
                return level
            print(f"Difficulty must be between 1 and {max_level}.")


class SimpleCLI:
    """Command-line interface for playing and inspecting Connect Four."""

    def __init__(self):
        self.args = None

    def parse_args(self, argv: Optional[Sequence[str]] = None) -> None:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(description='Connect Four against the computer')
        parser.add_argument('--debug', action='store_true', help='Enable debug logging')
        parser.add_argument('--debug-level', default=None,
                            choices=[level.name.lower() for level in DebugLevel],
                            help='Set the log level explicitly')
        parser.add_argument('--log-file', default=None, help='Also write logs to this file')

        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        play_parser = subparsers.add_parser('play', help='Play a game interactively')
        play_parser.add_argument('--difficulty', type=int, choices=range(1, MAX_DIFFICULTY + 1),
                                 help='Opponent difficulty (asked for when omitted)')
        play_parser.add_argument('--seed', type=int, default=None,
                                 help='Seed for the opponent\'s random moves')

        test_parser = subparsers.add_parser('test', help='Analyse a board position')
        test_parser.add_argument('--position', type=str, required=True,
                                 help=f'{ROWS * COLS} comma-separated cell values, top row first')

        benchmark_parser = subparsers.add_parser('benchmark', help='Benchmark performance')
        benchmark_parser.add_argument('--iterations', type=int, default=1000,
                                      help='Number of iterations for benchmarking')

        self.args = parser.parse_args(argv)

        if self.args.debug_level:
            debug.set_from_string(self.args.debug_level)
        elif self.args.debug:
            debug.configure(level=DebugLevel.DEBUG)
        else:
            debug.configure(level=DebugLevel.INFO)

        if self.args.log_file:
            debug.configure(log_file=self.args.log_file)

    def run(self, argv: Optional[Sequence[str]] = None) -> int:
        """Run the command selected on the command line."""
        if not self.args:
            self.parse_args(argv)

        if self.args.command == 'play':
            self.play_game()
        elif self.args.command == 'test':
            return self.test_position()
        elif self.args.command == 'benchmark':
            self.benchmark()
        else:
            print("Please specify a command. Use --help for options.")
            return 1
        return 0

    def play_game(self) -> None:
        """Play Connect Four against the computer."""
        rng = random.Random(self.args.seed) if self.args.seed is not None else None
        display = ConsoleDisplay(difficulty=self.args.difficulty)
        controller = GameController(display, rng=rng)

        print("Starting a new Connect Four game!")
        print(f"Enter a column number (0-{COLS - 1}) to drop a piece.")
        print(f"Other commands: '{QUIT}' to quit, '{RESTART}' to restart.")
        controller.reset()

        while True:
            if controller.state == ControllerState.GAME_OVER:
                prompt = f"Game over. '{RESTART}' to play again, '{QUIT}' to quit: "
            else:
                prompt = f"Your move (0-{COLS - 1}, {QUIT}/{RESTART}): "

            user_input = input(prompt).strip().lower()
            if user_input == QUIT:
                print("Quitting game.")
                return
            if user_input == RESTART:
                controller.reset()
                continue
            if controller.state == ControllerState.GAME_OVER:
                continue

            try:
                col = int(user_input)
            except ValueError:
                print("Invalid input. Please enter a column number or a command.")
                continue

            if not controller.add_piece(col):
                print(f"Column {col} cannot be played. Try another.")
            elif controller.state != ControllerState.GAME_OVER:
                print(f"The computer plays column {controller.last_ai_move}")

    def test_position(self) -> int:
        """Analyse a board position given on the command line."""
        try:
            values = [int(v) for v in self.args.position.split(',')]
            if len(values) != ROWS * COLS:
                raise ValueError(f"Position string must have {ROWS * COLS} values")
            board = Board.from_rows(np.array(values).reshape(ROWS, COLS))
        except (ValueError, IndexError) as e:
            print(f"Error parsing position: {e}")
            return 1

        print("Loaded position:")
        print(render_board_ascii(board.grid, find_winning_line(board)))

        if not board.is_settled():
            print("Warning: some pieces are floating above empty cells")

        result = check_outcome(board)
        print(f"\nOutcome: {result.name}")
        line = find_winning_line(board)
        if line:
            print(f"Winning line: {line}")

        empty_count = int(np.count_nonzero(board.grid == Player.EMPTY.value))
        print(f"Empty spaces: {empty_count}")
        print(f"Playable columns: {board.playable_columns()}")

        if not result.is_game_over():
            ai = DifficultyTwo()
            ai.board = board.copy()
            print(f"Difficulty Two would play column {ai.select_column()}")
        return 0

    def benchmark(self) -> None:
        """Benchmark settling, outcome checks and full games."""
        iterations = self.args.iterations
        print(f"Running benchmark with {iterations} iterations...")

        # Settling tokens into random playable columns
        board = Board()
        debug.start_timer("settle")
        moves_made = 0
        for _ in range(iterations):
            columns = board.playable_columns()
            if not columns:
                board.reset()
                continue
            token = Player.ONE if moves_made % 2 == 0 else Player.TWO
            place_and_settle(board, random.choice(columns), token)
            moves_made += 1
        settle_time = self._stop("settle")
        print(f"Settling {moves_made} moves: {settle_time:.6f} seconds total, "
              f"{settle_time / max(moves_made, 1) * 1000:.6f} ms per move")

        # Outcome checks on partially filled boards
        debug.start_timer("outcome")
        for _ in range(iterations):
            check_outcome(board)
        outcome_time = self._stop("outcome")
        print(f"Performing {iterations} outcome checks: {outcome_time:.6f} seconds total, "
              f"{outcome_time / max(iterations, 1) * 1000:.6f} ms per check")

        # Full games: random human against each difficulty
        for difficulty in range(1, MAX_DIFFICULTY + 1):
            games = max(iterations // 10, 1)
            results = {result: 0 for result in GameResult if result.is_game_over()}
            debug.start_timer(f"games_{difficulty}")
            for _ in range(games):
                results[self._simulate_game(difficulty)] += 1
            games_time = self._stop(f"games_{difficulty}")
            summary = ", ".join(f"{result.name}={count}" for result, count in results.items())
            print(f"Played {games} games against difficulty {difficulty}: "
                  f"{games_time:.6f} seconds total, {games_time / games * 1000:.6f} ms per game "
                  f"({summary})")

    @staticmethod
    def _stop(marker: str) -> float:
        elapsed = debug.end_timer(marker, "cli")
        return elapsed if elapsed is not None else 0.0

    @staticmethod
    def _simulate_game(difficulty: int) -> GameResult:
        """Play a random human against an opponent without any output."""
        board = Board()
        ai = create_ai(difficulty)
        while True:
            col = random.choice(board.playable_columns())
            place_and_settle(board, col, Player.ONE)
            result = check_outcome(board)
            if result.is_game_over():
                return result

            place_and_settle(board, ai.choose_move(col), Player.TWO)
            result = check_outcome(board)
            if result.is_game_over():
                return result


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    cli = SimpleCLI()
    return cli.run(argv)


if __name__ == "__main__":
    sys.exit(main())
