"""
controller.py - Turn sequencing between the human, the board and the opponent

The GameController owns the authoritative board and the computer opponent.
A display calls add_piece() with the human's column; the controller settles
that token, checks the outcome, lets the opponent reply, and reports every
board change and the final result back to the display.
"""

import random
from enum import Enum, auto
from typing import List, Optional, Tuple

from connectfour.ai.base import GameAI
from connectfour.ai.factory import MAX_DIFFICULTY, create_ai
from connectfour.debug import debug
from connectfour.game.board import Board
from connectfour.game.gravity import place_and_settle
from connectfour.game.rules import check_outcome
from connectfour.interfaces.display import Display
from connectfour.utils import GameResult, Player


class ControllerState(Enum):
    AWAITING_PLAYER_MOVE = auto()
    GAME_OVER = auto()


class GameController:
    """
    Runs one game at a time between the human (Player.ONE) and a computer
    opponent (Player.TWO).
    """

    def __init__(self, display: Display, rng: Optional[random.Random] = None):
        """
        Initialize the controller. No game is running until reset() is called.

        Args:
            display: Where board updates and results are reported
            rng: Random number generator handed to each new opponent
        """
        debug.debug("Initializing GameController", "controller")
        self.display = display
        self.rng = rng
        self._board: Optional[Board] = None
        self._ai: Optional[GameAI] = None
        self._difficulty = 0
        self._state = ControllerState.GAME_OVER
        self._result = GameResult.IN_PROGRESS
        self._last_ai_move: Optional[int] = None
        self.move_history: List[Tuple[int, Player]] = []

    @property
    def board(self) -> Optional[Board]:
        return self._board

    @property
    def ai(self) -> Optional[GameAI]:
        return self._ai

    @property
    def state(self) -> ControllerState:
        return self._state

    @property
    def result(self) -> GameResult:
        return self._result

    @property
    def difficulty(self) -> int:
        return self._difficulty

    @property
    def last_ai_move(self) -> Optional[int]:
        return self._last_ai_move

    def reset(self) -> None:
        """Start a new game against an opponent chosen by the display."""
        difficulty = self.display.prompt_for_opponent_difficulty(MAX_DIFFICULTY)
        ai = create_ai(difficulty, rng=self.rng)

        self._board = Board()
        self._ai = ai
        self._difficulty = difficulty
        self._result = GameResult.IN_PROGRESS
        self._last_ai_move = None
        self.move_history = []
        self._state = ControllerState.AWAITING_PLAYER_MOVE

        debug.info(f"New game against {ai.name}", "controller")
        self.display.update_board(self._board.get_state())

    def add_piece(self, col: int) -> bool:
        """
        Play the human's move and, if the game goes on, the opponent's reply.

        Args:
            col: The column the human chose (0-indexed)

        Returns:
            True if the move was accepted, False if the column cannot be
            played or no game is running
        """
        if self._state != ControllerState.AWAITING_PLAYER_MOVE:
            debug.debug(f"Rejected column {col}: no game in progress", "controller")
            return False

        if not self._board.is_column_playable(col):
            debug.debug(f"Rejected column {col}: not playable", "controller")
            return False

        if self._play(col, Player.ONE):
            return True

        ai_col = self._ai.choose_move(col)
        self._last_ai_move = ai_col
        self._play(ai_col, Player.TWO)
        return True

    def _play(self, col: int, token: Player) -> bool:
        """
        Settle one token, report the board, and end the game if it is decided.

        Returns:
            True if the move ended the game
        """
        row = place_and_settle(self._board, col, token)
        self.move_history.append((col, token))
        debug.debug(f"{token!r} played column {col}, landed on row {row}", "controller")
        self.display.update_board(self._board.get_state())

        result = check_outcome(self._board)
        if not result.is_game_over():
            return False

        self._result = result
        self._state = ControllerState.GAME_OVER
        debug.info(f"Game over: {result.name}", "controller")
        self.display.game_over(result)
        return True
