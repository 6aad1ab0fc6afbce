"""
display.py - The contract between the game controller and a display

A display renders the board, reports the end of a game and asks the player
which opponent to face. It drives the controller through add_piece() and
reset(); the controller calls back into it with the methods below.
"""

from typing import Protocol

import numpy as np

from connectfour.utils import GameResult


class Display(Protocol):
    """Anything the GameController can report to."""

    def update_board(self, grid: np.ndarray) -> None:
        """Show a snapshot of the board after a settled move or a reset."""
        ...

    def game_over(self, result: GameResult) -> None:
        """Announce a finished game."""
        ...

    def prompt_for_opponent_difficulty(self, max_level: int) -> int:
        """Ask for an opponent difficulty between 1 and max_level."""
        ...
