"""
base.py - Common behaviour of the computer opponents

Every opponent keeps its own mirror of the game board. The controller never
shares its board; it reports the human's column and the opponent replays that
move, and its own choice, through the same gravity procedure.
"""

import random
from abc import ABC, abstractmethod
from typing import Optional

from connectfour.debug import debug
from connectfour.game.board import Board
from connectfour.game.gravity import place_and_settle
from connectfour.utils import Player


class GameAI(ABC):
    """
    Base class for a computer opponent playing as Player.TWO.

    Subclasses implement choose_move() and must record both the opponent's
    move and their own reply on the mirrored board.
    """

    name = "AI"
    difficulty = 0

    def __init__(self, rng: Optional[random.Random] = None):
        """
        Initialize the opponent.

        Args:
            rng: Random number generator for tie-breaking moves (a fresh
                 unseeded one when omitted)
        """
        self.board = Board()
        self.rng = rng if rng is not None else random.Random()
        self.player = Player.TWO
        self.opponent = Player.ONE

    def record_move(self, col: int, token: Player) -> int:
        """
        Replay a move on the mirrored board.

        Returns:
            The row where the token came to rest
        """
        return place_and_settle(self.board, col, token)

    def random_column(self) -> int:
        """
        Pick a playable column uniformly at random.

        Returns:
            A column whose top cell is empty
        """
        columns = self.board.playable_columns()
        if not columns:
            raise ValueError("No playable columns.")
        col = self.rng.choice(columns)
        debug.debug(f"{self.name} picked random column {col} from {columns}", "ai")
        return col

    @abstractmethod
    def choose_move(self, last_opponent_column: int) -> int:
        """
        Reply to the opponent's move.

        Args:
            last_opponent_column: The column the human just played

        Returns:
            The column this opponent plays
        """
