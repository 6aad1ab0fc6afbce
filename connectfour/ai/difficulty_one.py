"""
difficulty_one.py - The easiest opponent: copies the human's column
"""

from connectfour.ai.base import GameAI
from connectfour.debug import debug


class DifficultyOne(GameAI):
    """
    Plays in whichever column the human played last.

    When that column has just been filled the copy would be illegal, so the
    opponent falls back to a random playable column instead.
    """

    name = "Difficulty One"
    difficulty = 1

    def choose_move(self, last_opponent_column: int) -> int:
        self.record_move(last_opponent_column, self.opponent)

        col = last_opponent_column
        if not self.board.is_column_playable(col):
            debug.debug(f"Column {col} is full, cannot copy the last move", "ai")
            col = self.random_column()

        self.record_move(col, self.player)
        return col
