"""
difficulty_two.py - Threat-scanning opponent

The opponent looks for three tokens of one owner in an open line and for the
cell that would extend it to four. It first tries to complete its own line,
then to block the human's, and otherwise plays a random playable column.
There is no lookahead: each decision only looks at the current position.

Lines are checked in the order vertical, horizontal, right diagonal, left
diagonal. For every run of three, the cell past the lower/right end is tried
before the cell before the upper/left end.
"""

from typing import Optional

from connectfour.ai.base import GameAI
from connectfour.debug import debug
from connectfour.utils import ROWS, COLS, CONNECT_N, DIRECTION_VECTORS, Direction, Player, is_valid_position

RUN_LENGTH = CONNECT_N - 1


class DifficultyTwo(GameAI):
    """Wins when it can, blocks when it must, otherwise plays randomly."""

    name = "Difficulty Two"
    difficulty = 2

    def choose_move(self, last_opponent_column: int) -> int:
        self.record_move(last_opponent_column, self.opponent)
        col = self.select_column()
        self.record_move(col, self.player)
        return col

    def select_column(self) -> int:
        """
        Decide on a column for the current mirrored position without playing it.

        Returns:
            A winning column, else a blocking column, else a random playable one
        """
        col = self.find_completion(self.player)
        if col is not None:
            debug.debug(f"{self.name} completes a line in column {col}", "ai")
            return col

        col = self.find_completion(self.opponent)
        if col is not None:
            debug.debug(f"{self.name} blocks a line in column {col}", "ai")
            return col

        return self.random_column()

    def find_completion(self, token: Player) -> Optional[int]:
        """
        Find a column that turns three of token's pieces into four.

        Args:
            token: Whose lines to look for

        Returns:
            The first matching column in direction priority order, or None
        """
        for direction in DIRECTION_VECTORS:
            col = self._check_direction(direction, token)
            if col is not None:
                return col
        return None

    def _check_direction(self, direction: Direction, token: Player) -> Optional[int]:
        dr, dc = DIRECTION_VECTORS[direction]
        for row in range(ROWS):
            for col in range(COLS):
                if not self._is_run(row, col, dr, dc, token):
                    continue

                # far end first, then the cell before the start
                for r, c in ((row + RUN_LENGTH * dr, col + RUN_LENGTH * dc), (row - dr, col - dc)):
                    if self.is_reachable(r, c):
                        debug.trace(f"{direction.name} run of {token!r} at ({row}, {col}) "
                                    f"can be completed at ({r}, {c})", "ai")
                        return c
        return None

    def _is_run(self, row: int, col: int, dr: int, dc: int, token: Player) -> bool:
        """True if RUN_LENGTH cells from (row, col) along (dr, dc) all hold token."""
        for i in range(RUN_LENGTH):
            r, c = row + i * dr, col + i * dc
            if not is_valid_position(r, c) or self.board.get_cell(r, c) != token:
                return False
        return True

    def is_reachable(self, row: int, col: int) -> bool:
        """
        Check whether a dropped token would land exactly on (row, col).

        The cell must be on the board, empty, and either on the bottom row or
        directly above an occupied cell.
        """
        if not is_valid_position(row, col):
            return False
        if self.board.get_cell(row, col) != Player.EMPTY:
            return False
        return row == ROWS - 1 or self.board.get_cell(row + 1, col) != Player.EMPTY
