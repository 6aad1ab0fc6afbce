"""
board.py - Board representation for Connect Four

This module implements the Board class, a fixed ROWS x COLS grid of cell
states. Row 0 is the top of the board and row ROWS-1 the bottom. The board
itself does not apply gravity; see connectfour.game.gravity.
"""

import numpy as np
from typing import List, Sequence

from connectfour.debug import debug
from connectfour.utils import ROWS, COLS, Player, render_board_ascii


class Board:
    """
    A Connect Four game board.

    The grid is a numpy array of Player values. Cell access is not bounds
    checked; callers keep row and column indices inside the grid.
    """

    def __init__(self):
        """Initialize an empty board."""
        debug.trace("Initializing new Board", "board")
        self.reset()

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> 'Board':
        """
        Build a board from nested rows of cell values, top row first.

        Args:
            rows: ROWS sequences of COLS ints (0 empty, 1 player one, 2 player two)

        Returns:
            A new Board holding those cells
        """
        grid = np.array(rows, dtype=int)
        if grid.shape != (ROWS, COLS):
            raise ValueError(f"Board must be {ROWS}x{COLS}, got {grid.shape}")
        if not np.isin(grid, [p.value for p in Player]).all():
            raise ValueError("Cell values must be 0, 1 or 2")

        board = cls()
        board.grid = grid
        return board

    def reset(self) -> None:
        """Reset the board to an empty state."""
        self.grid = np.full((ROWS, COLS), Player.EMPTY.value, dtype=int)

    def copy(self) -> 'Board':
        """
        Create a deep copy of the current board.

        Returns:
            A new Board instance with the same cells
        """
        new_board = Board()
        new_board.grid = self.grid.copy()
        return new_board

    def get_cell(self, row: int, col: int) -> Player:
        return Player(int(self.grid[row, col]))

    def set_cell(self, row: int, col: int, state: Player) -> None:
        self.grid[row, col] = state.value

    def is_column_playable(self, col: int) -> bool:
        """
        Check whether a token can be dropped into a column.

        Args:
            col: The column to check (0-indexed)

        Returns:
            True if the column exists and its top cell is empty
        """
        if not (0 <= col < COLS):
            return False
        return self.grid[0, col] == Player.EMPTY.value

    def playable_columns(self) -> List[int]:
        """Get the columns that still have room, in ascending order."""
        return [col for col in range(COLS) if self.grid[0, col] == Player.EMPTY.value]

    def is_full(self) -> bool:
        """True when every column's top cell is occupied."""
        return not self.playable_columns()

    def column_height(self, col: int) -> int:
        """Number of tokens in a column."""
        return int(np.count_nonzero(self.grid[:, col] != Player.EMPTY.value))

    def is_settled(self) -> bool:
        """
        Check that no token floats above an empty cell.

        Returns:
            True if every column's tokens form a contiguous run from the bottom
        """
        for col in range(COLS):
            height = self.column_height(col)
            column = self.grid[:, col]
            if np.any(column[ROWS - height:] == Player.EMPTY.value):
                return False
        return True

    def get_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            A copy of the 2D grid
        """
        return self.grid.copy()

    def render(self) -> str:
        """Render the board as a string."""
        return render_board_ascii(self.grid)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self.grid, other.grid))

    def __str__(self) -> str:
        return self.render()
