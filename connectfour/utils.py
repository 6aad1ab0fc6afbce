"""
utils.py - Constants, enumerations and helpers for the Connect Four game

This module holds the fixed board dimensions, the cell-state and outcome
enumerations, the direction vectors used by the line scanners and the ASCII
board renderer shared by the board and the console display.
"""

from enum import Enum, auto
from typing import Dict, Iterable, Optional, Tuple

import numpy as np

# Game constants
ROWS = 6
COLS = 7
CONNECT_N = 4  # Number of pieces in a line to win

Coord = Tuple[int, int]  # (row, col)


class Player(Enum):
    """Enumeration representing players and cell states."""
    EMPTY = 0
    ONE = 1    # Human player
    TWO = 2    # Computer opponent

    def other(self) -> "Player":
        """Get the other player."""
        if self == Player.ONE:
            return Player.TWO
        elif self == Player.TWO:
            return Player.ONE
        return Player.EMPTY

    def __str__(self):
        if self == Player.EMPTY:
            return " "
        elif self == Player.ONE:
            return "X"
        else:
            return "O"


class GameResult(Enum):
    """Outcome of a game: in progress, a win for one player, or a draw."""
    IN_PROGRESS = auto()
    PLAYER_ONE_WIN = auto()
    PLAYER_TWO_WIN = auto()
    DRAW = auto()

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self != GameResult.IN_PROGRESS

    @property
    def winner(self) -> Optional[Player]:
        """The winning player, or None for an unfinished or drawn game."""
        if self == GameResult.PLAYER_ONE_WIN:
            return Player.ONE
        if self == GameResult.PLAYER_TWO_WIN:
            return Player.TWO
        return None

    @classmethod
    def win_for(cls, player: Player) -> "GameResult":
        """Build the winning result for a player."""
        if player == Player.ONE:
            return cls.PLAYER_ONE_WIN
        if player == Player.TWO:
            return cls.PLAYER_TWO_WIN
        raise ValueError(f"{player!r} cannot win a game")


class Direction(Enum):
    """Line directions, in the order the scanners check them."""
    VERTICAL = auto()        # downward
    HORIZONTAL = auto()      # rightward
    RIGHT_DIAGONAL = auto()  # down and to the right
    LEFT_DIAGONAL = auto()   # down and to the left


# Direction vectors (row, col); dicts keep insertion order, which is the scan order
DIRECTION_VECTORS: Dict[Direction, Coord] = {
    Direction.VERTICAL: (1, 0),
    Direction.HORIZONTAL: (0, 1),
    Direction.RIGHT_DIAGONAL: (1, 1),
    Direction.LEFT_DIAGONAL: (1, -1),
}


def is_valid_position(row: int, col: int) -> bool:
    """
    Check if a position is within the board boundaries.

    Args:
        row: Row index
        col: Column index

    Returns:
        True if position is valid, False otherwise
    """
    return 0 <= row < ROWS and 0 <= col < COLS


def render_board_ascii(grid: np.ndarray, highlight: Iterable[Coord] = ()) -> str:
    """
    Render the board as ASCII art.

    Cells listed in ``highlight`` are drawn in lower case so a winning line
    stands out.

    Args:
        grid: The board grid
        highlight: Positions to mark

    Returns:
        ASCII representation of the board
    """
    marked = set(highlight)
    result = ["|" + "-" * (COLS * 2 - 1) + "|"]

    for row in range(ROWS):
        cells = []
        for col in range(COLS):
            symbol = str(Player(int(grid[row, col])))
            if (row, col) in marked:
                symbol = symbol.lower()
            cells.append(symbol)
        result.append("|" + " ".join(cells) + "|")

    result.append("|" + "-" * (COLS * 2 - 1) + "|")
    result.append("|" + " ".join(str(i) for i in range(COLS)) + "|")

    return "\n".join(result)
