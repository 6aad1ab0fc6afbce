"""
gravity.py - Token placement and settling

A token is always inserted at the top of its column and then settled by a
single top-to-bottom pass over that column. Only one token is ever out of
place at a time, so one pass is enough to restore the no-floating-tokens
invariant and each move costs O(ROWS).
"""

from connectfour.debug import debug
from connectfour.game.board import Board
from connectfour.utils import ROWS, Player


def settle_column(board: Board, col: int) -> int:
    """
    Move the out-of-place token in a column down to its resting cell.

    Args:
        board: The board to update
        col: The column to settle

    Returns:
        The row of the lowest token moved, or -1 if nothing moved
    """
    landed = -1
    for row in range(ROWS - 1):
        token = board.get_cell(row, col)
        if token != Player.EMPTY and board.get_cell(row + 1, col) == Player.EMPTY:
            board.set_cell(row, col, Player.EMPTY)
            board.set_cell(row + 1, col, token)
            landed = row + 1
    return landed


def place_and_settle(board: Board, col: int, token: Player) -> int:
    """
    Drop a token into a column.

    Args:
        board: The board to update
        col: The column to play (must be playable)
        token: Player.ONE or Player.TWO

    Returns:
        The row where the token came to rest

    Raises:
        ValueError: Only when the caller broke the precondition. Invalid
            player columns are reported by checking Board.is_column_playable
            first, never by catching this.
    """
    if not board.is_column_playable(col):
        raise ValueError(f"Column {col} is not playable")

    board.set_cell(0, col, token)
    landed = settle_column(board, col)
    row = 0 if landed == -1 else landed

    debug.trace(f"{token!r} settled at ({row}, {col})", "gravity")
    return row
