"""
rules.py - Win and draw detection for Connect Four

The board is scanned once per direction family in a fixed precedence order:
vertical, horizontal, right diagonal, left diagonal. Each scan walks the grid
in raster order and only looks "forward" from every occupied cell, so each
line is tested from its top/left-most cell and no index leaves the grid.
"""

from typing import List, Optional, Tuple

from connectfour.debug import debug
from connectfour.game.board import Board
from connectfour.utils import (ROWS, COLS, CONNECT_N, Coord, Direction, DIRECTION_VECTORS,
                               GameResult, Player)


def _line_from(board: Board, row: int, col: int, dr: int, dc: int) -> Optional[List[Coord]]:
    """Return the CONNECT_N cells starting at (row, col) if they share one owner."""
    token = board.get_cell(row, col)
    if token == Player.EMPTY:
        return None

    line = [(row + i * dr, col + i * dc) for i in range(CONNECT_N)]
    if all(board.get_cell(r, c) == token for r, c in line[1:]):
        return line
    return None


def _scan_range(delta: int, size: int) -> range:
    """Start indices along one axis for which a full line stays on the board."""
    reach = (CONNECT_N - 1) * delta
    if reach >= 0:
        return range(0, size - reach)
    return range(-reach, size)


def find_line(board: Board, direction: Direction) -> Optional[Tuple[Player, List[Coord]]]:
    """
    Find the first complete line in one direction.

    Args:
        board: The board to scan
        direction: Which direction family to check

    Returns:
        (owner, cells) of the first line found in raster order, or None
    """
    dr, dc = DIRECTION_VECTORS[direction]
    for row in _scan_range(dr, ROWS):
        for col in _scan_range(dc, COLS):
            line = _line_from(board, row, col, dr, dc)
            if line is not None:
                return board.get_cell(row, col), line
    return None


def find_winner(board: Board) -> Optional[Tuple[Player, List[Coord]]]:
    """Check every direction in precedence order and return the first line found."""
    for direction in DIRECTION_VECTORS:
        found = find_line(board, direction)
        if found is not None:
            debug.trace(f"{direction.name} line for {found[0]!r} at {found[1]}", "rules")
            return found
    return None


def find_winning_line(board: Board) -> List[Coord]:
    """
    Get the cells of the winning line.

    Returns:
        The (row, col) positions of the first winning line, or an empty list
    """
    found = find_winner(board)
    return found[1] if found else []


def check_outcome(board: Board) -> GameResult:
    """
    Determine the state of the game on a board.

    Args:
        board: The board to check

    Returns:
        A win for the owner of the first line found, DRAW when no line exists
        and every column is full, otherwise IN_PROGRESS
    """
    found = find_winner(board)
    if found is not None:
        return GameResult.win_for(found[0])

    if board.is_full():
        return GameResult.DRAW

    return GameResult.IN_PROGRESS
