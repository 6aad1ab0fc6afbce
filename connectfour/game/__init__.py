"""
connectfour.game - Core game mechanics for Connect Four

This package contains the board representation, the gravity engine, win and
draw detection, the turn controller and the gymnasium environment.

Only the leaf modules are imported here; the controller and the environment
depend on connectfour.ai, which depends back on the board.
"""

from connectfour.game.board import Board
from connectfour.game.gravity import place_and_settle
from connectfour.game.rules import check_outcome, find_winning_line

__all__ = ['Board', 'place_and_settle', 'check_outcome', 'find_winning_line']
