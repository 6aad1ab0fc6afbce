"""
connectfour - Connect Four against a heuristic computer opponent

This package provides the board, gravity and win detection engine, two
computer opponents, the turn controller that ties them to a display, a
terminal interface and a gymnasium environment.
"""

__version__ = '0.1.0'
