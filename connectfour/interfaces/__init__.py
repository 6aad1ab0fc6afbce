"""
connectfour.interfaces - User interfaces for Connect Four

This package contains the Display contract used by the game controller and
the terminal implementation of it.
"""

# Don't import anything here to avoid circular imports
__all__ = []
