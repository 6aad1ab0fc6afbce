"""
connectfour.ai - Computer opponents for Connect Four

This package contains the two opponent difficulties and the factory used by
the controller to pick one when a game is reset.
"""

from connectfour.ai.base import GameAI
from connectfour.ai.difficulty_one import DifficultyOne
from connectfour.ai.difficulty_two import DifficultyTwo
from connectfour.ai.factory import MAX_DIFFICULTY, create_ai

__all__ = ['GameAI', 'DifficultyOne', 'DifficultyTwo', 'MAX_DIFFICULTY', 'create_ai']
