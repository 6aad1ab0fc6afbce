"""
factory.py - Builds the computer opponent for a chosen difficulty
"""

import random
from typing import Dict, Optional, Type

from connectfour.ai.base import GameAI
from connectfour.ai.difficulty_one import DifficultyOne
from connectfour.ai.difficulty_two import DifficultyTwo
from connectfour.debug import debug

OPPONENTS: Dict[int, Type[GameAI]] = {
    DifficultyOne.difficulty: DifficultyOne,
    DifficultyTwo.difficulty: DifficultyTwo,
}

MAX_DIFFICULTY = max(OPPONENTS)


def create_ai(difficulty: int, rng: Optional[random.Random] = None) -> GameAI:
    """
    Create a fresh opponent.

    Args:
        difficulty: 1 to MAX_DIFFICULTY
        rng: Optional random number generator handed to the opponent

    Returns:
        A new opponent with an empty mirrored board
    """
    try:
        opponent_cls = OPPONENTS[difficulty]
    except KeyError:
        raise ValueError(f"Difficulty must be between 1 and {MAX_DIFFICULTY}, got {difficulty}") from None

    debug.debug(f"Creating {opponent_cls.name} opponent", "ai")
    return opponent_cls(rng=rng)
