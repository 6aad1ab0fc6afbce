import random
from typing import Iterable, List

import numpy as np
import pytest

from connectfour.ai.base import GameAI
from connectfour.game import controller as controller_module
from connectfour.game.board import Board
from connectfour.utils import GameResult

SYMBOLS = {'.': 0, 'X': 1, 'O': 2}


def board_from_strings(rows: Iterable[str]) -> Board:
    """Build a board from six strings of '.', 'X', 'O', top row first."""
    return Board.from_rows([[SYMBOLS[ch] for ch in row] for row in rows])


class RecordingDisplay:
    """Display that remembers everything the controller told it."""

    def __init__(self, difficulty: int = 1):
        self.difficulty = difficulty
        self.grids: List[np.ndarray] = []
        self.results: List[GameResult] = []
        self.prompts: List[int] = []

    def update_board(self, grid):
        self.grids.append(grid)

    def game_over(self, result):
        self.results.append(result)

    def prompt_for_opponent_difficulty(self, max_level):
        self.prompts.append(max_level)
        return self.difficulty


class ScriptedAI(GameAI):
    """Opponent that plays a fixed list of columns."""

    name = "Scripted"

    def __init__(self, columns, rng=None):
        super().__init__(rng=rng)
        self.columns = list(columns)

    def choose_move(self, last_opponent_column):
        self.record_move(last_opponent_column, self.opponent)
        col = self.columns.pop(0)
        self.record_move(col, self.player)
        return col


@pytest.fixture
def make_board():
    return board_from_strings


@pytest.fixture
def display():
    return RecordingDisplay()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def scripted_opponent(monkeypatch):
    """Make the controller build a ScriptedAI playing the given columns."""

    def install(columns):
        monkeypatch.setattr(controller_module, "create_ai",
                            lambda difficulty, rng=None: ScriptedAI(columns, rng=rng))

    return install
