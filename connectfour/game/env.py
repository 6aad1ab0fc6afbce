"""
env.py - Gymnasium environment for playing against the computer opponents

The agent plays Player.ONE through a GameController. Each step is one full
turn: the agent's token and, if the game is still open, the opponent's reply.
The environment is its own display, so it sees every board update and the
final result the same way the console does.
"""

import random
from typing import Any, Dict, Optional, Tuple, Union

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from connectfour.ai.factory import MAX_DIFFICULTY
from connectfour.debug import debug
from connectfour.game.controller import ControllerState, GameController
from connectfour.game.rules import find_winning_line
from connectfour.utils import ROWS, COLS, GameResult, Player, render_board_ascii


class ConnectFourEnv(gym.Env):
    """
    Connect Four environment following the Gymnasium interface.

    Observations are the ROWS x COLS grid (0 empty, 1 agent, 2 opponent) and
    actions are column indices.
    """

    metadata = {'render_modes': ['ascii', 'human'], 'render_fps': 4}

    def __init__(self, difficulty: int = MAX_DIFFICULTY, render_mode: Optional[str] = None,
                 reward_win: float = 1.0, reward_lose: float = -1.0, reward_draw: float = 0.1,
                 reward_invalid_move: float = -0.5, reward_step: float = -0.01):
        """
        Initialize the environment.

        Args:
            difficulty: Opponent difficulty used when reset() gets no option
            render_mode: None, "ascii" or "human"
            reward_*: Reward for each kind of step outcome
        """
        debug.debug("Initializing ConnectFourEnv", "env")
        if not 1 <= difficulty <= MAX_DIFFICULTY:
            raise ValueError(f"Difficulty must be between 1 and {MAX_DIFFICULTY}, got {difficulty}")
        if render_mode is not None and render_mode not in self.metadata['render_modes']:
            raise ValueError(f"Unsupported render mode: {render_mode}")

        self.action_space = spaces.Discrete(COLS)
        self.observation_space = spaces.Box(low=0, high=2, shape=(ROWS, COLS), dtype=np.int8)

        self.render_mode = render_mode
        self.difficulty = difficulty
        self.reward_win = reward_win
        self.reward_lose = reward_lose
        self.reward_draw = reward_draw
        self.reward_invalid_move = reward_invalid_move
        self.reward_step = reward_step

        self._next_difficulty = difficulty
        self._grid = np.zeros((ROWS, COLS), dtype=int)
        self.controller = GameController(self)

    # Display callbacks

    def update_board(self, grid: np.ndarray) -> None:
        self._grid = grid

    def game_over(self, result: GameResult) -> None:
        debug.debug(f"Episode finished: {result.name}", "env")

    def prompt_for_opponent_difficulty(self, max_level: int) -> int:
        return self._next_difficulty

    # Gymnasium API

    def reset(self, seed: Optional[int] = None,
              options: Optional[Dict[str, Any]] = None) -> Tuple[np.ndarray, Dict]:
        """
        Start a new game.

        Args:
            seed: Seed for the environment and the opponent
            options: May hold "difficulty" to override the default opponent

        Returns:
            Initial observation and info dictionary
        """
        super().reset(seed=seed)

        options = options or {}
        self._next_difficulty = int(options.get('difficulty', self.difficulty))
        self.controller.rng = random.Random(int(self.np_random.integers(2 ** 32)))
        self.controller.reset()

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), self._get_info()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict]:
        """
        Play one turn.

        Args:
            action: Column for the agent's token

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        action = int(action)
        if not self.controller.add_piece(action):
            debug.warning(f"Invalid action: {action}", "env")
            info = self._get_info()
            info['invalid_move'] = True
            return self._get_observation(), self.reward_invalid_move, False, True, info

        reward = self.reward_step
        terminated = self.controller.state == ControllerState.GAME_OVER
        result = self.controller.result
        if result.winner == Player.ONE:
            reward = self.reward_win
        elif result.winner == Player.TWO:
            reward = self.reward_lose
        elif result == GameResult.DRAW:
            reward = self.reward_draw

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), reward, terminated, False, self._get_info()

    def render(self) -> Optional[Union[str, np.ndarray]]:
        if self.render_mode is None:
            return None

        text = render_board_ascii(self._grid, self._winning_line())
        if self.render_mode == "ascii":
            return text

        print(text)
        return None

    def _winning_line(self):
        board = self.controller.board
        return find_winning_line(board) if board is not None else []

    def _get_observation(self) -> np.ndarray:
        return self._grid.astype(np.int8)

    def _get_info(self) -> Dict:
        board = self.controller.board
        valid_moves = board.playable_columns() if board is not None else []
        if self.controller.state == ControllerState.GAME_OVER:
            valid_moves = []

        return {
            'valid_moves': valid_moves,
            'game_result': self.controller.result.name,
            'difficulty': self.controller.difficulty,
            'winning_line': self._winning_line(),
            'last_ai_move': self.controller.last_ai_move,
        }
