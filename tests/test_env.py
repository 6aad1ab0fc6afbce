import numpy as np
import pytest

from connectfour.game.env import ConnectFourEnv
from connectfour.utils import ROWS, COLS, Player


@pytest.fixture
def env():
    environment = ConnectFourEnv(difficulty=1)
    yield environment
    environment.close()


def test_reset_returns_empty_observation(env):
    observation, info = env.reset(seed=0)
    assert observation.shape == (ROWS, COLS)
    assert observation.dtype == np.int8
    assert not observation.any()
    assert env.observation_space.contains(observation)
    assert info['valid_moves'] == list(range(COLS))
    assert info['game_result'] == 'IN_PROGRESS'
    assert info['difficulty'] == 1


def test_step_plays_a_full_turn(env):
    env.reset(seed=0)
    observation, reward, terminated, truncated, info = env.step(2)
    assert observation[5, 2] == Player.ONE.value
    assert observation[4, 2] == Player.TWO.value
    assert reward == env.reward_step
    assert not terminated and not truncated
    assert info['last_ai_move'] == 2


@pytest.mark.parametrize("action", [-1, COLS])
def test_invalid_action_truncates(env, action):
    env.reset(seed=0)
    observation, reward, terminated, truncated, info = env.step(action)
    assert reward == env.reward_invalid_move
    assert truncated and not terminated
    assert info['invalid_move']
    assert not observation.any()


def test_agent_win_is_rewarded(env):
    env.reset(seed=0)
    for col in (0, 1, 2):
        env.step(col)
    _, reward, terminated, _, info = env.step(3)
    assert terminated
    assert reward == env.reward_win
    assert info['game_result'] == 'PLAYER_ONE_WIN'
    assert info['winning_line'] == [(5, 0), (5, 1), (5, 2), (5, 3)]
    assert info['valid_moves'] == []


def test_agent_loss_is_penalised(scripted_opponent):
    scripted_opponent([6, 6, 6, 6])
    env = ConnectFourEnv()
    env.reset(seed=0)
    for col in (0, 1, 0):
        env.step(col)
    _, reward, terminated, _, info = env.step(1)
    assert terminated
    assert reward == env.reward_lose
    assert info['game_result'] == 'PLAYER_TWO_WIN'


def test_difficulty_option_overrides_default(env):
    _, info = env.reset(seed=0, options={'difficulty': 2})
    assert info['difficulty'] == 2
    _, info = env.reset(seed=0)
    assert info['difficulty'] == 1


def test_same_seed_replays_the_same_game():
    moves = [3, 3, 2, 4, 2, 5, 1, 0, 6, 3]

    def play(seed):
        env = ConnectFourEnv(difficulty=2)
        env.reset(seed=seed)
        observations = []
        for col in moves:
            observation, _, terminated, _, _ = env.step(col)
            observations.append(observation)
            if terminated:
                break
        return observations

    first, second = play(11), play(11)
    assert len(first) == len(second)
    assert all((a == b).all() for a, b in zip(first, second))


def test_ascii_render():
    env = ConnectFourEnv(render_mode="ascii")
    env.reset(seed=0)
    env.step(0)
    text = env.render()
    assert "X" in text
    assert text.splitlines()[-1] == "|0 1 2 3 4 5 6|"


def test_constructor_validation():
    with pytest.raises(ValueError):
        ConnectFourEnv(difficulty=3)
    with pytest.raises(ValueError):
        ConnectFourEnv(render_mode="rgb_array")
