"""Tests for the gymnasium environment wrapping the engine."""

import numpy as np
import pytest

from conftest import TIE_GAME, VERTICAL_WIN
from connect4_engine.game.rules import ConnectFourEnv
from connect4_engine.utils import Player


@pytest.fixture
def env():
    env = ConnectFourEnv(render_mode="ascii")
    env.reset(seed=0)
    return env


class TestConnectFourEnv:
    def test_spaces(self, env):
        assert env.action_space.n == 7
        assert env.observation_space.shape == (6, 7)

    def test_reset(self, env):
        env.step(3)
        observation, info = env.reset()
        assert observation.shape == (6, 7)
        assert not observation.any()
        assert env.observation_space.contains(observation)
        assert info['move_count'] == 0
        assert info['legal_moves'] == list(range(7))
        assert info['active_player'] == Player.BLUE.value

    def test_reset_with_first_player(self, env):
        _, info = env.reset(options={'first_player': Player.RED})
        assert info['active_player'] == Player.RED.value

    def test_step(self, env):
        observation, reward, terminated, truncated, info = env.step(np.int64(2))
        assert observation[0, 2] == Player.BLUE.value
        assert reward == env.reward_step
        assert not terminated and not truncated
        assert info['last_move'] == (0, 2)
        assert info['active_player'] == Player.RED.value

    def test_win(self, env):
        for action in VERTICAL_WIN:
            _, reward, terminated, truncated, info = env.step(action)
        assert terminated and not truncated
        assert reward == env.reward_win
        assert info['game_result'] == 'WON'
        assert info['winning_cells'] == [(0, 3), (1, 3), (2, 3), (3, 3)]
        assert info['legal_moves'] == []

    def test_tie(self, env):
        for action in TIE_GAME:
            _, reward, terminated, _, info = env.step(action)
        assert terminated
        assert reward == env.reward_draw
        assert info['game_result'] == 'TIED'

    def test_invalid_move_leaves_state(self, env):
        for _ in range(6):
            env.step(0)
        before = env.engine.grid.get_state()
        observation, reward, terminated, truncated, info = env.step(0)
        assert reward == env.reward_invalid_move
        assert truncated and not terminated
        assert info['invalid_move']
        assert 'full' in info['error']
        assert (observation == before).all()
        assert info['move_count'] == 6

    def test_render_ascii(self, env):
        env.step(3)
        assert env.render() == env.engine.render()

    def test_unknown_render_mode(self):
        with pytest.raises(ValueError):
            ConnectFourEnv(render_mode="rgb_array")

    def test_custom_dimensions(self):
        env = ConnectFourEnv(rows=5, cols=8)
        observation, _ = env.reset()
        assert observation.shape == (5, 8)
        assert env.action_space.n == 8
