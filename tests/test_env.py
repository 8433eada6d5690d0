"""Tests for the Gymnasium environment adapter."""

import sys
from pathlib import Path

import numpy as np
import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from bitconnect.game.rules import ConnectFourEnv
from bitconnect.utils import WIDTH, HEIGHT, Player


@pytest.fixture
def env():
    env = ConnectFourEnv()
    env.reset(seed=0)
    yield env
    env.close()


class TestConnectFourEnv:
    def test_spaces(self, env):
        assert env.action_space.n == WIDTH
        assert env.observation_space.shape == (HEIGHT, WIDTH)

    def test_reset(self, env):
        env.step(3)
        observation, info = env.reset()
        assert observation.shape == (HEIGHT, WIDTH)
        assert not observation.any()
        assert info['legal_actions'] == list(range(WIDTH))
        assert info['player_to_move'] == Player.ONE.value
        assert info['outcome'] == 'UNFINISHED'
        assert info['moves'] == 0

    def test_step(self, env):
        observation, reward, terminated, truncated, info = env.step(3)
        assert observation[HEIGHT - 1, 3] == Player.ONE.value
        assert env.observation_space.contains(observation)
        assert reward == env.reward_step
        assert not terminated
        assert not truncated
        assert info['player_to_move'] == Player.TWO.value

    def test_win_rewards_mover(self, env):
        for column in [0, 1, 0, 1, 0, 1]:
            env.step(column)
        _, reward, terminated, truncated, info = env.step(0)
        assert reward == env.reward_win
        assert terminated
        assert not truncated
        assert info['winner'] == Player.ONE.value
        assert info['outcome'] == 'WIN'

    @pytest.mark.parametrize("action", [-1, WIDTH])
    def test_out_of_range_action(self, env, action):
        observation, reward, terminated, truncated, info = env.step(action)
        assert reward == env.reward_invalid_move
        assert truncated
        assert not terminated
        assert info['invalid_move']
        assert not observation.any()

    def test_full_column_rejected(self, env):
        for _ in range(HEIGHT):
            env.step(2)
        before = env.game.board.occupied
        _, reward, _, truncated, info = env.step(2)
        assert reward == env.reward_invalid_move
        assert truncated
        assert env.game.board.occupied == before

    def test_no_moves_after_game_over(self, env):
        for column in [0, 1, 0, 1, 0, 1, 0]:
            env.step(column)
        moves = env.game.moves
        _, reward, _, truncated, _ = env.step(5)
        assert reward == env.reward_invalid_move
        assert truncated
        assert env.game.moves == moves

    def test_numpy_action(self, env):
        _, _, _, truncated, _ = env.step(np.int64(4))
        assert not truncated
        assert env.game.board.column_height(4) == 1

    def test_ascii_render(self):
        env = ConnectFourEnv(render_mode="ascii")
        env.reset()
        env.step(0)
        assert env.render() == env.game.render()

    def test_custom_rewards(self):
        env = ConnectFourEnv(reward_step=0.0, reward_win=10.0)
        env.reset()
        assert env.step(0)[1] == 0.0
        assert env.reward_win == 10.0
