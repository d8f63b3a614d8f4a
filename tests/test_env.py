import numpy as np
import pytest

from hackenbush import HackenbushEnv
from hackenbush.core import Edge, EdgeColor, InvalidPosition, Position, build_position


def make_position():
    return build_position(
        [
            {"id": "b", "from": "ground", "to": "a", "color": "blue"},
            {"id": "r", "from": "ground", "to": "c", "color": "red"},
        ]
    )


def test_reset_returns_valid_observation():
    env = HackenbushEnv(make_position)
    obs, info = env.reset()

    assert obs["active"].shape == (2,)
    assert obs["colors"].tolist() == [1, 0]
    assert obs["player"] == 0
    assert info["legal_action_mask"].tolist() == [0, 1]
    assert env.observation_space.contains(obs)


def test_legal_mask_matches_controller():
    env = HackenbushEnv(make_position)
    env.reset()
    mask = env.legal_action_mask()
    legal = env.controller.legal_moves()
    assert np.count_nonzero(mask) == len(legal)
    for edge_id in legal:
        assert mask[env.controller.position.index_of(edge_id)] == 1


def test_step_plays_until_blue_wins():
    env = HackenbushEnv(make_position)
    env.reset()

    obs, reward, terminated, truncated, info = env.step(1)
    assert reward == 0.0
    assert not terminated
    assert not truncated
    assert obs["active"].tolist() == [1, 0]
    assert obs["player"] == 1

    obs, reward, terminated, truncated, info = env.step(0)
    assert reward == 1.0
    assert terminated
    assert info["legal_action_mask"].tolist() == [0, 0]


def test_illegal_action_rejected():
    env = HackenbushEnv(make_position)
    env.reset()
    with pytest.raises(ValueError):
        env.step(0)
    with pytest.raises(ValueError):
        env.step(5)


def test_render_ansi_lists_edges():
    env = HackenbushEnv(make_position, render_mode="ansi")
    env.reset()
    env.step(1)
    text = env.render()
    assert "B b: ground -- a" in text
    assert ". r: ground -- c" in text


def test_rejects_edges_detached_from_ground():
    def detached():
        return Position((Edge("b", "ground", "a", EdgeColor.BLUE), Edge("x", "p", "q", EdgeColor.RED)))

    with pytest.raises(InvalidPosition):
        HackenbushEnv(detached)
