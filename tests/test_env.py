import numpy as np
import pytest

from game.asteroids.asteroid import create_asteroid
from game.asteroids.env import AsteroidsEnv, action_to_input, run_random_episode

NOOP = np.array([0, 0, 0, 0, 0])


def test_action_decoding():
    state = action_to_input([2, 1, 0, 1, 0])
    assert state.turn_right and not state.turn_left
    assert state.thrust and state.fire
    assert not state.brake and not state.cycle_weapon


def test_reset_and_step_follow_spaces():
    env = AsteroidsEnv(max_steps=20)
    obs, info = env.reset(seed=0)
    assert obs.shape == env.observation_space.shape
    assert env.observation_space.contains(obs)
    assert info["lives"] == 3

    env.action_space.seed(0)
    for _ in range(20):
        obs, reward, terminated, truncated, info = env.step(env.action_space.sample())
        assert env.observation_space.contains(obs)
        assert isinstance(reward, float)
    assert truncated
    env.close()


def test_same_seed_same_observation():
    a, _ = AsteroidsEnv().reset(seed=11)
    b, _ = AsteroidsEnv().reset(seed=11)
    assert np.array_equal(a, b)


def test_game_over_terminates():
    env = AsteroidsEnv()
    env.reset(seed=1)
    w = env.world
    w.asteroids.clear()
    w.session.lives = 1
    w.ship.invulnerability = 0
    w.ship.hp = 1
    a = create_asteroid(w.rng, w.bounds, 50.0, 3, 1, w.ship.x, w.ship.y)
    a.vx = a.vy = 0.0
    w.asteroids.append(a)

    obs, reward, terminated, truncated, info = env.step(NOOP)
    assert terminated
    assert info["game_over"]
    assert reward < 0


def test_unknown_render_mode():
    with pytest.raises(ValueError):
        AsteroidsEnv(render_mode="rgb_array")


def test_random_episode_runs_headless():
    total = run_random_episode(render=False, seed=3, max_steps=30, verbose=False)
    assert isinstance(total, float)
