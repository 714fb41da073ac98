# planet_dash/tests/test_env.py
from __future__ import annotations

from typing import List, Tuple

import numpy as np
import pytest
from gymnasium.utils.env_checker import check_env

from planet_dash.env.observations import OBS_SIZE, build_observation
from planet_dash.env.runner_env import RunnerEnv
from planet_dash.game.config import WIDTH
from planet_dash.game.session import GameSession


def test_api_check():
    """Verify Gym API contract (spaces, step/reset signatures, types)."""
    env = RunnerEnv(frame_skip=4)
    try:
        check_env(env, skip_render_check=True)
    finally:
        env.close()


def test_smoke_rollout_stays_in_space():
    env = RunnerEnv(frame_skip=4)
    try:
        obs, info = env.reset(seed=123)
        assert env.observation_space.contains(obs), "Initial observation not in space"
        assert info["score"] == 0 and info["seed"] == 123
        for t in range(300):
            obs, r, term, trunc, info = env.step(env.action_space.sample())
            assert isinstance(r, float), "Reward must be a float"
            assert env.observation_space.contains(obs), f"Step {t}: observation out of bounds"
            if term or trunc:
                break
    finally:
        env.close()


def test_same_seed_same_trajectory():
    def rollout(seed_val: int, action_seq: List[int]) -> List[Tuple[np.ndarray, float, bool, bool]]:
        env = RunnerEnv(frame_skip=4)
        traj = []
        try:
            env.reset(seed=seed_val)
            for a in action_seq:
                obs, r, term, trunc, _ = env.step(int(a))
                traj.append((obs.copy(), float(r), bool(term), bool(trunc)))
                if term or trunc:
                    break
        finally:
            env.close()
        return traj

    rng = np.random.RandomState(42)
    action_seq = [int(rng.random_sample() < 0.1) for _ in range(400)]
    t1 = rollout(7, action_seq)
    t2 = rollout(7, action_seq)
    assert len(t1) == len(t2)
    for (o1, r1, te1, tr1), (o2, r2, te2, tr2) in zip(t1, t2):
        assert np.allclose(o1, o2)
        assert (r1, te1, tr1) == (r2, te2, tr2)


def test_never_jumping_dies_on_first_obstacle():
    env = RunnerEnv(frame_skip=4, time_limit_seconds=None)
    try:
        env.reset(seed=3)
        term = False
        for _ in range(1000):
            _, r, term, trunc, info = env.step(0)
            if term:
                break
        assert term
        assert r == -1.0
        assert info["score"] == 0
    finally:
        env.close()


def test_time_limit_truncates():
    env = RunnerEnv(frame_skip=5, time_limit_seconds=1.0)
    try:
        env.reset(seed=0)
        trunc = False
        steps = 0
        while not trunc:
            _, _, term, trunc, _ = env.step(0)
            steps += 1
            assert not term, "nothing can reach the player within one second"
        assert steps == 10
    finally:
        env.close()


def test_planet_option_on_reset():
    env = RunnerEnv(planet="Mars")
    try:
        _, info = env.reset(seed=1)
        assert info["planet"] == "Mars"
        _, info = env.reset(seed=1, options={"planet": "moon"})
        assert info["planet"] == "Moon"
    finally:
        env.close()


def test_observation_layout():
    s = GameSession()
    obs = build_observation(s)
    assert obs.dtype == np.float32 and obs.shape == (OBS_SIZE,)
    assert obs.tolist() == pytest.approx([0.0, 0.0, 0.1, 1.0, 0.0, 1.0, 0.0])

    s.spawn_obstacle(x=WIDTH)
    s.spawn_obstacle(x=WIDTH / 2)
    obs = build_observation(s)
    assert obs[3] == pytest.approx(1.0) and obs[4] == 1.0
    assert 0.0 < obs[5] < 1.0 and obs[6] == 1.0


def test_observation_velocity_only_when_airborne():
    s = GameSession()
    assert build_observation(s, velocity=10.0)[1] == 0.0
    s.take_off()
    s.player_height = 40.0
    obs = build_observation(s, velocity=-100.0)
    assert obs[1] == -1.0
    assert obs[0] == pytest.approx(0.1)
