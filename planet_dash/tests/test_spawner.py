# planet_dash/tests/test_spawner.py
from __future__ import annotations

import pytest

from planet_dash.game.config import SPAWN_MIN_MS, SPAWN_MAX_MS, WIDTH
from planet_dash.game.scheduler import Scheduler
from planet_dash.game.session import GameSession
from planet_dash.game.spawner import ObstacleSpawner


def _make(seed=3, **kw):
    sched = Scheduler()
    session = GameSession()
    return sched, session, ObstacleSpawner(sched, session, seed=seed, **kw)


def test_delays_stay_in_closed_range_and_vary():
    _, _, spawner = _make()
    delays = [spawner.sample_delay() for _ in range(500)]
    assert all(SPAWN_MIN_MS <= d <= SPAWN_MAX_MS for d in delays)
    assert len(set(delays)) > 1, "delay must be re-sampled, not fixed"


def test_first_obstacle_arrives_after_sampled_delay():
    sched, session, spawner = _make()
    spawner.start(session.begin())
    first = spawner.last_delay_ms
    assert SPAWN_MIN_MS <= first <= SPAWN_MAX_MS
    assert session.obstacles == [], "nothing spawns immediately"

    sched.advance(first - 1)
    assert session.obstacles == []
    sched.advance(2)
    assert len(session.obstacles) == 1
    obs = session.obstacles[0]
    assert obs.x == WIDTH and obs.scored is False


def test_keeps_spawning_with_fresh_delays():
    sched, session, spawner = _make()
    spawner.start(session.begin())
    sched.advance(SPAWN_MAX_MS * 10)
    n = len(session.obstacles)
    assert 10 <= n <= (SPAWN_MAX_MS * 10) // SPAWN_MIN_MS


def test_stop_prevents_spawn_even_with_queued_wait():
    sched, session, spawner = _make()
    spawner.start(session.begin())
    spawner.stop()
    sched.advance(SPAWN_MAX_MS * 3)
    assert session.obstacles == []
    assert not spawner.active


def test_stale_generation_is_a_no_op():
    sched, session, spawner = _make()
    spawner.start(session.begin())
    # session moves on without the spawner being told
    session.reset()
    sched.advance(SPAWN_MAX_MS * 3)
    assert session.obstacles == []


def test_same_seed_same_timing():
    def timeline(seed):
        sched, session, spawner = _make(seed=seed)
        spawner.start(session.begin())
        stamps = []
        for _ in range(20_000 // 20):
            before = len(session.obstacles)
            sched.advance(20)
            if len(session.obstacles) != before:
                stamps.append(sched.now())
        return stamps

    assert timeline(11) == timeline(11)
    assert timeline(11) != timeline(12)


def test_bad_range_rejected():
    with pytest.raises(ValueError):
        _make(min_delay_ms=500, max_delay_ms=100)
