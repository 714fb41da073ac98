# planet_dash/game/clock.py
from __future__ import annotations
import logging
from typing import Callable, Optional

from .config import TICK_MS, PLAYER_X, PLAYER_W, OBSTACLE_W, OBSTACLE_H
from .scheduler import Scheduler, TimerHandle
from .session import GameSession, Obstacle

logger = logging.getLogger(__name__)


def hits_player(obs: Obstacle, player_height: float) -> bool:
    """Horizontal overlap with the player box while the player is below the obstacle top."""
    return (
        obs.x < PLAYER_X + PLAYER_W
        and obs.x + OBSTACLE_W > PLAYER_X
        and player_height < OBSTACLE_H
    )


class SimulationClock:
    """Fixed-period world update: scroll, score, cull, collide."""

    def __init__(self, scheduler: Scheduler, session: GameSession,
                 on_collision: Callable[[], None],
                 tick_ms: float = TICK_MS):
        self.scheduler = scheduler
        self.session = session
        self.on_collision = on_collision
        self.tick_ms = float(tick_ms)
        self.ticks: int = 0
        self._generation: Optional[int] = None
        self._handle: Optional[TimerHandle] = None

    def start(self, generation: int):
        self.stop()
        self._generation = generation
        self._handle = self.scheduler.call_every(self.tick_ms, lambda: self._on_timer(generation))

    def stop(self):
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        self._generation = None

    def _on_timer(self, generation: int):
        if generation != self._generation:
            return
        if not self.session.is_current(generation):
            self.stop()
            return
        self.tick()

    def tick(self) -> bool:
        """One world update. Returns True if the player was hit this tick."""
        s = self.session
        self.ticks += 1
        speed = s.game_speed

        passed = 0
        for obs in s.obstacles:
            obs.x -= speed
            if not obs.scored and obs.x + OBSTACLE_W < PLAYER_X:
                obs.scored = True
                passed += 1
        s.discard_offscreen()

        if passed:
            s.add_score(passed)
            logger.debug("Passed %d obstacle(s), score=%d speed=%.2f",
                         passed, s.score, s.game_speed)

        for obs in s.obstacles:
            if hits_player(obs, s.player_height):
                logger.debug("Hit obstacle %d at x=%.1f h=%.1f", obs.id, obs.x, s.player_height)
                self.on_collision()
                return True
        return False
