# planet_dash/game/spawner.py
from __future__ import annotations
import logging
import random
from typing import Optional

from .config import WIDTH, SPAWN_MIN_MS, SPAWN_MAX_MS
from .scheduler import Scheduler, TimerHandle
from .session import GameSession

logger = logging.getLogger(__name__)


class ObstacleSpawner:
    """
    Appends one obstacle at the right edge after each randomized wait.
    The wait is re-sampled from [min_delay_ms, max_delay_ms] every time.
    """
    def __init__(self, scheduler: Scheduler, session: GameSession,
                 seed: Optional[int] = None,
                 min_delay_ms: float = SPAWN_MIN_MS,
                 max_delay_ms: float = SPAWN_MAX_MS):
        if not 0 <= min_delay_ms <= max_delay_ms:
            raise ValueError(f"bad spawn delay range [{min_delay_ms}, {max_delay_ms}]")
        self.scheduler = scheduler
        self.session = session
        self.min_delay_ms = float(min_delay_ms)
        self.max_delay_ms = float(max_delay_ms)
        self.rng = random.Random(seed)
        self.active = False
        self.last_delay_ms: Optional[float] = None
        self._generation: Optional[int] = None
        self._handle: Optional[TimerHandle] = None

    def reseed(self, seed: Optional[int]):
        self.rng = random.Random(seed)

    def sample_delay(self) -> float:
        return self.rng.uniform(self.min_delay_ms, self.max_delay_ms)

    def start(self, generation: int):
        self.stop()
        self.active = True
        self._generation = generation
        self._arm()

    def stop(self):
        self.active = False
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _arm(self):
        self.last_delay_ms = self.sample_delay()
        gen = self._generation
        self._handle = self.scheduler.call_later(self.last_delay_ms, lambda: self._fire(gen))

    def _fire(self, generation: int):
        # a wait queued before stop()/reset() must not produce anything
        if not self.active or generation != self._generation:
            return
        if not self.session.is_current(generation):
            return
        obs = self.session.spawn_obstacle(WIDTH)
        logger.debug("Spawned obstacle %d at t=%.0fms", obs.id, self.scheduler.now())
        self._arm()
