# planet_dash/game/state_machine.py
from __future__ import annotations
import logging
from typing import Optional

from .planets import Planet
from .scheduler import Scheduler
from .session import GameSession, Snapshot, Status
from .spawner import ObstacleSpawner
from .jump import JumpController
from .clock import SimulationClock

logger = logging.getLogger(__name__)


class GameStateMachine:
    """
    Ready -> Playing -> GameOver -> Ready, plus planet change from anywhere -> Ready.

    Owns the session and the three scheduled activities (spawn timer,
    simulation tick, jump tick). Every transition bumps the session
    generation, so callbacks that were already queued become no-ops even if
    cancelling their handle came too late.
    """

    def __init__(self, planet: str | Planet | None = None,
                 scheduler: Optional[Scheduler] = None,
                 seed: Optional[int] = None):
        self.scheduler = scheduler if scheduler is not None else Scheduler()
        self.session = GameSession(Planet.parse(planet) if planet is not None else Planet.default())
        self.spawner = ObstacleSpawner(self.scheduler, self.session, seed=seed)
        self.jump = JumpController(self.scheduler, self.session)
        self.clock = SimulationClock(self.scheduler, self.session, on_collision=self.on_collision)

    @property
    def status(self) -> Status:
        return self.session.status

    def handle_action(self) -> Status:
        """Single input trigger: start, jump or restart depending on state."""
        status = self.session.status
        if status is Status.READY:
            self.start()
        elif status is Status.PLAYING:
            if not self.session.airborne:
                self.jump.start_jump()
        elif status is Status.GAME_OVER:
            self.reset()
        return self.session.status

    def start(self):
        if self.session.status is not Status.READY:
            return
        gen = self.session.begin()
        self.spawner.start(gen)
        self.clock.start(gen)
        logger.info("Run started on %s (first obstacle in %.0fms)",
                    self.session.planet.value, self.spawner.last_delay_ms)

    def on_collision(self):
        if self.session.status is not Status.PLAYING:
            return
        self._stop_all()
        self.session.finish()
        logger.info("Game over, score=%d", self.session.score)

    def reset(self):
        self._stop_all()
        self.session.reset()
        logger.info("Reset to ready on %s", self.session.planet.value)

    def change_planet(self, name: str | Planet):
        # physics never change mid-flight: always land in Ready
        self.session.planet = Planet.parse(name)
        self.reset()

    def snapshot(self) -> Snapshot:
        return self.session.snapshot()

    def close(self):
        self._stop_all()
        self.scheduler.cancel_all()

    def _stop_all(self):
        self.spawner.stop()
        self.clock.stop()
        self.jump.stop()
