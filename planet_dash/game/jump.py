# planet_dash/game/jump.py
from __future__ import annotations
import logging
from typing import Optional

from .config import TICK_MS, FRAME_MS
from .scheduler import Scheduler, TimerHandle
from .session import GameSession

logger = logging.getLogger(__name__)


class JumpController:
    """
    Integrates the jump arc with the selected planet's profile.
    dt is normalized to the nominal frame so timer jitter doesn't change the arc:
        ndt = (now - last) / FRAME_MS
        height += velocity * ndt
        velocity -= gravity * ndt
    """
    def __init__(self, scheduler: Scheduler, session: GameSession,
                 tick_ms: float = TICK_MS, frame_ms: float = FRAME_MS):
        self.scheduler = scheduler
        self.session = session
        self.tick_ms = float(tick_ms)
        self.frame_ms = float(frame_ms)
        self.velocity: float = 0.0
        self._gravity: float = 0.0
        self._last_ms: float = 0.0
        self._generation: Optional[int] = None
        self._handle: Optional[TimerHandle] = None

    @property
    def running(self) -> bool:
        return self._handle is not None

    def start_jump(self) -> bool:
        """Begin a jump. Returns False (and changes nothing) if already airborne."""
        if self.session.airborne or self.running:
            return False
        profile = self.session.profile
        self.velocity = profile.jump_impulse
        self._gravity = profile.gravity
        self._last_ms = self.scheduler.now()
        self._generation = self.session.generation
        self.session.take_off()
        gen = self._generation
        self._handle = self.scheduler.call_every(self.tick_ms, lambda: self._step(gen))
        logger.debug("Jump on %s: v0=%.2f g=%.2f", self.session.planet.value,
                     self.velocity, self._gravity)
        return True

    def stop(self):
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        self._generation = None

    def _step(self, generation: int):
        if generation != self._generation:
            return
        if not self.session.is_current(generation):
            # session moved on without stop(): release the loop so later jumps can start
            self.stop()
            return
        now = self.scheduler.now()
        ndt = (now - self._last_ms) / self.frame_ms
        self._last_ms = now

        height = self.session.player_height + self.velocity * ndt
        self.velocity -= self._gravity * ndt

        if height <= 0.0:
            self.session.land()
            self.velocity = 0.0
            self.stop()
            logger.debug("Landed at t=%.0fms", now)
        else:
            self.session.player_height = height
