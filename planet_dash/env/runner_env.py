# planet_dash/env/runner_env.py
from __future__ import annotations
import logging
from typing import Optional, Dict, Any

import numpy as np
import gymnasium as gym
import pygame

from ..game.config import WIDTH, HEIGHT, TICK_MS
from ..game.planets import Planet
from ..game.render import draw_frame
from ..game.session import Status
from ..game.state_machine import GameStateMachine
from .observations import build_observation, observation_bounds

logger = logging.getLogger(__name__)

PASS_REWARD = 5.0


class RunnerEnv(gym.Env):
    """
    Planet Dash Gymnasium environment (vector observations).
    - Simulation ticks every TICK_MS (50 Hz) on a virtual clock.
    - Agent acts every `frame_skip` ticks (default 4) -> 12.5 decisions/sec.
    - Observation: shape (7,), float32, see build_observation.
    """
    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": int(1000 // TICK_MS)}

    def __init__(self,
                 planet: str | Planet = Planet.EARTH,
                 render_mode: Optional[str] = None,
                 frame_skip: int = 4,
                 time_limit_seconds: Optional[float] = 60.0):
        super().__init__()
        assert frame_skip >= 1, "frame_skip must be >= 1"
        assert render_mode is None or render_mode in self.metadata["render_modes"], \
            f"Invalid render_mode {render_mode}"
        self.render_mode = render_mode
        self.frame_skip = int(frame_skip)
        self.planet = Planet.parse(planet)

        self.time_limit_decisions = None
        if time_limit_seconds is not None:
            ticks_per_s = 1000.0 / TICK_MS
            self.time_limit_decisions = int(ticks_per_s * time_limit_seconds / self.frame_skip)

        # --- Gym spaces ---
        # Actions: 0 = NOOP, 1 = JUMP
        self.action_space = gym.spaces.Discrete(2)
        low, high = observation_bounds()
        self.observation_space = gym.spaces.Box(low=low, high=high, dtype=np.float32)

        # --- Runtime state ---
        self.game: Optional[GameStateMachine] = None
        self.timestep: int = 0
        self.current_seed: Optional[int] = None

        # Rendering
        self.screen = None
        self.clock = None
        self.font = None

    # -------------------- Core API --------------------

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict[str, Any]] = None):
        super().reset(seed=seed)  # initializes self.np_random

        # Same seed -> same obstacle timing. Without one, draw it from np_random.
        if seed is not None:
            spawn_seed = int(seed)
        else:
            spawn_seed = int(self.np_random.integers(0, 2**31 - 1))

        if options and "planet" in options:
            self.planet = Planet.parse(options["planet"])

        if self.game is not None:
            self.game.close()
        self.game = GameStateMachine(planet=self.planet, seed=spawn_seed)
        self.game.start()

        self.timestep = 0
        self.current_seed = spawn_seed
        logger.debug("Episode reset: seed=%d planet=%s", spawn_seed, self.planet.value)
        return self._get_obs(), self._info()

    def step(self, action: int):
        assert self.action_space.contains(action), f"Invalid action {action}"
        assert self.game is not None, "Call reset() before step()"
        session = self.game.session

        # JUMP while airborne is ignored by the state machine itself
        if int(action) == 1 and session.status is Status.PLAYING:
            self.game.handle_action()

        score_before = session.score
        for _ in range(self.frame_skip):
            self.game.scheduler.advance(TICK_MS)
            if session.status is not Status.PLAYING:
                break

        passed = session.score - score_before
        alive = session.status is Status.PLAYING
        reward = (1.0 + PASS_REWARD * passed) if alive else -1.0

        self.timestep += 1
        terminated = not alive
        truncated = False
        if (self.time_limit_decisions is not None) and (self.timestep >= self.time_limit_decisions):
            truncated = True

        if self.render_mode == "human":
            self.render()

        return self._get_obs(), float(reward), terminated, truncated, self._info()

    # -------------------- Helpers --------------------

    def _get_obs(self) -> np.ndarray:
        assert self.game is not None
        return build_observation(self.game.session, self.game.jump.velocity)

    def _info(self) -> Dict[str, Any]:
        assert self.game is not None
        s = self.game.session
        return {
            "score": s.score,
            "timestep": self.timestep,
            "seed": self.current_seed,
            "planet": s.planet.value,
            "game_speed": s.game_speed,
        }

    # -------------------- Rendering --------------------

    def render(self):
        if self.render_mode is None or self.game is None:
            return

        if self.screen is None:
            pygame.init()
            if self.render_mode == "human":
                self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
                pygame.display.set_caption("Planet Dash - Gym Env")
                self.font = pygame.font.SysFont("jetbrainsmono", 18)
            else:
                self.screen = pygame.Surface((WIDTH, HEIGHT))
            self.clock = pygame.time.Clock()

        draw_frame(self.screen, self.game.snapshot(), self.font)

        if self.render_mode == "human":
            # Pump minimal event queue so the OS doesn't think we're hung
            pygame.event.pump()
            pygame.display.flip()
            self.clock.tick(self.metadata["render_fps"])
            return None

        arr = pygame.surfarray.array3d(self.screen)  # (W, H, 3)
        return np.transpose(arr, (1, 0, 2))

    def close(self):
        if self.game is not None:
            self.game.close()
        if self.screen is not None:
            if self.render_mode == "human":
                pygame.display.quit()
            pygame.quit()
            self.screen = None
            self.clock = None
            self.font = None
