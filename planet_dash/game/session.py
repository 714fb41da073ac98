# planet_dash/game/session.py
from __future__ import annotations
import itertools
import math
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

from .config import WIDTH, OBSTACLE_W, BASE_SPEED, SPEED_SCALE
from .planets import Planet, PhysicsProfile


class Status(str, Enum):
    READY = "ready"
    PLAYING = "playing"
    GAME_OVER = "gameOver"


def speed_for_score(score: int) -> float:
    """Sub-linear difficulty: BASE_SPEED + SPEED_SCALE * ln(score + 1)."""
    return BASE_SPEED + SPEED_SCALE * math.log(score + 1)


@dataclass
class Obstacle:
    id: int
    x: float                # left edge, world == screen x
    scored: bool = False


@dataclass(frozen=True)
class Snapshot:
    """Read-only view handed to the presentation layer once per frame."""
    status: Status
    score: int
    player_height: float
    obstacles: Tuple[Tuple[int, float], ...]   # (id, x) in spawn order
    planet: str
    game_speed: float
    airborne: bool


class GameSession:
    """
    The single mutable game state. Every mutation goes through a method that
    keeps the invariants:
      - player_height >= 0
      - score never decreases
      - obstacles stay in spawn order
      - game_speed derives from score while playing, BASE_SPEED otherwise
    `generation` changes on every lifecycle transition; scheduled callbacks
    compare it with the value they were armed under.
    """

    def __init__(self, planet: Planet = Planet.EARTH):
        self.planet: Planet = planet
        self.generation: int = 0
        self._ids = itertools.count(1)
        self._clear()

    def _clear(self):
        self.status: Status = Status.READY
        self.score: int = 0
        self._player_height: float = 0.0
        self.airborne: bool = False
        self.obstacles: List[Obstacle] = []

    # --- derived ---

    @property
    def profile(self) -> PhysicsProfile:
        return self.planet.profile

    @property
    def game_speed(self) -> float:
        if self.status is Status.PLAYING:
            return speed_for_score(self.score)
        return BASE_SPEED

    @property
    def player_height(self) -> float:
        return self._player_height

    @player_height.setter
    def player_height(self, value: float):
        self._player_height = max(0.0, float(value))

    def is_current(self, generation: int) -> bool:
        return generation == self.generation

    # --- lifecycle ---

    def begin(self) -> int:
        if self.status is not Status.READY:
            raise ValueError(f"cannot begin a run from {self.status.value}")
        self.generation += 1
        self.status = Status.PLAYING
        return self.generation

    def finish(self):
        self.generation += 1
        self.status = Status.GAME_OVER

    def reset(self):
        self.generation += 1
        self._clear()

    # --- player ---

    def take_off(self):
        self.airborne = True

    def land(self):
        self._player_height = 0.0
        self.airborne = False

    # --- obstacles / score ---

    def spawn_obstacle(self, x: float = WIDTH) -> Obstacle:
        obs = Obstacle(id=next(self._ids), x=float(x))
        self.obstacles.append(obs)
        return obs

    def discard_offscreen(self) -> int:
        """Drop obstacles whose right edge has left the field. Returns how many."""
        before = len(self.obstacles)
        self.obstacles = [o for o in self.obstacles if o.x + OBSTACLE_W > 0]
        return before - len(self.obstacles)

    def add_score(self, passed: int):
        if passed < 0:
            raise ValueError(f"score delta must be >= 0, got {passed}")
        self.score += passed

    def snapshot(self) -> Snapshot:
        return Snapshot(
            status=self.status,
            score=self.score,
            player_height=self._player_height,
            obstacles=tuple((o.id, o.x) for o in self.obstacles),
            planet=self.planet.value,
            game_speed=self.game_speed,
            airborne=self.airborne,
        )
