# planet_dash/env/observations.py
from __future__ import annotations
from typing import List, Optional

import numpy as np

from ..game.config import WIDTH, HEIGHT, PLAYER_X, PLAYER_W
from ..game.planets import PROFILES
from ..game.session import GameSession, Obstacle

# Number of upcoming obstacles described in the vector
LOOKAHEAD = 2
OBS_SIZE = 3 + 2 * LOOKAHEAD

# Normalizers
MAX_JUMP_V = max(p.jump_impulse for p in PROFILES.values())
SPEED_NORM = 50.0
AHEAD_SPAN = float(WIDTH - (PLAYER_X + PLAYER_W))


def _clamp(x: float, lo: float, hi: float) -> float:
    return lo if x < lo else (hi if x > hi else x)


def observation_bounds():
    low = np.array([0.0, -1.0, 0.0] + [0.0, 0.0] * LOOKAHEAD, dtype=np.float32)
    high = np.array([1.0, 1.0, 1.0] + [1.0, 1.0] * LOOKAHEAD, dtype=np.float32)
    return low, high


def build_observation(session: GameSession, velocity: float = 0.0,
                      lookahead: int = LOOKAHEAD) -> np.ndarray:
    """
    Returns a fixed (3 + 2*lookahead,) float32 vector:
      [ height_norm, velocity_norm, speed_norm,
        dist@1, present@1, dist@2, present@2, ... ]
    - height_norm   in [0,1]   (player height / field HEIGHT)
    - velocity_norm in [-1,1]  (0 when grounded)
    - speed_norm    in [0,1]   (game speed / SPEED_NORM)
    - dist@k: gap between the player's right edge and the k-th unscored obstacle,
      normalized by the visible run-up; sentinel 1.0 with present=0 when absent.
    """
    h = _clamp(session.player_height / float(HEIGHT), 0.0, 1.0)
    v = _clamp(velocity / MAX_JUMP_V, -1.0, 1.0) if session.airborne else 0.0
    speed = _clamp(session.game_speed / SPEED_NORM, 0.0, 1.0)

    feats: List[float] = [h, v, speed]

    ahead = [o for o in session.obstacles if not o.scored][:lookahead]
    for k in range(lookahead):
        obs: Optional[Obstacle] = ahead[k] if k < len(ahead) else None
        if obs is None:
            feats.extend([1.0, 0.0])
        else:
            gap = obs.x - (PLAYER_X + PLAYER_W)
            feats.extend([_clamp(gap / AHEAD_SPAN, 0.0, 1.0), 1.0])

    return np.asarray(feats, dtype=np.float32)
