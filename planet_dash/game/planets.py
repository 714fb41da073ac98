# planet_dash/game/planets.py
from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from .config import PLANETS, DEFAULT_PLANET

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PhysicsProfile:
    """Jump physics for one planet, expressed per nominal frame (FRAME_MS)."""
    gravity: float
    jump_impulse: float

    def __post_init__(self):
        if self.gravity <= 0 or self.jump_impulse <= 0:
            raise ValueError(
                f"gravity and jump_impulse must be > 0, got {self.gravity}, {self.jump_impulse}"
            )


class Planet(str, Enum):
    EARTH = "Earth"
    MOON = "Moon"
    MARS = "Mars"
    JUPITER = "Jupiter"

    @property
    def profile(self) -> PhysicsProfile:
        return PROFILES[self]

    @classmethod
    def default(cls) -> "Planet":
        return cls(DEFAULT_PLANET)

    @classmethod
    def parse(cls, name: Optional[str | "Planet"]) -> "Planet":
        """
        Resolve a selector value to a Planet.
        Matching is case-insensitive; anything unknown falls back to the default
        planet instead of failing the session.
        """
        if isinstance(name, cls):
            return name
        if name is not None:
            key = str(name).strip().lower()
            for planet in cls:
                if planet.value.lower() == key:
                    return planet
        fallback = cls.default()
        logger.warning("Unknown planet %r, falling back to %s", name, fallback.value)
        return fallback

    def next(self) -> "Planet":
        members = list(Planet)
        return members[(members.index(self) + 1) % len(members)]


def _build_profiles(table) -> Dict[Planet, PhysicsProfile]:
    """One profile per Planet member; the table must name exactly the enum members."""
    names = {p.value for p in Planet}
    if set(table) != names:
        raise ValueError(f"planet table {sorted(table)} does not match {sorted(names)}")
    return {
        planet: PhysicsProfile(gravity=float(table[planet.value][0]),
                               jump_impulse=float(table[planet.value][1]))
        for planet in Planet
    }


PROFILES: Dict[Planet, PhysicsProfile] = _build_profiles(PLANETS)
