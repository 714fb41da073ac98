# planet_dash/game/render.py
from __future__ import annotations
from typing import Optional

import pygame

from .config import (
    WIDTH, HEIGHT, GROUND_MARGIN,
    PLAYER_X, PLAYER_W, PLAYER_H, OBSTACLE_W, OBSTACLE_H,
    COLOR_BG, COLOR_FG, COLOR_GROUND, COLOR_PLAYER, COLOR_OBSTACLE, COLOR_DANGER, COLOR_MUTED,
)
from .planets import Planet
from .session import Snapshot, Status

GROUND_Y = HEIGHT - GROUND_MARGIN
# tallest drawable height; Moon arcs peak above the field and are pinned to the top edge
MAX_DRAW_HEIGHT = GROUND_Y - PLAYER_H


def player_rect(height: float) -> pygame.Rect:
    """Screen rect of the player; height is measured up from the ground line."""
    drawn = min(height, MAX_DRAW_HEIGHT)
    return pygame.Rect(PLAYER_X, int(GROUND_Y - PLAYER_H - drawn), PLAYER_W, PLAYER_H)


def obstacle_rect(x: float) -> pygame.Rect:
    return pygame.Rect(int(x), GROUND_Y - OBSTACLE_H, OBSTACLE_W, OBSTACLE_H)


def _centered(surf: pygame.Surface, font: pygame.font.Font, msg: str, color, y: int):
    txt = font.render(msg, True, color)
    surf.blit(txt, (WIDTH // 2 - txt.get_width() // 2, y))


def draw_frame(surf: pygame.Surface, snap: Snapshot,
               font: Optional[pygame.font.Font] = None,
               debug: bool = False):
    """Draw one snapshot. Reads state only; never touches the simulation."""
    surf.fill(COLOR_BG)
    pygame.draw.line(surf, COLOR_GROUND, (0, GROUND_Y), (WIDTH, GROUND_Y), 2)

    for _, x in snap.obstacles:
        pygame.draw.rect(surf, COLOR_OBSTACLE, obstacle_rect(x))

    color_player = COLOR_DANGER if snap.status is Status.GAME_OVER else COLOR_PLAYER
    pygame.draw.rect(surf, color_player, player_rect(snap.player_height))

    if font is None:
        return

    hud = f"Score: {snap.score}   Planet: {snap.planet}"
    surf.blit(font.render(hud, True, COLOR_FG), (12, 10))
    keys = "   ".join(f"{i}={p.value}" for i, p in enumerate(Planet, start=1))
    surf.blit(font.render(f"SPACE/tap jump | {keys} | TAB cycle | ESC quit", True, COLOR_MUTED), (12, 32))

    if snap.status is Status.READY:
        _centered(surf, font, "Press Space or Tap to Start", COLOR_FG, int(HEIGHT * 0.4))
    elif snap.status is Status.GAME_OVER:
        _centered(surf, font, "Game Over! Press Space or Tap to Restart", COLOR_DANGER, int(HEIGHT * 0.4))

    if debug:
        lines = [
            f"status={snap.status.value} speed={snap.game_speed:.2f}",
            f"h={snap.player_height:.1f} airborne={snap.airborne} obstacles={len(snap.obstacles)}",
        ]
        for li, msg in enumerate(lines):
            surf.blit(font.render(msg, True, COLOR_MUTED), (WIDTH - 420, 10 + li * 18))
