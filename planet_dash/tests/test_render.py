# planet_dash/tests/test_render.py
from __future__ import annotations

import pygame

from planet_dash.game.config import WIDTH, HEIGHT, TICK_MS, COLOR_PLAYER, COLOR_OBSTACLE, COLOR_DANGER
from planet_dash.game.planets import Planet
from planet_dash.game.render import draw_frame, player_rect, obstacle_rect
from planet_dash.game.session import GameSession
from planet_dash.game.state_machine import GameStateMachine


def test_draw_frame_places_player_and_obstacles():
    surf = pygame.Surface((WIDTH, HEIGHT))
    s = GameSession()
    s.spawn_obstacle(x=700.0)
    draw_frame(surf, s.snapshot())

    assert tuple(surf.get_at(player_rect(0.0).center))[:3] == COLOR_PLAYER
    assert tuple(surf.get_at(obstacle_rect(700.0).center))[:3] == COLOR_OBSTACLE


def test_player_drawn_higher_when_airborne_and_red_on_game_over():
    low, high = player_rect(0.0), player_rect(80.0)
    assert high.bottom == low.bottom - 80

    surf = pygame.Surface((WIDTH, HEIGHT))
    s = GameSession()
    s.begin()
    s.finish()
    draw_frame(surf, s.snapshot())
    assert tuple(surf.get_at(player_rect(0.0).center))[:3] == COLOR_DANGER


def test_player_stays_on_screen_at_every_planet_apex():
    for planet in Planet:
        game = GameStateMachine(planet=planet, seed=0)
        game.handle_action()        # start
        game.handle_action()        # jump
        apex = 0.0
        while game.session.airborne:
            game.scheduler.advance(TICK_MS)
            apex = max(apex, game.session.player_height)
        game.close()

        r = player_rect(apex)
        assert r.bottom > 0, f"{planet.value}: player drawn above the window at apex {apex:.1f}"
        assert r.top >= 0
        assert r.bottom <= player_rect(0.0).bottom
