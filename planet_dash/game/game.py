# planet_dash/game/game.py
import sys, argparse, logging
import pygame
from pygame import K_SPACE, K_UP, K_ESCAPE, K_TAB, K_1, K_2, K_3, K_4
from .config import WIDTH, HEIGHT, FPS, MAX_FRAME_MS, SEED_DEFAULT, DEFAULT_PLANET, DEBUG_OVERLAY
from .planets import Planet
from .render import draw_frame
from .state_machine import GameStateMachine

PLANET_KEYS = {K_1: Planet.EARTH, K_2: Planet.MOON, K_3: Planet.MARS, K_4: Planet.JUPITER}


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Planet Dash: jump over obstacles on different planets.")
    p.add_argument("--planet", type=str, default=DEFAULT_PLANET,
                   help=f"Starting planet: {', '.join(pl.value for pl in Planet)}")
    p.add_argument("--seed", type=int, default=SEED_DEFAULT,
                   help="Obstacle timing seed. Omit for random timing each launch.")
    p.add_argument("--log-level", type=str, default="WARNING",
                   help="Python logging level (DEBUG, INFO, WARNING, ...)")
    p.add_argument("--debug", action="store_true", default=DEBUG_OVERLAY,
                   help="Draw the simulation numbers on screen")
    return p.parse_args(argv)


def run(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    pygame.init()
    pygame.display.set_caption("Planet Dash")
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("jetbrainsmono", 18)

    game = GameStateMachine(planet=args.planet, seed=args.seed)

    try:
        while True:
            # real frame time drives the scheduler; clamp stalls
            elapsed_ms = min(clock.tick(FPS), MAX_FRAME_MS)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return
                if event.type == pygame.KEYDOWN:
                    if event.key == K_ESCAPE:
                        return
                    if event.key in (K_SPACE, K_UP):
                        game.handle_action()
                    elif event.key in PLANET_KEYS:
                        game.change_planet(PLANET_KEYS[event.key])
                    elif event.key == K_TAB:
                        game.change_planet(game.session.planet.next())
                if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    game.handle_action()

            game.scheduler.advance(elapsed_ms)

            draw_frame(screen, game.snapshot(), font, debug=args.debug)
            pygame.display.flip()
    finally:
        game.close()
        pygame.quit()


def main():
    run()
    sys.exit(0)


if __name__ == "__main__":
    main()
