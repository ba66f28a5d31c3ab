"""
main.py

Entry point.  Builds registry via auto-discovery, launches the start-up
game and runs a generic loop that drives whatever Scene it holds.
"""

import logging
import sys
import pygame

from config              import WIDTH, HEIGHT, FPS, LOG_LEVEL, START_GAME, PRESET
from core.game_registry  import GameRegistry
from scenes.loader       import register_all

logger = logging.getLogger(__name__)

def configure_logging(level_name: str = LOG_LEVEL) -> None:
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
    )

def build_registry() -> GameRegistry:
    reg = GameRegistry()
    # auto-discover & register any scenes with register(registry)
    register_all(reg)
    return reg

def main() -> None:
    configure_logging()
    pygame.init()
    pygame.display.set_caption("BubblePop")
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    clock  = pygame.time.Clock()

    registry = build_registry()
    params   = registry.presets(START_GAME).get(PRESET, {}) if START_GAME in registry.all_games() else {}
    current  = registry.launch_game(START_GAME, screen, **params)
    if current is None:
        logger.error("Could not launch %s", START_GAME)
        pygame.quit()
        sys.exit(1)

    running = True
    while running:
        dt = clock.tick(FPS) / 1000.0

        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                running = False
                break

            # dispatch to current scene
            if current.handle_event(ev) == "quit":
                running = False
                break

        current.update(dt)
        current.draw()
        pygame.display.flip()

    pygame.quit()
    sys.exit()

if __name__ == "__main__":
    main()
