"""Main entry point for the PyGame blackjack table."""

import logging
import sys
from random import Random

import pygame

from config import config
from core.rules import RuleSet
from pygame_ui.config import DIMENSIONS
from pygame_ui.core.scene_manager import SceneManager
from pygame_ui.scenes.game_scene import GameScene

logger = logging.getLogger(__name__)


class Application:
    """Main application class managing the game loop."""

    def __init__(self):
        """Initialize the application."""
        pygame.init()
        pygame.display.set_caption("Blackjack Game")

        self.screen = pygame.display.set_mode(
            (DIMENSIONS.SCREEN_WIDTH, DIMENSIONS.SCREEN_HEIGHT)
        )
        self.clock = pygame.time.Clock()
        self.running = True

        rng = Random(config.seed) if config.seed is not None else None
        rules = RuleSet.from_config(config.game)

        self.scene_manager = SceneManager(self.screen)
        self.scene_manager.register("game", GameScene(rules=rules, rng=rng))
        self.scene_manager.change_to("game")
        logger.info(
            "Table open: %d decks, bankroll %d, bet %d",
            rules.num_decks,
            rules.starting_bankroll,
            rules.bet,
        )

    def handle_events(self) -> None:
        """Process pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                continue

            self.scene_manager.handle_event(event)

    def run(self) -> None:
        """Main application loop."""
        while self.running:
            dt = self.clock.tick(DIMENSIONS.TARGET_FPS) / 1000.0

            self.handle_events()
            self.scene_manager.update(dt)
            self.scene_manager.draw()

        pygame.quit()
        sys.exit()


def main() -> None:
    """Entry point for the pygame UI."""
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = Application()
    app.run()


if __name__ == "__main__":
    main()
