"""
Ray Arena - first-person raycaster in a walled arena
W/A/S/D move, Left/Right turn, TAB toggles the overhead view, ESC quits
"""

import logging
import os
import sys

import pygame

from config import GAME_TITLE, GAME_VERSION, ConfigError, load_config
from engine import Rect, RenderPipeline, PygameSurface
from game.frame_state import FrameState, update, toggle_render_mode
from game.input import handle_key, KEY_TOGGLE_MODE, KEY_QUIT

logger = logging.getLogger(__name__)


class ArenaGame:
    """
    Main game class
    """
    def __init__(self, config):
        pygame.init()

        self.config = config

        # Screen
        self.screen = pygame.display.set_mode((config.width, config.height))
        pygame.display.set_caption(f"{GAME_TITLE} v{GAME_VERSION}")
        self.surface = PygameSurface(self.screen)

        # World and renderer
        viewport = Rect.from_size(config.width, config.height)
        self.frame = FrameState.for_viewport(viewport, config.mode)
        self.pipeline = RenderPipeline(config)

        self.clock = pygame.time.Clock()
        self.running = True

    def handle_events(self):
        """Handle input events"""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                return

            if event.type == pygame.KEYDOWN:
                if event.key == KEY_QUIT:
                    self.running = False
                    return
                if event.key == KEY_TOGGLE_MODE:
                    toggle_render_mode(self.frame)
                    continue
                handle_key(self.frame.moves, event.key, True)
            elif event.type == pygame.KEYUP:
                handle_key(self.frame.moves, event.key, False)

    def update(self):
        """Apply held movement to the player"""
        update(self.frame, self.config)

    def render(self):
        """Draw the frame and flip the display"""
        self.pipeline.render(self.frame, self.surface)
        self.surface.present()
        pygame.display.flip()

    def run(self):
        """Main game loop"""
        logger.info("Starting %s v%s", GAME_TITLE, GAME_VERSION)
        while self.running:
            self.clock.tick(self.config.fps)

            self.handle_events()
            self.update()
            self.render()

        pygame.quit()


def log_level_from_env(environ=None):
    """
    Logging level named by RAY_ARENA_LOG_LEVEL, INFO when unset

    Raises:
        ConfigError: if the name is not a logging level
    """
    environ = os.environ if environ is None else environ
    name = environ.get('RAY_ARENA_LOG_LEVEL', 'INFO').strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ConfigError(f"RAY_ARENA_LOG_LEVEL must be a logging level name, got {name!r}")
    return level


def main():
    """Entry point"""
    try:
        level = log_level_from_env()
    except ConfigError as e:
        sys.exit(f"{GAME_TITLE}: {e}")
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(name)s - %(message)s',
    )
    config_path = sys.argv[1] if len(sys.argv) > 1 else None
    game = ArenaGame(load_config(config_path))
    game.run()


if __name__ == "__main__":
    main()
