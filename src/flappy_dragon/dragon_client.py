#!/usr/bin/env python3
"""
dragon_client.py

Pygame host: owns the window, the clock and key capture, and replays the
game's render directives onto a grid of character cells.
"""

import logging
from typing import Dict, Optional

import pygame

from . import constants as c
from .config import GameConfig, load_config
from .data_models import InputEvent
from .game_state import GameState
from .logger import setup_logging
from .render import Clear, PrintCentered, PrintText, SetGlyph, TickContext

logger = logging.getLogger(__name__)

KEY_BINDINGS: Dict[int, InputEvent] = {
    pygame.K_SPACE: InputEvent.FLAP,
    pygame.K_p: InputEvent.RESTART,
    pygame.K_q: InputEvent.QUIT,
}


def map_key(key: int) -> Optional[InputEvent]:
    """Translates a pygame key code; unbound keys map to None."""
    return KEY_BINDINGS.get(key)


def cell_rect(x: int, y: int, cell_size: int) -> pygame.Rect:
    return pygame.Rect(x * cell_size, y * cell_size, cell_size, cell_size)


class DragonClient:
    def __init__(self, config: Optional[GameConfig] = None):
        self.config = config or GameConfig()
        size = (self.config.screen_width * self.config.cell_size,
                self.config.screen_height * self.config.cell_size)
        try:
            pygame.init()
            self.screen = pygame.display.set_mode(size)
            pygame.display.set_caption(c.WINDOW_TITLE)
            self.font = pygame.font.Font(None, self.config.cell_size + 4)
        except pygame.error:
            logger.exception("Pygame failed to initialise")
            pygame.quit()
            raise

        self.state = GameState(self.config)
        self.clock = pygame.time.Clock()

    def run(self):
        """The main client execution loop."""
        logger.info("Window %sx%s cells at %d FPS",
                    self.config.screen_width, self.config.screen_height, self.config.fps)
        running = True
        try:
            while running:
                frame_time_ms = self.clock.tick(self.config.fps)

                # Handle Pygame Events (last bound key of the frame wins)
                key = None
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.KEYDOWN:
                        if event.key == pygame.K_ESCAPE:
                            running = False
                        key = map_key(event.key) or key

                ctx = TickContext(frame_time_ms=float(frame_time_ms), key=key)
                self.state.tick(ctx)
                self.draw(ctx)

                if ctx.quitting:
                    running = False
        finally:
            pygame.quit()

    def draw(self, ctx: TickContext):
        """Replays the tick's directives onto the window."""
        size = self.config.cell_size
        for command in ctx.commands:
            if isinstance(command, Clear):
                self.screen.fill(command.background)
            elif isinstance(command, SetGlyph):
                rect = cell_rect(command.x, command.y, size)
                pygame.draw.rect(self.screen, command.bg, rect)
                glyph = self.font.render(command.glyph, True, command.fg)
                self.screen.blit(glyph, glyph.get_rect(center=rect.center))
            elif isinstance(command, PrintText):
                text = self.font.render(command.text, True, c.WHITE)
                self.screen.blit(text, cell_rect(command.x, command.y, size).topleft)
            elif isinstance(command, PrintCentered):
                text = self.font.render(command.text, True, c.WHITE)
                center = (self.screen.get_width() // 2, command.y * size + size // 2)
                self.screen.blit(text, text.get_rect(center=center))

        pygame.display.flip()


def main():
    config = load_config()
    setup_logging(config.log_level)
    DragonClient(config).run()


if __name__ == "__main__":
    main()
