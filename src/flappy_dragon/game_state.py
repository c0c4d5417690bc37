"""
game_state.py: The game session and its menu / playing / game-over mode machine.
"""

import logging
from typing import Optional

from . import constants as c
from .config import GameConfig
from .data_models import GameMode, InputEvent, Player, Obstacle
from .physics_core import PhysicsCore
from .render import TickContext

logger = logging.getLogger(__name__)

MENU_LINES = (
    (5, "Welcome to Andruil's Rusty Dragon"),
    (8, "Andruil's new robot dragon is faulty,"),
    (9, "and it might destroy the splendorous"),
    (10, "city of Phoenixheim if it falls."),
    (12, "P for Playing"),
    (13, "Q for Quitting"),
)


class GameState:
    """
    One game session, driven by `tick` once per rendered frame.

    Owns the player, the single active obstacle, the score and the physics
    step accumulator. Starts in MENU; `restart` enters PLAYING.
    """

    def __init__(self, config: Optional[GameConfig] = None, rng=None):
        self.config = config or GameConfig()
        self.core = PhysicsCore(self.config, rng)
        self.mode = GameMode.MENU
        self._reset()

        self._handlers = {
            GameMode.MENU: self.main_menu,
            GameMode.PLAYING: self.play,
            GameMode.END: self.game_over,
        }

    def _reset(self):
        self.player: Player = self.core.spawn_player()
        self.frame_time = 0.0
        self.score = 0
        self.obstacle: Obstacle = self.core.generate_obstacle(self.config.screen_width, self.score)

    def restart(self):
        """Starts a fresh session and enters PLAYING."""
        self._reset()
        self.mode = GameMode.PLAYING
        logger.info("Game started")

    def tick(self, ctx: TickContext):
        """Advances the session by one frame and records its render directives."""
        self._handlers[self.mode](ctx)

    # -------- Menu & Game Over --------

    def _handle_menu_key(self, ctx: TickContext):
        if ctx.key is InputEvent.RESTART:
            self.restart()
        elif ctx.key is InputEvent.QUIT:
            logger.info("Quit requested from %s", self.mode.value)
            ctx.quitting = True

    def main_menu(self, ctx: TickContext):
        ctx.cls()
        for y, line in MENU_LINES:
            ctx.print_centered(y, line)

        self._handle_menu_key(ctx)

    def game_over(self, ctx: TickContext):
        ctx.cls()
        ctx.print_centered(5, "Andruil did it again...")
        ctx.print_centered(6, "The dragon destroyed the city")
        ctx.print_centered(7, f"But you earned {self.score} points")
        ctx.print_centered(9, "(P) Play Again")
        ctx.print_centered(10, "(Q) Quit Game")

        self._handle_menu_key(ctx)

    # -------- Playing --------

    def play(self, ctx: TickContext):
        ctx.cls(c.BLACK)

        # 1. Fixed-cadence physics step
        self.frame_time += ctx.frame_time_ms
        if self.frame_time > self.config.frame_duration:
            self.frame_time = 0.0
            self.core.apply_gravity_and_movement(self.player)

        # 2. Flap input applies regardless of the step gate
        if ctx.key is InputEvent.FLAP:
            self.core.flap(self.player)

        # 3. Draw the frame
        self._render_player(ctx)
        self._render_obstacle(ctx)
        ctx.print(1, 0, "Press SPACE to fly up.")
        ctx.print(1, 1, f"Score: {self.score}")

        # 4. Pass-through scores and replaces the obstacle
        if self.player.x > self.obstacle.x:
            self.score += 1
            self.obstacle = self.core.generate_obstacle(
                self.player.x + self.config.screen_width, self.score)
            logger.debug("Score %d, next gap size %d", self.score, self.obstacle.size)

        # 5. Terminal condition
        if self.core.check_collision(self.player, self.obstacle):
            self.mode = GameMode.END
            logger.info("Game over with score %d at %s", self.score, self.player.to_state())

    def _render_player(self, ctx: TickContext):
        ctx.set(0, self.player.y, c.YELLOW, c.BLACK, c.PLAYER_GLYPH)

    def _render_obstacle(self, ctx: TickContext):
        screen_x = self.obstacle.x - self.player.x
        if not 0 <= screen_x < self.config.screen_width:
            return

        half_size = self.obstacle.half_size

        # Top part of the obstacle
        for y in range(0, self.obstacle.gap_y - half_size):
            ctx.set(screen_x, y, c.RED, c.NAVY, c.OBSTACLE_GLYPH)

        # Bottom part of the obstacle
        for y in range(self.obstacle.gap_y + half_size, self.config.screen_height):
            ctx.set(screen_x, y, c.RED, c.NAVY, c.OBSTACLE_GLYPH)
