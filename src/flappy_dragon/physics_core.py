"""
physics_core.py: Deterministic player kinematics, obstacle generation and the
terminal-condition check.
"""

import logging
import random
from typing import Optional

from .config import GameConfig
from .data_models import Player, Obstacle

logger = logging.getLogger(__name__)


class PhysicsCore:
    """
    Physics shared by every game session.

    All tunables come from `config`. Obstacle gaps are drawn from `rng`, which
    may be any object with a `randrange(start, stop)` method.
    """

    def __init__(self, config: Optional[GameConfig] = None, rng=None):
        self.config = config or GameConfig()
        self.rng = rng if rng is not None else random.Random()

    def spawn_player(self) -> Player:
        return Player(x=self.config.player_start_x, y=self.config.player_start_y)

    def apply_gravity_and_movement(self, player: Player):
        """Runs one physics step: gravity, fall, forward move, ceiling clamp."""
        cfg = self.config
        if player.velocity < cfg.max_fall_velocity:
            player.velocity = min(player.velocity + cfg.gravity, cfg.max_fall_velocity)

        player.y += int(player.velocity)
        player.x += 1

        if player.y < 0:
            player.y = 0

    def flap(self, player: Player):
        """Instantaneous upward impulse; replaces the current velocity."""
        player.velocity = self.config.flap_impulse

    def gap_size_for(self, score: int) -> int:
        return max(self.config.min_gap_size, self.config.max_gap_size - score)

    def generate_obstacle(self, origin_x: int, score: int) -> Obstacle:
        """Creates the next obstacle at `origin_x`, sized for `score`."""
        gap_y = self.rng.randrange(self.config.gap_min, self.config.gap_max)
        obstacle = Obstacle(x=origin_x, gap_y=gap_y, size=self.gap_size_for(score))
        logger.debug("Generated obstacle %s", obstacle)
        return obstacle

    def out_of_bounds(self, player: Player) -> bool:
        # Only the bottom edge is fatal; the top is clamped instead.
        return player.y > self.config.screen_height

    def check_collision(self, player: Player, obstacle: Obstacle) -> bool:
        """Checks for a fall past the bottom edge or a hit on the obstacle."""
        return self.out_of_bounds(player) or obstacle.collides_with(player)
