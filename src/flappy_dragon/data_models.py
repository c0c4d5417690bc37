"""
data_models.py: Data structures for the game state.
"""

from dataclasses import dataclass
from enum import Enum


class GameMode(Enum):
    """Top-level mode of a game session."""
    MENU = "menu"
    PLAYING = "playing"
    END = "end"


class InputEvent(Enum):
    """A discrete key press captured by the host for one tick."""
    FLAP = "flap"
    RESTART = "restart"
    QUIT = "quit"


@dataclass
class Player:
    """The dragon. `x` is its world column, `y` its screen row."""
    x: int
    y: int
    velocity: float = 0.0

    def to_state(self):
        """Prepares a minimal state dictionary for logging."""
        return {"x": self.x, "y": self.y, "v": round(self.velocity, 2)}


@dataclass(frozen=True)
class Obstacle:
    """A wall column with a single passable gap centred on `gap_y`."""
    x: int
    gap_y: int
    size: int

    @property
    def half_size(self) -> int:
        return self.size // 2

    def collides_with(self, player: Player) -> bool:
        """True when the player stands in this column outside the gap."""
        does_x_collide = player.x == self.x
        player_above_gap = player.y < self.gap_y - self.half_size
        player_below_gap = player.y > self.gap_y + self.half_size

        return does_x_collide and (player_above_gap or player_below_gap)
