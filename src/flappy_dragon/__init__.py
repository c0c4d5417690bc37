"""
Flappy Dragon: a side-scrolling obstacle-avoidance game on a character grid.
"""

from .config import ConfigError, GameConfig, load_config
from .data_models import GameMode, InputEvent, Obstacle, Player
from .game_state import GameState
from .physics_core import PhysicsCore
from .render import TickContext

__all__ = [
    "ConfigError",
    "GameConfig",
    "GameMode",
    "GameState",
    "InputEvent",
    "Obstacle",
    "PhysicsCore",
    "Player",
    "TickContext",
    "load_config",
]
