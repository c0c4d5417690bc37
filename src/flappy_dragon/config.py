"""Game configuration loaded from defaults, .env and environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from . import constants


class ConfigError(ValueError):
    """Raised when a configuration value is malformed or inconsistent."""


@dataclass(frozen=True)
class GameConfig:
    screen_width: int = constants.SCREEN_WIDTH
    screen_height: int = constants.SCREEN_HEIGHT
    frame_duration: float = constants.FRAME_DURATION
    player_start_x: int = constants.PLAYER_START_X
    player_start_y: int = constants.PLAYER_START_Y
    gravity: float = constants.GRAVITY_ACCEL
    max_fall_velocity: float = constants.MAX_FALL_VELOCITY
    flap_impulse: float = constants.FLAP_IMPULSE
    gap_min: int = constants.GAP_Y_MIN
    gap_max: int = constants.GAP_Y_MAX
    max_gap_size: int = constants.MAX_GAP_SIZE
    min_gap_size: int = constants.MIN_GAP_SIZE
    fps: int = constants.RENDER_FPS
    cell_size: int = constants.CELL_SIZE
    log_level: str = constants.LOG_LEVEL

    def __post_init__(self):
        if self.screen_width <= 0 or self.screen_height <= 0:
            raise ConfigError(
                f"Screen must be positive, got {self.screen_width}x{self.screen_height}")
        if self.gap_min >= self.gap_max:
            raise ConfigError(
                f"Empty gap band: gap_min={self.gap_min} gap_max={self.gap_max}")
        if self.min_gap_size < 2:
            raise ConfigError(f"min_gap_size must be at least 2, got {self.min_gap_size}")
        if self.max_gap_size < self.min_gap_size:
            raise ConfigError(
                f"max_gap_size {self.max_gap_size} is below min_gap_size {self.min_gap_size}")
        if self.fps <= 0 or self.cell_size <= 0:
            raise ConfigError("fps and cell_size must be positive")


def _read(name: str, cast, default):
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        return cast(raw)
    except ValueError as e:
        raise ConfigError(f"Invalid value for {name}: {raw!r}") from e


def load_config() -> GameConfig:
    """Load configuration from .env and FLAPPY_* environment variables."""
    load_dotenv()

    return GameConfig(
        screen_width=_read("FLAPPY_SCREEN_WIDTH", int, constants.SCREEN_WIDTH),
        screen_height=_read("FLAPPY_SCREEN_HEIGHT", int, constants.SCREEN_HEIGHT),
        frame_duration=_read("FLAPPY_FRAME_DURATION", float, constants.FRAME_DURATION),
        fps=_read("FLAPPY_FPS", int, constants.RENDER_FPS),
        cell_size=_read("FLAPPY_CELL_SIZE", int, constants.CELL_SIZE),
        log_level=os.environ.get("FLAPPY_LOG_LEVEL", constants.LOG_LEVEL),
    )
