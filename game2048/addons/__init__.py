"""Configuration and error types shared by the engine."""

from .config import MAX_GRID_SIZE, MIN_GRID_SIZE, GameConfig, is_power_of_two
from .exceptions import GameError, InitializationError, InvalidConfigError, InvalidGridSizeError

__all__ = [
    "GameConfig",
    "MIN_GRID_SIZE",
    "MAX_GRID_SIZE",
    "is_power_of_two",
    "GameError",
    "InvalidConfigError",
    "InvalidGridSizeError",
    "InitializationError",
]
