"""2048 game-state engine: grid, moves, and the playthrough state machine."""

from .addons import GameConfig, GameError, InitializationError, InvalidConfigError, InvalidGridSizeError
from .core import Direction, Grid, MoveResult, merge_line
from .envs import GameEngine, GameSnapshot, GameStatus

__version__ = "0.1.0"

__all__ = [
    "GameConfig",
    "GameError",
    "InitializationError",
    "InvalidConfigError",
    "InvalidGridSizeError",
    "Direction",
    "Grid",
    "MoveResult",
    "merge_line",
    "GameEngine",
    "GameSnapshot",
    "GameStatus",
]
