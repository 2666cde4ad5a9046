"""
Error types raised by the 2048 engine.

Only construction-time invariant violations are raised. Invalid moves and out-of-range
cell access are reported through return values instead.
"""


class GameError(Exception):
    """Base class for every error raised by the game engine."""


class InvalidConfigError(GameError, ValueError):
    """A configuration value is outside the range the engine supports."""


class InvalidGridSizeError(InvalidConfigError):
    """The requested grid size cannot hold a playable game."""


class InitializationError(GameError):
    """The engine could not build a valid starting grid."""
