"""Move directions for the 2048 game."""

from enum import Enum
from typing import Any


class Direction(str, Enum):
    """
    The four directions a move can slide the tiles.

    Values are the lowercase names used by input layers, so ``Direction('left')`` works directly.
    """

    LEFT = 'left'
    RIGHT = 'right'
    UP = 'up'
    DOWN = 'down'

    @classmethod
    def parse(cls, value: Any) -> 'Direction | None':
        """
        Convert a direction name into a ``Direction``.

        Parameters
        ----------
        value : Any
            A ``Direction`` or a direction name. Case and surrounding whitespace are ignored.

        Returns
        -------
        Direction or None
            The matching direction, or None if ``value`` names no direction.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None
