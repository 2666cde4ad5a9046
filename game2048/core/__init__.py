# -*- coding: utf-8 -*-
"""
Core rules of the 2048 game.

It includes the grid model with random tile spawning, the single-line merge rule, and the
move functions for the four directions together with helpers to probe which moves are legal.
"""

from .direction import Direction
from .gamemove import (
    MoveResult,
    apply_move,
    can_move,
    is_stuck,
    legal_directions,
    move_down,
    move_left,
    move_right,
    move_up,
)
from .grid import TILE_SPAWN_PROBS, Grid
from .merge import merge_line

__all__ = [
    "Direction",
    "Grid",
    "TILE_SPAWN_PROBS",
    "merge_line",
    "MoveResult",
    "move_left",
    "move_right",
    "move_up",
    "move_down",
    "apply_move",
    "can_move",
    "legal_directions",
    "is_stuck",
]
