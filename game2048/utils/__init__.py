# -*- coding: utf-8 -*-
"""
Collaborators built around the engine: keyboard bindings, the high score leaderboard,
and the Matplotlib window used for manual play.
"""

from .control import ManualControl
from .keymap import KEY_BINDINGS, direction_for_key
from .leaderboard import Leaderboard, ScoreRecord
from .windows import WindowBoard

__all__ = ["KEY_BINDINGS", "direction_for_key", "Leaderboard", "ScoreRecord", "ManualControl", "WindowBoard"]
