# -*- coding: utf-8 -*-
"""
Python implementation of the 2048 game engine.

This module provides the `GameEngine` class, which owns the grid, the score and the win/loss state
of a playthrough, together with the `GameSnapshot` copies it uses for rollback.
"""

from .engine import GameEngine, GameSnapshot, GameStatus

__all__ = ["GameEngine", "GameSnapshot", "GameStatus"]
