# -*- coding: utf-8 -*-
"""
Manual play: wires keyboard events from a window to a game engine.
"""
import logging
from typing import Any, Protocol

from numpy import ndarray

from game2048.envs.engine import GameEngine, GameStatus
from game2048.utils.keymap import direction_for_key
from game2048.utils.leaderboard import Leaderboard

# ##>: Module logger.
_logger = logging.getLogger(__name__)


class Display(Protocol):
    """What the controller needs from a window."""

    def show_image(self, board: ndarray, status: str = "") -> None: ...

    def close(self) -> None: ...


class ManualControl:
    """
    Play a game from key presses.

    The engine, the window and the leaderboard are passed in; nothing is looked up globally.

    Parameters
    ----------
    engine : GameEngine
        The game to drive.
    window : Display
        Where the grid is drawn.
    leaderboard : Leaderboard, optional
        Ranking updated with the final score of each finished game.

    Notes
    -----
    - Arrow keys and WASD move, ``u`` undoes the last move.
    - ``backspace`` or ``r`` restarts, ``escape`` closes the window.
    """

    RESTART_KEYS = ("backspace", "r")
    UNDO_KEYS = ("u",)

    def __init__(self, engine: GameEngine, window: Display, leaderboard: Leaderboard | None = None):
        self.engine = engine
        self.window = window
        self.leaderboard = leaderboard if leaderboard is not None else Leaderboard()

    def status_line(self) -> str:
        """Score line shown above the grid."""
        score = self.engine.get_score()
        text = f"Score: {score}    Best: {max(self.leaderboard.best_score(), score)}"
        if self.engine.status is GameStatus.WON:
            return f"{text}    You win!"
        if self.engine.status is GameStatus.LOST:
            return f"{text}    Game over!"
        return text

    def redraw(self) -> None:
        self.window.show_image(self.engine.get_grid(), self.status_line())

    def reset(self) -> None:
        """Restart the game and redraw."""
        self.engine.restart()
        self.redraw()

    def step(self, key: str) -> bool:
        """
        Play the move bound to ``key``.

        Returns
        -------
        bool
            True if the grid changed.
        """
        direction = direction_for_key(key)
        if direction is None or not self.engine.can_move(direction):
            return False

        moved = self.engine.move(direction)
        if moved and self.engine.status is not GameStatus.PLAYING:
            rank = self.leaderboard.check_and_update(self.engine.get_score())
            if rank is not None:
                _logger.info("Score %d entered the leaderboard at rank %d", self.engine.get_score(), rank + 1)

        self.redraw()
        return moved

    def key_handler(self, event: Any) -> None:
        """Handle one key press event (anything with a ``key`` attribute)."""
        key = getattr(event, "key", None)
        _logger.debug("pressed %s", key)

        if key == "escape":
            self.window.close()
            return

        if key in self.RESTART_KEYS:
            self.reset()
            return

        if key in self.UNDO_KEYS:
            if self.engine.undo():
                self.redraw()
            return

        self.step(key)
