"""2048 game engine: the state machine driving a playthrough."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

from numpy import ndarray
from numpy.random import Generator

from game2048.addons.config import GameConfig
from game2048.addons.exceptions import InitializationError
from game2048.core.direction import Direction
from game2048.core.gamemove import apply_move, can_move, is_stuck, legal_directions
from game2048.core.grid import Grid

# ##>: Module logger.
_logger = logging.getLogger(__name__)


class GameStatus(str, Enum):
    """
    State of a playthrough.

    PLAYING: moves are accepted.
    WON: a tile reached the win value; terminal until restart.
    LOST: the grid is full and no move is left; terminal until restart.
    """

    PLAYING = 'playing'
    WON = 'won'
    LOST = 'lost'


@dataclass(frozen=True)
class GameSnapshot:
    """
    Copy of the engine state at one point of a playthrough.

    The grid is a clone: later moves on the live grid never change a snapshot.
    """

    grid: Grid
    score: int
    move_count: int
    is_win: bool
    is_game_over: bool

    def to_dict(self) -> dict[str, Any]:
        """Plain Python view of the snapshot, for external storage."""
        return {
            'board': self.grid.to_list(),
            'score': self.score,
            'move_count': self.move_count,
            'is_win': self.is_win,
            'is_game_over': self.is_game_over,
        }


class GameEngine:
    """
    2048 game engine.

    This class owns the grid, the score and the terminal flags. A move is validated, applied,
    followed by one new tile, and then the win and loss conditions are evaluated. The state
    before the last successful move is kept so it can be undone once.

    Parameters
    ----------
    config : GameConfig, optional
        Game configuration (default is a standard 4x4 game up to 2048).
    generator : Generator, optional
        Random generator for tile spawning. Built from ``config.seed`` if omitted.

    Raises
    ------
    InvalidGridSizeError
        If the configured size is outside the supported range.
    InvalidConfigError
        If another configuration value is invalid.
    InitializationError
        If no valid starting grid could be built.
    """

    def __init__(self, config: GameConfig | None = None, generator: Generator | None = None):
        self.config = config if config is not None else GameConfig()
        self.config.validate()

        self.size = self.config.size
        self._grid = Grid(
            size=self.size,
            generator=generator,
            seed=self.config.seed,
            tile_probs=self.config.tile_probs,
        )
        self.score = 0
        self.move_count = 0
        self.is_win = False
        self.is_game_over = False
        self.previous: GameSnapshot | None = None

        self.initialize()

    def initialize(self) -> None:
        """
        Start a new game: empty grid, zero score and counters, and the initial tiles.

        The starting grid is checked after spawning. A failed check is logged and the
        initialization retried, up to ``config.max_init_attempts`` times.

        Raises
        ------
        InitializationError
            If every attempt produced an invalid starting grid.
        """
        attempts = self.config.max_init_attempts
        for attempt in range(1, attempts + 1):
            self._grid.clear()
            self.score = 0
            self.move_count = 0
            self.is_win = False
            self.is_game_over = False
            self.previous = None

            for _ in range(self.config.initial_tiles):
                self._grid.spawn_random_tile()

            try:
                self._validate_initialization()
            except InitializationError as error:
                _logger.warning('Game initialization attempt %d/%d failed: %s', attempt, attempts, error)
                continue

            _logger.info('New %dx%d game started', self.size, self.size)
            return

        raise InitializationError(f'Could not build a valid starting grid after {attempts} attempts')

    def _validate_initialization(self) -> None:
        spawnable = set(self.config.tile_probs)
        tiles = [value for row in self._grid.to_list() for value in row if value != 0]

        for value in tiles:
            if value not in spawnable:
                raise InitializationError(f'Invalid initial tile value: {value}')
        if len(tiles) != self.config.initial_tiles:
            expected = self.config.initial_tiles
            raise InitializationError(f'Invalid initial tile count: {len(tiles)}. Expected {expected}.')

    def restart(self) -> None:
        """Start over with a fresh game."""
        self.initialize()

    def move(self, direction: Any) -> bool:
        """
        Play one move.

        Parameters
        ----------
        direction : Direction or str
            The direction to slide the tiles ('left', 'right', 'up' or 'down').

        Returns
        -------
        bool
            True if the grid changed, False if the move was rejected or changed nothing.

        Notes
        -----
        - Invalid directions and moves after a win or a loss are rejected without any change.
        - A move that changes nothing spawns no tile and leaves score and move count untouched.
        - After a successful move a tile is spawned; a grid that is still full afterwards is not
          an error, the loss check handles it.
        - The loss check only runs when the move did not win.
        """
        parsed = Direction.parse(direction)
        if parsed is None:
            _logger.debug('Rejected move: invalid direction %r', direction)
            return False

        if self.is_win or self.is_game_over:
            _logger.debug('Rejected move %s: game is already %s', parsed.value, self.status.value)
            return False

        snapshot = self.snapshot()
        try:
            result = apply_move(self._grid, parsed)
        except Exception:
            _logger.exception('Move %s failed, restoring the previous state', parsed.value)
            self._restore(snapshot)
            raise

        if not result.moved:
            return False

        self.previous = snapshot
        self.score += result.score
        self.move_count += 1

        # ##: Fill randomly one cell.
        if not self._grid.spawn_random_tile():
            _logger.debug('No empty cell left after move %s', parsed.value)

        self._check_win()
        self._check_game_over()
        return True

    def _check_win(self) -> None:
        if self.is_win:
            return
        if self._grid.contains(self.config.win_value):
            self.is_win = True
            _logger.info('Game won with score %d after %d moves', self.score, self.move_count)

    def _check_game_over(self) -> None:
        if self.is_win:
            return
        if is_stuck(self._grid):
            self.is_game_over = True
            _logger.info('Game over with score %d after %d moves', self.score, self.move_count)

    def can_move(self, direction: Any) -> bool:
        """True if a move in ``direction`` would change the grid. The state is never modified."""
        return can_move(self._grid, direction)

    def legal_directions(self) -> list[Direction]:
        """Directions that would change the grid."""
        return legal_directions(self._grid)

    def snapshot(self) -> GameSnapshot:
        """Copy of the current state."""
        return GameSnapshot(
            grid=self._grid.clone(),
            score=self.score,
            move_count=self.move_count,
            is_win=self.is_win,
            is_game_over=self.is_game_over,
        )

    def _restore(self, snapshot: GameSnapshot) -> None:
        self._grid = snapshot.grid.clone()
        self.score = snapshot.score
        self.move_count = snapshot.move_count
        self.is_win = snapshot.is_win
        self.is_game_over = snapshot.is_game_over

    def undo(self) -> bool:
        """
        Roll back the last successful move.

        Only one step is kept: a second undo in a row does nothing. A won or lost game is
        final until ``restart``, so the move that ended it cannot be undone.

        Returns
        -------
        bool
            True if a state was restored, False if there was nothing to undo or the game is over.
        """
        if self.previous is None:
            return False

        if self.status is not GameStatus.PLAYING:
            _logger.debug('Rejected undo: game is already %s', self.status.value)
            return False

        self._restore(self.previous)
        self.previous = None
        _logger.debug('Restored state at move %d', self.move_count)
        return True

    @property
    def status(self) -> GameStatus:
        """Current state of the playthrough."""
        if self.is_win:
            return GameStatus.WON
        if self.is_game_over:
            return GameStatus.LOST
        return GameStatus.PLAYING

    @property
    def max_tile(self) -> int:
        """Largest tile on the grid."""
        return self._grid.max_tile()

    def get_grid(self) -> ndarray:
        """Copy of the cell matrix; changing it does not affect the game."""
        return self._grid.cells

    def get_score(self) -> int:
        return self.score

    def get_move_count(self) -> int:
        return self.move_count

    def is_win_state(self) -> bool:
        return self.is_win

    def is_game_over_state(self) -> bool:
        return self.is_game_over

    def state(self) -> dict[str, Any]:
        """Summary of the current state as plain Python values."""
        return self.snapshot().to_dict()

    def render(self) -> str:
        """
        Render the game board as text, one tab separated line per row.
        """
        return str(self._grid)
