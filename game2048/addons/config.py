"""
Configuration for a game of 2048.

Defaults follow the standard rule set: a 4x4 grid, a win on the 2048 tile and new tiles
that are 2 ninety percent of the time and 4 otherwise.
"""

from dataclasses import dataclass, field

from game2048.addons.exceptions import InvalidConfigError, InvalidGridSizeError

# ##>: Supported grid sizes (inclusive).
MIN_GRID_SIZE = 2
MAX_GRID_SIZE = 10


def is_power_of_two(value: int) -> bool:
    """Return True if ``value`` is a positive power of two."""
    return value > 0 and value & (value - 1) == 0


@dataclass
class GameConfig:
    """
    Configuration of a 2048 playthrough.

    Attributes are validated by ``validate`` when an engine is built, not on assignment.
    """

    # ##>: Board parameters.
    size: int = 4  # Side of the square grid
    win_value: int = 2048  # Tile value that wins the game

    # ##>: Tile spawning.
    tile_probs: dict[int, float] = field(default_factory=lambda: {2: 0.9, 4: 0.1})
    initial_tiles: int = 2  # Tiles placed by a new game

    # ##>: Recovery and reproducibility.
    max_init_attempts: int = 3  # Initialization retries before giving up
    seed: int | None = None  # Seed for the tile generator, None for entropy

    def validate(self) -> None:
        """
        Check every field against the ranges the engine supports.

        Raises
        ------
        InvalidGridSizeError
            If ``size`` is not an integer between ``MIN_GRID_SIZE`` and ``MAX_GRID_SIZE``.
        InvalidConfigError
            If the win value, spawn probabilities, initial tile count or retry count is invalid.
        """
        valid_type = isinstance(self.size, int) and not isinstance(self.size, bool)
        if not valid_type or not MIN_GRID_SIZE <= self.size <= MAX_GRID_SIZE:
            raise InvalidGridSizeError(
                f'Invalid grid size: {self.size}. Size must be an integer between {MIN_GRID_SIZE} and {MAX_GRID_SIZE}.'
            )

        if not is_power_of_two(self.win_value) or self.win_value < 4:
            raise InvalidConfigError(f'Win value must be a power of two >= 4, got {self.win_value}')

        if not self.tile_probs:
            raise InvalidConfigError('At least one spawnable tile value is required')
        for value, prob in self.tile_probs.items():
            if not is_power_of_two(value) or value < 2:
                raise InvalidConfigError(f'Spawnable tile must be a power of two >= 2, got {value}')
            if prob < 0:
                raise InvalidConfigError(f'Spawn probability must be non-negative, got {prob} for {value}')
        if abs(sum(self.tile_probs.values()) - 1.0) > 1e-9:
            raise InvalidConfigError(f'Spawn probabilities must sum to 1, got {sum(self.tile_probs.values())}')

        cell_count = self.size * self.size
        if not 0 < self.initial_tiles <= cell_count:
            raise InvalidConfigError(f'Initial tile count must be in 1..{cell_count}, got {self.initial_tiles}')

        if self.max_init_attempts < 1:
            raise InvalidConfigError(f'At least one initialization attempt is required, got {self.max_init_attempts}')
