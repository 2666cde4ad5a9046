"""Shared fixtures for the test suite."""

from numpy import int64, zeros
from numpy.random import Generator

from game2048.core.grid import Grid
from game2048.envs.engine import GameEngine


class StubGenerator:
    """
    Deterministic stand-in for ``numpy.random.Generator``.

    ``integers`` picks the cell at ``index`` (negative counts from the end) and ``choice``
    returns the queued tile values in order, repeating the last one.
    """

    def __init__(self, values=(2,), index=0):
        self.values = list(values)
        self.index = index
        self.choice_calls = 0

    def integers(self, high):
        return self.index % high

    def choice(self, values, p=None):
        value = self.values[min(self.choice_calls, len(self.values) - 1)]
        self.choice_calls += 1
        return value


def load_grid(engine: GameEngine, values) -> None:
    """Replace the engine grid, keeping its generator."""
    engine._grid = Grid.from_values(values, generator=engine._grid.generator)


def generate_random_board(generator: Generator, size: int = 4):
    """Generate a random 2048 game board."""
    board = zeros((size, size), dtype=int64)
    num_tiles = generator.integers(1, size * size + 1)
    tile_values = generator.choice([2, 4, 8, 16, 32, 64, 128, 256, 512, 1024], size=num_tiles)
    indices = generator.choice(size * size, size=num_tiles, replace=False)
    board.flat[indices] = tile_values
    return board
