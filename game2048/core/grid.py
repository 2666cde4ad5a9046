"""
Grid model for the 2048 game: a square matrix of tiles backed by a NumPy array.
"""

from __future__ import annotations

from typing import Any, Sequence

from numpy import argwhere, array, array_equal, int64, ndarray, zeros
from numpy.random import Generator, default_rng

# ##>: Tile spawn probabilities for 2048 game (90% for 2, 10% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}


class Grid:
    """
    Square matrix of tiles.

    An empty cell holds 0, any other cell a power of two. The dimensions are fixed at
    construction; moves and spawns mutate the cells in place.

    Parameters
    ----------
    size : int, optional
        Side of the square grid (default is 4).
    generator : Generator, optional
        Random generator used to spawn tiles. A fresh one seeded from ``seed`` is created if omitted.
    seed : int, optional
        Seed for the generator created when ``generator`` is None.
    tile_probs : dict[int, float], optional
        Spawnable tile values and their probabilities (default is ``TILE_SPAWN_PROBS``).
    """

    def __init__(
        self,
        size: int = 4,
        generator: Generator | None = None,
        seed: int | None = None,
        tile_probs: dict[int, float] | None = None,
    ):
        if size < 1:
            raise ValueError(f'Grid size must be positive, got {size}')

        self.size = size
        self._cells = zeros((size, size), dtype=int64)
        self._generator = generator if generator is not None else default_rng(seed)

        probs = tile_probs if tile_probs is not None else TILE_SPAWN_PROBS
        self._tile_values = list(probs.keys())
        self._tile_probs = list(probs.values())

    @classmethod
    def from_values(cls, values: Sequence[Sequence[int]] | ndarray, **kwargs: Any) -> Grid:
        """
        Build a grid from a square matrix of tile values.

        Parameters
        ----------
        values : sequence of sequences or ndarray
            The initial cell values, row by row.
        **kwargs
            Forwarded to the constructor (``generator``, ``seed``, ``tile_probs``).

        Returns
        -------
        Grid
            A new grid holding a copy of ``values``.

        Raises
        ------
        ValueError
            If ``values`` is not a non-empty square matrix.
        """
        cells = array(values, dtype=int64)
        if cells.ndim != 2 or cells.shape[0] != cells.shape[1] or cells.shape[0] == 0:
            raise ValueError(f'Grid values must form a non-empty square matrix, got shape {cells.shape}')

        grid = cls(size=cells.shape[0], **kwargs)
        grid._cells = cells.copy()
        return grid

    @property
    def cells(self) -> ndarray:
        """Copy of the cell matrix."""
        return self._cells.copy()

    @property
    def generator(self) -> Generator:
        """Random generator used for spawning tiles."""
        return self._generator

    def _in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def get(self, row: int, col: int) -> int | None:
        """
        Read one cell.

        Returns
        -------
        int or None
            The cell value, or None if the position is outside the grid.
        """
        if not self._in_bounds(row, col):
            return None
        return int(self._cells[row, col])

    def set(self, row: int, col: int, value: int) -> None:
        """Overwrite one cell. Positions outside the grid are ignored."""
        if self._in_bounds(row, col):
            self._cells[row, col] = value

    def clear(self) -> None:
        """Empty every cell."""
        self._cells.fill(0)

    def empty_cells(self) -> list[tuple[int, int]]:
        """
        List the empty positions.

        Returns
        -------
        list[tuple[int, int]]
            ``(row, col)`` pairs in row-major order.
        """
        return [(int(row), int(col)) for row, col in argwhere(self._cells == 0)]

    def is_full(self) -> bool:
        """True if no cell is empty."""
        return not self.empty_cells()

    def is_empty(self) -> bool:
        """True if every cell is empty."""
        return not self._cells.any()

    def count_tiles(self) -> int:
        """Number of non-empty cells."""
        return int((self._cells != 0).sum())

    def max_tile(self) -> int:
        """Largest tile on the grid, 0 for an empty grid."""
        return int(self._cells.max())

    def contains(self, value: int) -> bool:
        """True if some cell holds exactly ``value``."""
        return bool((self._cells == value).any())

    def spawn_random_tile(self) -> bool:
        """
        Place a new tile on a random empty cell.

        Returns
        -------
        bool
            True if a tile was placed, False if the grid is already full.

        Notes
        -----
        - The cell is picked uniformly among the empty ones.
        - The value is drawn from the spawn probabilities (2 with 90%, 4 with 10% by default).
        - This is the only source of randomness; inject the generator to make it deterministic.
        """
        available_cells = self.empty_cells()
        if not available_cells:
            return False

        row, col = available_cells[int(self._generator.integers(len(available_cells)))]
        value = self._generator.choice(self._tile_values, p=self._tile_probs)
        self._cells[row, col] = int(value)
        return True

    def reverse_rows(self) -> None:
        """Mirror every row in place."""
        self._cells = self._cells[:, ::-1].copy()

    def transpose(self) -> None:
        """Swap rows and columns in place."""
        self._cells = self._cells.T.copy()

    def clone(self) -> Grid:
        """
        Deep copy of the grid.

        The copy has its own cell storage and shares the random generator.
        """
        twin = Grid(size=self.size, generator=self._generator)
        twin._tile_values = list(self._tile_values)
        twin._tile_probs = list(self._tile_probs)
        twin._cells = self._cells.copy()
        return twin

    def equals(self, other: Any) -> bool:
        """Cell-wise comparison; False for grids of another size or non-grids."""
        if not isinstance(other, Grid) or other.size != self.size:
            return False
        return bool(array_equal(self._cells, other._cells))

    def __eq__(self, other: Any) -> bool:
        return self.equals(other)

    __hash__ = None

    def to_list(self) -> list[list[int]]:
        """Cell values as nested Python lists."""
        return self._cells.tolist()

    def __repr__(self) -> str:
        return f'Grid(size={self.size}, cells={self.to_list()})'

    def __str__(self) -> str:
        return '\n'.join(' \t'.join(map(str, row)) for row in self.to_list())
