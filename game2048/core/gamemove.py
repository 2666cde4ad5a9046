"""
Move processing for the 2048 game.

Every direction is reduced to a left move: a right move mirrors the rows first, up and down
moves transpose the grid first. Only ``move_left`` scans lines, so all four directions merge
the same way.
"""

from dataclasses import dataclass
from typing import Any, Callable

from game2048.core.direction import Direction
from game2048.core.grid import Grid
from game2048.core.merge import merge_line


@dataclass(frozen=True)
class MoveResult:
    """
    Outcome of a move.

    Attributes
    ----------
    moved : bool
        True if at least one cell changed.
    score : int
        Sum of the tiles created by merges.
    """

    moved: bool
    score: int


NO_MOVE = MoveResult(moved=False, score=0)


def move_left(grid: Grid) -> MoveResult:
    """
    Slide and merge every row towards the left edge.

    Parameters
    ----------
    grid : Grid
        The grid to update. **Modified in-place.**

    Returns
    -------
    MoveResult
        Whether any cell changed and the score gained.

    Notes
    -----
    Closing a gap counts as a move even when nothing merges.
    """
    moved = False
    score = 0

    for row in range(grid.size):
        line = [grid.get(row, col) for col in range(grid.size)]
        merged, row_score = merge_line(line)
        score += row_score

        # ##: Write back left-aligned and pad with empty cells.
        for col in range(grid.size):
            value = merged[col] if col < len(merged) else 0
            if line[col] != value:
                moved = True
                grid.set(row, col, value)

    return MoveResult(moved=moved, score=score)


def move_right(grid: Grid) -> MoveResult:
    """Slide and merge every row towards the right edge. **Modifies ``grid``.**"""
    grid.reverse_rows()
    result = move_left(grid)
    grid.reverse_rows()
    return result


def move_up(grid: Grid) -> MoveResult:
    """Slide and merge every column towards the top edge. **Modifies ``grid``.**"""
    grid.transpose()
    result = move_left(grid)
    grid.transpose()
    return result


def move_down(grid: Grid) -> MoveResult:
    """Slide and merge every column towards the bottom edge. **Modifies ``grid``.**"""
    grid.transpose()
    result = move_right(grid)
    grid.transpose()
    return result


MOVES: dict[Direction, Callable[[Grid], MoveResult]] = {
    Direction.LEFT: move_left,
    Direction.RIGHT: move_right,
    Direction.UP: move_up,
    Direction.DOWN: move_down,
}


def apply_move(grid: Grid, direction: Any) -> MoveResult:
    """
    Apply the move matching ``direction``.

    Parameters
    ----------
    grid : Grid
        The grid to update. **Modified in-place.**
    direction : Direction or str
        The direction of the move.

    Returns
    -------
    MoveResult
        The move outcome; ``NO_MOVE`` without touching the grid if ``direction`` is invalid.
    """
    parsed = Direction.parse(direction)
    if parsed is None:
        return NO_MOVE
    return MOVES[parsed](grid)


def can_move(grid: Grid, direction: Any) -> bool:
    """
    Check whether a move would change the grid.

    Parameters
    ----------
    grid : Grid
        The grid to probe. It is never modified; the move runs on a clone.
    direction : Direction or str
        The direction to check.

    Returns
    -------
    bool
        True if the move changes at least one cell, False otherwise or for an invalid direction.
    """
    if Direction.parse(direction) is None:
        return False
    return apply_move(grid.clone(), direction).moved


def legal_directions(grid: Grid) -> list[Direction]:
    """
    Determine the directions that change the grid.

    Returns
    -------
    list[Direction]
        Legal directions in declaration order (left, right, up, down).
    """
    return [direction for direction in Direction if can_move(grid, direction)]


def is_stuck(grid: Grid) -> bool:
    """
    Check if no move is left.

    The grid is stuck when it has no empty cell and no direction changes it.
    """
    return grid.is_full() and not legal_directions(grid)
