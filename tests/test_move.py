from unittest import TestCase, main

from numpy.random import default_rng

from game2048.core.direction import Direction
from game2048.core.gamemove import (
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
from game2048.core.grid import Grid
from helpers import generate_random_board


def single_row(row):
    return Grid.from_values([row, [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])


class TestMoves(TestCase):
    """Test the four move functions."""

    def test_move_left(self):
        """Rows slide and merge towards the left."""
        grid = Grid.from_values([[2, 2, 4, 4], [0, 2, 2, 4], [2, 0, 0, 2], [2, 2, 2, 2]])
        result = move_left(grid)
        self.assertEqual(result, MoveResult(moved=True, score=28))
        self.assertEqual(grid.to_list(), [[4, 8, 0, 0], [4, 4, 0, 0], [4, 0, 0, 0], [4, 4, 0, 0]])

    def test_move_right_single_row(self):
        """A right move merges towards the right edge."""
        grid = single_row([2, 0, 2, 0])
        result = move_right(grid)
        self.assertEqual(result, MoveResult(moved=True, score=4))
        self.assertEqual(grid.to_list()[0], [0, 0, 0, 4])

    def test_move_right_merges_from_right(self):
        """The pair closest to the right edge merges first."""
        grid = single_row([2, 2, 2, 0])
        move_right(grid)
        self.assertEqual(grid.to_list()[0], [0, 0, 2, 4])

    def test_move_up(self):
        """Columns slide and merge towards the top."""
        grid = Grid.from_values([[2, 0, 0, 0], [2, 0, 0, 0], [4, 0, 0, 0], [0, 0, 0, 8]])
        result = move_up(grid)
        self.assertEqual(result, MoveResult(moved=True, score=4))
        self.assertEqual(grid.to_list(), [[4, 0, 0, 8], [4, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])

    def test_move_down(self):
        """Columns slide and merge towards the bottom."""
        grid = Grid.from_values([[2, 0, 0, 8], [2, 0, 0, 0], [4, 0, 0, 0], [0, 0, 0, 0]])
        result = move_down(grid)
        self.assertEqual(result, MoveResult(moved=True, score=4))
        self.assertEqual(grid.to_list(), [[0, 0, 0, 0], [0, 0, 0, 0], [4, 0, 0, 0], [4, 0, 0, 8]])

    def test_gap_counts_as_move(self):
        """Closing a gap is a move even without a merge."""
        grid = single_row([0, 0, 0, 2])
        result = move_left(grid)
        self.assertEqual(result, MoveResult(moved=True, score=0))
        self.assertEqual(grid.to_list()[0], [2, 0, 0, 0])

    def test_no_change(self):
        """A packed row without merges does not move."""
        grid = single_row([2, 4, 8, 0])
        before = grid.clone()
        self.assertEqual(move_left(grid), MoveResult(moved=False, score=0))
        self.assertTrue(grid.equals(before))

    def test_move_left_twice_is_idempotent(self):
        """A second left move never finds anything left to do."""
        generator = default_rng(42)
        for _ in range(200):
            grid = Grid.from_values(generate_random_board(generator))
            move_left(grid)
            self.assertFalse(move_left(grid).moved)

    def test_directions_are_symmetric(self):
        """A right move is the mirror image of a left move."""
        generator = default_rng(1)
        for _ in range(100):
            board = generate_random_board(generator)
            right, left = Grid.from_values(board), Grid.from_values(board[:, ::-1])
            right_result, left_result = move_right(right), move_left(left)
            left.reverse_rows()
            self.assertTrue(right.equals(left))
            self.assertEqual(right_result, left_result)


class TestMoveQueries(TestCase):
    """Test move probing helpers."""

    def test_apply_move_dispatch(self):
        """String and enum directions reach the same move."""
        first, second = single_row([2, 2, 0, 0]), single_row([2, 2, 0, 0])
        self.assertEqual(apply_move(first, 'right'), apply_move(second, Direction.RIGHT))
        self.assertTrue(first.equals(second))

    def test_apply_move_invalid_direction(self):
        """Unknown directions leave the grid untouched."""
        grid = single_row([2, 2, 0, 0])
        before = grid.clone()
        self.assertEqual(apply_move(grid, 'diagonal'), MoveResult(moved=False, score=0))
        self.assertEqual(apply_move(grid, None), MoveResult(moved=False, score=0))
        self.assertTrue(grid.equals(before))

    def test_can_move_never_mutates(self):
        """Probing a move never changes the grid."""
        generator = default_rng(3)
        for _ in range(100):
            grid = Grid.from_values(generate_random_board(generator))
            before = grid.clone()
            for direction in Direction:
                can_move(grid, direction)
                self.assertTrue(grid.equals(before))

    def test_can_move_matches_move(self):
        """Probing agrees with the move itself."""
        grid = Grid.from_values([[2, 0, 0, 0], [2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        self.assertFalse(can_move(grid, 'left'))
        self.assertTrue(can_move(grid, 'right'))
        self.assertTrue(can_move(grid, 'up'))
        self.assertTrue(can_move(grid, 'down'))
        self.assertFalse(can_move(grid, 'sideways'))

    def test_legal_directions(self):
        """Legal directions are listed in declaration order."""
        grid = Grid.from_values([[2, 0, 0, 0], [2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        self.assertEqual(legal_directions(grid), [Direction.RIGHT, Direction.UP, Direction.DOWN])

    def test_is_stuck(self):
        """A full grid without equal neighbours is stuck."""
        stuck = Grid.from_values([[2, 4, 8, 16], [32, 64, 128, 256], [512, 1024, 2048, 4096], [2, 4, 8, 16]])
        self.assertTrue(is_stuck(stuck))
        self.assertEqual(legal_directions(stuck), [])

        mergeable = Grid.from_values([[2, 2, 8, 16], [32, 64, 128, 256], [512, 1024, 2048, 4096], [2, 4, 8, 16]])
        self.assertFalse(is_stuck(mergeable))

        with_gap = Grid.from_values([[2, 4, 8, 0], [32, 64, 128, 256], [512, 1024, 2048, 4096], [2, 4, 8, 16]])
        self.assertFalse(is_stuck(with_gap))


if __name__ == '__main__':
    main()
