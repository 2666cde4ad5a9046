from unittest import TestCase, main

from game2048.utils.leaderboard import Leaderboard, ScoreRecord


def fixed_clock():
    return '2026-10-18'


class TestLeaderboard(TestCase):
    """Test high score ranking."""

    def setUp(self):
        """Initialize an empty leaderboard before each test."""
        self.board = Leaderboard(clock=fixed_clock)

    def test_starts_with_zero_scores(self):
        """A new leaderboard holds three zero entries."""
        self.assertEqual(self.board.scores, [ScoreRecord(0, '2026-10-18')] * 3)
        self.assertEqual(self.board.best_score(), 0)

    def test_ranking(self):
        """Scores are kept best first and the lowest drops out."""
        self.assertEqual(self.board.check_and_update(100), 0)
        self.assertEqual(self.board.check_and_update(300), 0)
        self.assertEqual(self.board.check_and_update(200), 1)
        self.assertEqual(self.board.check_and_update(50), None)
        self.assertEqual(self.board.check_and_update(150), 2)
        self.assertEqual([record.value for record in self.board.scores], [300, 200, 150])

    def test_ties_rank_below(self):
        """A score equal to an entry ranks right after it."""
        self.board.check_and_update(300)
        self.board.check_and_update(100)
        self.assertEqual(self.board.check_and_update(300), 1)

    def test_non_positive_scores(self):
        """Zero and negative scores never enter."""
        self.assertFalse(self.board.can_enter(0))
        self.assertFalse(self.board.can_enter(-5))
        self.assertIsNone(self.board.check_and_update(0))
        self.assertTrue(self.board.can_enter(1))

    def test_stats(self):
        """Statistics only count played entries."""
        self.assertEqual(
            self.board.stats(), {'total_games': 0, 'best_score': 0, 'average_score': 0, 'last_play_date': None}
        )
        self.board.check_and_update(100)
        self.board.check_and_update(201)
        self.assertEqual(
            self.board.stats(),
            {'total_games': 2, 'best_score': 201, 'average_score': 150, 'last_play_date': '2026-10-18'},
        )

    def test_clear(self):
        """Clearing resets every entry."""
        self.board.check_and_update(100)
        self.board.clear()
        self.assertEqual(self.board.best_score(), 0)

    def test_records_round_trip(self):
        """Records rebuild the same leaderboard; malformed entries are skipped."""
        self.board.check_and_update(64)
        self.board.check_and_update(128)
        records = self.board.to_records()
        self.assertEqual(records[0], {'value': 128, 'date': '2026-10-18'})

        malformed = [{'value': 'x', 'date': 1}, None, {'value': True, 'date': '2026-10-18'}]
        rebuilt = Leaderboard.from_records(records + malformed, clock=fixed_clock)
        self.assertEqual(rebuilt.scores, self.board.scores)

    def test_max_scores(self):
        """The size of the board is configurable."""
        board = Leaderboard(max_scores=1, clock=fixed_clock)
        board.check_and_update(10)
        self.assertIsNone(board.check_and_update(5))
        self.assertEqual(len(board.scores), 1)
        with self.assertRaises(ValueError):
            Leaderboard(max_scores=0)


if __name__ == '__main__':
    main()
