from unittest import TestCase, main

from game2048.core.merge import merge_line


class TestMergeLine(TestCase):
    """Test the single-line merge rule."""

    def test_merge_pair_then_keep(self):
        """A pair merges and the following tile is kept."""
        self.assertEqual(merge_line([2, 2, 4]), ([4, 4], 4))

    def test_no_cascade(self):
        """A freshly merged tile does not merge again in the same pass."""
        self.assertEqual(merge_line([2, 2, 2, 2]), ([4, 4], 8))
        self.assertEqual(merge_line([4, 2, 2]), ([4, 4], 4))

    def test_odd_run(self):
        """The pair closest to the start merges first."""
        self.assertEqual(merge_line([2, 2, 2]), ([4, 2], 4))

    def test_two_pairs(self):
        """Score adds up over every merge of the line."""
        self.assertEqual(merge_line([2, 2, 4, 4]), ([4, 8], 12))

    def test_zeros_ignored(self):
        """Empty cells are dropped before merging."""
        self.assertEqual(merge_line([2, 0, 2, 0]), ([4], 4))
        self.assertEqual(merge_line([0, 0, 0, 0]), ([], 0))

    def test_single_and_distinct(self):
        """Nothing merges without equal neighbours."""
        self.assertEqual(merge_line([8]), ([8], 0))
        self.assertEqual(merge_line([2, 4, 2, 4]), ([2, 4, 2, 4], 0))

    def test_output_never_longer(self):
        """The merged line is never longer than the input."""
        for line in ([2, 4, 8, 16], [2, 2, 8, 8], [16, 16, 16]):
            merged, _ = merge_line(line)
            self.assertLessEqual(len(merged), len(line))
            self.assertNotIn(0, merged)


if __name__ == '__main__':
    main()
