import unittest

import numpy as np

from lca.detector import detect_winner


class TestDetectWinner(unittest.TestCase):
    def test_no_winner_below_threshold(self):
        self.assertIsNone(detect_winner(np.array([0.1, 0.99, -2.0]), 1.0))

    def test_reaching_threshold_counts(self):
        self.assertEqual(detect_winner(np.array([0.2, 1.0]), 1.0), 2)

    def test_lowest_index_wins_simultaneous_crossing(self):
        # Accumulator 3 is furthest above threshold but accumulator 2 comes first
        self.assertEqual(detect_winner(np.array([0.5, 1.1, 3.0]), 1.0), 2)

    def test_index_is_one_based(self):
        self.assertEqual(detect_winner(np.array([2.0]), 1.0), 1)


if __name__ == '__main__':
    unittest.main()
