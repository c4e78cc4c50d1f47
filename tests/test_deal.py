import random
import unittest
from collections import Counter

from game import EASY, HARD, Board, InvalidConfig, deal_board, fisher_yates, paired_sequence


class RecordingRng:
    """Records the bound passed to every randrange call and never swaps."""

    def __init__(self):
        self.calls = []

    def randrange(self, n):
        self.calls.append(n)
        return n - 1


class TestShuffler(unittest.TestCase):
    def test_given_even_count_when_building_pairs_then_adjacent_duplicates(self):
        self.assertEqual(paired_sequence(6), [0, 0, 1, 1, 2, 2])
        self.assertEqual(paired_sequence(0), [])
        with self.assertRaises(InvalidConfig):
            paired_sequence(5)

    def test_given_many_seeds_when_shuffling_then_same_multiset(self):
        base = paired_sequence(HARD.total_cards)
        for seed in range(50):
            shuffled = fisher_yates(list(base), random.Random(seed))
            self.assertEqual(Counter(shuffled), Counter(base))
            self.assertEqual(len(shuffled), len(base))

    def test_given_fisher_yates_then_draws_from_end_down_to_one_inclusive(self):
        rng = RecordingRng()
        items = list(range(5))
        fisher_yates(items, rng)
        self.assertEqual(rng.calls, [5, 4, 3, 2])
        self.assertEqual(items, [0, 1, 2, 3, 4])

    def test_given_same_seed_when_dealing_then_same_board(self):
        self.assertEqual(deal_board(EASY, seed=99), deal_board(EASY, seed=99))
        self.assertEqual(deal_board(EASY, rng=random.Random(3)), deal_board(EASY, seed=3))

    def test_given_config_when_dealing_then_board_shape_and_pairs(self):
        board = deal_board(HARD, seed=1)
        self.assertIsInstance(board, Board)
        self.assertEqual((board.rows, board.cols), (8, 8))
        self.assertEqual(len(board), 64)
        for pair_id in range(HARD.total_pairs):
            self.assertEqual(len(board.positions_of(pair_id)), 2)


class TestBoard(unittest.TestCase):
    def test_given_board_when_indexing_then_row_major(self):
        board = Board(rows=2, cols=3, grid=(0, 1, 2, 2, 1, 0))
        self.assertEqual(board.index(1, 2), 5)
        self.assertEqual(board.coord(4), (1, 1))
        self.assertEqual(board.at(3), 2)
        self.assertEqual(list(board.coords())[-1], (1, 2))

    def test_given_shown_set_when_pretty_then_hidden_cards_masked(self):
        board = Board(rows=2, cols=2, grid=(0, 1, 1, 0))
        txt = board.pretty({0}, ["A", "B"])
        self.assertIn("A", txt)
        self.assertNotIn("B", txt)
        self.assertEqual(txt.count("?"), 3)
        self.assertNotIn("?", board.pretty())


if __name__ == '__main__':
    unittest.main(verbosity=2)
