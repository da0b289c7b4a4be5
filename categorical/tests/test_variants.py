"""
Tests for behaviour specific to each categorical variant.
"""

import unittest
from fractions import Fraction

from categorical.distribution import CategoricalHash, CategoricalOrd, CategoricalVec


class TestCategoricalHash(unittest.TestCase):
    """Test cases for the hash-based variant."""

    def test_requires_hashable_outcomes(self):
        """Test that unhashable outcomes are rejected."""
        with self.assertRaises(TypeError):
            CategoricalHash.uniform([[1], [2]])

    def test_deduplicates(self):
        """Test that equal outcomes share one entry."""
        dist = CategoricalHash.from_pairs([(1, 1), (1.0, 1), (True, 1)])

        # 1, 1.0 and True hash and compare equal
        self.assertEqual(len(dist), 1)
        self.assertEqual(dist.probability_of(1), 3)


class TestCategoricalOrd(unittest.TestCase):
    """Test cases for the ordering-based variant."""

    def test_outcomes_are_sorted(self):
        """Test that outcomes are kept in ascending order."""
        dist = CategoricalOrd.weighted([(3, 1), (1, 1), (2, 1), (1, 1)])

        self.assertEqual(dist.outcomes, (1, 2, 3))
        self.assertAlmostEqual(dist.probability_of(1), 0.5)

    def test_unhashable_outcomes(self):
        """Test that outcomes only need an ordering."""
        dist = CategoricalOrd.uniform([[1, 2], [0], [1, 2]], one=Fraction(1))

        self.assertEqual(dist.outcomes, ([0], [1, 2]))
        self.assertEqual(dist.probability_of([1, 2]), Fraction(2, 3))
        self.assertEqual(dist.probability_of([5]), 0)
        self.assertIn([0], dist)
        self.assertNotIn([3], dist)

    def test_combine_into_lists(self):
        """Test combining into unhashable outcomes."""
        coin = CategoricalOrd.uniform(["H", "T"], one=Fraction(1))

        sequences = coin.combine(coin, lambda a, b: [a, b])

        self.assertEqual(len(sequences), 4)
        self.assertEqual(sequences.probability_of(["H", "T"]), Fraction(1, 4))


    def test_incomparable_query_is_absent(self):
        """Test that an outcome of another type has probability zero."""
        dist = CategoricalOrd.uniform([1, 2])

        self.assertEqual(dist.probability_of("x"), 0)
        self.assertNotIn("x", dist)
        self.assertNotIn(None, dist)


class TestCategoricalVec(unittest.TestCase):
    """Test cases for the variant without deduplication."""

    def test_keeps_duplicates(self):
        """Test that equal outcomes remain separate entries."""
        dist = CategoricalVec.uniform([1, 1, 2], one=Fraction(1))

        self.assertEqual(len(dist), 3)
        self.assertEqual(dist.outcomes, (1, 1, 2))
        self.assertEqual(dist.probability_of(1), Fraction(2, 3))

    def test_equality_only_outcomes(self):
        """Test outcomes that are neither hashable nor ordered."""
        dist = CategoricalVec.uniform([{"a": 1}, {"b": 2}])

        self.assertAlmostEqual(dist.probability_of({"a": 1}), 0.5)
        self.assertEqual(dist.probability_of({"c": 3}), 0)
        self.assertIn({"b": 2}, dist)

    def test_combine_keeps_all_pairs(self):
        """Test that combination keeps one entry per input pair."""
        die = CategoricalVec.uniform(range(1, 7), one=Fraction(1))

        max_of_two = die.combine(die, max)

        self.assertEqual(len(max_of_two), 36)
        self.assertEqual(max_of_two.probability_of(6), Fraction(11, 36))
        self.assertEqual(max_of_two.total(), 1)

    def test_converts_to_deduplicated(self):
        """Test moving entries into a deduplicating variant."""
        die = CategoricalVec.uniform(range(1, 7), one=Fraction(1))
        entries = die.combine(die, max)

        dedup = CategoricalHash.from_pairs(entries.items())

        self.assertEqual(len(dedup), 6)
        self.assertEqual(dedup.probability_of(3), Fraction(5, 36))


if __name__ == '__main__':
    unittest.main()
