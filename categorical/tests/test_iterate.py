"""
Tests for the iteration utilities.
"""

import unittest
from fractions import Fraction
from itertools import islice
from operator import add

from categorical.distribution import CategoricalOrd, EmptyInputError, choose, constant
from categorical.utils import iterate, accumulate


class TestIterate(unittest.TestCase):
    """Test cases for the iteration utilities."""

    def test_iterate(self):
        """Test repeated application of a function."""
        values = list(islice(iterate(lambda x: x * 2, 1), 5))
        self.assertEqual(values, [1, 2, 4, 8, 16])

    def test_accumulate(self):
        """Test accumulation with and without an initial value."""
        self.assertEqual(list(accumulate([1, 2, 3], add)), [1, 3, 6])
        self.assertEqual(list(accumulate([1, 2, 3], add, initial=10)), [10, 11, 13, 16])

    def test_accumulate_distributions(self):
        """Test folding coins into the distribution of the number of heads."""
        coins = [choose([0, 1], one=Fraction(1)) for _ in range(3)]

        partials = list(accumulate(coins, lambda acc, coin: acc.combine(coin, add)))

        self.assertEqual(len(partials), 3)
        heads = partials[-1]
        self.assertEqual(heads.probability_of(0), Fraction(1, 8))
        self.assertEqual(heads.probability_of(2), Fraction(3, 8))
        self.assertEqual(heads.total(), 1)


    def test_folded(self):
        """Test folding a list of distributions into one."""
        coins = [choose([0, 1], one=Fraction(1)) for _ in range(3)]

        heads = CategoricalOrd.folded(coins, add)

        self.assertIsInstance(heads, CategoricalOrd)
        self.assertEqual(heads.outcomes, (0, 1, 2, 3))
        self.assertEqual(heads.probability_of(2), Fraction(3, 8))
        self.assertEqual(heads.total(), 1)

    def test_folded_with_initial(self):
        """Test folding from a starting distribution."""
        coin = choose([0, 1], one=Fraction(1))

        shifted = CategoricalOrd.folded([coin], add, initial=constant(10))

        self.assertEqual(shifted.outcomes, (10, 11))
        self.assertEqual(shifted.probability_of(11), Fraction(1, 2))

        # A single distribution is returned unchanged
        self.assertIs(CategoricalOrd.folded([coin], add), coin)

    def test_folded_rejects_empty_input(self):
        """Test that there must be something to fold."""
        with self.assertRaises(EmptyInputError):
            CategoricalOrd.folded([], add)

if __name__ == '__main__':
    unittest.main()
