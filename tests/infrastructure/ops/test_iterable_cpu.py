"""
Unit tests for single-pass reductions over host sequences
(ops/iterable_cpu.py), reached through the public ``ndlite`` functions.
"""

import unittest

import numpy as np

import ndlite as nd
from ndlite import EmptyOperandError
from ndlite.infrastructure.ops.iterable_cpu import reduce_iterable
from ndlite.infrastructure.ops.reduce_cpu import ReduceOp


class TestIterableExtrema(unittest.TestCase):
    def test_max_and_min(self) -> None:
        self.assertEqual(nd.max([1, 5, 3]), 5)
        self.assertEqual(nd.min((4, 2, 9)), 2)

    def test_min_returns_first_equal_element_object(self) -> None:
        out = nd.min([4, 2, 2.0])
        self.assertEqual(out, 2)
        self.assertIsInstance(out, int)

    def test_arg_variants_return_positions(self) -> None:
        self.assertEqual(nd.argmax(range(5)), 4)
        self.assertEqual(nd.argmin([3, 1, 1]), 1)
        self.assertEqual(nd.argmax((2.5, -1.0, 2.5)), 0)

    def test_empty_sequence_raises(self) -> None:
        for op in (ReduceOp.MIN, ReduceOp.MAX, ReduceOp.ARGMIN, ReduceOp.ARGMAX):
            with self.subTest(op=op):
                with self.assertRaises(EmptyOperandError):
                    reduce_iterable([], op)

    def test_empty_sequence_error_is_value_error(self) -> None:
        with self.assertRaises(ValueError):
            nd.argmax(())


class TestIterableMoments(unittest.TestCase):
    def test_sum_is_float(self) -> None:
        out = nd.sum([1, 2, 3])
        self.assertIsInstance(out, float)
        self.assertEqual(out, 6.0)

    def test_mean_and_std(self) -> None:
        data = [2, 4, 4, 4, 5, 5, 7, 9]
        self.assertAlmostEqual(nd.mean(data), 5.0)
        self.assertAlmostEqual(nd.std(data), 2.0)

    def test_ddof(self) -> None:
        data = [1.5, 2.5, 0.25, 8.0]
        self.assertAlmostEqual(nd.std(data, ddof=1), float(np.std(data, ddof=1)))

    def test_empty_and_short_sequences(self) -> None:
        self.assertEqual(nd.mean([]), 0.0)
        self.assertEqual(nd.sum(()), 0.0)
        self.assertEqual(nd.std([1.0], ddof=1), 0.0)

    def test_welford_matches_numpy_on_random_data(self) -> None:
        rng = np.random.default_rng(7)
        data = (rng.standard_normal(500) * 1e3 + 1e6).tolist()
        np.testing.assert_allclose(nd.mean(data), np.mean(data), rtol=1e-12)
        np.testing.assert_allclose(nd.std(data), np.std(data), rtol=1e-9)

    def test_axis_is_ignored_for_sequences(self) -> None:
        self.assertEqual(nd.sum([1, 2], axis=0), 3.0)
        self.assertEqual(nd.argmax([1, 7, 2], axis=3), 1)


if __name__ == "__main__":
    unittest.main()
