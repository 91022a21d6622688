"""
Tests for the public function surface in ``ndlite.numerical``.

The functions dispatch on the operand kind: arrays go to the axis-aware
reductions and transforms, host sequences to the single-pass path, and
anything else is rejected with OperandTypeError.
"""

from __future__ import annotations

import unittest

import numpy as np

import ndlite as nd


class TestNumericalSurface(unittest.TestCase):
    def setUp(self) -> None:
        self.x_np = np.array([[1, 2, 3], [4, 5, 6]], dtype=np.uint8)
        self.x = nd.from_numpy(self.x_np)

    def test_reductions_on_arrays(self) -> None:
        self.assertEqual(nd.sum(self.x, axis=0).tolist(), [5, 7, 9])
        self.assertEqual(nd.max(self.x), 6)
        self.assertEqual(nd.min(self.x, axis=1).tolist(), [1, 4])
        self.assertEqual(nd.argmax(self.x, axis=0).tolist(), [1, 1, 1])
        self.assertEqual(nd.argmin(self.x), 0)
        self.assertAlmostEqual(nd.mean(self.x), 3.5)
        self.assertAlmostEqual(nd.std(self.x, ddof=1), float(np.std(self.x_np, ddof=1)))

    def test_transforms_on_arrays(self) -> None:
        self.assertEqual(nd.diff(self.x, n=1, axis=1).tolist(), [[1, 1], [1, 1]])
        self.assertEqual(nd.flip(self.x, axis=0).tolist(), [[4, 5, 6], [1, 2, 3]])
        self.assertEqual(nd.flip(self.x).tolist(), [6, 5, 4, 3, 2, 1])
        self.assertEqual(nd.roll(self.x, 1, axis=1).tolist(), [[3, 1, 2], [6, 4, 5]])

    def test_methods_and_functions_agree(self) -> None:
        self.assertEqual(nd.sum(self.x, axis=1).tolist(), self.x.sum(axis=1).tolist())
        self.assertEqual(nd.roll(self.x, -1).tolist(), self.x.roll(-1).tolist())

    def test_reductions_on_sequences(self) -> None:
        self.assertEqual(nd.max((3, 8, 1)), 8)
        self.assertEqual(nd.argmin(range(3, 0, -1)), 2)
        self.assertEqual(nd.sum([0.5, 0.25]), 0.75)

    def test_unsupported_operand_kinds(self) -> None:
        for bad in ("abc", 5, {1, 2}, self.x_np):
            with self.subTest(operand=type(bad).__name__):
                with self.assertRaises(nd.OperandTypeError):
                    nd.sum(bad)

    def test_transforms_require_arrays(self) -> None:
        with self.assertRaises(nd.OperandTypeError):
            nd.flip([1, 2, 3])
        with self.assertRaises(nd.OperandTypeError):
            nd.diff((1, 2, 3))
        with self.assertRaises(nd.OperandTypeError):
            nd.roll(range(4), 1)

    def test_axis_kind_is_checked_for_every_operand(self) -> None:
        with self.assertRaises(nd.OperandTypeError):
            nd.mean(self.x, axis=1.0)
        with self.assertRaises(nd.OperandTypeError):
            nd.mean([1, 2], axis="0")
        with self.assertRaises(nd.OperandTypeError):
            nd.std(self.x, ddof=0.5)

    def test_axis_range_is_checked(self) -> None:
        with self.assertRaises(nd.OutOfRangeError):
            nd.argmax(self.x, axis=-3)


if __name__ == "__main__":
    unittest.main()
