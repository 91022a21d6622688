"""
Unit tests for circular shifts (ops/roll_cpu.py), checked against np.roll.
"""

from __future__ import annotations

import unittest

import numpy as np

from ndlite import DType, OperandTypeError, OutOfRangeError, from_numpy


class TestRollFlat(unittest.TestCase):
    def setUp(self) -> None:
        self.a = from_numpy(np.array([1, 2, 3, 4, 5], dtype=np.uint8))

    def test_positive_distance(self) -> None:
        self.assertEqual(self.a.roll(2).tolist(), [4, 5, 1, 2, 3])

    def test_negative_distance(self) -> None:
        self.assertEqual(self.a.roll(-2).tolist(), [3, 4, 5, 1, 2])

    def test_distance_is_taken_modulo_length(self) -> None:
        self.assertEqual(self.a.roll(7).tolist(), self.a.roll(2).tolist())
        self.assertEqual(self.a.roll(5).tolist(), [1, 2, 3, 4, 5])
        self.assertEqual(self.a.roll(0).tolist(), [1, 2, 3, 4, 5])

    def test_result_is_new_and_source_untouched(self) -> None:
        r = self.a.roll(1)
        self.assertFalse(r.is_view)
        self.assertIsNot(r.storage.owner, self.a.storage)
        self.assertEqual(self.a.tolist(), [1, 2, 3, 4, 5])

    def test_flattened_roll_keeps_shape(self) -> None:
        x_np = np.arange(12, dtype=np.int16).reshape(3, 4)
        x = from_numpy(x_np)
        r = x.roll(5)
        self.assertEqual(r.shape, (3, 4))
        self.assertIs(r.dtype, DType.INT16)
        np.testing.assert_array_equal(r.to_numpy(), np.roll(x_np, 5))

    def test_inverse_restores_input(self) -> None:
        for d in (1, 3, -4, 11):
            self.assertEqual(self.a.roll(d).roll(-d).tolist(), self.a.tolist())


class TestRollAxis(unittest.TestCase):
    def setUp(self) -> None:
        rng = np.random.default_rng(11)
        self.x_np = rng.integers(-50, 50, size=(3, 4, 5)).astype(np.int8)
        self.x = from_numpy(self.x_np)

    def test_matches_numpy_every_axis(self) -> None:
        for axis in (0, 1, 2, -1):
            for d in (-7, -1, 0, 1, 3, 9):
                with self.subTest(axis=axis, d=d):
                    np.testing.assert_array_equal(
                        self.x.roll(d, axis=axis).to_numpy(),
                        np.roll(self.x_np, d, axis=axis),
                    )

    def test_roll_of_view(self) -> None:
        t = self.x.flip(axis=2)
        ref = np.flip(self.x_np, axis=2)
        np.testing.assert_array_equal(
            t.roll(2, axis=1).to_numpy(), np.roll(ref, 2, axis=1)
        )
        np.testing.assert_array_equal(t.roll(-3).to_numpy(), np.roll(ref, -3))

    def test_four_dimensional(self) -> None:
        y_np = np.arange(2 * 3 * 2 * 3, dtype=np.uint16).reshape(2, 3, 2, 3)
        y = from_numpy(y_np)
        for axis in range(4):
            np.testing.assert_array_equal(
                y.roll(1, axis=axis).to_numpy(), np.roll(y_np, 1, axis=axis)
            )

    def test_bad_arguments(self) -> None:
        with self.assertRaises(OperandTypeError):
            self.x.roll(1.5)
        with self.assertRaises(OperandTypeError):
            self.x.roll(1, axis=0.0)
        with self.assertRaises(OutOfRangeError):
            self.x.roll(1, axis=3)


if __name__ == "__main__":
    unittest.main()
