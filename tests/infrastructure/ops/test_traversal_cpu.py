"""
Unit tests for the rank-generic strided walk (ops/traversal_cpu.py).
"""

import unittest

import numpy as np

from ndlite import DType, DimensionDescriptor, from_numpy, new_dense, new_view
from ndlite.infrastructure.ops.traversal_cpu import (
    copy_elements,
    iter_offsets,
    read_elements,
)


class TestIterOffsets(unittest.TestCase):
    def test_dense_offsets_are_sequential(self) -> None:
        d = DimensionDescriptor.dense((2, 3), 1)
        self.assertEqual(list(iter_offsets(d)), [0, 1, 2, 3, 4, 5])

    def test_start_offset_is_added(self) -> None:
        d = DimensionDescriptor.dense((3,), 2)
        self.assertEqual(list(iter_offsets(d, 10)), [10, 12, 14])

    def test_permuted_strides(self) -> None:
        d = DimensionDescriptor.strided((3, 2), (1, 3))
        self.assertEqual(list(iter_offsets(d)), [0, 3, 1, 4, 2, 5])

    def test_negative_stride(self) -> None:
        d = DimensionDescriptor.strided((3,), (-2,))
        self.assertEqual(list(iter_offsets(d, 4)), [4, 2, 0])

    def test_four_dimensional_dense(self) -> None:
        d = DimensionDescriptor.dense((2, 2, 2, 2), 2)
        self.assertEqual(list(iter_offsets(d)), list(range(0, 32, 2)))

    def test_matches_numpy_order_for_all_ranks(self) -> None:
        for shape in [(5,), (2, 3), (2, 3, 4), (2, 1, 3, 2)]:
            x = np.arange(int(np.prod(shape)), dtype=np.int16).reshape(shape)
            a = from_numpy(x)
            self.assertEqual(read_elements(a), x.ravel().tolist())


class TestCopyElements(unittest.TestCase):
    def test_copy_view_into_dense(self) -> None:
        x = np.arange(6, dtype=np.uint8).reshape(2, 3)
        a = from_numpy(x)
        t = new_view(a, 2, (3, 2), (1, 3), 0)
        out = new_dense(2, (3, 2), DType.UINT8)
        copy_elements(t, out)
        np.testing.assert_array_equal(out.to_numpy(), x.T)

    def test_copy_converts_dtype(self) -> None:
        src = from_numpy(np.array([1.9, -1.9, 300.0]))
        dst = new_dense(1, (3,), DType.UINT8)
        copy_elements(src, dst)
        self.assertEqual(dst.tolist(), [1, 255, 44])

    def test_size_mismatch_raises(self) -> None:
        src = new_dense(1, (3,), DType.UINT8)
        dst = new_dense(1, (4,), DType.UINT8)
        with self.assertRaises(ValueError):
            copy_elements(src, dst)


if __name__ == "__main__":
    unittest.main()
