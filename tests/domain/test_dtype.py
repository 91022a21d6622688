import math
import unittest

from ndlite.domain import INDEX_DTYPE, DType, OutOfRangeError


class TestDTypeTags(unittest.TestCase):
    def test_integer_itemsizes(self) -> None:
        self.assertEqual(DType.UINT8.itemsize, 1)
        self.assertEqual(DType.INT8.itemsize, 1)
        self.assertEqual(DType.UINT16.itemsize, 2)
        self.assertEqual(DType.INT16.itemsize, 2)

    def test_float_itemsize_follows_typecode(self) -> None:
        expected = 8 if DType.FLOAT.typecode == "d" else 4
        self.assertEqual(DType.FLOAT.itemsize, expected)
        self.assertFalse(DType.FLOAT.is_integer)

    def test_bool_is_stored_as_uint8(self) -> None:
        self.assertIs(DType.BOOL.storage(), DType.UINT8)
        self.assertIs(DType.INT16.storage(), DType.INT16)

    def test_from_typecode(self) -> None:
        self.assertIs(DType.from_typecode("f"), DType.FLOAT)
        self.assertIs(DType.from_typecode("d"), DType.FLOAT)
        self.assertIs(DType.from_typecode("H"), DType.UINT16)
        self.assertIs(DType.from_typecode("b"), DType.INT8)
        with self.assertRaises(ValueError):
            DType.from_typecode("q")

    def test_bounds(self) -> None:
        self.assertEqual(DType.UINT8.bounds, (0, 255))
        self.assertEqual(DType.INT8.bounds, (-128, 127))
        self.assertEqual(DType.UINT16.bounds, (0, 65535))
        self.assertEqual(DType.INT16.bounds, (-32768, 32767))

    def test_index_dtype_is_uint16(self) -> None:
        self.assertIs(INDEX_DTYPE, DType.UINT16)


class TestDTypeWrap(unittest.TestCase):
    def test_unsigned_wraps_modulo_width(self) -> None:
        self.assertEqual(DType.UINT8.wrap(256), 0)
        self.assertEqual(DType.UINT8.wrap(300), 44)
        self.assertEqual(DType.UINT8.wrap(-1), 255)
        self.assertEqual(DType.UINT16.wrap(65536 + 5), 5)

    def test_signed_wraps_into_negative_half(self) -> None:
        self.assertEqual(DType.INT8.wrap(128), -128)
        self.assertEqual(DType.INT8.wrap(-129), 127)
        self.assertEqual(DType.INT16.wrap(40000), -25536)

    def test_fraction_truncates_toward_zero(self) -> None:
        self.assertEqual(DType.UINT8.wrap(3.7), 3)
        self.assertEqual(DType.INT8.wrap(-3.7), -3)

    def test_float_is_unchanged(self) -> None:
        out = DType.FLOAT.wrap(3)
        self.assertIsInstance(out, float)
        self.assertEqual(out, 3.0)

    def test_in_range(self) -> None:
        self.assertTrue(DType.UINT8.in_range(255))
        self.assertFalse(DType.UINT8.in_range(256))
        self.assertFalse(DType.INT16.in_range(-32769))
        self.assertTrue(DType.FLOAT.in_range(1e300))

    def test_non_finite_is_never_in_integer_range(self) -> None:
        self.assertFalse(DType.UINT8.in_range(float("nan")))
        self.assertFalse(DType.INT16.in_range(float("-inf")))
        self.assertTrue(DType.FLOAT.in_range(float("inf")))


class TestDTypeNonFinite(unittest.TestCase):
    def test_integer_wrap_rejects_nan_and_infinity(self) -> None:
        for dtype in (DType.UINT8, DType.INT8, DType.UINT16, DType.INT16):
            for value in (float("nan"), float("inf"), float("-inf")):
                with self.subTest(dtype=dtype, value=value):
                    with self.assertRaises(OutOfRangeError):
                        dtype.wrap(value)

    def test_error_is_a_value_error(self) -> None:
        with self.assertRaises(ValueError):
            DType.UINT8.wrap(float("nan"))

    def test_float_keeps_non_finite_values(self) -> None:
        self.assertTrue(math.isnan(DType.FLOAT.wrap(float("nan"))))
        self.assertEqual(DType.FLOAT.wrap(float("-inf")), float("-inf"))

    def test_huge_python_int_still_wraps(self) -> None:
        self.assertEqual(DType.UINT8.wrap(2**80 + 3), 3)


if __name__ == "__main__":
    unittest.main()
