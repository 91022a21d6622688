"""
Unit tests for the error taxonomy and the environment-driven configuration.
"""

from __future__ import annotations

import logging
import os
import unittest
from unittest import mock

from ndlite.domain import EmptyOperandError, OperandTypeError, OutOfRangeError
from ndlite.domain._config import configure_logging, debug_enabled, float_typecode


class TestErrors(unittest.TestCase):
    def test_out_of_range_message_and_attributes(self) -> None:
        err = OutOfRangeError("axis", 5, (-2, 1))
        self.assertIsInstance(err, ValueError)
        self.assertEqual(str(err), "axis 5 out of range [-2, 1]")
        self.assertEqual(err.what, "axis")
        self.assertEqual(err.value, 5)
        self.assertEqual(err.bounds, (-2, 1))

    def test_out_of_range_detail_is_appended(self) -> None:
        err = OutOfRangeError("shape", (7,), detail="cannot hold 6 elements")
        self.assertTrue(str(err).endswith(": cannot hold 6 elements"))
        self.assertIsNone(err.bounds)

    def test_empty_operand_is_out_of_range(self) -> None:
        err = EmptyOperandError("argmax")
        self.assertIsInstance(err, OutOfRangeError)
        self.assertEqual(err.op, "argmax")
        self.assertIn("argmax of an empty sequence", str(err))

    def test_operand_type_error_keeps_type_name(self) -> None:
        err = OperandTypeError("sum", "axis must be None, or an integer", 1.5)
        self.assertIsInstance(err, TypeError)
        self.assertEqual(err.op, "sum")
        self.assertEqual(err.received, "float")
        self.assertEqual(str(err), "sum: axis must be None, or an integer, got float")


class TestConfig(unittest.TestCase):
    def test_float_typecode_default_is_double(self) -> None:
        with mock.patch.dict(os.environ, {}, clear=False):
            os.environ.pop("NDLITE_FLOAT_IMPL", None)
            self.assertEqual(float_typecode(), "d")

    def test_float_typecode_single(self) -> None:
        with mock.patch.dict(os.environ, {"NDLITE_FLOAT_IMPL": "Float"}):
            self.assertEqual(float_typecode(), "f")

    def test_float_typecode_unknown_raises(self) -> None:
        with mock.patch.dict(os.environ, {"NDLITE_FLOAT_IMPL": "half"}):
            with self.assertRaises(ValueError):
                float_typecode()

    def test_debug_flag(self) -> None:
        with mock.patch.dict(os.environ, {"NDLITE_DEBUG": "1"}):
            self.assertTrue(debug_enabled())
        with mock.patch.dict(os.environ, {"NDLITE_DEBUG": "off"}):
            self.assertFalse(debug_enabled())

    def test_configure_logging_installs_single_null_handler(self) -> None:
        with mock.patch.dict(os.environ, {"NDLITE_DEBUG": "0"}):
            root = configure_logging()
            configure_logging()
        self.assertEqual(root.name, "ndlite")
        nulls = [h for h in root.handlers if isinstance(h, logging.NullHandler)]
        self.assertEqual(len(nulls), 1)


if __name__ == "__main__":
    unittest.main()
