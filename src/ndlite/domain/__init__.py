"""
Backend-free model of ndlite: dtypes, dimension descriptors, errors, config.
"""

from ._config import MAX_DIMS, MAX_DIFF_ORDER
from ._dtype import DType, INDEX_DTYPE
from ._dims import (
    DimensionDescriptor,
    axis_slot,
    c_contiguous_strides,
    eliminate_axis,
    resolve_axis,
    right_align,
)
from ._errors import EmptyOperandError, OperandTypeError, OutOfRangeError
from ._array import IArray, Scalar

__all__ = [
    "MAX_DIMS",
    "MAX_DIFF_ORDER",
    "DType",
    "INDEX_DTYPE",
    "DimensionDescriptor",
    "axis_slot",
    "c_contiguous_strides",
    "eliminate_axis",
    "resolve_axis",
    "right_align",
    "EmptyOperandError",
    "OperandTypeError",
    "OutOfRangeError",
    "IArray",
    "Scalar",
]
