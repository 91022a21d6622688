"""
Axis-aware reductions (CPU reference implementation).

This module implements every array reduction of ndlite with one generic
routine, :func:`reduce_array`, parameterized by a :class:`ReduceOp` tag. The
element type never selects a code path: values are read as Python numbers
through the array's byte accessor and accumulated in floating working
precision, and only the final store converts back to the result dtype.

Algorithm
---------
For ``axis=k`` the dimension descriptor is asked to eliminate ``k``. The
reduced descriptor, started at the source's offset, enumerates the first
element of every slice along ``k``; the output (a fresh dense array shaped
like the reduced descriptor) is walked in lockstep. Each slice is scanned by
stepping the source's own stride for ``k``, so views, reversed strides and
non-dense layouts need no special handling.

For ``axis=None`` the array is flattened into a dense 1-D copy (arrays that
are already 1-D are scanned in place) and reduced along axis 0, which always
yields a scalar.

Result conventions
------------------
- ``MIN`` / ``MAX`` / ``SUM`` store in the input dtype. Integer sums that do
  not fit wrap around (C cast semantics) and a ``RuntimeWarning`` is issued.
- ``MEAN`` / ``STD`` store as ``FLOAT``. ``STD`` is two-pass (mean first,
  then squared deviations) and yields ``0.0`` when ``N <= ddof``.
- ``ARGMIN`` / ``ARGMAX`` store ``INDEX_DTYPE`` (``UINT16``) positions along
  the axis; ties keep the first occurrence. When an index array is produced,
  axes longer than the index type can address are rejected instead of
  wrapping.
- A rank-1 input reduced along its only axis (which includes every
  ``axis=None`` reduction) is scanned straight into a Python scalar. No
  output array is stored, so flat indices are not limited by the index type.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Optional, Union
import logging
import math

from ...domain._array import IArray, Scalar
from ...domain._dims import axis_slot, eliminate_axis
from ...domain._dtype import DType, INDEX_DTYPE
from ...domain._errors import EmptyOperandError, OutOfRangeError
from ._arguments import check_axis, check_int
from ._warnings import warn_wraparound
from .traversal_cpu import iter_offsets

logger = logging.getLogger(__name__)

Reader = Callable[[int], Union[int, float]]


class ReduceOp(Enum):
    """Operation tags understood by :func:`reduce_array`."""

    MIN = "min"
    MAX = "max"
    ARGMIN = "argmin"
    ARGMAX = "argmax"
    SUM = "sum"
    MEAN = "mean"
    STD = "std"

    @property
    def is_extremum(self) -> bool:
        return self in (ReduceOp.MIN, ReduceOp.MAX, ReduceOp.ARGMIN, ReduceOp.ARGMAX)

    @property
    def is_index(self) -> bool:
        return self in (ReduceOp.ARGMIN, ReduceOp.ARGMAX)

    @property
    def seeks_max(self) -> bool:
        return self in (ReduceOp.MAX, ReduceOp.ARGMAX)


# -------------------------------------------------------------------------
# Slice kernels: scan n elements starting at byte `base`, `step` bytes apart
# -------------------------------------------------------------------------


def _scan_extremum(
    read: Reader, base: int, step: int, n: int, seek_max: bool
) -> tuple[int, Union[int, float]]:
    best_index = 0
    best = read(base)
    offset = base
    for k in range(1, n):
        offset += step
        value = read(offset)
        if (value > best) if seek_max else (value < best):
            best = value
            best_index = k
    return best_index, best


def _scan_sum(read: Reader, base: int, step: int, n: int) -> float:
    total = 0.0
    offset = base
    for _ in range(n):
        total += read(offset)
        offset += step
    return total


def _scan_std(read: Reader, base: int, step: int, n: int, ddof: int) -> float:
    if n <= ddof:
        return 0.0
    mean = _scan_sum(read, base, step, n) / n
    squares = 0.0
    offset = base
    for _ in range(n):
        deviation = read(offset) - mean
        squares += deviation * deviation
        offset += step
    return math.sqrt(squares / (n - ddof))


def _result_dtype(array: IArray, op: ReduceOp) -> DType:
    if op.is_index:
        return INDEX_DTYPE
    if op in (ReduceOp.MEAN, ReduceOp.STD):
        return DType.FLOAT
    if array.boolean and op in (ReduceOp.MIN, ReduceOp.MAX):
        return DType.BOOL
    return array.dtype


def _scan(
    op: ReduceOp, read: Reader, base: int, step: int, n: int, ddof: int
) -> Union[int, float]:
    if op.is_extremum:
        index, value = _scan_extremum(read, base, step, n, op.seeks_max)
        return index if op.is_index else value
    if op is ReduceOp.SUM:
        return _scan_sum(read, base, step, n)
    if op is ReduceOp.MEAN:
        return _scan_sum(read, base, step, n) / n
    return _scan_std(read, base, step, n, ddof)


def _reduce_axis(array: IArray, op: ReduceOp, axis: int, ddof: int) -> Any:
    from ..array._constructors import new_dense

    dims = array.dims
    ax = dims.resolve_axis(axis)
    slot = axis_slot(dims.ndim, ax)
    n = dims.slot_shape[slot]
    step = dims.slot_strides[slot]
    out_dtype = _result_dtype(array, op)
    read = array._read

    # Rank 1: the result is a Python scalar, no output array is stored.
    if dims.ndim == 1:
        value = _scan(op, read, array.offset, step, n, ddof)
        if op is ReduceOp.SUM:
            if not out_dtype.in_range(value):
                warn_wraparound("sum", out_dtype, 1, "slice")
            return out_dtype.wrap(value)
        if op.is_extremum and not op.is_index and array.boolean:
            return bool(value)
        return value

    index_limit = INDEX_DTYPE.bounds[1] + 1
    if op.is_index and n > index_limit:
        raise OutOfRangeError(
            "axis length",
            n,
            (1, index_limit),
            detail=f"{op.value} indices are stored as {INDEX_DTYPE.name.lower()}",
        )

    reduced = eliminate_axis(dims.slot_shape, dims.slot_strides, dims.ndim, ax)
    out = new_dense(reduced.ndim, reduced.logical_shape, out_dtype)
    store_dtype = out.dtype
    write = out._write

    wrapped = 0
    for base, dst in zip(
        iter_offsets(reduced, array.offset), iter_offsets(out.dims, out.offset)
    ):
        value = _scan(op, read, base, step, n, ddof)
        if op is ReduceOp.SUM:
            if not store_dtype.in_range(value):
                wrapped += 1
            value = store_dtype.wrap(value)
        write(dst, value)

    if wrapped:
        warn_wraparound("sum", store_dtype, wrapped, "slice")
    return out


def reduce_array(
    array: IArray, op: ReduceOp, axis: Optional[int] = None, ddof: int = 0
) -> Union[Scalar, IArray]:
    """
    Reduce ``array`` along ``axis`` (or over all elements) with ``op``.

    Parameters
    ----------
    array : IArray
        Source array; never modified.
    op : ReduceOp
        Which reduction to perform.
    axis : int or None, optional
        Axis to eliminate, or None to reduce the flattened array.
    ddof : int, optional
        Delta degrees of freedom, used by ``ReduceOp.STD`` only.

    Returns
    -------
    scalar or IArray
        A Python scalar when the result has a single element because the
        input was 1-D or ``axis`` was None; otherwise a new dense array.

    Raises
    ------
    OperandTypeError
        If ``axis`` is not None or an integer, or ``ddof`` is not an integer.
    OutOfRangeError
        If ``axis`` is out of range, the array is empty for an extremum, or
        an argmin/argmax axis of a multi-dimensional array is too long for
        the index dtype.
    """
    axis = check_axis(op.value, axis)
    ddof = check_int(op.value, "ddof", ddof)
    if op.is_extremum and array.size == 0:
        raise EmptyOperandError(op.value)

    if axis is None:
        if array.ndim == 1:
            return _reduce_axis(array, op, 0, ddof)
        logger.debug(
            "%s over flattened array of shape %s", op.value, array.shape
        )
        return _reduce_axis(array.flatten(), op, 0, ddof)
    return _reduce_axis(array, op, axis, ddof)
