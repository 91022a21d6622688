"""
Finite differences along one axis (CPU reference implementation).

The ``n``-th order forward difference is computed with a stencil of ``n + 1``
signed binomial weights built by the recurrence

    s[0] = 1,    s[i] = -s[i-1] * (n - i + 1) / i

(``n = 2`` gives ``[1, -2, 1]``, ``n = 3`` gives ``[1, -3, 3, -1]``). Output
element ``p`` along the axis is ``sum_i s[i] * x[p + n - i]``, so
``[1, 2, 4]`` differenced once gives ``[1, 2]``.

The output keeps the input's rank and dtype; the differenced axis is shortened
by ``n``. Integer results that do not fit the dtype wrap around and a
``RuntimeWarning`` is issued.
"""

from __future__ import annotations

import logging

from ...domain._array import IArray
from ...domain._config import MAX_DIFF_ORDER
from ...domain._dims import axis_slot, eliminate_axis
from ...domain._errors import OutOfRangeError
from ._arguments import check_axis, check_int
from ._warnings import warn_wraparound
from .traversal_cpu import iter_offsets

logger = logging.getLogger(__name__)


def diff_stencil(n: int) -> list[int]:
    """
    Return the ``n + 1`` finite-difference weights of order ``n``.

    Parameters
    ----------
    n : int
        Differentiation order.

    Returns
    -------
    list[int]
        Alternating binomial coefficients starting at ``1``.
    """
    stencil = [1]
    for i in range(1, n + 1):
        stencil.append(-stencil[i - 1] * (n - i + 1) // i)
    return stencil


def diff_cpu(array: IArray, n: int = 1, axis: int = -1) -> IArray:
    """
    Compute the ``n``-th order forward difference of ``array`` along ``axis``.

    Parameters
    ----------
    array : IArray
        Source array; never modified.
    n : int, optional
        Differentiation order, ``0 <= n <= 9``. Defaults to 1.
    axis : int, optional
        Axis to difference. Defaults to -1 (innermost).

    Returns
    -------
    IArray
        New dense array of the same rank and dtype, with ``axis`` shortened
        by ``n``.

    Raises
    ------
    OperandTypeError
        If ``n`` or ``axis`` is not an integer.
    OutOfRangeError
        If ``axis`` is out of range, or ``n`` is outside ``[0, 9]`` or does
        not leave at least one element along ``axis``.
    """
    from ..array._constructors import new_dense

    n = check_int("diff", "n", n)
    axis = check_axis("diff", axis, allow_none=False)

    dims = array.dims
    ax = dims.resolve_axis(axis)
    slot = axis_slot(dims.ndim, ax)
    length = dims.slot_shape[slot]
    # n == length would leave an empty axis; every shape entry stays >= 1.
    if n < 0 or n > MAX_DIFF_ORDER or n >= length:
        raise OutOfRangeError(
            "differentiation order",
            n,
            (0, min(MAX_DIFF_ORDER, length - 1)),
        )

    stencil = diff_stencil(n)
    out_length = length - n
    out_shape = list(array.shape)
    out_shape[ax] = out_length
    out = new_dense(dims.ndim, out_shape, array.dtype)

    src_step = dims.slot_strides[slot]
    dst_step = out.dims.slot_strides[slot]
    src_outer = eliminate_axis(dims.slot_shape, dims.slot_strides, dims.ndim, ax)
    dst_outer = eliminate_axis(
        out.dims.slot_shape, out.dims.slot_strides, dims.ndim, ax
    )

    read = array._read
    write = out._write
    dtype = out.dtype
    wrapped = 0
    for src_base, dst_base in zip(
        iter_offsets(src_outer, array.offset), iter_offsets(dst_outer, out.offset)
    ):
        for p in range(out_length):
            acc = 0
            for i, weight in enumerate(stencil):
                acc += weight * read(src_base + (p + n - i) * src_step)
            if not dtype.in_range(acc):
                wrapped += 1
            write(dst_base + p * dst_step, dtype.wrap(acc))

    if wrapped:
        warn_wraparound("diff", dtype, wrapped, "element")
    logger.debug("diff n=%d axis=%d -> shape %s", n, ax, out.shape)
    return out
