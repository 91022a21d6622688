"""
Circular shift (CPU reference implementation).

``roll`` always returns a new dense array with the source's shape; the
shifted order cannot be described by a fixed stride and offset of the
source, so the elements are copied. The source is never modified.

The distance is first normalized modulo the length being rolled (Python
modulo, so a shift of ``-d`` equals a shift of ``L - d``). Source elements are
then copied in their original order into the destination, starting at the
post-shift position; when the destination cursor reaches the end it wraps to
the start.

- ``axis=None`` rolls the flattened order: the source is walked with the
  generic traversal while the cursor runs over the destination's linear
  buffer.
- ``axis=k`` rolls every slice along ``k`` independently: the source and
  destination are walked in lockstep over the axis-eliminated descriptor, and
  each slice is copied with its own wrapping cursor.
"""

from __future__ import annotations

import logging
from typing import Optional

from ...domain._array import IArray
from ...domain._dims import axis_slot, eliminate_axis
from ...domain._dtype import DType
from ._arguments import check_axis, check_int
from .traversal_cpu import iter_offsets

logger = logging.getLogger(__name__)


def _roll_flat(array: IArray, out: IArray, distance: int) -> None:
    length = out.size
    itemsize = out.itemsize
    start = distance % length
    end = out.offset + length * itemsize
    cursor = out.offset + start * itemsize

    read = array._read
    write = out._write
    for offset in iter_offsets(array.dims, array.offset):
        write(cursor, read(offset))
        cursor += itemsize
        if cursor == end:
            cursor = out.offset


def _roll_axis(array: IArray, out: IArray, distance: int, axis: int) -> None:
    dims = array.dims
    ax = dims.resolve_axis(axis)
    slot = axis_slot(dims.ndim, ax)
    length = dims.slot_shape[slot]
    src_step = dims.slot_strides[slot]
    dst_step = out.dims.slot_strides[slot]
    start = distance % length

    src_outer = eliminate_axis(dims.slot_shape, dims.slot_strides, dims.ndim, ax)
    dst_outer = eliminate_axis(
        out.dims.slot_shape, out.dims.slot_strides, dims.ndim, ax
    )

    read = array._read
    write = out._write
    for src_base, dst_base in zip(
        iter_offsets(src_outer, array.offset), iter_offsets(dst_outer, out.offset)
    ):
        end = dst_base + length * dst_step
        cursor = dst_base + start * dst_step
        offset = src_base
        for _ in range(length):
            write(cursor, read(offset))
            offset += src_step
            cursor += dst_step
            if cursor == end:
                cursor = dst_base


def roll_cpu(array: IArray, distance: int, axis: Optional[int] = None) -> IArray:
    """
    Circularly shift ``array`` by ``distance`` positions.

    Parameters
    ----------
    array : IArray
        Source array; never modified.
    distance : int
        Shift amount. Positive values move elements towards higher indices,
        negative values towards lower indices, with wraparound.
    axis : int or None, optional
        Axis to roll, or None to roll the flattened order. Defaults to None.

    Returns
    -------
    IArray
        New dense array with ``array``'s shape and dtype.

    Raises
    ------
    OperandTypeError
        If ``distance`` is not an integer or ``axis`` is neither None nor an
        integer.
    OutOfRangeError
        If ``axis`` is out of range.
    """
    from ..array._constructors import new_dense

    distance = check_int("roll", "distance", distance)
    axis = check_axis("roll", axis)
    if axis is not None:
        array.dims.resolve_axis(axis)

    out = new_dense(
        array.ndim, array.shape, DType.BOOL if array.boolean else array.dtype
    )
    logger.debug("roll distance=%d axis=%s shape=%s", distance, axis, array.shape)
    if axis is None:
        _roll_flat(array, out, distance)
    else:
        _roll_axis(array, out, distance, axis)
    return out
