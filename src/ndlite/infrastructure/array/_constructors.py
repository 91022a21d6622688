"""
Array constructors.

Three primitive constructors build every array the engine returns:

- :func:`new_dense` allocates an owned, zero-filled, C-contiguous buffer of
  exactly ``size * itemsize`` bytes.
- :func:`new_view` builds a non-owning array over another array's bytes with
  caller-supplied shape, strides and byte offset. It never copies.
- :func:`new_linear` is the 1-D form of :func:`new_dense`.

:func:`from_numpy` is the host-data entry point used by callers and tests: it
allocates a dense array of matching shape and copies a NumPy array (or
anything ``np.asarray`` accepts) into it.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

import numpy as np

from ...domain._config import MAX_DIMS
from ...domain._dims import DimensionDescriptor
from ...domain._dtype import DType
from ...domain._errors import OperandTypeError, OutOfRangeError
from ._array import Array
from ._storage import BufferView, OwnedBuffer, dtype_from_numpy

logger = logging.getLogger(__name__)


def new_dense(ndim: int, shape: Sequence[int], dtype: DType) -> Array:
    """
    Allocate a dense (C-contiguous) array.

    Parameters
    ----------
    ndim : int
        Rank of the array; must equal ``len(shape)``.
    shape : Sequence[int]
        Logical shape, outermost first.
    dtype : DType
        Element tag. ``BOOL`` yields ``UINT8`` storage flagged boolean.

    Returns
    -------
    Array
        A new array owning ``size * itemsize`` zeroed bytes.

    Raises
    ------
    OutOfRangeError
        If the rank is outside ``[1, MAX_DIMS]`` or a size is below 1.
    """
    shape = tuple(int(s) for s in shape)
    if ndim != len(shape):
        raise ValueError(f"ndim={ndim} does not match shape {shape}")
    itemsize = dtype.storage().itemsize
    dims = DimensionDescriptor.dense(shape, itemsize)
    storage = OwnedBuffer(dims.size * itemsize)
    return Array(dims, dtype, storage, 0)


def new_linear(length: int, dtype: DType) -> Array:
    """Allocate a dense 1-D array of ``length`` elements."""
    return new_dense(1, (length,), dtype)


def new_view(
    source: Array,
    ndim: int,
    shape: Sequence[int],
    strides: Sequence[int],
    offset: int = 0,
) -> Array:
    """
    Build a view over ``source``'s bytes.

    Parameters
    ----------
    source : Array
        Array whose storage is shared.
    ndim : int
        Rank of the view; must equal ``len(shape)``.
    shape : Sequence[int]
        Logical shape of the view.
    strides : Sequence[int]
        Signed byte strides of the view, one per logical dimension.
    offset : int, optional
        Byte offset of the view's first element relative to
        ``source.offset``. Defaults to 0.

    Returns
    -------
    Array
        An array that aliases ``source``'s storage.

    Raises
    ------
    OutOfRangeError
        If the view would address bytes outside the shared buffer.
    """
    if ndim != len(shape):
        raise ValueError(f"ndim={ndim} does not match shape {tuple(shape)}")
    dims = DimensionDescriptor.strided(shape, strides)
    start = source.offset + int(offset)

    low = high = start
    for size, stride in zip(dims.slot_shape, dims.slot_strides):
        reach = (size - 1) * stride
        if reach < 0:
            low += reach
        else:
            high += reach
    nbytes = source.storage.nbytes
    if low < 0 or high + source.itemsize > nbytes:
        raise OutOfRangeError(
            "view extent",
            (low, high + source.itemsize),
            (0, nbytes),
            detail="view addresses bytes outside the source buffer",
        )

    logger.debug(
        "new_view shape=%s strides=%s offset=%d", dims.logical_shape, dims.logical_strides, start
    )
    return Array(
        dims, source.dtype, BufferView(source.storage), start, boolean=source.boolean
    )


def from_numpy(data: Any, dtype: Optional[DType] = None) -> Array:
    """
    Create a dense array holding a copy of host data.

    Parameters
    ----------
    data : array_like
        NumPy array, nested sequence or scalar sequence. Must have between 1
        and ``MAX_DIMS`` dimensions and no empty dimension.
    dtype : DType, optional
        Target element tag. When omitted it is inferred from the NumPy dtype
        of ``data`` (floating → ``FLOAT``, bool → ``BOOL``, narrow integers →
        themselves).

    Returns
    -------
    Array
        A new dense array.

    Raises
    ------
    OutOfRangeError
        If the rank or a dimension size is out of range.
    OperandTypeError
        If no dtype is given and the host dtype has no storage counterpart.
    """
    arr = np.asarray(data)
    if arr.ndim < 1 or arr.ndim > MAX_DIMS:
        raise OutOfRangeError("ndim", arr.ndim, (1, MAX_DIMS))
    if dtype is None:
        try:
            dtype = dtype_from_numpy(arr.dtype)
        except TypeError:
            raise OperandTypeError(
                "from_numpy", "expected a float, bool, or 8/16-bit integer dtype", arr
            ) from None
    out = new_dense(arr.ndim, arr.shape, dtype)
    out.copy_from_numpy(arr)
    return out
