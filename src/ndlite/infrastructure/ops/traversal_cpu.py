"""
Rank-generic strided traversal (CPU reference implementation).

Every higher-level operation in ndlite walks array memory through
:func:`iter_offsets`. Given a right-aligned dimension descriptor and a
starting byte offset, it yields the absolute byte offset of each element in
row-major order (innermost dimension varies fastest). The walk keeps one
running offset: each step adds the innermost stride, and whenever a level
completes, the accumulated travel along that level is subtracted and the next
outer level's stride is applied. Strides may be negative or unrelated to the
itemsize order, so views are walked exactly like dense arrays.

A single loop over levels handles ranks 1 through ``MAX_DIMS``.
"""

from __future__ import annotations

from typing import Iterator, Union

from ...domain._config import MAX_DIMS
from ...domain._dims import DimensionDescriptor
from ...domain._array import IArray


def iter_offsets(dims: DimensionDescriptor, start: int = 0) -> Iterator[int]:
    """
    Yield the byte offset of every element described by ``dims``.

    Parameters
    ----------
    dims : DimensionDescriptor
        Rank and right-aligned shape/strides to walk.
    start : int, optional
        Byte offset of the first element. Defaults to 0.

    Yields
    ------
    int
        Absolute byte offsets, one per element, in row-major order.
    """
    shape = dims.slot_shape
    strides = dims.slot_strides
    outermost = MAX_DIMS - dims.ndim
    innermost = MAX_DIMS - 1
    counters = [0] * MAX_DIMS

    offset = start
    for _ in range(dims.size):
        yield offset
        level = innermost
        offset += strides[level]
        counters[level] += 1
        while counters[level] == shape[level] and level > outermost:
            offset -= strides[level] * shape[level]
            counters[level] = 0
            level -= 1
            offset += strides[level]
            counters[level] += 1


def iter_values(array: IArray) -> Iterator[Union[int, float]]:
    """Yield the elements of ``array`` in row-major order as Python numbers."""
    read = array._read
    for offset in iter_offsets(array.dims, array.offset):
        yield read(offset)


def read_elements(array: IArray) -> list[Union[int, float]]:
    """Return all elements of ``array`` in row-major order."""
    return list(iter_values(array))


def copy_elements(src: IArray, dst: IArray) -> None:
    """
    Copy ``src`` into ``dst`` element by element in row-major order.

    The two arrays must have the same number of elements; their shapes and
    strides may differ. Values are converted to ``dst``'s dtype with C cast
    semantics.

    Raises
    ------
    ValueError
        If the element counts differ.
    """
    if src.size != dst.size:
        raise ValueError(
            f"cannot copy {src.size} elements into an array of {dst.size}"
        )
    read = src._read
    write = dst._write
    wrap = dst.dtype.wrap
    same_dtype = src.dtype is dst.dtype
    for s_off, d_off in zip(
        iter_offsets(src.dims, src.offset), iter_offsets(dst.dims, dst.offset)
    ):
        value = read(s_off)
        write(d_off, value if same_dtype else wrap(value))
