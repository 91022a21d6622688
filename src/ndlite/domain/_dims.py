"""
Fixed-capacity, right-aligned dimension descriptors.

Every array in ndlite stores its shape and strides in exactly ``MAX_DIMS``
slots. A rank-``r`` array keeps its logical dimension ``i`` (0-based from the
outermost) in slot ``MAX_DIMS - r + i``; the unused leading slots have size 1.
All axis arithmetic in the engine goes through the helpers defined here:

- :func:`resolve_axis` turns a possibly negative logical axis into a
  validated non-negative one.
- :func:`axis_slot` maps a resolved logical axis onto its storage slot.
- :func:`eliminate_axis` produces the reduced descriptor that describes the
  output geometry of a reduction (and the outer iteration space of the
  axis-wise transforms).

Strides are signed byte offsets. Nothing in this module knows about buffers
or element values; it is pure shape bookkeeping.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence
import math

from ._config import MAX_DIMS
from ._errors import OutOfRangeError


def resolve_axis(ndim: int, axis: int) -> int:
    """
    Normalize a logical axis index against ``ndim``.

    Parameters
    ----------
    ndim : int
        Rank of the array the axis refers to.
    axis : int
        Axis index; negative values count from the innermost dimension.

    Returns
    -------
    int
        Axis in ``[0, ndim - 1]``.

    Raises
    ------
    OutOfRangeError
        If the axis lies outside ``[-ndim, ndim - 1]``.
    """
    resolved = axis + ndim if axis < 0 else axis
    if resolved < 0 or resolved > ndim - 1:
        raise OutOfRangeError("axis", axis, (-ndim, ndim - 1))
    return resolved


def axis_slot(ndim: int, axis: int) -> int:
    """Return the storage slot of a resolved logical ``axis``."""
    return MAX_DIMS - ndim + axis


def right_align(values: Sequence[int], fill: int) -> tuple[int, ...]:
    """
    Pad ``values`` on the left with ``fill`` up to ``MAX_DIMS`` slots.

    Raises
    ------
    OutOfRangeError
        If more than ``MAX_DIMS`` values are given.
    """
    values = tuple(int(v) for v in values)
    if len(values) > MAX_DIMS:
        raise OutOfRangeError("ndim", len(values), (1, MAX_DIMS))
    return (fill,) * (MAX_DIMS - len(values)) + values


def c_contiguous_strides(slot_shape: Sequence[int], itemsize: int) -> tuple[int, ...]:
    """
    Compute row-major strides for a right-aligned shape.

    The innermost slot gets ``itemsize``; each slot to the left gets the
    stride of its right neighbour times that neighbour's size.
    """
    strides = [0] * MAX_DIMS
    strides[MAX_DIMS - 1] = itemsize
    for i in range(MAX_DIMS - 1, 0, -1):
        strides[i - 1] = strides[i] * slot_shape[i]
    return tuple(strides)


@dataclass(frozen=True)
class DimensionDescriptor:
    """
    A rank plus right-aligned shape/stride slots.

    Attributes
    ----------
    ndim : int
        Logical rank, ``1 <= ndim <= MAX_DIMS``.
    slot_shape : tuple[int, ...]
        ``MAX_DIMS`` sizes; leading unused slots are 1.
    slot_strides : tuple[int, ...]
        ``MAX_DIMS`` signed byte strides, aligned with ``slot_shape``.
    """

    ndim: int
    slot_shape: tuple[int, ...]
    slot_strides: tuple[int, ...]

    def __post_init__(self) -> None:
        if not 1 <= self.ndim <= MAX_DIMS:
            raise OutOfRangeError("ndim", self.ndim, (1, MAX_DIMS))
        if len(self.slot_shape) != MAX_DIMS or len(self.slot_strides) != MAX_DIMS:
            raise ValueError(
                f"shape and strides must have exactly {MAX_DIMS} slots, got "
                f"{len(self.slot_shape)} and {len(self.slot_strides)}"
            )

    @classmethod
    def dense(cls, shape: Sequence[int], itemsize: int) -> "DimensionDescriptor":
        """
        Build a C-contiguous descriptor from a logical shape.

        Raises
        ------
        OutOfRangeError
            If the rank is outside ``[1, MAX_DIMS]`` or a size is below 1.
        """
        ndim = len(shape)
        if ndim < 1:
            raise OutOfRangeError("ndim", ndim, (1, MAX_DIMS))
        for size in shape:
            if int(size) < 1:
                raise OutOfRangeError("dimension size", size, detail="must be >= 1")
        slot_shape = right_align(shape, 1)
        return cls(ndim, slot_shape, c_contiguous_strides(slot_shape, itemsize))

    @classmethod
    def strided(
        cls, shape: Sequence[int], strides: Sequence[int]
    ) -> "DimensionDescriptor":
        """Build a descriptor from logical shape and stride tuples of equal length."""
        if len(shape) != len(strides):
            raise ValueError(
                f"shape and strides must have equal length, got {len(shape)} and {len(strides)}"
            )
        for size in shape:
            if int(size) < 1:
                raise OutOfRangeError("dimension size", size, detail="must be >= 1")
        return cls(len(shape), right_align(shape, 1), right_align(strides, 0))

    @property
    def logical_shape(self) -> tuple[int, ...]:
        return self.slot_shape[MAX_DIMS - self.ndim :]

    @property
    def logical_strides(self) -> tuple[int, ...]:
        return self.slot_strides[MAX_DIMS - self.ndim :]

    @property
    def size(self) -> int:
        """Total number of elements described."""
        return math.prod(self.slot_shape)

    def resolve_axis(self, axis: int) -> int:
        return resolve_axis(self.ndim, axis)

    def slot(self, axis: int) -> int:
        """Storage slot of a (possibly negative) logical axis."""
        return axis_slot(self.ndim, self.resolve_axis(axis))

    def eliminate(self, axis: int) -> "DimensionDescriptor":
        """Shorthand for :func:`eliminate_axis` on this descriptor."""
        return eliminate_axis(
            self.slot_shape, self.slot_strides, self.ndim, self.resolve_axis(axis)
        )

    def is_dense(self, itemsize: int) -> bool:
        """
        Return True when the strides are the C-contiguous strides of the shape.

        Only the used trailing slots are compared; leading size-1 slots never
        contribute an offset.
        """
        expected = c_contiguous_strides(self.slot_shape, itemsize)
        start = MAX_DIMS - self.ndim
        return self.slot_strides[start:] == expected[start:]


def eliminate_axis(
    shape: Sequence[int], strides: Sequence[int], ndim: int, axis: int
) -> DimensionDescriptor:
    """
    Remove one axis from a right-aligned shape/stride pair.

    The slots above the removed one keep their position; the slots below it
    shift one step towards the innermost end. Slot 0 is left as an unused
    size-1 slot.

    Parameters
    ----------
    shape, strides : Sequence[int]
        ``MAX_DIMS``-slot shape and strides of the source.
    ndim : int
        Rank of the source.
    axis : int
        Resolved logical axis to eliminate (``0 <= axis < ndim``).

    Returns
    -------
    DimensionDescriptor
        Descriptor of rank ``max(1, ndim - 1)``. When a rank-1 source loses
        its only axis, the result describes a single element; callers unwrap
        such results to a scalar.
    """
    if ndim == 1:
        return DimensionDescriptor(1, (1,) * MAX_DIMS, (0,) * MAX_DIMS)

    target = axis_slot(ndim, axis)
    new_shape = [1] * MAX_DIMS
    new_strides = [0] * MAX_DIMS
    for i in range(MAX_DIMS - 1, 0, -1):
        src = i if i > target else i - 1
        new_shape[i] = int(shape[src])
        new_strides[i] = int(strides[src])
    return DimensionDescriptor(ndim - 1, tuple(new_shape), tuple(new_strides))
