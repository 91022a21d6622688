"""
Memory and layout methods for Array.

This mixin groups the methods that move bytes in or out of an array, or that
describe the same bytes under a different layout:

- host interop: :meth:`copy_from_numpy`, :meth:`to_numpy`, :meth:`tolist`
- copies: :meth:`copy`, :meth:`flatten`
- views: :meth:`transpose`, :meth:`reshape` (view for dense arrays)
- in-place mutation: :meth:`fill`

Constructors and traversal helpers are imported inside the methods, because
the concrete ``Array`` class is built from this mixin.
"""

from __future__ import annotations

from typing import Any, Union

import numpy as np
from typing_extensions import Self

from ....domain._dims import c_contiguous_strides, right_align
from ....domain._dtype import DType
from ....domain._errors import OutOfRangeError


class ArrayMixinMemory:
    """
    Host interop, copy and layout methods.

    Notes
    -----
    Methods assume the host class provides ``dims``, ``dtype``, ``boolean``,
    ``offset``, ``storage`` and the ``_read`` / ``_write`` byte accessors.
    """

    def _result_dtype(self) -> DType:
        return DType.BOOL if self.boolean else self.dtype

    # ---------------------------------------------------------------------
    # Host interop
    # ---------------------------------------------------------------------
    def copy_from_numpy(self, arr: Any) -> None:
        """
        Copy host data into this array in row-major order.

        Writes go through the array's own strides, so copying into a view
        updates the storage it shares with its source.

        Parameters
        ----------
        arr : array_like
            Data with exactly this array's shape.

        Raises
        ------
        ValueError
            If the shapes differ.
        """
        from ...ops.traversal_cpu import iter_offsets

        src = np.asarray(arr)
        if tuple(src.shape) != self.shape:
            raise ValueError(
                f"copy_from_numpy shape mismatch: array has {self.shape}, got {tuple(src.shape)}"
            )
        wrap = self.dtype.wrap
        values = src.ravel(order="C").tolist()
        for offset, value in zip(iter_offsets(self.dims, self.offset), values):
            self._write(offset, wrap(value))

    def to_numpy(self) -> np.ndarray:
        """
        Return a C-contiguous NumPy copy of the array's logical contents.

        Boolean arrays come back with ``dtype=bool``.
        """
        from ...ops.traversal_cpu import read_elements

        out = np.array(read_elements(self), dtype=self.np_dtype).reshape(self.shape)
        if self.boolean:
            return out.astype(bool)
        return out

    def tolist(self) -> list[Any]:
        """Return the contents as nested Python lists."""
        return self.to_numpy().tolist()

    # ---------------------------------------------------------------------
    # Copies
    # ---------------------------------------------------------------------
    def copy(self) -> Self:
        """Return a dense copy with the same shape and dtype."""
        from .._constructors import new_dense
        from ...ops.traversal_cpu import copy_elements

        out = new_dense(self.ndim, self.shape, self._result_dtype())
        copy_elements(self, out)
        return out

    def flatten(self) -> Self:
        """Return a dense 1-D copy in row-major order."""
        from .._constructors import new_linear
        from ...ops.traversal_cpu import copy_elements

        out = new_linear(self.size, self._result_dtype())
        copy_elements(self, out)
        return out

    # ---------------------------------------------------------------------
    # Views
    # ---------------------------------------------------------------------
    def transpose(self) -> Self:
        """
        Return a view with the order of the axes reversed.

        No data is copied; the view's strides are this array's strides in
        reverse order.
        """
        from .._constructors import new_view

        return new_view(
            self, self.ndim, self.shape[::-1], self.strides[::-1], 0
        )

    def reshape(self, *shape: Union[int, tuple[int, ...]]) -> Self:
        """
        Return the same elements under a new shape.

        Dense arrays are reshaped as views over the same storage. Other
        arrays are first copied into a dense buffer.

        Raises
        ------
        OutOfRangeError
            If the element count changes or the rank is out of range.
        """
        from .._constructors import new_view

        if len(shape) == 1 and isinstance(shape[0], tuple):
            shape = shape[0]
        shape = tuple(int(s) for s in shape)
        if int(np.prod(shape)) != self.size:
            raise OutOfRangeError(
                "shape", shape, detail=f"cannot hold {self.size} elements"
            )
        source = self if self.dense else self.copy()
        slot_strides = c_contiguous_strides(right_align(shape, 1), source.itemsize)
        strides = slot_strides[len(slot_strides) - len(shape) :]
        return new_view(source, len(shape), shape, strides, 0)

    # ---------------------------------------------------------------------
    # In-place mutation
    # ---------------------------------------------------------------------
    def fill(self, value: Union[int, float]) -> None:
        """
        Overwrite every element with ``value``.

        The write goes through this array's strides; when the array is a
        view, its source observes the change.
        """
        from ...ops.traversal_cpu import iter_offsets

        stored = self.dtype.wrap(value)
        for offset in iter_offsets(self.dims, self.offset):
            self._write(offset, stored)
