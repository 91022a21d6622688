"""
Concrete Array implementation (NumPy byte-buffer backend).

This module provides :class:`Array`, the concrete runtime array that satisfies
the domain-level :class:`~ndlite.domain.IArray` protocol. An array is a
triple of

- a :class:`DimensionDescriptor` (rank plus right-aligned shape/strides),
- a storage handle (:class:`OwnedBuffer` or :class:`BufferView`), and
- an absolute byte offset of its first logical element in that storage.

Shape and stride metadata never change after construction. Operations that
rearrange data return new ``Array`` objects, either aliasing the source's
storage (views) or owning fresh storage (copies).

Design notes
------------
- Arrays are normally built through the constructors in
  :mod:`ndlite.infrastructure.array._constructors` rather than directly.
- The reduction, transform and memory methods come from mixins; their
  numerical work is delegated to the CPU ops modules.
"""

from __future__ import annotations

from typing import Union

import numpy as np

from ...domain._dims import DimensionDescriptor
from ...domain._dtype import DType
from ._storage import Storage, numpy_dtype, read_scalar, scalar_codec, write_scalar
from .mixins import ArrayMixinMemory, ArrayMixinReduction, ArrayMixinTransform


class Array(ArrayMixinMemory, ArrayMixinReduction, ArrayMixinTransform):
    """
    Fixed-rank strided array.

    Parameters
    ----------
    dims : DimensionDescriptor
        Rank and right-aligned shape/strides.
    dtype : DType
        Element tag. ``DType.BOOL`` is accepted and stored as ``UINT8`` with
        ``boolean`` set.
    storage : OwnedBuffer or BufferView
        Handle onto the bytes.
    offset : int, optional
        Absolute byte offset of the first logical element. Defaults to 0.
    boolean : bool, optional
        Marks the array as holding predicate values. Defaults to False.

    Notes
    -----
    - ``dense`` is computed from the strides, never assumed.
    - The constructor does not validate that the strided extent fits the
      buffer; :func:`new_view` does that before building a view.
    """

    def __init__(
        self,
        dims: DimensionDescriptor,
        dtype: DType,
        storage: Storage,
        offset: int = 0,
        *,
        boolean: bool = False,
    ) -> None:
        self._dims = dims
        self._boolean = bool(boolean) or dtype is DType.BOOL
        self._dtype = dtype.storage()
        self._np_dtype = numpy_dtype(self._dtype)
        self._codec = scalar_codec(self._dtype)
        self._storage = storage
        self._offset = int(offset)
        self._dense = dims.is_dense(self._dtype.itemsize)

    # ---------------------------------------------------------------------
    # Raw fields
    # ---------------------------------------------------------------------
    @property
    def dtype(self) -> DType:
        return self._dtype

    @property
    def np_dtype(self) -> np.dtype:
        """NumPy dtype used to interpret the storage bytes."""
        return self._np_dtype

    @property
    def itemsize(self) -> int:
        return self._dtype.itemsize

    @property
    def boolean(self) -> bool:
        return self._boolean

    @property
    def dims(self) -> DimensionDescriptor:
        return self._dims

    @property
    def ndim(self) -> int:
        return self._dims.ndim

    @property
    def slot_shape(self) -> tuple[int, ...]:
        return self._dims.slot_shape

    @property
    def slot_strides(self) -> tuple[int, ...]:
        return self._dims.slot_strides

    @property
    def shape(self) -> tuple[int, ...]:
        return self._dims.logical_shape

    @property
    def strides(self) -> tuple[int, ...]:
        return self._dims.logical_strides

    @property
    def size(self) -> int:
        """Total number of elements (product of the shape)."""
        return self._dims.size

    @property
    def dense(self) -> bool:
        return self._dense

    @property
    def storage(self) -> Storage:
        return self._storage

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def is_view(self) -> bool:
        return self._storage.is_view

    # ---------------------------------------------------------------------
    # Element access by absolute byte offset
    # ---------------------------------------------------------------------
    def _read(self, offset: int) -> Union[int, float]:
        return read_scalar(self._storage.buffer, offset, self._codec)

    def _write(self, offset: int, value: Union[int, float]) -> None:
        write_scalar(self._storage.buffer, offset, self._codec, value)

    def __repr__(self) -> str:
        kind = "view" if self.is_view else "dense" if self._dense else "owned"
        dtype = "bool" if self._boolean else self._dtype.name.lower()
        return (
            f"Array(shape={self.shape}, dtype={dtype}, strides={self.strides}, "
            f"offset={self._offset}, {kind})"
        )
