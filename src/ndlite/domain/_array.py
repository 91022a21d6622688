"""
Array interface definitions.

This module defines :class:`IArray`, the structural (duck-typed) contract that
every ndlite array satisfies. It lists the raw fields that collaborators such
as printers, formatters and buffer exporters may read without involving the
engine, together with the reduction and transform methods the engine
provides.

The protocol is backend-agnostic: it says nothing about how the bytes are
held, only that an array exposes its dtype, its right-aligned dimension
descriptor and an absolute byte offset into a readable buffer.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol, Union, runtime_checkable

from ._dims import DimensionDescriptor
from ._dtype import DType

Scalar = Union[int, float, bool]


@runtime_checkable
class IArray(Protocol):
    """
    Array interface.

    Notes
    -----
    - ``slot_shape`` / ``slot_strides`` are always ``MAX_DIMS`` long and
      right-aligned; ``shape`` / ``strides`` are the logical trailing parts.
    - ``offset`` is the absolute byte offset of the first logical element in
      ``storage.buffer``. Strides may be negative.
    """

    # ---------------------------------------------------------------------
    # Raw fields
    # ---------------------------------------------------------------------
    @property
    def dtype(self) -> DType: ...

    @property
    def itemsize(self) -> int: ...

    @property
    def ndim(self) -> int: ...

    @property
    def dims(self) -> DimensionDescriptor: ...

    @property
    def shape(self) -> tuple[int, ...]: ...

    @property
    def strides(self) -> tuple[int, ...]: ...

    @property
    def size(self) -> int: ...

    @property
    def dense(self) -> bool: ...

    @property
    def boolean(self) -> bool: ...

    @property
    def offset(self) -> int: ...

    @property
    def storage(self) -> Any: ...

    # ---------------------------------------------------------------------
    # Reductions
    # ---------------------------------------------------------------------
    def min(self, axis: Optional[int] = None) -> Union[Scalar, "IArray"]: ...

    def max(self, axis: Optional[int] = None) -> Union[Scalar, "IArray"]: ...

    def argmin(self, axis: Optional[int] = None) -> Union[int, "IArray"]: ...

    def argmax(self, axis: Optional[int] = None) -> Union[int, "IArray"]: ...

    def sum(self, axis: Optional[int] = None) -> Union[Scalar, "IArray"]: ...

    def mean(self, axis: Optional[int] = None) -> Union[float, "IArray"]: ...

    def std(
        self, axis: Optional[int] = None, ddof: int = 0
    ) -> Union[float, "IArray"]: ...

    # ---------------------------------------------------------------------
    # Transforms
    # ---------------------------------------------------------------------
    def diff(self, n: int = 1, axis: int = -1) -> "IArray": ...

    def flip(self, axis: Optional[int] = None) -> "IArray": ...

    def roll(self, distance: int, axis: Optional[int] = None) -> "IArray": ...

    # ---------------------------------------------------------------------
    # Host interop
    # ---------------------------------------------------------------------
    def to_numpy(self) -> Any: ...

    def tolist(self) -> list[Any]: ...
