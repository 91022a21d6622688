"""
Backing storage for arrays (NumPy byte buffers).

An array's bytes live in exactly one of two storage variants:

- :class:`OwnedBuffer` owns a freshly allocated, zero-initialized NumPy
  ``uint8`` buffer. Only dense constructors create one.
- :class:`BufferView` borrows the buffer of an :class:`OwnedBuffer`. It keeps
  a reference to that owner, so the bytes stay alive for as long as any view
  does. Views of views collapse onto the same owner; all of them alias the
  same memory, and a write through any alias is visible through all.

Element access is byte-offset based. :func:`scalar_codec` maps a ``DType`` tag
onto a precompiled :class:`struct.Struct`; :func:`read_scalar` and
:func:`write_scalar` unpack or pack ``itemsize`` bytes at an absolute offset
directly in the buffer, so no intermediate array is built per element.
"""

from __future__ import annotations

from typing import Union
import struct

import numpy as np

from ...domain._dtype import DType

_NP_DTYPES: dict[DType, np.dtype] = {}


def numpy_dtype(dtype: DType) -> np.dtype:
    """
    Return the NumPy dtype used to store elements tagged ``dtype``.

    ``BOOL`` maps onto ``uint8`` storage.
    """
    np_dt = _NP_DTYPES.get(dtype)
    if np_dt is None:
        np_dt = np.dtype(dtype.storage().typecode)
        _NP_DTYPES[dtype] = np_dt
    return np_dt


def dtype_from_numpy(np_dt: np.dtype) -> DType:
    """
    Map a NumPy dtype onto the closest storage tag.

    Floating types map to ``FLOAT``; boolean maps to ``BOOL``; the four narrow
    integer types map to themselves. Wider integer types are not storage
    types of this engine and are rejected.

    Raises
    ------
    TypeError
        If the NumPy dtype has no counterpart.
    """
    np_dt = np.dtype(np_dt)
    if np_dt.kind == "f":
        return DType.FLOAT
    if np_dt.kind == "b":
        return DType.BOOL
    if np_dt.kind in "iu" and np_dt.itemsize <= 2:
        return DType.from_typecode(np_dt.char)
    raise TypeError(f"unsupported element type {np_dt!s}")


class OwnedBuffer:
    """
    Exclusively owned byte buffer.

    Parameters
    ----------
    nbytes : int
        Number of bytes to allocate. The buffer is zero-filled.
    """

    __slots__ = ("buffer",)

    def __init__(self, nbytes: int) -> None:
        self.buffer = np.zeros(int(nbytes), dtype=np.uint8)

    @property
    def owner(self) -> "OwnedBuffer":
        return self

    @property
    def is_view(self) -> bool:
        return False

    @property
    def nbytes(self) -> int:
        return int(self.buffer.nbytes)

    def __repr__(self) -> str:
        return f"OwnedBuffer(nbytes={self.nbytes})"


class BufferView:
    """
    Borrowed handle onto another storage's bytes.

    Parameters
    ----------
    source : OwnedBuffer or BufferView
        Storage whose bytes are shared. Views of views resolve to the
        original owner.
    """

    __slots__ = ("owner",)

    def __init__(self, source: "Storage") -> None:
        self.owner = source.owner

    @property
    def buffer(self) -> np.ndarray:
        return self.owner.buffer

    @property
    def is_view(self) -> bool:
        return True

    @property
    def nbytes(self) -> int:
        return self.owner.nbytes

    def __repr__(self) -> str:
        return f"BufferView(of={self.owner!r})"


Storage = Union[OwnedBuffer, BufferView]

_CODECS: dict[DType, struct.Struct] = {}


def scalar_codec(dtype: DType) -> struct.Struct:
    """
    Return the packer for one element tagged ``dtype``.

    Native byte order with standard sizes (``'='``), which matches the layout
    NumPy uses for the same buffer.
    """
    codec = _CODECS.get(dtype)
    if codec is None:
        codec = struct.Struct("=" + dtype.storage().typecode)
        _CODECS[dtype] = codec
    return codec


def read_scalar(buffer: np.ndarray, offset: int, codec: struct.Struct) -> Union[int, float]:
    """Read one element at absolute byte ``offset`` as a Python number."""
    return codec.unpack_from(buffer, offset)[0]


def write_scalar(
    buffer: np.ndarray, offset: int, codec: struct.Struct, value: Union[int, float]
) -> None:
    """Store ``value`` as one element at absolute byte ``offset``."""
    codec.pack_into(buffer, offset, value)
