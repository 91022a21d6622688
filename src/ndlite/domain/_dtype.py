"""
Element type tags.

This module defines :class:`DType`, the tagged enumeration of element storage
types understood by the engine. Each member's value is its one-character
typecode (the same codes used by :mod:`array` / :mod:`struct`), which keeps
the domain layer free of any numerical backend while letting infrastructure
code map a tag to a concrete backend dtype with a single lookup.

The integer tags also carry their representable range and a ``wrap`` helper
implementing C cast semantics (truncation toward zero, then modular wrap into
the type's width). Operations that keep the input dtype for their result
(``sum``, ``diff``) store through this helper.
"""

from __future__ import annotations

from enum import Enum
import math

from ._config import float_typecode
from ._errors import OutOfRangeError

_ITEMSIZE = {"?": 1, "B": 1, "b": 1, "H": 2, "h": 2, "f": 4, "d": 8}

_INT_BOUNDS = {
    "?": (0, 1),
    "B": (0, 0xFF),
    "b": (-0x80, 0x7F),
    "H": (0, 0xFFFF),
    "h": (-0x8000, 0x7FFF),
}


class DType(Enum):
    """
    Enumeration of supported element types.

    Attributes
    ----------
    BOOL : DType
        Predicate/display tag. Never used as storage; arrays requested with
        this tag are stored as ``UINT8`` and flagged as boolean.
    UINT8, INT8, UINT16, INT16 : DType
        Narrow integer storage types.
    FLOAT : DType
        Floating point storage, single or double precision depending on the
        ``NDLITE_FLOAT_IMPL`` environment setting.
    """

    BOOL = "?"
    UINT8 = "B"
    INT8 = "b"
    UINT16 = "H"
    INT16 = "h"
    FLOAT = float_typecode()

    @property
    def typecode(self) -> str:
        return self.value

    @property
    def itemsize(self) -> int:
        """Number of bytes occupied by one element."""
        return _ITEMSIZE[self.value]

    @property
    def is_integer(self) -> bool:
        return self is not DType.FLOAT

    @property
    def bounds(self) -> tuple[int, int] | tuple[float, float]:
        """
        Inclusive representable range of the type.

        Returns
        -------
        tuple
            ``(low, high)``; ``(-inf, inf)`` for ``FLOAT``.
        """
        if self is DType.FLOAT:
            return (-math.inf, math.inf)
        return _INT_BOUNDS[self.value]

    def storage(self) -> "DType":
        """Return the tag actually used to store elements of this type."""
        return DType.UINT8 if self is DType.BOOL else self

    def in_range(self, value: float) -> bool:
        """Return True if ``value`` is representable without wrapping."""
        if self is DType.FLOAT:
            return True
        if isinstance(value, float) and not math.isfinite(value):
            return False
        low, high = self.bounds
        return low <= math.trunc(value) <= high

    def wrap(self, value: float) -> int | float:
        """
        Convert ``value`` to this type with C cast semantics.

        Floats are returned unchanged for ``FLOAT``. For integer types the
        value is truncated toward zero and wrapped modulo ``2**bits``; signed
        types are then mapped back into their negative half.

        Parameters
        ----------
        value : float
            Value produced in floating working precision.

        Returns
        -------
        int or float
            The stored representation.

        Raises
        ------
        OutOfRangeError
            If ``value`` is NaN or infinite and this is an integer type.
        """
        if self is DType.FLOAT:
            return float(value)
        if self is DType.BOOL:
            return int(bool(value))
        if isinstance(value, float) and not math.isfinite(value):
            raise OutOfRangeError(
                "value", value, detail=f"cannot store a non-finite value as {self.name.lower()}"
            )
        low, high = self.bounds
        span = high - low + 1
        wrapped = (math.trunc(value) - low) % span + low
        return wrapped

    @classmethod
    def from_typecode(cls, code: str) -> "DType":
        """
        Look up a tag by typecode.

        ``'f'`` and ``'d'`` both resolve to ``FLOAT`` regardless of the
        configured storage width.
        """
        if code in ("f", "d"):
            return cls.FLOAT
        return cls(code)


INDEX_DTYPE = DType.UINT16
"""Storage type of argmin/argmax results along an axis."""
