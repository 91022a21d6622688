"""
Rearrangement methods for Array: finite difference, flip and roll.

The methods forward to the CPU ops modules:

- ``diff`` → :mod:`ndlite.infrastructure.ops.diff_cpu` (new dense array)
- ``flip`` → :mod:`ndlite.infrastructure.ops.flip_cpu` (view)
- ``roll`` → :mod:`ndlite.infrastructure.ops.roll_cpu` (new dense array)
"""

from __future__ import annotations

from typing import Optional

from ....domain._array import IArray


class ArrayMixinTransform:
    """Finite difference, flip and roll."""

    def diff(self, n: int = 1, axis: int = -1) -> IArray:
        """
        ``n``-th order forward difference along ``axis``.

        The result has the same rank and dtype, with ``axis`` shortened by
        ``n``. ``n`` must lie in ``[0, 9]`` and not exceed the axis length.
        """
        from ...ops.diff_cpu import diff_cpu

        return diff_cpu(self, n=n, axis=axis)

    def flip(self, axis: Optional[int] = None) -> IArray:
        """
        Reverse the element order.

        With ``axis=None`` the flattened order is reversed and a 1-D result is
        returned (backed by a private copy). With an integer axis the result
        is a view that aliases this array's storage.
        """
        from ...ops.flip_cpu import flip_cpu

        return flip_cpu(self, axis=axis)

    def roll(self, distance: int, axis: Optional[int] = None) -> IArray:
        """
        Circularly shift elements by ``distance`` positions.

        Positive distances move elements towards higher indices. The result
        is always a new dense array with this array's shape; this array is
        not modified.
        """
        from ...ops.roll_cpu import roll_cpu

        return roll_cpu(self, distance, axis=axis)
