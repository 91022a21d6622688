"""
Reduction methods for Array.

This mixin declares the public reduction API (``min``, ``max``, ``argmin``,
``argmax``, ``sum``, ``mean``, ``std``). Every method forwards to the single
generic routine :func:`ndlite.infrastructure.ops.reduce_cpu.reduce_array`,
selecting the operation with a :class:`ReduceOp` tag.

Shared semantics
----------------
- ``axis=None`` reduces the flattened array and returns a Python scalar.
- ``axis=k`` removes axis ``k``. A rank-1 input yields a scalar; higher
  ranks yield an array of rank ``ndim - 1``.
- Result dtypes: input dtype for ``min``/``max``/``sum``, ``FLOAT`` for
  ``mean``/``std``, ``UINT16`` indices for ``argmin``/``argmax``.
"""

from __future__ import annotations

from typing import Optional, Union

from ....domain._array import IArray, Scalar


class ArrayMixinReduction:
    """Axis-aware reductions."""

    def min(self, axis: Optional[int] = None) -> Union[Scalar, IArray]:
        """Smallest element, first occurrence on ties."""
        from ...ops.reduce_cpu import ReduceOp, reduce_array

        return reduce_array(self, ReduceOp.MIN, axis)

    def max(self, axis: Optional[int] = None) -> Union[Scalar, IArray]:
        """Largest element, first occurrence on ties."""
        from ...ops.reduce_cpu import ReduceOp, reduce_array

        return reduce_array(self, ReduceOp.MAX, axis)

    def argmin(self, axis: Optional[int] = None) -> Union[int, IArray]:
        """
        Index of the smallest element along ``axis``.

        With ``axis=None`` the index refers to the row-major flattened order.
        """
        from ...ops.reduce_cpu import ReduceOp, reduce_array

        return reduce_array(self, ReduceOp.ARGMIN, axis)

    def argmax(self, axis: Optional[int] = None) -> Union[int, IArray]:
        """
        Index of the largest element along ``axis``.

        With ``axis=None`` the index refers to the row-major flattened order.
        """
        from ...ops.reduce_cpu import ReduceOp, reduce_array

        return reduce_array(self, ReduceOp.ARGMAX, axis)

    def sum(self, axis: Optional[int] = None) -> Union[Scalar, IArray]:
        """
        Sum of the elements along ``axis``.

        The result keeps the input dtype. Integer sums that do not fit wrap
        around and raise a ``RuntimeWarning``.
        """
        from ...ops.reduce_cpu import ReduceOp, reduce_array

        return reduce_array(self, ReduceOp.SUM, axis)

    def mean(self, axis: Optional[int] = None) -> Union[float, IArray]:
        from ...ops.reduce_cpu import ReduceOp, reduce_array

        return reduce_array(self, ReduceOp.MEAN, axis)

    def std(self, axis: Optional[int] = None, ddof: int = 0) -> Union[float, IArray]:
        """
        Standard deviation along ``axis``.

        Parameters
        ----------
        axis : int or None, optional
            Axis to reduce, or None for the flattened array.
        ddof : int, optional
            Delta degrees of freedom; the normalizer is ``N - ddof``. Slices
            with ``N <= ddof`` produce ``0.0``.
        """
        from ...ops.reduce_cpu import ReduceOp, reduce_array

        return reduce_array(self, ReduceOp.STD, axis, ddof=ddof)
