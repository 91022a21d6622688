"""
Order reversal (CPU reference implementation).

Reversal is expressed purely as an offset plus a stride sign change; no
element is ever moved into reversed position.

- ``axis=None``: the array is copied, in its original row-major order, into a
  fresh dense linear buffer. The result is a 1-D view of that buffer that
  starts at its last element and walks it with a negated stride.
- ``axis=k``: no data is copied. The result is a view over the source's own
  storage whose offset points at the last element along ``k`` and whose
  stride for ``k`` is negated. Writes through either array are visible
  through the other.

In both cases the source array's metadata is left untouched.
"""

from __future__ import annotations

import logging
from typing import Optional

from ...domain._array import IArray
from ._arguments import check_axis

logger = logging.getLogger(__name__)


def flip_cpu(array: IArray, axis: Optional[int] = None) -> IArray:
    """
    Reverse ``array`` along ``axis``, or its flattened order when ``axis`` is None.

    Parameters
    ----------
    array : IArray
        Source array.
    axis : int or None, optional
        Axis to reverse. Defaults to None.

    Returns
    -------
    IArray
        A view: over a private dense copy (``axis=None``, 1-D result) or
        over ``array``'s storage (``axis=k``, same shape).

    Raises
    ------
    OperandTypeError
        If ``axis`` is neither None nor an integer.
    OutOfRangeError
        If ``axis`` is out of range.
    """
    from ..array._constructors import new_view

    axis = check_axis("flip", axis)

    if axis is None:
        linear = array.flatten()
        step = linear.strides[0]
        logger.debug("flip over flattened copy of %d elements", linear.size)
        return new_view(linear, 1, (linear.size,), (-step,), (linear.size - 1) * step)

    ax = array.dims.resolve_axis(axis)
    strides = list(array.strides)
    offset = (array.shape[ax] - 1) * strides[ax]
    strides[ax] = -strides[ax]
    logger.debug("flip axis=%d as view, offset shift %d", ax, offset)
    return new_view(array, array.ndim, array.shape, strides, offset)
