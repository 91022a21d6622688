"""
Numerical and statistical functions.

Most functions take an ``axis`` argument selecting whether to operate on the
flattened operand (``None``) or along one axis (an integer).

Operands of the reductions may be ndlite arrays or host sequences (``list``,
``tuple``, ``range``); sequences are reduced in a single forward pass and the
``axis`` argument is ignored for them. ``diff``, ``flip`` and ``roll`` accept
arrays only.

Note that ``min``, ``max`` and ``sum`` shadow the builtins of the same name
when imported unqualified.
"""

from __future__ import annotations

from typing import Any, Optional, Union

from .domain._array import IArray, Scalar
from .domain._errors import OperandTypeError
from .infrastructure.array._array import Array
from .infrastructure.ops._arguments import check_axis, check_int
from .infrastructure.ops.diff_cpu import diff_cpu
from .infrastructure.ops.flip_cpu import flip_cpu
from .infrastructure.ops.iterable_cpu import reduce_iterable
from .infrastructure.ops.reduce_cpu import ReduceOp, reduce_array
from .infrastructure.ops.roll_cpu import roll_cpu

_SEQUENCE_TYPES = (tuple, list, range)

Result = Union[Scalar, IArray]


def _reduce(op: ReduceOp, operand: Any, axis: Any, ddof: Any = 0) -> Result:
    axis = check_axis(op.value, axis)
    ddof = check_int(op.value, "ddof", ddof)
    if isinstance(operand, _SEQUENCE_TYPES):
        return reduce_iterable(operand, op, ddof)
    if isinstance(operand, Array):
        return reduce_array(operand, op, axis, ddof)
    raise OperandTypeError(op.value, "input must be tuple, list, range, or array", operand)


def _require_array(op: str, operand: Any) -> Array:
    if not isinstance(operand, Array):
        raise OperandTypeError(op, f"{op} argument must be an array", operand)
    return operand


def argmax(operand: Any, axis: Optional[int] = None) -> Union[int, IArray]:
    """Return the index of the largest element, along ``axis`` if given."""
    return _reduce(ReduceOp.ARGMAX, operand, axis)


def argmin(operand: Any, axis: Optional[int] = None) -> Union[int, IArray]:
    """Return the index of the smallest element, along ``axis`` if given."""
    return _reduce(ReduceOp.ARGMIN, operand, axis)


def max(operand: Any, axis: Optional[int] = None) -> Result:
    """Return the largest element, along ``axis`` if given."""
    return _reduce(ReduceOp.MAX, operand, axis)


def min(operand: Any, axis: Optional[int] = None) -> Result:
    """Return the smallest element, along ``axis`` if given."""
    return _reduce(ReduceOp.MIN, operand, axis)


def sum(operand: Any, axis: Optional[int] = None) -> Result:
    """
    Return the sum of the elements.

    A number for sequences, for ``axis=None`` and for 1-D arrays; otherwise
    an array of the input dtype with ``axis`` removed.
    """
    return _reduce(ReduceOp.SUM, operand, axis)


def mean(operand: Any, axis: Optional[int] = None) -> Union[float, IArray]:
    """
    Return the arithmetic mean.

    A float for sequences, for ``axis=None`` and for 1-D arrays; otherwise a
    float array with ``axis`` removed.
    """
    return _reduce(ReduceOp.MEAN, operand, axis)


def std(operand: Any, axis: Optional[int] = None, ddof: int = 0) -> Union[float, IArray]:
    """
    Return the standard deviation, normalized by ``N - ddof``.

    Slices with ``N <= ddof`` yield ``0.0``.
    """
    return _reduce(ReduceOp.STD, operand, axis, ddof)


def diff(array: Any, n: int = 1, axis: int = -1) -> IArray:
    """
    Return the ``n``-th order forward difference along ``axis``.

    ``axis=None`` is not supported.
    """
    return diff_cpu(_require_array("diff", array), n=n, axis=axis)


def flip(array: Any, axis: Optional[int] = None) -> IArray:
    """
    Reverse the order of the elements along ``axis``, or of the flattened
    array when ``axis`` is None.
    """
    return flip_cpu(_require_array("flip", array), axis=axis)


def roll(array: Any, distance: int, axis: Optional[int] = None) -> IArray:
    """
    Shift the elements by ``distance`` positions, along ``axis`` if given.

    Returns a new array; the input is not modified.
    """
    return roll_cpu(_require_array("roll", array), distance, axis=axis)
