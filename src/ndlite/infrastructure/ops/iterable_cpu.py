"""
Reductions over host sequences (lists, tuples, ranges).

Operands that are not arrays are consumed through Python's iteration
protocol in a single forward pass, without buffering:

- ``MIN`` / ``MAX`` / ``ARGMIN`` / ``ARGMAX`` keep the best value seen and its
  position; ties keep the first occurrence. ``MIN``/``MAX`` return the
  original element object, the ``ARG`` variants its index. All four reject an
  empty sequence.
- ``SUM`` / ``MEAN`` / ``STD`` use Welford's online update: a running mean
  and a running sum of squared deviations are refined per element, which
  stays numerically stable without a second pass.

Every element must be convertible with ``float()``.
"""

from __future__ import annotations

from typing import Any, Iterable, Union
import math

from ...domain._errors import EmptyOperandError
from .reduce_cpu import ReduceOp


def _extremum(seq: Iterable[Any], op: ReduceOp) -> Any:
    iterator = iter(seq)
    try:
        best_obj = next(iterator)
    except StopIteration:
        raise EmptyOperandError(op.value) from None

    best_value = float(best_obj)
    best_index = 0
    seek_max = op.seeks_max
    for index, item in enumerate(iterator, start=1):
        value = float(item)
        if (value > best_value) if seek_max else (value < best_value):
            best_obj = item
            best_value = value
            best_index = index

    return best_index if op.is_index else best_obj


def _moments(seq: Iterable[Any]) -> tuple[int, float, float, float]:
    """Return ``(count, sum, mean, m2)`` from one pass over ``seq``."""
    count = 0
    total = 0.0
    mean = 0.0
    m2 = 0.0
    for item in seq:
        value = float(item)
        count += 1
        total += value
        delta = value - mean
        mean += delta / count
        m2 += delta * (value - mean)
    return count, total, mean, m2


def reduce_iterable(
    seq: Iterable[Any], op: ReduceOp, ddof: int = 0
) -> Union[int, float, Any]:
    """
    Reduce a host sequence in one pass.

    Parameters
    ----------
    seq : Iterable
        List, tuple or range of float-convertible values.
    op : ReduceOp
        Reduction to perform.
    ddof : int, optional
        Delta degrees of freedom for ``ReduceOp.STD``.

    Returns
    -------
    Any
        ``int`` index for argmin/argmax, the original element for min/max,
        ``float`` for sum/mean/std.

    Raises
    ------
    EmptyOperandError
        If an extremum or its index is requested from an empty sequence.
    """
    if op.is_extremum:
        return _extremum(seq, op)

    count, total, mean, m2 = _moments(seq)
    if op is ReduceOp.SUM:
        return total
    if op is ReduceOp.MEAN:
        return mean
    if count <= ddof:
        return 0.0
    return math.sqrt(m2 / (count - ddof))
