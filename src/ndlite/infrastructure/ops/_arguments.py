"""
Argument validation shared by the CPU ops.
"""

from __future__ import annotations

from typing import Any, Optional

import numpy as np

from ...domain._errors import OperandTypeError


def is_integer(value: Any) -> bool:
    """True for Python/NumPy integers, excluding bools."""
    return isinstance(value, (int, np.integer)) and not isinstance(
        value, (bool, np.bool_)
    )


def check_axis(op: str, axis: Any, *, allow_none: bool = True) -> Optional[int]:
    """
    Validate the kind of an ``axis`` argument.

    Range checking is left to :func:`ndlite.domain.resolve_axis`, which knows
    the rank.

    Raises
    ------
    OperandTypeError
        If ``axis`` is neither None (when allowed) nor an integer.
    """
    if axis is None and allow_none:
        return None
    if not is_integer(axis):
        expected = "axis must be None, or an integer" if allow_none else "axis must be an integer"
        raise OperandTypeError(op, expected, axis)
    return int(axis)


def check_int(op: str, name: str, value: Any) -> int:
    """
    Validate that ``value`` is an integer and return it as ``int``.

    Raises
    ------
    OperandTypeError
        If ``value`` is not an integer.
    """
    if not is_integer(value):
        raise OperandTypeError(op, f"{name} must be an integer", value)
    return int(value)
