"""
Numeric hazard warnings raised by the CPU ops.

Warnings are attributed to the first stack frame outside the ndlite package,
so the reported location is the user's call regardless of whether the
operation was reached through an ``Array`` method or a ``ndlite.numerical``
function.
"""

from __future__ import annotations

import inspect
import os
import warnings

from ...domain._dtype import DType

_PACKAGE_DIR = (
    os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
    + os.sep
)


def external_stacklevel() -> int:
    """
    Return the ``stacklevel`` that points at the first frame outside ndlite.

    The count starts at the function that calls this helper, which is the one
    about to call :func:`warnings.warn`.
    """
    frame = inspect.currentframe()
    level = 1
    try:
        frame = frame.f_back if frame is not None else None
        while frame is not None and os.path.abspath(
            frame.f_code.co_filename
        ).startswith(_PACKAGE_DIR):
            frame = frame.f_back
            level += 1
    finally:
        del frame
    return level


def warn_wraparound(op: str, dtype: DType, count: int, unit: str) -> None:
    """
    Warn that ``count`` integer results of ``op`` did not fit ``dtype``.

    Parameters
    ----------
    op : str
        Operation name, e.g. "sum".
    dtype : DType
        Result dtype the values were wrapped into.
    count : int
        Number of wrapped results.
    unit : str
        What was counted ("slice", "element").
    """
    warnings.warn(
        f"{op} overflowed {dtype.name.lower()} in {count} {unit}(s); "
        "results wrapped around",
        RuntimeWarning,
        stacklevel=external_stacklevel(),
    )
