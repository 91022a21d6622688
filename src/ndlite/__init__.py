"""
ndlite: a compact, fixed-rank (up to 4-D) strided array engine.

Public surface
--------------
- ``Array`` and its constructors ``new_dense``, ``new_linear``, ``new_view``
  and ``from_numpy``
- ``DType`` element tags
- reductions ``min``, ``max``, ``argmin``, ``argmax``, ``sum``, ``mean``,
  ``std`` (arrays or list/tuple/range operands)
- transforms ``diff``, ``flip``, ``roll``
- errors ``OutOfRangeError``, ``EmptyOperandError``, ``OperandTypeError``
"""

from .domain._config import configure_logging
from .domain import (
    MAX_DIMS,
    DType,
    DimensionDescriptor,
    EmptyOperandError,
    OperandTypeError,
    OutOfRangeError,
    eliminate_axis,
    resolve_axis,
)
from .infrastructure.array import (
    Array,
    BufferView,
    OwnedBuffer,
    from_numpy,
    new_dense,
    new_linear,
    new_view,
)
from .numerical import (
    argmax,
    argmin,
    diff,
    flip,
    max,
    mean,
    min,
    roll,
    std,
    sum,
)

configure_logging()

__version__ = "0.1.0"

__all__ = [
    "MAX_DIMS",
    "DType",
    "DimensionDescriptor",
    "EmptyOperandError",
    "OperandTypeError",
    "OutOfRangeError",
    "eliminate_axis",
    "resolve_axis",
    "Array",
    "BufferView",
    "OwnedBuffer",
    "from_numpy",
    "new_dense",
    "new_linear",
    "new_view",
    "argmax",
    "argmin",
    "diff",
    "flip",
    "max",
    "mean",
    "min",
    "roll",
    "std",
    "sum",
]
