"""
Concrete array type, its storage variants and constructors.
"""

from ._storage import BufferView, OwnedBuffer, numpy_dtype
from ._array import Array
from ._constructors import from_numpy, new_dense, new_linear, new_view

__all__ = [
    "Array",
    "BufferView",
    "OwnedBuffer",
    "from_numpy",
    "new_dense",
    "new_linear",
    "new_view",
    "numpy_dtype",
]
