"""
Method mixins composed into the concrete ``Array`` class.

- ``ArrayMixinMemory``    : host interop, copies, layout views, fill
- ``ArrayMixinReduction`` : min / max / argmin / argmax / sum / mean / std
- ``ArrayMixinTransform`` : diff / flip / roll
"""

from ._memory import ArrayMixinMemory
from ._reduction import ArrayMixinReduction
from ._transform import ArrayMixinTransform

__all__ = [
    ArrayMixinMemory.__name__,
    ArrayMixinReduction.__name__,
    ArrayMixinTransform.__name__,
]
