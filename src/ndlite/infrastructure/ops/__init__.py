"""
CPU reference implementations of the engine's operations.

- ``traversal_cpu`` : rank-generic strided walk and element copy
- ``reduce_cpu``    : min / max / argmin / argmax / sum / mean / std
- ``iterable_cpu``  : single-pass reductions over host sequences
- ``diff_cpu``      : finite differences
- ``flip_cpu``      : order reversal as views
- ``roll_cpu``      : circular shift
"""
